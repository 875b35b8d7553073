"""
Run configuration for growing a forest.

All output paths are derived from the run name and the random seed.
"""

from dataclasses import dataclass, asdict
from typing import Optional
from pathlib import Path
import json

from growth.simulation import default_seed


@dataclass
class PipelineConfig:
    """
    Settings for one growth run.
    """
    
    # ==================== RUN ====================
    run_name: str = 'forest'
    random_seed: Optional[int] = None  # None = derived from the clock
    output_base: str = 'outputs'
    
    # ==================== CANVAS ====================
    canvas_width: int = 800
    canvas_height: int = 800
    
    # ==================== GROWTH ====================
    # When true, growth settings are drawn from the seed and the values below are ignored
    randomize_growth: bool = True
    seed_count: int = 5
    p_bifurcation: float = 0.03
    expiry_threshold: float = 0.0005
    max_ticks: Optional[int] = None
    
    # ==================== OUTPUT ====================
    animate: bool = False
    frame_skip: int = 5
    show: bool = False
    profile: bool = False
    
    def __post_init__(self):
        if self.random_seed is None:
            self.random_seed = default_seed()
    
    # ==================== DERIVED PATHS ====================
    @property
    def output_dir(self) -> Path:
        return Path(self.output_base) / self.run_name
    
    @property
    def file_stem(self) -> str:
        return f'{self.run_name}_{self.random_seed}'
    
    @property
    def forest_data_path(self) -> Path:
        return self.output_dir / f'{self.file_stem}_forest.json'
    
    @property
    def forest_image_path(self) -> Path:
        return self.output_dir / f'{self.file_stem}_forest.png'
    
    @property
    def stats_image_path(self) -> Path:
        return self.output_dir / f'{self.file_stem}_stats.png'
    
    @property
    def animation_path(self) -> Path:
        return self.output_dir / f'{self.file_stem}_growth.gif'
    
    def create_output_dirs(self):
        self.output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/pipeline.json') -> PipelineConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return PipelineConfig()
    
    with open(config_path, 'r') as f:
        data = json.load(f)
    
    return PipelineConfig(**data)


def save_config(config: PipelineConfig, path: str = 'config/pipeline.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    
    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)
    
    print(f"Saved config to {config_path}")
