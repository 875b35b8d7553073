"""
Visualization utilities for grown line forests.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.animation import FuncAnimation
from typing import List, Optional
from pathlib import Path

from config.render_config import ForestRenderConfig

from .model import GrowthModel
from .simulation import Simulation


def collect_segments(model: GrowthModel) -> List[list]:
    segments = []

    def add(line, _config):
        segments.append([line.origin.to_tuple(), line.tip.to_tuple()])

    model.for_each_line_until_true(add)
    return segments


def _line_colors(model: GrowthModel, render_config: ForestRenderConfig):
    if not render_config.color_by_generation:
        return render_config.line_color
    generations = np.array([line.generation for line in model.lines()], dtype=float)
    top = generations.max() if len(generations) else 0.0
    cmap = plt.get_cmap(render_config.generation_cmap)
    return cmap(generations / top if top > 0 else generations)


def _setup_axes(ax, model: GrowthModel, render_config: ForestRenderConfig):
    ax.set_facecolor(render_config.background_color)
    ax.set_xlim(0, model.width)
    ax.set_ylim(model.height, 0)
    ax.set_aspect('equal')
    ax.axis('off')


def visualize_forest(
    model: GrowthModel,
    render_config: Optional[ForestRenderConfig] = None,
    save_path: Optional[str] = None,
    show: bool = True
):
    """Visualize the current state of the forest."""
    render_config = render_config or ForestRenderConfig()
    fig, ax = plt.subplots(figsize=render_config.figsize)
    fig.patch.set_facecolor(render_config.background_color)
    _setup_axes(ax, model, render_config)
    
    segments = collect_segments(model)
    if segments:
        lc = LineCollection(
            segments,
            colors=_line_colors(model, render_config),
            linewidths=render_config.line_width
        )
        ax.add_collection(lc)
    
    if render_config.show_active_tips:
        tips = np.array([line.tip.to_tuple() for line in model.lines() if line.active])
        if len(tips) > 0:
            ax.scatter(tips[:, 0], tips[:, 1], c=render_config.tip_color, s=render_config.tip_size)
    
    plt.tight_layout()
    
    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=render_config.dpi, bbox_inches='tight',
                    facecolor=fig.get_facecolor(), edgecolor='none')
        print(f"Saved visualization to {save_path}")
    
    if show:
        plt.show()
    return fig, ax


def animate_growth(
    simulation: Simulation,
    render_config: Optional[ForestRenderConfig] = None,
    interval: int = 50,
    max_ticks: Optional[int] = None,
    save_path: Optional[str] = None,
    frame_skip: int = 1,
    show: bool = True
) -> FuncAnimation:
    """
    Create an animation of the growth process.
    
    frame_skip: Only record every Nth tick. Higher = faster, fewer frames.
    """
    render_config = render_config or ForestRenderConfig()
    model = simulation.model or simulation.init()
    
    fig, ax = plt.subplots(figsize=render_config.figsize)
    fig.patch.set_facecolor(render_config.background_color)
    _setup_axes(ax, model, render_config)
    
    line_collection = LineCollection(
        [], colors=render_config.line_color, linewidths=render_config.line_width
    )
    ax.add_collection(line_collection)
    title = ax.set_title('Tick: 0')
    
    frames_data = []
    
    def collect_frame(current, tick):
        frames_data.append({
            'segments': collect_segments(current),
            'tick': tick
        })
    
    def on_tick(current, tick):
        if tick % frame_skip == 0:
            collect_frame(current, tick)
    
    collect_frame(model, model.tick)
    simulation.run(max_ticks=max_ticks, callback=on_tick, verbose=False)
    collect_frame(model, model.tick)
    
    print(f"Collected {len(frames_data)} frames for animation")
    
    def init():
        line_collection.set_segments([])
        return [line_collection]
    
    def update(frame_idx):
        data = frames_data[frame_idx]
        line_collection.set_segments(data['segments'])
        title.set_text(f"Tick: {data['tick']}")
        return [line_collection]
    
    anim = FuncAnimation(
        fig, update,
        frames=len(frames_data),
        init_func=init,
        interval=interval,
        blit=False,
        repeat=True
    )
    
    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        print(f"Saving animation ({len(frames_data)} frames)...")
        anim.save(save_path, writer='pillow', fps=20)
        print(f"Saved animation to {save_path}")
    
    if show:
        plt.show()
    return anim


def plot_growth_statistics(model: GrowthModel, save_path: Optional[str] = None, show: bool = True):
    """Plot statistics about the grown forest."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    
    line_lengths = [line.steps for line in model.lines()]
    axes[0].hist(line_lengths, bins=30, color='dimgray', edgecolor='black')
    axes[0].set_xlabel('Line Length (steps)')
    axes[0].set_ylabel('Count')
    axes[0].set_title('Line Length Distribution')
    
    generations = [line.generation for line in model.lines()]
    max_generation = max(generations) if generations else 0
    generation_counts = np.bincount(generations, minlength=max_generation + 1) if generations \
        else np.zeros(1, dtype=int)
    axes[1].bar(range(max_generation + 1), generation_counts, color='forestgreen', edgecolor='black')
    axes[1].set_xlabel('Generation')
    axes[1].set_ylabel('Line Count')
    axes[1].set_title('Lines per Generation')
    
    plt.tight_layout()
    
    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")
    
    if show:
        plt.show()
    return fig, axes
