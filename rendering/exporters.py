"""
Data exporters to convert a grown forest into a renderer-friendly format.
Keeps rendering decoupled from the growth simulation.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional


def export_forest_data(model, output_path: str, seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Export a forest to JSON format for rendering.
    
    Format:
    {
        "source_width": float,
        "source_height": float,
        "seed": int | null,
        "tick": int,
        "config": {"seed_count": int, "p_bifurcation": float, "expiry_threshold": float},
        "seeds": [
            {
                "angle": float,
                "lines": [
                    {
                        "origin": [x, y],
                        "tip": [x, y],
                        "angle": float,
                        "generation": int,
                        "parent": int | null,  # index within the same seed
                        "steps": int,
                        "tag": float,
                        "state": "growing" | "expired" | "collided"
                    }
                ]
            }
        ]
    }
    """
    seeds_data = []
    for forest_seed in model.seeds:
        seeds_data.append({
            "angle": forest_seed.angle,
            "lines": [
                {
                    "origin": [line.origin.x, line.origin.y],
                    "tip": [line.tip.x, line.tip.y],
                    "angle": line.angle,
                    "generation": line.generation,
                    "parent": line.parent,
                    "steps": line.steps,
                    "tag": line.tag,
                    "state": line.state
                }
                for line in forest_seed.lines
            ]
        })
    
    data = {
        "source_width": model.width,
        "source_height": model.height,
        "seed": seed,
        "tick": model.tick,
        "config": asdict(model.config),
        "seeds": seeds_data
    }
    
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)
    
    return data


def load_forest_data(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)


def forest_segments(data: Dict[str, Any]) -> list:
    """Flatten exported data into ((x1, y1), (x2, y2)) segments for drawing."""
    return [
        (tuple(line["origin"]), tuple(line["tip"]))
        for seed in data["seeds"]
        for line in seed["lines"]
    ]
