from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import os

import yaml

from .grid import DEFAULT_HEIGHT, DEFAULT_WIDTH, Grid, Position, parse_position
from .rover import Rover


MAPS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "maps")


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def resolve_map_path(name: str, base_dir: str = ".") -> str:
    """Map names resolve to bundled maps; anything ending in .json is a path."""
    if name.endswith(".json"):
        return name if os.path.isabs(name) else os.path.join(base_dir, name)
    return os.path.join(MAPS_DIR, f"{name}.json")


@dataclass
class MissionConfig:
    """One simulation run as described by a mission YAML file."""

    rover: Rover
    commands: str
    grid: Grid
    obstacles: List[Position] = field(default_factory=list)
    telemetry_path: Optional[str] = None

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any], base_dir: str = ".") -> "MissionConfig":
        grid_cfg = cfg.get("grid") or {}
        map_name = grid_cfg.get("map")
        if map_name:
            if "width" in grid_cfg or "height" in grid_cfg:
                raise ValueError("grid.map sets the grid size; drop grid.width/grid.height")
            grid = Grid.from_map_file(resolve_map_path(str(map_name), base_dir))
        else:
            grid = Grid(
                width=int(grid_cfg.get("width", DEFAULT_WIDTH)),
                height=int(grid_cfg.get("height", DEFAULT_HEIGHT)),
            )

        if "rover" not in cfg:
            raise KeyError("Mission config needs a 'rover' section")
        rover = Rover.from_dict(cfg["rover"])

        commands = cfg.get("commands")
        obstacles = [parse_position(o) for o in cfg.get("obstacles") or []]
        logging_cfg = cfg.get("logging") or {}
        return cls(
            rover=rover,
            commands="" if commands is None else str(commands),
            grid=grid,
            obstacles=obstacles,
            telemetry_path=logging_cfg.get("telemetry_path"),
        )

    @classmethod
    def from_file(cls, path: str) -> "MissionConfig":
        return cls.from_dict(load_yaml(path), base_dir=os.path.dirname(os.path.abspath(path)))
