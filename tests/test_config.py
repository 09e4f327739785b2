from __future__ import annotations

from pathlib import Path

import pytest

from mars_rover.config import MissionConfig, resolve_map_path
from mars_rover.errors import CollisionError
from mars_rover.rover import Direction, Rover
from mars_rover.simulator import simulate

CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "mission.yaml"


def test_default_mission_stops_before_obstacle() -> None:
    mission = MissionConfig.from_file(str(CONFIG_PATH))
    assert mission.rover == Rover((0, 0), Direction.EAST)
    assert mission.commands == "lfrfrbl"
    assert mission.obstacles == [(1, 2)]

    result = simulate(mission.rover, mission.commands, mission.obstacles, grid=mission.grid)
    assert isinstance(result.error, CollisionError)
    assert result.rover == Rover((1, 1), Direction.SOUTH)


def test_bundled_map_is_loaded() -> None:
    mission = MissionConfig.from_dict(
        {"grid": {"map": "crater_field"}, "rover": {"x": 0, "y": 0, "direction": "N"}, "commands": "rf"}
    )
    assert (4, 4) in mission.grid.obstacles
    assert Path(resolve_map_path("crater_field")).is_file()


def test_map_path_relative_to_config(tmp_path) -> None:
    (tmp_path / "tiny.json").write_text('{"width": 3, "height": 3, "obstacles": [[1, 1]]}', encoding="utf-8")
    (tmp_path / "mission.yaml").write_text(
        "grid:\n  map: tiny.json\nrover: {x: 0, y: 1, direction: E}\ncommands: f\n",
        encoding="utf-8",
    )

    mission = MissionConfig.from_file(str(tmp_path / "mission.yaml"))
    result = simulate(mission.rover, mission.commands, mission.obstacles, grid=mission.grid)

    assert mission.grid.width == 3
    assert isinstance(result.error, CollisionError)
    assert mission.telemetry_path is None


def test_missing_commands_means_empty_run() -> None:
    mission = MissionConfig.from_dict({"rover": {"x": 2, "y": 2}})
    assert mission.commands == ""
    assert mission.rover.direction == Direction.NORTH
    assert (mission.grid.width, mission.grid.height) == (256, 256)


def test_missing_rover_section() -> None:
    with pytest.raises(KeyError):
        MissionConfig.from_dict({"commands": "f"})


def test_map_and_explicit_size_conflict() -> None:
    with pytest.raises(ValueError):
        MissionConfig.from_dict(
            {"grid": {"map": "open_plain", "width": 64}, "rover": {"x": 0, "y": 0}}
        )


def test_explicit_size_without_map() -> None:
    mission = MissionConfig.from_dict({"grid": {"width": 16, "height": 8}, "rover": {"x": 15, "y": 7}})
    assert (mission.grid.width, mission.grid.height) == (16, 8)
    assert mission.grid.obstacles == []
