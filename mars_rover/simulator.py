"""
Command execution and the full simulation run.

``execute_command`` applies one command to a rover; ``simulate`` parses a
command string and folds it over the rover, stopping at the first error.
Neither raises for domain failures at the top level: ``simulate`` hands back
a SimulationResult carrying the best-known rover and the error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .commands import Command, parse_commands
from .errors import CollisionError, RoverError
from .grid import Grid, Position
from .rover import Rover
from telemetry.logger import TelemetryLogger


@dataclass
class SimulationResult:
    """Outcome of one simulation run.

    Attributes
    ----------
    rover : Rover
        Final state on success, last safe state on failure.
    error : RoverError or None
        ParseError or CollisionError that ended the run, None on success.
    trail : list[Rover]
        Every state the rover successfully reached, initial state first.
    """

    rover: Rover
    error: Optional[RoverError] = None
    trail: List[Rover] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "rover": self.rover.to_dict(),
            "error": None if self.error is None else str(self.error),
            "error_kind": None if self.error is None else type(self.error).__name__,
            "steps": len(self.trail) - 1,
        }


def _build_grid(obstacles: Iterable[Position], grid: Optional[Grid]) -> Grid:
    if grid is None:
        return Grid(obstacles=obstacles)
    return Grid(grid.width, grid.height, obstacles=list(grid.obstacles) + list(obstacles))


def _check_start(rover: Rover, grid: Grid) -> None:
    """Reject a starting rover that is off the grid or sitting on an obstacle."""
    if not grid.contains(rover.position):
        raise ValueError(
            f"Rover at {rover.x},{rover.y} lies outside the {grid.width}x{grid.height} grid"
        )
    if grid.obstacle_at(rover.position) is not None:
        raise ValueError(f"Rover at {rover.x},{rover.y} starts on an obstacle")


def _apply(rover: Rover, command: Command, grid: Grid) -> Rover:
    if command is Command.FORWARD:
        candidate = rover.moved(1, grid)
    elif command is Command.BACKWARD:
        candidate = rover.moved(-1, grid)
    elif command is Command.LEFT:
        return rover.with_direction(rover.direction.left())
    elif command is Command.RIGHT:
        return rover.with_direction(rover.direction.right())
    else:
        raise ValueError(f"Unknown command: {command!r}")

    obstacle = grid.obstacle_at(candidate.position)
    if obstacle is not None:
        raise CollisionError(obstacle, rover)
    return candidate


def execute_command(
    rover: Rover,
    command: Command,
    obstacles: Iterable[Position],
    grid: Optional[Grid] = None,
) -> Rover:
    """Return the rover state after a single command.

    Raises CollisionError (carrying the unchanged ``rover``) when a forward or
    backward move would land on an obstacle, and ValueError when ``rover``
    is off the grid or already on an obstacle.
    """
    board = _build_grid(obstacles, grid)
    _check_start(rover, board)
    return _apply(rover, command, board)


def simulate(
    rover: Rover,
    commands: str,
    obstacles: Iterable[Position] = (),
    grid: Optional[Grid] = None,
    telemetry: Optional[TelemetryLogger] = None,
) -> SimulationResult:
    """Run a full command string from ``rover``.

    A parse error returns the initial rover before any command runs. A
    collision returns the state just before the colliding command; later
    commands are never evaluated.
    """
    board = _build_grid(obstacles, grid)
    _check_start(rover, board)

    trail = [rover]
    try:
        parsed = parse_commands(commands)
    except RoverError as err:
        return _finish(telemetry, SimulationResult(rover=rover, error=err, trail=trail))

    current = rover
    for step, command in enumerate(parsed):
        try:
            current = _apply(current, command, board)
        except CollisionError as err:
            if telemetry is not None:
                telemetry.log_step(step, command.value, current.to_dict(), collided=True)
            return _finish(telemetry, SimulationResult(rover=current, error=err, trail=trail))
        trail.append(current)
        if telemetry is not None:
            telemetry.log_step(step, command.value, current.to_dict(), collided=False)

    return _finish(telemetry, SimulationResult(rover=current, trail=trail))


def _finish(telemetry: Optional[TelemetryLogger], result: SimulationResult) -> SimulationResult:
    if telemetry is not None:
        telemetry.log_result(result.to_dict())
    return result
