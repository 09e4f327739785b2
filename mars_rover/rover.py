from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Tuple

from .grid import Grid, Position


class Direction(Enum):
    """Cardinal heading of the rover."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def left(self) -> "Direction":
        """Heading after a 90 degree turn counter-clockwise."""
        return _LEFT_OF[self]

    def right(self) -> "Direction":
        """Heading after a 90 degree turn clockwise."""
        return _RIGHT_OF[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit displacement (dx, dy) when moving forward."""
        return _DELTA[self]


_LEFT_OF = {
    Direction.EAST: Direction.NORTH,
    Direction.NORTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
}

_RIGHT_OF = {
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
    Direction.NORTH: Direction.EAST,
}

_DELTA = {
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
}


@dataclass(frozen=True)
class Rover:
    """Immutable rover state: grid cell and heading.

    Attributes
    ----------
    position : tuple[int, int]
        Cell (x, y) on the grid.
    direction : Direction
        Heading the rover currently faces.
    """

    position: Position
    direction: Direction

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def with_position(self, position: Position) -> "Rover":
        return replace(self, position=position)

    def with_direction(self, direction: Direction) -> "Rover":
        return replace(self, direction=direction)

    def moved(self, step: int, grid: Grid) -> "Rover":
        """Return the rover displaced ``step`` cells along its heading.

        ``step`` is +1 for forward and -1 for backward; the result wraps
        around the grid edges.
        """
        dx, dy = self.direction.delta
        return self.with_position(grid.wrap(self.x + step * dx, self.y + step * dy))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize rover state to a dict for logging/telemetry."""
        return {"x": self.x, "y": self.y, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rover":
        direction = data.get("direction", "N")
        try:
            heading = Direction(direction)
        except ValueError:
            heading = Direction[str(direction).upper()]
        return cls(position=(int(data["x"]), int(data["y"])), direction=heading)
