from __future__ import annotations

from typing import TYPE_CHECKING

from .grid import Position

if TYPE_CHECKING:
    from .rover import Rover


class RoverError(Exception):
    """Base class for errors that end a simulation run."""


class ParseError(RoverError):
    """A command string contains a character outside ``f``, ``b``, ``l``, ``r``."""

    def __init__(self, character: str, index: int) -> None:
        super().__init__(f"{character} cannot be parsed")
        self.character = character
        self.index = index


class CollisionError(RoverError):
    """A translation would put the rover on an obstacle.

    ``rover`` is the state before the attempted move.
    """

    def __init__(self, obstacle: Position, rover: "Rover") -> None:
        x, y = obstacle
        super().__init__(f"Collision with obstacle in {x},{y}")
        self.obstacle = obstacle
        self.rover = rover
