"""
Top-level package for the toroidal-grid rover simulator.

Components:
- grid: grid size, point obstacles, wrap-around, JSON map loading
- rover: cardinal directions and the immutable rover state
- commands: command characters and the command-string parser
- errors: ParseError and CollisionError
- simulator: single-command execution and full simulation runs
- config: YAML mission files
"""

from .grid import Grid, Position
from .rover import Direction, Rover
from .commands import Command, parse_commands
from .errors import RoverError, ParseError, CollisionError
from .simulator import SimulationResult, execute_command, simulate
from .config import MissionConfig

__all__ = [
    "Grid",
    "Position",
    "Direction",
    "Rover",
    "Command",
    "parse_commands",
    "RoverError",
    "ParseError",
    "CollisionError",
    "SimulationResult",
    "execute_command",
    "simulate",
    "MissionConfig",
]
