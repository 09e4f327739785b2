from __future__ import annotations

from enum import Enum
from typing import List

from .errors import ParseError


class Command(Enum):
    """Single rover instruction, keyed by its command character."""

    FORWARD = "f"
    BACKWARD = "b"
    LEFT = "l"
    RIGHT = "r"


def parse_commands(text: str) -> List[Command]:
    """Parse a command string into commands, in input order.

    Stops at the first unknown character (whitespace included) and raises
    ParseError for it; characters after it are never looked at.
    """
    commands: List[Command] = []
    for index, char in enumerate(text):
        try:
            commands.append(Command(char))
        except ValueError:
            raise ParseError(char, index) from None
    return commands
