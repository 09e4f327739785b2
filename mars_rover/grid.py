from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Set, Tuple
import json


Position = Tuple[int, int]

# Full unsigned 8-bit range on both axes.
DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 256


class Grid:
    """Toroidal grid with point obstacles.

    Coordinates are integer cells with origin at bottom-left:
    - x increases to the right (east)
    - y increases upward (north)

    Moving past an edge re-enters from the opposite edge.

    Parameters
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    obstacles : iterable of (x, y)
        Obstacle cells. Insertion order is kept for serialization.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        obstacles: Optional[Iterable[Position]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.obstacles: List[Position] = []
        self._occupied: Set[Position] = set()
        for obstacle in obstacles or ():
            self.add_obstacle(obstacle)

    # ------------------------------------------------------------------
    # Map loading
    # ------------------------------------------------------------------
    @classmethod
    def from_map_dict(cls, data: Dict[str, Any]) -> "Grid":
        """Create a grid from a dict describing size and obstacles.

        Obstacles may be given as ``{"x": 1, "y": 2}`` objects or ``[1, 2]`` pairs.
        """
        obstacles = [parse_position(o) for o in data.get("obstacles", [])]
        return cls(
            width=int(data.get("width", DEFAULT_WIDTH)),
            height=int(data.get("height", DEFAULT_HEIGHT)),
            obstacles=obstacles,
        )

    @classmethod
    def from_map_file(cls, path: str) -> "Grid":
        """Create a grid from a JSON map file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_map_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize grid description to a Python dict."""
        return {
            "width": self.width,
            "height": self.height,
            "obstacles": [{"x": x, "y": y} for x, y in self.obstacles],
        }

    # ------------------------------------------------------------------
    # Obstacles
    # ------------------------------------------------------------------
    def add_obstacle(self, position: Position) -> None:
        x, y = position
        if not self.contains((x, y)):
            raise ValueError(f"Obstacle {x},{y} lies outside the {self.width}x{self.height} grid")
        cell = (int(x), int(y))
        self.obstacles.append(cell)
        self._occupied.add(cell)

    def obstacle_at(self, position: Position) -> Optional[Position]:
        """Return the obstacle occupying ``position``, if any."""
        cell = (position[0], position[1])
        return cell if cell in self._occupied else None

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def contains(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, x: int, y: int) -> Position:
        """Bring (x, y) back onto the torus."""
        return x % self.width, y % self.height


def parse_position(item: Any) -> Position:
    if isinstance(item, dict):
        return int(item["x"]), int(item["y"])
    x, y = item
    return int(x), int(y)
