"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Lattice model. Face tables, cubelet record and the helpers that map
lattice indices to centered positions.

"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

Position = Tuple[float, float, float]

FACES: List[str] = ["U", "D", "L", "R", "F", "B"]

# Parallel face tables: axis index (0=x, 1=y, 2=z) and sign of the outward normal.
FACE_AXIS: Dict[str, int] = {"U": 1, "D": 1, "L": 0, "R": 0, "F": 2, "B": 2}
FACE_SIGN: Dict[str, int] = {"U": +1, "D": -1, "L": -1, "R": +1, "F": +1, "B": -1}

FACE_DIRECTION: Dict[str, Tuple[int, int, int]] = {
    f: tuple(FACE_SIGN[f] if a == FACE_AXIS[f] else 0 for a in range(3))
    for f in FACES
}

CUBE_COLORS: Dict[str, str] = {
    "U": "#ffffff",  # white
    "D": "#ffed00",  # yellow
    "L": "#ff5722",  # orange
    "R": "#f44336",  # red
    "F": "#4caf50",  # green
    "B": "#2196f3",  # blue
}

CORNER, EDGE, CENTER, INNER = "corner", "edge", "center", "inner"
# number of coordinates at a boundary extreme -> kind
_KIND_BY_EXTREMES = {3: CORNER, 2: EDGE, 1: CENTER, 0: INNER}


def half_extent(size: int) -> float:
    """Largest coordinate value on a lattice of `size` cubelets per edge."""
    return (size - 1) / 2


def clean(value: float) -> float:
    # turns -0.0 into 0.0 so positions print and compare cleanly
    return value + 0.0


def index_to_coord(idx: int, size: int) -> float:
    return clean(idx - half_extent(size))


def coord_to_index(coord: float, size: int) -> int:
    return int(round(coord + half_extent(size)))


def is_core(i: int, j: int, k: int, size: int) -> bool:
    """True for the hidden center point of an odd cube (never represented)."""
    if size % 2 == 0:
        return False
    mid = size // 2
    return i == mid and j == mid and k == mid


def classify(position: Position, size: int) -> str:
    """
    Derive the cubelet kind from how many coordinates sit at a boundary extreme.

    Args:
        position: Centered (x, y, z) position.
        size: Cube size n.

    Returns:
        One of "corner", "edge", "center", "inner".
    """
    half = half_extent(size)
    extremes = sum(1 for c in position if abs(c) == half)
    return _KIND_BY_EXTREMES[extremes]


def solved_colors(position: Position, size: int) -> Dict[str, Optional[str]]:
    """Colors of a cubelet sitting at `position` on a solved cube."""
    half = half_extent(size)
    return {
        f: CUBE_COLORS[f] if position[FACE_AXIS[f]] == FACE_SIGN[f] * half else None
        for f in FACES
    }


@dataclass
class Cubelet:
    """
    A single sub-cube of the puzzle.

    The cubelet is tracked as a *piece*: `id` and `kind` never change, while
    `position` and `colors` are re-written by every move of a layer it sits in.

    Attributes:
        id: Stable identity, the "i-j-k" grid index of its solved home.
        position: Current centered (x, y, z) position.
        colors: Face label -> color, or None where the cubelet has no sticker.
        kind: "corner", "edge", "center" or "inner".
    """
    id: str
    position: Position
    colors: Dict[str, Optional[str]] = field(default_factory=dict)
    kind: str = INNER

    def move_to(self, position: Position, colors: Dict[str, Optional[str]]) -> None:
        """Re-seat the cubelet and replace its label -> color mapping in place."""
        self.position = position
        self.colors = colors

    def stickers(self) -> List[str]:
        """Non-null colors, in FACES order of the labels currently carrying them."""
        return [self.colors[f] for f in FACES if self.colors.get(f) is not None]

    def copy(self) -> "Cubelet":
        # position is an immutable tuple, colors needs its own dict
        return replace(self, position=tuple(self.position), colors=dict(self.colors))

    def __repr__(self) -> str:
        shown = "".join(f for f in FACES if self.colors.get(f) is not None)
        return f"{self.kind.capitalize()}: id={self.id} pos={self.position} faces={shown or '-'}"
