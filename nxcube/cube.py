"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: N×N×N cube-state engine. Face selection, position rotation and color
permutation are driven by the face tables (axis, sign, cycle) so the three
transforms always agree with each other.

"""
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Union
import logging
import random

import numpy as np
import pandas as pd

from nxcube.config import EngineConfig, validate_size
from nxcube.cubies import (
    CUBE_COLORS,
    FACES,
    FACE_AXIS,
    FACE_SIGN,
    Cubelet,
    Position,
    classify,
    clean,
    coord_to_index,
    half_extent,
    index_to_coord,
    is_core,
    solved_colors,
)
from nxcube.moves import MOVES, Move, parse_move

logger = logging.getLogger(__name__)

# Clockwise travel of a sticker: the color on label cycle[i] moves to cycle[i + 1].
# Each row matches rotate_position applied to the label's outward direction.
COLOR_CYCLES: Dict[str, List[str]] = {
    "U": ["F", "L", "B", "R"],
    "D": ["F", "R", "B", "L"],
    "F": ["U", "R", "D", "L"],
    "B": ["U", "L", "D", "R"],
    "R": ["U", "B", "D", "F"],
    "L": ["U", "F", "D", "B"],
}

# axis -> the two remaining axes in cyclic order (x: y,z / y: z,x / z: x,y)
_CYCLIC_AXES = {0: (1, 2), 1: (2, 0), 2: (0, 1)}

# Facelet export: face order plus, per face, (row axis, row descending, col axis, col descending)
FACELET_ORDER: List[str] = ["U", "R", "F", "D", "L", "B"]
_FACELET_GRID = {
    "U": (2, False, 0, False),
    "R": (1, True, 2, True),
    "F": (1, True, 0, False),
    "D": (2, True, 0, False),
    "L": (1, True, 2, False),
    "B": (1, True, 0, True),
}
_COLOR_HOME = {color: FACELET_ORDER.index(face) for face, color in CUBE_COLORS.items()}

HISTORY_COLUMNS = ["step", "move", "face", "modifier", "phase"]


def invert_cycle(cycle: List[str]) -> List[str]:
    """Reverse a travel cycle, i.e. the counter-clockwise version of it."""
    return list(reversed(cycle))


def face_positions(face: str, size: int) -> FrozenSet[Position]:
    """
    Positions of the outer layer turned by `face`.

    Args:
        face: Face label.
        size: Cube size n.

    Returns:
        The n² positions whose coordinate on the face's axis equals the face's
        extreme value.
    """
    axis = FACE_AXIS[face]
    fixed = clean(FACE_SIGN[face] * half_extent(size))
    coords = [index_to_coord(i, size) for i in range(size)]
    layer = set()
    for a in coords:
        for b in coords:
            p = [a, b]
            p.insert(axis, fixed)
            layer.add(tuple(p))
    return frozenset(layer)


def rotate_position(position: Position, face: str, direction: int = 1) -> Position:
    """
    Quarter turn of a position about the axis of `face`, through the cube center.

    `direction` is +1 for clockwise and -1 for counter-clockwise, seen from
    outside the face. With k = sign(face) * direction and (i, j) the remaining
    axes in cyclic order: p_i' = k * p_j, p_j' = -k * p_i.
    """
    k = FACE_SIGN[face] * direction
    i, j = _CYCLIC_AXES[FACE_AXIS[face]]
    p = list(position)
    p[i], p[j] = k * position[j], -k * position[i]
    return tuple(clean(c) for c in p)


def rotate_colors(colors: Dict[str, Optional[str]], face: str, direction: int = 1) -> Dict[str, Optional[str]]:
    """
    Permute a cubelet's label -> color mapping for a quarter turn of `face`.

    Labels on the turning axis keep their colors; the other four follow
    COLOR_CYCLES (inverted for direction -1). Returns a new dict.
    """
    cycle = COLOR_CYCLES[face] if direction > 0 else invert_cycle(COLOR_CYCLES[face])
    out = dict(colors)
    for src, dst in zip(cycle, cycle[1:] + cycle[:1]):
        out[dst] = colors[src]
    return out


def build_solved_cubelets(size: int) -> List[Cubelet]:
    """
    Build every cubelet of a solved cube of the given size.

    The odd-size core is skipped. A cubelet gets the color of face X iff it sits
    on X's extreme; its kind follows from how many extremes it touches.
    """
    cubelets = []
    for i in range(size):
        for j in range(size):
            for k in range(size):
                if is_core(i, j, k, size):
                    continue
                pos = (index_to_coord(i, size), index_to_coord(j, size), index_to_coord(k, size))
                cubelets.append(
                    Cubelet(
                        id=f"{i}-{j}-{k}",
                        position=pos,
                        colors=solved_colors(pos, size),
                        kind=classify(pos, size),
                    )
                )
    return cubelets


def track_history(method: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for CubeEngine._turn: logs every applied move into `self._history`,
    unless history is disabled. Phase is taken from `self._phase` ("scramble"/"solve").
    """
    @wraps(method)
    def wrapper(self, move: Move) -> Any:
        result = method(self, move)

        if self._record_history and self._history_enabled:
            step = int(self._history.shape[0])
            self._history.loc[step] = [step, str(move), move.face, move.modifier.value, self._phase]
        return result
    return wrapper


class CubeEngine:
    """
    Logical state of an N×N×N cube as a flat list of `Cubelet` records.

    Design principles
    -----------------
    • The cubelets are the only mutable state. Facelet arrays, nets and
      snapshots are derived from them on demand.

    • A face turn touches only the n² cubelets of its outer layer: each one is
      re-seated with `rotate_position` and re-colored with `rotate_colors`.

    • Nothing handed out to callers aliases engine state. `get_cubelets`
      returns fresh copies, `get_history` a copy of the log.

    Coordinates are centered on the cube: +x = R, +y = U, +z = F.

    Example
    -------
        e = CubeEngine(3)
        e.apply_move("R")
        e.apply_move("R'")
        assert e.is_solved()
    """

    def __init__(self, size: int = 3, rng: Optional[random.Random] = None, record_history: bool = True):
        self.size = validate_size(size)
        self._rng = rng if rng is not None else random.Random()
        self._record_history = record_history
        self._history_enabled = True
        self._phase = "solve"
        self._cubelets: List[Cubelet] = []
        self.reset()

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> "CubeEngine":
        return cls(size=cfg.size, rng=cfg.make_rng(), record_history=cfg.record_history)

    # ---------- state ----------
    def reset(self) -> None:
        """Restore the solved state for the current size and clear the history."""
        self._cubelets = build_solved_cubelets(self.size)
        self.clear_history()
        logger.debug("reset %dx%dx%d cube (%d cubelets)", self.size, self.size, self.size, len(self._cubelets))

    def get_cubelets(self) -> List[Cubelet]:
        """Independent snapshot of every cubelet; mutating it never touches the engine."""
        return [c.copy() for c in self._cubelets]

    def get_size(self) -> int:
        return self.size

    # ---------- moves ----------
    def apply_move(self, move: Union[Move, str]) -> None:
        """
        Apply one face turn in place.

        Args:
            move: A Move, or a token such as "R", "U'" or "F2". Tokens are parsed
                first, so an invalid one raises InvalidMoveError before any
                cubelet is touched.
        """
        if not isinstance(move, Move):
            move = parse_move(move)
        self._turn(move)

    @track_history
    def _turn(self, move: Move) -> None:
        layer = face_positions(move.face, self.size)
        turning = [c for c in self._cubelets if c.position in layer]
        for _ in range(move.quarter_turns):
            for c in turning:
                c.move_to(
                    rotate_position(c.position, move.face, move.direction),
                    rotate_colors(c.colors, move.face, move.direction),
                )
        logger.debug("applied %s to %d cubelets", move, len(turning))

    def scramble(self, count: int = 20, rng: Optional[random.Random] = None) -> str:
        """
        Apply `count` uniformly random moves and return them as a token string.

        Args:
            count: Number of moves, drawn independently from all 18 tokens.
            rng: Random source for this call; defaults to the engine's own.

        Returns:
            The applied moves, space separated ("" for count == 0).

        Side effects:
            - Mutates the cube.
            - Records each move with phase='scramble' and moves the scramble
              checkpoint to the end of the history.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        rng = rng if rng is not None else self._rng
        tokens = []
        with self.history_phase("scramble"):
            for _ in range(count):
                tok = rng.choice(MOVES)
                self.apply_move(tok)
                tokens.append(tok)
        self._scramble_len = int(self._history.shape[0])
        sequence = " ".join(tokens)
        logger.debug("scrambled with %d moves: %s", count, sequence)
        return sequence

    # ---------- queries ----------
    def is_solved(self) -> bool:
        """
        True when every face label shows at most one distinct color.

        Only color grouping per label is checked, not where each sticker sits;
        a necessary condition for a solved cube rather than a full proof.
        """
        face_colors = {f: set() for f in FACES}
        for c in self._cubelets:
            for f, color in c.colors.items():
                if color is not None:
                    face_colors[f].add(color)
        return all(len(colors) <= 1 for colors in face_colors.values())

    def face_counts(self) -> Dict[str, int]:
        """Number of stickers carried under each face label (n² on a valid cube)."""
        return {f: sum(1 for c in self._cubelets if c.colors[f] is not None) for f in FACES}

    # ---------- history ----------
    def clear_history(self) -> None:
        """Clear the history DataFrame and reset the scramble checkpoint."""
        self._history = pd.DataFrame(columns=HISTORY_COLUMNS)
        self._scramble_len = 0

    @contextmanager
    def history_phase(self, phase: str):
        """
        Temporarily set the history 'phase' for recorded moves ('scramble' or 'solve').
        Usage:
            with engine.history_phase('scramble'):
                engine.apply_move('R'); engine.apply_move("U'")
        """
        prev = self._phase
        self._phase = phase
        try:
            yield
        finally:
            self._phase = prev

    @contextmanager
    def no_history(self):
        """Temporarily disable history recording."""
        prev = self._history_enabled
        self._history_enabled = False
        try:
            yield
        finally:
            self._history_enabled = prev

    def get_history(self) -> pd.DataFrame:
        """
        Return a copy of the move history DataFrame.

        Columns:
            step (int)      : 0-based move index
            move (str)      : token, e.g. "R'"
            face (str)      : 'U','D','L','R','F','B'
            modifier (str)  : '', "'" or '2'
            phase (str)     : 'scramble' or 'solve'
        """
        return self._history.copy()

    def moves_since_scramble(self) -> int:
        """Number of moves logged after the scramble checkpoint."""
        return max(0, int(self._history.shape[0]) - int(self._scramble_len))

    # ---------- views ----------
    def to_facelets(self) -> np.ndarray:
        """
        Generate a 6×n×n integer array of facelet colors from the cubelet state.

        Faces are in FACELET_ORDER (U, R, F, D, L, B); each entry is the index,
        in that same order, of the face whose color the sticker carries. A solved
        cube therefore has face f filled with f.
        """
        n = self.size
        F = np.full((6, n, n), -1, dtype=int)
        for c in self._cubelets:
            for face, color in c.colors.items():
                if color is None:
                    continue
                row_axis, row_desc, col_axis, col_desc = _FACELET_GRID[face]
                r = coord_to_index(c.position[row_axis], n)
                col = coord_to_index(c.position[col_axis], n)
                if row_desc:
                    r = n - 1 - r
                if col_desc:
                    col = n - 1 - col
                F[FACELET_ORDER.index(face), r, col] = _COLOR_HOME[color]
        return F

    def to_facelet_string(self) -> str:
        """Facelets as a URFDLB letter string (6·n² characters)."""
        return "".join(FACELET_ORDER[v] for v in self.to_facelets().flatten())

    def print_net(self, use_color: bool = True) -> None:
        """
        Print a compact text-based cube net to the terminal.

              [U]
        [L] [F] [R] [B]
              [D]

        Args:
            use_color: If True, apply ANSI color codes to facelet numbers
                       for readability in supported terminals.
        """
        F = self.to_facelets()
        # face units, scaled by n below; keys index FACELET_ORDER
        layout = {
            0: (0, 1),  # U above F
            4: (1, 0),  # L F R B in a row
            2: (1, 1),
            1: (1, 2),
            5: (1, 3),
            3: (2, 1),  # D below F
        }
        COLOR_CODES = {
            0: "\033[97m",
            1: "\033[91m",
            2: "\033[92m",
            3: "\033[93m",
            4: "\033[95m",
            5: "\033[94m",
        }
        RESET = "\033[0m"

        n = self.size
        rows = 3 * n
        cols = 4 * n
        grid = [[" " for _ in range(cols)] for _ in range(rows)]

        for face_id, (rt, ct) in layout.items():
            for r in range(n):
                for c in range(n):
                    val = int(F[face_id, r, c])
                    grid[rt * n + r][ct * n + c] = (
                        f"{COLOR_CODES[val]}{FACELET_ORDER[val]}{RESET}" if use_color else FACELET_ORDER[val]
                    )

        for row in grid:
            print(" ".join(row))
