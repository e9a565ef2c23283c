"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Move grammar. Tokens look like "R", "R'" or "R2"; sequences are
whitespace separated.

"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from nxcube.cubies import FACES


class InvalidMoveError(ValueError):
    """Raised when a move token cannot be parsed."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"Invalid move {token!r}: {reason}")
        self.token = token


class Modifier(Enum):
    NONE = ""
    PRIME = "'"
    DOUBLE = "2"


@dataclass(frozen=True)
class Move:
    """
    A face turn.

    Attributes:
        face: One of "U", "D", "L", "R", "F", "B".
        modifier: Quarter clockwise (NONE), quarter counter-clockwise (PRIME)
            or half turn (DOUBLE), seen from outside the face.
    """
    face: str
    modifier: Modifier = Modifier.NONE

    def __post_init__(self):
        if self.face not in FACES or not isinstance(self.modifier, Modifier):
            raise InvalidMoveError(f"{self.face}{getattr(self.modifier, 'value', self.modifier)}",
                                   "not a face/modifier pair")

    @property
    def direction(self) -> int:
        return -1 if self.modifier is Modifier.PRIME else +1

    @property
    def quarter_turns(self) -> int:
        return 2 if self.modifier is Modifier.DOUBLE else 1

    def inverse(self) -> "Move":
        if self.modifier is Modifier.NONE:
            return Move(self.face, Modifier.PRIME)
        if self.modifier is Modifier.PRIME:
            return Move(self.face, Modifier.NONE)
        return self

    def __str__(self) -> str:
        return f"{self.face}{self.modifier.value}"


MOVES: List[str] = [f + m.value for f in FACES for m in Modifier]

_MODIFIERS = {m.value: m for m in Modifier}


def parse_move(token: str) -> Move:
    """
    Parse a single move token.

    Args:
        token: Face letter optionally followed by "'" or "2".

    Returns:
        The validated Move.

    Raises:
        InvalidMoveError: On an empty token, an unknown face letter, or any
            trailing text other than a single "'" or "2".
    """
    if not token:
        raise InvalidMoveError(token, "empty token")
    face, rest = token[0], token[1:]
    if face not in FACES:
        raise InvalidMoveError(token, f"unknown face {face!r}, expected one of {''.join(FACES)}")
    if rest not in _MODIFIERS:
        raise InvalidMoveError(token, f"unknown modifier {rest!r}, expected ' or 2")
    return Move(face, _MODIFIERS[rest])


def parse_moves(text: str) -> List[Move]:
    """Parse a whitespace separated sequence. Blank input gives an empty list."""
    return [parse_move(tok) for tok in text.split()]


def invert_move(move: Move) -> Move:
    return move.inverse()


def invert_moves(moves: List[Move]) -> List[Move]:
    """Inverse of a whole sequence: each move inverted, order reversed."""
    return [m.inverse() for m in reversed(moves)]


def format_moves(moves: List[Move]) -> str:
    return " ".join(str(m) for m in moves)
