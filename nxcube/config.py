"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Engine / launcher configuration.

"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


class ConfigurationError(ValueError):
    """Raised for configuration values the engine cannot represent."""


MIN_SIZE = 2


def validate_size(size) -> int:
    # bool is an int subclass, a cube of size True is not a cube
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigurationError(f"size must be an integer, got {size!r}")
    if size < MIN_SIZE:
        raise ConfigurationError(f"size must be >= {MIN_SIZE}, got {size}")
    return size


@dataclass
class EngineConfig:
    """
    Configuration for a CubeEngine and the launcher around it.

    All values are validated in __post_init__; anything invalid raises
    ConfigurationError rather than producing a half-built engine.
    """

    size: int = 3
    # Cubelets per edge. 3 and 4 are the usual cubes, anything >= 2 works.

    scramble_length: int = 20
    # Number of random moves used by the launcher when scrambling.

    seed: Optional[int] = None
    # Seed for the scramble RNG. None -> system seeded, not reproducible.

    record_history: bool = True
    # Keep a pandas move log on the engine (see CubeEngine.get_history).

    solver_url: str = "http://localhost:5000/solve"
    # Remote solving service endpoint.

    solver_timeout: float = 10.0
    # Seconds before the solver request is abandoned and the mock answer is used.

    def __post_init__(self):
        validate_size(self.size)
        if self.scramble_length < 0:
            raise ConfigurationError(f"scramble_length must be >= 0, got {self.scramble_length}")
        if self.solver_timeout <= 0:
            raise ConfigurationError(f"solver_timeout must be > 0, got {self.solver_timeout}")
        if not self.solver_url:
            raise ConfigurationError("solver_url must not be empty")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
