'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Shared helpers for the engine tests.

'''

import random
from typing import Dict, Tuple

from nxcube.cube import CubeEngine
from nxcube.cubies import FACES, FACE_AXIS, FACE_SIGN, half_extent


def snapshot_by_id(engine: CubeEngine) -> Dict[str, Tuple]:
    """id -> (position, colors in FACES order) for every cubelet."""
    return {
        c.id: (c.position, tuple(c.colors[f] for f in FACES))
        for c in engine.get_cubelets()
    }


def make_scrambled(size: int = 3, length: int = 25, seed: int = 0) -> Tuple[CubeEngine, str]:
    engine = CubeEngine(size, rng=random.Random(seed))
    sequence = engine.scramble(length)
    return engine, sequence


def kind_counts(engine: CubeEngine) -> Dict[str, int]:
    counts = {"corner": 0, "edge": 0, "center": 0, "inner": 0}
    for c in engine.get_cubelets():
        counts[c.kind] += 1
    return counts


def stickers_face_outwards(engine: CubeEngine) -> bool:
    """Every colored label points where the cubelet actually touches the surface."""
    half = half_extent(engine.get_size())
    for c in engine.get_cubelets():
        for f in FACES:
            if c.colors[f] is not None and c.position[FACE_AXIS[f]] != FACE_SIGN[f] * half:
                return False
    return True
