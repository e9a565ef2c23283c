'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Command line driver: build a cube, scramble it, apply moves, print the
net and optionally ask the solving service.

'''
#!/usr/bin/env python3
import argparse
import logging
import sys

# project imports
from nxcube.config import ConfigurationError, EngineConfig
from nxcube.cube import CubeEngine
from nxcube.moves import InvalidMoveError, parse_moves
from nxcube.solver import SolverClient


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("Play with an NxNxN cube")
    p.add_argument("--size", type=int, default=3)
    p.add_argument("--scramble", type=int, default=0, help="number of random moves to scramble with")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--moves", type=str, default="", help="move sequence to apply, e.g. \"R U R' U'\"")
    p.add_argument("--solve", action="store_true", help="ask the solving service for a solution")
    p.add_argument("--solver-url", type=str, default="http://localhost:5000/solve", dest="solver_url")
    p.add_argument("--timeout", type=float, default=10.0)
    p.add_argument("--no-color", action="store_true", dest="no_color")
    p.add_argument("--verbose", "-v", action="store_true")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = EngineConfig(
            size=args.size,
            scramble_length=args.scramble,
            seed=args.seed,
            solver_url=args.solver_url,
            solver_timeout=args.timeout,
        )
        moves = parse_moves(args.moves)
    except (ConfigurationError, InvalidMoveError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    engine = CubeEngine.from_config(cfg)
    scramble = ""
    if cfg.scramble_length:
        scramble = engine.scramble(cfg.scramble_length)
        print(f"Scramble: {scramble}")
    for m in moves:
        engine.apply_move(m)

    engine.print_net(use_color=not args.no_color)
    print(f"Solved: {engine.is_solved()}")

    if args.solve:
        applied = " ".join(t for t in [scramble, args.moves.strip()] if t)
        answer = SolverClient.from_config(cfg).solve(cfg.size, applied)
        print(f"Solution: {answer.solution} | moves={answer.length} | method={answer.method}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
