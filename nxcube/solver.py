"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Client for the remote solving service. The engine itself never solves
anything; this posts {size, scramble} and falls back to a fixed mock answer
whenever the service cannot be used.

"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import httpx

from nxcube.config import EngineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResponse:
    solution: str
    length: int
    method: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


MOCK_SOLUTION = SolveResponse(solution="R U R' U' R U R' U'", length=8, method="mock")


def parse_solve_response(payload: Any) -> SolveResponse:
    """
    Validate a service payload.

    Raises:
        ValueError: If the payload is not an object with a string `solution`,
            an integer `length` and a string `method`.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    solution, length, method = payload.get("solution"), payload.get("length"), payload.get("method")
    if not isinstance(solution, str) or not isinstance(method, str):
        raise ValueError("'solution' and 'method' must be strings")
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"'length' must be an integer, got {length!r}")
    return SolveResponse(solution=solution, length=length, method=method)


class SolverClient:
    """
    Thin synchronous client for the solving service.

    Parameters
    ----------
    url : str
        Endpoint accepting POST {"size": int, "scramble": str}.
    timeout : float
        Request timeout in seconds.
    transport : httpx.BaseTransport, optional
        Custom transport (tests pass an httpx.MockTransport).
    """

    def __init__(self, url: str = "http://localhost:5000/solve", timeout: float = 10.0,
                 transport: Optional[httpx.BaseTransport] = None):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, cfg: EngineConfig, transport: Optional[httpx.BaseTransport] = None) -> "SolverClient":
        return cls(url=cfg.solver_url, timeout=cfg.solver_timeout, transport=transport)

    def solve(self, size: int, scramble: str) -> SolveResponse:
        """
        Ask the service for a solution of `scramble` on a cube of `size`.

        Transport errors, non-2xx statuses and malformed bodies are logged and
        answered with MOCK_SOLUTION; this method does not raise for them.
        """
        body = {"size": size, "scramble": scramble}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self.url, json=body)
                response.raise_for_status()
                result = parse_solve_response(response.json())
        except httpx.HTTPError as e:
            logger.warning(f"Solver request to {self.url} failed ({e}); using mock solution")
            return MOCK_SOLUTION
        except ValueError as e:
            # json decoding errors are ValueErrors too
            logger.warning(f"Solver returned an unusable body ({e}); using mock solution")
            return MOCK_SOLUTION

        logger.debug("solver answered %s (%d moves, %s)", result.solution, result.length, result.method)
        return result
