'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Solver client tests against an in-process httpx transport.

'''

import json
import unittest

import httpx

from nxcube.config import EngineConfig
from nxcube.solver import MOCK_SOLUTION, SolveResponse, SolverClient, parse_solve_response

URL = "http://solver.test/solve"


def _client(handler) -> SolverClient:
    return SolverClient(url=URL, timeout=1.0, transport=httpx.MockTransport(handler))


class TestSolverClient(unittest.TestCase):

    def test_posts_size_and_scramble(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"solution": "U' R'", "length": 2, "method": "two-phase"})

        result = _client(handler).solve(3, "R U")
        self.assertEqual(result, SolveResponse("U' R'", 2, "two-phase"))
        self.assertEqual(seen, {"method": "POST", "url": URL, "body": {"size": 3, "scramble": "R U"}})

    def test_transport_error_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertLogs("nxcube.solver", level="WARNING"):
            self.assertEqual(_client(handler).solve(3, "R"), MOCK_SOLUTION)

    def test_server_error_falls_back(self):
        with self.assertLogs("nxcube.solver", level="WARNING"):
            result = _client(lambda request: httpx.Response(503, text="busy")).solve(4, "R U")
        self.assertEqual(result, MOCK_SOLUTION)

    def test_malformed_body_falls_back(self):
        for response in (
            httpx.Response(200, content=b"not json"),
            httpx.Response(200, json=["R"]),
            httpx.Response(200, json={"solution": "R", "length": "1", "method": "x"}),
        ):
            with self.assertLogs("nxcube.solver", level="WARNING"):
                result = _client(lambda request, r=response: r).solve(3, "R")
            self.assertEqual(result, MOCK_SOLUTION)

    def test_mock_literal(self):
        self.assertEqual(
            MOCK_SOLUTION.to_dict(),
            {"solution": "R U R' U' R U R' U'", "length": 8, "method": "mock"},
        )

    def test_from_config(self):
        client = SolverClient.from_config(EngineConfig(solver_url=URL, solver_timeout=2.5))
        self.assertEqual((client.url, client.timeout), (URL, 2.5))


class TestParseSolveResponse(unittest.TestCase):

    def test_rejects_bool_length(self):
        with self.assertRaises(ValueError):
            parse_solve_response({"solution": "R", "length": True, "method": "x"})


if __name__ == "__main__":
    unittest.main()
