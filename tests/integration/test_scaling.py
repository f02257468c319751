#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_scaling.py
"""Parse time must grow roughly linearly with document size."""

import time

import pytest
from utils import SAMPLE_ORG

from orgast.parsers.org import parse_org
from orgast.renderers.org import serialize

CHUNK = SAMPLE_ORG.split("* TODO", 1)[1]


def _document(repeat: int) -> str:
    return "#+TITLE: Scaling\n\n" + "".join(f"* TODO{CHUNK}\n" for _ in range(repeat))


def _best_time(text: str, runs: int = 3) -> float:
    best = float("inf")
    for _ in range(runs):
        start = time.perf_counter()
        parse_org(text)
        best = min(best, time.perf_counter() - start)
    return best


@pytest.mark.integration
@pytest.mark.slow
class TestScaling:
    """Lenient checks against quadratic rescans."""

    def test_parse_time_is_subquadratic(self) -> None:
        """Test that a 10x larger document takes well under 100x as long."""
        small = _document(20)
        large = _document(200)
        _best_time(small, runs=1)

        small_time = _best_time(small)
        large_time = _best_time(large)

        # Ten times the input may cost at most three times its linear share
        assert large_time <= max(small_time, 1e-3) * 10 * 3

    def test_large_document_round_trip(self) -> None:
        """Test that a large document still serializes stably."""
        text = serialize(parse_org(_document(200)))

        assert serialize(parse_org(text)) == text
        assert len(parse_org(text).children) == 400
