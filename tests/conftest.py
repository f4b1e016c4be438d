"""Shared fixtures for the test suite."""

from collections import Counter

import pytest


def _reference_step(live, width, height):
    """Advance a set of live cells one generation on a bounded grid."""
    counts = Counter()
    for x, y in live:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height:
                    counts[(nx, ny)] += 1

    return {cell for cell, n in counts.items() if n == 3 or (n == 2 and cell in live)}


@pytest.fixture
def reference_step():
    """Plain-Python B3/S23 step over a set of (x, y) cells with a dead boundary."""
    return _reference_step
