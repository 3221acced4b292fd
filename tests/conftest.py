import pytest

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.search.bfs import distances_from


@pytest.fixture(scope="session")
def p8():
    return NPuzzle(3)


@pytest.fixture(scope="session")
def p15():
    return NPuzzle(4)


@pytest.fixture(scope="session")
def p8_distances(p8):
    """Exact distance to the goal for every reachable 3x3 state (181440 entries)."""
    return distances_from(p8.GOAL, p8.neighbors)


def is_single_slide(dom, a, b):
    """True when b is a with the blank swapped with one orthogonal neighbour."""
    return any(s == b for s, _ in dom.neighbors(a))
