import itertools

import pytest

from npuzzle.domains.puzzlen import NPuzzle, goal
from npuzzle.errors import IllegalMoveError, MalformedStateError


def test_goal_layout():
    assert goal(3) == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert NPuzzle(4).to_grid(goal(4)) == [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]]


def test_rejects_tiny_board():
    with pytest.raises(ValueError):
        NPuzzle(1)


def test_locate_blank(p8):
    assert p8.locate_blank(p8.GOAL) == (2, 2)
    assert p8.locate_blank((1, 0, 2, 3, 4, 5, 6, 7, 8)) == (0, 1)
    with pytest.raises(MalformedStateError):
        p8.locate_blank((1, 2, 3, 4, 5, 6, 7, 8, 9))


def test_key_is_injective_on_2x2():
    dom = NPuzzle(2)
    keys = {dom.key(p) for p in itertools.permutations(range(4))}
    assert len(keys) == 24


def test_key_packs_nibbles_for_15_puzzle(p15):
    expected = 0
    for v in p15.GOAL:
        expected = expected * 16 + v
    assert p15.key(p15.GOAL) == expected
    assert p15.key(p15.GOAL) < 2 ** 64


@pytest.mark.parametrize("grid, msg", [
    ([[1, 2, 3], [4, 5, 6], [7, 8, 8]], "blank"),
    ([[1, 2, 3], [4, 0, 6], [7, 0, 8]], "blank"),
    ([[1, 2, 3], [4, 5, 6], [7, 9, 0]], "range"),
    ([[1, 2, 3], [4, 5, 6], [7, -1, 0]], "range"),
    ([[1, 2, 3], [4, 5, 6]], "3x3"),
    ([[1, 2], [4, 5, 6], [7, 8, 0]], "3x3"),
    ([[1, 2, 3], [4, 5, 6], [7, "8", 0]], "integers"),
])
def test_from_grid_rejects_malformed(p8, grid, msg):
    with pytest.raises(MalformedStateError, match=msg):
        p8.from_grid(grid)


def test_duplicates_are_reported(p8):
    with pytest.raises(MalformedStateError, match="duplicate"):
        p8.validate((1, 1, 3, 4, 5, 6, 7, 8, 0))


def test_from_grid_copies(p8):
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    s = p8.from_grid(grid)
    grid[0][0] = 99
    assert s == p8.GOAL
    out = p8.to_grid(s)
    out[0][0] = 42
    assert p8.to_grid(s)[0][0] == 1


def test_neighbor_counts_and_order(p8):
    corner = p8.neighbors(p8.GOAL)
    assert len(corner) == 2
    # up, then left
    assert corner[0][0] == (1, 2, 3, 4, 5, 0, 7, 8, 6)
    assert corner[1][0] == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    edge = (1, 0, 2, 3, 4, 5, 6, 7, 8)
    assert len(p8.neighbors(edge)) == 3
    center = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    succ = [s for s, _ in p8.neighbors(center)]
    assert len(succ) == 4
    assert [s.index(0) for s in succ] == [1, 7, 3, 5]
    assert all(c == 1 for _, c in p8.neighbors(center))


def test_neighbors_do_not_mutate(p8):
    s = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    p8.neighbors(s)
    assert s == (1, 2, 3, 4, 0, 5, 6, 7, 8)


def test_apply_move(p8):
    assert p8.apply_move(p8.GOAL, 8) == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    with pytest.raises(IllegalMoveError):
        p8.apply_move(p8.GOAL, 1)
    with pytest.raises(IllegalMoveError):
        p8.apply_move(p8.GOAL, 0)
    with pytest.raises(IllegalMoveError):
        p8.apply_move(p8.GOAL, 42)


def test_apply_moves_returns_every_state(p8):
    states = p8.apply_moves(p8.GOAL, [8, 5])
    assert states == [
        p8.GOAL,
        (1, 2, 3, 4, 5, 6, 7, 0, 8),
        (1, 2, 3, 4, 0, 6, 7, 5, 8),
    ]


def test_scramble_is_deterministic_and_solvable(p15):
    a = p15.scramble(40, seed=3)
    assert a == p15.scramble(40, seed=3)
    assert p15.is_solvable(a)


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_random_solvable(n):
    dom = NPuzzle(n)
    for seed in range(20):
        s = dom.random_solvable(seed)
        assert sorted(s) == list(range(n * n))
        assert dom.is_solvable(s)
