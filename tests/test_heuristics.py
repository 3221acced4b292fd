import random

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan


def test_zero_at_goal():
    for n in (2, 3, 4, 5):
        dom = NPuzzle(n)
        assert dom.heuristic(dom.GOAL) == 0


def test_manhattan_example():
    # 7 and 8 each one step right of home
    assert manhattan((1, 2, 3, 4, 5, 6, 0, 7, 8), 3) == 2
    assert linear_conflict((1, 2, 3, 4, 5, 6, 0, 7, 8), 3) == 0


def test_pair_in_row_conflict():
    s = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert manhattan(s, 3) == 2
    assert linear_conflict(s, 3) == 2


def test_column_conflict():
    # 1 and 4 swapped inside column 0
    s = (4, 2, 3, 1, 5, 6, 7, 8, 0)
    assert manhattan(s, 3) == 2
    assert linear_conflict(s, 3) == 2


def test_fully_reversed_row_counts_tiles_not_pairs():
    # 3 2 1: two tiles must leave the row, so +4 rather than 3 pairs * 2
    s = (3, 2, 1, 4, 5, 6, 7, 8, 0)
    assert manhattan(s, 3) == 4
    assert linear_conflict(s, 3) == 4


def test_tiles_outside_their_goal_line_are_ignored():
    # 4 sits in row 0 but belongs to row 1
    s = (4, 1, 3, 2, 5, 6, 7, 8, 0)
    assert linear_conflict(s, 3) == 0


def test_admissible_on_sampled_3x3(p8, p8_distances):
    rng = random.Random(7)
    states = rng.sample(sorted(p8_distances), 4000)
    for s in states:
        assert p8.heuristic(s) <= p8_distances[s], s


def test_consistent_on_sampled_3x3(p8, p8_distances):
    rng = random.Random(11)
    for s in rng.sample(sorted(p8_distances), 1500):
        h = p8.heuristic(s)
        for s2, c in p8.neighbors(s):
            assert h <= c + p8.heuristic(s2)


def test_parity_with_true_distance(p8, p8_distances):
    # every move changes Manhattan by exactly one, LC adds even amounts
    rng = random.Random(5)
    for s in rng.sample(sorted(p8_distances), 500):
        assert (p8_distances[s] - p8.heuristic(s)) % 2 == 0
