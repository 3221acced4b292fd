import argparse

import pytest

from npuzzle.config import SolverConfig


def test_defaults():
    cfg = SolverConfig()
    assert cfg.max_iterations == 500_000
    assert cfg.progress_interval == 100
    assert cfg.ida_threshold == 40
    assert cfg.use_ida


@pytest.mark.parametrize("kw", [
    {"max_iterations": 0},
    {"ida_max_expansions": -1},
    {"progress_interval": 0},
    {"ida_threshold": -5},
    {"tie_break": "best"},
])
def test_invalid_values(kw):
    with pytest.raises(ValueError):
        SolverConfig(**kw)


def test_from_args_overrides_only_given_fields():
    ns = argparse.Namespace(max_iterations=10, ida_threshold=None, tie_break="fifo", no_ida=True)
    cfg = SolverConfig.from_args(ns)
    assert cfg.max_iterations == 10
    assert cfg.ida_threshold == 40
    assert cfg.tie_break == "fifo"
    assert cfg.use_ida is False
