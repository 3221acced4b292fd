import pandas as pd

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.experiments import plot, runner, summarize


def test_runner_writes_csv(tmp_path, capsys):
    out = tmp_path / "run.csv"
    runner.main(["--n", "3", "--depths", "4", "8", "--per_depth", "2", "--algo", "all", "--out", str(out)])
    assert "4 instances" in capsys.readouterr().out
    df = pd.read_csv(out)
    assert list(df.columns) == runner.HEADER
    assert len(df) == 12
    assert set(df["algorithm"]) == {"A*", "IDA*", "BFS"}
    assert (df["termination"] == "ok").all()
    # all three are optimal, so per-instance g must agree
    assert (df.groupby("seed")["g"].nunique() == 1).all()


def test_runner_unsolvable_variants(tmp_path):
    out = tmp_path / "u.csv"
    runner.main(["--n", "2", "--depths", "3", "--per_depth", "1", "--algo", "a",
                 "--include_unsolvable", "--out", str(out)])
    df = pd.read_csv(out)
    assert list(df["solvable"]) == [1, 0]
    assert list(df["termination"]) == ["ok", "exhausted"]


def test_generate_instances_are_solvable():
    dom = NPuzzle(4)
    insts = runner.generate_instances(dom, [5, 10], 3, start_seed=10)
    assert [i.depth for i in insts] == [5, 5, 5, 10, 10, 10]
    assert [i.seed for i in insts] == list(range(10, 16))
    assert all(dom.is_solvable(i.state) for i in insts)


def test_make_unsolvable_variant_flips_parity():
    dom = NPuzzle(3)
    s = dom.scramble(12, 1)
    assert not dom.is_solvable(runner.make_unsolvable_variant(s))


def test_summarize_and_plot(tmp_path, capsys):
    out = tmp_path / "run.csv"
    runner.main(["--n", "3", "--depths", "6", "10", "--per_depth", "2", "--out", str(out)])
    df = summarize.load_results([str(out)])
    table = summarize.summarize(df)
    assert set(table["algorithm"]) == {"A*", "IDA*"}
    assert (table["instances"] == 2).all()
    ratios = summarize.ratio_table(table, "expanded")
    assert list(ratios["depth"]) == [6, 10]

    summarize.main([str(out), "--out", str(tmp_path / "summary.csv")])
    assert "IDA*/A* expanded ratio" in capsys.readouterr().out
    assert (tmp_path / "summary.csv").exists()

    saved = plot.make_plots(df, tmp_path / "plots", "run")
    assert all(p.exists() for p in saved)


def test_load_results_skips_missing(tmp_path, capsys):
    df = summarize.load_results([str(tmp_path / "nope.csv")])
    assert df.empty
    assert "skip" in capsys.readouterr().out
