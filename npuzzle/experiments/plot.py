#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from npuzzle.experiments.summarize import load_results

def plot_metric(ax, df: pd.DataFrame, metric: str):
    stats = df.groupby(["algorithm", "heuristic", "depth"])[metric].agg(["mean", "std"]).reset_index()
    for (algo, heur), grp in stats.groupby(["algorithm", "heuristic"]):
        # offset IDA* a tiny bit so curves don't overlap
        offset = -0.12 if algo == "A*" else (0.12 if algo == "IDA*" else 0.0)
        ax.errorbar(grp["depth"] + offset, grp["mean"], yerr=grp["std"].fillna(0.0),
                    marker="o", capsize=3, label=f"{algo} | {heur}")
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def make_plots(df: pd.DataFrame, outdir: Path, base: str, keep_open: bool = False) -> List[Path]:
    saved = []
    metrics = [m for m in ("expanded", "generated", "time_sec") if m in df.columns]
    fig, axes = plt.subplots(1, len(metrics), figsize=(5 * len(metrics), 5), squeeze=False)
    for ax, metric in zip(axes[0], metrics):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    if not keep_open:
        plt.close(fig)
    return saved

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    make_plots(df, Path(args.save), base, keep_open=args.show)
    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
