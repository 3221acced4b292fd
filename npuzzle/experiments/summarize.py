#!/usr/bin/env python3
from __future__ import annotations
import argparse, glob, os
from typing import List, Optional

import pandas as pd

METRICS = ["expanded", "generated", "time_sec", "g"]

def load_results(patterns: List[str], only_ok: bool = True) -> pd.DataFrame:
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(pat)) or [pat]:
            if not os.path.exists(fn):
                print(f"skip {fn}: not found")
                continue
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    for c in ("n", "depth", "seed", "expanded", "generated", "duplicates", "g", "time_sec", "solvable"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if only_ok and "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean of each metric per (algorithm, heuristic, n, depth), plus instance counts."""
    if df.empty:
        return df
    keys = [c for c in ("algorithm", "heuristic", "n", "depth") if c in df.columns]
    metrics = [m for m in METRICS if m in df.columns]
    out = df.groupby(keys)[metrics].mean()
    out["instances"] = df.groupby(keys).size()
    return out.reset_index()

def ratio_table(summary: pd.DataFrame, metric: str = "time_sec") -> pd.DataFrame:
    """IDA*/A* ratio of a metric per depth; >1 means A* was cheaper."""
    if summary.empty:
        return summary
    idx = [c for c in ("heuristic", "n", "depth") if c in summary.columns]
    wide = summary.pivot_table(index=idx, columns="algorithm", values=metric)
    if "A*" not in wide.columns or "IDA*" not in wide.columns:
        return pd.DataFrame()
    wide = wide.dropna(subset=["A*", "IDA*"])
    wide = wide[wide["A*"] > 0]
    return (wide["IDA*"] / wide["A*"]).rename(f"{metric}_ratio").reset_index()

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (mean per algorithm/depth).")
    ap.add_argument("csv", nargs="+", help="CSV files or glob patterns")
    ap.add_argument("--all", action="store_true", help="Keep rows that did not terminate ok")
    ap.add_argument("--out", default=None, help="Optional CSV path for the summary table")
    args = ap.parse_args(argv)

    df = load_results(args.csv, only_ok=not args.all)
    if df.empty:
        print("No rows to summarize.")
        return
    summary = summarize(df)
    with pd.option_context("display.width", 160, "display.max_rows", 200):
        print(summary.to_string(index=False, float_format=lambda x: f"{x:.4f}"))
        for metric in ("expanded", "time_sec"):
            ratios = ratio_table(summary, metric)
            if not ratios.empty:
                print(f"\nIDA*/A* {metric} ratio")
                print(ratios.to_string(index=False, float_format=lambda x: f"{x:.3f}"))
    if args.out:
        summary.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")

if __name__ == "__main__":
    main()
