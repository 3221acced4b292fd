#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("3x3 Manhattan", "python -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 22 --per_depth 10 --heuristic manhattan --algo both --out results/p8_manhattan.csv")
    run("3x3 Linear conflict", "python -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 22 --per_depth 10 --heuristic linear_conflict --algo both --out results/p8_linear_conflict.csv")
    run("4x4 Linear conflict", "python -m npuzzle.experiments.runner --n 4 --depths 10 20 30 --per_depth 5 --heuristic linear_conflict --algo both --timeout_sec 30 --out results/p15_linear_conflict.csv")
    run("Summary", "python -m npuzzle.experiments.summarize results/*.csv --out results/summary.csv")
    run("Plots", "python -m npuzzle.experiments.plot results/p8_manhattan.csv results/p8_linear_conflict.csv results/p15_linear_conflict.csv --save results/plots")

if __name__ == "__main__":
    main()
