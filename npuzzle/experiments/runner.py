from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from npuzzle.domains.puzzlen import NPuzzle
from npuzzle.search.a_star import a_star
from npuzzle.search.bfs import bfs
from npuzzle.search.budget import Deadline
from npuzzle.search.ida_star import ida_star

State = Tuple[int, ...]

HEADER = [
    "algorithm","heuristic","n","depth","seed",
    "expanded","generated","duplicates","g","time_sec",
    "peak_open","peak_closed","peak_recursion","bound_final","tie_break",
    "termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def generate_instances(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Random-walk scrambles; walks from the goal are always solvable."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, state=dom.scramble(d, seed)))
            seed += 1
    return out

def make_unsolvable_variant(s: State) -> State:
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1 :], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

def choose_hfun(dom: NPuzzle, name: str) -> Callable[[State], int]:
    if name == "manhattan":
        return dom.manhattan
    if name == "linear_conflict":
        return dom.heuristic
    raise ValueError(f"unknown heuristic {name!r}")

def run_one(algo: str, dom: NPuzzle, state: State, hfun, args) -> Dict:
    deadline = Deadline(args.timeout_sec)
    if algo == "a":
        return a_star(state, dom.GOAL, hfun, dom.neighbors, key_fn=dom.key,
                      tie_break=args.tie_break, max_iterations=args.max_iterations,
                      cancel=deadline, return_path=False)
    if algo == "ida":
        return ida_star(state, dom.GOAL, hfun, dom.neighbors, key_fn=dom.key,
                        max_expansions=args.max_iterations, cancel=deadline, return_path=False)
    return bfs(state, dom.GOAL, dom.neighbors, key_fn=dom.key, max_expansions=args.max_iterations)

def write_row(w, res: Dict, heur: str, n: int, inst: Instance, solvable_flag: int):
    w.writerow([
        res.get("algorithm",""), heur, n, inst.depth, inst.seed,
        res.get("expanded",""), res.get("generated",""), res.get("duplicates",""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time',0.0):.6f}",
        res.get("peak_open",""), res.get("peak_closed",""), res.get("peak_recursion",""), res.get("bound_final",""),
        res.get("tie_break",""), res.get("termination","ok"), solvable_flag
    ])

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A*/IDA* (+BFS) N-puzzle experiment runner")
    ap.add_argument("--algo", choices=["a", "ida", "bfs", "both", "all"], default="both",
                    help="'both' = A*+IDA*, 'all' = A*+IDA*+BFS")
    ap.add_argument("--heuristic", choices=["manhattan","linear_conflict"], default="linear_conflict")
    ap.add_argument("--n", type=int, default=3, help="Board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=["h","g","fifo","lifo"], default="h")
    ap.add_argument("--max_iterations", type=int, default=500_000)
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (search runs to exhaustion; 3x3 recommended)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    return ap

def run(args) -> int:
    dom = NPuzzle(args.n)
    hfun = choose_hfun(dom, args.heuristic)
    algos = {"a": ["a"], "ida": ["ida"], "bfs": ["bfs"], "both": ["a", "ida"], "all": ["a", "ida", "bfs"]}[args.algo]

    insts = generate_instances(dom, args.depths, args.per_depth, args.start_seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for algo in algos:
                write_row(w, run_one(algo, dom, inst.state, hfun, args), args.heuristic, dom.N, inst, 1)
            if args.include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                for algo in algos:
                    write_row(w, run_one(algo, dom, u, hfun, args), args.heuristic, dom.N, inst, 0)
    return len(insts)

def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    count = run(args)
    print(f"Wrote {args.out} ({count} instances)")

if __name__ == "__main__":
    main()
