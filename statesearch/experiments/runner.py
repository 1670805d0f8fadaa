from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional, Tuple

from statesearch.domains.binary_tree import MAX_DEPTH, BinaryTree, BinaryTreeByRef, Node
from statesearch.domains.puzzle import SlidingPuzzle, make_unsolvable_variant
from statesearch.search.budget import BudgetedSpace, SearchBudgetExceeded
from statesearch.search.dfs import SearchStats, dfs
from statesearch.search.goal import EqualityGoal, Goal
from statesearch.search.space import StateSpace
from statesearch.search.visited import DigestVisited, Visited

logger = logging.getLogger(__name__)

HEADER = [
    "space", "start", "target", "found", "path_len",
    "expanded", "generated", "duplicates", "peak_depth",
    "time_sec", "termination",
]


@dataclass
class Instance:
    start: Any
    goal: Goal
    start_label: str
    target_label: str


def _gen_tree(args, by_ref: bool) -> Tuple[StateSpace, List[Instance]]:
    space: StateSpace
    if by_ref:
        space = BinaryTreeByRef(args.depth)
        start, make_target = space.node(0), Node
    else:
        space = BinaryTree(args.depth)
        start, make_target = 0, int
    out = [Instance(start, EqualityGoal(make_target(t)), "0", str(t))
           for t in args.targets for _ in range(args.repeats)]
    return space, out


def _gen_puzzle(args) -> Tuple[StateSpace, List[Instance]]:
    dom = SlidingPuzzle(args.rows, args.cols)
    goal_label = "".join(map(str, dom.GOAL))
    out: List[Instance] = []
    seed = args.seed
    for d in args.scramble:
        for _ in range(args.per_depth):
            s = dom.scramble(d, seed)
            seed += 1
            out.append(Instance(s, EqualityGoal(dom.GOAL), "".join(map(str, s)), goal_label))
            if args.include_unsolvable:
                u = make_unsolvable_variant(s)
                out.append(Instance(u, EqualityGoal(dom.GOAL), "".join(map(str, u)), goal_label))
    return dom, out


def choose_space(args) -> Tuple[StateSpace, List[Instance]]:
    """Returns (space, instances) for --space."""
    if args.space == "puzzle":
        return _gen_puzzle(args)
    return _gen_tree(args, by_ref=(args.space == "binary_ref"))


def run_one(space: StateSpace, inst: Instance,
            max_expansions: Optional[int] = None,
            timeout_sec: Optional[float] = None,
            digest: bool = False) -> Dict[str, Any]:
    """One instrumented dfs call; returns a result dict matching HEADER."""
    if max_expansions is not None or timeout_sec is not None:
        space = BudgetedSpace(space, max_expansions=max_expansions, timeout_sec=timeout_sec)
    visited: Visited = DigestVisited(space.key) if digest else Visited(space.key)
    stats = SearchStats()

    t0 = perf_counter()
    try:
        path = dfs(space, inst.start, inst.goal, visited=visited, stats=stats)
        term = "ok" if path is not None else "exhausted"
    except SearchBudgetExceeded as e:
        logger.info("budget hit on %s: %s", inst.start_label, e)
        path, term = None, "budget"
    dt = perf_counter() - t0

    return {
        "found": int(path is not None),
        "path_len": len(path) if path is not None else "",
        "expanded": stats.expanded, "generated": stats.generated,
        "duplicates": stats.duplicates, "peak_depth": stats.peak_depth,
        "time": dt, "termination": term,
    }


def write_row(w, space_name: str, inst: Instance, res: Dict[str, Any]) -> None:
    w.writerow([
        space_name, inst.start_label, inst.target_label,
        res["found"], res["path_len"],
        res["expanded"], res["generated"], res["duplicates"], res["peak_depth"],
        f"{res['time']:.6f}", res["termination"],
    ])


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="DFS benchmark runner over example state spaces")
    ap.add_argument("--space", choices=["binary", "binary_ref", "puzzle"], default="binary")
    ap.add_argument("--depth", type=int, default=MAX_DEPTH, help="Binary tree depth")
    ap.add_argument("--targets", type=int, nargs="+", default=[2], help="Binary tree target nodes")
    ap.add_argument("--repeats", type=int, default=10, help="Runs per binary tree target")

    # puzzle
    ap.add_argument("--rows", type=int, default=2)
    ap.add_argument("--cols", type=int, default=3)
    ap.add_argument("--scramble", type=int, nargs="+", default=[4, 8, 12], help="Scramble depths")
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")

    # bounds
    ap.add_argument("--max_expansions", type=int, default=None)
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--digest", action="store_true", help="Use digest-keyed visited set")

    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    space, insts = choose_space(args)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            res = run_one(space, inst, max_expansions=args.max_expansions,
                          timeout_sec=args.timeout_sec, digest=args.digest)
            write_row(w, args.space, inst, res)

    print(f"Wrote {args.out} ({len(insts)} instances)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
