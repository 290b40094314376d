#!/usr/bin/env python3
import argparse
import json
import time
from collections import Counter
from pathlib import Path
from typing import List, Tuple

from tableau_optimizer.lp.observer import SolverObserver
from tableau_optimizer.lp.simplex import simplex_solve
from tableau_optimizer.schemas import LPModel, SolveOptions
from scripts.generate_instances import KINDS, generate_random_lp


class CountingObserver(SolverObserver):
    """Counts switches to Bland's rule; otherwise silent."""

    def __init__(self) -> None:
        self.bland_switches = 0

    def on_warning(self, message: str) -> None:
        if "Bland" in message:
            self.bland_switches += 1


def load_example(name: str) -> LPModel:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return LPModel.model_validate(json.loads(path.read_text()))


def build_cases(seeds: int, num_vars: int, num_constraints: int) -> List[Tuple[str, LPModel]]:
    cases = [("examples/reference_lp.json", load_example("reference_lp.json"))]
    for kind in KINDS:
        for seed in range(seeds):
            model = generate_random_lp(num_vars, num_constraints, seed, kind)
            cases.append((model.name, model))
    return cases


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the simplex solver on random instances.")
    parser.add_argument("--seeds", type=int, default=3, help="Instances per kind")
    parser.add_argument("--vars", type=int, default=10, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=8, help="Number of constraints")
    parser.add_argument("--pivot-rule", choices=("dantzig", "bland"), default="dantzig")
    args = parser.parse_args()

    opts = SolveOptions(pivot_rule=args.pivot_rule)
    statuses: Counter = Counter()
    total_iterations = 0
    total_switches = 0

    print("name,status,objective,iterations,bland_switches,time_ms")
    for name, model in build_cases(args.seeds, args.vars, args.constraints):
        observer = CountingObserver()
        start = time.perf_counter()
        solution = simplex_solve(model, opts, observer)
        elapsed_ms = (time.perf_counter() - start) * 1000
        statuses[solution.status] += 1
        total_iterations += solution.iterations
        total_switches += observer.bland_switches
        print(
            f"{name},{solution.status},{solution.objective_value},{solution.iterations},"
            f"{observer.bland_switches},{elapsed_ms:.2f}"
        )

    print()
    print("status,count")
    for status, count in sorted(statuses.items()):
        print(f"{status},{count}")
    print(f"iterations,{total_iterations}")
    print(f"bland_switches,{total_switches}")


if __name__ == "__main__":
    main()
