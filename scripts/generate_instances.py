#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import Dict, Optional

from tableau_optimizer.schemas import Constraint, Equal, GreaterEqual, LessEqual, LPModel, Variable

KINDS = ("packing", "mixed", "degenerate")


def _random_row(rng: random.Random, num_vars: int, low: float, high: float) -> Dict[str, float]:
    return {f"x{i}": round(rng.uniform(low, high), 3) for i in range(num_vars)}


def _activity(coefficients: Dict[str, float], point: Dict[str, float]) -> float:
    return sum(coef * point[name] for name, coef in coefficients.items())


def generate_packing_lp(num_vars: int, num_constraints: int, rng: random.Random) -> LPModel:
    """Maximise positive gains under positive <= rows; x = 0 is feasible."""
    model = LPModel(name="packing", sense="max")
    for i in range(num_vars):
        model.add_variable(Variable(name=f"x{i}", objective=round(rng.uniform(1.0, 4.0), 3)))
    for j in range(num_constraints):
        rhs = round(rng.uniform(num_vars * 2.0, num_vars * 6.0), 3)
        model.add_constraint(
            Constraint(name=f"c{j}", relation=LessEqual(rhs=rhs), coefficients=_random_row(rng, num_vars, 0.5, 5.0))
        )
    return model


def generate_mixed_lp(num_vars: int, num_constraints: int, rng: random.Random) -> LPModel:
    """
    Minimise non-negative costs over <=, >= and == rows.

    Every row is built around a hidden non-negative point, so the instance is
    feasible; the costs keep it bounded.
    """
    model = LPModel(name="mixed", sense="min")
    point = {f"x{i}": round(rng.uniform(0.0, 5.0), 3) for i in range(num_vars)}
    for i in range(num_vars):
        model.add_variable(Variable(name=f"x{i}", objective=round(rng.uniform(0.0, 4.0), 3)))
    for j in range(num_constraints):
        coefficients = _random_row(rng, num_vars, -2.0, 5.0)
        activity = _activity(coefficients, point)
        kind = ("<=", ">=", "==")[j % 3]
        if kind == "<=":
            relation = LessEqual(rhs=activity + rng.uniform(0.0, 5.0))
        elif kind == ">=":
            relation = GreaterEqual(rhs=activity - rng.uniform(0.0, 5.0))
        else:
            relation = Equal(rhs=activity)
        model.add_constraint(Constraint(name=f"c{j}", relation=relation, coefficients=coefficients))
    return model


def generate_degenerate_lp(num_vars: int, num_constraints: int, rng: random.Random) -> LPModel:
    """Zero right-hand sides with mixed-sign rows, capped by one total row; many ratio ties."""
    model = LPModel(name="degenerate", sense="max")
    for i in range(num_vars):
        model.add_variable(Variable(name=f"x{i}", objective=round(rng.uniform(-1.0, 3.0), 3)))
    for j in range(num_constraints):
        model.add_constraint(
            Constraint(name=f"c{j}", relation=LessEqual(rhs=0.0), coefficients=_random_row(rng, num_vars, -3.0, 3.0))
        )
    model.add_constraint(
        Constraint(
            name="total",
            relation=LessEqual(rhs=float(num_vars)),
            coefficients={f"x{i}": 1.0 for i in range(num_vars)},
        )
    )
    return model


_GENERATORS = {
    "packing": generate_packing_lp,
    "mixed": generate_mixed_lp,
    "degenerate": generate_degenerate_lp,
}


def generate_random_lp(
    num_vars: int, num_constraints: int, seed: Optional[int] = None, kind: str = "packing"
) -> LPModel:
    """Random feasible, bounded instance of the given kind."""
    if kind not in _GENERATORS:
        raise ValueError(f"Unknown instance kind '{kind}'; expected one of {', '.join(KINDS)}.")
    rng = random.Random(seed)
    model = _GENERATORS[kind](num_vars, num_constraints, rng)
    model.name = f"{kind}-{seed}"
    return model


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random feasible LP instances.")
    parser.add_argument("--vars", type=int, default=3, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=3, help="Number of constraints")
    parser.add_argument("--kind", choices=KINDS, default="packing", help="Instance family")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_lp(args.vars, args.constraints, (args.seed or 0) + idx, args.kind)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
