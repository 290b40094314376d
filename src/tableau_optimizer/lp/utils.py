import numpy as np
from typing import List, Optional

from ..schemas import Constraint, LessEqual, LPModel, SolveOptions, Variable


class UnsupportedConstraintError(ValueError):
    """Raised for bound configurations the tableau cannot encode."""


def preprocess_model(model: LPModel) -> LPModel:
    """
    Return a solver-ready copy of ``model``; the caller's model is left untouched.

    - rejects nonzero lower bounds and fixed variables
    - rewrites constraints with a negative right-hand side
    - appends one ``<name>_ub`` row per finite upper bound
    """

    clone = model.model_copy(deep=True)

    extra_constraints: List[Constraint] = []
    for var in clone.variables.values():
        ub = _upper_bound(var)
        if ub is None:
            continue
        bound = Constraint(
            name=f"{var.name}_ub",
            relation=LessEqual(rhs=ub),
            coefficients={var.name: 1.0},
        )
        existing = clone.constraints.get(bound.name)
        if existing is not None:
            if fix_negative_rhs(existing) != fix_negative_rhs(bound):
                raise UnsupportedConstraintError(
                    f"Constraint '{bound.name}' clashes with the upper bound of variable '{var.name}'."
                )
            continue
        extra_constraints.append(bound)

    clone.constraints = {name: fix_negative_rhs(cons) for name, cons in clone.constraints.items()}
    for cons in extra_constraints:
        clone.constraints[cons.name] = fix_negative_rhs(cons)
    return clone


def fix_negative_rhs(constraint: Constraint) -> Constraint:
    """Multiply a constraint with negative right-hand side by -1; no-op otherwise."""
    if constraint.rhs >= 0:
        return constraint
    return Constraint(
        name=constraint.name,
        relation=constraint.relation.negated(),
        coefficients={var: -coef for var, coef in constraint.coefficients.items()},
    )


def _upper_bound(var: Variable) -> Optional[float]:
    lb = var.lb
    ub = var.ub
    if lb is not None and lb != 0.0:
        raise UnsupportedConstraintError(
            f"Variable {var.name} has lower bound {lb}; only non-negative variables (lb 0) are supported."
        )
    if ub is not None and np.isposinf(ub):
        ub = None
    if lb is not None and ub is not None and lb == ub:
        raise UnsupportedConstraintError(f"Variable {var.name} is fixed at {lb}; fixed variables are not supported.")
    return ub


def choose_big_m(model: LPModel, opts: SolveOptions) -> float:
    """Artificial penalty: explicit override, else scaled to the largest input magnitude."""
    if opts.big_m is not None:
        return float(opts.big_m)
    magnitudes = [1.0]
    magnitudes.extend(abs(var.objective) for var in model.variables.values())
    for cons in model.constraints.values():
        magnitudes.append(abs(cons.rhs))
        magnitudes.extend(abs(coef) for coef in cons.coefficients.values())
    return opts.big_m_scale * float(np.max(magnitudes))
