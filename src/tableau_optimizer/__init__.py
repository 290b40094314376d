"""Tableau Optimizer: Big-M tableau simplex for small linear programs."""

from .lp import simplex_solve
from .schemas import (
    Constraint,
    Equal,
    GreaterEqual,
    LessEqual,
    LPModel,
    LPSolution,
    SolveOptions,
    Variable,
)

__all__ = [
    "simplex_solve",
    "Constraint",
    "Equal",
    "GreaterEqual",
    "LessEqual",
    "LPModel",
    "LPSolution",
    "SolveOptions",
    "Variable",
]
