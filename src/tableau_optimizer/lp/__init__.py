"""Tableau simplex for linear programs."""

from .simplex import SimplexSolver, simplex_solve
from .parser import parse_natural_language_spec
from .diagnostics import analyze_infeasibility
from .observer import LoggingObserver, SolverObserver
from .utils import UnsupportedConstraintError, preprocess_model

__all__ = [
    "SimplexSolver",
    "simplex_solve",
    "parse_natural_language_spec",
    "analyze_infeasibility",
    "LoggingObserver",
    "SolverObserver",
    "UnsupportedConstraintError",
    "preprocess_model",
]
