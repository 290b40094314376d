from __future__ import annotations

from typing import Any, Dict, List

from ..schemas import LPModel, SolveOptions
from .observer import SolverObserver
from .simplex import simplex_solve


def analyze_infeasibility(model: LPModel, options: SolveOptions | None = None) -> Dict[str, Any]:
    """Very small IIS-style heuristic: drop each constraint and re-solve."""

    opts = options or SolveOptions()
    quiet = SolverObserver()
    solution = simplex_solve(model, opts, quiet)

    if solution.status == "unsupported":
        return {
            "status": "error",
            "message": solution.message,
            "conflicting_constraints": [],
            "suggestions": ["Only non-negative variables with optional upper bounds are supported."],
        }

    if solution.status != "infeasible":
        return {
            "status": solution.status,
            "message": solution.message or "Model is not infeasible.",
            "conflicting_constraints": [],
            "suggestions": [],
        }

    conflicts: List[str] = []
    for name in model.constraints:
        relaxed = model.model_copy(deep=True)
        del relaxed.constraints[name]
        sub_solution = simplex_solve(relaxed, opts, quiet)
        if sub_solution.status != "infeasible":
            conflicts.append(name)

    suggestions = []
    if conflicts:
        suggestions.append("Relax or inspect the conflicting constraints above.")
    else:
        suggestions.append("Consider relaxing upper bounds or checking for contradictory requirements.")

    return {
        "status": "infeasible",
        "message": "Detected infeasibility; listed constraints critical to infeasibility.",
        "conflicting_constraints": conflicts,
        "suggestions": suggestions,
    }
