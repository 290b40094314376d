from typing import List, Tuple

import pytest

from tableau_optimizer.lp.observer import SolverObserver
from tableau_optimizer.schemas import Constraint, LessEqual, LPModel, Variable


class RecordingObserver(SolverObserver):
    def __init__(self) -> None:
        self.created: List[str] = []
        self.started: List[Tuple[int, float]] = []
        self.completed: List[Tuple[int, float, int, int]] = []
        self.warnings: List[str] = []

    def on_solver_created(self, model_name: str) -> None:
        self.created.append(model_name)

    def on_iteration_started(self, iteration: int, objective_value: float) -> None:
        self.started.append((iteration, objective_value))

    def on_iteration_completed(
        self, iteration: int, objective_value: float, entering: int, leaving_row: int
    ) -> None:
        self.completed.append((iteration, objective_value, entering, leaving_row))

    def on_warning(self, message: str) -> None:
        self.warnings.append(message)


def make_reference_lp(sense: str = "max") -> LPModel:
    """max 3x + 2y s.t. 2x + y <= 18, 2x + 3y <= 42, 3x + y <= 24; optimum 33 at (3, 12)."""
    sign = 1.0 if sense == "max" else -1.0
    model = LPModel(name="reference", sense=sense)
    model.add_variable(Variable(name="x", lb=0.0, objective=sign * 3.0))
    model.add_variable(Variable(name="y", lb=0.0, objective=sign * 2.0))
    model.add_constraint(Constraint(name="c1", relation=LessEqual(rhs=18.0), coefficients={"x": 2.0, "y": 1.0}))
    model.add_constraint(Constraint(name="c2", relation=LessEqual(rhs=42.0), coefficients={"x": 2.0, "y": 3.0}))
    model.add_constraint(Constraint(name="c3", relation=LessEqual(rhs=24.0), coefficients={"x": 3.0, "y": 1.0}))
    return model


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
