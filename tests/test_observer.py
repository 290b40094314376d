import logging

import pytest

from tableau_optimizer.lp.observer import LoggingObserver, SolverObserver
from tableau_optimizer.lp.simplex import SimplexSolver, simplex_solve
from tableau_optimizer.schemas import Constraint, LessEqual

from conftest import make_reference_lp


def test_observer_sees_every_iteration(observer):
    solution = simplex_solve(make_reference_lp("min"), observer=observer)

    assert observer.created == ["reference"]
    assert len(observer.started) == solution.iterations
    assert len(observer.completed) == solution.iterations
    assert [entry[0] for entry in observer.completed] == list(range(1, solution.iterations + 1))
    assert observer.completed[-1][1] == pytest.approx(solution.objective_value)


def test_objective_is_non_increasing_across_pivots(observer):
    simplex_solve(make_reference_lp("min"), observer=observer)

    values = [0.0] + [entry[1] for entry in observer.completed]
    assert all(later <= earlier for earlier, later in zip(values, values[1:]))
    assert values[1] == -24.0


def test_dangling_coefficient_warns_and_solve_continues(observer):
    model = make_reference_lp()
    model.add_constraint(
        Constraint(name="extra", relation=LessEqual(rhs=100.0), coefficients={"x": 1.0, "ghost": 1.0})
    )

    solution = simplex_solve(model, observer=observer)

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(33.0)
    assert observer.warnings == ["Constraint extra has a coefficient for invalid variable ghost"]


def test_observer_does_not_change_results(observer):
    silent = simplex_solve(make_reference_lp(), observer=SolverObserver())
    watched = simplex_solve(make_reference_lp(), observer=observer)

    assert silent == watched


def test_default_observer_logs(caplog):
    model = make_reference_lp()
    model.add_constraint(Constraint(name="extra", relation=LessEqual(rhs=100.0), coefficients={"ghost": 1.0}))

    with caplog.at_level(logging.DEBUG, logger="tableau_optimizer.simplex"):
        solver = SimplexSolver(model)
        solver.solve()

    assert isinstance(solver.observer, LoggingObserver)
    messages = [record.getMessage() for record in caplog.records]
    assert "Creating a simplex solver for model 'reference'" in messages
    assert any("invalid variable ghost" in message for message in messages)
    assert any(message.startswith("Final value = ") for message in messages)
