from tableau_optimizer.lp.diagnostics import analyze_infeasibility
from tableau_optimizer.schemas import Constraint, GreaterEqual, LessEqual, LPModel, Variable

from conftest import make_reference_lp


def make_conflicting_lp() -> LPModel:
    model = LPModel(name="conflict", sense="min")
    model.add_variable(Variable(name="x", objective=1.0))
    model.add_variable(Variable(name="y", objective=1.0))
    model.add_constraint(Constraint(name="cap", relation=LessEqual(rhs=2.0), coefficients={"x": 1.0, "y": 1.0}))
    model.add_constraint(Constraint(name="need", relation=GreaterEqual(rhs=5.0), coefficients={"x": 1.0, "y": 1.0}))
    model.add_constraint(Constraint(name="loose", relation=LessEqual(rhs=10.0), coefficients={"x": 1.0}))
    return model


def test_conflicting_constraints_are_listed():
    report = analyze_infeasibility(make_conflicting_lp())

    assert report["status"] == "infeasible"
    assert report["conflicting_constraints"] == ["cap", "need"]
    assert report["suggestions"]


def test_feasible_model_has_no_conflicts():
    report = analyze_infeasibility(make_reference_lp())

    assert report["status"] == "optimal"
    assert report["conflicting_constraints"] == []


def test_unsupported_model_reports_error():
    model = LPModel(name="bounds").add_variable(Variable(name="x", lb=1.0))

    report = analyze_infeasibility(model)

    assert report["status"] == "error"
    assert "lower bound" in report["message"]
