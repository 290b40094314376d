import pytest

from tableau_optimizer import server
from tableau_optimizer.schemas import LPModel

from conftest import make_reference_lp


def test_solve_lp_tool_returns_solution_dict():
    payload = server.solve_lp(make_reference_lp())

    assert payload["status"] == "optimal"
    assert payload["objective_value"] == pytest.approx(33.0)
    assert set(payload["x"]) == {"x", "y"}


def test_parse_tool_round_trips_through_schema():
    payload = server.parse_nl_to_lp("maximize 3x + 2y subject to 2x + y <= 18, 3x + y <= 24")

    model = LPModel.model_validate(payload)
    assert list(model.constraints) == ["c1", "c2"]
    assert model.constraints["c1"].relation.kind == "<="


def test_analyze_infeasibility_tool():
    report = server.analyze_infeasibility(make_reference_lp())
    assert report["status"] == "optimal"
