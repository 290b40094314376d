import pytest

from scripts.bench_lp import CountingObserver, build_cases
from scripts.generate_instances import KINDS, generate_random_lp
from tableau_optimizer.lp.simplex import simplex_solve
from tableau_optimizer.schemas import SolveOptions


def test_mixed_instances_carry_every_relation_kind():
    model = generate_random_lp(4, 6, seed=1, kind="mixed")

    kinds = {cons.relation.kind for cons in model.constraints.values()}
    assert kinds == {"<=", ">=", "=="}
    assert model.name == "mixed-1"


def test_degenerate_instances_have_zero_right_hand_sides():
    model = generate_random_lp(4, 3, seed=0, kind="degenerate")

    assert [cons.rhs for name, cons in model.constraints.items() if name != "total"] == [0.0, 0.0, 0.0]
    assert model.constraints["total"].rhs == 4.0


def test_generation_is_seeded():
    assert generate_random_lp(4, 3, seed=7, kind="mixed") == generate_random_lp(4, 3, seed=7, kind="mixed")


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError, match="Unknown instance kind"):
        generate_random_lp(3, 3, seed=0, kind="sparse")


def test_bench_cases_cover_each_kind_and_solve():
    cases = build_cases(seeds=2, num_vars=4, num_constraints=3)

    assert len(cases) == 1 + 2 * len(KINDS)
    for _, model in cases:
        assert simplex_solve(model, SolveOptions(), CountingObserver()).status == "optimal"


def test_counting_observer_counts_bland_switches():
    observer = CountingObserver()

    observer.on_warning("50 consecutive degenerate pivots; switching to Bland's rule.")
    observer.on_warning("Constraint c has a coefficient for invalid variable ghost")

    assert observer.bland_switches == 1
