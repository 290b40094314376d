import time
from typing import List, Optional, Tuple

from .observer import LoggingObserver, LOGGER, SolverObserver
from .tableau import RHS_INDEX, Tableau, Z_INDEX
from .utils import UnsupportedConstraintError, choose_big_m, preprocess_model
from ..schemas import LPModel, LPSolution, SolveOptions


def simplex_solve(
    model: LPModel,
    opts: Optional[SolveOptions] = None,
    observer: Optional[SolverObserver] = None,
) -> LPSolution:
    """
    Tableau simplex with Big-M artificials; Dantzig pricing with a Bland fallback.
    Small dense LPs only; engineered for clarity, not speed.
    """

    return SimplexSolver(model, opts, observer).solve()


class SimplexSolver:
    """Solves one model. The caller's model is cloned before preprocessing."""

    def __init__(
        self,
        model: LPModel,
        opts: Optional[SolveOptions] = None,
        observer: Optional[SolverObserver] = None,
    ) -> None:
        self.model = model
        self.opts = opts or SolveOptions()
        self.observer = observer or LoggingObserver()
        self.iterations = 0
        self.tableau: Optional[Tableau] = None
        self.observer.on_solver_created(model.name)

    def preprocess(self) -> LPModel:
        return preprocess_model(self.model)

    def solve(self) -> LPSolution:
        LOGGER.info("Starting to solve simplex model '%s'", self.model.name)
        try:
            prepared = self.preprocess()
        except UnsupportedConstraintError as exc:
            return self._result("unsupported", str(exc))

        tableau = Tableau(prepared, choose_big_m(prepared, self.opts), self.observer)
        self.tableau = tableau
        self.iterations = 0

        use_bland = self.opts.pivot_rule == "bland"
        degenerate_streak = 0
        deadline = None
        if self.opts.time_limit is not None:
            deadline = time.perf_counter() + self.opts.time_limit

        tol = self.opts.tol
        while has_improving_column(tableau, tol):
            if self.iterations >= self.opts.max_iters:
                return self._result("iteration_limit", "Hit iteration limit.")
            if deadline is not None and time.perf_counter() >= deadline:
                return self._result("time_limit", "Hit time limit.")

            self.observer.on_iteration_started(self.iterations, self._row0_objective(tableau))
            column = choose_pivot_column(tableau, tol, use_bland)
            pivot = choose_pivot_row(tableau, column, self.opts.tol, use_bland)
            if pivot is None:
                return self._result("unbounded", "Unbounded.")
            row, ratio = pivot

            pivot_tableau(tableau, row, column)
            self.iterations += 1
            self.observer.on_iteration_completed(self.iterations, self._row0_objective(tableau), column, row)

            if ratio <= self.opts.tol:
                degenerate_streak += 1
            else:
                degenerate_streak = 0
            if (
                not use_bland
                and self.opts.degenerate_limit > 0
                and degenerate_streak >= self.opts.degenerate_limit
            ):
                self.observer.on_warning(
                    f"{degenerate_streak} consecutive degenerate pivots; switching to Bland's rule."
                )
                use_bland = True

        artificial = set(tableau.artificial_columns)
        for row in range(1, tableau.num_rows()):
            if tableau.basic_variable(row) in artificial:
                if tableau.get_rhs(row) > self.opts.feasibility_tol:
                    return self._result(
                        "infeasible",
                        f"Infeasible: artificial variable for '{tableau.row_names[row]}' remains at "
                        f"{tableau.get_rhs(row):.6g}.",
                    )

        x = {
            name: (0.0 if abs(value) < 1e-12 else float(value))
            for name, value in tableau.variable_values().items()
        }
        objective_value = self.model.objective_constant + sum(
            var.objective * x[name] for name, var in self.model.variables.items()
        )
        LOGGER.info("Final value = %s", objective_value)
        return LPSolution(
            status="optimal",
            objective_value=objective_value,
            x=x,
            iterations=self.iterations,
            message="",
        )

    def _row0_objective(self, tableau: Tableau) -> float:
        """Big-M objective read from row 0, in the model's own sense."""
        gain = tableau.get_objective_value()
        value = -gain if self.model.sense == "min" else gain
        return float(self.model.objective_constant + value)

    def _result(self, status: str, message: str) -> LPSolution:
        LOGGER.info("Simplex stopped with status %s: %s", status, message)
        return LPSolution(
            status=status,
            objective_value=None,
            x=None,
            iterations=self.iterations,
            message=message,
        )


def pricing_key(tableau: Tableau, col: int, tol: float) -> Tuple[float, float]:
    """(penalty, cost) with a negligible penalty snapped to zero, for lexicographic comparison."""
    penalty, cost = tableau.get_pricing(col)
    if abs(penalty) <= tol:
        penalty = 0.0
    return penalty, cost


def _is_improving(key: Tuple[float, float], tol: float) -> bool:
    penalty, cost = key
    return penalty < 0.0 or (penalty == 0.0 and cost < -tol)


def has_improving_column(tableau: Tableau, tol: float) -> bool:
    """Stop test: no column lowers the penalty, or keeps it and lowers the cost."""
    return any(
        _is_improving(pricing_key(tableau, col, tol), tol)
        for col in range(Z_INDEX + 1, tableau.num_cols())
    )


def choose_pivot_column(tableau: Tableau, tol: float, use_bland: bool) -> int:
    """Entering column: most negative reduced cost (Dantzig) or first negative one (Bland)."""
    best_column = -1
    best_key = (0.0, -tol)
    for col in range(Z_INDEX + 1, tableau.num_cols()):
        key = pricing_key(tableau, col, tol)
        if not _is_improving(key, tol):
            continue
        if use_bland:
            return col
        if best_column < 0 or key < best_key:
            best_column = col
            best_key = key
    return best_column


def choose_pivot_row(
    tableau: Tableau, column: int, tol: float, use_bland: bool
) -> Optional[Tuple[int, float]]:
    """Minimum ratio test; ``None`` when no row limits the entering column."""
    ratios: List[Tuple[float, int]] = []
    for row in range(1, tableau.num_rows()):
        entry = tableau.get(row, column)
        if entry > tol:
            ratios.append((tableau.get(row, RHS_INDEX) / entry, row))
    if not ratios:
        return None

    if use_bland:
        min_ratio = min(ratio for ratio, _ in ratios)
        ties = [row for ratio, row in ratios if ratio - min_ratio <= tol]
        row = min(ties, key=tableau.basic_variable)
        return row, min_ratio

    ratio, row = ratios[0]
    for candidate_ratio, candidate_row in ratios[1:]:
        if candidate_ratio < ratio:
            ratio, row = candidate_ratio, candidate_row
    return row, ratio


def pivot_tableau(tableau: Tableau, row: int, column: int) -> None:
    """Gauss-Jordan step: ``column`` becomes the basic variable of ``row``."""
    tableau.divide_row(row, tableau.get(row, column))
    tableau.set(row, column, 1.0)
    tableau.eliminate_from_pricing(row, column)
    for other in range(tableau.num_rows()):
        if other == row:
            continue
        factor = tableau.get(other, column)
        if factor != 0.0:
            tableau.subtract_row(other, row, factor)
            tableau.set(other, column, 0.0)
    tableau.set_basic_variable(row, column)
