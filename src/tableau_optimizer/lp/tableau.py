from typing import Dict, List, Literal, Optional, Tuple

from ..schemas import Constraint, Equal, GreaterEqual, LessEqual, LPModel
from .matrix import Matrix
from .observer import SolverObserver

RHS_INDEX = 0
Z_INDEX = 1
OBJECTIVE_ROW = 0

# rows of the pricing matrix: row 0 == cost row + M * penalty row
COST_ROW = 0
PENALTY_ROW = 1

ColumnKind = Literal["rhs", "objective", "structural", "slack", "surplus", "artificial"]


class Tableau:
    """
    Big-M simplex tableau built from a preprocessed model.

    Row 0 encodes ``z - g.x = 0`` where ``g`` is the gain being maximised
    (the negated cost for a ``min`` model). Column 0 is the right-hand side
    and column 1 the ``z`` anchor; every other column is a structural,
    slack, surplus or artificial variable.

    Row 0 is also kept split into a cost part and a penalty part (the
    coefficient of M). Pricing compares the two parts lexicographically, so
    entering-column decisions never depend on rounding in M-sized entries.
    """

    def __init__(self, model: LPModel, big_m: float, observer: Optional[SolverObserver] = None) -> None:
        self._matrix = Matrix()
        self._pricing = Matrix()
        self._pricing.add_row()
        self._pricing.add_row()
        self._observer = observer or SolverObserver()
        self.big_m = big_m
        self.variable_column: Dict[str, int] = {}
        self.column_names: List[str] = []
        self.column_kinds: List[ColumnKind] = []
        self.row_names: List[str] = []
        self._basic_variable: List[int] = []

        self._create_row0(model)
        for constraint in model.constraints.values():
            self._create_constraint(constraint)

    def get(self, row: int, col: int) -> float:
        return self._matrix.get(row, col)

    def set(self, row: int, col: int, value: float) -> None:
        self._matrix.set(row, col, value)

    def get_rhs(self, row: int) -> float:
        return self._matrix.get(row, RHS_INDEX)

    def num_rows(self) -> int:
        return self._matrix.num_rows

    def num_cols(self) -> int:
        return self._matrix.num_cols

    def get_reduced_cost(self, col: int) -> float:
        return self._matrix.get(OBJECTIVE_ROW, col)

    def get_objective_value(self) -> float:
        """Current value of the maximised gain (row 0 right-hand side)."""
        return self._matrix.get(OBJECTIVE_ROW, RHS_INDEX)

    def has_negative_reduced_cost(self, tol: float = 0.0) -> bool:
        for col in range(Z_INDEX + 1, self.num_cols()):
            if self.get_reduced_cost(col) < -tol:
                return True
        return False

    def basic_variable(self, row: int) -> int:
        return self._basic_variable[row]

    def set_basic_variable(self, row: int, col: int) -> None:
        self._basic_variable[row] = col

    def divide_row(self, row: int, divisor: float) -> None:
        self._matrix.divide_row(row, divisor)

    def subtract_row(self, target: int, source: int, factor: float) -> None:
        self._matrix.subtract_row(target, source, factor)

    def get_pricing(self, col: int) -> Tuple[float, float]:
        """(penalty, cost) parts of the reduced cost; row 0 equals cost + M * penalty."""
        return self._pricing.get(PENALTY_ROW, col), self._pricing.get(COST_ROW, col)

    def get_cost_value(self) -> float:
        """Row 0 right-hand side without the Big-M part."""
        return self._pricing.get(COST_ROW, RHS_INDEX)

    def eliminate_from_pricing(self, row: int, col: int) -> None:
        """Zero ``col`` in both pricing rows using the already normalised ``row``."""
        values = self._matrix.row(row)
        for pricing_row in (COST_ROW, PENALTY_ROW):
            factor = self._pricing.get(pricing_row, col)
            if factor != 0.0:
                self._pricing.subtract_values(pricing_row, values, factor)
                self._pricing.set(pricing_row, col, 0.0)

    @property
    def artificial_columns(self) -> List[int]:
        return [idx for idx, kind in enumerate(self.column_kinds) if kind == "artificial"]

    def variable_values(self) -> Dict[str, float]:
        """Basic variables take their row's right-hand side; the rest sit at zero."""
        row_of_column = {col: row for row, col in enumerate(self._basic_variable) if row != OBJECTIVE_ROW}
        values: Dict[str, float] = {}
        for name, col in self.variable_column.items():
            row = row_of_column.get(col)
            values[name] = 0.0 if row is None else self.get_rhs(row)
        return values

    def _create_row0(self, model: LPModel) -> None:
        self._matrix.add_row()
        self._add_column("rhs", "rhs")
        self._add_column("z", "objective")
        self.row_names.append("objective")

        self._matrix.set(OBJECTIVE_ROW, Z_INDEX, 1.0)
        self._matrix.set(OBJECTIVE_ROW, RHS_INDEX, 0.0)

        sign = 1.0 if model.sense == "min" else -1.0
        for name, variable in model.variables.items():
            column = self._add_column(name, "structural")
            self.variable_column[name] = column
            self._matrix.set(OBJECTIVE_ROW, column, sign * variable.objective)
            self._pricing.set(COST_ROW, column, sign * variable.objective)

        self._basic_variable.append(Z_INDEX)

    def _create_constraint(self, constraint: Constraint) -> None:
        row = self._matrix.add_row()
        self.row_names.append(constraint.name)
        self._matrix.set(row, RHS_INDEX, constraint.rhs)

        for var_name, coef in constraint.coefficients.items():
            column = self.variable_column.get(var_name)
            if column is None:
                self._observer.on_warning(
                    f"Constraint {constraint.name} has a coefficient for invalid variable {var_name}"
                )
                continue
            self._matrix.set(row, column, coef)

        relation = constraint.relation
        if isinstance(relation, LessEqual):
            slack = self._add_column(f"slack_{constraint.name}", "slack")
            self._matrix.set(row, slack, 1.0)
            self._basic_variable.append(slack)
        elif isinstance(relation, (Equal, GreaterEqual)):
            artificial = self._add_column(f"artificial_{constraint.name}", "artificial")
            self._matrix.set(row, artificial, 1.0)
            self._basic_variable.append(artificial)
            if isinstance(relation, GreaterEqual):
                surplus = self._add_column(f"surplus_{constraint.name}", "surplus")
                self._matrix.set(row, surplus, -1.0)
            # price the artificial at M, then eliminate it from row 0
            self._matrix.set(OBJECTIVE_ROW, artificial, self.big_m)
            self._matrix.subtract_row(OBJECTIVE_ROW, row, self.big_m)
            self._pricing.set(PENALTY_ROW, artificial, 1.0)
            self._pricing.subtract_values(PENALTY_ROW, self._matrix.row(row), 1.0)
        else:
            raise TypeError(f"Unknown relation {relation!r} on constraint '{constraint.name}'.")

    def _add_column(self, name: str, kind: ColumnKind) -> int:
        column = self._matrix.add_column()
        self._pricing.add_column()
        self.column_names.append(name)
        self.column_kinds.append(kind)
        return column

    def __str__(self) -> str:
        return str(self._matrix)
