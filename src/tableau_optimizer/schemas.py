from __future__ import annotations

from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

Sense = Literal["min", "max"]
PivotRule = Literal["dantzig", "bland"]
Status = Literal["optimal", "infeasible", "unbounded", "iteration_limit", "time_limit", "unsupported"]


class Variable(BaseModel):
    name: str
    lb: float | None = None
    ub: float | None = None
    objective: float = 0.0


class LessEqual(BaseModel):
    kind: Literal["<="] = "<="
    rhs: float

    def negated(self) -> "GreaterEqual":
        return GreaterEqual(rhs=-self.rhs)


class Equal(BaseModel):
    kind: Literal["=="] = "=="
    rhs: float

    def negated(self) -> "Equal":
        return Equal(rhs=-self.rhs)


class GreaterEqual(BaseModel):
    kind: Literal[">="] = ">="
    rhs: float

    def negated(self) -> LessEqual:
        return LessEqual(rhs=-self.rhs)


Relation = Annotated[Union[LessEqual, Equal, GreaterEqual], Field(discriminator="kind")]


class Constraint(BaseModel):
    name: str
    relation: Relation
    coefficients: Dict[str, float] = Field(default_factory=dict)

    @property
    def rhs(self) -> float:
        return self.relation.rhs

    def set_coefficient(self, var: str, coef: float) -> "Constraint":
        self.coefficients[var] = coef
        return self


class LPModel(BaseModel):
    name: str = "problem"
    sense: Sense = "min"
    objective_constant: float = 0.0
    variables: Dict[str, Variable] = Field(default_factory=dict)
    constraints: Dict[str, Constraint] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _keys_match_names(self) -> "LPModel":
        for kind, items in (("variable", self.variables), ("constraint", self.constraints)):
            for key, item in items.items():
                if key != item.name:
                    raise ValueError(f"{kind} stored under key '{key}' is named '{item.name}'")
        return self

    def add_variable(self, variable: Variable) -> "LPModel":
        self.variables[variable.name] = variable
        return self

    def add_constraint(self, constraint: Constraint) -> "LPModel":
        self.constraints[constraint.name] = constraint
        return self


class SolveOptions(BaseModel):
    max_iters: int = 10_000
    tol: float = 1e-9
    feasibility_tol: float = 1e-7
    pivot_rule: PivotRule = "dantzig"
    degenerate_limit: int = 50
    big_m: float | None = Field(default=None, gt=0)
    big_m_scale: float = 1e6
    time_limit: float | None = None


class LPSolution(BaseModel):
    status: Status
    objective_value: Optional[float]
    x: Dict[str, float] | None
    iterations: int
    message: str = ""
