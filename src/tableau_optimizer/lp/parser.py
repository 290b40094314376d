import re
from collections import OrderedDict
from typing import Dict, List, Tuple

from ..schemas import Constraint, Equal, GreaterEqual, LessEqual, LPModel, Variable

_OBJECTIVE = re.compile(r"^(maximize|minimize|max|min)\s*(.*)$", re.IGNORECASE)
_COMPARATOR = re.compile(r"(<=|>=|==|=)")
_MULTI_BOUND = re.compile(
    r"^([A-Za-z_][\w]*(?:\s*,\s*[A-Za-z_][\w]*)+)\s*(<=|>=)\s*(-?\d+(?:\.\d+)?)$"
)
_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
# sign, optional magnitude, variable name
_TERM_PATTERN = re.compile(r"([+-]?)\s*(" + _NUMBER + r")?\s*([A-Za-z_]\w*)")
_NUMBER_PATTERN = re.compile(r"[+-]?\s*" + _NUMBER)

_RELATIONS = {"<=": LessEqual, ">=": GreaterEqual, "==": Equal, "=": Equal}


def parse_natural_language_spec(spec: str) -> LPModel:
    """
    Small rule-based parser for compact statements like:
      "maximize 3x + 2y subject to 2x + y <= 18, 2x + 3y <= 42, 3x + y <= 24, x,y >= 0"

    ``x,y >= 0`` lists declare non-negativity (the default), ``x,y <= U`` lists
    set upper bounds; every other row becomes a named constraint c1, c2, ...
    """

    if not spec or not spec.strip():
        raise ValueError("Specification is empty.")

    normalized = " ".join(spec.replace("\n", " ").split())
    pieces = re.split(r"subject to|such that|s\.t\.", normalized, flags=re.IGNORECASE)
    objective_part = pieces[0].strip()
    constraints_part = pieces[1].strip() if len(pieces) > 1 else ""

    match = _OBJECTIVE.match(objective_part)
    if not match:
        raise ValueError("Objective must start with 'maximize' or 'minimize'.")
    sense = "max" if match.group(1).lower().startswith("max") else "min"
    objective_text = match.group(2).strip()
    if not objective_text:
        raise ValueError("Objective expression is missing.")

    objective, objective_constant = _parse_linear_expr(objective_text)
    model = LPModel(name="parsed", sense=sense, objective_constant=objective_constant)
    for var_name, coef in objective.items():
        model.add_variable(Variable(name=var_name, lb=0.0, objective=coef))

    for token in _split_constraints(constraints_part):
        multi = _MULTI_BOUND.match(token)
        if multi:
            _apply_bound_list(model, *multi.groups())
            continue

        comp_match = _COMPARATOR.search(token)
        if not comp_match:
            raise ValueError(f"Could not parse constraint segment '{token}'.")
        lhs_str = token[: comp_match.start()].strip()
        rhs_str = token[comp_match.end() :].strip()
        if not lhs_str or not rhs_str:
            raise ValueError(f"Incomplete constraint expression '{token}'.")
        coefficients, constant = _parse_linear_expr(lhs_str)
        try:
            rhs_value = float(rhs_str)
        except ValueError as exc:
            raise ValueError(f"Right-hand side '{rhs_str}' is not numeric.") from exc

        name = f"c{len(model.constraints) + 1}"
        relation = _RELATIONS[comp_match.group(1)](rhs=rhs_value - constant)
        model.add_constraint(Constraint(name=name, relation=relation, coefficients=dict(coefficients)))
        for var_name in coefficients:
            if var_name not in model.variables:
                model.add_variable(Variable(name=var_name, lb=0.0))

    return model


def _split_constraints(text: str) -> List[str]:
    """Split on ';' / 'and' / ',' while keeping 'x, y >= 0' lists together."""
    tokens: List[str] = []
    if not text:
        return tokens
    chunks = [chunk.strip() for chunk in re.split(r";|\band\b", text, flags=re.IGNORECASE) if chunk.strip()]
    for chunk in chunks:
        buffer: List[str] = []
        for piece in [piece.strip() for piece in chunk.split(",") if piece.strip()]:
            buffer.append(piece)
            candidate = ", ".join(buffer)
            if _COMPARATOR.search(candidate):
                tokens.append(candidate)
                buffer.clear()
        if buffer:
            raise ValueError(f"Could not parse constraint segment '{', '.join(buffer)}'.")
    return tokens


def _apply_bound_list(model: LPModel, names: str, cmp: str, rhs_text: str) -> None:
    rhs_value = float(rhs_text)
    for var_name in [name.strip() for name in names.split(",") if name.strip()]:
        var = model.variables.get(var_name)
        if var is None:
            var = Variable(name=var_name, lb=0.0)
            model.add_variable(var)
        if cmp == "<=":
            var.ub = rhs_value if var.ub is None else min(var.ub, rhs_value)
        elif rhs_value != 0.0:
            name = f"c{len(model.constraints) + 1}"
            model.add_constraint(
                Constraint(name=name, relation=GreaterEqual(rhs=rhs_value), coefficients={var_name: 1.0})
            )


def _parse_linear_expr(expr_str: str) -> Tuple[Dict[str, float], float]:
    expr_clean = expr_str.replace("*", " ")
    coeffs: OrderedDict[str, float] = OrderedDict()

    for match in _TERM_PATTERN.finditer(expr_clean):
        sign, magnitude, var_name = match.groups()
        coef = float(magnitude) if magnitude else 1.0
        if sign == "-":
            coef = -coef
        coeffs[var_name] = coeffs.get(var_name, 0.0) + coef

    remaining = _TERM_PATTERN.sub(" ", expr_clean)
    constant = 0.0
    for num_match in _NUMBER_PATTERN.finditer(remaining):
        constant += float(num_match.group(0).replace(" ", ""))
    leftover = _NUMBER_PATTERN.sub(" ", remaining)
    if leftover.strip(" +-"):
        raise ValueError(f"Could not parse expression '{expr_str}'.")

    terms = OrderedDict((name, coef) for name, coef in coeffs.items() if abs(coef) > 1e-12)
    return terms, constant

