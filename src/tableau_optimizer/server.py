from mcp.server.fastmcp import FastMCP
from .schemas import LPModel, SolveOptions
from .lp.simplex import simplex_solve
from .lp.parser import parse_natural_language_spec
from .lp.diagnostics import analyze_infeasibility as analyze_infeasibility_model

mcp = FastMCP("Tableau Optimizer")


@mcp.tool()
def solve_lp(model: LPModel, options: SolveOptions | None = None) -> dict:
    "Solve a linear program via the Big-M tableau simplex and return the solution dict."
    opts = options or SolveOptions()
    return simplex_solve(model, opts).model_dump()


@mcp.tool()
def parse_nl_to_lp(spec: str) -> dict:
    "Parse a small natural-language spec into a structured LPModel JSON."
    return parse_natural_language_spec(spec).model_dump()


@mcp.tool()
def analyze_infeasibility(model: LPModel) -> dict:
    "Return basic infeasibility diagnostics (drop-one-constraint heuristic)."
    return analyze_infeasibility_model(model)


if __name__ == "__main__":
    # Allow: `uv run mcp dev src/tableau_optimizer/server.py` or pack as stdio/http via CLI
    mcp.run()
