from __future__ import annotations

import logging

LOGGER = logging.getLogger("tableau_optimizer.simplex")


class SolverObserver:
    """
    Receives diagnostic events from the simplex solver.

    Every hook is a no-op here; subclass and override the ones you need.
    Hooks only ever see plain values, never the tableau itself.
    """

    def on_solver_created(self, model_name: str) -> None:
        pass

    def on_iteration_started(self, iteration: int, objective_value: float) -> None:
        pass

    def on_iteration_completed(
        self, iteration: int, objective_value: float, entering: int, leaving_row: int
    ) -> None:
        pass

    def on_warning(self, message: str) -> None:
        pass


class LoggingObserver(SolverObserver):
    """Forwards solver events to the ``tableau_optimizer.simplex`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or LOGGER

    def on_solver_created(self, model_name: str) -> None:
        self.logger.debug("Creating a simplex solver for model '%s'", model_name)

    def on_iteration_started(self, iteration: int, objective_value: float) -> None:
        self.logger.debug("Iteration %d: current value = %s", iteration, objective_value)

    def on_iteration_completed(
        self, iteration: int, objective_value: float, entering: int, leaving_row: int
    ) -> None:
        self.logger.debug(
            "Iteration %d: column %d entered at row %d, value = %s",
            iteration,
            entering,
            leaving_row,
            objective_value,
        )

    def on_warning(self, message: str) -> None:
        self.logger.warning(message)
