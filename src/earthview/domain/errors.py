# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Domain error types.

Degenerate orbital input and solver failures are reported explicitly
instead of leaking NaN or a partially converged value.
"""


class EarthviewError(Exception):
    """Base class for all earthview domain errors."""


class DegenerateOrbitError(EarthviewError, ValueError):
    """Orbital state or elements outside the closed-ellipse domain.

    Raised for e >= 1, non-positive semi-major axis, zero position or
    zero angular momentum.
    """


class ConvergenceError(EarthviewError, ArithmeticError):
    """Iterative solver exhausted its iteration budget."""

    def __init__(self, solver: str, iterations: int, residual: float):
        self.solver = solver
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f"{solver} did not converge after {iterations} iterations "
            f"(residual={residual:.3e})"
        )
