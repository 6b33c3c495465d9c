"""
Interactive polynomial session.

Reads two polynomials and an evaluation point, prints the values of both
polynomials, their sum and the first polynomial's derivative.
"""

from src.session.polynomial_session import (
    EXIT_INPUT_ERROR,
    EXIT_OK,
    EvaluationReport,
    PolynomialSession,
    SessionConfig,
    format_report,
)

__all__ = [
    "EXIT_INPUT_ERROR",
    "EXIT_OK",
    "EvaluationReport",
    "PolynomialSession",
    "SessionConfig",
    "format_report",
]
