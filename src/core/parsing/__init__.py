"""
Text parsing of polynomials.

Permissive term parsing, strict evaluation point parsing and formatting
back to the parser's input syntax.
"""

from src.core.parsing.term_parser import (
    TERM_PATTERN,
    ZERO_POLYNOMIAL_TEXT,
    InvalidEvaluationPoint,
    format_terms,
    parse_evaluation_point,
    parse_terms,
)

__all__ = [
    # Constants
    "TERM_PATTERN",
    "ZERO_POLYNOMIAL_TEXT",
    # Exceptions
    "InvalidEvaluationPoint",
    # Functions
    "format_terms",
    "parse_evaluation_point",
    "parse_terms",
]
