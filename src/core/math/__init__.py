"""
Core math modules

Чистые функции над разреженными термами полинома и epsilon-защиты.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_COEFF_ZERO,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_negligible,
)

# Term Algebra
from src.core.math.term_algebra import (
    add_terms,
    clean_terms,
    derive_terms,
    evaluate_terms,
    leading_degree,
    sort_terms,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_COEFF_ZERO",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_negligible",
    # Term Algebra
    "add_terms",
    "clean_terms",
    "derive_terms",
    "evaluate_terms",
    "leading_degree",
    "sort_terms",
]
