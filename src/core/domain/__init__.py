"""
Domain models and value objects.

Contains the Polynomial model over a sparse degree → coefficient mapping.
"""

from src.core.domain.polynomial import Polynomial

__all__ = [
    "Polynomial",
]
