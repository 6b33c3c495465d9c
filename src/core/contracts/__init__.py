"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных полиномов.
"""

from .validators import (
    POLYNOMIAL_SCHEMA_VERSION,
    ContractValidator,
    PolynomialValidator,
    SchemaLoader,
    validate_polynomial,
)

__all__ = [
    # Constants
    "POLYNOMIAL_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PolynomialValidator",
    # Functions
    "validate_polynomial",
]
