"""
Numerical Safeguards — Epsilon-защиты для коэффициентов полиномов

Модуль обеспечивает численную устойчивость операций над термами:
- Порог отбрасывания почти нулевых коэффициентов после сложения
- NaN/Inf проверки для точки вычисления
- Epsilon-порог для коэффициентов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Коэффициент c пренебрежимо мал тогда и только тогда, когда abs(c) < eps (строго)
2. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог отбрасывания коэффициентов после сложения полиномов
# abs(c) < EPS_COEFF_ZERO → терм удаляется как шум от сокращения float
EPS_COEFF_ZERO: Final[float] = 1e-10


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_negligible(value: float, eps: float = EPS_COEFF_ZERO) -> bool:
    """
    Проверка, можно ли отбросить коэффициент как численный шум.

    Сравнение строгое: abs(value) < eps. Значение, равное eps, сохраняется.

    Args:
        value: Коэффициент терма
        eps: Порог отбрасывания (default: EPS_COEFF_ZERO)

    Returns:
        True если abs(value) < eps

    Raises:
        ValueError: Если eps не положительный

    Examples:
        >>> is_negligible(0.0)
        True
        >>> is_negligible(1e-11)
        True
        >>> is_negligible(1e-10)
        False
        >>> is_negligible(-3.0)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(value) < eps

