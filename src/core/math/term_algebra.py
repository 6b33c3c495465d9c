"""
Term Algebra — Операции над разреженным представлением полинома

Полином одной переменной хранится как отображение степень → коэффициент:
    {0: 3.0, 1: 4.0, 2: -5.0}  ≡  3 + 4x - 5x^2

Модуль содержит чистые функции над такими отображениями:
- Вычисление значения в точке
- Производная
- Сложение с очисткой почти нулевых коэффициентов
- Очистка и сортировка термов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные отображения никогда не изменяются, всегда возвращается новый dict
2. x^0 == 1 для любого x, включая x == 0
3. Переполнение x^d даёт знаковую бесконечность, а не исключение
4. Производная константы отбрасывается, а не хранится как нулевой терм
5. После сложения нет термов с abs(c) < EPS_COEFF_ZERO

ФОРМУЛЫ:
    P(x) = Σ c_d · x^d
    P'(x) = Σ_{d>0} (d · c_d) · x^(d-1)
    (P + Q)_d = P_d + Q_d,  отсутствующий терм == 0
"""

import logging
import math
from typing import Mapping

from src.core.math.numerical_safeguards import EPS_COEFF_ZERO, is_negligible

logger = logging.getLogger(__name__)


# =============================================================================
# ВЫЧИСЛЕНИЕ
# =============================================================================


def _power(x: float, degree: int) -> float:
    """x ** degree; при переполнении float возвращает inf со знаком x^degree."""
    try:
        return x ** degree
    except OverflowError:
        if x < 0 and degree % 2:
            return -math.inf
        return math.inf


def evaluate_terms(terms: Mapping[int, float], x: float) -> float:
    """
    Значение полинома в точке x.

    Используется float-арифметика; 0.0 ** 0 == 1.0, поэтому свободный член
    корректно учитывается и при x == 0. Переполнение степени даёт
    ±inf (как и обычная float-арифметика), исключение не поднимается.

    Args:
        terms: Отображение степень → коэффициент
        x: Точка вычисления

    Returns:
        Σ coefficient * x ** degree (0.0 для пустого полинома)

    Examples:
        >>> evaluate_terms({0: 3.0, 1: 4.0, 2: -5.0}, 2.0)
        -9.0
        >>> evaluate_terms({0: 7.0}, 0.0)
        7.0
    """
    x = float(x)
    result = 0.0
    for degree, coefficient in terms.items():
        coefficient = float(coefficient)
        if coefficient == 0.0:
            continue
        result += coefficient * _power(x, degree)
    return result


# =============================================================================
# ПРОИЗВОДНАЯ
# =============================================================================


def derive_terms(terms: Mapping[int, float]) -> dict[int, float]:
    """
    Производная полинома.

    Каждый терм c·x^d с d > 0 даёт терм (c·d)·x^(d-1).
    Термы степени 0 исчезают.

    Args:
        terms: Отображение степень → коэффициент

    Returns:
        Новое отображение для производной (пустое для константы)

    Examples:
        >>> derive_terms({0: 3.0, 1: 4.0, 2: -5.0})
        {0: 4.0, 1: -10.0}
        >>> derive_terms({0: 42.0})
        {}
    """
    derivative: dict[int, float] = {}
    for degree, coefficient in terms.items():
        if degree > 0:
            derivative[degree - 1] = coefficient * degree
    return derivative


# =============================================================================
# СЛОЖЕНИЕ И ОЧИСТКА
# =============================================================================


def sort_terms(terms: Mapping[int, float]) -> dict[int, float]:
    """Копия отображения, упорядоченная по возрастанию степени."""
    return dict(sorted(terms.items()))


def clean_terms(terms: Mapping[int, float], eps: float = EPS_COEFF_ZERO) -> dict[int, float]:
    """
    Удаление термов с пренебрежимо малыми коэффициентами.

    Args:
        terms: Отображение степень → коэффициент
        eps: Порог отбрасывания (abs(c) < eps)

    Returns:
        Новое отображение без шумовых термов, порядок сохраняется
    """
    cleaned = {
        degree: coefficient
        for degree, coefficient in terms.items()
        if not is_negligible(coefficient, eps)
    }
    dropped = len(terms) - len(cleaned)
    if dropped:
        logger.debug("Dropped %d negligible term(s) below eps=%g", dropped, eps)
    return cleaned


def add_terms(
    first: Mapping[int, float],
    second: Mapping[int, float],
    eps: float = EPS_COEFF_ZERO,
) -> dict[int, float]:
    """
    Сумма двух полиномов.

    Для каждой степени, присутствующей хотя бы в одном слагаемом, коэффициент
    результата равен сумме коэффициентов (отсутствующий терм == 0). Затем
    удаляются термы с abs(c) < eps, результат упорядочен по степени.

    Args:
        first: Первое слагаемое
        second: Второе слагаемое
        eps: Порог отбрасывания после сокращения

    Returns:
        Новое отображение степень → коэффициент

    Examples:
        >>> add_terms({0: 1.0, 1: 2.0}, {1: -2.0, 2: 3.0})
        {0: 1.0, 2: 3.0}
    """
    combined = dict(first)
    for degree, coefficient in second.items():
        if degree in combined:
            combined[degree] += coefficient
        else:
            combined[degree] = coefficient

    return sort_terms(clean_terms(combined, eps))


def leading_degree(terms: Mapping[int, float], eps: float = EPS_COEFF_ZERO) -> int:
    """
    Старшая степень с непренебрежимым коэффициентом.

    Returns:
        Максимальная степень или -1 для нулевого полинома
    """
    degrees = [d for d, c in terms.items() if not is_negligible(c, eps)]
    return max(degrees) if degrees else -1
