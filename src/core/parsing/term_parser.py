"""
Term Parser — Текстовое представление полинома

Разбор и форматирование строк вида:
    3x^0 + 4x^1 - 5x^2
    x^2 - x^0
    -2.5x^3 + .5x^1

Разбор намеренно разрешающий:
- Ищутся только фрагменты, совпадающие с шаблоном терма
- Всё остальное (лишние символы, битые термы) молча пропускается
- Коэффициент, не помещающийся в конечный float, пропускается вместе с термом
- Повторная степень перезаписывает предыдущую (последнее совпадение побеждает)

Точка вычисления x, напротив, разбирается строго: нечисловой ввод является
фатальной ошибкой формата и поднимает InvalidEvaluationPoint.
"""

import logging
import re
from decimal import Decimal
from typing import Final, Mapping

from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)


# =============================================================================
# ШАБЛОН ТЕРМА
# =============================================================================

# Необязательный знак, необязательный десятичный коэффициент, затем x^<степень>
TERM_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<coefficient>[-+]?\s*\d*\.?\d*)x\^(?P<degree>\d+)"
)

# Текст полинома без термов
ZERO_POLYNOMIAL_TEXT: Final[str] = "0x^0"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidEvaluationPoint(ValueError):
    """
    Точка вычисления не является конечным числом.

    Фатальное условие формата ввода: вычисление не выполняется,
    значение по умолчанию не подставляется.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid evaluation point {text!r}: {reason}")


# =============================================================================
# РАЗБОР
# =============================================================================


def _coefficient_from_text(raw: str) -> float | None:
    """
    Интерпретация текста коэффициента.

    Пробелы между знаком и цифрами удаляются. Пустой текст и '+' дают 1.0,
    '-' даёт -1.0. Текст, не являющийся числом (например, '-.'), даёт None.
    """
    compact = "".join(raw.split())

    if compact in ("", "+"):
        return 1.0
    if compact == "-":
        return -1.0

    try:
        return float(compact)
    except ValueError:
        return None


def parse_terms(text: str) -> dict[int, float]:
    """
    Разбор текста в отображение степень → коэффициент.

    Термы с нечитаемым коэффициентом и с коэффициентом, переполняющим float
    (например, 400 цифр подряд), пропускаются.

    Args:
        text: Произвольная строка с термами вида [знак][коэффициент]x^<степень>

    Returns:
        Отображение степень → коэффициент (пустое, если термов нет)

    Examples:
        >>> parse_terms("3x^0 + 4x^1 - 5x^2")
        {0: 3.0, 1: 4.0, 2: -5.0}
        >>> parse_terms("x^2 - x^0")
        {2: 1.0, 0: -1.0}
        >>> parse_terms("2x^1 + 7x^1")
        {1: 7.0}
    """
    terms: dict[int, float] = {}

    for match in TERM_PATTERN.finditer(text or ""):
        coefficient = _coefficient_from_text(match.group("coefficient"))
        if coefficient is None:
            logger.debug("Skipping term with unreadable coefficient: %r", match.group(0))
            continue
        if not is_valid_float(coefficient):
            logger.debug("Skipping term with non-finite coefficient: %r", match.group(0)[:40])
            continue

        degree = int(match.group("degree"))
        if degree in terms:
            logger.debug(
                "Degree %d repeated, %r replaces coefficient %r",
                degree,
                coefficient,
                terms[degree],
            )
        terms[degree] = coefficient

    logger.debug("Parsed %d term(s) from %r", len(terms), text)
    return terms


def parse_evaluation_point(text: str) -> float:
    """
    Строгий разбор точки вычисления x.

    Args:
        text: Строка с числом (пробелы по краям допускаются)

    Returns:
        Значение x как float

    Raises:
        InvalidEvaluationPoint: Пустой ввод, не число, NaN или Inf
    """
    stripped = (text or "").strip()
    if not stripped:
        raise InvalidEvaluationPoint(text, "value is empty")

    try:
        value = float(stripped)
    except ValueError as e:
        raise InvalidEvaluationPoint(text, "not a number") from e

    if not is_valid_float(value):
        raise InvalidEvaluationPoint(text, "value must be finite")

    return value


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _positional(value: float) -> str:
    """Кратчайшая точная запись float без экспоненты: 1e-05 → '0.00001'."""
    return format(Decimal(repr(value)), "f")


def format_terms(terms: Mapping[int, float]) -> str:
    """
    Форматирование термов в синтаксисе, который принимает parse_terms.

    Коэффициенты выводятся в позиционной записи по цифрам repr(float), без
    экспоненты, поэтому parse_terms(format_terms(t)) восстанавливает конечные
    коэффициенты без потери точности.

    Examples:
        >>> format_terms({2: -5.0, 0: 3.0, 1: 4.0})
        '3.0x^0 + 4.0x^1 - 5.0x^2'
        >>> format_terms({})
        '0x^0'
    """
    if not terms:
        return ZERO_POLYNOMIAL_TEXT

    parts: list[str] = []
    for degree, coefficient in sorted(terms.items()):
        coefficient = float(coefficient)
        magnitude = _positional(abs(coefficient))
        if not parts:
            sign = "-" if coefficient < 0 else ""
            parts.append(f"{sign}{magnitude}x^{degree}")
        else:
            sign = "-" if coefficient < 0 else "+"
            parts.append(f"{sign} {magnitude}x^{degree}")

    return " ".join(parts)
