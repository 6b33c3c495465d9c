"""Сессия работы с полиномами

Сценарий:
1. Чтение двух полиномов в текстовом виде (разрешающий разбор)
2. Чтение точки x (строгий разбор, нечисловой ввод фатален)
3. Сумма полиномов и производная первого
4. Вычисление четырёх значений в точке x:
   первый полином, второй полином, сумма, производная первого

Ввод/вывод передаются как функции, поэтому compute() полностью чистый,
а run_interactive() тестируется без терминала.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from src.core.domain.polynomial import Polynomial
from src.core.math.numerical_safeguards import EPS_COEFF_ZERO
from src.core.parsing.term_parser import InvalidEvaluationPoint, parse_evaluation_point

logger = logging.getLogger(__name__)

# Коды завершения
EXIT_OK = 0
EXIT_INPUT_ERROR = 1


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationReport:
    """Результат сессии."""

    x: float

    # Полиномы
    first: Polynomial
    second: Polynomial
    total: Polynomial
    first_derivative: Polynomial

    # Значения в точке x
    first_value: float
    second_value: float
    sum_value: float
    derivative_value: float


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация сессии.

    Тексты приглашений и порог очистки суммы.
    """

    header: str = "Polynomial toolkit"
    first_title: str = "First polynomial:"
    second_title: str = "Second polynomial:"
    polynomial_prompt: str = "Enter a polynomial (e.g. 3x^0 + 4x^1 - 5x^2): "
    point_prompt: str = "Enter the value of x to evaluate the polynomials at: "

    # Порог отбрасывания коэффициентов суммы
    cleanup_eps: float = EPS_COEFF_ZERO


# =============================================================================
# SESSION
# =============================================================================


class PolynomialSession:
    """Сессия: два полинома, одна точка, четыре значения."""

    def __init__(self, config: SessionConfig | None = None):
        """Инициализация сессии.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or SessionConfig()

    def compute(self, first_text: str, second_text: str, x_text: str) -> EvaluationReport:
        """Вычисление по текстовому вводу.

        Args:
            first_text: первый полином, например '3x^0 + 4x^1 - 5x^2'
            second_text: второй полином
            x_text: точка вычисления

        Returns:
            EvaluationReport с четырьмя значениями

        Raises:
            InvalidEvaluationPoint: если x_text не является конечным числом
        """
        first = Polynomial.from_text(first_text)
        second = Polynomial.from_text(second_text)
        x = parse_evaluation_point(x_text)
        return self.evaluate(first, second, x)

    def evaluate(self, first: Polynomial, second: Polynomial, x: float) -> EvaluationReport:
        """Вычисление по уже разобранным полиномам."""
        total = first.add(second, eps=self.config.cleanup_eps)
        first_derivative = first.derivative()

        logger.debug(
            "first=%s second=%s sum=%s d(first)/dx=%s", first, second, total, first_derivative
        )

        return EvaluationReport(
            x=x,
            first=first,
            second=second,
            total=total,
            first_derivative=first_derivative,
            first_value=first.evaluate(x),
            second_value=second.evaluate(x),
            sum_value=total.evaluate(x),
            derivative_value=first_derivative.evaluate(x),
        )

    def run_interactive(
        self,
        read_line: Callable[[str], str] | None = None,
        write_line: Callable[[str], None] | None = None,
    ) -> int:
        """Интерактивный сценарий.

        Args:
            read_line: функция чтения строки с приглашением (input)
            write_line: функция вывода строки (print)

        Returns:
            EXIT_OK или EXIT_INPUT_ERROR
        """
        read_line = read_line or input
        write_line = write_line or print
        cfg = self.config
        write_line(cfg.header)

        try:
            write_line(cfg.first_title)
            first_text = read_line(cfg.polynomial_prompt)
            write_line(cfg.second_title)
            second_text = read_line(cfg.polynomial_prompt)
            x_text = read_line(cfg.point_prompt)
        except EOFError:
            logger.error("Input ended before both polynomials and x were read")
            write_line("Error: input ended before all values were read")
            return EXIT_INPUT_ERROR

        try:
            report = self.compute(first_text, second_text, x_text)
        except InvalidEvaluationPoint as e:
            logger.error("Evaluation aborted: %s", e)
            write_line(f"Error: {e}")
            return EXIT_INPUT_ERROR

        for line in format_report(report):
            write_line(line)

        logger.info("Session finished at x=%s", report.x)
        return EXIT_OK


def format_report(report: EvaluationReport) -> list[str]:
    """Строки вывода результатов."""
    x = report.x
    return [
        "",
        "Results:",
        f"First polynomial at x = {x}: {report.first_value}",
        f"Second polynomial at x = {x}: {report.second_value}",
        f"Sum of polynomials at x = {x}: {report.sum_value}",
        f"Derivative of the first polynomial at x = {x}: {report.derivative_value}",
    ]
