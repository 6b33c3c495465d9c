"""
Тесты для сессии работы с полиномами

Проверяет:
1. compute(): четыре значения по текстовому вводу
2. Фатальную ошибку формата для точки x
3. Интерактивный сценарий с подменой ввода/вывода
4. CLI main()
"""

import math

import pytest

from src.core.domain import Polynomial
from src.core.parsing import InvalidEvaluationPoint
from src.session import (
    EXIT_INPUT_ERROR,
    EXIT_OK,
    EvaluationReport,
    PolynomialSession,
    SessionConfig,
    format_report,
)
from src.session import cli


class ScriptedInput:
    """Подмена input(): выдаёт заранее заданные строки."""

    def __init__(self, *lines: str):
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def session() -> PolynomialSession:
    return PolynomialSession()


# =============================================================================
# COMPUTE
# =============================================================================


class TestCompute:
    """Тесты compute()"""

    def test_four_values(self, session: PolynomialSession) -> None:
        report = session.compute("3x^0 + 4x^1 - 5x^2", "x^2 - x^0", "2")

        assert isinstance(report, EvaluationReport)
        assert report.x == 2.0
        assert report.first_value == pytest.approx(-9.0)
        assert report.second_value == pytest.approx(3.0)
        assert report.sum_value == pytest.approx(-6.0)
        # 4 - 10x at x = 2
        assert report.derivative_value == pytest.approx(-16.0)

    def test_polynomials_in_report(self, session: PolynomialSession) -> None:
        report = session.compute("3x^0 + 4x^1 - 5x^2", "x^2 - x^0", "2")

        assert report.total.terms == {0: 2.0, 1: 4.0, 2: -4.0}
        assert report.first_derivative.terms == {0: 4.0, 1: -10.0}

    def test_cancelling_sum(self, session: PolynomialSession) -> None:
        report = session.compute("1x^0 + 2x^1", "-2x^1 + 3x^2", "1")

        assert report.total.terms == {0: 1.0, 2: 3.0}
        assert report.sum_value == pytest.approx(4.0)

    def test_unparseable_polynomials_are_zero(self, session: PolynomialSession) -> None:
        report = session.compute("nonsense", "", "5")

        assert report.first_value == 0.0
        assert report.second_value == 0.0
        assert report.sum_value == 0.0
        assert report.derivative_value == 0.0

    def test_evaluate_at_zero(self, session: PolynomialSession) -> None:
        report = session.compute("7x^0 + x^3", "x^0", "0")

        assert report.first_value == 7.0
        assert report.sum_value == 8.0
        assert report.derivative_value == 0.0

    def test_overflowing_power_gives_infinity(self, session: PolynomialSession) -> None:
        """10^400 вне диапазона float: значения inf, сессия не падает"""
        report = session.compute("x^400", "x^0", "10")

        assert report.first_value == math.inf
        assert report.second_value == 1.0
        assert report.sum_value == math.inf
        assert report.derivative_value == math.inf

    def test_bad_point_is_fatal(self, session: PolynomialSession) -> None:
        with pytest.raises(InvalidEvaluationPoint):
            session.compute("x^1", "x^2", "two")

    def test_config_eps_used_for_sum(self) -> None:
        session = PolynomialSession(SessionConfig(cleanup_eps=0.01))
        report = session.evaluate(Polynomial({0: 1.0}), Polynomial({0: -0.999}), 1.0)
        assert report.total.terms == {}


# =============================================================================
# INTERACTIVE
# =============================================================================


class TestRunInteractive:
    """Тесты run_interactive()"""

    def test_successful_run(self, session: PolynomialSession) -> None:
        read_line = ScriptedInput("3x^0 + 4x^1 - 5x^2", "x^2 - x^0", "2")
        output: list[str] = []

        code = session.run_interactive(read_line, output.append)

        assert code == EXIT_OK
        assert output[0] == SessionConfig().header
        assert "Results:" in output
        assert output[-4:] == [
            "First polynomial at x = 2.0: -9.0",
            "Second polynomial at x = 2.0: 3.0",
            "Sum of polynomials at x = 2.0: -6.0",
            "Derivative of the first polynomial at x = 2.0: -16.0",
        ]

    def test_prompts_in_order(self, session: PolynomialSession) -> None:
        read_line = ScriptedInput("x^1", "x^2", "1")
        session.run_interactive(read_line, lambda line: None)

        cfg = SessionConfig()
        assert read_line.prompts == [
            cfg.polynomial_prompt,
            cfg.polynomial_prompt,
            cfg.point_prompt,
        ]

    def test_bad_point_reports_error(self, session: PolynomialSession) -> None:
        output: list[str] = []

        code = session.run_interactive(ScriptedInput("x^1", "x^2", "abc"), output.append)

        assert code == EXIT_INPUT_ERROR
        assert output[-1].startswith("Error: Invalid evaluation point 'abc'")
        assert "Results:" not in output

    def test_overflow_reported_as_inf(self, session: PolynomialSession) -> None:
        output: list[str] = []

        code = session.run_interactive(ScriptedInput("x^400", "x^0", "10"), output.append)

        assert code == EXIT_OK
        assert output[-4] == "First polynomial at x = 10.0: inf"
        assert output[-1] == "Derivative of the first polynomial at x = 10.0: inf"

    def test_input_ends_early(self, session: PolynomialSession) -> None:
        output: list[str] = []

        code = session.run_interactive(ScriptedInput("x^1"), output.append)

        assert code == EXIT_INPUT_ERROR
        assert output[-1].startswith("Error:")

    def test_custom_prompts(self) -> None:
        config = SessionConfig(header="Manejo de polinomios", point_prompt="x = ")
        read_line = ScriptedInput("x^1", "x^1", "3")
        output: list[str] = []

        PolynomialSession(config).run_interactive(read_line, output.append)

        assert output[0] == "Manejo de polinomios"
        assert read_line.prompts[-1] == "x = "


class TestFormatReport:
    """Тесты format_report()"""

    def test_lines(self, session: PolynomialSession) -> None:
        lines = format_report(session.compute("x^1", "x^0", "0.5"))
        assert lines[1] == "Results:"
        assert lines[2] == "First polynomial at x = 0.5: 0.5"
        assert len(lines) == 6


# =============================================================================
# CLI
# =============================================================================


class TestCli:
    """Тесты cli.main()"""

    def test_main_success(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("builtins.input", ScriptedInput("3x^0 + 4x^1 - 5x^2", "x^2", "2"))

        code = cli.main([])

        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "First polynomial at x = 2.0: -9.0" in out

    def test_main_bad_point(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("builtins.input", ScriptedInput("x^1", "x^2", "oops"))

        code = cli.main(["--log-level", "ERROR"])

        assert code == EXIT_INPUT_ERROR
        assert "Invalid evaluation point" in capsys.readouterr().out

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            cli.main(["--log-level", "LOUD"])
