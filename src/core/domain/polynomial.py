"""
Polynomial — Модель полинома одной переменной

Immutable Pydantic модель над разреженным отображением степень → коэффициент.
Все операции (вычисление, производная, сложение) возвращают новые значения,
исходный экземпляр никогда не изменяется.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping

from pydantic import BaseModel, Field, field_serializer, field_validator

from src.core.contracts.validators import POLYNOMIAL_SCHEMA_VERSION, validate_polynomial
from src.core.math.numerical_safeguards import EPS_COEFF_ZERO
from src.core.math.term_algebra import (
    add_terms,
    clean_terms,
    derive_terms,
    evaluate_terms,
    leading_degree,
)
from src.core.parsing.term_parser import format_terms, parse_terms


# =============================================================================
# POLYNOMIAL MODEL
# =============================================================================


class Polynomial(BaseModel):
    """
    Модель полинома.

    Immutable модель (frozen=True). Отображение термов копируется при
    создании и хранится как read-only MappingProxyType: ни переприсваивание
    поля, ни запись по ключу невозможны; семантическая валидация не выполняется
    (корректность степеней — ответственность вызывающего кода).

    Examples:
        >>> p = Polynomial({0: 3.0, 1: 4.0, 2: -5.0})
        >>> p.evaluate(2.0)
        -9.0
        >>> p.derivative().get_terms()
        {0: 4.0, 1: -10.0}
    """

    terms: Mapping[int, float] = Field(
        default_factory=dict,
        validate_default=True,
        description="Отображение степень → коэффициент",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("terms", mode="after")
    @classmethod
    def freeze_terms(cls, v: Mapping[int, float]) -> Mapping[int, float]:
        """Read-only представление собственной копии термов."""
        return MappingProxyType(dict(v))

    @field_serializer("terms")
    def dump_terms(self, terms: Mapping[int, float]) -> Dict[int, float]:
        return dict(terms)

    def __init__(self, terms: Mapping[int, float] | None = None, **data: Any):
        if terms is not None:
            data["terms"] = dict(terms)
        super().__init__(**data)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> "Polynomial":
        """Полином из текста вида '3x^0 + 4x^1 - 5x^2' (разрешающий разбор)."""
        return cls(parse_terms(text))

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "Polynomial":
        """
        Полином из JSON контракта.

        Args:
            data: Документ {"schema_version": "1", "terms": [...]}

        Returns:
            Новый Polynomial; при повторе степени побеждает последний терм

        Raises:
            ValidationError: Если документ не соответствует схеме polynomial
        """
        validate_polynomial(data)
        return cls({term["degree"]: term["coefficient"] for term in data["terms"]})

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def get_terms(self) -> Dict[int, float]:
        """Копия отображения термов."""
        return dict(self.terms)

    def evaluate(self, x: float) -> float:
        """
        Значение полинома в точке x.

        Returns:
            Σ coefficient * x ** degree; x^0 == 1 при любом x
        """
        return evaluate_terms(self.terms, x)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def derivative(self) -> "Polynomial":
        """
        Производная полинома.

        Термы степени 0 исчезают; производная константы — пустой полином.
        """
        return Polynomial(derive_terms(self.terms))

    def add(self, other: "Polynomial", eps: float = EPS_COEFF_ZERO) -> "Polynomial":
        """
        Сумма полиномов с удалением термов abs(c) < eps.

        Returns:
            Новый Polynomial с термами по возрастанию степени
        """
        return Polynomial(add_terms(self.terms, other.terms, eps))

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def cleaned(self, eps: float = EPS_COEFF_ZERO) -> "Polynomial":
        """Копия без пренебрежимо малых коэффициентов."""
        return Polynomial(clean_terms(self.terms, eps))

    @property
    def degree(self) -> int:
        """Старшая степень с непренебрежимым коэффициентом (-1 для нуля)."""
        return leading_degree(self.terms)

    def is_zero(self) -> bool:
        return self.degree < 0

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON контракт полинома.

        Returns:
            {"schema_version": "1", "terms": [{"degree": d, "coefficient": c}, ...]}
            с термами по возрастанию степени
        """
        return {
            "schema_version": POLYNOMIAL_SCHEMA_VERSION,
            "terms": [
                {"degree": degree, "coefficient": coefficient}
                for degree, coefficient in sorted(self.terms.items())
            ],
        }

    def __str__(self) -> str:
        return format_terms(self.terms)
