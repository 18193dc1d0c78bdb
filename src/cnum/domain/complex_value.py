"""
ComplexValue — Модель комплексного значения

Immutable Pydantic модель (frozen=True) с двумя float-компонентами.
Любая операция возвращает новый экземпляр, операнды не изменяются.

Конструирование полиморфно по первому аргументу:
- ComplexValue(123, 78.9)             → числовые компоненты
- ComplexValue("123.456+78.9i")       → разбор текста (три нотации)
- ComplexValue("146.51482497004, 32.582405557983")
- ComplexValue("123 (cos 0 ° + i sin 0 °)")
"""

from pydantic import BaseModel, Field, field_validator

from src.cnum.math.angles import modulus, polar_to_rectangular, quadrant_degree
from src.cnum.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_exact_zero,
    is_valid_float,
)
from src.cnum.notation.formatter import (
    ComplexFormat,
    FormatterConfig,
    format_polar,
    format_polar_human,
    format_rectangular,
    resolve_format,
)
from src.cnum.notation.parser import ParserConfig, parse_complex


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """
    Деление на комплексный ноль: обе компоненты делителя точно равны 0.0.

    Attributes:
        dividend: Делимое
        divisor: Делитель (нулевой)
    """

    def __init__(self, dividend: "ComplexValue", divisor: "ComplexValue"):
        self.dividend = dividend
        self.divisor = divisor
        super().__init__(f"Division by zero: {dividend} / {divisor}")


# =============================================================================
# COMPLEX VALUE MODEL
# =============================================================================


class ComplexValue(BaseModel):
    """
    Комплексное значение real + imaginary·i.

    Immutable модель (frozen=True): изменение компонент невозможно,
    арифметика создаёт новый экземпляр. Равенство — по значению обеих
    компонент.
    """

    real: float = Field(0.0, description="Вещественная часть")
    imaginary: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    def __init__(
        self,
        real: float | str | bytes | None = 0.0,
        imaginary: float | None = None,
        **data,
    ):
        if isinstance(real, (str, bytes)):
            if imaginary is not None:
                raise TypeError("imaginary cannot be combined with a text representation")
            real, imaginary = parse_complex(real)

        super().__init__(real=real, imaginary=imaginary, **data)

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def coerce_missing_component(cls, v):
        """Отсутствующая компонента (None) считается нулём."""
        if v is None:
            return 0.0
        return v

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str | bytes, config: ParserConfig | None = None) -> "ComplexValue":
        """
        Разбор текста с явной конфигурацией парсера.

        Raises:
            ParseError: если ни одна нотация не подошла
        """
        real, imaginary = parse_complex(text, config)
        return cls(real, imaginary)

    @classmethod
    def from_polar(cls, modulus_value: float, degree: float) -> "ComplexValue":
        """Значение по модулю и углу в градусах."""
        real, imaginary = polar_to_rectangular(modulus_value, degree)
        return cls(real, imaginary)

    @classmethod
    def from_complex(cls, value: complex) -> "ComplexValue":
        """Значение из встроенного complex."""
        return cls(value.real, value.imag)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_real(self) -> float:
        """Вещественная часть."""
        return self.real

    def get_imaginary(self) -> float:
        """Мнимая часть."""
        return self.imaginary

    def modulus(self) -> float:
        """Модуль: sqrt(real² + imaginary²)."""
        return modulus(self.real, self.imaginary)

    def degree(self) -> float:
        """Полярный угол в градусах, [0, 360)."""
        return quadrant_degree(self.real, self.imaginary)

    def get_modulus(self) -> float:
        """Алиас modulus()."""
        return self.modulus()

    def get_degree(self) -> float:
        """Алиас degree()."""
        return self.degree()

    def is_close(
        self,
        other: "ComplexValue",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью."""
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def to_text(self, config: FormatterConfig | None = None) -> str:
        """Прямоугольная нотация: "123+78.9i", "-987.654-32.1i"."""
        return format_rectangular(self.real, self.imaginary, config)

    def format(
        self,
        kind: ComplexFormat | str = ComplexFormat.RECTANGULAR,
        config: FormatterConfig | None = None,
    ) -> str:
        """
        Вывод в выбранной нотации.

        Args:
            kind: "rectangular", "polar", "polarHuman"; любое другое значение
                  → rectangular
            config: Конфигурация вывода (опционально)

        Returns:
            Текстовое представление
        """
        notation = resolve_format(kind)

        if notation is ComplexFormat.POLAR:
            return format_polar(self.modulus(), self.degree(), config)
        if notation is ComplexFormat.POLAR_HUMAN:
            return format_polar_human(self.modulus(), self.degree(), config)
        return self.to_text(config)

    def __str__(self) -> str:
        return self.to_text()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.to_text()
        return self.format(format_spec)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "ComplexValue") -> "ComplexValue":
        """Покомпонентная сумма."""
        return ComplexValue(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: "ComplexValue") -> "ComplexValue":
        """Покомпонентная разность."""
        return ComplexValue(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: "ComplexValue") -> "ComplexValue":
        """
        Произведение:
            real = r1·r2 − i1·i2
            imaginary = i1·r2 + r1·i2
        """
        real = self.real * other.real - self.imaginary * other.imaginary
        imaginary = self.imaginary * other.real + self.real * other.imaginary
        return ComplexValue(real, imaginary)

    def divide(self, other: "ComplexValue") -> "ComplexValue":
        """
        Частное:
            real = (r1·r2 + i1·i2) / (r2² + i2²)
            imaginary = (i1·r2 − r1·i2) / (r2² + i2²)

        Если r2² + i2² не представим (underflow в 0 или overflow в inf),
        делитель предварительно масштабируется на max(|r2|, |i2|).

        Raises:
            DivisionByZeroError: если обе компоненты делителя точно 0.0
        """
        if is_exact_zero(other.real) and is_exact_zero(other.imaginary):
            raise DivisionByZeroError(self, other)

        divisor_real, divisor_imaginary = other.real, other.imaginary
        scale = 1.0
        denominator = divisor_real**2 + divisor_imaginary**2
        representable = not is_exact_zero(denominator) and is_valid_float(denominator)
        if not representable and is_valid_float(divisor_real) and is_valid_float(divisor_imaginary):
            scale = max(abs(divisor_real), abs(divisor_imaginary))
            divisor_real, divisor_imaginary = divisor_real / scale, divisor_imaginary / scale
            denominator = divisor_real**2 + divisor_imaginary**2

        real = (self.real * divisor_real + self.imaginary * divisor_imaginary) / denominator / scale
        imaginary = (self.imaginary * divisor_real - self.real * divisor_imaginary) / denominator / scale
        return ComplexValue(real, imaginary)

    def __add__(self, other):
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self.divide(other)
