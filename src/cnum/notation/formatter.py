"""
Formatter — Текстовые представления комплексного значения

Нотации:
- rectangular: "{real}+{imaginary}i" / "{real}{imaginary}i"
- polar:       "{modulus}, {degree}"
- polarHuman:  "{modulus}(cos {degree} ° + i sin {degree} °)"

Числа печатаются с 14 значащими цифрами без хвостовых нулей и всегда
позиционно, без экспоненты:
123.0 → "123", 146.514824970040... → "146.51482497004", 1e-7 → "0.0000001".
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Final

from src.cnum.math.numerical_safeguards import is_valid_float, normalize_zero

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Количество значащих цифр при выводе float
DEFAULT_PRECISION: Final[int] = 14

DEFAULT_DEGREE_SYMBOL: Final[str] = "°"


# =============================================================================
# ENUMS
# =============================================================================


class ComplexFormat(str, Enum):
    """Текстовая нотация комплексного значения"""

    RECTANGULAR = "rectangular"
    POLAR = "polar"
    POLAR_HUMAN = "polarHuman"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatterConfig:
    """Конфигурация вывода.

    Параметры печати чисел и полярной нотации.
    """

    # Значащие цифры (округление "%.{precision}G", вывод без экспоненты)
    precision: int = DEFAULT_PRECISION

    # Знак градуса в polarHuman
    degree_symbol: str = DEFAULT_DEGREE_SYMBOL

    def __post_init__(self):
        if self.precision < 1:
            raise ValueError(f"precision must be positive, got {self.precision}")


# =============================================================================
# NUMBERS
# =============================================================================


def format_number(value: float, config: FormatterConfig | None = None) -> str:
    """
    Минимальное десятичное представление float.

    Args:
        value: Значение
        config: Конфигурация (default: FormatterConfig())

    Returns:
        Строка: "123", "-987.654", "0.00000015", "INF", "NAN"

    Examples:
        >>> format_number(123.0)
        '123'
        >>> format_number(146.51482497004003)
        '146.51482497004'
        >>> format_number(-0.0)
        '0'
        >>> format_number(1e20)
        '100000000000000000000'
    """
    config = config or FormatterConfig()

    if not is_valid_float(value):
        if value != value:
            return "NAN"
        return "INF" if value > 0 else "-INF"

    # Округление до precision значащих цифр, затем раскрытие экспоненты
    rounded = Decimal(f"{normalize_zero(value):.{config.precision}G}")
    return format(rounded, "f")


# =============================================================================
# NOTATIONS
# =============================================================================


def format_rectangular(real: float, imaginary: float, config: FormatterConfig | None = None) -> str:
    """
    "{real}+{imaginary}i" при imaginary >= 0, иначе "{real}{imaginary}i".

    Знак отрицательной мнимой части несёт само число.
    """
    real_text = format_number(real, config)
    imaginary_text = format_number(imaginary, config)

    if imaginary >= 0:
        return f"{real_text}+{imaginary_text}i"
    return f"{real_text}{imaginary_text}i"


def format_polar(modulus: float, degree: float, config: FormatterConfig | None = None) -> str:
    """Полярная нотация: "{modulus}, {degree}"."""
    return f"{format_number(modulus, config)}, {format_number(degree, config)}"


def format_polar_human(modulus: float, degree: float, config: FormatterConfig | None = None) -> str:
    """Тригонометрическая нотация: "{modulus}(cos {degree} ° + i sin {degree} °)"."""
    config = config or FormatterConfig()
    modulus_text = format_number(modulus, config)
    degree_text = format_number(degree, config)
    symbol = config.degree_symbol
    return f"{modulus_text}(cos {degree_text} {symbol} + i sin {degree_text} {symbol})"


def resolve_format(kind: ComplexFormat | str | None) -> ComplexFormat:
    """
    Нотация по имени.

    Неизвестное имя — не ошибка: используется RECTANGULAR.
    """
    if isinstance(kind, ComplexFormat):
        return kind

    try:
        return ComplexFormat(kind)
    except ValueError:
        logger.debug("Unknown format kind %r, falling back to rectangular", kind)
        return ComplexFormat.RECTANGULAR
