"""
Grammars — Распознавание трёх текстовых нотаций комплексного значения

Каждая грамматика — независимый matcher: получает строку и возвращает
GrammarMatch либо None. Порядок применения задаёт ComplexParser.

Нотации:
- RECTANGULAR:  "123.456+78.9i", "456 -0i"
- POLAR:        "146.51482497004, 32.582405557983", "456, 0°", "123 0"
- POLAR_HUMAN:  "123 (cos 0 ° + i sin 0 °)", "789.012x  (i sin 0 ° + cos 0 °)"

Числовой токен: цифры с необязательной дробной частью ("123", "123.456").
"123." и ".5" числами НЕ являются.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.cnum.math.angles import polar_to_rectangular
from src.cnum.math.numerical_safeguards import is_valid_float
from src.cnum.notation.formatter import ComplexFormat

# =============================================================================
# TOKENS
# =============================================================================

NUMBER_PATTERN = r"\d+(?:\.\d+)?"

DEGREE_SYMBOL = "°"

# UTF-8 байты знака градуса, прочитанные как Latin-1
MOJIBAKE_DEGREE_SYMBOL = "Â°"

# Знак умножения между модулем и скобкой, между "i" и "sin"
MULTIPLY_PATTERN = r"[*x]?"


def degree_symbol_pattern(accept_mojibake: bool = True) -> str:
    """Regex для знака градуса (с учётом mojibake-формы "Â°")."""
    if accept_mojibake:
        return f"Â?{DEGREE_SYMBOL}"
    return DEGREE_SYMBOL


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class GrammarMatch:
    """Результат успешного распознавания строки одной из грамматик."""

    notation: ComplexFormat
    real: float
    imaginary: float

    # Только для полярных нотаций
    modulus: float | None = None
    degree: float | None = None


# =============================================================================
# BASE
# =============================================================================


class Grammar(ABC):
    """Базовый matcher нотации."""

    notation: ComplexFormat

    @abstractmethod
    def match(self, text: str) -> GrammarMatch | None:
        """Распознать строку целиком; None если строка не подходит."""


def _polar_match(notation: ComplexFormat, modulus_text: str, degree_text: str) -> GrammarMatch | None:
    modulus_value = float(modulus_text)
    degree = float(degree_text)

    # Токен из сотен цифр переполняется в inf: cos/sin от него не определены
    if not (is_valid_float(modulus_value) and is_valid_float(degree)):
        return None

    real, imaginary = polar_to_rectangular(modulus_value, degree)
    return GrammarMatch(
        notation=notation,
        real=real,
        imaginary=imaginary,
        modulus=modulus_value,
        degree=degree,
    )


# =============================================================================
# RECTANGULAR
# =============================================================================


class RectangularGrammar(Grammar):
    """
    <real><sign><imaginary>i

    Знак второго числа обязателен ("123 0i" отклоняется), пробелы вокруг
    знака допустимы ("123 + 0i").
    """

    notation = ComplexFormat.RECTANGULAR

    _PATTERN = re.compile(
        rf"""
        \s*
        (?P<real>[+-]?{NUMBER_PATTERN})
        \s*
        (?P<sign>[+-])
        \s*
        (?P<imaginary>{NUMBER_PATTERN})
        \s*i\s*
        """,
        re.VERBOSE,
    )

    def match(self, text: str) -> GrammarMatch | None:
        found = self._PATTERN.fullmatch(text)
        if found is None:
            return None

        return GrammarMatch(
            notation=self.notation,
            real=float(found.group("real")),
            imaginary=float(found.group("sign") + found.group("imaginary")),
        )


# =============================================================================
# POLAR
# =============================================================================


class PolarGrammar(Grammar):
    """
    <modulus>[,]<whitespace><degree>[°]

    Модуль и угол неотрицательны (допустим только "+"). После запятой
    пробел обязателен: "456,0°" отклоняется.
    """

    notation = ComplexFormat.POLAR

    def __init__(self, accept_mojibake_degree: bool = True):
        degree_symbol = degree_symbol_pattern(accept_mojibake_degree)
        self._pattern = re.compile(
            rf"""
            \s*
            (?P<modulus>\+?{NUMBER_PATTERN})
            ,?\s+
            (?P<degree>\+?{NUMBER_PATTERN})
            (?:\s*{degree_symbol})?
            \s*
            """,
            re.VERBOSE,
        )

    def match(self, text: str) -> GrammarMatch | None:
        found = self._pattern.fullmatch(text)
        if found is None:
            return None

        return _polar_match(self.notation, found.group("modulus"), found.group("degree"))


# =============================================================================
# POLAR HUMAN
# =============================================================================


class PolarHumanGrammar(Grammar):
    """
    <modulus>[*x](cos <degree> + i sin <degree>), слагаемые в любом порядке.

    Каждый угол может быть в собственных (парных) скобках и со знаком
    градуса. Оба угла обязаны совпадать: по значению (default) или
    текстуально при strict_degree_text=True.
    """

    notation = ComplexFormat.POLAR_HUMAN

    def __init__(self, accept_mojibake_degree: bool = True, strict_degree_text: bool = False):
        self.strict_degree_text = strict_degree_text
        degree_symbol = degree_symbol_pattern(accept_mojibake_degree)

        def angle(n: int) -> str:
            return (
                rf"(?P<open{n}>\()?\s*"
                rf"(?P<degree{n}>\+?{NUMBER_PATTERN})\s*"
                rf"(?:{degree_symbol}\s*)?"
                rf"(?(open{n})\))"
            )

        def cos_term(n: int) -> str:
            return rf"cos\s*{angle(n)}"

        def sin_term(n: int) -> str:
            return rf"i\s*{MULTIPLY_PATTERN}\s*sin\s*{angle(n)}"

        def body(first: str, second: str) -> str:
            return (
                rf"\s*(?P<modulus>\+?{NUMBER_PATTERN})\s*{MULTIPLY_PATTERN}\s*"
                rf"\(\s*{first}\s*\+\s*{second}\s*\)\s*"
            )

        self._patterns = (
            re.compile(body(cos_term(1), sin_term(2))),
            re.compile(body(sin_term(1), cos_term(2))),
        )

    def _same_degree(self, first: str, second: str) -> bool:
        if self.strict_degree_text:
            return first == second
        return float(first) == float(second)

    def match(self, text: str) -> GrammarMatch | None:
        for pattern in self._patterns:
            found = pattern.fullmatch(text)
            if found is None:
                continue

            first, second = found.group("degree1"), found.group("degree2")
            if not self._same_degree(first, second):
                return None

            return _polar_match(self.notation, found.group("modulus"), first)

        return None
