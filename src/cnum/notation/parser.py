"""
Parser — Разбор текста в компоненты комплексного значения

Грамматики применяются в фиксированном порядке, побеждает первая
подошедшая:
1. RectangularGrammar
2. PolarGrammar
3. PolarHumanGrammar

Если ни одна грамматика не подошла → ParseError. Значение по умолчанию
(ноль) НИКОГДА не подставляется.

Вход может быть str или bytes. Bytes декодируются как UTF-8, при ошибке —
как Latin-1, поэтому знак градуса принимается и однобайтовым (0xB0), и
двухбайтовым (0xC2 0xB0).
"""

import logging
from dataclasses import dataclass

from src.cnum.notation.grammars import (
    Grammar,
    GrammarMatch,
    PolarGrammar,
    PolarHumanGrammar,
    RectangularGrammar,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(ValueError):
    """
    Строка не соответствует ни одной из поддерживаемых нотаций.

    Attributes:
        text: Исходный вход (str или bytes) без изменений
    """

    def __init__(self, text: str | bytes):
        self.text = text
        super().__init__(f"Cannot parse complex value from {text!r}")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация парсера.

    Параметры допустимости нотаций.
    """

    # polarHuman: требовать текстуального совпадения двух углов
    # (иначе достаточно численного равенства: "0" == "0.0")
    strict_degree_text: bool = False

    # Принимать "Â°" (UTF-8 знак градуса, прочитанный как Latin-1)
    accept_mojibake_degree: bool = True


# =============================================================================
# PARSER
# =============================================================================


def decode_text(text: str | bytes) -> str:
    """Привести вход к str: UTF-8, затем Latin-1 для одиночных байтов."""
    if isinstance(text, str):
        return text

    try:
        return text.decode("utf-8")
    except UnicodeDecodeError:
        return text.decode("latin-1")


class ComplexParser:
    """Разбор текста упорядоченной цепочкой грамматик."""

    def __init__(self, config: ParserConfig | None = None):
        """Инициализация парсера.

        Args:
            config: конфигурация парсера (опционально, используется default)
        """
        self.config = config or ParserConfig()
        self.grammars: tuple[Grammar, ...] = (
            RectangularGrammar(),
            PolarGrammar(accept_mojibake_degree=self.config.accept_mojibake_degree),
            PolarHumanGrammar(
                accept_mojibake_degree=self.config.accept_mojibake_degree,
                strict_degree_text=self.config.strict_degree_text,
            ),
        )

    def match(self, text: str | bytes) -> GrammarMatch:
        """
        Структурированный результат разбора.

        Args:
            text: Исходная строка

        Returns:
            GrammarMatch первой подошедшей грамматики

        Raises:
            ParseError: если ни одна грамматика не подошла
        """
        decoded = decode_text(text)

        for grammar in self.grammars:
            result = grammar.match(decoded)
            if result is not None:
                logger.debug("Parsed %r as %s", decoded, result.notation.value)
                return result

        logger.debug("No notation matches %r", decoded)
        raise ParseError(text)

    def parse(self, text: str | bytes) -> tuple[float, float]:
        """Разбор текста в пару (real, imaginary)."""
        result = self.match(text)
        return (result.real, result.imaginary)


_DEFAULT_PARSER = ComplexParser()


def parse_complex(text: str | bytes, config: ParserConfig | None = None) -> tuple[float, float]:
    """
    Разбор текста в пару (real, imaginary).

    Args:
        text: Строка в одной из нотаций
        config: Конфигурация (опционально)

    Returns:
        (real, imaginary)

    Raises:
        ParseError: если ни одна нотация не подошла

    Examples:
        >>> parse_complex("123.456+78.9i")
        (123.456, 78.9)
        >>> parse_complex("123 (cos 0 ° + i sin 0 °)")
        (123.0, 0.0)
    """
    parser = _DEFAULT_PARSER if config is None else ComplexParser(config)
    return parser.parse(text)
