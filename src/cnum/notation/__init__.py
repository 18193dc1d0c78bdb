"""
Notation — разбор и вывод текстовых представлений комплексного значения.
"""

from src.cnum.notation.formatter import (
    DEFAULT_DEGREE_SYMBOL,
    DEFAULT_PRECISION,
    ComplexFormat,
    FormatterConfig,
    format_number,
    format_polar,
    format_polar_human,
    format_rectangular,
    resolve_format,
)
from src.cnum.notation.grammars import (
    DEGREE_SYMBOL,
    MOJIBAKE_DEGREE_SYMBOL,
    Grammar,
    GrammarMatch,
    PolarGrammar,
    PolarHumanGrammar,
    RectangularGrammar,
)
from src.cnum.notation.parser import (
    ComplexParser,
    ParseError,
    ParserConfig,
    decode_text,
    parse_complex,
)

__all__ = [
    # Formatter
    "DEFAULT_DEGREE_SYMBOL",
    "DEFAULT_PRECISION",
    "ComplexFormat",
    "FormatterConfig",
    "format_number",
    "format_polar",
    "format_polar_human",
    "format_rectangular",
    "resolve_format",
    # Grammars
    "DEGREE_SYMBOL",
    "MOJIBAKE_DEGREE_SYMBOL",
    "Grammar",
    "GrammarMatch",
    "PolarGrammar",
    "PolarHumanGrammar",
    "RectangularGrammar",
    # Parser
    "ComplexParser",
    "ParseError",
    "ParserConfig",
    "decode_text",
    "parse_complex",
]
