"""
Domain models and value objects.

Contains the ComplexValue value object and its errors.
"""

from src.cnum.domain.complex_value import ComplexValue, DivisionByZeroError
from src.cnum.notation.parser import ParseError

__all__ = [
    "ComplexValue",
    "DivisionByZeroError",
    "ParseError",
]
