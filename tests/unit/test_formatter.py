"""
Тесты для Formatter

Проверяет:
1. Печать чисел (14 значащих цифр, без хвостовых нулей)
2. Три нотации: rectangular, polar, polarHuman
3. Разрешение имени нотации (неизвестное → rectangular)
4. Конфигурацию вывода
"""

import logging

import pytest

from src.cnum.notation.formatter import (
    ComplexFormat,
    FormatterConfig,
    format_number,
    format_polar,
    format_polar_human,
    format_rectangular,
    resolve_format,
)


class TestFormatNumber:
    """Тесты format_number"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (123.0, "123"),
            (123.456, "123.456"),
            (-987.654, "-987.654"),
            (0.0, "0"),
            (-0.0, "0"),
            (0.1 + 0.2, "0.3"),
            (146.51482497004003, "146.51482497004"),
            (1e20, "100000000000000000000"),
            (1.5e-7, "0.00000015"),
            (-1e15, "-1000000000000000"),
            (5.729577951308232e-06, "0.0000057295779513082"),
        ],
    )
    def test_minimal_representation(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [1e20, 1e-7, 123456789012345678.0, 2.5e-300])
    def test_no_exponent(self, value: float) -> None:
        """Вывод всегда позиционный: грамматики не читают экспоненту"""
        assert "E" not in format_number(value).upper()

    def test_non_finite(self) -> None:
        assert format_number(float("inf")) == "INF"
        assert format_number(float("-inf")) == "-INF"
        assert format_number(float("nan")) == "NAN"

    def test_custom_precision(self) -> None:
        assert format_number(3.14159, FormatterConfig(precision=3)) == "3.14"


class TestNotations:
    """Тесты трёх нотаций"""

    @pytest.mark.parametrize(
        "real, imaginary, expected",
        [
            (123.0, 0.0, "123+0i"),
            (123.0, 78.9, "123+78.9i"),
            (-987.654, -32.1, "-987.654-32.1i"),
            (0.0, 1.0, "0+1i"),
            (0.0, -1.0, "0-1i"),
            (-987.654, -0.0, "-987.654+0i"),
        ],
    )
    def test_rectangular(self, real: float, imaginary: float, expected: str) -> None:
        """Знак отрицательной мнимой части несёт само число"""
        assert format_rectangular(real, imaginary) == expected

    def test_polar(self) -> None:
        assert format_polar(1.0, 270.0) == "1, 270"
        assert format_polar(987.654, 180.0) == "987.654, 180"

    def test_polar_human(self) -> None:
        assert format_polar_human(1.0, 90.0) == "1(cos 90 ° + i sin 90 °)"

    def test_polar_human_custom_symbol(self) -> None:
        config = FormatterConfig(degree_symbol="deg")
        assert format_polar_human(2.0, 45.0, config) == "2(cos 45 deg + i sin 45 deg)"


class TestResolveFormat:
    """Тесты resolve_format"""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("rectangular", ComplexFormat.RECTANGULAR),
            ("polar", ComplexFormat.POLAR),
            ("polarHuman", ComplexFormat.POLAR_HUMAN),
            (ComplexFormat.POLAR, ComplexFormat.POLAR),
        ],
    )
    def test_known_kinds(self, kind: str, expected: ComplexFormat) -> None:
        assert resolve_format(kind) is expected

    @pytest.mark.parametrize("kind", ["exponential", "POLAR", "", None])
    def test_unknown_falls_back_to_rectangular(self, kind: str | None) -> None:
        """Неизвестная нотация — не ошибка"""
        assert resolve_format(kind) is ComplexFormat.RECTANGULAR

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.cnum.notation.formatter"):
            resolve_format("exponential")
        assert "exponential" in caplog.text


class TestFormatterConfig:
    """Тесты FormatterConfig"""

    def test_defaults(self) -> None:
        config = FormatterConfig()
        assert config.precision == 14
        assert config.degree_symbol == "°"

    def test_invalid_precision_raises(self) -> None:
        with pytest.raises(ValueError, match="precision must be positive"):
            FormatterConfig(precision=0)
