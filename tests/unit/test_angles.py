"""
Тесты для модуля Angles

Проверяет:
1. Модуль комплексного значения
2. Полярный угол по квадрантам и на осях
3. Конверсию полярных координат в прямоугольные
"""

import math

import pytest

from src.cnum.math.angles import modulus, polar_to_rectangular, quadrant_degree


class TestModulus:
    """Тесты для modulus"""

    def test_pythagorean_triple(self) -> None:
        """3-4-5"""
        assert modulus(3.0, 4.0) == 5.0

    def test_zero(self) -> None:
        assert modulus(0.0, 0.0) == 0.0

    def test_sign_independent(self) -> None:
        """Модуль не зависит от знаков компонент"""
        assert modulus(-3.0, -4.0) == modulus(3.0, 4.0)

    def test_reference_value(self) -> None:
        assert modulus(123.456, 78.9) == pytest.approx(146.51482497004, abs=1e-10)


class TestQuadrantDegree:
    """Тесты для quadrant_degree: квадранты и поведение на осях"""

    def test_positive_imaginary_axis_exact(self) -> None:
        """(0, 5) → ровно 90"""
        assert quadrant_degree(0.0, 5.0) == 90.0

    def test_negative_imaginary_axis_exact(self) -> None:
        """(0, -5) → ровно 270"""
        assert quadrant_degree(0.0, -5.0) == 270.0

    def test_origin_exact(self) -> None:
        """(0, 0) → ровно 0"""
        assert quadrant_degree(0.0, 0.0) == 0.0

    def test_positive_real_axis(self) -> None:
        """(5, 0) → 0 (квадрант I)"""
        assert quadrant_degree(5.0, 0.0) == 0.0

    def test_negative_real_axis(self) -> None:
        """(-5, 0) → 180 (ветка квадранта II, не III)"""
        assert quadrant_degree(-5.0, 0.0) == 180.0
        assert quadrant_degree(-5.0, -0.0) == 180.0

    @pytest.mark.parametrize(
        "real, imaginary, expected",
        [
            (1.0, 1.0, 45.0),
            (-1.0, 1.0, 135.0),
            (-1.0, -1.0, 225.0),
            (1.0, -1.0, 315.0),
            (123.456, 78.9, 32.582405557983),
            (-987.654, -32.1, 181.86152977919),
        ],
    )
    def test_quadrants(self, real: float, imaginary: float, expected: float) -> None:
        """Угол в каждом квадранте"""
        assert quadrant_degree(real, imaginary) == pytest.approx(expected, abs=1e-10)

    def test_range(self) -> None:
        """Угол всегда в [0, 360)"""
        for step in range(0, 360, 15):
            radians = math.radians(step + 0.5)
            degree = quadrant_degree(math.cos(radians), math.sin(radians))
            assert 0.0 <= degree < 360.0
            assert degree == pytest.approx(step + 0.5, abs=1e-9)

    def test_nan_component(self) -> None:
        """NaN в компоненте → NaN"""
        assert math.isnan(quadrant_degree(float("nan"), 1.0))
        assert math.isnan(quadrant_degree(1.0, float("nan")))


class TestPolarToRectangular:
    """Тесты для polar_to_rectangular"""

    def test_zero_angle_exact(self) -> None:
        """Угол 0 → (modulus, 0) точно"""
        assert polar_to_rectangular(123.0, 0.0) == (123.0, 0.0)

    def test_right_angle(self) -> None:
        real, imaginary = polar_to_rectangular(1.0, 90.0)
        assert real == pytest.approx(0.0, abs=1e-12)
        assert imaginary == pytest.approx(1.0)

    def test_reference_value(self) -> None:
        """146.51482497004, 32.582405557983 → (123.456, 78.9)"""
        real, imaginary = polar_to_rectangular(146.51482497004, 32.582405557983)
        assert real == pytest.approx(123.456, abs=1e-9)
        assert imaginary == pytest.approx(78.9, abs=1e-9)

    def test_inverse_of_quadrant_degree(self) -> None:
        """Инвариант: (modulus, degree) → (re, im) возвращает исходное значение"""
        for real, imaginary in [(3.0, -4.0), (-0.5, 0.25), (-2.0, -7.0)]:
            back = polar_to_rectangular(modulus(real, imaginary), quadrant_degree(real, imaginary))
            assert back[0] == pytest.approx(real, abs=1e-12)
            assert back[1] == pytest.approx(imaginary, abs=1e-12)
