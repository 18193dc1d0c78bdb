"""
Angles — Модуль и полярный угол комплексного значения

Все углы на границе модуля выражены в градусах, радианы используются
только внутри тригонометрии.

Полярный угол вычисляется явным разбором квадрантов (без atan2), так как
поведение на осях фиксировано:
    real == 0:            90 (im > 0), 270 (im < 0), 0 (im == 0)
    I   (re > 0, im >= 0): t
    II  (re < 0, im >= 0): 180 - t
    III (re < 0, im <= 0): 180 + t
    IV  (re > 0, im <= 0): 360 - t
где t = degrees(atan(|im| / |re|)).
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEGREES_HALF_TURN: Final[float] = 180.0
DEGREES_FULL_TURN: Final[float] = 360.0
DEGREES_POSITIVE_IMAGINARY_AXIS: Final[float] = 90.0
DEGREES_NEGATIVE_IMAGINARY_AXIS: Final[float] = 270.0


# =============================================================================
# МОДУЛЬ
# =============================================================================


def modulus(real: float, imaginary: float) -> float:
    """
    Модуль комплексного значения: sqrt(real² + imaginary²).

    Examples:
        >>> modulus(3.0, 4.0)
        5.0
    """
    return math.sqrt(real**2 + imaginary**2)


# =============================================================================
# ПОЛЯРНЫЙ УГОЛ
# =============================================================================


def quadrant_degree(real: float, imaginary: float) -> float:
    """
    Полярный угол в градусах в диапазоне [0, 360).

    Ноль на мнимой оси (imaginary == 0) принадлежит одновременно ветке
    ">= 0" и "<= 0"; первой проверяется ветка ">= 0", поэтому отрицательная
    вещественная полуось даёт 180, а не 180 + 0.

    Args:
        real: Вещественная часть
        imaginary: Мнимая часть

    Returns:
        Угол в градусах

    Examples:
        >>> quadrant_degree(0.0, 5.0)
        90.0
        >>> quadrant_degree(0.0, -5.0)
        270.0
        >>> quadrant_degree(-1.0, 0.0)
        180.0
    """
    if real == 0:
        if imaginary > 0:
            return DEGREES_POSITIVE_IMAGINARY_AXIS
        if imaginary < 0:
            return DEGREES_NEGATIVE_IMAGINARY_AXIS
        return 0.0

    t = math.degrees(math.atan(abs(imaginary) / abs(real)))

    if real > 0 and imaginary >= 0:
        return t
    if real < 0 and imaginary >= 0:
        return DEGREES_HALF_TURN - t
    if real < 0 and imaginary <= 0:
        return DEGREES_HALF_TURN + t
    if real > 0 and imaginary <= 0:
        return DEGREES_FULL_TURN - t

    # NaN в одной из компонент: ни один квадрант не подходит
    return math.nan


# =============================================================================
# ПОЛЯРНЫЕ → ПРЯМОУГОЛЬНЫЕ
# =============================================================================


def polar_to_rectangular(modulus_value: float, degree: float) -> tuple[float, float]:
    """
    Конверсия (модуль, угол в градусах) → (real, imaginary).

    Args:
        modulus_value: Модуль
        degree: Угол в градусах

    Returns:
        (modulus·cos(rad), modulus·sin(rad))
    """
    radians = math.radians(degree)
    return (modulus_value * math.cos(radians), modulus_value * math.sin(radians))
