"""
Numerical Safeguards — Float-примитивы для комплексных значений

Модуль обеспечивает численную корректность операций над компонентами:
- Проверка конечности float (NaN/Inf)
- Epsilon-сравнения float с учётом машинной точности
- Нормализация отрицательного нуля перед выводом в текст
- Точная проверка нуля для защиты деления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль определяется ТОЧНЫМ сравнением с 0.0 (без epsilon)
2. Отрицательный ноль никогда не попадает в текстовое представление
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений (значения около нуля,
# например cos(90°) * modulus)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-9


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_exact_zero(value: float) -> bool:
    """
    Точная проверка на ноль (0.0 и -0.0).

    Используется как guard деления: малые ненулевые значения НЕ считаются
    нулём, в отличие от is_close с толерантностью.

    Examples:
        >>> is_exact_zero(0.0)
        True
        >>> is_exact_zero(-0.0)
        True
        >>> is_exact_zero(1e-300)
        False
    """
    return value == 0.0


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-9)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 6.123233995736766e-17)
        True
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel={rel_tol}, abs={abs_tol}")

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_zero(value: float) -> float:
    """
    Замена -0.0 на 0.0.

    Знак нуля не несёт смысла для текстового вывода: "0-0i" и "-0+0i"
    должны печататься как "0+0i".

    Examples:
        >>> normalize_zero(-0.0)
        0.0
        >>> normalize_zero(-1.5)
        -1.5
    """
    if value == 0.0:
        return 0.0
    return value
