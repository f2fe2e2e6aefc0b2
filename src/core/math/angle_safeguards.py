"""
Angle Safeguards — Safe Circular Math Primitives

Модуль обеспечивает численную устойчивость операций над углами на окружности
(период 2π, каноничный диапазон (-π, π]):
- Каноникализация точки разрыва: -π → +π
- Проверка предусловий для угловых аргументов (|p| <= π, не NaN/Inf)
- Численно стабильное прямое (против часовой стрелки) расстояние
- Остаток по модулю 2π в стиле IEEE remainder

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение -π никогда не возвращается как каноничная точка (всегда +π)
2. positive_distance не теряет точность вблизи шва ±π
3. NaN/Inf никогда не принимаются как валидный угол
4. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Полуокружность и полная окружность (радианы)
PI: Final[float] = math.pi
TWO_PI: Final[float] = 2 * math.pi

# Машинный epsilon для double
# Используется как допуск на ошибку округления в 1 бит при вычислении концов
DBL_EPSILON: Final[float] = sys.float_info.epsilon

# Допуск по умолчанию для приближённого сравнения интервалов
DEFAULT_MAX_ERROR: Final[float] = 1e-15


# =============================================================================
# ВАЛИДАЦИЯ УГЛОВ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_valid_angle(value: float) -> bool:
    """
    Проверка, лежит ли угол в замкнутом диапазоне [-π, π].

    Examples:
        >>> is_valid_angle(math.pi)
        True
        >>> is_valid_angle(-math.pi)
        True
        >>> is_valid_angle(3.5)
        False
        >>> is_valid_angle(float('nan'))
        False
    """
    return is_valid_float(value) and abs(value) <= PI


def validate_angle(value: float, name: str) -> None:
    """
    Валидация углового аргумента публичной операции.

    Нарушение предусловия является ошибкой программиста, а не runtime-сбоем,
    поэтому ошибка не перехватывается внутри модуля.

    Args:
        value: Проверяемый угол (радианы)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf или |value| > π
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if abs(value) > PI:
        raise ValueError(f"{name} must be in [-pi, pi], got {value}")


# =============================================================================
# КАНОНИКАЛИЗАЦИЯ
# =============================================================================


def canonicalize_angle(value: float) -> float:
    """
    Замена -π на +π (обе величины обозначают одну точку окружности).

    Функция не проверяет диапазон: вызывающий код обязан выполнить
    validate_angle заранее.

    Examples:
        >>> canonicalize_angle(-math.pi) == math.pi
        True
        >>> canonicalize_angle(1.0)
        1.0
    """
    if value == -PI:
        return PI
    return value


def antipodal_angle(value: float) -> float:
    """
    Противоположная точка окружности в диапазоне (-π, π].

    Examples:
        >>> antipodal_angle(0.0) == math.pi
        True
        >>> antipodal_angle(math.pi)
        0.0
    """
    return value + PI if value <= 0 else value - PI


# =============================================================================
# ЦИРКУЛЯРНЫЕ РАССТОЯНИЯ
# =============================================================================


def positive_distance(a: float, b: float) -> float:
    """
    Расстояние от a до b против часовой стрелки в диапазоне [0, 2π).

    Эквивалентно remainder(b - a - π, 2π) + π, но не теряет точность
    для очень малых положительных расстояний.

    Если b == π и a == -π + eps, результат ≈ 2π, а не 0.

    Args:
        a: Начальная точка (радианы, [-π, π])
        b: Конечная точка (радианы, [-π, π])

    Returns:
        Неотрицательное прямое расстояние

    Examples:
        >>> positive_distance(1.0, 2.0)
        1.0
        >>> positive_distance(3.0, -3.0) == (-3.0 + math.pi) - (3.0 - math.pi)
        True
    """
    d = b - a
    if d >= 0:
        return d
    return (b + PI) - (a - PI)


def remainder_two_pi(value: float) -> float:
    """
    IEEE remainder по модулю 2π: результат в [-π, π].

    Examples:
        >>> remainder_two_pi(0.5)
        0.5
        >>> abs(remainder_two_pi(2 * math.pi + 0.5) - 0.5) < 1e-15
        True
    """
    return math.remainder(value, TWO_PI)
