"""
S1Interval — Замкнутый интервал на окружности

Интервал [lo, hi] на циклической координате с каноничным диапазоном (-π, π]
(углы, долготы). В отличие от линейного интервала может проходить через
точку разрыва ±π, поэтому имеет четыре формы:

| Форма     | Условие                     | Смысл                                   |
|-----------|-----------------------------|-----------------------------------------|
| Empty     | lo == π, hi == -π           | не содержит точек                       |
| Full      | lo == -π, hi == π           | содержит все точки                      |
| Inverted  | lo > hi (и не Empty)        | дуга от lo через ±π до hi               |
| Normal    | lo <= hi                    | дуга от lo до hi, не пересекающая ±π    |

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. -π <= lo <= π и -π <= hi <= π
2. -π используется только в парах Empty/Full; живая точка -π всегда
   хранится как +π
3. Форма выводится из концов, отдельного флага нет
4. Все операции чистые, кроме add_point (изменяет экземпляр на месте)

Два пути конструирования:
- S1Interval(lo, hi): валидация Pydantic + каноникализация -π → +π
- S1Interval.from_unchecked(lo, hi): model_construct без валидации,
  для концов, корректность которых уже доказана
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.angle_safeguards import (
    DBL_EPSILON,
    DEFAULT_MAX_ERROR,
    PI,
    antipodal_angle,
    canonicalize_angle,
    positive_distance,
    remainder_two_pi,
    validate_angle,
)

logger = logging.getLogger(__name__)


class S1Interval(BaseModel):
    """
    Интервал на единичной окружности.

    Mutable value-модель: add_point и прямое присваивание lo/hi изменяют
    экземпляр без валидации. Экземпляр безопасно читать из нескольких
    потоков, но мутация должна быть эксклюзивной.
    """

    lo: float = Field(..., ge=-PI, le=PI, allow_inf_nan=False, description="Начало дуги")
    hi: float = Field(..., ge=-PI, le=PI, allow_inf_nan=False, description="Конец дуги")

    def __init__(self, lo: float, hi: float) -> None:
        super().__init__(lo=lo, hi=hi)

    @field_validator("lo", "hi", mode="before")
    @classmethod
    def reject_non_numeric(cls, v: Any) -> Any:
        """
        Концы принимаются только как числа (int приводится к float).

        Строки и bool отклоняются до lax-приведения Pydantic.
        """
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"endpoint must be a real number, got {type(v).__name__}")
        return v

    @model_validator(mode="after")
    def canonicalize_wrap_point(self) -> "S1Interval":
        """
        Каноникализация -π → +π, кроме пар Empty/Full.

        S1Interval(-π, 0) хранится как [π, 0], S1Interval(0, -π) как [0, π],
        S1Interval(-π, -π) как [π, π].
        """
        lo, hi = self.lo, self.hi
        if lo == -PI and hi != PI:
            self.lo = PI
        if hi == -PI and lo != PI:
            self.hi = PI
        if not self.is_valid_point_pair(self.lo, self.hi):
            raise ValueError(f"invalid S1Interval endpoints: [{self.lo}, {self.hi}]")
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_unchecked(cls, lo: float, hi: float) -> "S1Interval":
        """Конструирование без валидации и каноникализации."""
        return cls.model_construct(lo=lo, hi=hi)

    @classmethod
    def empty(cls) -> "S1Interval":
        """Пустой интервал [π, -π]."""
        return cls.from_unchecked(PI, -PI)

    @classmethod
    def full(cls) -> "S1Interval":
        """Полный интервал [-π, π]."""
        return cls.from_unchecked(-PI, PI)

    @classmethod
    def from_point(cls, p: float) -> "S1Interval":
        """
        Вырожденный интервал [p, p].

        Raises:
            ValueError: Если |p| > π или p NaN/Inf
        """
        validate_angle(p, "p")
        p = canonicalize_angle(p)
        return cls.from_unchecked(p, p)

    @classmethod
    def from_point_pair(cls, p1: float, p2: float) -> "S1Interval":
        """
        Минимальный интервал, содержащий p1 и p2.

        Из двух дуг, соединяющих точки, выбирается более короткая:
        [p1, p2], если прямое расстояние от p1 до p2 <= π, иначе [p2, p1].
        Для длинной дуги вызывающий код берёт complement() явно.

        Raises:
            ValueError: Если |p1| > π или |p2| > π
        """
        validate_angle(p1, "p1")
        validate_angle(p2, "p2")
        p1 = canonicalize_angle(p1)
        p2 = canonicalize_angle(p2)
        if positive_distance(p1, p2) <= PI:
            return cls.from_unchecked(p1, p2)
        return cls.from_unchecked(p2, p1)

    # =========================================================================
    # ВАЛИДНОСТЬ И ДОСТУП К КОНЦАМ
    # =========================================================================

    @staticmethod
    def is_valid_point_pair(lo: float, hi: float) -> bool:
        """
        Проверка корректности пары концов.

        -π допустим только как lo в Full или как hi в Empty.
        """
        if abs(lo) > PI or abs(hi) > PI:
            return False
        if lo == -PI and hi != PI:
            return False
        if hi == -PI and lo != PI:
            return False
        return True

    def is_valid(self) -> bool:
        return self.is_valid_point_pair(self.lo, self.hi)

    def bounds(self) -> tuple[float, float]:
        return (self.lo, self.hi)

    def __getitem__(self, index: int) -> float:
        return self.bounds()[index]

    def __str__(self) -> str:
        return f"[{self.lo}, {self.hi}]"

    # =========================================================================
    # ФОРМА
    # =========================================================================

    @property
    def is_full(self) -> bool:
        return self.lo == -PI and self.hi == PI

    @property
    def is_empty(self) -> bool:
        return self.lo == PI and self.hi == -PI

    @property
    def is_inverted(self) -> bool:
        """True если lo > hi (включая Empty)."""
        return self.lo > self.hi

    def get_length(self) -> float:
        """
        Длина дуги в [0, 2π].

        Returns:
            hi - lo, приведённое в [0, 2π); Full → ровно 2π; Empty → -1
        """
        length = self.hi - self.lo
        if length >= 0:
            return length
        length += 2 * PI
        # Empty: lo - hi == 2π
        return length if length > 0 else -1.0

    def get_center(self) -> float:
        """Середина дуги в (-π, π]. Для Empty возвращает π."""
        center = 0.5 * (self.lo + self.hi)
        if not self.is_inverted:
            return center
        return antipodal_angle(center)

    def get_complement_center(self) -> float:
        """
        Середина дополнения.

        Для singleton дополнение это окружность без одной точки, центром
        считается противоположная точка.
        """
        if self.lo != self.hi:
            return self.complement().get_center()
        return antipodal_angle(self.hi)

    def complement(self) -> "S1Interval":
        """
        Дополнение [hi, lo].

        Обмен концов корректен для Empty/Full благодаря их представлению;
        singleton даёт Full.
        """
        if self.lo == self.hi:
            return self.full()
        return self.from_unchecked(self.hi, self.lo)

    # =========================================================================
    # ПРИНАДЛЕЖНОСТЬ ТОЧКИ
    # =========================================================================

    def fast_contains(self, p: float) -> bool:
        """
        contains(p) без проверки диапазона и каноникализации.

        p обязан быть уже в (-π, π].
        """
        if self.is_inverted:
            return (p >= self.lo or p <= self.hi) and not self.is_empty
        return self.lo <= p <= self.hi

    def contains(self, other: "float | S1Interval") -> bool:
        """
        Включение с границей: точка или интервал.

        Raises:
            ValueError: Если точка вне [-π, π]
            TypeError: Если аргумент не число и не S1Interval
        """
        if isinstance(other, S1Interval):
            return self._contains_interval(other)
        return self.fast_contains(self._checked_point(other))

    def __contains__(self, p: Any) -> bool:
        return self.contains(p)

    def interior_contains(self, other: "float | S1Interval") -> bool:
        """
        Включение во внутренность: точка или интервал.

        Full содержит во внутренности все точки, включая свои концы.
        """
        if isinstance(other, S1Interval):
            return self._interior_contains_interval(other)
        p = self._checked_point(other)
        if self.is_inverted:
            return p > self.lo or p < self.hi
        return (self.lo < p < self.hi) or self.is_full

    @staticmethod
    def _checked_point(p: Any) -> float:
        if isinstance(p, bool) or not isinstance(p, (int, float)):
            raise TypeError(f"expected a float angle or S1Interval, got {type(p).__name__}")
        validate_angle(p, "p")
        return canonicalize_angle(float(p))

    # =========================================================================
    # ПРИНАДЛЕЖНОСТЬ И ПЕРЕСЕЧЕНИЕ ИНТЕРВАЛОВ
    # =========================================================================

    def _contains_interval(self, y: "S1Interval") -> bool:
        if self.is_inverted:
            if y.is_inverted:
                return y.lo >= self.lo and y.hi <= self.hi
            return (y.lo >= self.lo or y.hi <= self.hi) and not self.is_empty
        if y.is_inverted:
            return self.is_full or y.is_empty
        return y.lo >= self.lo and y.hi <= self.hi

    def _interior_contains_interval(self, y: "S1Interval") -> bool:
        if self.is_inverted:
            if not y.is_inverted:
                return y.lo > self.lo or y.hi < self.hi
            return (y.lo > self.lo and y.hi < self.hi) or y.is_empty
        if y.is_inverted:
            return self.is_full or y.is_empty
        return (y.lo > self.lo and y.hi < self.hi) or self.is_full

    def intersects(self, y: "S1Interval") -> bool:
        """True если интервалы имеют общую точку."""
        if self.is_empty or y.is_empty:
            return False
        if self.is_inverted:
            # Любой непустой inverted интервал содержит π
            return y.is_inverted or y.lo <= self.hi or y.hi >= self.lo
        if y.is_inverted:
            return y.lo <= self.hi or y.hi >= self.lo
        return y.lo <= self.hi and y.hi >= self.lo

    def interior_intersects(self, y: "S1Interval") -> bool:
        """True если внутренность self пересекается с y."""
        if self.is_empty or y.is_empty or self.lo == self.hi:
            return False
        if self.is_inverted:
            return y.is_inverted or y.lo < self.hi or y.hi > self.lo
        if y.is_inverted:
            return y.lo < self.hi or y.hi > self.lo
        return (y.lo < self.hi and y.hi > self.lo) or self.is_full

    # =========================================================================
    # АЛГЕБРА МНОЖЕСТВ
    # =========================================================================

    def union(self, y: "S1Interval") -> "S1Interval":
        """
        Минимальный интервал, содержащий self и y.

        Для непересекающихся интервалов перекрывается меньший из двух
        зазоров (та же политика, что и в from_point_pair).
        """
        if y.is_empty:
            return self.model_copy()
        if self.fast_contains(y.lo):
            if self.fast_contains(y.hi):
                # self содержит y, либо объединение замыкает окружность
                if self._contains_interval(y):
                    return self.model_copy()
                return self.full()
            return self.from_unchecked(self.lo, y.hi)
        if self.fast_contains(y.hi):
            return self.from_unchecked(y.lo, self.hi)

        # self не содержит концов y: y поглощает self, либо они не пересекаются
        if self.is_empty or y.fast_contains(self.lo):
            return y.model_copy()

        dlo = positive_distance(y.hi, self.lo)
        dhi = positive_distance(self.hi, y.lo)
        if dlo < dhi:
            return self.from_unchecked(y.lo, self.hi)
        return self.from_unchecked(self.lo, y.hi)

    def intersection(self, y: "S1Interval") -> "S1Interval":
        """
        Минимальный интервал, содержащий пересечение self и y.

        Если пересечение состоит из двух частей, возвращается более
        короткий из исходных интервалов.
        """
        if y.is_empty:
            return self.empty()
        if self.fast_contains(y.lo):
            if self.fast_contains(y.hi):
                if y.get_length() < self.get_length():
                    return y.model_copy()
                return self.model_copy()
            return self.from_unchecked(y.lo, self.hi)
        if self.fast_contains(y.hi):
            return self.from_unchecked(self.lo, y.hi)

        if y.fast_contains(self.lo):
            return self.model_copy()
        logger.debug("intersection of disjoint intervals %s and %s is empty", self, y)
        return self.empty()

    # =========================================================================
    # ТОЧКИ И РАСШИРЕНИЕ
    # =========================================================================

    def add_point(self, p: float) -> None:
        """
        Расширение self до минимального интервала, содержащего p.

        Изменяет экземпляр на месте. Добавление точки никогда не превращает
        неполный интервал в Full.

        Raises:
            ValueError: Если |p| > π
        """
        validate_angle(p, "p")
        p = canonicalize_angle(p)

        if self.fast_contains(p):
            return
        if self.is_empty:
            self.lo = p
            self.hi = p
            return

        dlo = positive_distance(p, self.lo)
        dhi = positive_distance(self.hi, p)
        if dlo < dhi:
            self.lo = p
        else:
            self.hi = p

    def project(self, p: float) -> float:
        """
        Ближайшая к p точка интервала.

        Raises:
            ValueError: Если интервал пустой или |p| > π
        """
        if self.is_empty:
            raise ValueError("cannot project onto an empty S1Interval")
        validate_angle(p, "p")
        p = canonicalize_angle(p)

        if self.fast_contains(p):
            return p
        dlo = positive_distance(p, self.lo)
        dhi = positive_distance(self.hi, p)
        return self.lo if dlo < dhi else self.hi

    def expanded(self, margin: float) -> "S1Interval":
        """
        Расширение (margin > 0) или сужение (margin < 0) на margin с обеих сторон.

        Насыщение до Full/Empty решается до вычисления концов с допуском
        на ошибку округления в 1 бит для каждого конца.

        Args:
            margin: Угловой отступ (радианы)

        Returns:
            Новый интервал; Empty не расширяется, Full не сужается
        """
        if margin >= 0:
            if self.is_empty:
                return self.model_copy()
            if self.get_length() + 2 * margin + 2 * DBL_EPSILON >= 2 * PI:
                logger.debug("expanded(%r) of %s saturates to full", margin, self)
                return self.full()
        else:
            if self.is_full:
                return self.model_copy()
            if self.get_length() + 2 * margin - 2 * DBL_EPSILON <= 0:
                logger.debug("expanded(%r) of %s collapses to empty", margin, self)
                return self.empty()

        result = S1Interval(
            remainder_two_pi(self.lo - margin),
            remainder_two_pi(self.hi + margin),
        )
        if result.lo <= -PI:
            result.lo = PI
        return result

    # =========================================================================
    # РАССТОЯНИЯ И СРАВНЕНИЕ
    # =========================================================================

    def get_directed_hausdorff_distance(self, y: "S1Interval") -> float:
        """
        Направленное расстояние Хаусдорфа от self до y.

        max по x ∈ self от min по y' ∈ y от d(x, y').

        Returns:
            0 если y содержит self (в том числе self пустой);
            π если y пустой; иначе значение в (0, π]
        """
        if y._contains_interval(self):
            return 0.0
        if y.is_empty:
            return PI

        y_complement_center = y.get_complement_center()
        if self.fast_contains(y_complement_center):
            return positive_distance(y.hi, y_complement_center)

        # Расстояние достигается на паре hi-концов или паре lo-концов
        hi_hi = 0.0
        if S1Interval(y.hi, y_complement_center).contains(self.hi):
            hi_hi = positive_distance(y.hi, self.hi)
        lo_lo = 0.0
        if S1Interval(y_complement_center, y.lo).contains(self.lo):
            lo_lo = positive_distance(self.lo, y.lo)
        return max(hi_hi, lo_lo)

    def approx_equals(self, y: "S1Interval", max_error: float = DEFAULT_MAX_ERROR) -> bool:
        """
        Приближённое равенство с допуском max_error.

        Концы Empty/Full считаются произвольными: интервал длины
        <= 2*max_error приближённо пустой, длины >= 2(π - max_error)
        приближённо полный.
        """
        if self.is_empty:
            return y.get_length() <= 2 * max_error
        if y.is_empty:
            return self.get_length() <= 2 * max_error
        if self.is_full:
            return y.get_length() >= 2 * (PI - max_error)
        if y.is_full:
            return self.get_length() >= 2 * (PI - max_error)

        # Проверка длины защищает от совпадения концов при смене ориентации
        return (
            abs(remainder_two_pi(y.lo - self.lo)) <= max_error
            and abs(remainder_two_pi(y.hi - self.hi)) <= max_error
            and abs(self.get_length() - y.get_length()) <= 2 * max_error
        )
