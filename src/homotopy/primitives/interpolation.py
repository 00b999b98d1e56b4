"""
Interpolation primitives — Lerp и кривые Безье над единичным доменом

ФОРМУЛЫ:
    Lerp(a, b):                  h(s) = a * (1 - s) + b * s
    QuadraticBezier(a, b, c):    h(s) = lerp(lerp(a, b, s), lerp(b, c, s), s)
    CubicBezier(a, b, c, d):     h(s) = lerp(lerp(a, b, s), lerp(c, d, s), s)

CubicBezier смешивает пары (a, b) и (c, d) напрямую. Это НЕ трёхуровневая
конструкция де Кастельжо стандартной кубической кривой Безье, и в общем
случае они расходятся; редукция `from_quadratic` опирается на формулу
в записанном виде.

Значения должны поддерживать `value * float` и `value + value` (float,
numpy массивы, пользовательские векторные типы), причём каждая пара,
которую смешивает `h`, должна складываться между собой. Lerp
экстраполирует при s вне [0, 1].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое смешивание, которое выполняет `h`, проверяется при построении
   (require_blendable), поэтому `h` не падает на несовместимых значениях
"""

from dataclasses import dataclass
from typing import Any

from homotopy.core.capability import Homotopy
from homotopy.core.params import require_blendable, require_vector_space


def lerp(a: Any, b: Any, s: float) -> Any:
    """
    Линейная интерполяция между двумя значениями.

    Examples:
        >>> lerp(3.0, 10.0, 0.5)
        6.5
    """
    return a * (1.0 - s) + b * s


# =============================================================================
# LERP
# =============================================================================


@dataclass(frozen=True)
class Lerp(Homotopy):
    """
    Гомотопия линейной интерполяции.

    `f` и `g` отображают единичный домен `()` в концы отрезка.
    Скаляр, переданный в `h`, управляет линейным отображением.

    Raises:
        CapabilityError: Если концы не поддерживают `* float` / `+`
            или не складываются друг с другом
    """

    a: Any
    b: Any

    def __post_init__(self):
        require_vector_space(self.a, self.b)
        require_blendable(self.a, self.b)

    def f(self, x: Any = ()) -> Any:
        return self.a

    def g(self, x: Any = ()) -> Any:
        return self.b

    def h(self, x: Any, s: float) -> Any:
        return lerp(self.a, self.b, s)


# =============================================================================
# BEZIER
# =============================================================================


@dataclass(frozen=True)
class QuadraticBezier(Homotopy):
    """
    Квадратичная гомотопия Безье.

    Отображает точку `a` в `c`, `b` — контрольная точка.

    Raises:
        CapabilityError: Если пары (a, b), (b, c) или их смешивание
            не поддерживают нужную арифметику
    """

    a: Any
    b: Any
    c: Any

    def __post_init__(self):
        require_vector_space(self.a, self.b, self.c)
        require_blendable(
            require_blendable(self.a, self.b),
            require_blendable(self.b, self.c),
        )

    @classmethod
    def from_linear(cls, a: Any, b: Any) -> "QuadraticBezier":
        """
        Квадратичная кривая Безье, идентичная линейной интерполяции.

        Контрольная точка — середина `a` и `b`.
        """
        return cls(a, require_blendable(a, b), b)

    @classmethod
    def from_lerp(cls, lerp_h: Lerp) -> "QuadraticBezier":
        return cls.from_linear(lerp_h.a, lerp_h.b)

    def f(self, x: Any = ()) -> Any:
        return self.a

    def g(self, x: Any = ()) -> Any:
        return self.c

    def h(self, x: Any, s: float) -> Any:
        return lerp(lerp(self.a, self.b, s), lerp(self.b, self.c, s), s)


@dataclass(frozen=True)
class CubicBezier(Homotopy):
    """
    Кубическая гомотопия Безье.

    Отображает точку `a` в `d`, `b` и `c` — контрольные точки.
    Отличие `h` от де Кастельжо описано в docstring модуля.
    """

    a: Any
    b: Any
    c: Any
    d: Any

    def __post_init__(self):
        require_vector_space(self.a, self.b, self.c, self.d)
        require_blendable(
            require_blendable(self.a, self.b),
            require_blendable(self.c, self.d),
        )

    @classmethod
    def from_quadratic(cls, a: Any, b: Any, c: Any) -> "CubicBezier":
        """Кубическая кривая Безье, идентичная квадратичной."""
        return cls(a, b, b, c)

    @classmethod
    def from_quadratic_bezier(cls, qb: QuadraticBezier) -> "CubicBezier":
        return cls.from_quadratic(qb.a, qb.b, qb.c)

    def f(self, x: Any = ()) -> Any:
        return self.a

    def g(self, x: Any = ()) -> Any:
        return self.d

    def h(self, x: Any, s: float) -> Any:
        return lerp(lerp(self.a, self.b, s), lerp(self.c, self.d, s), s)
