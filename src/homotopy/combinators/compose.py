"""
Compose — последовательная композиция и отображение выхода

    Compose(h1, h2):   f = h2.f ∘ h1.f,  g = h2.g ∘ h1.g
    Map(h, fn):        f = fn ∘ h.f,     g = fn ∘ h.g,     h = fn ∘ h.h
    SMap(h, fn):       h(x, (*s, t)) = fn(h.h(x, s), t)

Разделение параметра в Compose:
- равные арности, split=False: оба операнда видят один и тот же параметр
- иначе: параметр делится позиционно, первые arity(h1) координат идут в
  h1, остальные в h2 (арность результата — сумма)

Поэтому скалярная гомотопия в композиции с 2-параметрической даёт
3-параметрическую.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from homotopy.core.capability import Homotopy, default_input_of
from homotopy.core.params import (
    HIGH,
    LOW,
    Param,
    arity_of,
    from_coords,
    split_param,
    to_coords,
    validate_arity,
)


# =============================================================================
# COMPOSE
# =============================================================================


@dataclass(frozen=True)
class Compose(Homotopy):
    """
    Функциональная композиция, которая сама является гомотопией.

    Args:
        h1: Применяется первой
        h2: Применяется к выходу h1
        split: Принудительное позиционное разбиение параметра при равных арностях

    Raises:
        ArityError: Если итоговая арность превышает MAX_ARITY
    """

    h1: Any
    h2: Any
    split: bool = False
    arity: int = field(init=False)

    def __post_init__(self):
        a1 = validate_arity(arity_of(self.h1))
        a2 = validate_arity(arity_of(self.h2))
        split = self.split or a1 != a2
        object.__setattr__(self, "split", split)
        object.__setattr__(self, "arity", validate_arity(a1 + a2 if split else a1))

    def default_input(self) -> Any:
        return default_input_of(self.h1)

    def f(self, x: Any) -> Any:
        return self.h2.f(self.h1.f(x))

    def g(self, x: Any) -> Any:
        return self.h2.g(self.h1.g(x))

    def h(self, x: Any, s: Param) -> Any:
        if not self.split:
            return self.h2.h(self.h1.h(x, s), s)
        s1, s2 = split_param(s, arity_of(self.h1), arity_of(self.h2))
        return self.h2.h(self.h1.h(x, s1), s2)


# =============================================================================
# MAP
# =============================================================================


@dataclass(frozen=True)
class Map(Homotopy):
    """Пост-композиция каждого выхода `shape` с обычной функцией."""

    shape: Any
    fn: Callable[[Any], Any]
    arity: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "arity", validate_arity(arity_of(self.shape)))

    def default_input(self) -> Any:
        return default_input_of(self.shape)

    def f(self, x: Any) -> Any:
        return self.fn(self.shape.f(x))

    def g(self, x: Any) -> Any:
        return self.fn(self.shape.g(x))

    def h(self, x: Any, s: Param) -> Any:
        return self.fn(self.shape.h(x, s))


@dataclass(frozen=True)
class SMap(Homotopy):
    """
    Пост-композиция с функцией выхода и нового последнего параметра.

    У результата на один параметр больше, чем у `shape`; `fn(y, 0.0)` —
    начало, а `fn(y, 1.0)` — конец новой оси.
    """

    shape: Any
    fn: Callable[[Any, float], Any]
    arity: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "arity", validate_arity(arity_of(self.shape) + 1))

    def default_input(self) -> Any:
        return default_input_of(self.shape)

    def f(self, x: Any) -> Any:
        return self.fn(self.shape.f(x), LOW)

    def g(self, x: Any) -> Any:
        return self.fn(self.shape.g(x), HIGH)

    def h(self, x: Any, s: Param) -> Any:
        coords = to_coords(s, self.arity)
        return self.fn(self.shape.h(x, from_coords(coords[:-1])), coords[-1])
