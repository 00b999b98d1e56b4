"""
Inverse — обращение направления движения

    f = shape.g,  g = shape.f,  h(x, s) = shape.h(x, 1 - s)

Для N-параметрических гомотопий обращается каждая координата: origin
переходит в corner и обратно, поэтому инвариант гомотопии выполняется
по построению.
"""

from dataclasses import dataclass, field
from typing import Any

from homotopy.core.capability import Homotopy, default_input_of
from homotopy.core.params import Param, arity_of, reverse_param, validate_arity


@dataclass(frozen=True)
class Inverse(Homotopy):
    """Обращение параметра `shape`; арность сохраняется."""

    shape: Any
    arity: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "arity", validate_arity(arity_of(self.shape)))

    def default_input(self) -> Any:
        return default_input_of(self.shape)

    def inverse(self) -> Any:
        # 1 - (1 - s) в плавающей точке не всегда равно s
        return self.shape

    def f(self, x: Any) -> Any:
        return self.shape.g(x)

    def g(self, x: Any) -> Any:
        return self.shape.f(x)

    def h(self, x: Any, s: Param) -> Any:
        return self.shape.h(x, reverse_param(s, self.arity))
