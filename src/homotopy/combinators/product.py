"""
Products — независимое покоординатное произведение 1-параметрических гомотопий

    Square(h1, h2):      h((x1, x2), (s0, s1)) = (h1.h(x1, s0), h2.h(x2, s1))
    Cube(h1, h2, h3):    аналог для трёх осей

Каждая ось меняется независимо, поэтому любая грань произведения снова
является произведением концов и путей операндов.
"""

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from homotopy.core.capability import Homotopy, default_input_of
from homotopy.core.params import require_arity


@dataclass(frozen=True)
class Square(Homotopy):
    """
    Произведение двух 1-параметрических гомотопий в 2-параметрическую.

    Домен — пара `(x1, x2)`, выход — пара выходов операндов.

    Raises:
        ArityError: Если операнд не 1-параметрическая гомотопия
    """

    h1: Any
    h2: Any

    arity = 2

    def __post_init__(self):
        require_arity(self.h1, 1, "Square operand h1")
        require_arity(self.h2, 1, "Square operand h2")

    def default_input(self) -> Tuple[Any, Any]:
        return (default_input_of(self.h1), default_input_of(self.h2))

    def f(self, x: Tuple[Any, Any]) -> Tuple[Any, Any]:
        x1, x2 = x
        return (self.h1.f(x1), self.h2.f(x2))

    def g(self, x: Tuple[Any, Any]) -> Tuple[Any, Any]:
        x1, x2 = x
        return (self.h1.g(x1), self.h2.g(x2))

    def h(self, x: Tuple[Any, Any], s: Sequence[float]) -> Tuple[Any, Any]:
        x1, x2 = x
        return (self.h1.h(x1, s[0]), self.h2.h(x2, s[1]))


@dataclass(frozen=True)
class Cube(Homotopy):
    """
    Произведение трёх 1-параметрических гомотопий в 3-параметрическую.

    Raises:
        ArityError: Если операнд не 1-параметрическая гомотопия
    """

    h1: Any
    h2: Any
    h3: Any

    arity = 3

    def __post_init__(self):
        require_arity(self.h1, 1, "Cube operand h1")
        require_arity(self.h2, 1, "Cube operand h2")
        require_arity(self.h3, 1, "Cube operand h3")

    def default_input(self) -> Tuple[Any, Any, Any]:
        return (
            default_input_of(self.h1),
            default_input_of(self.h2),
            default_input_of(self.h3),
        )

    def f(self, x: Tuple[Any, Any, Any]) -> Tuple[Any, Any, Any]:
        x1, x2, x3 = x
        return (self.h1.f(x1), self.h2.f(x2), self.h3.f(x3))

    def g(self, x: Tuple[Any, Any, Any]) -> Tuple[Any, Any, Any]:
        x1, x2, x3 = x
        return (self.h1.g(x1), self.h2.g(x2), self.h3.g(x3))

    def h(self, x: Tuple[Any, Any, Any], s: Sequence[float]) -> Tuple[Any, Any, Any]:
        x1, x2, x3 = x
        return (self.h1.h(x1, s[0]), self.h2.h(x2, s[1]), self.h3.h(x3, s[2]))
