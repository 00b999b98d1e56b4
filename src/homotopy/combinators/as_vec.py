"""
AsVec — мост tuple ⇄ список фиксированной длины

Оборачивает гомотопию, чьи входы и выходы — tuple из 2 или 3 скаляров,
чтобы вызывающий код мог работать со списками:

- входные списки длины 2 или 3 превращаются в tuple перед делегированием
- выходные tuple длины 2 или 3 превращаются в списки

Остальные значения проходят без изменений. Поведение не меняется.
"""

from dataclasses import dataclass, field
from typing import Any, Final

from homotopy.core.capability import Homotopy, default_input_of
from homotopy.core.params import Param, arity_of, validate_arity

# Поддерживаемые длины векторов
VEC_LENGTHS: Final[tuple] = (2, 3)


def to_tuple(value: Any) -> Any:
    if isinstance(value, list) and len(value) in VEC_LENGTHS:
        return tuple(value)
    return value


def to_list(value: Any) -> Any:
    if isinstance(value, tuple) and len(value) in VEC_LENGTHS:
        return list(value)
    return value


@dataclass(frozen=True)
class AsVec(Homotopy):
    """Адаптер tuple/list вокруг `shape`; арность сохраняется."""

    shape: Any
    arity: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "arity", validate_arity(arity_of(self.shape)))

    def default_input(self) -> Any:
        return to_list(default_input_of(self.shape))

    def f(self, x: Any) -> Any:
        return to_list(self.shape.f(to_tuple(x)))

    def g(self, x: Any) -> Any:
        return to_list(self.shape.g(to_tuple(x)))

    def h(self, x: Any, s: Param) -> Any:
        return to_list(self.shape.h(to_tuple(x), s))
