"""
Basic primitives — Identity и ступенчатые гомотопии

- Identity: f, g и h — тождественная функция
- Dirac: ступенька в s == 0 над единичным доменом
- DiracFrom: ступенька между двумя произвольными функциями концов

Dirac/DiracFrom проверяют `s == 0.0` точно: любой ненулевой параметр, как
угодно малый (или вне диапазона), выбирает ветку `g`.
"""

from dataclasses import dataclass
from typing import Any, Callable

from homotopy.core.capability import Homotopy


@dataclass(frozen=True)
class Identity(Homotopy):
    """
    Тождественная гомотопия.

    `f`, `g` и `h` — тождественная функция, поэтому это гомотопия.
    Параметр игнорируется.
    """

    def f(self, x: Any) -> Any:
        return x

    def g(self, x: Any) -> Any:
        return x

    def h(self, x: Any, s: float) -> Any:
        return x


@dataclass(frozen=True)
class Dirac(Homotopy):
    """Ступенька Дирака над единичным доменом: 1.0 при s == 0, иначе 0.0."""

    def f(self, x: Any = ()) -> float:
        return 1.0

    def g(self, x: Any = ()) -> float:
        return 0.0

    def h(self, x: Any, s: float) -> float:
        if s == 0.0:
            return 1.0
        return 0.0


@dataclass(frozen=True)
class DiracFrom(Homotopy):
    """
    Гомотопия Dirac From.

    `h` равна `fx` в 0.0 и `gx` в остальных точках. Так как в 1.0 `h`
    равна `gx`, это гомотопия.

    Args:
        fx: Начальная функция
        gx: Конечная функция
    """

    fx: Callable[[Any], Any]
    gx: Callable[[Any], Any]

    def f(self, x: Any) -> Any:
        return self.fx(x)

    def g(self, x: Any) -> Any:
        return self.gx(x)

    def h(self, x: Any, s: float) -> Any:
        if s == 0.0:
            return self.fx(x)
        return self.gx(x)
