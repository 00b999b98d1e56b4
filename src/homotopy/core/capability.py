"""
Homotopy — центральная абстракция алгебры

Гомотопия — непрерывное отображение между двумя функциями:

    f(x) -> y          функция, из которой отображаем
    g(x) -> y          функция, в которую отображаем
    h(x, s) -> y       само отображение, s в единичном гиперкубе

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. h(x, origin) == f(x) и h(x, corner) == g(x) для любого x
2. Для арности N > 1 то же выполняется на каждой грани, рекурсивно
3. Экземпляры immutable и чистые: вычисление не имеет побочных эффектов

Всё, что ниже `h` (грани, инверсия, отображения), выводится только из
f/g/h, поэтому комбинаторы оборачивают любой объект с этими тремя методами,
наследует он `Homotopy` или нет.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from homotopy.core.params import Param


class Homotopy(ABC):
    """
    Абстрактная база всех примитивов и комбинаторов.

    Подклассы реализуют `f`, `g`, `h` и задают `arity`, если параметров
    больше одного.
    """

    arity = 1

    @abstractmethod
    def f(self, x: Any) -> Any:
        """Функция, из которой отображаем."""

    @abstractmethod
    def g(self, x: Any) -> Any:
        """Функция, в которую отображаем."""

    @abstractmethod
    def h(self, x: Any, s: Param) -> Any:
        """Непрерывное отображение: h(x, 0) == f(x) и h(x, 1) == g(x)."""

    # =========================================================================
    # UNIT DOMAIN SHORTHANDS
    # =========================================================================

    def default_input(self) -> Any:
        """
        Значение домена по умолчанию: `()` для гомотопий над единичным доменом.

        Произведения возвращают tuple значений по умолчанию операндов,
        обёртки берут его у обёрнутой гомотопии.
        """
        return ()

    def fu(self) -> Any:
        """`f` на входе по умолчанию."""
        return self.f(self.default_input())

    def gu(self) -> Any:
        """`g` на входе по умолчанию."""
        return self.g(self.default_input())

    def hu(self, s: Param) -> Any:
        """`h` на входе по умолчанию."""
        return self.h(self.default_input(), s)

    # =========================================================================
    # STRUCTURAL
    # =========================================================================

    def inverse(self) -> "Homotopy":
        from homotopy.combinators.inverse import Inverse

        return Inverse(self)

    def as_vec(self) -> "Homotopy":
        from homotopy.combinators.as_vec import AsVec

        return AsVec(self)

    def then(self, other: Any, split: bool = False) -> "Homotopy":
        """Последовательная композиция: `other` применяется к выходу `self`."""
        from homotopy.combinators.compose import Compose

        return Compose(self, other, split=split)

    def map(self, fn: Callable[[Any], Any]) -> "Homotopy":
        """Пост-композиция каждого выхода с `fn`."""
        from homotopy.combinators.compose import Map

        return Map(self, fn)

    def smap(self, fn: Callable[[Any, float], Any]) -> "Homotopy":
        """Пост-композиция с `fn(y, t)` и новым последним параметром `t`."""
        from homotopy.combinators.compose import SMap

        return SMap(self, fn)

    # =========================================================================
    # FACES
    # =========================================================================

    def diagonal(self) -> "Homotopy":
        from homotopy.combinators.sides import Diagonal

        return Diagonal(self)

    def left(self) -> "Homotopy":
        from homotopy.combinators.sides import Left

        return Left(self)

    def right(self) -> "Homotopy":
        from homotopy.combinators.sides import Right

        return Right(self)

    def top(self) -> "Homotopy":
        from homotopy.combinators.sides import Top

        return Top(self)

    def bottom(self) -> "Homotopy":
        from homotopy.combinators.sides import Bottom

        return Bottom(self)

    def front(self) -> "Homotopy":
        from homotopy.combinators.sides import Front

        return Front(self)

    def back(self) -> "Homotopy":
        from homotopy.combinators.sides import Back

        return Back(self)

    def past(self) -> "Homotopy":
        from homotopy.combinators.sides import Past

        return Past(self)

    def future(self) -> "Homotopy":
        from homotopy.combinators.sides import Future

        return Future(self)

    # =========================================================================
    # CROSS-SECTIONS
    # =========================================================================

    def left_right(self, s: float) -> "Homotopy":
        from homotopy.combinators.sides import LeftRight

        return LeftRight(self, s)

    def top_bottom(self, s: float) -> "Homotopy":
        from homotopy.combinators.sides import TopBottom

        return TopBottom(self, s)

    def front_back(self, s: float) -> "Homotopy":
        from homotopy.combinators.sides import FrontBack

        return FrontBack(self, s)

    def past_future(self, s: float) -> "Homotopy":
        from homotopy.combinators.sides import PastFuture

        return PastFuture(self, s)


def default_input_of(h: Any) -> Any:
    """Вход по умолчанию любого объекта-гомотопии (`()`, если не определён)."""
    default_input = getattr(h, "default_input", None)
    if default_input is None:
        return ()
    return default_input()
