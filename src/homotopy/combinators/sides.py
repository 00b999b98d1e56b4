"""
Sides — извлечение граней N-параметрических гомотопий

N-параметрическая гомотопия живёт на единичном N-кубе. Фиксация одной
координаты в 0 или 1 даёт (N-1)-мерную грань; связывание её с произвольным
значением даёт сечение. И то и другое снова гомотопия, на единицу меньшей
арности.

ОСИ:
    0   Left (0) / Right (1)        сечение LeftRight(t)
    1   Top (0) / Bottom (1)        сечение TopBottom(t)
    2   Front (0) / Back (1)        сечение FrontBack(t)
    3   Past (0) / Future (1)       сечение PastFuture(t)

ПРАВИЛО ГРАНИ (одно для любого N в 2..MAX_ARITY):
    h_face(x, s) = parent.h(x, s со вставленным `value` на оси `axis`)

    нижняя грань (value 0):   f = parent.f
                              g = parent.h в (axis = 0, остальные = 1)
    верхняя грань (value 1):  f = parent.h в (axis = 1, остальные = 0)
                              g = parent.g

Для N = 2 нетривиальный угол отстоит от угла родителя на одну координату;
для N = 3 уже нет (Left.g 3-куба — это parent.h(x, (0, 1, 1))). Оба случая
получаются из одной и той же индексной арифметики.

    Diagonal:           h(x, s) = parent.h(x, (s, ..., s)), f/g наследуются
    CrossSection(t):    f = parent.h в (axis = t, остальные = 0)
                        g = parent.h в (axis = t, остальные = 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Родитель каждого комбинатора граней имеет арность >= 2 (проверяется
   при построении)
2. Грань фиксирует ось ровно в LOW или HIGH
"""

from dataclasses import dataclass, field
from typing import Any, Final

from homotopy.core.capability import Homotopy, default_input_of
from homotopy.core.errors import ArityError, FaceValueError
from homotopy.core.params import (
    HIGH,
    LOW,
    Param,
    arity_of,
    diagonal_param,
    face_corner,
    insert_axis,
    validate_arity,
)

# =============================================================================
# AXES
# =============================================================================

AXIS_LEFT_RIGHT: Final[int] = 0
AXIS_TOP_BOTTOM: Final[int] = 1
AXIS_FRONT_BACK: Final[int] = 2
AXIS_PAST_FUTURE: Final[int] = 3


def _validate_parent(shape: Any) -> int:
    """
    Арность `shape`, проверенная на наличие хотя бы двух параметров.

    Raises:
        ArityError: Если у shape один параметр или арность вне диапазона
    """
    parent = validate_arity(arity_of(shape))
    if parent < 2:
        raise ArityError(f"faces need a homotopy of arity >= 2, got arity {parent}")
    return parent


def _validate_axis(shape: Any, axis: int) -> int:
    """
    Арность `shape`, проверенная на наличие оси `axis`.

    Raises:
        ArityError: Если у shape нет такой оси или всего один параметр
    """
    parent = _validate_parent(shape)
    if not 0 <= axis < parent:
        raise ArityError(f"axis {axis} does not exist on a {parent}-parameter homotopy")
    return parent


# =============================================================================
# DIAGONAL
# =============================================================================


@dataclass(frozen=True)
class Diagonal(Homotopy):
    """
    Диагональ N-мерной гомотопии, результат — 1-мерная гомотопия.

    Интерполирует по всем измерениям сразу.

    Raises:
        ArityError: Если у родителя меньше двух параметров
    """

    shape: Any

    def __post_init__(self):
        _validate_parent(self.shape)

    def default_input(self) -> Any:
        return default_input_of(self.shape)

    def f(self, x: Any) -> Any:
        return self.shape.f(x)

    def g(self, x: Any) -> Any:
        return self.shape.g(x)

    def h(self, x: Any, s: float) -> Any:
        return self.shape.h(x, diagonal_param(s, arity_of(self.shape)))


# =============================================================================
# FACES
# =============================================================================


@dataclass(frozen=True)
class Face(Homotopy):
    """
    Грань N-мерной гомотопии при `axis` = `value`, результат — (N-1)-мерная
    гомотопия.

    Args:
        shape: Родительская гомотопия, арность 2..MAX_ARITY
        axis: Индекс фиксируемой координаты
        value: LOW (0.0) или HIGH (1.0)

    Raises:
        ArityError: Если у родителя нет такой оси
        FaceValueError: Если value не 0.0 и не 1.0
    """

    shape: Any
    axis: int
    value: float
    arity: int = field(init=False)

    def __post_init__(self):
        parent = _validate_axis(self.shape, self.axis)
        if self.value not in (LOW, HIGH):
            raise FaceValueError(f"face value must be 0.0 or 1.0, got {self.value}")
        object.__setattr__(self, "arity", parent - 1)

    def default_input(self) -> Any:
        return default_input_of(self.shape)

    def f(self, x: Any) -> Any:
        if self.value == LOW:
            return self.shape.f(x)
        return self.shape.h(x, face_corner(self.arity + 1, self.axis, HIGH, LOW))

    def g(self, x: Any) -> Any:
        if self.value == HIGH:
            return self.shape.g(x)
        return self.shape.h(x, face_corner(self.arity + 1, self.axis, LOW, HIGH))

    def h(self, x: Any, s: Param) -> Any:
        return self.shape.h(x, insert_axis(s, self.arity + 1, self.axis, self.value))


class Left(Face):
    """Левая грань (ось 0 в 0) N-мерной гомотопии."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_LEFT_RIGHT, LOW)


class Right(Face):
    """Правая грань (ось 0 в 1) N-мерной гомотопии."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_LEFT_RIGHT, HIGH)


class Top(Face):
    """Верхняя грань (ось 1 в 0) N-мерной гомотопии."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_TOP_BOTTOM, LOW)


class Bottom(Face):
    """Нижняя грань (ось 1 в 1) N-мерной гомотопии."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_TOP_BOTTOM, HIGH)


class Front(Face):
    """Передняя грань (ось 2 в 0); нужна арность >= 3."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_FRONT_BACK, LOW)


class Back(Face):
    """Задняя грань (ось 2 в 1); нужна арность >= 3."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_FRONT_BACK, HIGH)


class Past(Face):
    """Грань прошлого (ось 3 в 0); нужна арность 4."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_PAST_FUTURE, LOW)


class Future(Face):
    """Грань будущего (ось 3 в 1); нужна арность 4."""

    def __init__(self, shape: Any):
        super().__init__(shape, AXIS_PAST_FUTURE, HIGH)


# =============================================================================
# CROSS-SECTIONS
# =============================================================================


@dataclass(frozen=True)
class CrossSection(Homotopy):
    """
    Сечение N-мерной гомотопии с осью `axis`, связанной с произвольным `t`;
    результат — (N-1)-мерная гомотопия по остальным осям.

    Raises:
        ArityError: Если у родителя нет такой оси
    """

    shape: Any
    axis: int
    t: float
    arity: int = field(init=False)

    def __post_init__(self):
        parent = _validate_axis(self.shape, self.axis)
        object.__setattr__(self, "arity", parent - 1)

    def default_input(self) -> Any:
        return default_input_of(self.shape)

    def f(self, x: Any) -> Any:
        return self.shape.h(x, face_corner(self.arity + 1, self.axis, self.t, LOW))

    def g(self, x: Any) -> Any:
        return self.shape.h(x, face_corner(self.arity + 1, self.axis, self.t, HIGH))

    def h(self, x: Any, s: Param) -> Any:
        return self.shape.h(x, insert_axis(s, self.arity + 1, self.axis, self.t))


class LeftRight(CrossSection):
    """Сечение между левой и правой гранями (ось 0 в `t`)."""

    def __init__(self, shape: Any, t: float):
        super().__init__(shape, AXIS_LEFT_RIGHT, t)


class TopBottom(CrossSection):
    """Сечение между верхней и нижней гранями (ось 1 в `t`)."""

    def __init__(self, shape: Any, t: float):
        super().__init__(shape, AXIS_TOP_BOTTOM, t)


class FrontBack(CrossSection):
    """Сечение между передней и задней гранями (ось 2 в `t`)."""

    def __init__(self, shape: Any, t: float):
        super().__init__(shape, AXIS_FRONT_BACK, t)


class PastFuture(CrossSection):
    """Сечение между гранями прошлого и будущего (ось 3 в `t`)."""

    def __init__(self, shape: Any, t: float):
        super().__init__(shape, AXIS_PAST_FUTURE, t)
