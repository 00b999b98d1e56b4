"""
Params — Арифметика векторов параметров N-параметрических гомотопий

Гомотопия арности 1 принимает скалярный параметр `s: float`; гомотопия
арности N (2..MAX_ARITY) принимает упорядоченную последовательность из N
float. Все комбинаторы граней и композиции написаны ОДИН раз поверх этого
модуля, а не отдельно для каждой арности:

- origin / corner: параметр из одних нулей / одних единиц заданной арности
- face_corner: угол гиперкуба с одной зафиксированной осью
- insert_axis: подъём (N-1)-параметра в N-параметр связыванием одной оси
- split_param: позиционное разбиение параметра между двумя операндами

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Граничные координаты всегда литералы 0.0 / 1.0 (никогда не вычисляются),
   поэтому точное сравнение в углах не ломается из-за округления
2. Арность проверяется при построении комбинатора, а не при вычислении
"""

from typing import Any, Final, Sequence, Tuple, Union

from homotopy.core.errors import ArityError, CapabilityError

# =============================================================================
# CONSTANTS
# =============================================================================

# Максимальная поддерживаемая арность (4D гиперкуб интерполяции)
MAX_ARITY: Final[int] = 4

# Границы гиперкуба
LOW: Final[float] = 0.0
HIGH: Final[float] = 1.0

Param = Union[float, Sequence[float]]


# =============================================================================
# ARITY
# =============================================================================


def arity_of(h: Any) -> int:
    """
    Арность параметра гомотопии.

    Объекты с `f`/`g`/`h` без атрибута `arity` считаются
    1-параметрическими гомотопиями.
    """
    return getattr(h, "arity", 1)


def validate_arity(arity: int) -> int:
    """
    Проверка, что арность лежит в 1..MAX_ARITY.

    Raises:
        ArityError: Если арность не int или вне диапазона
    """
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise ArityError(f"arity must be an int, got {arity!r}")
    if arity < 1 or arity > MAX_ARITY:
        raise ArityError(f"arity must be in 1..{MAX_ARITY}, got {arity}")
    return arity


def require_arity(h: Any, expected: int, role: str = "operand") -> None:
    """
    Требование ровно `expected` параметров у гомотопии.

    Raises:
        ArityError: Если арности различаются
    """
    actual = arity_of(h)
    if actual != expected:
        raise ArityError(
            f"{role} must be a {expected}-parameter homotopy, got arity {actual}"
        )


# =============================================================================
# CORNERS
# =============================================================================


def from_coords(coords: Sequence[float]) -> Param:
    """Упаковка координат в параметр: скаляр для одной координаты, иначе tuple."""
    if len(coords) == 1:
        return coords[0]
    return tuple(coords)


def to_coords(s: Param, arity: int) -> Tuple[float, ...]:
    """Распаковка параметра заданной арности в tuple координат."""
    if arity == 1:
        return (s,)
    return tuple(s)


def origin(arity: int) -> Param:
    """
    Параметр из нулей заданной арности.

    Examples:
        >>> origin(1)
        0.0
        >>> origin(3)
        (0.0, 0.0, 0.0)
    """
    return from_coords((LOW,) * validate_arity(arity))


def corner(arity: int) -> Param:
    """
    Параметр из единиц заданной арности.

    Examples:
        >>> corner(1)
        1.0
        >>> corner(2)
        (1.0, 1.0)
    """
    return from_coords((HIGH,) * validate_arity(arity))


def face_corner(arity: int, axis: int, value: float, rest: float) -> Param:
    """
    Угол `arity`-куба: ось `axis` равна `value`, остальные координаты `rest`.

    Examples:
        >>> face_corner(3, 0, 0.0, 1.0)
        (0.0, 1.0, 1.0)
        >>> face_corner(2, 1, 1.0, 0.0)
        (0.0, 1.0)
    """
    coords = [rest] * arity
    coords[axis] = value
    return from_coords(coords)


# =============================================================================
# LIFTING AND SPLITTING
# =============================================================================


def insert_axis(s: Param, arity: int, axis: int, value: float) -> Param:
    """
    Подъём параметра арности `arity - 1` до `arity` связыванием оси `axis`.

    Args:
        s: Параметр грани (скаляр, если грань 1-параметрическая)
        arity: Арность родительской гомотопии
        axis: Индекс связываемой координаты в параметре родителя
        value: Значение связываемой координаты

    Examples:
        >>> insert_axis(0.5, 2, 0, 1.0)
        (1.0, 0.5)
        >>> insert_axis((0.25, 0.75), 3, 1, 0.0)
        (0.25, 0.0, 0.75)
    """
    coords = list(to_coords(s, arity - 1))
    coords.insert(axis, value)
    return from_coords(coords)


def split_param(s: Param, left_arity: int, right_arity: int) -> Tuple[Param, Param]:
    """
    Позиционное разбиение параметра между двумя операндами.

    Первые `left_arity` координат уходят левому операнду, остальные правому.

    Examples:
        >>> split_param((0.1, 0.2, 0.3), 1, 2)
        (0.1, (0.2, 0.3))
    """
    coords = to_coords(s, left_arity + right_arity)
    return (
        from_coords(coords[:left_arity]),
        from_coords(coords[left_arity:]),
    )


def diagonal_param(s: float, arity: int) -> Param:
    """Один и тот же скаляр на каждой оси."""
    return from_coords((s,) * arity)


def reverse_param(s: Param, arity: int) -> Param:
    """Каждая координата `c` отображается в `1 - c`."""
    return from_coords(tuple(HIGH - c for c in to_coords(s, arity)))


# =============================================================================
# CAPABILITIES
# =============================================================================


def require_vector_space(*values: Any) -> None:
    """
    Проверка, что значения поддерживают `value * float` и `value + value`.

    Каждое значение проверяется отдельно (`v * 1.0 + v * 0.0`). Совместимость
    пар значений проверяет `require_blendable`.

    Raises:
        CapabilityError: Если у значения нет нужной арифметики
    """
    for value in values:
        try:
            value * 1.0 + value * 0.0
        except (TypeError, ValueError) as exc:
            raise CapabilityError(
                f"{type(value).__name__} does not support scalar multiply and add"
            ) from exc


def require_blendable(a: Any, b: Any) -> Any:
    """
    Проверка, что пару можно смешать так же, как это делает `lerp`.

    Вычисляет `a * 0.5 + b * 0.5`: та же последовательность операций, что и
    при вычислении `h`, поэтому пара, прошедшая проверку, не упадёт при
    вычислении (например, numpy массивы разной формы отклоняются здесь).

    Returns:
        Середина пары (для проверки следующего уровня смешивания)

    Raises:
        CapabilityError: Если значения нельзя сложить друг с другом
    """
    try:
        return a * 0.5 + b * 0.5
    except (TypeError, ValueError) as exc:
        raise CapabilityError(
            f"{type(a).__name__} and {type(b).__name__} cannot be blended: {exc}"
        ) from exc
