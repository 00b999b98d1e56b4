"""
Sweep — переход одной кривой в другую

    sweep(a, b):  h((xa, xb), (s0, s1)) = lerp(a.h(xa, s0), b.h(xb, s0), s1)

Координата 0 движется по обеим кривым одновременно (диагональ
Square(a, b)); координата 1 покоординатно смешивает две текущие точки.
Обе кривые должны выдавать последовательности float одной длины
(например, точки Circle).
"""

from typing import Any, Sequence, Tuple

from homotopy.combinators.product import Square
from homotopy.core.capability import Homotopy
from homotopy.primitives.interpolation import lerp


def blend_points(pair: Tuple[Sequence[float], Sequence[float]], t: float) -> Tuple[float, ...]:
    """
    Покоординатное линейное смешивание двух точек.

    Examples:
        >>> blend_points(((0.0, 1.0), (0.0, 2.0)), 0.5)
        (0.0, 1.5)
    """
    p, q = pair
    return tuple(lerp(pi, qi, t) for pi, qi in zip(p, q))


def sweep(a: Any, b: Any) -> Homotopy:
    """
    2-параметрическая гомотопия, переводящая кривую `a` в кривую `b`.

    Raises:
        ArityError: Если `a` или `b` не 1-параметрическая гомотопия
    """
    return Square(a, b).diagonal().smap(blend_points)
