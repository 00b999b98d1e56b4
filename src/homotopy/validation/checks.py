"""
Checks — рекурсивная проверка инварианта гомотопии

    check(h, x):    h(x, 0) == f(x) и h(x, 1) == g(x)             (арность 1)
    check2(h, x):   углы (0,0)/(1,1), затем check на left, right,
                    top, bottom                                   (арность 2)
    check3(h, x):   углы, затем check2 на left, right, top, bottom,
                    front, back                                   (арность 3)
    check4(h, x):   углы, затем check3 на всех восьми гранях      (арность 4)

Грани — настоящие комбинаторы граней, вызываемые как гомотопии меньшей
арности, поэтому ошибка в любой грани проявится здесь, а не только в `check`.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение точное; граничные параметры — литералы 0.0 / 1.0
2. tuple и list сравниваются поэлементно (рекурсивно), массивы через `.all()`
3. Предикат возвращает bool: несравнимые значения (массивы разной формы)
   считаются неравными, а не выбрасывают исключение
"""

import logging
from typing import Any

from homotopy.combinators.sides import Face
from homotopy.core.params import (
    HIGH,
    LOW,
    arity_of,
    corner,
    origin,
    require_arity,
    validate_arity,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EQUALITY
# =============================================================================


def values_equal(a: Any, b: Any) -> bool:
    """
    Точное равенство двух выходов гомотопии.

    Массивы разной формы не сравнимы поэлементно и считаются неравными.

    Examples:
        >>> values_equal((1.0, [2.0, 3.0]), (1.0, (2.0, 3.0)))
        True
        >>> values_equal(0.1 + 0.2, 0.3)
        False
    """
    if isinstance(a, (tuple, list)) and isinstance(b, (tuple, list)):
        return len(a) == len(b) and all(values_equal(p, q) for p, q in zip(a, b))
    if hasattr(a, "shape") and hasattr(b, "shape") and a.shape != b.shape:
        return False
    try:
        result = a == b
    except ValueError:
        # numpy: формы не согласуются при broadcast
        return False
    if hasattr(result, "all"):
        return bool(result.all())
    return bool(result)


# =============================================================================
# RECURSIVE CHECK
# =============================================================================


def _corners_hold(h: Any, x: Any, arity: int) -> bool:
    if not values_equal(h.h(x, origin(arity)), h.f(x)):
        logger.debug("h(x, origin) != f(x) for %r", h)
        return False
    if not values_equal(h.h(x, corner(arity)), h.g(x)):
        logger.debug("h(x, corner) != g(x) for %r", h)
        return False
    return True


def _check_recursive(h: Any, x: Any, arity: int) -> bool:
    if not _corners_hold(h, x, arity):
        return False
    for axis in range(arity if arity > 1 else 0):
        for value in (LOW, HIGH):
            if not _check_recursive(Face(h, axis, value), x, arity - 1):
                logger.debug("face axis=%d value=%s failed for %r", axis, value, h)
                return False
    return True


def check(h: Any, x: Any) -> bool:
    """
    Проверка ограничений гомотопии для входа `x`.

    Raises:
        ArityError: Если h не 1-параметрическая гомотопия
    """
    require_arity(h, 1, "check")
    return _check_recursive(h, x, 1)


def check2(h: Any, x: Any) -> bool:
    """
    Проверка 2-параметрической гомотопии и её граней left/right/top/bottom.

    Raises:
        ArityError: Если h не 2-параметрическая гомотопия
    """
    require_arity(h, 2, "check2")
    return _check_recursive(h, x, 2)


def check3(h: Any, x: Any) -> bool:
    """
    Проверка 3-параметрической гомотопии и шести её граней через `check2`.

    Raises:
        ArityError: Если h не 3-параметрическая гомотопия
    """
    require_arity(h, 3, "check3")
    return _check_recursive(h, x, 3)


def check4(h: Any, x: Any) -> bool:
    """
    Проверка 4-параметрической гомотопии и восьми её граней через `check3`.

    Raises:
        ArityError: Если h не 4-параметрическая гомотопия
    """
    require_arity(h, 4, "check4")
    return _check_recursive(h, x, 4)


def check_n(h: Any, x: Any) -> bool:
    """Диспетчеризация в check/check2/check3/check4 по арности `h`."""
    return _CHECKS_BY_ARITY[validate_arity(arity_of(h))](h, x)


_CHECKS_BY_ARITY = {1: check, 2: check2, 3: check3, 4: check4}
