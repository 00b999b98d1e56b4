"""
Sampling — поточечное сравнение 1-параметрических гомотопий на сетке

Используется для равенств редукции вида "QuadraticBezier.from_linear(a, b)
равна Lerp(a, b)": обе гомотопии вычисляются на одной сетке единичного
отрезка и сравниваются с допуском.

Сетка — `i / steps` для i в 0..steps, поэтому концы ровно 0.0 и 1.0
(повторное `s += step` накапливало бы ошибку).
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from homotopy.core.params import require_arity
from homotopy.validation.checks import values_equal

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


class SamplingConfig(BaseModel):
    """
    Сетка сэмплирования и допуск сравнения.

    Immutable модель (frozen=True); значения по умолчанию дают сетку с шагом
    0.1 и допуск 1e-6.
    """

    steps: int = Field(10, gt=0, description="Число делений отрезка [0, 1]")
    tolerance: float = Field(
        1e-6, ge=0, description="Абсолютный допуск (0 — точное равенство)"
    )

    model_config = {"frozen": True}  # Immutable


DEFAULT_SAMPLING = SamplingConfig()


# =============================================================================
# GRID
# =============================================================================


def sample_unit_interval(config: Optional[SamplingConfig] = None) -> List[float]:
    """
    Сетка единичного отрезка.

    Examples:
        >>> sample_unit_interval(SamplingConfig(steps=4))
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    config = config or DEFAULT_SAMPLING
    return [i / config.steps for i in range(config.steps + 1)]


def values_close(a: Any, b: Any, tolerance: float) -> bool:
    """
    Равенство с абсолютным допуском (точное при tolerance == 0).

    Массивы разной формы считаются неравными.
    """
    if tolerance == 0:
        return values_equal(a, b)
    if isinstance(a, (tuple, list)) and isinstance(b, (tuple, list)):
        return len(a) == len(b) and all(
            values_close(p, q, tolerance) for p, q in zip(a, b)
        )
    if hasattr(a, "shape") and hasattr(b, "shape") and a.shape != b.shape:
        return False
    try:
        result = abs(a - b) <= tolerance
    except ValueError:
        # numpy: формы не согласуются при broadcast
        return False
    if hasattr(result, "all"):
        return bool(result.all())
    return bool(result)


def agree(
    h1: Any,
    h2: Any,
    x: Any = (),
    config: Optional[SamplingConfig] = None,
) -> bool:
    """
    Поточечное совпадение двух 1-параметрических гомотопий на сетке.

    Args:
        h1, h2: Сравниваемые гомотопии
        x: Значение домена, в котором вычисляются обе
        config: Сетка и допуск (default: шаг 0.1, 1e-6)

    Returns:
        True, если h1.h(x, s) и h2.h(x, s) совпадают в каждой точке сетки

    Raises:
        ArityError: Если хотя бы одна гомотопия не 1-параметрическая
    """
    require_arity(h1, 1, "agree operand h1")
    require_arity(h2, 1, "agree operand h2")
    config = config or DEFAULT_SAMPLING
    for s in sample_unit_interval(config):
        if not values_close(h1.h(x, s), h2.h(x, s), config.tolerance):
            logger.debug("homotopies disagree at s=%s (tolerance=%s)", s, config.tolerance)
            return False
    return True
