"""
Shapes — замкнутые кривые над единичным доменом

Замкнутая кривая — гомотопия, у которой `f` и `g` совпадают: кривая
начинается и заканчивается в одной точке. Параметр приводится по модулю 1
до вычисления угла, поэтому h((), 1.0) попадает ровно в g(()) (sin(2π) в
плавающей точке не равен нулю).
"""

import math
from typing import Any, Tuple

from pydantic import BaseModel, Field

from homotopy.core.capability import Homotopy


class Circle(BaseModel, Homotopy):
    """
    Окружность, пройденная один раз против часовой стрелки от угла 0.

    Immutable модель (frozen=True), строится по ключевым аргументам:

        Circle(center=(0.0, 0.0), radius=1.0)

    Точки на выходе — tuple `(x, y)`.
    """

    center: Tuple[float, float] = Field((0.0, 0.0), description="Центр окружности")
    radius: float = Field(1.0, ge=0, description="Радиус (неотрицательный)")

    model_config = {"frozen": True}  # Immutable

    def _point(self, angle: float) -> Tuple[float, float]:
        cx, cy = self.center
        return (cx + self.radius * math.cos(angle), cy + self.radius * math.sin(angle))

    def f(self, x: Any = ()) -> Tuple[float, float]:
        return self._point(0.0)

    def g(self, x: Any = ()) -> Tuple[float, float]:
        return self._point(0.0)

    def h(self, x: Any, s: float) -> Tuple[float, float]:
        return self._point((s % 1.0) * 2.0 * math.pi)
