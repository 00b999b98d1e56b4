"""
Комбинаторы: композиция, произведения, инверсия, адаптеры и грани.
"""

from homotopy.combinators.as_vec import AsVec
from homotopy.combinators.compose import Compose, Map, SMap
from homotopy.combinators.inverse import Inverse
from homotopy.combinators.product import Cube, Square
from homotopy.combinators.sides import (
    AXIS_FRONT_BACK,
    AXIS_LEFT_RIGHT,
    AXIS_PAST_FUTURE,
    AXIS_TOP_BOTTOM,
    Back,
    Bottom,
    CrossSection,
    Diagonal,
    Face,
    Front,
    FrontBack,
    Future,
    Left,
    LeftRight,
    Past,
    PastFuture,
    Right,
    Top,
    TopBottom,
)
from homotopy.combinators.sweep import blend_points, sweep

__all__ = [
    # Structural
    "AsVec",
    "Compose",
    "Map",
    "SMap",
    "Inverse",
    "Square",
    "Cube",
    "sweep",
    "blend_points",
    # Sides: Axes
    "AXIS_LEFT_RIGHT",
    "AXIS_TOP_BOTTOM",
    "AXIS_FRONT_BACK",
    "AXIS_PAST_FUTURE",
    # Sides: Faces
    "Diagonal",
    "Face",
    "Left",
    "Right",
    "Top",
    "Bottom",
    "Front",
    "Back",
    "Past",
    "Future",
    # Sides: Cross-sections
    "CrossSection",
    "LeftRight",
    "TopBottom",
    "FrontBack",
    "PastFuture",
]
