"""
Примитивные гомотопии: листья дерева алгебры.
"""

from homotopy.primitives.basic import Dirac, DiracFrom, Identity
from homotopy.primitives.interpolation import CubicBezier, Lerp, QuadraticBezier, lerp
from homotopy.primitives.shapes import Circle

__all__ = [
    # Basic
    "Identity",
    "Dirac",
    "DiracFrom",
    # Interpolation
    "lerp",
    "Lerp",
    "QuadraticBezier",
    "CubicBezier",
    # Shapes
    "Circle",
]
