"""
homotopy — алгебра гомотопий над гиперкубами размерности 1..4

Примитивы (Identity, Dirac, Lerp, кривые Безье, Circle) объединяются
структурными комбинаторами (Compose, Square, Cube, Inverse, AsVec) в
гомотопии большей размерности; комбинаторы граней (Left, Right, Top, ...)
проецируют их обратно вниз, а check/check2/check3/check4 рекурсивно
проверяют инвариант гомотопии на каждой грани.
"""

from homotopy.combinators import (
    AsVec,
    Back,
    Bottom,
    Compose,
    CrossSection,
    Cube,
    Diagonal,
    Face,
    Front,
    FrontBack,
    Future,
    Inverse,
    Left,
    LeftRight,
    Map,
    Past,
    PastFuture,
    Right,
    SMap,
    Square,
    Top,
    TopBottom,
    sweep,
)
from homotopy.contracts import load_sampling_config, validate_sampling_config
from homotopy.core import (
    MAX_ARITY,
    ArityError,
    CapabilityError,
    FaceValueError,
    Homotopy,
    HomotopyError,
    arity_of,
    corner,
    origin,
)
from homotopy.primitives import (
    Circle,
    CubicBezier,
    Dirac,
    DiracFrom,
    Identity,
    Lerp,
    QuadraticBezier,
)
from homotopy.validation import (
    SamplingConfig,
    agree,
    check,
    check2,
    check3,
    check4,
    check_n,
    sample_unit_interval,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Homotopy",
    "MAX_ARITY",
    "arity_of",
    "origin",
    "corner",
    # Errors
    "HomotopyError",
    "ArityError",
    "CapabilityError",
    "FaceValueError",
    # Primitives
    "Identity",
    "Dirac",
    "DiracFrom",
    "Lerp",
    "QuadraticBezier",
    "CubicBezier",
    "Circle",
    # Structural combinators
    "Compose",
    "Map",
    "SMap",
    "Square",
    "Cube",
    "Inverse",
    "AsVec",
    "sweep",
    # Sides
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
    "CrossSection",
    "LeftRight",
    "TopBottom",
    "FrontBack",
    "PastFuture",
    # Validation
    "check",
    "check2",
    "check3",
    "check4",
    "check_n",
    "agree",
    "sample_unit_interval",
    "SamplingConfig",
    # Contracts
    "validate_sampling_config",
    "load_sampling_config",
]
