"""
Ядро алгебры гомотопий: абстракция Homotopy, арифметика параметров, ошибки.
"""

from homotopy.core.capability import Homotopy, default_input_of
from homotopy.core.errors import (
    ArityError,
    CapabilityError,
    FaceValueError,
    HomotopyError,
)
from homotopy.core.params import (
    HIGH,
    LOW,
    MAX_ARITY,
    Param,
    arity_of,
    corner,
    face_corner,
    insert_axis,
    origin,
    require_arity,
    require_blendable,
    require_vector_space,
    split_param,
    validate_arity,
)

__all__ = [
    # Capability
    "Homotopy",
    "default_input_of",
    # Errors
    "HomotopyError",
    "ArityError",
    "CapabilityError",
    "FaceValueError",
    # Params: Constants
    "MAX_ARITY",
    "LOW",
    "HIGH",
    "Param",
    # Params: Functions
    "arity_of",
    "corner",
    "face_corner",
    "insert_axis",
    "origin",
    "require_arity",
    "require_blendable",
    "require_vector_space",
    "split_param",
    "validate_arity",
]
