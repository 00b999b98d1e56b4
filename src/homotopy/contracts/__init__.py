"""
Contract Validation Module

Валидация конфигурационных документов по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    SamplingConfigValidator,
    SchemaLoader,
    load_sampling_config,
    validate_sampling_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SamplingConfigValidator",
    # Functions
    "validate_sampling_config",
    "load_sampling_config",
]
