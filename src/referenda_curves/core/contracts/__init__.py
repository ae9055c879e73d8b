"""
Contract Validation Module

Модуль для валидации JSON контрактов (таблица треков).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TrackTableValidator,
    validate_track_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TrackTableValidator",
    # Functions
    "validate_track_table",
]
