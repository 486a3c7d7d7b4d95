"""
Casos de uso de publicaciones de servicios (decoraciones).
"""

from .browse_decorations import GetDecorationUseCase, ListDecorationsUseCase
from .decoration_results import (
    DecorationError,
    DecorationErrorCode,
    DecorationListResult,
    DecorationResult,
    DeleteDecorationResult,
)
from .manage_decorations import (
    CreateDecorationUseCase,
    DeleteDecorationUseCase,
    UpdateDecorationUseCase,
)

__all__ = [
    "DecorationError",
    "DecorationErrorCode",
    "DecorationResult",
    "DecorationListResult",
    "DeleteDecorationResult",
    "CreateDecorationUseCase",
    "UpdateDecorationUseCase",
    "DeleteDecorationUseCase",
    "ListDecorationsUseCase",
    "GetDecorationUseCase",
]
