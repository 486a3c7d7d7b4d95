"""Frontera de identidad: verificación bearer y guards de rol."""

from .auth import require_admin, require_principal

__all__ = ["require_principal", "require_admin"]
