"""
===============================================================================
USE CASE: Find Available Decorators
===============================================================================

Rules:
    - Si falta division / district / bookingDate -> resultado vacío
      ({available: false, decorators: []}), no es un error.
    - Candidatos: usuarios con role=decorator y division/district exactos.
    - Un decorador sin agenda registrada está disponible.
    - Si no, está disponible sii la working date guardada (fecha de
      calendario) es igual a bookingDate. start_time / end_time no se comparan.
===============================================================================
"""

from __future__ import annotations

from ....domain.booking_policy import is_available_on
from ....domain.repositories import UserRepository
from .booking_results import AvailabilityResult


class FindAvailableDecoratorsUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(
        self,
        division: str | None,
        district: str | None,
        booking_date: str | None,
    ) -> AvailabilityResult:
        if not division or not district or not booking_date:
            return AvailabilityResult(available=False, decorators=[])

        candidates = self._users.list_decorators(division=division, district=district)
        available = [d for d in candidates if is_available_on(d, booking_date)]
        return AvailabilityResult(available=bool(available), decorators=available)
