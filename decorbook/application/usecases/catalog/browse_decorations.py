from __future__ import annotations

from ....domain.repositories import DecorationRepository
from .decoration_results import (
    DecorationListResult,
    DecorationResult,
    decoration_not_found,
)


class ListDecorationsUseCase:
    def __init__(self, decoration_repository: DecorationRepository) -> None:
        self._decorations = decoration_repository

    def execute(self) -> DecorationListResult:
        return DecorationListResult(decorations=self._decorations.list_decorations())


class GetDecorationUseCase:
    def __init__(self, decoration_repository: DecorationRepository) -> None:
        self._decorations = decoration_repository

    def execute(self, decoration_id: str) -> DecorationResult:
        decoration = self._decorations.get(decoration_id)
        if decoration is None:
            return DecorationResult(error=decoration_not_found(decoration_id))
        return DecorationResult(decoration=decoration)
