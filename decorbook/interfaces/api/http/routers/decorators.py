"""
Decorators Router: listado público de decoradores y consulta de disponibilidad.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from .....application.usecases import (
    FindAvailableDecoratorsUseCase,
    ListDecoratorsUseCase,
)
from .....container import (
    get_find_available_decorators_use_case,
    get_list_decorators_use_case,
)
from .....domain.value_objects import Principal
from .....identity.auth import require_principal
from ..schemas.users import AvailableDecoratorsRes, UserRes

router = APIRouter(tags=["decorators"])


@router.get(
    "/decorators",
    response_model=list[UserRes],
    response_model_exclude_none=True,
)
def list_decorators(
    use_case: ListDecoratorsUseCase = Depends(get_list_decorators_use_case),
):
    result = use_case.execute()
    return [UserRes.from_entity(u) for u in result.users]


@router.get(
    "/decorators/available",
    response_model=AvailableDecoratorsRes,
    response_model_exclude_none=True,
)
def find_available_decorators(
    division: str | None = Query(None),
    district: str | None = Query(None),
    booking_date: str | None = Query(None, alias="bookingDate"),
    _principal: Principal = Depends(require_principal()),
    use_case: FindAvailableDecoratorsUseCase = Depends(
        get_find_available_decorators_use_case
    ),
):
    result = use_case.execute(division, district, booking_date)
    return AvailableDecoratorsRes(
        available=result.available,
        decorators=[UserRes.from_entity(u) for u in result.decorators],
    )
