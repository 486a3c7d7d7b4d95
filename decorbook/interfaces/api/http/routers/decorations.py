"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/decorations.py
===============================================================================

Name:
    Service Listings Router

Responsibilities:
    - Listar / obtener publicaciones.
    - Crear / actualizar / borrar publicaciones.
    - Traducir DecorationError -> RFC7807.

Collaborators:
    - application.usecases.catalog
    - container (factories de DI)
    - schemas.decorations
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from .....application.usecases import (
    CreateDecorationUseCase,
    DeleteDecorationUseCase,
    GetDecorationUseCase,
    ListDecorationsUseCase,
    UpdateDecorationUseCase,
)
from .....container import (
    get_create_decoration_use_case,
    get_delete_decoration_use_case,
    get_get_decoration_use_case,
    get_list_decorations_use_case,
    get_update_decoration_use_case,
)
from ..error_mapping import raise_decoration_error
from ..schemas.decorations import (
    CreateDecorationReq,
    DecorationRes,
    DeleteDecorationRes,
    UpdateDecorationReq,
)

router = APIRouter(tags=["decorations"])


@router.get("/decorations", response_model=list[DecorationRes])
def list_decorations(
    use_case: ListDecorationsUseCase = Depends(get_list_decorations_use_case),
):
    result = use_case.execute()
    return [DecorationRes.from_entity(d) for d in result.decorations]


@router.get("/decorations/{decoration_id}", response_model=DecorationRes)
def get_decoration(
    decoration_id: str,
    use_case: GetDecorationUseCase = Depends(get_get_decoration_use_case),
):
    result = use_case.execute(decoration_id)
    if result.error is not None:
        raise_decoration_error(result.error)
    return DecorationRes.from_entity(result.decoration)


@router.post("/decorations", response_model=DecorationRes)
def create_decoration(
    req: CreateDecorationReq,
    use_case: CreateDecorationUseCase = Depends(get_create_decoration_use_case),
):
    result = use_case.execute(req.to_entity())
    if result.error is not None:
        raise_decoration_error(result.error)
    return DecorationRes.from_entity(result.decoration)


@router.put("/decorations/{decoration_id}", response_model=DecorationRes)
def update_decoration(
    decoration_id: str,
    req: UpdateDecorationReq,
    use_case: UpdateDecorationUseCase = Depends(get_update_decoration_use_case),
):
    result = use_case.execute(decoration_id, req.changes())
    if result.error is not None:
        raise_decoration_error(result.error)
    return DecorationRes.from_entity(result.decoration)


@router.delete("/decorations/{decoration_id}", response_model=DeleteDecorationRes)
def delete_decoration(
    decoration_id: str,
    use_case: DeleteDecorationUseCase = Depends(get_delete_decoration_use_case),
):
    result = use_case.execute(decoration_id)
    if result.error is not None:
        raise_decoration_error(result.error)
    return DeleteDecorationRes(deleted_count=1)
