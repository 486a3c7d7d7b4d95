"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/users.py
===============================================================================

Name:
    Users Router

Responsibilities:
    - Upsert en login (POST /user), rol del caller (GET /user/role).
    - Listado para gestión de usuarios (GET /userManage).
    - Cambio de rol por admin (PATCH /users/update-role).
    - Traducir UserError -> RFC7807.

Collaborators:
    - application.usecases.users
    - identity.auth (require_principal, require_admin)
    - container (factories de DI)
    - schemas.users
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from .....application.usecases import (
    GetUserRoleUseCase,
    ListUsersUseCase,
    UpdateUserRoleUseCase,
    UpsertUserUseCase,
)
from .....application.usecases.users import UserLoginInput
from .....container import (
    get_list_users_use_case,
    get_update_user_role_use_case,
    get_upsert_user_use_case,
    get_user_role_use_case,
)
from .....domain.value_objects import Principal
from .....identity.auth import require_admin, require_principal
from ..error_mapping import raise_user_error
from ..schemas.users import (
    UpdateRoleReq,
    UpsertUserRes,
    UserLoginReq,
    UserRes,
    UserRoleRes,
)

router = APIRouter(tags=["users"])


@router.post("/user", response_model=UpsertUserRes)
def upsert_user(
    req: UserLoginReq,
    use_case: UpsertUserUseCase = Depends(get_upsert_user_use_case),
):
    result = use_case.execute(
        UserLoginInput(
            email=req.email,
            name=req.name,
            photo=req.photo,
            phone=req.phone,
            division=req.division,
            district=req.district,
        )
    )
    if result.error is not None:
        raise_user_error(result.error)

    if result.created:
        return UpsertUserRes(created=True, inserted_id=result.user_id)
    return UpsertUserRes(created=False, matched_count=1)


@router.get("/user/role", response_model=UserRoleRes)
def get_user_role(
    principal: Principal = Depends(require_principal()),
    use_case: GetUserRoleUseCase = Depends(get_user_role_use_case),
):
    return UserRoleRes(role=use_case.execute(principal.email))


@router.get(
    "/userManage",
    response_model=list[UserRes],
    response_model_exclude_none=True,
)
def list_users(
    _principal: Principal = Depends(require_principal()),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    result = use_case.execute()
    return [UserRes.from_entity(u) for u in result.users]


@router.patch(
    "/users/update-role",
    response_model=UserRes,
    response_model_exclude_none=True,
)
def update_user_role(
    req: UpdateRoleReq,
    _admin: Principal = Depends(require_admin()),
    use_case: UpdateUserRoleUseCase = Depends(get_update_user_role_use_case),
):
    result = use_case.execute(req.email, req.role)
    if result.error is not None:
        raise_user_error(result.error)
    return UserRes.from_entity(result.user)
