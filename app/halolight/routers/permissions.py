from fastapi import APIRouter

from app.halolight.constants.permissions import DEFAULT_ROLES
from app.halolight.schemas.permissions import (
    PermissionCatalogResponse,
    PermissionOptionOut,
    PermissionSelectionRequest,
    PermissionSelectionResponse,
    RolePresetOut,
)
from app.halolight.services.permission_editor import default_permission_options, selection_summary, toggle_selection

router = APIRouter()


@router.get("/catalog", response_model=PermissionCatalogResponse)
def get_catalog():
    return PermissionCatalogResponse(
        options=[PermissionOptionOut(value=option.value, label=option.label) for option in default_permission_options()],
        roles=[
            RolePresetOut(
                name=role.name,
                label=role.label,
                description=role.description,
                permissions=list(role.permissions),
            )
            for role in DEFAULT_ROLES.values()
        ],
    )


@router.post("/selection", response_model=PermissionSelectionResponse)
def toggle_permission(payload: PermissionSelectionRequest):
    selected = toggle_selection(payload.current, payload.target, payload.checked)
    return PermissionSelectionResponse(permissions=sorted(selected), summary=selection_summary(selected))
