from pydantic import BaseModel, Field


class PermissionOptionOut(BaseModel):
    value: str = Field(..., description="Permission code (`*` grants every permission).")
    label: str = Field(..., description="Human-friendly label.")


class RolePresetOut(BaseModel):
    name: str
    label: str
    description: str
    permissions: list[str]


class PermissionCatalogResponse(BaseModel):
    options: list[PermissionOptionOut]
    roles: list[RolePresetOut]


class PermissionSelectionRequest(BaseModel):
    current: list[str] = Field(default_factory=list, description="Selection before the toggle.")
    target: str = Field(..., min_length=1, description="Permission being toggled.")
    checked: bool = Field(..., description="New checkbox state for `target`.")


class PermissionSelectionResponse(BaseModel):
    permissions: list[str]
    summary: str
