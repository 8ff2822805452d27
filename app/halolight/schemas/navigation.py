from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.halolight.constants.icons import MenuIcon


class RouteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., min_length=1, description="Routing key, unique across the registry (for example `/users`).")
    label: str = Field(..., min_length=1, description="Display label used by the menu, breadcrumbs and page title.")
    required_permissions: list[str] = Field(
        default_factory=list,
        description="Every permission listed must be granted; empty means any authenticated session.",
    )
    parent_path: str | None = Field(default=None, description="Parent route; absent for top-level entries.")
    order: int = Field(default=0, description="Sort key among siblings, ascending.")
    icon: MenuIcon | None = Field(default=None, description="Icon identifier resolved by the presentation layer.")
    group_only: bool = Field(default=False, description="Container entry that is not itself navigable.")
    hidden: bool = Field(default=False, description="Routable entry that is never listed in the menu.")

    @model_validator(mode="before")
    @classmethod
    def _accept_single_permission(cls, data):
        if isinstance(data, dict) and "required_permission" in data:
            data = dict(data)
            single = data.pop("required_permission")
            if single is not None and "required_permissions" not in data:
                data["required_permissions"] = [single]
        return data

    @field_validator("path", "parent_path")
    @classmethod
    def _must_be_absolute(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith("/"):
            raise ValueError("route paths must start with '/'")
        return value


class MenuNodeOut(BaseModel):
    path: str
    label: str
    icon: MenuIcon | None = None
    active: bool = False
    group_only: bool = False
    children: list["MenuNodeOut"] = Field(default_factory=list)


class MenuResponse(BaseModel):
    items: list[MenuNodeOut]
    active: str | None = None
    sidebar_collapsed: bool = False
    theme: Literal["light", "dark", "system"] = "system"


class BreadcrumbOut(BaseModel):
    label: str
    href: str | None = None


class BreadcrumbsResponse(BaseModel):
    path: str
    title: str
    breadcrumbs: list[BreadcrumbOut]


DecisionKind = Literal["allow", "redirect_to_login", "forbidden"]


class DecisionResponse(BaseModel):
    decision: DecisionKind = Field(..., description="Outcome of the navigation check.")
    path: str = Field(..., description="Requested path.")
    location: str | None = Field(default=None, description="Redirect target when decision is `redirect_to_login`.")
    missing: list[str] = Field(default_factory=list, description="Unsatisfied permissions when decision is `forbidden`.")


class EnterResponse(BaseModel):
    path: str
    title: str


class PostLoginRedirectResponse(BaseModel):
    location: str


MenuNodeOut.model_rebuild()
