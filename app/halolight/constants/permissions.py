"""
权限注册表

菜单、路由守卫与权限选择器共用这里的权限编码与展示名称。
"""
from __future__ import annotations

from dataclasses import dataclass

from app.halolight.core.permissions import WILDCARD


@dataclass(frozen=True)
class PermissionItem:
    code: str
    label: str


WILDCARD_OPTION = PermissionItem(WILDCARD, "所有权限")

PERMISSION_REGISTRY: list[PermissionItem] = [
    WILDCARD_OPTION,
    PermissionItem("dashboard:view", "查看仪表盘"),
    PermissionItem("users:view", "查看用户"),
    PermissionItem("users:create", "创建用户"),
    PermissionItem("users:edit", "编辑用户"),
    PermissionItem("users:delete", "删除用户"),
    PermissionItem("roles:view", "查看角色"),
    PermissionItem("roles:create", "创建角色"),
    PermissionItem("roles:edit", "编辑角色"),
    PermissionItem("roles:delete", "删除角色"),
    PermissionItem("permissions:view", "查看权限"),
    PermissionItem("permissions:edit", "编辑权限"),
    PermissionItem("analytics:view", "查看数据分析"),
    PermissionItem("analytics:export", "导出数据分析"),
    PermissionItem("documents:view", "查看文档"),
    PermissionItem("documents:create", "创建文档"),
    PermissionItem("documents:edit", "编辑文档"),
    PermissionItem("documents:delete", "删除文档"),
    PermissionItem("files:view", "查看文件"),
    PermissionItem("files:upload", "上传文件"),
    PermissionItem("files:delete", "删除文件"),
    PermissionItem("messages:view", "查看消息"),
    PermissionItem("messages:send", "发送消息"),
    PermissionItem("calendar:view", "查看日程"),
    PermissionItem("calendar:edit", "编辑日程"),
    PermissionItem("notifications:view", "查看通知"),
    PermissionItem("notifications:manage", "管理通知"),
    PermissionItem("settings:view", "查看设置"),
    PermissionItem("settings:edit", "编辑设置"),
    PermissionItem("teams:view", "查看团队"),
    PermissionItem("teams:create", "创建团队"),
    PermissionItem("teams:edit", "编辑团队"),
    PermissionItem("teams:delete", "删除团队"),
]


@dataclass(frozen=True)
class RolePreset:
    name: str
    label: str
    description: str
    permissions: tuple[str, ...]


DEFAULT_ROLES: dict[str, RolePreset] = {
    "admin": RolePreset("admin", "管理员", "系统管理员，拥有所有权限", (WILDCARD,)),
    "manager": RolePreset(
        "manager",
        "经理",
        "部门经理，管理用户和查看数据",
        ("dashboard:view", "users:view", "users:create", "users:edit", "analytics:view"),
    ),
    "user": RolePreset("user", "普通用户", "普通用户，只能查看仪表盘", ("dashboard:view",)),
}
