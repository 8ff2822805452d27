"""
路由与菜单配置

ROUTES_CONFIG_PATH 未设置时使用的内置路由表。
"""
from __future__ import annotations

from app.halolight.constants.icons import MenuIcon

# 无需认证即可访问
PUBLIC_ROUTES: tuple[str, ...] = ("/login", "/register", "/forgot-password", "/reset-password")

# 已登录用户不应再访问
AUTH_ROUTES: tuple[str, ...] = ("/login", "/register", "/forgot-password", "/reset-password")

DEFAULT_ROUTES: list[dict] = [
    {"path": "/dashboard", "label": "仪表盘", "required_permissions": ["dashboard:view"], "order": 0, "icon": MenuIcon.DASHBOARD},
    {"path": "/users", "label": "用户管理", "required_permissions": ["users:view"], "order": 10, "icon": MenuIcon.USERS},
    {"path": "/roles", "label": "角色权限", "required_permissions": ["roles:view"], "order": 20, "icon": MenuIcon.SHIELD},
    {"path": "/content", "label": "内容管理", "order": 30, "icon": MenuIcon.FILE_TEXT, "group_only": True},
    {
        "path": "/documents",
        "label": "文档管理",
        "required_permissions": ["documents:view"],
        "parent_path": "/content",
        "order": 0,
        "icon": MenuIcon.FILE_TEXT,
    },
    {
        "path": "/files",
        "label": "文件存储",
        "required_permissions": ["files:view"],
        "parent_path": "/content",
        "order": 10,
        "icon": MenuIcon.FOLDER,
    },
    {"path": "/operations", "label": "业务运营", "order": 40, "icon": MenuIcon.BAR_CHART, "group_only": True},
    {
        "path": "/analytics",
        "label": "数据分析",
        "required_permissions": ["analytics:view"],
        "parent_path": "/operations",
        "order": 0,
        "icon": MenuIcon.BAR_CHART,
    },
    {
        "path": "/messages",
        "label": "消息中心",
        "required_permissions": ["messages:view"],
        "parent_path": "/operations",
        "order": 10,
        "icon": MenuIcon.MAIL,
    },
    {
        "path": "/calendar",
        "label": "日程安排",
        "required_permissions": ["calendar:view"],
        "parent_path": "/operations",
        "order": 20,
        "icon": MenuIcon.CALENDAR,
    },
    {"path": "/notifications", "label": "通知中心", "required_permissions": ["notifications:view"], "order": 50, "icon": MenuIcon.BELL},
    {"path": "/settings", "label": "系统设置", "required_permissions": ["settings:view"], "order": 60, "icon": MenuIcon.SETTINGS},
    {
        "path": "/settings/teams",
        "label": "团队设置",
        "required_permissions": ["teams:view"],
        "parent_path": "/settings",
        "order": 0,
        "icon": MenuIcon.USERS,
    },
    {
        "path": "/settings/teams/roles",
        "label": "角色管理",
        "required_permissions": ["roles:view"],
        "parent_path": "/settings/teams",
        "order": 0,
        "icon": MenuIcon.SHIELD,
        "hidden": True,
    },
    {
        "path": "/profile",
        "label": "个人资料",
        "required_permissions": ["settings:view"],
        "order": 70,
        "icon": MenuIcon.USER,
        "hidden": True,
    },
]
