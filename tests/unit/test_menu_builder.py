from app.halolight.constants.icons import MenuIcon
from app.halolight.services.menu_builder import (
    MenuNode,
    build_breadcrumbs,
    build_menu,
    flatten_menu,
    is_active_path,
)
from app.halolight.services.route_config import load_default_registry
from app.halolight.services.route_registry import build_registry


def test_child_pruned_when_its_permission_missing(scenario_registry) -> None:
    menu = build_menu(scenario_registry, frozenset({"users:read"}))

    assert len(menu) == 1
    assert menu[0].path == "/users"
    assert menu[0].children == ()


def test_wildcard_shows_full_tree(scenario_registry) -> None:
    menu = build_menu(scenario_registry, frozenset({"*"}))

    assert [node.path for node in menu] == ["/users"]
    assert [child.path for child in menu[0].children] == ["/users/new"]


def test_pruned_parent_hides_unrestricted_children() -> None:
    registry = build_registry(
        [
            {"path": "/admin", "label": "Admin", "required_permissions": ["admin:view"]},
            {"path": "/admin/help", "label": "Help", "parent_path": "/admin"},
            {"path": "/public", "label": "Public"},
        ]
    )

    menu = build_menu(registry, frozenset({"something:else"}))

    assert flatten_menu(menu) == ["/public"]


def test_no_emitted_node_has_a_pruned_ancestor() -> None:
    registry = load_default_registry("")
    granted = frozenset({"teams:view", "documents:view", "roles:view"})

    menu = build_menu(registry, granted)

    for path in flatten_menu(menu):
        for ancestor in registry.ancestors(path):
            assert all(permission in granted for permission in ancestor.required_permissions)


def test_wildcard_emits_every_listed_route_in_sibling_order() -> None:
    registry = build_registry(
        [
            {"path": "/z", "label": "Z", "order": 2},
            {"path": "/y", "label": "Y", "order": 1},
            {"path": "/y/b", "label": "YB", "parent_path": "/y", "order": 5},
            {"path": "/y/a", "label": "YA", "parent_path": "/y", "order": 5},
            {"path": "/x", "label": "X", "order": 1, "required_permissions": ["x:view"]},
        ]
    )

    menu = build_menu(registry, frozenset({"*"}))

    assert [node.path for node in menu] == ["/y", "/x", "/z"]
    assert [child.path for child in menu[0].children] == ["/y/b", "/y/a"]
    assert sorted(flatten_menu(menu)) == sorted(entry.path for entry in registry)


def test_group_only_container_dropped_when_empty() -> None:
    registry = load_default_registry("")

    menu = build_menu(registry, frozenset({"dashboard:view", "files:view"}))

    paths = [node.path for node in menu]
    assert paths == ["/dashboard", "/content"]
    content = menu[1]
    assert content.group_only is True
    assert [child.path for child in content.children] == ["/files"]
    assert "/operations" not in paths


def test_parent_without_surviving_children_is_still_emitted() -> None:
    registry = load_default_registry("")

    menu = build_menu(registry, frozenset({"settings:view"}))

    assert menu == (
        MenuNode(path="/settings", label="系统设置", icon=MenuIcon.SETTINGS, children=()),
    )


def test_hidden_routes_never_listed() -> None:
    registry = load_default_registry("")

    paths = flatten_menu(build_menu(registry, frozenset({"*"})))

    assert "/profile" not in paths
    assert "/settings/teams/roles" not in paths
    assert "/settings/teams" in paths


def test_active_flag_propagates_to_parent() -> None:
    registry = load_default_registry("")

    menu = build_menu(registry, frozenset({"*"}), active_path="/files/reports")

    content = next(node for node in menu if node.path == "/content")
    files = next(node for node in content.children if node.path == "/files")
    documents = next(node for node in content.children if node.path == "/documents")
    assert files.active is True
    assert documents.active is False
    assert content.active is True
    assert all(node.active is False for node in menu if node.path != "/content")


def test_build_menu_does_not_mutate_registry(scenario_registry) -> None:
    before = [(entry, scenario_registry.children_of(entry.path)) for entry in scenario_registry]

    build_menu(scenario_registry, frozenset({"users:read"}))
    build_menu(scenario_registry, frozenset())

    assert [(entry, scenario_registry.children_of(entry.path)) for entry in scenario_registry] == before


def test_is_active_path() -> None:
    assert is_active_path("/users", "/users") is True
    assert is_active_path("/users", "/users/42") is True
    assert is_active_path("/users", "/users-archive") is False
    assert is_active_path("/users", None) is False


def test_breadcrumbs_follow_hierarchy() -> None:
    registry = load_default_registry("")

    crumbs = build_breadcrumbs(registry, "/calendar")

    assert [(crumb.label, crumb.href) for crumb in crumbs] == [("业务运营", None), ("日程安排", "/calendar")]
    assert [crumb.label for crumb in build_breadcrumbs(registry, "/settings/teams/roles")] == [
        "系统设置",
        "团队设置",
        "角色管理",
    ]
    assert build_breadcrumbs(registry, "/nowhere") == ()
