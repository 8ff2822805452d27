from app.halolight.core.permissions import (
    WILDCARD,
    missing_permissions,
    normalize_permissions,
    permission_set,
    satisfies,
    satisfies_all,
)


def test_wildcard_satisfies_any_permission() -> None:
    granted = frozenset({WILDCARD})

    for required in ["users:view", "roles:delete", "anything", "users:*", ""]:
        assert satisfies(granted, required)


def test_exact_token_match_only() -> None:
    granted = frozenset({"a"})

    assert satisfies(granted, "a") is True
    assert satisfies(granted, "b") is False


def test_no_prefix_or_glob_matching() -> None:
    granted = frozenset({"users:*", "users"})

    assert satisfies(granted, "users:view") is False
    assert satisfies(granted, "users:*") is True


def test_satisfies_all_is_vacuously_true_for_public_routes() -> None:
    assert satisfies_all(frozenset(), []) is True
    assert satisfies_all(frozenset({"a"}), ["a"]) is True
    assert satisfies_all(frozenset({"a"}), ["a", "b"]) is False
    assert satisfies_all(frozenset({WILDCARD}), ["a", "b"]) is True


def test_missing_permissions_keeps_declaration_order() -> None:
    assert missing_permissions(frozenset({"b"}), ["c", "b", "a"]) == ("c", "a")
    assert missing_permissions(frozenset({WILDCARD}), ["c", "a"]) == ()


def test_permission_set_strips_blank_values() -> None:
    assert permission_set([" users:view ", "", "  ", "roles:view"]) == frozenset({"users:view", "roles:view"})
    assert permission_set(None) == frozenset()


def test_normalize_collapses_wildcard() -> None:
    assert normalize_permissions(["*", "users:view"]) == frozenset({"*"})
    assert normalize_permissions(["users:view"]) == frozenset({"users:view"})
