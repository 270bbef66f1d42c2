"""Tests for the navigation table and role-gated views."""

import pytest

from roster.core.domain_types import Role, View
from roster.core.errors import AccessDeniedError, ResourceNotFoundError
from roster.core.navigation import ROUTES, resolve_route, visible_links


def test_root_and_users_resolve_to_users_view():
    assert resolve_route("/", Role.USER) == View.USERS
    assert resolve_route("/users", Role.USER) == View.USERS


def test_about_is_open_to_everyone():
    assert resolve_route("/about", Role.USER) == View.ABOUT


def test_new_user_form_for_admin():
    assert resolve_route("/newuser", Role.ADMIN) == View.USER_FORM


def test_new_user_form_denied_for_regular_user():
    with pytest.raises(AccessDeniedError) as exc_info:
        resolve_route("/newuser", Role.USER)
    assert exc_info.value.message == "You do not have permission to access this feature"


def test_unknown_path_not_found():
    with pytest.raises(ResourceNotFoundError):
        resolve_route("/admin", Role.ADMIN)


def test_route_table_has_four_paths():
    assert set(ROUTES) == {"/", "/users", "/newuser", "/about"}


def test_new_user_link_only_visible_to_admin():
    assert "/newuser" in [link.path for link in visible_links(Role.ADMIN)]
    assert "/newuser" not in [link.path for link in visible_links(Role.USER)]
