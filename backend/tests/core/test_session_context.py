"""Session Context — tests for login/logout transitions and role guards."""

import pytest

from roster.core.accounts import CurrentUser
from roster.core.domain_types import Role
from roster.core.errors import AccessDeniedError, NotAuthenticatedError
from roster.core.session_context import SessionContext

ADMIN = CurrentUser("admin", Role.ADMIN, "Administrator")
USER = CurrentUser("user", Role.USER, "Regular User")


def test_new_context_is_anonymous():
    ctx = SessionContext()
    assert not ctx.is_authenticated
    assert not ctx.is_admin


def test_login_sets_current_user():
    ctx = SessionContext()
    ctx.login(ADMIN)
    assert ctx.is_authenticated
    assert ctx.is_admin
    assert ctx.current_user == ADMIN


def test_logout_clears_current_user():
    ctx = SessionContext(current_user=USER)
    ctx.logout()
    assert ctx.current_user is None


def test_require_authenticated_raises_when_anonymous():
    with pytest.raises(NotAuthenticatedError):
        SessionContext().require_authenticated()


def test_require_admin_rejects_regular_user():
    ctx = SessionContext(current_user=USER)
    with pytest.raises(AccessDeniedError) as exc_info:
        ctx.require_admin()
    assert exc_info.value.context.username == "user"
    assert exc_info.value.http_status == 403


def test_require_admin_returns_admin():
    assert SessionContext(current_user=ADMIN).require_admin() == ADMIN
