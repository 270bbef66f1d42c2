"""Session Context — who is logged in, and what they may do.

Invariants:
    - At most one current user (single active session)
    - login/logout are the only transitions
    - require_* guards raise typed errors; they never return False

Design Decisions:
    - Explicit object owned by the controller, replacing a module-level global
"""

from dataclasses import dataclass

from roster.core.accounts import CurrentUser
from roster.core.domain_types import Role
from roster.core.errors import AccessDeniedError, ErrorContext, NotAuthenticatedError


@dataclass
class SessionContext:
    """Current-user state: pure dataclass, no IO."""

    current_user: CurrentUser | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def is_admin(self) -> bool:
        return self.current_user is not None and self.current_user.role == Role.ADMIN

    def login(self, user: CurrentUser) -> None:
        self.current_user = user

    def logout(self) -> None:
        self.current_user = None

    def require_authenticated(self) -> CurrentUser:
        if self.current_user is None:
            raise NotAuthenticatedError()
        return self.current_user

    def require_admin(self) -> CurrentUser:
        user = self.require_authenticated()
        if user.role != Role.ADMIN:
            raise AccessDeniedError(ErrorContext(username=user.username))
        return user
