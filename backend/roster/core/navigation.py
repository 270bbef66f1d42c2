"""Navigation — static path table for the roster screens, with role gating.

Invariants:
    - "/" and "/users" both resolve to the users view
    - "/newuser" is admin-only; other roles get AccessDeniedError
    - Unknown paths raise ResourceNotFoundError (never a default view)
"""

from dataclasses import dataclass

from roster.core.domain_types import Role, View
from roster.core.errors import AccessDeniedError, ResourceNotFoundError

ROUTES: dict[str, View] = {
    "/": View.USERS,
    "/users": View.USERS,
    "/newuser": View.USER_FORM,
    "/about": View.ABOUT,
}

_ADMIN_ONLY_PATHS = frozenset({"/newuser"})


@dataclass(frozen=True)
class NavLink:
    path: str
    label: str


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("/users", "Users"),
    NavLink("/newuser", "New User"),
    NavLink("/about", "About"),
)


def resolve_route(path: str, role: Role) -> View:
    """Map a path to its view for the given role."""
    view = ROUTES.get(path)
    if view is None:
        raise ResourceNotFoundError("Route", path)
    if path in _ADMIN_ONLY_PATHS and role != Role.ADMIN:
        raise AccessDeniedError()
    return view


def visible_links(role: Role) -> list[NavLink]:
    """Links shown in the sidebar for this role."""
    return [
        link for link in NAV_LINKS
        if link.path not in _ADMIN_ONLY_PATHS or role == Role.ADMIN
    ]
