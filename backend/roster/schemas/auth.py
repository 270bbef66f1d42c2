"""Auth Schemas — login body and the current-user view."""

from pydantic import BaseModel, Field

from roster.core.accounts import CurrentUser
from roster.core.domain_types import Role


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class CurrentUserResponse(BaseModel):
    username: str
    name: str
    role: str
    can_manage_users: bool

    @classmethod
    def from_user(cls, user: CurrentUser) -> "CurrentUserResponse":
        return cls(
            username=user.username,
            name=user.name,
            role=user.role.value,
            can_manage_users=user.role == Role.ADMIN,
        )


class LogoutResponse(BaseModel):
    logged_out: bool


class NavLinkResponse(BaseModel):
    path: str
    label: str


class NavigationResponse(BaseModel):
    path: str
    view: str
    links: list[NavLinkResponse]
