"""Accounts — built-in login identities and the cleartext credential check.

Invariants:
    - authenticate() is pure: exact username AND password match, first hit wins
    - CurrentUser never carries the password (it is what gets persisted)

Design Decisions:
    - Fixed in-memory account list, compared in cleartext: the roster has no
      user database of its own and hardening is out of scope
"""

from dataclasses import dataclass

from roster.core.domain_types import Role


@dataclass(frozen=True)
class Account:
    username: str
    password: str
    role: Role
    name: str


@dataclass(frozen=True)
class CurrentUser:
    """Public projection of an Account: stored in the session blob."""
    username: str
    role: Role
    name: str

    @classmethod
    def from_account(cls, account: Account) -> "CurrentUser":
        return cls(username=account.username, role=account.role, name=account.name)

    @classmethod
    def from_blob(cls, blob: dict) -> "CurrentUser":
        """Rebuild from the persisted blob. Raises KeyError/ValueError if malformed."""
        return cls(
            username=blob["username"], role=Role(blob["role"]), name=blob["name"],
        )

    def to_blob(self) -> dict:
        return {"username": self.username, "role": self.role.value, "name": self.name}


DEFAULT_ACCOUNTS: tuple[Account, ...] = (
    Account("admin", "admin123", Role.ADMIN, "Administrator"),
    Account("user", "user123", Role.USER, "Regular User"),
)


def authenticate(
    username: str, password: str, accounts: tuple[Account, ...] = DEFAULT_ACCOUNTS,
) -> Account | None:
    """Return the matching account or None."""
    for account in accounts:
        if account.username == username and account.password == password:
            return account
    return None
