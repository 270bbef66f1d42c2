"""User Store Client — httpx wrapper over the external `/users` REST resource.

Invariants:
    - Success is any 2xx; everything else is a failure
    - 404 on a single-record call -> ResourceNotFoundError; other failures -> UserStoreError
    - Unreachable store (connect/read errors, timeouts) -> UserStoreError
    - No retries: the initiating action is abandoned and surfaced to the user
    - UserStoreError messages are the user-facing notices ("Failed to load users", ...)

Design Decisions:
    - One AsyncClient per process, closed on shutdown (lifespan)
    - `transport` injectable so tests drive the client with httpx.MockTransport
"""

import logging
from urllib.parse import quote

import httpx

from roster.core.domain_types import UserId, UserRecord
from roster.core.errors import ErrorContext, ResourceNotFoundError, UserStoreError

logger = logging.getLogger(__name__)

_USERS_PATH = "/users"


def _user_path(user_id: UserId) -> str:
    return f"{_USERS_PATH}/{quote(str(user_id), safe='')}"


class UserStoreClient:
    """Async client for the external user store."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def get_all_users(self) -> list[UserRecord]:
        response = await self._request(
            "GET", _USERS_PATH,
            operation="list", failure_message="Failed to load users",
        )
        users = self._json(response, "list", "Failed to load users")
        if not isinstance(users, list):
            raise UserStoreError(
                "Failed to load users", "list", status_code=response.status_code,
            )
        return users

    async def get_user(self, user_id: UserId) -> UserRecord:
        response = await self._request(
            "GET", _user_path(user_id),
            operation="get", failure_message="Failed to load user data",
            user_id=user_id,
        )
        return self._json(response, "get", "Failed to load user data")

    async def create_user(self, record: UserRecord) -> UserRecord:
        response = await self._request(
            "POST", _USERS_PATH,
            operation="create", failure_message="Failed to create user",
            json=record,
        )
        return self._json(response, "create", "Failed to create user")

    async def update_user(self, user_id: UserId, record: UserRecord) -> UserRecord:
        response = await self._request(
            "PUT", _user_path(user_id),
            operation="update", failure_message="Failed to update user",
            user_id=user_id, json=record,
        )
        return self._json(response, "update", "Failed to update user")

    async def delete_user(self, user_id: UserId) -> None:
        await self._request(
            "DELETE", _user_path(user_id),
            operation="delete", failure_message="Failed to delete user",
            user_id=user_id,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        failure_message: str,
        user_id: UserId | None = None,
        json: UserRecord | None = None,
    ) -> httpx.Response:
        """Send one request; map every failure to a roster error."""
        try:
            response = await self.client.request(method, path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                f"User store {operation} failed with HTTP {status_code}",
                extra={"operation": operation, "status_code": status_code, "user_id": user_id},
            )
            if status_code == 404 and user_id is not None:
                raise ResourceNotFoundError(
                    "User", str(user_id),
                    ErrorContext(user_id=str(user_id), operation=operation),
                )
            raise UserStoreError(failure_message, operation, status_code=status_code)
        except httpx.RequestError as e:
            logger.error(
                f"User store {operation} unreachable: {e}",
                extra={"operation": operation, "user_id": user_id},
            )
            raise UserStoreError(failure_message, operation)

        logger.info(
            f"User store {operation} succeeded",
            extra={"operation": operation, "status_code": response.status_code, "user_id": user_id},
        )
        return response

    def _json(self, response: httpx.Response, operation: str, failure_message: str):
        try:
            return response.json()
        except ValueError:
            logger.error(
                f"User store {operation} returned invalid JSON",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise UserStoreError(
                failure_message, operation, status_code=response.status_code,
            )
