"""Auth Routes — login, logout (confirmed), and the current-user view.

Invariants:
    - Login failure → 401 LOGIN_FAILED, session unchanged
    - Logout without ?confirm=true leaves the session intact ({"logged_out": false})
"""

import logging

from fastapi import APIRouter, Depends

from roster.api.dependencies import QueryConfirmation, get_confirmation, get_controller
from roster.schemas.auth import CurrentUserResponse, LoginRequest, LogoutResponse
from roster.services.roster_controller import RosterController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=CurrentUserResponse)
async def login(
    body: LoginRequest, controller: RosterController = Depends(get_controller),
):
    """Log in with one of the built-in accounts."""
    user = await controller.login(body.username, body.password)
    return CurrentUserResponse.from_user(user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    confirmation: QueryConfirmation = Depends(get_confirmation),
    controller: RosterController = Depends(get_controller),
):
    """Log out when the caller confirmed the prompt."""
    return LogoutResponse(logged_out=await controller.logout(confirmation))


@router.get("/me", response_model=CurrentUserResponse)
async def me(controller: RosterController = Depends(get_controller)):
    """Current user, with the role-derived UI permissions."""
    return CurrentUserResponse.from_user(controller.current_user())
