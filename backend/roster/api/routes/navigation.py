"""Navigation Routes — resolves a UI path to its view for the current user."""

from fastapi import APIRouter, Depends, Query

from roster.api.dependencies import get_controller
from roster.core.navigation import visible_links
from roster.schemas.auth import NavigationResponse, NavLinkResponse
from roster.services.roster_controller import RosterController

router = APIRouter(prefix="/api/v1/navigation", tags=["navigation"])


@router.get("", response_model=NavigationResponse)
async def navigate(
    path: str = Query("/users"),
    controller: RosterController = Depends(get_controller),
):
    """Resolve path → view; 403 for admin-only screens, 404 for unknown paths."""
    view = controller.current_view(path)
    role = controller.current_user().role
    return NavigationResponse(
        path=path,
        view=view.value,
        links=[
            NavLinkResponse(path=link.path, label=link.label)
            for link in visible_links(role)
        ],
    )
