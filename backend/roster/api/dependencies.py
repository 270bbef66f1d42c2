"""API Dependencies — controller lookup and the query-flag confirmation surface.

Invariants:
    - The controller is created by the lifespan and lives on app.state
    - QueryConfirmation answers with the caller's `confirm` flag, nothing else
"""

from fastapi import Query, Request

from roster.services.roster_controller import RosterController


def get_controller(request: Request) -> RosterController:
    """FastAPI dependency for the process-wide controller."""
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise RuntimeError("Roster controller not initialized")
    return controller


class QueryConfirmation:
    """Confirmation backed by a `?confirm=` query parameter."""

    def __init__(self, confirmed: bool):
        self.confirmed = confirmed

    async def confirm(self, title: str, text: str) -> bool:
        return self.confirmed


def get_confirmation(confirm: bool = Query(False)) -> QueryConfirmation:
    return QueryConfirmation(confirm)
