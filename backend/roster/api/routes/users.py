"""User Routes — roster CRUD, search/sort listing, and CSV download.

Invariants:
    - Field-rule violations → 400 VALIDATION_ERROR with every message in details
    - Store failures → 502 USER_STORE_ERROR, unknown ids → 404
    - DELETE without ?confirm=true deletes nothing ({"deleted": false})
    - /export is declared before /{user_id} so it is not captured as an id
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from roster.api.dependencies import QueryConfirmation, get_confirmation, get_controller
from roster.config import get_settings
from roster.core.domain_types import SortDirection, SortField, UserId
from roster.schemas.user import DeleteResponse, UserPayload
from roster.services.roster_controller import RosterController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("")
async def list_users(
    search: str | None = Query(None),
    sort: SortField | None = Query(None),
    direction: SortDirection = Query(SortDirection.ASC),
    controller: RosterController = Depends(get_controller),
):
    """List roster records, optionally filtered and ordered."""
    return await controller.list_users(search, sort, direction)


@router.get("/export")
async def export_users(
    search: str | None = Query(None),
    sort: SortField | None = Query(None),
    direction: SortDirection = Query(SortDirection.ASC),
    controller: RosterController = Depends(get_controller),
):
    """Download the (filtered/ordered) roster as CSV."""
    content = await controller.export_csv(search, sort, direction)
    filename = get_settings().csv_filename
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{user_id}")
async def get_user(
    user_id: str, controller: RosterController = Depends(get_controller),
):
    """Fetch one record (e.g. to prefill the edit form)."""
    return await controller.get_user(UserId(user_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserPayload, controller: RosterController = Depends(get_controller),
):
    """Create a record; id assigned from the sequence when not supplied."""
    return await controller.save_user(body.to_record())


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    body: UserPayload,
    controller: RosterController = Depends(get_controller),
):
    """Replace a record in full."""
    return await controller.save_user(body.to_record(), UserId(user_id))


@router.delete("/{user_id}", response_model=DeleteResponse)
async def delete_user(
    user_id: str,
    confirmation: QueryConfirmation = Depends(get_confirmation),
    controller: RosterController = Depends(get_controller),
):
    """Delete a record once the caller confirmed."""
    deleted = await controller.delete_user(UserId(user_id), confirmation)
    return DeleteResponse(deleted=deleted)
