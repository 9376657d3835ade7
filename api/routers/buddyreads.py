"""Buddy reads router."""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from api.auth import ensure_admin, ensure_logged_in
from api.dependencies import get_buddy_read_repository, get_db, get_detail_service
from core.database.repository import BuddyReadRepository
from core.models import (
    BuddyReadCreateRequest,
    BuddyReadDetailEnvelope,
    BuddyReadEnvelope,
    BuddyReadListEnvelope,
    BuddyReadResponse,
    BuddyReadUpdateRequest,
    DeletedResponse,
)
from core.services import DetailService

router = APIRouter(prefix="/buddyreads", tags=["buddyreads"])


@router.post(
    "",
    response_model=BuddyReadEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_logged_in)],
)
async def create_buddy_read(
    payload: BuddyReadCreateRequest,
    repo: BuddyReadRepository = Depends(get_buddy_read_repository),
) -> BuddyReadEnvelope:
    """Start a buddy read with another user."""
    buddyread = repo.create_buddy_read(**payload.model_dump())
    return BuddyReadEnvelope(buddyread=BuddyReadResponse.model_validate(buddyread))


@router.get(
    "", response_model=BuddyReadListEnvelope, dependencies=[Depends(ensure_admin)]
)
async def list_buddy_reads(
    request: Request,
    repo: BuddyReadRepository = Depends(get_buddy_read_repository),
) -> BuddyReadListEnvelope:
    """List buddy reads (admin only).

    Optional filters: ``buddy`` and ``createdBy`` (user ids). Other query
    parameters are ignored.
    """
    buddyreads = repo.find_all(dict(request.query_params))
    return BuddyReadListEnvelope(
        buddyreads=[BuddyReadResponse.model_validate(b) for b in buddyreads]
    )


@router.get(
    "/{buddyread_id}",
    response_model=BuddyReadDetailEnvelope,
    dependencies=[Depends(ensure_logged_in)],
)
async def get_buddy_read(
    buddyread_id: int,
    db_session: Session = Depends(get_db),
    detail_service: DetailService = Depends(get_detail_service),
) -> BuddyReadDetailEnvelope:
    """Buddy read with creator and buddy expanded."""
    return BuddyReadDetailEnvelope(
        buddyread=detail_service.get_buddy_read_detail(db_session, buddyread_id)
    )


@router.patch(
    "/{buddyread_id}",
    response_model=BuddyReadEnvelope,
    dependencies=[Depends(ensure_logged_in)],
)
async def update_buddy_read(
    buddyread_id: int,
    payload: BuddyReadUpdateRequest,
    repo: BuddyReadRepository = Depends(get_buddy_read_repository),
) -> BuddyReadEnvelope:
    """Change the status of a buddy read."""
    buddyread = repo.update(buddyread_id, payload.changes())
    return BuddyReadEnvelope(buddyread=BuddyReadResponse.model_validate(buddyread))


@router.delete(
    "/{buddyread_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_logged_in)],
)
async def delete_buddy_read(
    buddyread_id: int,
    repo: BuddyReadRepository = Depends(get_buddy_read_repository),
) -> DeletedResponse:
    repo.remove(buddyread_id)
    return DeletedResponse(deleted=str(buddyread_id))
