"""Buddy read stats router."""

from fastapi import APIRouter, Depends, Request, status

from api.auth import ensure_admin, ensure_correct_user_or_admin, ensure_logged_in
from api.dependencies import get_buddy_read_stat_repository
from core.database.repository import BuddyReadStatRepository
from core.models import (
    BuddyReadStatCreateRequest,
    BuddyReadStatEnvelope,
    BuddyReadStatListEnvelope,
    BuddyReadStatResponse,
    BuddyReadStatUpdateRequest,
    DeletedResponse,
)

router = APIRouter(prefix="/buddyreadstats", tags=["buddyreadstats"])


@router.post(
    "",
    response_model=BuddyReadStatEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_logged_in)],
)
async def create_stat(
    payload: BuddyReadStatCreateRequest,
    repo: BuddyReadStatRepository = Depends(get_buddy_read_stat_repository),
) -> BuddyReadStatEnvelope:
    """Start tracking a user's progress in a buddy read."""
    stat = repo.create_stat(**payload.model_dump())
    return BuddyReadStatEnvelope(buddyreadstat=BuddyReadStatResponse.model_validate(stat))


@router.get(
    "",
    response_model=BuddyReadStatListEnvelope,
    dependencies=[Depends(ensure_admin)],
)
async def list_stats(
    request: Request,
    repo: BuddyReadStatRepository = Depends(get_buddy_read_stat_repository),
) -> BuddyReadStatListEnvelope:
    """List stats (admin only); filters: ``buddyreadId``, ``userId``."""
    stats = repo.find_all(dict(request.query_params))
    return BuddyReadStatListEnvelope(
        buddyreadstats=[BuddyReadStatResponse.model_validate(s) for s in stats]
    )


@router.get(
    "/{buddyread_id}/{user_id}",
    response_model=BuddyReadStatEnvelope,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def get_stat(
    buddyread_id: int,
    user_id: int,
    repo: BuddyReadStatRepository = Depends(get_buddy_read_stat_repository),
) -> BuddyReadStatEnvelope:
    stat = repo.get(buddyread_id, user_id)
    return BuddyReadStatEnvelope(buddyreadstat=BuddyReadStatResponse.model_validate(stat))


@router.patch(
    "/{buddyread_id}/{user_id}",
    response_model=BuddyReadStatEnvelope,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def update_stat(
    buddyread_id: int,
    user_id: int,
    payload: BuddyReadStatUpdateRequest,
    repo: BuddyReadStatRepository = Depends(get_buddy_read_stat_repository),
) -> BuddyReadStatEnvelope:
    """Update progress and/or rating."""
    stat = repo.update(buddyread_id, user_id, payload.changes())
    return BuddyReadStatEnvelope(buddyreadstat=BuddyReadStatResponse.model_validate(stat))


@router.delete(
    "/{buddyread_id}/{user_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def delete_stat(
    buddyread_id: int,
    user_id: int,
    repo: BuddyReadStatRepository = Depends(get_buddy_read_stat_repository),
) -> DeletedResponse:
    repo.remove(buddyread_id, user_id)
    return DeletedResponse(deleted=f"user: {user_id} buddyread: {buddyread_id}")
