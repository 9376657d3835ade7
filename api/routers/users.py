"""Users router."""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from api.auth import (
    ensure_admin,
    ensure_correct_user_or_admin,
    get_settings,
)
from api.dependencies import get_db, get_detail_service, get_user_repository
from core.config import Settings
from core.database.repository import UserRepository
from core.exceptions import UnauthorizedError
from core.models import (
    DeletedResponse,
    UserCreateRequest,
    UserDetailEnvelope,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
    UserTokenEnvelope,
    UserUpdateRequest,
)
from core.security import TokenClaims, create_user_token
from core.services import DetailService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserTokenEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
async def create_user(
    payload: UserCreateRequest,
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> UserTokenEnvelope:
    """Add a new user (admin only); unlike /auth/register, may create admins.

    Returns the new user and a token for them.
    """
    user = user_repo.register(**payload.model_dump())
    token = create_user_token(user, settings)
    return UserTokenEnvelope(user=UserResponse.model_validate(user), token=token)


@router.get("", response_model=UserListEnvelope, dependencies=[Depends(ensure_admin)])
async def list_users(
    request: Request,
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserListEnvelope:
    """List all users (admin only). Accepts an optional ``email`` filter."""
    users = user_repo.find_all(dict(request.query_params))
    return UserListEnvelope(users=[UserResponse.model_validate(u) for u in users])


@router.get(
    "/{user_id}",
    response_model=UserDetailEnvelope,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def get_user(
    user_id: int,
    db_session: Session = Depends(get_db),
    detail_service: DetailService = Depends(get_detail_service),
) -> UserDetailEnvelope:
    """User with their buddy reads, reading stats and posts."""
    return UserDetailEnvelope(user=detail_service.get_user_detail(db_session, user_id))


@router.patch("/{user_id}", response_model=UserEnvelope)
async def update_user(
    user_id: int,
    payload: UserUpdateRequest,
    claims: TokenClaims = Depends(ensure_correct_user_or_admin),
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserEnvelope:
    """Partially update a user.

    Data can include: firstName, lastName, password, profilePicture, isAdmin.
    Only admins may change isAdmin.
    """
    changes = payload.changes()
    if "isAdmin" in changes and not claims.is_admin:
        raise UnauthorizedError("Only admins can change admin rights")

    user = user_repo.update(user_id, changes)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete(
    "/{user_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
async def delete_user(
    user_id: int,
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeletedResponse:
    user_repo.remove(user_id)
    return DeletedResponse(deleted=str(user_id))
