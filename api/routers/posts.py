"""Posts router."""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from api.auth import ensure_logged_in
from api.dependencies import get_db, get_detail_service, get_post_repository
from core.database.repository import PostRepository
from core.models import (
    DeletedResponse,
    PostCreateRequest,
    PostDetailEnvelope,
    PostEnvelope,
    PostListEnvelope,
    PostResponse,
    PostUpdateRequest,
)
from core.services import DetailService

router = APIRouter(
    prefix="/posts", tags=["posts"], dependencies=[Depends(ensure_logged_in)]
)


@router.post("", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostCreateRequest,
    repo: PostRepository = Depends(get_post_repository),
) -> PostEnvelope:
    post = repo.create_post(**payload.model_dump())
    return PostEnvelope(post=PostResponse.model_validate(post))


@router.get("", response_model=PostListEnvelope)
async def list_posts(
    request: Request,
    repo: PostRepository = Depends(get_post_repository),
) -> PostListEnvelope:
    """List posts; filters: ``buddyreadId``, ``userId``."""
    posts = repo.find_all(dict(request.query_params))
    return PostListEnvelope(posts=[PostResponse.model_validate(p) for p in posts])


@router.get("/{post_id}", response_model=PostDetailEnvelope)
async def get_post(
    post_id: int,
    db_session: Session = Depends(get_db),
    detail_service: DetailService = Depends(get_detail_service),
) -> PostDetailEnvelope:
    """Post with its author and buddy read expanded."""
    return PostDetailEnvelope(post=detail_service.get_post_detail(db_session, post_id))


@router.patch("/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: int,
    payload: PostUpdateRequest,
    repo: PostRepository = Depends(get_post_repository),
) -> PostEnvelope:
    """Data can include: page, message, viewed, liked."""
    post = repo.update(post_id, payload.changes())
    return PostEnvelope(post=PostResponse.model_validate(post))


@router.delete("/{post_id}", response_model=DeletedResponse)
async def delete_post(
    post_id: int,
    repo: PostRepository = Depends(get_post_repository),
) -> DeletedResponse:
    repo.remove(post_id)
    return DeletedResponse(deleted=str(post_id))
