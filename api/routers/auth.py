"""Authentication router: token exchange and self sign-up."""

from fastapi import APIRouter, Depends, status

from api.auth import get_settings
from api.dependencies import get_user_repository
from core.config import Settings
from core.database.repository import UserRepository
from core.models import RegisterRequest, TokenRequest, TokenResponse
from core.security import create_user_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenResponse)
async def get_token(
    credentials: TokenRequest,
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Exchange email and password for an access token.

    Raises:
        UnauthorizedError: If the credentials are wrong
    """
    user = user_repo.authenticate(credentials.email, credentials.password)
    return TokenResponse(token=create_user_token(user, settings))


@router.post(
    "/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    payload: RegisterRequest,
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Sign up as a regular (non-admin) user and receive a token."""
    user = user_repo.register(**payload.model_dump(), is_admin=False)
    return TokenResponse(token=create_user_token(user, settings))
