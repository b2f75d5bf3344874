"""
Auth HTTP Handler - Registration and login routes.
"""
from fastapi import APIRouter, Depends, status

from modules.auth.dependencies import get_token_service
from modules.auth.services.auth_service import AuthService
from modules.auth.services.token_service import TokenService
from shared.models.users_model import UserCreate, UserResponse, LoginRequest, TokenResponse


router = APIRouter(prefix="/api/auth", tags=["Auth"])


# --- Dependencies ---

def get_auth_service(
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    """Dependency: Get auth service instance."""
    return AuthService(token_service=token_service)


# --- Routes ---
# Plain def: password hashing is CPU bound and runs in the threadpool.

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Create an owner or seeker account."""
    return auth_service.register(data)


@router.post("/login", response_model=TokenResponse)
def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Exchange email/password for a bearer token."""
    return auth_service.login(data)
