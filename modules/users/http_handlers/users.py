"""
Users HTTP Handler - Profile routes.

Paths live under /api/auth to match the existing client.
"""
from fastapi import APIRouter, Depends

from modules.auth.dependencies import get_current_user_id
from modules.users.services.user_service import UserService
from shared.errors import Forbidden
from shared.models.users_model import UserUpdate, UserResponse


router = APIRouter(prefix="/api/auth", tags=["Users"])


# --- Dependencies ---

def get_user_service() -> UserService:
    """Dependency: Get user service instance."""
    return UserService()


# --- Routes ---

@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: str = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Profile of the authenticated caller."""
    return user_service.get_user(user_id)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
):
    """Public profile by id."""
    return user_service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    caller_id: str = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Update name and/or mobile. Callers may only edit their own profile."""
    if caller_id != user_id:
        raise Forbidden("You can only update your own profile")
    return user_service.update_user(user_id, data)
