from fastapi import APIRouter, Depends
from dashboard.modules.auth.schemas import (
    Identity, LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
)
from dashboard.modules.auth.service import AuthService
from dashboard.core.dependencies import (
    get_auth_service, get_current_identity, get_current_token, require_confirmation
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    return service.register(register_data)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and invalidate token"""
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=Identity)
async def get_me(identity: Identity = Depends(get_current_identity)):
    """Get current authenticated user"""
    return identity


@router.delete("/me", status_code=204)
async def delete_me(
    identity: Identity = Depends(get_current_identity),
    token: str = Depends(get_current_token),
    confirmed: bool = Depends(require_confirmation),
    service: AuthService = Depends(get_auth_service)
):
    """Delete the current account and its stored files"""
    service.delete_account(identity, token)
    return None
