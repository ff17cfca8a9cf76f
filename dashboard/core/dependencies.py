"""
Core dependencies: session context and destructive-action confirmation
"""

from fastapi import Depends, Query, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from dashboard.database.supabase_client import get_supabase, get_service_supabase, get_session_supabase
from dashboard.modules.auth.schemas import Identity
from dashboard.modules.auth.service import AuthService
from dashboard.core.errors import AuthFailure, ConfirmationRequired
from supabase import Client
from typing import Optional

security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(
        supabase,
        session_factory=get_session_supabase,
        service_client=get_service_supabase(),
    )


def get_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    if credentials is None or not credentials.credentials:
        raise AuthFailure("Not authenticated")
    return credentials.credentials


def get_current_identity(
    token: str = Depends(get_current_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Identity:
    """Session context for every protected route: {id, email} of the caller."""
    return auth_service.get_current_user(token)


def require_confirmation(
    confirm: bool = Query(False, description="Must be true for destructive actions")
) -> bool:
    if not confirm:
        raise ConfirmationRequired()
    return True
