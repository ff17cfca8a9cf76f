import hashlib
import logging
import time
from supabase import Client
from dashboard.modules.auth.schemas import Identity, LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
from dashboard.core.errors import (
    AccountAdminUnavailable, AuthFailure, RemoteOperationFailure, ValidationFailure
)
from dashboard.core.storage import ObjectBucket
from dashboard.config import settings
from fastapi import HTTPException
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. many parallel requests with same token)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500

# Signed-out tokens; kept for the default access token lifetime
_REVOKED_TOKENS: Dict[str, float] = {}
_REVOKED_TOKEN_TTL_SEC = 3600


def _token_key(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def _is_revoked(cache_key: str, now: float) -> bool:
    expiry = _REVOKED_TOKENS.get(cache_key)
    if expiry is None:
        return False
    if now >= expiry:
        del _REVOKED_TOKENS[cache_key]
        return False
    return True


def revoke_token(token: str) -> None:
    """Forget the cached identity for a token and refuse it from now on."""
    cache_key = _token_key(token)
    now = time.monotonic()
    _AUTH_USER_CACHE.pop(cache_key, None)
    for key in [k for k, expiry in _REVOKED_TOKENS.items() if expiry <= now]:
        del _REVOKED_TOKENS[key]
    _REVOKED_TOKENS[cache_key] = now + _REVOKED_TOKEN_TTL_SEC


def clear_auth_caches() -> None:
    _AUTH_USER_CACHE.clear()
    _REVOKED_TOKENS.clear()


class AuthService:
    def __init__(
        self,
        supabase: Client,
        session_factory: Optional[Callable[[], Client]] = None,
        service_client: Optional[Client] = None,
    ):
        self.supabase = supabase
        self.service_client = service_client
        self._session_factory = session_factory
        self._session_client: Optional[Client] = None

    @property
    def session_client(self) -> Client:
        """Client used for password flows; created on first use."""
        if self._session_client is None:
            self._session_client = self._session_factory() if self._session_factory else self.supabase
        return self._session_client

    def register(self, register_data: RegisterRequest) -> RegisterResponse:
        """Register a new user using Supabase Auth"""
        if register_data.password != register_data.confirm_password:
            raise ValidationFailure("Passwords do not match.")
        try:
            auth_response = self.session_client.auth.sign_up({
                "email": register_data.email,
                "password": register_data.password,
            })

            if not auth_response.user:
                raise ValidationFailure("Failed to register user")

            return RegisterResponse(
                user_id=auth_response.user.id,
                email=auth_response.user.email or register_data.email,
                message="Registration successful! Please verify your email before logging in."
            )
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise ValidationFailure("User already exists")
            logger.error(f"Registration failed: {error_message}")
            raise ValidationFailure(error_message or "Something went wrong.")

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user using Supabase Auth"""
        try:
            auth_response = self.session_client.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise AuthFailure("Invalid login credentials")
            if "not confirmed" in error_message.lower():
                raise AuthFailure("Email not confirmed")
            logger.error(f"Login failed: {error_message}")
            raise RemoteOperationFailure(f"Login failed: {error_message}")

        if not auth_response.user or not auth_response.session:
            raise AuthFailure("Invalid login credentials")

        return TokenResponse(
            access_token=auth_response.session.access_token,
            token_type="bearer",
            user_id=auth_response.user.id,
            email=auth_response.user.email or login_data.email
        )

    def get_current_user(self, token: str) -> Identity:
        """Resolve the identity behind an access token. Uses short TTL cache to reduce auth API calls."""
        cache_key = _token_key(token)
        now = time.monotonic()
        if _is_revoked(cache_key, now):
            raise AuthFailure("Session has been signed out")
        if cache_key in _AUTH_USER_CACHE:
            identity, expiry = _AUTH_USER_CACHE[cache_key]
            if now < expiry:
                return identity
            del _AUTH_USER_CACHE[cache_key]
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            # Any failed session check counts as "no user"
            logger.info(f"Session check failed: {e}")
            raise AuthFailure("Invalid or expired token")
        if not user_response or not user_response.user:
            raise AuthFailure("Invalid or expired token")
        user = user_response.user
        identity = Identity(id=user.id, email=user.email)
        if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
            _AUTH_USER_CACHE[cache_key] = (identity, now + _AUTH_CACHE_TTL_SEC)
        return identity

    def logout(self, token: str) -> bool:
        """Sign the session out. The token is refused locally even if the remote revoke fails."""
        revoke_token(token)
        try:
            self.supabase.auth.admin.sign_out(token)
            return True
        except Exception as e:
            logger.warning(f"Remote sign-out failed, token revoked locally only: {e}")
            return False

    def delete_account(self, identity: Identity, token: str) -> None:
        """Delete the caller's stored objects and auth user (requires service role key)."""
        if self.service_client is None:
            raise AccountAdminUnavailable()

        for bucket_name in (settings.drive_bucket, settings.food_bucket):
            bucket = ObjectBucket(self.service_client, bucket_name)
            bucket.remove(bucket.list_paths(identity.id))

        try:
            self.service_client.auth.admin.delete_user(identity.id)
        except Exception as e:
            logger.error(f"Failed to delete account {identity.id}: {e}")
            raise RemoteOperationFailure(f"Failed to delete account: {str(e)}")
        revoke_token(token)
        logger.info(f"Deleted account {identity.id}")
