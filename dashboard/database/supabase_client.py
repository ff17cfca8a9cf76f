from supabase import create_client, Client, ClientOptions
from dashboard.config import settings


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Returns None when no key is configured."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()


def get_session_supabase() -> Client:
    """Fresh client for password sign-in/sign-up so a user session never lands on the shared client."""
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )
