from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)

PLACEHOLDER_SUPABASE_URL = "https://placeholder.supabase.co"
PLACEHOLDER_SUPABASE_KEY = "public-anon-key-placeholder"


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required for account deletion

    # Storage buckets
    drive_bucket: str = "drive-lite"
    food_bucket: str = "food-photos"
    max_upload_bytes: int = 10 * 1024 * 1024

    # External species API
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    pokeapi_timeout_seconds: float = 10.0

    # App
    app_name: str = "activity-dashboard"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @model_validator(mode="after")
    def fill_missing_supabase(self) -> "Settings":
        # Missing credentials must not stop startup; calls will just fail.
        if not self.supabase_url or not self.supabase_key:
            logger.warning(
                "Missing Supabase environment variables (SUPABASE_URL / SUPABASE_KEY); "
                "using non-functional placeholders"
            )
            if not self.supabase_url:
                self.supabase_url = PLACEHOLDER_SUPABASE_URL
            if not self.supabase_key:
                self.supabase_key = PLACEHOLDER_SUPABASE_KEY
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_configured(self) -> bool:
        return (
            self.supabase_url != PLACEHOLDER_SUPABASE_URL
            and self.supabase_key != PLACEHOLDER_SUPABASE_KEY
        )

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
