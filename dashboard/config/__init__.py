from dashboard.config.settings import settings

__all__ = ["settings"]
