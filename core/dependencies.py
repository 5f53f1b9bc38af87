from typing import Optional

from core.settings import Settings

# Settings singleton
_settings = None


def get_settings() -> Settings:
    """Dependency that provides application settings."""
    if _settings is None:
        raise RuntimeError("Settings not initialized. Call init_settings() first.")
    return _settings


def init_settings(settings: Optional[Settings] = None, **overrides) -> Settings:
    """Initialize settings singleton, loading from the environment if not given."""
    global _settings
    _settings = settings if settings is not None else Settings(**overrides)
    return _settings


def clear_settings():
    """Clear settings singleton."""
    global _settings
    _settings = None
