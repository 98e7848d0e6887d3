# Standard library imports
import os
from typing import Any, Final, Optional
from dotenv import load_dotenv


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the core.
    All settings are loaded from environment variables with sensible defaults.
    Keyword overrides take precedence over the environment, which lets tests
    and the DI container build settings explicitly.
    """

    def __init__(self, **overrides: Any) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Paris")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Storage Configuration
        # "memory" uses the reference in-memory repositories, "mongo" uses MongoDB
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "memory").lower()
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "hbnb")

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.places_collection: Final[str] = os.getenv("PLACES_COLLECTION", "places")
        self.reviews_collection: Final[str] = os.getenv("REVIEWS_COLLECTION", "reviews")
        self.amenities_collection: Final[str] = os.getenv("AMENITIES_COLLECTION", "amenities")

        # Domain Rules
        # The minimum password length can be raised but never below 8
        self.min_password_length: Final[int] = max(
            8, int(os.getenv("MIN_PASSWORD_LENGTH", "8"))
        )
        self.rating_precision: Final[int] = int(os.getenv("RATING_PRECISION", "2"))
        self.allow_self_review: Final[bool] = _env_bool("ALLOW_SELF_REVIEW", "false")

        # Credential hashing (werkzeug method string, e.g. "scrypt" or "pbkdf2:sha256")
        self.password_hash_method: Final[str] = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

        # Concurrency Configuration
        self.rating_recompute_attempts: Final[int] = max(
            1, int(os.getenv("RATING_RECOMPUTE_ATTEMPTS", "3"))
        )
        self.guard_timeout_seconds: Final[float] = float(
            os.getenv("GUARD_TIMEOUT_SECONDS", "10")
        )

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown setting '{name}'")
            setattr(self, name, value)


# Cached default settings (used where no explicit Settings is injected)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get default application settings (built once from the environment)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
