from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import CharacterSet, ThumbprintEncoding


class Settings(BaseSettings):
    """
    Library defaults.
    Values can be overridden via JWKTHUMB_* environment variables or a .env file.
    """

    # Used when compute_thumbprint() is called without an explicit encoding.
    default_encoding: ThumbprintEncoding = ThumbprintEncoding.BASE64URL

    # None = keep the full 32-byte digest.
    default_truncate: int | None = None

    # Alphabet for base62 thumbprints.
    base62_charset: CharacterSet = CharacterSet.DEFAULT

    # Only applied by the CLI; the library never configures logging itself.
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="JWKTHUMB_", env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
