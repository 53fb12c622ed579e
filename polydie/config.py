"""Library configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dice settings loaded from environment variables.

    Every variable is read with the ``POLYDIE_`` prefix, e.g.
    ``POLYDIE_DICE_SEED=42``.
    """

    model_config = SettingsConfigDict(
        env_prefix="POLYDIE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Sampling
    # ==========================================================================
    # Seed for the default per-thread sampler. None = OS entropy.
    dice_seed: int | None = None

    # When True, a roll with min > max draws from [max, min] instead of
    # raising InvalidRangeError. Stored bounds are left untouched.
    normalize_inverted_range: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

