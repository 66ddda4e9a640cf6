"""Process-wide configuration loaded from the environment."""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidConfiguration

DEFAULT_MAX_SIMS = 100_000


class Settings(BaseSettings):
    """Settings read from ``MENDEL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MENDEL_",
        case_sensitive=False,
        extra="ignore",
    )

    max_sims: int = Field(
        default=DEFAULT_MAX_SIMS,
        gt=0,
        description="Default number of simulations per estimation call",
    )


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Raises InvalidConfiguration if any value fails validation, e.g.
    MENDEL_MAX_SIMS=abc or MENDEL_MAX_SIMS=0.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid mendel configuration: {e}") from e


def get_default_max_sims() -> int:
    return load_settings().max_sims
