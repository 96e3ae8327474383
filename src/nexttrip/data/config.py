from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://svc.metrotransit.org/nextripv2"


class NextTripConfig(BaseSettings):
    """Configuration for provider selection and API access.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="NEXTTRIP_BASE_URL")
    provider: str = Field(default="metrotransit", alias="NEXTTRIP_PROVIDER")

    # Carried through to providers; no provider routes to a sandbox yet
    use_sandbox: bool = Field(default=False, alias="NEXTTRIP_SANDBOX")


@lru_cache
def get_config() -> NextTripConfig:
    """Get configuration (cached singleton).

    Returns:
        NextTripConfig with values from .env file or environment variables.
    """
    return NextTripConfig()
