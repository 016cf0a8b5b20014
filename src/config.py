from __future__ import annotations

from functools import cache

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.nft import Network

DEFAULT_BASE_URL = "https://api.shyft.to/sol/v1"


class AppSettings(BaseSettings):
    shyft_api_key: str
    shyft_network: Network = Network.DEVNET
    shyft_base_url: str = DEFAULT_BASE_URL
    shyft_timeout: float = 30.0
    shyft_retry_attempts: int = 3
    shyft_retry_backoff_seconds: float = 1.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class ShyftConfig(BaseModel):
    """Client-wide settings injected once into the API clients."""

    api_key: str
    network: Network = Network.DEVNET
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    retry_attempts: int = 3
    retry_backoff_seconds: float = 1.0

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_api_key(self) -> ShyftConfig:
        if not self.api_key:
            raise ValueError("api_key must be provided")
        return self


@cache
def config() -> AppSettings:
    return AppSettings()  # type: ignore[call-arg]


def shyft_config() -> ShyftConfig:
    settings = config()
    return ShyftConfig(
        api_key=settings.shyft_api_key,
        network=settings.shyft_network,
        base_url=settings.shyft_base_url,
        timeout=settings.shyft_timeout,
        retry_attempts=settings.shyft_retry_attempts,
        retry_backoff_seconds=settings.shyft_retry_backoff_seconds,
    )
