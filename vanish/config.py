"""
Client configuration.

All values are passed in code by the embedding application. Environment
variables and .env files are never read.
"""
from functools import lru_cache
from typing import Optional, Tuple, Type

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseSettings):
    """Connection settings for VanishClient."""

    # Sent as "Authorization: Bearer <api_key>" when set
    api_key: Optional[str] = None

    # Whole-request deadline in seconds
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Constructor arguments only
        return (init_settings,)

    def merged(self, **overrides) -> "ClientConfig":
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return ClientConfig(**{**self.model_dump(), **updates})


@lru_cache()
def get_config() -> ClientConfig:
    """Get cached default configuration."""
    return ClientConfig()
