"""Application settings (compiled-in constants, not read from environment)."""

from functools import lru_cache

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from backend.core.constants import DEFAULT_HOST, DEFAULT_PORT


class Settings(BaseSettings):
    """Application settings. Only explicit keyword arguments can override the defaults."""

    model_config = SettingsConfigDict(frozen=True)

    HOST: str = DEFAULT_HOST
    PORT: int = DEFAULT_PORT

    # Logging (console only)
    LOG_LEVEL: str = "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No env vars, no .env, no secrets dir: the port is fixed for the process.
        return (init_settings,)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
