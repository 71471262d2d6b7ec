"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Settings(BaseSettings):
    """Environment-driven password hashing settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_secret: NonEmptyStr = Field(validation_alias="PASSWORD_SECRET", repr=False)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @property
    def password_secret_bytes(self) -> bytes:
        """Application-wide pepper as raw bytes."""

        return self.password_secret.encode("utf-8")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()  # type: ignore[call-arg]
