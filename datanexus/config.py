import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from solders.pubkey import Pubkey

from .errors import ConfigurationError


class Settings(BaseSettings):
    program_id: Optional[str] = None
    system_program_id: str = "11111111111111111111111111111111"
    token_program_id: str = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DATANEXUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def pubkey(self, name: str) -> Pubkey:
        value = getattr(self, name, None)
        env_name = f"DATANEXUS_{name.upper()}"
        if not value:
            raise ConfigurationError(f"{env_name} must be set to a valid program id")
        try:
            return Pubkey.from_string(value)
        except Exception as exc:  # noqa: BLE001
            raise ConfigurationError(f"{env_name} is not a valid pubkey: {exc}") from exc


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    return logging.getLogger("datanexus")
