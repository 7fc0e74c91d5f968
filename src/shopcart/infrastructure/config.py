"""Runtime configuration.

Values come from ``SHOPCART_*`` environment variables or a ``.env`` file
in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopcart.domain.model.value_objects import Currency


class Settings(BaseSettings):
    data_dir: Path = Path("./data")
    default_currency: Currency = Currency.EUR
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="SHOPCART_", env_file=".env", extra="ignore")

    @field_validator("default_currency", mode="before")
    @classmethod
    def _upper_currency(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()
