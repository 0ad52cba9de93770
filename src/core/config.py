"""Environment-driven display settings (prefix ``LIQUIDSORT_``)."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseSettings):
    """How a board is drawn as text. Has no influence on the rules."""

    model_config = SettingsConfigDict(env_prefix="LIQUIDSORT_")

    empty_glyph: str = Field(default="·", min_length=1, max_length=1)
    separator: str = "|"
    index_width: int = Field(default=2, ge=1)


@lru_cache
def get_settings() -> DisplaySettings:
    return DisplaySettings()
