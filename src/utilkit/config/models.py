"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, utilkit.toml only contains overrides.
An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from utilkit.core.strings import DEFAULT_ELLIPSIS, DEFAULT_URL_SCHEMES


class StringsConfig(BaseModel):
    """[strings] section."""

    model_config = {"frozen": True}

    ellipsis: str = DEFAULT_ELLIPSIS


class UrlsConfig(BaseModel):
    """[urls] section."""

    model_config = {"frozen": True}

    schemes: tuple[str, ...] = DEFAULT_URL_SCHEMES

    @field_validator("schemes")
    @classmethod
    def _normalize(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(s.lower() for s in value)


class UtilkitConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    strings: StringsConfig = Field(default_factory=StringsConfig)
    urls: UrlsConfig = Field(default_factory=UrlsConfig)
