import os
import re

from pydantic import BaseModel, ConfigDict, field_validator

PAT_LOCALE = re.compile(r"^[a-z]{2,3}(?:-[A-Z]{2})?$")

DEFAULT_LOCALE = "en-US"

TRUE_VALUES = ("1", "true", "yes", "on")


class CitationSettings(BaseModel):
    """
    Configuration of the citation processor that consumes parsed page ranges.

    The page parser never reads it. Callers hand it explicitly to whatever
    renders the citation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    locale: str = DEFAULT_LOCALE
    style: str | None = None
    force_lang: bool = False
    experimental_mode: bool = False

    @field_validator("locale")
    @classmethod
    def check_locale(cls, v: str) -> str:
        if not PAT_LOCALE.match(v):
            raise ValueError(f"'{v}' is not an RFC 4646 locale like 'en-US'")
        return v

    def with_locale(
        self, locale: str, force_lang: bool | None = None
    ) -> "CitationSettings":
        update = {"locale": locale}
        if force_lang is not None:
            update["force_lang"] = force_lang
        # model_copy() skips validation
        return CitationSettings(**{**self.model_dump(), **update})

    def with_style(self, style: str) -> "CitationSettings":
        return CitationSettings(**{**self.model_dump(), "style": style})


def _env_flag(name: str):
    value = os.environ.get(name)
    if value is None:
        return None
    return value.strip().lower() in TRUE_VALUES


def get_settings(**overrides) -> CitationSettings:
    """
    Build settings from explicit overrides, then CITEPAGES_* environment
    variables, then defaults. Overrides set to None are ignored.
    """
    values = {
        "locale": os.environ.get("CITEPAGES_LOCALE"),
        "style": os.environ.get("CITEPAGES_STYLE"),
        "force_lang": _env_flag("CITEPAGES_FORCE_LANG"),
        "experimental_mode": _env_flag("CITEPAGES_EXPERIMENTAL"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    return CitationSettings(**{k: v for k, v in values.items() if v is not None})
