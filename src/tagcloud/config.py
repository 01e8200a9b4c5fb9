"""
Configuration for tag cloud generation.

Defaults match the conventional tag cloud stylesheet, which defines font
classes f11 through f48. Every value can be overridden through TAGCLOUD_*
environment variables (a .env file is loaded by the CLI).
"""

import os
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import ConfigurationError
from .tokenizer import DEFAULT_SEPARATORS, build_separators

DEFAULT_MAX_TIER = 48
DEFAULT_MIN_TIER = 11
DEFAULT_BATCH_DIVISOR = 39
DEFAULT_STYLESHEET_URL = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css"
)

TIER_SCALES = ("batch", "log")


class TagCloudConfig(BaseModel):
    """Settings shared by the ranker, renderer and CLI."""
    model_config = ConfigDict(frozen=True)

    max_tier: int = Field(default=DEFAULT_MAX_TIER, ge=1)
    min_tier: int = Field(default=DEFAULT_MIN_TIER, ge=1)
    batch_divisor: int = Field(default=DEFAULT_BATCH_DIVISOR, ge=1)
    scale: str = "batch"
    separators: FrozenSet[str] = DEFAULT_SEPARATORS
    css_prefix: str = "f"
    stylesheet_url: Optional[str] = DEFAULT_STYLESHEET_URL
    inline_css: bool = False
    encoding: str = "utf-8"

    @field_validator("scale")
    @classmethod
    def check_scale(cls, value: str) -> str:
        value = value.lower()
        if value not in TIER_SCALES:
            raise ValueError(f"scale must be one of {', '.join(TIER_SCALES)}")
        return value

    @model_validator(mode="after")
    def check_tier_range(self) -> "TagCloudConfig":
        if self.min_tier > self.max_tier:
            raise ValueError(
                f"min_tier ({self.min_tier}) must not exceed max_tier ({self.max_tier})"
            )
        return self

    @property
    def tier_range(self) -> range:
        """All tiers the ranker can assign, lowest first."""
        return range(self.min_tier, self.max_tier + 1)

    @classmethod
    def from_env(cls, **overrides) -> "TagCloudConfig":
        """
        Build a config from TAGCLOUD_* environment variables.

        Keyword overrides win over the environment; ``None`` overrides are
        ignored so CLI options that were not given fall through.

        Raises:
            ConfigurationError: If a variable cannot be parsed or is out of range
        """
        values = {}
        for name in ("max_tier", "min_tier", "batch_divisor"):
            raw = os.getenv(f"TAGCLOUD_{name.upper()}")
            if raw is not None:
                try:
                    values[name] = int(raw)
                except ValueError:
                    raise ConfigurationError(f"TAGCLOUD_{name.upper()}", raw, "expected an integer")

        for name in ("scale", "css_prefix", "stylesheet_url", "encoding"):
            raw = os.getenv(f"TAGCLOUD_{name.upper()}")
            if raw is not None:
                values[name] = raw

        raw = os.getenv("TAGCLOUD_INLINE_CSS")
        if raw is not None:
            values["inline_css"] = raw.strip().lower() in ("1", "true", "yes", "on")

        raw = os.getenv("TAGCLOUD_SEPARATORS")
        if raw:
            values["separators"] = build_separators(raw)

        values.update({key: value for key, value in overrides.items() if value is not None})

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigurationError("TagCloudConfig", values, str(e)) from e
