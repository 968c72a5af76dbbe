"""Locale value types and configuration schema."""
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

Direction = Literal["ltr", "rtl"]


@dataclass(frozen=True, slots=True)
class LocaleEntry:
    """Domain and presentation metadata for one supported locale."""
    tld: str  # Includes the leading dot, e.g. ".fr"
    name: str
    direction: Direction
    script: str
    native: str

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "LocaleEntry":
        """Build from a plain mapping, validated the same way as settings."""
        return cls.from_config(LocaleConfig(**data))

    @classmethod
    def from_config(cls, config: "LocaleConfig") -> "LocaleEntry":
        return cls(
            tld=config.tld,
            name=config.name,
            direction=config.direction,
            script=config.script,
            native=config.native,
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to dict for API responses."""
        return asdict(self)


class LocaleConfig(BaseModel):
    """Validated configuration for a single locale, as read from settings."""
    model_config = ConfigDict(frozen=True)

    tld: str
    name: str
    direction: Direction = "ltr"
    script: str
    native: str

    @field_validator("tld")
    @classmethod
    def _tld_has_leading_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"tld must look like '.com', got {value!r}")
        return value
