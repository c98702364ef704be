"""Data models for NixOS and Home Manager option documentation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OptionsDatabaseType(str, Enum):
    """Which option schema a documentation source was built from."""

    NIXOS = "nixos"
    HOME_MANAGER = "home-manager"


class Description(BaseModel):
    """Structured description as emitted by the options JSON generator."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = ""
    format: str | None = Field(default=None, alias="_type")


class OptionDocumentation(BaseModel):
    """Canonical documentation record for a single option."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str = ""
    read_only: bool = Field(default=False, alias="readOnly")
    location: tuple[str, ...] = Field(default=(), alias="loc")
    option_type: str = Field(default="", alias="type")

    @property
    def name(self) -> str:
        """Dotted option name derived from the location."""
        return ".".join(self.location)

    def pretty_printed(self) -> str:
        """Render the record as a plain-text block."""
        return f"# {self.name}\n{self.description}\ntype: {self.option_type}\n\n"

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the exported field names."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> str:
        """Serialise to a JSON string using the exported field names."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OptionDocumentation":
        """Rebuild a record from its exported form."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, data: str | bytes) -> "OptionDocumentation":
        """Rebuild a record from its exported JSON form."""
        return cls.model_validate_json(data)


@dataclass(frozen=True)
class DocEntry:
    """Represents a search result."""

    kind: OptionsDatabaseType
    option: OptionDocumentation

    @property
    def name(self) -> str:
        """Dotted name of the matched option."""
        return self.option.name

    def pretty_printed(self) -> str:
        """Render the matched option as a plain-text block."""
        return self.option.pretty_printed()
