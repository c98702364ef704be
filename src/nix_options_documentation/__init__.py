"""Searchable NixOS and Home Manager option documentation."""

from nix_options_documentation.database import OptionsDatabase
from nix_options_documentation.errors import (
    ConfigurationError,
    DocumentationError,
    DocumentationParseError,
    DocumentationReadError,
)
from nix_options_documentation.models import DocEntry, OptionDocumentation, OptionsDatabaseType

__all__ = [
    "ConfigurationError",
    "DocEntry",
    "DocumentationError",
    "DocumentationParseError",
    "DocumentationReadError",
    "OptionDocumentation",
    "OptionsDatabase",
    "OptionsDatabaseType",
]
