"""Parser for NixOS and Home Manager options JSON files."""

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from nix_options_documentation.errors import DocumentationParseError, DocumentationReadError
from nix_options_documentation.models import Description, OptionDocumentation

logger = logging.getLogger(__name__)


class JsonOptionDocumentation(BaseModel):
    """Option record as it appears in the generated options JSON.

    NixOS emits the description as a structured ``{"_type", "text"}`` object
    while older Home Manager releases emit a bare string. Both are folded
    into a :class:`Description` here so nothing downstream sees the union.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: Description = Field(default_factory=Description)
    read_only: bool = Field(default=False, alias="readOnly", strict=True)
    location: list[str] = Field(default_factory=list, alias="loc", strict=True)
    option_type: str = Field(default="", alias="type", strict=True)

    @field_validator("description", mode="before")
    @classmethod
    def _string_or_struct(cls, value: object) -> Description:
        """Accept either a bare string or a structured description.

        Args:
            value: Raw ``description`` value from the JSON document.

        Returns:
            Parsed description, or an empty one if the value is unusable.
        """
        if isinstance(value, str):
            return Description(text=value)
        if isinstance(value, Mapping):
            try:
                return Description.model_validate(value)
            except ValidationError:
                return Description()
        return Description()

    def to_option(self) -> OptionDocumentation:
        """Convert to the canonical record, dropping the description format."""
        return OptionDocumentation(
            description=self.description.text,
            read_only=self.read_only,
            location=tuple(self.location),
            option_type=self.option_type,
        )


_OPTIONS_ADAPTER: TypeAdapter[dict[str, JsonOptionDocumentation]] = TypeAdapter(dict[str, JsonOptionDocumentation])


class OptionsParser:
    """Parses options JSON documents into canonical records."""

    def parse_file(self, file_path: Path) -> dict[str, OptionDocumentation]:
        """Read and parse an options JSON file.

        Args:
            file_path: Path to the options JSON file.

        Returns:
            Mapping from option name to canonical record.

        Raises:
            DocumentationReadError: If the file cannot be read.
            DocumentationParseError: If the content is not a valid options document.
        """
        try:
            data = file_path.read_bytes()
        except OSError as exc:
            logger.warning("Failed to read options file %s: %s", file_path, exc)
            msg = f"Cannot read options file: {file_path}"
            raise DocumentationReadError(msg, path=file_path) from exc

        options = self.parse_bytes(data, source=file_path)
        logger.info("Loaded %d options from %s", len(options), file_path)
        return options

    def parse_bytes(self, data: bytes | str, source: Path | None = None) -> dict[str, OptionDocumentation]:
        """Parse an options JSON document.

        Args:
            data: Raw JSON document.
            source: Originating file, used for error reporting.

        Returns:
            Mapping from option name to canonical record.

        Raises:
            DocumentationParseError: If the JSON is malformed or has the wrong shape.
        """
        try:
            raw = _OPTIONS_ADAPTER.validate_json(data)
        except ValidationError as exc:
            logger.warning("Invalid options document %s: %d error(s)", source or "<memory>", exc.error_count())
            msg = f"Invalid options document: {source or '<memory>'}"
            raise DocumentationParseError(msg, path=source) from exc

        return {name: record.to_option() for name, record in raw.items()}


def try_from_file(file_path: Path) -> dict[str, OptionDocumentation]:
    """Parse an options JSON file with a default parser.

    Args:
        file_path: Path to the options JSON file.

    Returns:
        Mapping from option name to canonical record.
    """
    return OptionsParser().parse_file(file_path)
