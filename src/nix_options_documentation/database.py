"""In-memory option documentation store."""

import logging
from collections.abc import Callable

from nix_options_documentation.config import EnvPathResolver, PathResolver
from nix_options_documentation.docsource import (
    DocSource,
    Lowercase,
    contains_insensitive_ascii,
    starts_with_insensitive_ascii,
)
from nix_options_documentation.models import DocEntry, OptionDocumentation, OptionsDatabaseType
from nix_options_documentation.parser import OptionsParser

logger = logging.getLogger(__name__)


class OptionsDatabase(DocSource):
    """Holds the option documentation loaded from one options JSON file.

    The mapping is only ever replaced as a whole by :meth:`refresh`. It is not
    synchronised; callers sharing a database between threads must serialise
    refreshes against reads themselves.
    """

    def __init__(
        self,
        kind: OptionsDatabaseType,
        resolver: PathResolver | None = None,
        parser: OptionsParser | None = None,
    ) -> None:
        """Initialise an empty database.

        Args:
            kind: Which options schema this database holds.
            resolver: Maps ``kind`` to its options file. Defaults to environment lookup.
            parser: Parser used on refresh.
        """
        self.kind = kind
        self.resolver = resolver or EnvPathResolver()
        self.parser = parser or OptionsParser()
        self.options: dict[str, OptionDocumentation] = {}

    def __len__(self) -> int:
        return len(self.options)

    def __contains__(self, name: object) -> bool:
        return name in self.options

    def get(self, name: str) -> OptionDocumentation | None:
        """Return the record stored under ``name``, if any."""
        return self.options.get(name)

    def all_keys(self) -> list[str]:
        """Return every option name, in mapping order."""
        return list(self.options)

    def search(self, query: str) -> list[DocEntry]:
        """Search option names by prefix.

        Args:
            query: Prefix to look for, compared ignoring ASCII case.

        Returns:
            Matching entries in mapping order.
        """
        return self._filter(Lowercase(query), starts_with_insensitive_ascii)

    def search_liberal(self, query: str) -> list[DocEntry]:
        """Search option names by substring.

        Args:
            query: Substring to look for, compared ignoring ASCII case.

        Returns:
            Matching entries in mapping order.
        """
        return self._filter(Lowercase(query), contains_insensitive_ascii)

    def _filter(self, query: Lowercase, match: Callable[[str, Lowercase], bool]) -> list[DocEntry]:
        return [DocEntry(self.kind, option) for name, option in self.options.items() if match(name, query)]

    def refresh(self) -> bool:
        """Reload options from the file resolved for this database's kind.

        The current mapping is replaced only after the new file parsed
        successfully.

        Returns:
            True if the set of option names is unchanged. Changes to the
            records themselves are not reported.

        Raises:
            DocumentationReadError: If the options file cannot be read.
            DocumentationParseError: If the options file is invalid.
            ConfigurationError: If no options file is configured for this kind.
        """
        path = self.resolver(self.kind)
        logger.debug("Refreshing %s options from %s", self.kind.value, path)
        options = self.parser.parse_file(path)

        old, self.options = self.options, options
        unchanged = old.keys() == options.keys()
        logger.info(
            "Refreshed %s options: %d entries, key set %s",
            self.kind.value,
            len(options),
            "unchanged" if unchanged else "changed",
        )
        return unchanged
