"""Aggregates NixOS and Home Manager option documentation."""

import logging
from collections.abc import Iterable

from nix_options_documentation.config import EnvPathResolver, PathResolver
from nix_options_documentation.database import OptionsDatabase
from nix_options_documentation.models import DocEntry, OptionsDatabaseType
from nix_options_documentation.parser import OptionsParser

logger = logging.getLogger(__name__)


class OptionsIndexer:
    """Keeps one options database per source kind and queries them together."""

    def __init__(
        self,
        kinds: Iterable[OptionsDatabaseType] = tuple(OptionsDatabaseType),
        resolver: PathResolver | None = None,
    ) -> None:
        """Initialise indexer with an empty database for each kind.

        Args:
            kinds: Source kinds to manage.
            resolver: Path resolver shared by all databases.
        """
        self.resolver = resolver or EnvPathResolver()
        self.parser = OptionsParser()
        self.sources = {kind: OptionsDatabase(kind, self.resolver, self.parser) for kind in kinds}

    def get_source(self, kind: OptionsDatabaseType) -> OptionsDatabase:
        """Return the database for ``kind``.

        Args:
            kind: Source kind.

        Returns:
            OptionsDatabase instance.

        Raises:
            ValueError: If the indexer does not manage ``kind``.
        """
        try:
            return self.sources[kind]
        except KeyError:
            msg = f"Source kind not managed by this indexer: {kind.value}"
            raise ValueError(msg) from None

    def refresh_all(self) -> dict[OptionsDatabaseType, bool]:
        """Refresh every database in turn.

        A failure stops the loop and propagates; databases refreshed before
        it keep their new contents.

        Returns:
            Mapping from kind to whether its set of option names is unchanged.
        """
        results: dict[OptionsDatabaseType, bool] = {}
        for kind, source in self.sources.items():
            results[kind] = source.refresh()

        changed = [kind.value for kind, unchanged in results.items() if not unchanged]
        if changed:
            logger.info("Option names changed for: %s", ", ".join(changed))
        return results

    def all_keys(self) -> list[str]:
        """Return option names from every database."""
        return [key for source in self.sources.values() for key in source.all_keys()]

    def search(self, query: str) -> list[DocEntry]:
        """Prefix search across every database."""
        return [entry for source in self.sources.values() for entry in source.search(query)]

    def search_liberal(self, query: str) -> list[DocEntry]:
        """Substring search across every database."""
        return [entry for source in self.sources.values() for entry in source.search_liberal(query)]
