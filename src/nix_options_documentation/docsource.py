"""Common search contract shared by documentation sources."""

from abc import ABC, abstractmethod

from nix_options_documentation.models import DocEntry

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return text.translate(_ASCII_LOWER)


class Lowercase(str):
    """A query string already folded to ASCII lowercase."""

    __slots__ = ()

    def __new__(cls, value: str) -> "Lowercase":
        if isinstance(value, Lowercase):
            return value
        return super().__new__(cls, ascii_lower(value))


def starts_with_insensitive_ascii(text: str, query: Lowercase) -> bool:
    """Return True if ``text`` starts with ``query`` ignoring ASCII case."""
    return ascii_lower(text[: len(query)]) == query


def contains_insensitive_ascii(text: str, query: Lowercase) -> bool:
    """Return True if ``query`` occurs in ``text`` ignoring ASCII case."""
    return query in ascii_lower(text)


class DocSource(ABC):
    """A searchable set of documentation entries."""

    @abstractmethod
    def all_keys(self) -> list[str]:
        """Return every entry name held by the source."""

    @abstractmethod
    def search(self, query: str) -> list[DocEntry]:
        """Return entries whose name starts with ``query``, ignoring ASCII case."""

    @abstractmethod
    def search_liberal(self, query: str) -> list[DocEntry]:
        """Return entries whose name contains ``query``, ignoring ASCII case."""

    @abstractmethod
    def refresh(self) -> bool:
        """Reload the source.

        Returns:
            True if the set of entry names is unchanged.
        """

    def update(self) -> bool:
        """Alias of :meth:`refresh`."""
        return self.refresh()
