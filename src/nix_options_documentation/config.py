"""Resolution of options JSON file locations."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from nix_options_documentation.errors import ConfigurationError
from nix_options_documentation.models import OptionsDatabaseType


class PathResolver(Protocol):
    """Returns the options JSON file for a source kind."""

    def __call__(self, kind: OptionsDatabaseType) -> Path: ...


class EnvPathResolver:
    """Resolves options files from environment variables."""

    ENV_VARS: Mapping[OptionsDatabaseType, str] = {
        OptionsDatabaseType.NIXOS: "NIXOS_JSON_OPTIONS_PATH",
        OptionsDatabaseType.HOME_MANAGER: "HOME_MANAGER_JSON_OPTIONS_PATH",
    }

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialise resolver.

        Args:
            environ: Environment mapping to read from. Defaults to ``os.environ``.
        """
        self.environ = os.environ if environ is None else environ

    def __call__(self, kind: OptionsDatabaseType) -> Path:
        """Resolve the options file for ``kind``.

        Args:
            kind: Source kind to resolve.

        Returns:
            Path to the options JSON file.

        Raises:
            ConfigurationError: If the environment variable is not set.
        """
        env_key = self.ENV_VARS[kind]
        value = self.environ.get(env_key)
        if not value:
            msg = f"{env_key} is not set"
            raise ConfigurationError(msg)
        return Path(value)


class StaticPathResolver:
    """Resolves options files from a fixed mapping."""

    def __init__(self, paths: Mapping[OptionsDatabaseType, Path]) -> None:
        self.paths = dict(paths)

    def __call__(self, kind: OptionsDatabaseType) -> Path:
        try:
            return self.paths[kind]
        except KeyError:
            msg = f"No options file configured for {kind.value}"
            raise ConfigurationError(msg) from None
