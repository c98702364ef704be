"""Tests for options file path resolution."""

from pathlib import Path

import pytest

from nix_options_documentation.config import EnvPathResolver, StaticPathResolver
from nix_options_documentation.errors import ConfigurationError, DocumentationError
from nix_options_documentation.models import OptionsDatabaseType


def test_env_resolver_reads_variables() -> None:
    """Test each kind resolves from its own variable."""
    resolver = EnvPathResolver(
        {
            "NIXOS_JSON_OPTIONS_PATH": "/nix/store/nixos/options.json",
            "HOME_MANAGER_JSON_OPTIONS_PATH": "/nix/store/hm/options.json",
        }
    )

    assert resolver(OptionsDatabaseType.NIXOS) == Path("/nix/store/nixos/options.json")
    assert resolver(OptionsDatabaseType.HOME_MANAGER) == Path("/nix/store/hm/options.json")


@pytest.mark.parametrize("environ", [{}, {"HOME_MANAGER_JSON_OPTIONS_PATH": ""}])
def test_env_resolver_missing_variable(environ: dict[str, str]) -> None:
    """Test an unset variable is a configuration error, not a documentation error."""
    resolver = EnvPathResolver(environ)

    with pytest.raises(ConfigurationError, match="HOME_MANAGER_JSON_OPTIONS_PATH is not set") as excinfo:
        resolver(OptionsDatabaseType.HOME_MANAGER)

    assert not isinstance(excinfo.value, DocumentationError)


def test_env_resolver_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the resolver reads os.environ when no mapping is given."""
    monkeypatch.setenv("NIXOS_JSON_OPTIONS_PATH", "/tmp/options.json")

    assert EnvPathResolver()(OptionsDatabaseType.NIXOS) == Path("/tmp/options.json")


def test_static_resolver(tmp_path: Path) -> None:
    """Test the static resolver returns configured paths only."""
    resolver = StaticPathResolver({OptionsDatabaseType.NIXOS: tmp_path / "options.json"})

    assert resolver(OptionsDatabaseType.NIXOS) == tmp_path / "options.json"
    with pytest.raises(ConfigurationError):
        resolver(OptionsDatabaseType.HOME_MANAGER)
