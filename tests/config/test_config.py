"""Test configuration management."""

import logging
import tomllib
from pathlib import Path

import pytest

from artist_credits.config.config import Config
from artist_credits.config.paths import default_config_path


def test_default_config(repo_root: Path) -> None:
    """Defaults are used and a commented file is written on first load."""
    config = Config.load()

    assert config.log_file is None
    assert config.output_format == "tree"
    assert config.warn_on_trailing_tokens is True
    assert default_config_path() == (repo_root / "config" / "config.toml").resolve()
    assert default_config_path().exists()


def test_save_load_toml(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    """Saved values are read back after resetting the singleton."""
    original = Config(
        log_file=Path("/test/logs/artist_credits.log"),
        output_format="json",
        warn_on_trailing_tokens=False,
    )
    original.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/artist_credits.log")
    assert loaded.output_format == "json"
    assert loaded.warn_on_trailing_tokens is False


def test_singleton_behavior(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    """Repeated loads return the cached instance."""
    config1 = Config.load()
    config2 = Config.load()

    assert config2 is config1


def test_toml_comments(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    """The rendered TOML explains each option."""
    Config(output_format="credit").save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# artist-credits Configuration File" in content
    assert "# One of: tree, json, credit" in content
    assert 'output_format = "credit"' in content
    assert "warn_on_trailing_tokens = true" in content
    assert not any(line.startswith("log_file") for line in content.splitlines())


def test_empty_log_file_string_is_none(repo_root: Path) -> None:
    """An empty log_file entry is treated as unset."""
    config_file = repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load().log_file is None


def test_invalid_output_format_falls_back(
    repo_root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Unknown output formats are replaced by the default with a warning."""
    caplog.set_level(logging.WARNING, logger="artist_credits")
    config_file = repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text('output_format = "yaml"\n', encoding="utf-8")

    config = Config.load()

    assert config.output_format == "tree"
    assert any("Unknown output_format" in r.getMessage() for r in caplog.records)


def test_unknown_keys_are_ignored(
    repo_root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Keys the application does not know are skipped with a warning."""
    caplog.set_level(logging.WARNING, logger="artist_credits")
    config_file = repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text(
        'base_path = "/music"\nwarn_on_trailing_tokens = false\n', encoding="utf-8"
    )

    config = Config.load()

    assert config.warn_on_trailing_tokens is False
    assert any("base_path" in r.getMessage() for r in caplog.records)


def test_invalid_toml_raises(repo_root: Path) -> None:
    """Malformed TOML is reported to the caller."""
    config_file = repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text("output_format = \n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
