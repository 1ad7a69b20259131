"""Tests for command line argument parser."""

import io
import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from artist_credits.platform.logging import DEFAULT_LOG_FILE
from artist_credits.ui.cli.args import ArgumentParser, ParseArgs, TokensArgs


@pytest.fixture
def mock_config(mocker: MockerFixture) -> MagicMock:
    """Replace configuration loading with in-memory defaults."""

    config = mocker.patch("artist_credits.ui.cli.args.parser.Config")
    config.load.return_value.log_file = None
    config.load.return_value.output_format = "tree"
    config.load.return_value.warn_on_trailing_tokens = True
    return config


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("artist_credits.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    parse_args: Namespace = parser.parse_args(["parse", "A（B）"])
    assert parse_args.command == "parse"
    assert parse_args.text == "A（B）"
    assert parse_args.output_format is None
    assert not parse_args.tokens

    tokens_args: Namespace = parser.parse_args(["tokens", "A", "--verbose"])
    assert tokens_args.command == "tokens"
    assert tokens_args.verbose


def test_create_parser_rejects_unknown_format() -> None:
    """Only supported output formats are accepted."""

    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["parse", "A", "--format", "yaml"])


def test_create_parser_rejects_verbose_and_quiet() -> None:
    """Verbosity flags are mutually exclusive."""

    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["parse", "A", "--verbose", "--quiet"])


def test_process_args_parse(mock_config: MagicMock, mock_setup_logger: MagicMock) -> None:
    """Parse arguments pick up configured defaults and logging levels."""

    args = ArgumentParser.process_args(["parse", "A、B"])

    assert isinstance(args, ParseArgs)
    assert args.text == "A、B"
    assert args.output_format == "tree"
    assert args.warn_on_trailing_tokens
    assert not args.show_tokens
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


def test_process_args_format_flag_overrides_config(
    mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    """An explicit --format wins over the configured default."""

    mock_config.load.return_value.output_format = "credit"

    args = ArgumentParser.process_args(["parse", "A", "--format", "json", "--tokens", "--quiet"])

    assert isinstance(args, ParseArgs)
    assert args.output_format == "json"
    assert args.show_tokens
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_args_tokens_verbose(
    mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    """Tokens arguments enable debug logging when verbose."""

    _ = mock_config
    args = ArgumentParser.process_args(["tokens", "A", "--verbose"])

    assert isinstance(args, TokensArgs)
    assert args.verbose
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_process_args_reads_stdin(mock_config: MagicMock, mock_setup_logger: MagicMock) -> None:
    """A dash reads the credit string from standard input."""

    _ = (mock_config, mock_setup_logger)
    args = ArgumentParser.process_args(["parse", "-"], stdin=io.StringIO("A（B）\n"))

    assert args.text == "A（B）"


def test_process_args_uses_configured_log_file(
    mock_config: MagicMock, mock_setup_logger: MagicMock, tmp_path: Path
) -> None:
    """A configured log file replaces the default location."""

    log_file = tmp_path / "credits.log"
    mock_config.load.return_value.log_file = log_file

    _ = ArgumentParser.process_args(["tokens", "A"])

    assert mock_setup_logger.call_args.kwargs["log_file"] == log_file
