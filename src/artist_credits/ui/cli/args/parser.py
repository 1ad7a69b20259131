"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO, cast, final

from artist_credits.config.config import OUTPUT_FORMATS, Config, OutputFormat
from artist_credits.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from artist_credits.ui.cli.args.options import CLIArgs, ParseArgs, TokensArgs

STDIN_MARKER = "-"


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="artist-credits",
            description="Parse nested artist credit strings such as "
            "'Group（Member（RealName））、Guest' into a tree.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        parse_parser = subparsers.add_parser(
            "parse",
            help="Parse a credit string and print the artist tree",
        )
        ArgumentParser._add_text_argument(parse_parser)
        _ = parse_parser.add_argument(
            "--format",
            dest="output_format",
            choices=OUTPUT_FORMATS,
            help="Output format (defaults to the configured output_format)",
        )
        _ = parse_parser.add_argument(
            "--tokens",
            action="store_true",
            help="Also print the token table",
        )
        ArgumentParser._add_verbosity_arguments(parse_parser)

        tokens_parser = subparsers.add_parser(
            "tokens",
            help="Print the tokens of a credit string without building a tree",
        )
        ArgumentParser._add_text_argument(tokens_parser)
        ArgumentParser._add_verbosity_arguments(tokens_parser)

        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None = None,
        stdin: TextIO | None = None,
    ) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            stdin: Stream read when TEXT is ``-``. Defaults to ``sys.stdin``.

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        text = ArgumentParser._resolve_text(parsed_args.text, stdin)
        command: str = parsed_args.command

        if command == "parse":
            output_format = cast(
                OutputFormat, parsed_args.output_format or configuration.output_format
            )
            return ParseArgs(
                command="parse",
                text=text,
                output_format=output_format,
                show_tokens=parsed_args.tokens,
                warn_on_trailing_tokens=configuration.warn_on_trailing_tokens,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "tokens":
            return TokensArgs(command="tokens", text=text, verbose=is_verbose, quiet=is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _resolve_text(raw: str, stdin: TextIO | None) -> str:
        """Return the credit string, reading standard input for ``-``."""

        if raw != STDIN_MARKER:
            return raw
        stream = stdin if stdin is not None else sys.stdin
        return stream.read().rstrip("\r\n")

    @staticmethod
    def _add_text_argument(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "text",
            type=str,
            help="Credit string to process, or '-' to read it from standard input",
            metavar="TEXT",
        )

    @staticmethod
    def _add_verbosity_arguments(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
