"""Command line interface for artist-credits."""

import sys
from typing import TextIO, final

from rich.console import Console

from artist_credits.features.credits import ArtistListParseError, parse_artist_list, tokenize
from artist_credits.platform.logging import logger
from artist_credits.ui.cli.args import ArgumentParser, ParseArgs, TokensArgs
from artist_credits.ui.cli.display import ArtistTreeDisplay, TokenTableDisplay

EXIT_SUCCESS = 0
EXIT_PARSE_ERROR = 1
# 2 is argparse's usage error status.
EXIT_UNEXPECTED_ERROR = 3
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            console: Console for command output (for testing).
            stdin: Stream read when TEXT is ``-`` (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list, stdin=stdin)

            if isinstance(args, TokensArgs):
                TokenTableDisplay(console).show_tokens(tokenize(args.text))
            else:
                CommandProcessor._run_parse(args, console)

        except ArtistListParseError as e:
            logger.error("%s", e)
            sys.exit(EXIT_PARSE_ERROR)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(EXIT_UNEXPECTED_ERROR)

    @staticmethod
    def _run_parse(args: ParseArgs, console: Console | None) -> None:
        if args.show_tokens:
            TokenTableDisplay(console).show_tokens(tokenize(args.text))

        artists = parse_artist_list(args.text, warn_on_trailing_tokens=args.warn_on_trailing_tokens)
        ArtistTreeDisplay(console).show(artists, args.output_format)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Parse failures exit through
        ``sys.exit(...)`` before this return is reached.
    """
    CommandProcessor.process_command()
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
