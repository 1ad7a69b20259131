"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from artist_credits.config.config import OutputFormat


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    text: str
    output_format: OutputFormat
    show_tokens: bool
    warn_on_trailing_tokens: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TokensArgs:
    """Command line arguments for the ``tokens`` subcommand."""

    command: Literal["tokens"]
    text: str
    verbose: bool
    quiet: bool


CLIArgs = ParseArgs | TokensArgs

__all__ = ["CLIArgs", "ParseArgs", "TokensArgs"]
