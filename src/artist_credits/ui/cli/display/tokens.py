"""src/artist_credits/ui/cli/display/tokens.py
What: Render token streams as a Rich table.
Why: Let users see how escapes and delimiters were read.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from artist_credits.features.credits import Token, TokenKind


@final
class TokenTableDisplay:
    """Handles token table display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def show_tokens(self, tokens: Iterable[Token]) -> None:
        """Print one row per token with its kind, text and input span."""

        table = Table(title="Tokens")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Text")
        table.add_column("Span", justify="right")
        table.add_column("Owned")

        for index, token in enumerate(tokens):
            kind_style = "green" if token.kind is TokenKind.NAME else "magenta"
            table.add_row(
                str(index),
                Text(token.kind.value, style=kind_style),
                Text(token.text),
                f"{token.start}-{token.end}",
                "yes" if token.owned else "",
            )

        self.console.print(table)
