"""src/artist_credits/ui/cli/display/artist_tree.py
What: Render parsed artist trees as a Rich tree, JSON, or a credit string.
Why: Keep console output formatting out of the parse use cases.
"""

from __future__ import annotations

import json
from typing import final

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from artist_credits.config.config import OutputFormat
from artist_credits.features.credits import (
    ArtistList,
    artist_list_to_dict,
    format_artist_list,
)


@final
class ArtistTreeDisplay:
    """Handles artist tree display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize artist tree display.

        Args:
            console: Console to print to. Defaults to standard output.
        """
        self.console = console if console is not None else Console()

    def show(self, artists: ArtistList, output_format: OutputFormat) -> None:
        """Print ``artists`` in the requested format."""

        if output_format == "json":
            self.show_json(artists)
        elif output_format == "credit":
            self.show_credit(artists)
        else:
            self.show_tree(artists)

    def show_tree(self, artists: ArtistList) -> None:
        """Print the artists as an indented Rich tree."""

        root = Tree(Text(f"Artists ({len(artists)})", style="bold"))
        self._add_branches(root, artists)
        self.console.print(root)

    def show_json(self, artists: ArtistList) -> None:
        """Print the artists as JSON.

        ``json.dumps`` with indentation recurses once per nested list and dict,
        so very deep groups can exceed the interpreter recursion limit here.
        """

        payload = json.dumps(artist_list_to_dict(artists), ensure_ascii=False, indent=2)
        self.console.print(payload, markup=False, highlight=False, soft_wrap=True)

    def show_credit(self, artists: ArtistList) -> None:
        """Print the artists re-serialized as a canonical credit string."""

        self.console.print(
            format_artist_list(artists), markup=False, highlight=False, soft_wrap=True
        )

    def _add_branches(self, parent: Tree, artists: ArtistList) -> None:
        stack: list[tuple[Tree, ArtistList]] = [(parent, artists)]
        while stack:
            node, group = stack.pop()
            for artist in group:
                branch = node.add(Text(artist.name, style="cyan" if artist.has_children else ""))
                if artist.children is not None:
                    stack.append((branch, artist.children))
