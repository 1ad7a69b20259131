"""Console renderers for the CLI."""

from .artist_tree import ArtistTreeDisplay
from .tokens import TokenTableDisplay

__all__ = ["ArtistTreeDisplay", "TokenTableDisplay"]
