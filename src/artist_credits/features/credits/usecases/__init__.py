# Path: `src/artist_credits/features/credits/usecases/__init__.py`
# Summary: Export tokenizer, tree builder, parse facade and serializers.
# Why: Provide a stable import surface for the CLI and tests.

from .parse import parse_artist_list
from .serializer import artist_list_to_dict, format_artist_list
from .tokenizer import escape_artist_name, tokenize
from .tree_builder import build_artist_list

__all__ = [
    "artist_list_to_dict",
    "build_artist_list",
    "escape_artist_name",
    "format_artist_list",
    "parse_artist_list",
    "tokenize",
]
