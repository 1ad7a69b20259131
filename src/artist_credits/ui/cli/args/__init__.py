"""Command line argument parsing."""

from .options import CLIArgs, ParseArgs, TokensArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ParseArgs", "TokensArgs"]
