"""Command-source adapters. Each turns some input into command tokens."""

from yeri.sources.keyboard import KEY_BINDINGS, token_for_key
from yeri.sources.stream import iter_tokens

__all__ = ["KEY_BINDINGS", "iter_tokens", "token_for_key"]
