"""Content-addressed token cache for ctxlex.

Provides (content_hash, config_hash) -> tokens caching to avoid re-lexing
unchanged sources, e.g. when a build re-tokenizes files that did not change.

Thread Safety:
    DictTokenCache is not thread-safe. For parallel tokenizing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from ctxlex import tokenize, DictTokenCache
    >>> cache = DictTokenCache()
    >>> first = tokenize("x = 1", cache=cache)
    >>> second = tokenize("x = 1", cache=cache)  # Cache hit, no re-lex
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ctxlex.utils.hashing import hash_str

if TYPE_CHECKING:
    from ctxlex.config import LexConfig
    from ctxlex.tokens import Token


class TokenCache(Protocol):
    """Protocol for content-addressed token caches.

    Cache key is (content_hash, config_hash). Cached value is a tuple of
    Tokens, which are immutable and safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> tuple[Token, ...] | None:
        """Return cached tokens if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, tokens: tuple[Token, ...]) -> None:
        """Store tokens in cache."""
        ...


class DictTokenCache:
    """In-memory token cache using a dict.

    Not thread-safe. For parallel tokenizing, wrap with a lock or use a
    thread-safe implementation.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], tuple[Token, ...]] = {}

    def get(self, content_hash: str, config_hash: str) -> tuple[Token, ...] | None:
        """Return cached tokens if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, tokens: tuple[Token, ...]) -> None:
        """Store tokens in cache."""
        self._data[(content_hash, config_hash)] = tokens

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str, source_file: str | None = None) -> str:
    """Compute SHA256 hash of source for cache key.

    Tokens carry their source file, so the same text under two paths gets
    two cache entries.
    """
    if source_file:
        return hash_str(f"{source_file}\0{source}")
    return hash_str(source)


def hash_config(config: LexConfig) -> str:
    """Compute hash of LexConfig for cache key.

    Args:
        config: LexConfig to hash

    Returns:
        Hex digest of config hash
    """
    parts = (
        str(config.legacy_print_enabled),
        str(config.keep_trivia),
        str(config.strict),
    )
    return hash_str("|".join(parts))


__all__ = [
    "DictTokenCache",
    "TokenCache",
    "hash_config",
    "hash_content",
]
