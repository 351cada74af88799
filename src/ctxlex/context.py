"""Persistent context stack for contextual tokenization.

A Context is one frame of nesting state: an indentation level, a bracketed
construct, or a string literal. Frames form a singly linked stack through
``parent``. Frames are never mutated; pushing creates a new frame that points
at the old one and popping returns the parent, so any number of stack tips
(one per speculative parse branch) can share a common suffix.

The ContextTracker holds the only rules that create or drop frames. The host
driver calls ``shift`` after every accepted token and ``reduce`` whenever the
grammar completes a node; the tokenizers only read the current frame.

Example:
    >>> ctx = ROOT_CONTEXT.push(indent=4)
    >>> ctx.indent, ctx.pop() is ROOT_CONTEXT
    (4, True)

Thread Safety:
    Context is frozen and ContextTracker is stateless. Both are safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import TYPE_CHECKING

from ctxlex.nodes import BRACKETED_NODES, STRING_NODES, NodeType
from ctxlex.tokens import OPENING_TYPES, Token, TokenType

if TYPE_CHECKING:
    from ctxlex.input import InputStream

TAB_SIZE = 8


class ContextFlags(IntFlag):
    """Nesting state recorded on a context frame.

    STRING is set on every string frame, so a frame with no flags is always
    a plain indentation level. The remaining string bits select the quoting
    mode.
    """

    BRACKETED = 1
    STRING = 2
    DOUBLE_QUOTE = 4
    LONG = 8
    RAW = 16
    FORMAT = 32


def _structural_hash(parent: Context | None, indent: int, flags: int) -> int:
    """Mix the parent hash with this frame's fields.

    Every ancestor stays in the result however deep the stack is. Hashes of
    int tuples are not salted, so the value is stable across processes.
    """
    parent_hash = parent.hash if parent is not None else 0
    return hash((parent_hash, indent, int(flags)))


@dataclass(frozen=True, slots=True, eq=False)
class Context:
    """One immutable frame of the context stack.

    Attributes:
        parent: Enclosing frame, None for the root
        indent: Tab-expanded column of an indentation frame; 0 elsewhere
        flags: Bracket and string quoting state
        hash: Structural hash over parent hash, indent and flags, computed
            once at construction

    Two frames with the same hash are interchangeable for every tokenizing
    decision; the host's reuse cache relies on it.
    """

    parent: Context | None
    indent: int = 0
    flags: ContextFlags = ContextFlags(0)
    hash: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hash", _structural_hash(self.parent, self.indent, self.flags))

    def push(self, indent: int = 0, flags: ContextFlags | int = 0) -> Context:
        """Return a new frame on top of this one."""
        return Context(self, indent, ContextFlags(flags))

    def pop(self) -> Context:
        """Return the enclosing frame. The root pops to itself."""
        return self.parent if self.parent is not None else self

    @property
    def depth(self) -> int:
        """Number of frames above the root."""
        depth = 0
        ctx = self
        while ctx.parent is not None:
            depth += 1
            ctx = ctx.parent
        return depth

    @property
    def is_bracketed(self) -> bool:
        return bool(self.flags & ContextFlags.BRACKETED)

    @property
    def is_string(self) -> bool:
        return bool(self.flags & ContextFlags.STRING)

    # Quoting mode, derived from flags at scan time

    @property
    def quote(self) -> str:
        return '"' if self.flags & ContextFlags.DOUBLE_QUOTE else "'"

    @property
    def is_long(self) -> bool:
        return bool(self.flags & ContextFlags.LONG)

    @property
    def has_escapes(self) -> bool:
        return not self.flags & ContextFlags.RAW

    @property
    def has_interpolation(self) -> bool:
        return bool(self.flags & ContextFlags.FORMAT)

    def equivalent(self, other: Context) -> bool:
        """Check structural equivalence (same hash, indent and flags)."""
        return (
            self.hash == other.hash
            and self.indent == other.indent
            and self.flags == other.flags
        )

    def __repr__(self) -> str:
        flags = self.flags.name if self.flags else "0"
        return f"Context(indent={self.indent}, flags={flags}, depth={self.depth})"


ROOT_CONTEXT = Context(None, 0, ContextFlags(0))


def count_indent(space: str) -> int:
    """Width of leading whitespace, with tab stops every TAB_SIZE columns.

    >>> count_indent("  \\t")
    8
    """
    depth = 0
    for char in space:
        if char == "\t":
            depth += TAB_SIZE - (depth % TAB_SIZE)
        else:
            depth += 1
    return depth


_F = ContextFlags

STRING_START_FLAGS: dict[TokenType, ContextFlags] = {
    TokenType.STRING_START: _F.STRING,
    TokenType.STRING_START_D: _F.STRING | _F.DOUBLE_QUOTE,
    TokenType.STRING_START_L: _F.STRING | _F.LONG,
    TokenType.STRING_START_LD: _F.STRING | _F.LONG | _F.DOUBLE_QUOTE,
    TokenType.STRING_START_R: _F.STRING | _F.RAW,
    TokenType.STRING_START_RD: _F.STRING | _F.RAW | _F.DOUBLE_QUOTE,
    TokenType.STRING_START_RL: _F.STRING | _F.RAW | _F.LONG,
    TokenType.STRING_START_RLD: _F.STRING | _F.RAW | _F.LONG | _F.DOUBLE_QUOTE,
    TokenType.STRING_START_F: _F.STRING | _F.FORMAT,
    TokenType.STRING_START_FD: _F.STRING | _F.FORMAT | _F.DOUBLE_QUOTE,
    TokenType.STRING_START_FL: _F.STRING | _F.FORMAT | _F.LONG,
    TokenType.STRING_START_FLD: _F.STRING | _F.FORMAT | _F.LONG | _F.DOUBLE_QUOTE,
    TokenType.STRING_START_FR: _F.STRING | _F.FORMAT | _F.RAW,
    TokenType.STRING_START_FRD: _F.STRING | _F.FORMAT | _F.RAW | _F.DOUBLE_QUOTE,
    TokenType.STRING_START_FRL: _F.STRING | _F.FORMAT | _F.RAW | _F.LONG,
    TokenType.STRING_START_FRLD: _F.STRING | _F.FORMAT | _F.RAW | _F.LONG | _F.DOUBLE_QUOTE,
}

# Reverse lookup used by the host scanner to name a string start
STRING_START_BY_FLAGS: dict[ContextFlags, TokenType] = {
    flags: token_type for token_type, flags in STRING_START_FLAGS.items()
}


class ContextTracker:
    """Shift/reduce rules that maintain the context stack.

    All methods are pure: they take the current frame and return the next
    one, which may be the same object.
    """

    __slots__ = ()

    @property
    def start(self) -> Context:
        """Initial frame for a fresh parse."""
        return ROOT_CONTEXT

    def hash(self, context: Context) -> int:
        """Reuse-cache key for a frame."""
        return context.hash

    def reduce(self, context: Context, node: NodeType) -> Context:
        """Update the stack when the grammar completes ``node``.

        Pops at most once: either a bracketed frame closed by a bracketed
        construct, or a string frame closed by a string node.
        """
        if context.flags & ContextFlags.BRACKETED and node in BRACKETED_NODES:
            return context.pop()
        if node in STRING_NODES and context.flags and context.flags != ContextFlags.BRACKETED:
            return context.pop()
        return context

    def shift(self, context: Context, token: Token, input: InputStream) -> Context:
        """Update the stack after ``token`` is accepted."""
        token_type = token.type
        if token_type is TokenType.INDENT:
            return context.push(indent=count_indent(input.read(token.start, token.end)))
        if token_type is TokenType.DEDENT:
            return context.pop()
        if token_type in OPENING_TYPES:
            return context.push(flags=ContextFlags.BRACKETED)
        string_flags = STRING_START_FLAGS.get(token_type)
        if string_flags is not None:
            return context.push(flags=string_flags | (context.flags & ContextFlags.BRACKETED))
        return context


__all__ = [
    "ROOT_CONTEXT",
    "STRING_START_BY_FLAGS",
    "STRING_START_FLAGS",
    "TAB_SIZE",
    "Context",
    "ContextFlags",
    "ContextTracker",
    "count_indent",
]
