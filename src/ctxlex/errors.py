"""Exception classes for ctxlex.

The contextual tokenizers never raise: declining to produce a token is how
they report input they cannot handle. Exceptions come only from the host
driver.
"""

from __future__ import annotations


class CtxlexError(Exception):
    """Base exception for all ctxlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(CtxlexError):
    """Error during tokenization.

    Raised by the host driver in strict mode when no tokenizer accepts the
    input at some position.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
