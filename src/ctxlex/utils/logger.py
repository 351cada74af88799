"""Logging for ctxlex.

Every module logs through a standard library logger under the ``ctxlex.``
namespace, so an application can tune the whole lexer with one logger name.
The library installs no handlers. The driver logs at debug level only:
unrecognized characters in non-strict mode and token cache hits.

Example:
    >>> import logging
    >>> logging.getLogger("ctxlex").setLevel(logging.DEBUG)
    >>> from ctxlex import tokenize
    >>> tokens = tokenize("x = $\\n")  # ctxlex.lexer.core: Unrecognized character '$' at 1:5
"""

from __future__ import annotations

import logging

_NAMESPACE = "ctxlex"


def get_logger(name: str) -> logging.Logger:
    """Return the ctxlex logger for a module.

    Names outside the package are moved under it, so helpers and tests that
    pass their own ``__name__`` still log in the ctxlex tree.

    Example:
        >>> get_logger("ctxlex.lexer.core").name
        'ctxlex.lexer.core'
        >>> get_logger("plugin").name
        'ctxlex.plugin'
    """
    if name != _NAMESPACE and not name.startswith(_NAMESPACE + "."):
        name = f"{_NAMESPACE}.{name}"
    return logging.getLogger(name)
