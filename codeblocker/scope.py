from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .codegen import IndentedBuilder

logger = logging.getLogger(__name__)


class Scope:
    """
    Brace-delimited block over a shared builder.

    Construction writes ``OPEN`` at the current depth and indents. ``close()``
    (or leaving a ``with`` block) outdents and writes ``CLOSE``. The depth is
    the builder's single counter, so closing scopes out of order or mixing in
    manual ``indent()``/``outdent()`` calls leaves whatever depth the last
    change produced.
    """

    OPEN = "{"
    CLOSE = "}"

    def __init__(self, builder: "IndentedBuilder") -> None:
        if builder is None:
            raise TypeError(f"{type(self).__name__}: builder must not be None")
        if builder.closed:
            raise RuntimeError(f"{type(self).__name__}: cannot open a scope on a closed builder")
        self.builder = builder
        self._closed = False
        self._begin()

    @property
    def closed(self) -> bool:
        return self._closed

    def _begin(self) -> None:
        self.builder.write_line(self.OPEN)
        self.builder.indent()
        logger.debug("Opened %s at depth %d.", type(self).__name__, self.builder.depth)

    def _end(self) -> None:
        self.builder.outdent()
        self.builder.write_line(self.CLOSE)
        logger.debug("Closed %s at depth %d.", type(self).__name__, self.builder.depth)

    def close(self) -> None:
        if self._closed:
            return
        if self.builder.closed:
            raise RuntimeError(f"{type(self).__name__}: cannot close a scope on a closed builder")
        self._closed = True
        self._end()

    def __enter__(self) -> "Scope":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class SemicolonScope(Scope):
    """Scope whose closing line carries a statement terminator: ``};``."""

    CLOSE = "};"
