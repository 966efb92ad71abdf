from __future__ import annotations

import io
import logging
from typing import Optional

from .config import BuilderConfig, DEFAULT_CONFIG
from .scope import Scope, SemicolonScope
from .types import TextSink

logger = logging.getLogger(__name__)


class IndentedBuilder:
    """
    Indentation-aware text builder writing through a sink.

    Each physical line gets ``indent_string * depth`` in front of its first
    content, using the depth at the moment that content is written. Lines
    already emitted are never touched again.
    """

    def __init__(
        self,
        sink: TextSink,
        indent: Optional[str] = None,
        newline: Optional[str] = None,
    ) -> None:
        if sink is None:
            raise TypeError("IndentedBuilder: sink must not be None")
        if not isinstance(sink, TextSink):
            raise TypeError(
                f"IndentedBuilder: sink must provide write() and getvalue(), got {type(sink).__name__}"
            )
        self._sink = sink
        self._owns_sink = False
        self._indent_string = DEFAULT_CONFIG.indent if indent is None else indent
        self._newline = DEFAULT_CONFIG.newline if newline is None else newline
        self._depth = 0
        self._at_line_start = True
        self._closed = False
        self._final_text: Optional[str] = None

    @classmethod
    def create(cls, indent: Optional[str] = None, newline: Optional[str] = None) -> "IndentedBuilder":
        """Build over a fresh StringIO that the builder owns and closes."""
        builder = cls(io.StringIO(), indent=indent, newline=newline)
        builder._owns_sink = True
        return builder

    @classmethod
    def from_config(cls, config: BuilderConfig, sink: Optional[TextSink] = None) -> "IndentedBuilder":
        if sink is None:
            return cls.create(indent=config.indent, newline=config.newline)
        return cls(sink, indent=config.indent, newline=config.newline)

    # -------------------------
    # State
    # -------------------------

    @property
    def indent_string(self) -> str:
        return self._indent_string

    @property
    def newline(self) -> str:
        return self._newline

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def depth(self) -> int:
        return self._depth

    @depth.setter
    def depth(self, value: int) -> None:
        if value < 0:
            logger.debug("Indent depth %d clamped to 0.", value)
            value = 0
        self._depth = value

    def indent(self) -> None:
        self.depth = self._depth + 1

    def outdent(self) -> None:
        self.depth = self._depth - 1

    # -------------------------
    # Writing
    # -------------------------

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("IndentedBuilder is closed; no further writes are allowed.")

    def _emit(self, text: str) -> None:
        if self._at_line_start:
            self._sink.write(self._indent_string * self._depth)
            self._at_line_start = False
        self._sink.write(text)

    def write(self, text: Optional[str] = None) -> None:
        """Append text without a terminator. Empty text writes nothing at all."""
        self._check_open()
        if not text:
            return
        self._emit(text)
        if self._newline and text.endswith(self._newline):
            self._at_line_start = True

    def write_line(self, text: Optional[str] = None) -> None:
        """Finish the current line with ``text`` and a terminator."""
        self._check_open()
        self._emit((text or "") + self._newline)
        self._at_line_start = True

    def writelines(self, raw: str) -> None:
        for ln in raw.splitlines():
            self.write_line(ln)

    def blank_line(self) -> None:
        # never indented
        self._check_open()
        self._sink.write(self._newline)
        self._at_line_start = True

    def block(self, semicolon: bool = False) -> Scope:
        if semicolon:
            return SemicolonScope(self)
        return Scope(self)

    # -------------------------
    # Output & lifecycle
    # -------------------------

    def render(self) -> str:
        if self._final_text is not None:
            return self._final_text
        return self._sink.getvalue()

    def __str__(self) -> str:
        return self.render()

    def close(self) -> None:
        if self._closed:
            return
        self._final_text = self._sink.getvalue()
        if self._owns_sink:
            self._sink.close()
            self._owns_sink = False
        self._closed = True
        logger.debug("IndentedBuilder closed with %d characters.", len(self._final_text))

    def __enter__(self) -> "IndentedBuilder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
