from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Anything text can be appended to and read back from, e.g. io.StringIO."""

    def write(self, s: str, /) -> int: ...

    def getvalue(self) -> str: ...
