from __future__ import annotations

from dataclasses import dataclass

TAB = "\t"
CRLF = "\r\n"
LF = "\n"


@dataclass(frozen=True)
class BuilderConfig:
    """Construction defaults for an IndentedBuilder."""
    indent: str = TAB
    newline: str = CRLF


DEFAULT_CONFIG = BuilderConfig()
