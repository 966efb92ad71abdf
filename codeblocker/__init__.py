from .config import BuilderConfig, DEFAULT_CONFIG, TAB, CRLF, LF
from .types import TextSink
from .codegen import IndentedBuilder
from .scope import Scope, SemicolonScope

__all__ = [
    # config
    "BuilderConfig", "DEFAULT_CONFIG", "TAB", "CRLF", "LF",
    # builder
    "TextSink", "IndentedBuilder",
    # scopes
    "Scope", "SemicolonScope",
]
