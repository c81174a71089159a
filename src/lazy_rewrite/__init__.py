"""Lazy-copy text rewriting: borrow the input until the output diverges."""

from .buffer import (
    Borrowed,
    CowStr,
    Owned,
    RewriteBuffer,
    RewriteError,
    RewriteFinalizedError,
    RewriteStats,
    rewrite,
)
from .passes import (
    RewritePipeline,
    expand_tabs,
    map_chars,
    normalize_newlines,
    strip_trailing_whitespace,
)

__all__ = [
    "Borrowed",
    "CowStr",
    "Owned",
    "RewriteBuffer",
    "RewriteError",
    "RewriteFinalizedError",
    "RewritePipeline",
    "RewriteStats",
    "expand_tabs",
    "map_chars",
    "normalize_newlines",
    "rewrite",
    "strip_trailing_whitespace",
]

__version__ = "0.1.0"
