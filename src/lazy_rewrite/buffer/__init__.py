"""Lazy-copy rewrite buffer and its borrowed-or-owned results."""

from .cow import Borrowed, CowKind, CowStr, Owned
from .errors import RewriteError, RewriteFinalizedError
from .rewrite import RewriteBuffer, RewriteStats, rewrite
from .source import Rewritable, Source

__all__ = [
    "Borrowed",
    "CowKind",
    "CowStr",
    "Owned",
    "RewriteBuffer",
    "RewriteError",
    "RewriteFinalizedError",
    "RewriteStats",
    "Rewritable",
    "Source",
    "rewrite",
]
