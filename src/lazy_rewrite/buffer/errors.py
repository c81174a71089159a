"""Exceptions raised when a rewrite buffer is misused."""

from __future__ import annotations


class RewriteError(RuntimeError):
    """Base class for rewrite buffer misuse."""


class RewriteFinalizedError(RewriteError):
    """Raised when a buffer is touched after ``finalize()`` consumed it."""

    def __init__(self, buffer_name: str, operation: str) -> None:
        super().__init__(
            f"Rewrite buffer '{buffer_name}' was already finalized; "
            f"cannot {operation}"
        )
        self.buffer_name = buffer_name
        self.operation = operation
