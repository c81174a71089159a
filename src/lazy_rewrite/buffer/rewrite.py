"""Lazy-copy rewrite buffer.

A :class:`RewriteBuffer` is fed the desired output left to right. As long as
every write reproduces the original text at the cursor, nothing is copied and
``finalize()`` hands back a :class:`~lazy_rewrite.buffer.cow.Borrowed` view.
The first write that differs copies the verified prefix once and switches the
buffer to owned mode for good.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from lazy_rewrite.runtime import telemetry

from .cow import Borrowed, CowStr, Owned
from .errors import RewriteFinalizedError
from .source import Rewritable, Source


@dataclass(slots=True)
class RewriteStats:
    """Lightweight snapshot describing buffer state."""

    name: str
    cursor: int
    diverged: bool
    divergence_offset: Optional[int]
    pushes: int
    catch_up_copies: int
    output_length: int


class RewriteBuffer:
    def __init__(
        self,
        original: Rewritable,
        *,
        name: str = "rewrite",
        logger_name: str | None = None,
    ) -> None:
        self.name = name
        self._source = Source.coerce(original)
        self._logger_name = logger_name
        self._cursor = 0
        self._owned: List[str] = []
        self._owned_length = 0
        self._diverged = False
        self._divergence_offset: Optional[int] = None
        self._catch_up_copies = 0
        self._pushes = 0
        self._finalized = False

    @classmethod
    def borrowing(cls, text: str, *, name: str = "rewrite") -> "RewriteBuffer":
        return cls(_require_text(text), name=name)

    @classmethod
    def owning(cls, text: str, *, name: str = "rewrite") -> "RewriteBuffer":
        return cls(Owned(_require_text(text)), name=name)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def diverged(self) -> bool:
        return self._diverged

    @property
    def output_length(self) -> int:
        if self._diverged:
            return self._owned_length
        return self._cursor

    def stats(self) -> RewriteStats:
        return RewriteStats(
            name=self.name,
            cursor=self._cursor,
            diverged=self._diverged,
            divergence_offset=self._divergence_offset,
            pushes=self._pushes,
            catch_up_copies=self._catch_up_copies,
            output_length=self.output_length,
        )

    def push(self, char: str) -> None:
        """Append a single character to the output."""

        if not isinstance(char, str):
            raise TypeError(f"push expects str, not {type(char).__name__}")
        if len(char) != 1:
            raise ValueError(f"push expects a single character, got {char!r}")
        self._write(char, "push")

    def push_str(self, text: str) -> None:
        """Append a text fragment (possibly empty) to the output."""

        self._write(_require_text(text), "push_str")

    def extend(self, units: Iterable[str]) -> None:
        for unit in units:
            self.push_str(unit)

    def finalize(self) -> CowStr:
        """Consume the buffer and return the borrowed or owned result."""

        self._ensure_open("finalize")
        self._finalized = True
        with telemetry.span(
            "rewrite::finalize",
            logger_name=self._logger_name,
            component="rewrite",
            metadata={"buffer": self.name},
        ) as handle:
            result = self._into_result()
            handle.add_metadata("result", result.kind)
            handle.add_metadata("length", len(result))
        return result

    def _write(self, unit: str, operation: str) -> None:
        self._ensure_open(operation)
        self._pushes += 1
        if not self._diverged and self._source.matches_at(self._cursor, unit):
            self._cursor += len(unit)
            return

        self._diverge()
        if unit:
            self._owned.append(unit)
            self._owned_length += len(unit)

    def _diverge(self) -> None:
        if self._diverged:
            return
        if self._cursor:
            self._owned.append(self._source.prefix(self._cursor))
            self._owned_length = self._cursor
        self._catch_up_copies += 1
        self._diverged = True
        self._divergence_offset = self._cursor
        telemetry.record_event(
            "rewrite.diverge",
            level="debug",
            data={"buffer": self.name, "offset": self._cursor},
            logger_name=self._logger_name,
        )

    def _into_result(self) -> CowStr:
        if self._diverged:
            return Owned("".join(self._owned))
        if self._source.ownership == "owned":
            return Owned(self._source.prefix(self._cursor))
        return Borrowed(self._source.text, self._cursor)

    def _ensure_open(self, operation: str) -> None:
        if self._finalized:
            raise RewriteFinalizedError(self.name, operation)


def rewrite(
    original: Rewritable, units: Iterable[str], *, name: str = "rewrite"
) -> CowStr:
    """Write ``units`` over ``original`` and return the finalized result."""

    buffer = RewriteBuffer(original, name=name)
    buffer.extend(units)
    return buffer.finalize()


def _require_text(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, not {type(value).__name__}")
    return value
