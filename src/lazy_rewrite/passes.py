"""Text normalization passes built on :class:`RewriteBuffer`.

Every pass accepts a ``str``, ``Borrowed`` or ``Owned`` input and returns a
``CowStr``. Input that needs no change comes back borrowed (or, for owned
input, as the same string object), so passes can be chained cheaply with
:class:`RewritePipeline`.
"""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterable, List, Optional, Sequence

from lazy_rewrite.buffer import Borrowed, CowStr, RewriteBuffer, Rewritable, Source
from lazy_rewrite.runtime import telemetry

RewritePass = Callable[[Rewritable], CowStr]

_TRAILING_WHITESPACE = " \t"


def map_chars(original: Rewritable, func: Callable[[str], str]) -> CowStr:
    """Rewrite each character of ``original`` through ``func``."""

    source = Source.coerce(original)
    buffer = RewriteBuffer(original, name="map_chars")
    with telemetry.span("passes::map_chars", component="passes"):
        for char in islice(source.text, source.end):
            buffer.push_str(func(char))
        return buffer.finalize()


def normalize_newlines(original: Rewritable) -> CowStr:
    """Turn ``\\r\\n`` and lone ``\\r`` line endings into ``\\n``."""

    source = Source.coerce(original)
    text, end = source.text, source.end
    buffer = RewriteBuffer(original, name="normalize_newlines")
    with telemetry.span("passes::normalize_newlines", component="passes"):
        start = 0
        while start < end:
            index = text.find("\r", start, end)
            if index == -1:
                buffer.push_str(text[start:end])
                break
            buffer.push_str(text[start:index])
            buffer.push("\n")
            start = index + 2 if text.startswith("\n", index + 1, end) else index + 1
        return buffer.finalize()


def strip_trailing_whitespace(original: Rewritable) -> CowStr:
    """Drop spaces and tabs before every line ending and at the end of text."""

    source = Source.coerce(original)
    text, end = source.text, source.end
    buffer = RewriteBuffer(original, name="strip_trailing_whitespace")
    with telemetry.span("passes::strip_trailing_whitespace", component="passes"):
        start = 0
        while start < end:
            newline = text.find("\n", start, end)
            line_end = end if newline == -1 else newline
            if line_end > start and text[line_end - 1] == "\r":
                line_end -= 1
            content_end = line_end
            while content_end > start and text[content_end - 1] in _TRAILING_WHITESPACE:
                content_end -= 1
            buffer.push_str(text[start:content_end])
            if newline == -1:
                buffer.push_str(text[line_end:end])
                break
            buffer.push_str(text[line_end : newline + 1])
            start = newline + 1
        return buffer.finalize()


def expand_tabs(original: Rewritable, tabsize: int = 8) -> CowStr:
    """Replace tabs with spaces up to the next multiple of ``tabsize``."""

    if tabsize <= 0:
        raise ValueError("tabsize must be positive")
    source = Source.coerce(original)
    buffer = RewriteBuffer(original, name="expand_tabs")
    with telemetry.span(
        "passes::expand_tabs", component="passes", metadata={"tabsize": tabsize}
    ):
        column = 0
        for char in islice(source.text, source.end):
            if char == "\t":
                width = tabsize - column % tabsize
                buffer.push_str(" " * width)
                column += width
                continue
            buffer.push(char)
            column = 0 if char in "\r\n" else column + 1
        return buffer.finalize()


class RewritePipeline:
    """Runs rewrite passes in order, feeding each result into the next."""

    def __init__(
        self, passes: Optional[Iterable[RewritePass]] = None, *, name: str = "pipeline"
    ) -> None:
        self.name = name
        self._passes: List[RewritePass] = list(passes or ())

    def add(self, rewrite_pass: RewritePass) -> "RewritePipeline":
        self._passes.append(rewrite_pass)
        return self

    @property
    def passes(self) -> Sequence[RewritePass]:
        return tuple(self._passes)

    def run(self, original: Rewritable) -> CowStr:
        current: CowStr = _as_cow(original)
        with telemetry.span(
            f"pipeline::{self.name}",
            component="passes",
            metadata={"passes": len(self._passes)},
        ) as handle:
            for rewrite_pass in self._passes:
                current = rewrite_pass(current)
            handle.add_metadata("result", current.kind)
        return current

    def __call__(self, original: Rewritable) -> CowStr:
        return self.run(original)

    def __len__(self) -> int:
        return len(self._passes)


def _as_cow(original: Rewritable) -> CowStr:
    if isinstance(original, CowStr):
        return original
    if isinstance(original, str):
        return Borrowed.whole(original)
    raise TypeError(
        f"original must be str, Borrowed or Owned, not {type(original).__name__}"
    )
