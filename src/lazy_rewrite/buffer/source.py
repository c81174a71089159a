"""Closed set of inputs a rewrite buffer may start from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from .cow import Borrowed, Owned

Rewritable = Union[str, Borrowed, Owned]
Ownership = Literal["borrowed", "owned"]


@dataclass(frozen=True, slots=True)
class Source:
    """Original text as seen by the buffer: ``text[:end]`` plus its ownership.

    Borrowed views keep pointing at their full source string so comparisons
    never slice it.
    """

    text: str
    end: int
    ownership: Ownership

    @classmethod
    def coerce(cls, original: Rewritable) -> "Source":
        if isinstance(original, str):
            return cls(text=original, end=len(original), ownership="borrowed")
        if isinstance(original, Borrowed):
            return cls(text=original.source, end=original.end, ownership="borrowed")
        if isinstance(original, Owned):
            return cls(text=original.text, end=len(original.text), ownership="owned")
        raise TypeError(
            "original must be str, Borrowed or Owned, "
            f"not {type(original).__name__}"
        )

    def matches_at(self, offset: int, unit: str) -> bool:
        """Return ``True`` when ``unit`` occurs verbatim at ``offset``.

        Comparison is exact per code point; running past ``end`` is a miss.
        """

        return self.text.startswith(unit, offset, self.end)

    def prefix(self, length: int) -> str:
        if length == len(self.text):
            return self.text
        return self.text[:length]

    def __len__(self) -> int:
        return self.end
