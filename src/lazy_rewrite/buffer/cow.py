"""Borrowed-or-owned text values produced by rewrite buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

CowKind = Literal["borrowed", "owned"]


class CowStr:
    """Text that is either a view into an existing string or owned outright.

    Downstream code can treat both variants uniformly through ``text`` and
    ``str()``; ``kind`` tells which path produced the value. Equality and
    hashing are by text, so a borrowed and an owned value spelling the same
    characters compare equal.
    """

    __slots__ = ()

    kind: ClassVar[CowKind]
    text: str

    @property
    def is_borrowed(self) -> bool:
        return self.kind == "borrowed"

    @property
    def is_owned(self) -> bool:
        return self.kind == "owned"

    def into_owned(self) -> "Owned":
        return Owned(self.text)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CowStr):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


@dataclass(frozen=True, slots=True, eq=False)
class Borrowed(CowStr):
    """Zero-copy view of ``source[:end]``."""

    kind: ClassVar[CowKind] = "borrowed"

    source: str
    end: int

    def __post_init__(self) -> None:
        if not isinstance(self.source, str):
            raise TypeError("Borrowed source must be str")
        if self.end < 0 or self.end > len(self.source):
            raise ValueError(
                f"end {self.end} outside 0..{len(self.source)} of borrowed source"
            )

    @classmethod
    def whole(cls, source: str) -> "Borrowed":
        return cls(source, len(source))

    @property
    def is_whole(self) -> bool:
        return self.end == len(self.source)

    @property
    def text(self) -> str:
        # Slicing only happens here, when a caller asks for the string.
        if self.is_whole:
            return self.source
        return self.source[: self.end]

    def __len__(self) -> int:
        return self.end

    def __repr__(self) -> str:
        return f"Borrowed({self.text!r})"


@dataclass(frozen=True, slots=True, eq=False)
class Owned(CowStr):
    kind: ClassVar[CowKind] = "owned"

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("Owned text must be str")

    def into_owned(self) -> "Owned":
        return self

    def __repr__(self) -> str:
        return f"Owned({self.text!r})"
