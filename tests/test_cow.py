from __future__ import annotations

import pytest

from lazy_rewrite.buffer import Borrowed, CowStr, Owned


def test_borrowed_view_is_lazy_prefix() -> None:
    source = "hello world"
    view = Borrowed(source, 5)

    assert view.kind == "borrowed"
    assert view.is_borrowed and not view.is_owned
    assert len(view) == 5
    assert view.text == "hello"
    assert repr(view) == "Borrowed('hello')"


def test_borrowed_whole_returns_source_object() -> None:
    source = "hello"
    view = Borrowed.whole(source)

    assert view.is_whole
    assert view.text is source


def test_borrowed_end_validated() -> None:
    with pytest.raises(ValueError):
        Borrowed("abc", 4)
    with pytest.raises(ValueError):
        Borrowed("abc", -1)
    with pytest.raises(TypeError):
        Borrowed(b"abc", 1)  # type: ignore[arg-type]


def test_borrowed_and_owned_compare_by_text() -> None:
    borrowed = Borrowed("abcdef", 3)
    owned = Owned("abc")

    assert borrowed == owned
    assert borrowed == "abc"
    assert owned != "abd"
    assert hash(borrowed) == hash(owned) == hash("abc")
    assert len({borrowed, owned}) == 1


def test_into_owned() -> None:
    owned = Owned("abc")

    assert owned.into_owned() is owned
    converted = Borrowed("abcdef", 2).into_owned()
    assert isinstance(converted, Owned)
    assert converted == "ab"


def test_owned_rejects_non_text() -> None:
    with pytest.raises(TypeError):
        Owned(123)  # type: ignore[arg-type]


def test_results_share_base_type() -> None:
    values: list[CowStr] = [Borrowed.whole("x"), Owned("y")]

    assert [str(value) for value in values] == ["x", "y"]
    assert [value.kind for value in values] == ["borrowed", "owned"]
    assert all(isinstance(value, CowStr) for value in values)
