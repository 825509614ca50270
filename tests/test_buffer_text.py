import pytest

from clip_editor.buffer import (
    BufferState,
    ClipboardHistory,
    TextStore,
    clamp_offset,
    ensure_range,
    ensure_state,
)
from clip_editor.errors import BufferValidationError, InvalidRange


def test_text_store_insert_splices_and_returns_end_offset() -> None:
    store = TextStore.from_text("Hlo")

    end = store.insert(1, "el")

    assert store.snapshot() == "Hello"
    assert end == 3
    assert store.version == 1


def test_text_store_insert_at_end_and_empty_payload() -> None:
    store = TextStore.from_text("ab")

    assert store.insert(2, "c") == 3
    assert store.insert(0, "") == 0
    assert store.snapshot() == "abc"
    assert store.version == 1


def test_text_store_insert_rejects_offset_past_end() -> None:
    store = TextStore.from_text("ab")

    with pytest.raises(BufferValidationError) as info:
        store.insert(3, "x")

    assert info.value.offset == 3
    assert store.snapshot() == "ab"


def test_text_store_remove_inclusive_range() -> None:
    store = TextStore.from_text("abcdef")

    removed = store.remove(1, 3)

    assert removed == "bcd"
    assert store.snapshot() == "aef"
    assert len(store) == 3


def test_text_store_slice_bounds() -> None:
    store = TextStore.from_text("abc")

    assert store.slice(0, 2) == "abc"
    assert store.slice(1, 1) == "b"
    with pytest.raises(BufferValidationError):
        store.slice(0, 3)
    with pytest.raises(BufferValidationError):
        store.slice(2, 1)
    with pytest.raises(BufferValidationError):
        store.slice(-1, 1)


def test_clamp_offset() -> None:
    assert clamp_offset(-4, 10) == 0
    assert clamp_offset(4, 10) == 4
    assert clamp_offset(14, 10) == 10
    assert clamp_offset(3, 0) == 0


def test_ensure_range_accepts_valid_and_rejects_invalid() -> None:
    store = TextStore.from_text("hello")

    assert ensure_range(store, 0, 4) == (0, 4)
    for start, end in [(0, 5), (3, 2), (-1, 2)]:
        with pytest.raises(InvalidRange) as info:
            ensure_range(store, start, end)
        assert (info.value.start, info.value.end, info.value.length) == (
            start,
            end,
            5,
        )


def test_ensure_range_without_text() -> None:
    with pytest.raises(InvalidRange) as info:
        ensure_range(None, 0, 0)

    assert info.value.length == 0


def test_ensure_state_checks_cursor() -> None:
    store = TextStore.from_text("abc")

    assert ensure_state(store, BufferState(cursor=3)).cursor == 3
    with pytest.raises(BufferValidationError):
        ensure_state(store, BufferState(cursor=4))
    with pytest.raises(BufferValidationError):
        ensure_state(None, BufferState(cursor=1))


def test_clipboard_history_recency() -> None:
    clipboard = ClipboardHistory()
    assert clipboard.is_empty()
    assert clipboard.latest() is None

    clipboard.push("one")
    clipboard.push("two")
    clipboard.push("three")

    assert len(clipboard) == 3
    assert clipboard.latest() == "three"
    assert clipboard.steps_back(1) == "three"
    assert clipboard.steps_back(3) == "one"
    assert clipboard.steps_back(0) is None
    assert clipboard.steps_back(4) is None
    assert clipboard.steps_back(-1) is None
    assert clipboard.serialize() == ("one", "two", "three")
    assert list(clipboard) == ["one", "two", "three"]
