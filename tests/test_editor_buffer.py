import pytest

from clip_editor.buffer import EditorBuffer, Selection
from clip_editor.errors import InvalidRange


def make_buffer(text: str | None = None) -> EditorBuffer:
    if text is None:
        return EditorBuffer()
    return EditorBuffer.from_text(text)


def test_new_buffer_is_unset() -> None:
    buffer = make_buffer()

    assert buffer.text is None
    assert buffer.render() is None
    assert buffer.cursor == 0
    assert buffer.selection is None
    assert len(buffer.clipboard) == 0


@pytest.mark.parametrize("payload", ["a", "Hello", "with spaces  "])
def test_first_type_sets_text_and_cursor(payload: str) -> None:
    buffer = make_buffer()

    delta = buffer.type_text(payload)

    assert buffer.text == payload
    assert buffer.cursor == len(payload)
    assert delta.label == "type_text"
    assert delta.changed is True


def test_first_type_with_empty_payload_gives_empty_text() -> None:
    buffer = make_buffer()

    buffer.type_text("")

    assert buffer.text == ""
    assert buffer.cursor == 0


def test_type_inserts_at_cursor() -> None:
    buffer = make_buffer("Hello")
    buffer.move_cursor(-5)

    buffer.type_text(">> ")

    assert buffer.text == ">> Hello"
    assert buffer.cursor == 3


def test_type_replaces_active_selection() -> None:
    buffer = make_buffer("abcdef")
    buffer.select(0, 1)

    buffer.type_text("X")

    assert buffer.text == "Xcdef"
    assert buffer.cursor == 1
    assert buffer.selection is None


def test_select_materializes_text_and_moves_cursor() -> None:
    buffer = make_buffer("Hello")

    delta = buffer.select(1, 3)

    assert buffer.selection == Selection(start=1, end=3, text="ell")
    assert buffer.cursor == 4
    assert delta.selection is not None and delta.selection.length == 3


def test_select_replaces_previous_selection() -> None:
    buffer = make_buffer("Hello")
    buffer.select(0, 0)

    buffer.select(4, 4)

    assert buffer.selection == Selection(start=4, end=4, text="o")
    assert buffer.cursor == 5


@pytest.mark.parametrize("start,end", [(0, 5), (-1, 2), (3, 1), (7, 9)])
def test_select_out_of_range_raises_and_keeps_state(start: int, end: int) -> None:
    buffer = make_buffer("Hello")
    buffer.select(0, 1)

    with pytest.raises(InvalidRange):
        buffer.select(start, end)

    assert buffer.text == "Hello"
    assert buffer.cursor == 2
    assert buffer.selection == Selection(start=0, end=1, text="He")


def test_select_on_unset_buffer_raises() -> None:
    buffer = make_buffer()

    with pytest.raises(InvalidRange):
        buffer.select(0, 0)


def test_move_cursor_clamps() -> None:
    buffer = make_buffer("Hello")

    buffer.move_cursor(-100)
    assert buffer.cursor == 0

    buffer.move_cursor(3)
    assert buffer.cursor == 3

    buffer.move_cursor(100)
    assert buffer.cursor == 5


def test_move_cursor_clamp_is_idempotent() -> None:
    once = make_buffer("Hello")
    twice = make_buffer("Hello")

    once.move_cursor(42)
    twice.move_cursor(42)
    twice.move_cursor(42)

    assert once.cursor == twice.cursor == 5


def test_move_cursor_zero_only_clears_selection() -> None:
    buffer = make_buffer("Hello")
    buffer.select(0, 4)
    before = buffer.snapshot()

    buffer.move_cursor(0)

    assert buffer.selection is None
    assert buffer.text == before.text
    assert buffer.cursor == before.cursor


def test_move_cursor_on_unset_buffer_stays_at_zero() -> None:
    buffer = make_buffer()

    buffer.move_cursor(5)

    assert buffer.cursor == 0
    assert buffer.text is None


def test_copy_without_selection_is_noop() -> None:
    buffer = make_buffer("Hello")

    delta = buffer.copy()

    assert delta.changed is False
    assert len(buffer.clipboard) == 0


def test_copy_appends_and_keeps_selection() -> None:
    buffer = make_buffer("Hello")
    buffer.select(0, 1)

    buffer.copy()
    buffer.copy()

    assert buffer.clipboard.serialize() == ("He", "He")
    assert buffer.selection == Selection(start=0, end=1, text="He")
    assert buffer.cursor == 2


@pytest.mark.parametrize(
    "text,cursor_offset,payload",
    [("", 0, "abc"), ("Hello", -2, "XY"), ("Hello", 0, " world")],
)
def test_insert_select_copy_round_trip(
    text: str, cursor_offset: int, payload: str
) -> None:
    buffer = make_buffer(text)
    buffer.move_cursor(cursor_offset)
    k = buffer.cursor

    buffer.type_text(payload)
    buffer.select(k, k + len(payload) - 1)
    buffer.copy()

    assert buffer.clipboard.latest() == payload


def test_paste_with_empty_clipboard_is_noop() -> None:
    buffer = make_buffer("Hello")
    buffer.select(0, 1)

    delta = buffer.paste()

    assert delta.changed is False
    assert buffer.text == "Hello"
    assert buffer.selection is not None


def test_paste_most_recent_inserts_at_cursor() -> None:
    buffer = make_buffer("Hello")
    buffer.select(0, 0)
    buffer.copy()
    buffer.select(1, 2)
    buffer.copy()
    buffer.move_cursor(10)

    buffer.paste()

    assert buffer.text == "Helloel"
    assert buffer.cursor == 7


def test_paste_steps_back() -> None:
    buffer = make_buffer("abc")
    for index in range(3):
        buffer.select(index, index)
        buffer.copy()
    buffer.move_cursor(10)

    buffer.paste(3)
    buffer.paste(1)

    assert buffer.text == "abcac"
    assert buffer.cursor == 5


@pytest.mark.parametrize("steps_back", [0, -1, 2, 9])
def test_paste_steps_back_out_of_range_is_noop(steps_back: int) -> None:
    buffer = make_buffer("Hello")
    buffer.select(0, 1)
    buffer.copy()
    before = buffer.snapshot()

    delta = buffer.paste(steps_back)

    assert delta.changed is False
    assert buffer.text == before.text
    assert buffer.cursor == before.cursor
    assert buffer.selection == before.selection


def test_paste_replaces_active_selection() -> None:
    buffer = make_buffer("abcdef")
    buffer.select(1, 2)
    buffer.copy()
    buffer.select(4, 5)

    buffer.paste()

    assert buffer.text == "abcdbc"
    assert buffer.cursor == 6
    assert buffer.selection is None


def test_delete_selected() -> None:
    buffer = make_buffer("abcdef")
    assert buffer.delete_selected() is None

    buffer.select(2, 3)
    removed = buffer.delete_selected()

    assert removed == "cd"
    assert buffer.text == "abef"
    assert buffer.cursor == 2
    assert buffer.selection is None


def test_clipboard_entries_survive_later_edits() -> None:
    buffer = make_buffer("abc")
    buffer.select(0, 2)
    buffer.copy()

    buffer.type_text("zzz")
    buffer.move_cursor(-3)
    buffer.type_text("q")

    assert buffer.clipboard.serialize() == ("abc",)


def test_snapshot_reflects_state() -> None:
    buffer = make_buffer("Hi")
    buffer.select(0, 1)
    buffer.copy()

    view = buffer.snapshot()

    assert view.text == "Hi"
    assert view.cursor == 2
    assert view.selection == Selection(start=0, end=1, text="Hi")
    assert view.clipboard == ("Hi",)
