from __future__ import annotations

import pytest

from text_engine.buffer import (
    InvalidArgumentError,
    OutOfBoundsError,
    Position,
    Range,
    TextBuffer,
)


class TextRecorder:
    def __init__(self, buffer: TextBuffer) -> None:
        self.buffer = buffer
        self.seen: list[tuple[tuple[str, ...], Position]] = []

    def update_text(self) -> None:
        self.seen.append((tuple(self.buffer.lines), self.buffer.cursor))


def make_buffer(text: str, *, at: Position | None = None) -> TextBuffer:
    buffer = TextBuffer(text)
    if at is not None:
        buffer.move_to(at)
    return buffer


def assert_in_bounds(buffer: TextBuffer) -> None:
    assert buffer.line_count >= 1
    cursor = buffer.cursor
    assert 0 <= cursor.line < buffer.line_count
    assert 0 <= cursor.column <= len(buffer.line(cursor.line))


def test_insert_char_after_crossing_line_boundary() -> None:
    buffer = make_buffer("ab\ncd")
    for _ in range(3):
        buffer.move_right()

    buffer.insert_char("X")

    assert buffer.lines == ("ab", "Xcd")
    assert buffer.cursor == Position(1, 1)


def test_insert_char_replaces_selection() -> None:
    buffer = make_buffer("abc")
    recorder = TextRecorder(buffer)
    buffer.add_text_observer(recorder)
    buffer.set_selection(Range(Position(0, 0), Position(2, 0)))

    buffer.insert_char("Z")

    assert buffer.lines == ("Zc",)
    assert buffer.cursor == Position(1, 0)
    assert buffer.selection == Range.empty(Position(1, 0))
    assert len(recorder.seen) == 1


def test_insert_char_replaces_backward_selection() -> None:
    buffer = make_buffer("hello world")
    buffer.set_selection(Range(Position(11, 0), Position(5, 0)))

    buffer.insert_char("!")

    assert buffer.lines == ("hello!",)
    assert buffer.cursor == Position(6, 0)


def test_insert_newline_splits_line() -> None:
    buffer = make_buffer("hello world", at=Position(5, 0))

    buffer.insert_char("\n")

    assert buffer.lines == ("hello", " world")
    assert buffer.cursor == Position(0, 1)


@pytest.mark.parametrize("at", [Position(0, 0), Position(2, 0), Position(4, 1)])
def test_newline_then_delete_before_restores(at: Position) -> None:
    buffer = make_buffer("abcd\nefgh", at=at)
    before = buffer.lines

    buffer.insert_char("\n")
    buffer.delete_before()

    assert buffer.lines == before
    assert buffer.cursor == at


@pytest.mark.parametrize("value", ["", "ab", None, 7])
def test_insert_char_rejects_non_characters(value: object) -> None:
    buffer = make_buffer("abc")

    with pytest.raises(InvalidArgumentError):
        buffer.insert_char(value)  # type: ignore[arg-type]


def test_delete_before_joins_lines() -> None:
    buffer = make_buffer("line1\nline2", at=Position(0, 1))

    buffer.delete_before()

    assert buffer.lines == ("line1line2",)
    assert buffer.cursor == Position(5, 0)


def test_delete_before_removes_left_character() -> None:
    buffer = make_buffer("abc", at=Position(2, 0))

    buffer.delete_before()

    assert buffer.lines == ("ac",)
    assert buffer.cursor == Position(1, 0)


def test_delete_before_at_origin_is_noop() -> None:
    buffer = make_buffer("abc")
    recorder = TextRecorder(buffer)
    buffer.add_text_observer(recorder)

    assert buffer.delete_before() is False
    assert recorder.seen == []


def test_delete_after_removes_character_without_moving() -> None:
    buffer = make_buffer("abc", at=Position(1, 0))

    buffer.delete_after()

    assert buffer.lines == ("ac",)
    assert buffer.cursor == Position(1, 0)


def test_delete_after_at_line_end_merges_next_line() -> None:
    buffer = make_buffer("ab\ncd\nef", at=Position(2, 0))

    buffer.delete_after()

    assert buffer.lines == ("abcd", "ef")
    assert buffer.cursor == Position(2, 0)


def test_delete_after_at_buffer_end_is_noop() -> None:
    buffer = make_buffer("ab\ncd", at=Position(2, 1))
    recorder = TextRecorder(buffer)
    buffer.add_text_observer(recorder)

    assert buffer.delete_after() is False
    assert buffer.lines == ("ab", "cd")
    assert recorder.seen == []


def test_deleting_everything_keeps_one_line() -> None:
    buffer = make_buffer("x", at=Position(1, 0))

    buffer.delete_before()

    assert buffer.lines == ("",)
    assert_in_bounds(buffer)


def test_delete_range_collapses_spanned_lines() -> None:
    buffer = make_buffer("first\nsecond\nthird\nfourth", at=Position(3, 3))
    recorder = TextRecorder(buffer)
    buffer.add_text_observer(recorder)

    buffer.delete_range(Range(Position(2, 2), Position(2, 0)))

    assert buffer.lines == ("fiird", "fourth")
    assert buffer.cursor == Position(2, 0)
    assert buffer.selection == Range.empty(Position(2, 0))
    assert recorder.seen == [(("fiird", "fourth"), Position(2, 0))]


def test_empty_delete_range_still_notifies() -> None:
    buffer = make_buffer("abc\ndef", at=Position(1, 1))
    recorder = TextRecorder(buffer)
    buffer.add_text_observer(recorder)

    buffer.delete_range(Range.empty(Position(1, 1)))

    assert buffer.lines == ("abc", "def")
    assert recorder.seen == [(("abc", "def"), Position(1, 1))]


def test_delete_range_rejects_stale_positions() -> None:
    buffer = make_buffer("abc")

    with pytest.raises(OutOfBoundsError):
        buffer.delete_range(Range(Position(0, 0), Position(0, 3)))
    assert buffer.lines == ("abc",)


def test_insert_text_multiline_in_middle_of_line() -> None:
    buffer = make_buffer("startEND", at=Position(5, 0))

    buffer.insert_text("one\ntwo\nthree")

    assert buffer.lines == ("startone", "two", "threeEND")
    assert buffer.cursor == Position(5, 2)
    assert buffer.selection == Range.empty(Position(5, 2))


def test_insert_text_with_trailing_newline() -> None:
    buffer = make_buffer("ab", at=Position(1, 0))

    buffer.insert_text("x\n")

    assert buffer.lines == ("ax", "b")
    assert buffer.cursor == Position(0, 1)


def test_insert_text_replaces_multiline_selection() -> None:
    buffer = make_buffer("abc\ndef\nghi")
    recorder = TextRecorder(buffer)
    buffer.add_text_observer(recorder)
    buffer.set_selection(Range(Position(1, 0), Position(2, 2)))

    buffer.insert_text("XY")

    assert buffer.lines == ("aXYi",)
    assert buffer.cursor == Position(3, 0)
    assert len(recorder.seen) == 1


@pytest.mark.parametrize(
    "text", ["hello", "a\nb", "\n\n", "tail\n", "\nlead", "mid\ndle\nlines"]
)
def test_insert_text_matches_repeated_insert_char(text: str) -> None:
    bulk = make_buffer("left|right\nnext", at=Position(5, 0))
    single = make_buffer("left|right\nnext", at=Position(5, 0))

    bulk.insert_text(text)
    for char in text:
        single.insert_char(char)

    assert bulk.lines == single.lines
    assert bulk.cursor == single.cursor


def test_get_text_range_spans_lines() -> None:
    buffer = make_buffer("abc\ndef\nghi")

    selection = Range(Position(2, 2), Position(1, 0))

    assert buffer.get_text_range(selection) == "bc\ndef\ngh"
    buffer.set_selection(selection)
    assert buffer.selected_text() == "bc\ndef\ngh"
    assert buffer.get_text_range(Range(Position(1, 1), Position(3, 1))) == "ef"


def test_version_moves_once_per_edit() -> None:
    buffer = make_buffer("abc")
    buffer.set_selection(Range(Position(0, 0), Position(2, 0)))

    buffer.insert_char("Z")
    buffer.move_left()

    assert buffer.version == 1
    view = buffer.snapshot()
    assert view.text == "Zc"
    assert view.cursor == Position(0, 0)


def test_mixed_operation_sequence_keeps_invariants() -> None:
    buffer = make_buffer("alpha\nbeta\n\ngamma")
    script = [
        lambda: buffer.move_down(),
        lambda: buffer.move_to_line_end(),
        lambda: buffer.delete_after(),
        lambda: buffer.delete_after(),
        lambda: buffer.insert_text("X\nY"),
        lambda: buffer.move_up(),
        lambda: buffer.delete_before(),
        lambda: buffer.insert_char("\n"),
        lambda: buffer.delete_range(Range(Position(0, 0), buffer.cursor)),
        lambda: buffer.move_right(),
        lambda: buffer.delete_before(),
        lambda: buffer.move_right(),
        lambda: buffer.insert_char("h"),
        lambda: buffer.insert_char("e"),
        lambda: buffer.insert_char("y"),
        lambda: buffer.insert_text("mid"),
        lambda: buffer.move_down(),
        lambda: buffer.insert_text("ab\ncd"),
        lambda: buffer.insert_char("!"),
    ]

    for step in script:
        step()
        assert_in_bounds(buffer)


@pytest.mark.parametrize("column", [0, 1, 3, 5, 6])
def test_insert_char_lands_after_inserted_character(column: int) -> None:
    buffer = make_buffer("abcdef", at=Position(column, 0))

    buffer.insert_char("x")

    assert buffer.lines == ("abcdef"[:column] + "x" + "abcdef"[column:],)
    assert buffer.cursor == Position(column + 1, 0)


def test_typing_a_word_keeps_cursor_at_end_of_word() -> None:
    buffer = make_buffer("")

    for char in "hey":
        buffer.insert_char(char)

    assert buffer.lines == ("hey",)
    assert buffer.cursor == Position(3, 0)
    assert_in_bounds(buffer)


def test_single_line_insert_text_mid_line() -> None:
    buffer = make_buffer("ab\ncdef", at=Position(2, 1))

    buffer.insert_text("XYZ")

    assert buffer.lines == ("ab", "cdXYZef")
    assert buffer.cursor == Position(5, 1)


def test_final_state_after_mixed_sequence() -> None:
    buffer = make_buffer("ab")
    buffer.move_to(Position(1, 0))

    buffer.insert_char("1")
    buffer.insert_char("2")
    buffer.insert_text("\n")
    buffer.insert_char("3")

    assert buffer.lines == ("a12", "3b")
    assert buffer.cursor == Position(1, 1)


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_line_rejects_out_of_range_index(index: int) -> None:
    buffer = make_buffer("ab\ncd")

    with pytest.raises(OutOfBoundsError):
        buffer.line(index)


def test_buffer_is_built_only_from_text() -> None:
    with pytest.raises(TypeError):
        TextBuffer("abc", state=object())  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        TextBuffer("abc", document=object())  # type: ignore[call-arg]
    with pytest.raises(InvalidArgumentError):
        TextBuffer(None)  # type: ignore[arg-type]
