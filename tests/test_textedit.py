import pytest

from mightyui.textedit import (
    Key,
    TextEditState,
    find_charpos,
    is_word_boundary,
    locate_coord,
    move_word_left,
    move_word_right,
)
from mightyui.textmodel import MonospaceText


def type_text(state, text, chars):
    for ch in chars:
        state.key(text, ch)


def test_typing_builds_string_and_moves_cursor():
    text = MonospaceText()
    state = TextEditState()
    type_text(state, text, "hello")
    assert str(text) == "hello"
    assert state.cursor == len("hello")


def test_backspace_undo_redo_round_trip():
    text = MonospaceText()
    state = TextEditState()
    type_text(state, text, "abc")
    state.key(text, Key.BACKSPACE)
    assert str(text) == "abc"[:-1]
    state.key(text, Key.UNDO)
    assert str(text) == "abc"
    assert state.cursor == len("abc")
    state.key(text, Key.REDO)
    assert str(text) == "abc"[:-1]


def test_undo_all_typing_returns_to_empty():
    text = MonospaceText()
    state = TextEditState()
    type_text(state, text, "xyz")
    for _ in "xyz":
        state.key(text, Key.UNDO)
    assert str(text) == ""
    for _ in "xyz":
        state.key(text, Key.REDO)
    assert str(text) == "xyz"


def test_left_with_selection_collapses_to_start():
    s = "abcdef"
    text = MonospaceText(s)
    state = TextEditState()
    state.cursor = len(s)
    state.key(text, Key.LEFT | Key.SHIFT)
    state.key(text, Key.LEFT | Key.SHIFT)
    start = state.select_end
    state.key(text, Key.LEFT)
    assert state.cursor == start
    assert not state.has_selection()


def test_single_line_rejects_newline():
    text = MonospaceText("ab")
    state = TextEditState(single_line=True)
    state.cursor = len(text)
    state.key(text, "\n")
    assert str(text) == "ab"


def test_insert_mode_overwrites_and_undo_restores():
    s = "abc"
    text = MonospaceText(s)
    state = TextEditState()
    state.key(text, Key.INSERT)
    assert state.insert_mode
    state.key(text, "x")
    assert str(text) == "x" + s[1:]
    assert state.cursor == 1
    state.key(text, Key.UNDO)
    assert str(text) == s


def test_line_start_and_end_multiline():
    s = "ab\ncd"
    text = MonospaceText(s)
    state = TextEditState()
    state.cursor = len(s)
    state.key(text, Key.LINESTART)
    assert state.cursor == s.index("\n") + 1
    state.key(text, Key.LINEEND)
    assert state.cursor == len(s)


def test_shift_line_start_selects_line():
    s = "ab\ncd"
    text = MonospaceText(s)
    state = TextEditState()
    state.cursor = len(s)
    state.key(text, Key.LINESTART | Key.SHIFT)
    assert (state.select_start, state.select_end) == (len(s), s.index("c"))


def test_single_line_home_end():
    s = "hello world"
    text = MonospaceText(s)
    state = TextEditState(single_line=True)
    state.key(text, Key.LINEEND)
    assert state.cursor == len(s)
    state.key(text, Key.LINESTART)
    assert state.cursor == 0


def test_text_start_and_end():
    s = "one\ntwo"
    text = MonospaceText(s)
    state = TextEditState()
    state.key(text, Key.TEXTEND)
    assert state.cursor == len(s)
    assert not state.has_selection()
    state.key(text, Key.TEXTSTART | Key.SHIFT)
    assert (state.select_start, state.select_end) == (len(s), 0)


def test_word_movement_helpers():
    s = "foo bar baz"
    text = MonospaceText(s)
    assert move_word_right(text, 0) == s.index("bar")
    assert move_word_left(text, len(s)) == s.index("baz")
    assert move_word_left(text, 0) == 0
    assert move_word_right(text, len(s)) == len(s)
    assert is_word_boundary(text, 0) is True
    assert is_word_boundary(text, s.index("bar")) is True
    assert is_word_boundary(text, s.index("bar") + 1) is False


def test_word_keys_move_cursor():
    s = "foo bar baz"
    text = MonospaceText(s)
    state = TextEditState()
    state.key(text, Key.WORDRIGHT)
    assert state.cursor == s.index("bar")
    state.key(text, Key.WORDRIGHT | Key.SHIFT)
    assert state.select_end == s.index("baz")
    assert state.select_start == s.index("bar")


def test_click_locates_character():
    s = "abc\ndef"
    text = MonospaceText(s)
    state = TextEditState()
    state.click(text, 1.2, 0.5)
    assert state.cursor == s.index("b")
    assert not state.has_selection()


def test_down_and_up_keep_column():
    s = "abc\ndef"
    text = MonospaceText(s)
    state = TextEditState()
    state.click(text, 1.2, 0.5)
    state.key(text, Key.DOWN)
    assert state.cursor == s.index("e")
    state.key(text, Key.UP)
    assert state.cursor == s.index("b")


def test_page_down_moves_several_rows():
    s = "a\nb\nc\nd"
    text = MonospaceText(s)
    state = TextEditState()
    state.row_count_per_page = 2
    state.key(text, Key.PGDOWN)
    assert state.cursor == s.index("c")


def test_single_line_up_acts_as_left():
    s = "abcd"
    text = MonospaceText(s)
    state = TextEditState(single_line=True)
    state.cursor = len(s)
    state.key(text, Key.UP)
    assert state.cursor == len(s) - 1
    state.key(text, Key.DOWN)
    assert state.cursor == len(s)


def test_locate_coord_edges():
    s = "abc\ndef"
    text = MonospaceText(s)
    assert locate_coord(text, 100.0, 100.0) == len(s)
    assert locate_coord(text, -5.0, 1.5) == s.index("d")
    assert locate_coord(text, 100.0, 0.5) == s.index("\n")
    assert locate_coord(MonospaceText(), 3.0, 3.0) == 0


def test_find_charpos_at_end_of_multiline_text():
    s = "ab\ncd"
    text = MonospaceText(s)
    find = find_charpos(text, len(s), False)
    assert find.first_char == len(s)
    assert find.length == 0


def test_find_charpos_inside_row():
    s = "ab\ncd"
    text = MonospaceText(s, char_width=2.0)
    find = find_charpos(text, s.index("d"), False)
    assert find.first_char == s.index("c")
    assert find.prev_first == 0
    assert find.x == 2.0


def test_drag_extends_selection():
    s = "hello"
    text = MonospaceText(s)
    state = TextEditState()
    state.click(text, 0.0, 0.5)
    state.drag(text, 100.0, 0.5)
    assert (state.select_start, state.select_end) == (0, len(s))
    assert state.cursor == len(s)


def test_cut_and_paste():
    s = "hello"
    text = MonospaceText(s)
    state = TextEditState()
    assert state.cut(text) is False
    state.click(text, 0.0, 0.5)
    state.drag(text, 100.0, 0.5)
    assert state.paste(text, "bye") is True
    assert str(text) == "bye"
    assert state.cursor == len("bye")
    state.key(text, Key.UNDO)
    state.key(text, Key.UNDO)
    assert str(text) == s


def test_cut_removes_selection():
    s = "hello"
    text = MonospaceText(s)
    state = TextEditState()
    state.key(text, Key.TEXTEND | Key.SHIFT)
    assert state.cut(text) is True
    assert str(text) == ""
    assert state.cursor == 0


def test_delete_key():
    s = "abc"
    text = MonospaceText(s)
    state = TextEditState()
    state.key(text, Key.DELETE)
    assert str(text) == s[1:]
    state.cursor = len(text)
    state.key(text, Key.DELETE)
    assert str(text) == s[1:]


def test_clamp_after_external_change():
    text = MonospaceText("abcdef")
    state = TextEditState()
    state.cursor = 6
    state.select_start, state.select_end = 4, 6
    text.delete_chars(2, 4)
    state.clamp(text)
    assert state.cursor == len(text)
    assert state.select_start == state.select_end == len(text)


def test_clear_resets_state():
    text = MonospaceText()
    state = TextEditState()
    type_text(state, text, "ab")
    state.clear(single_line=True)
    assert state.cursor == 0
    assert state.single_line is True
    state.key(text, Key.UNDO)
    assert str(text) == "ab"


def test_multi_character_key_rejected():
    state = TextEditState()
    with pytest.raises(ValueError):
        state.key(MonospaceText(), "ab")