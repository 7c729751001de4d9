"""Cursor, selection and keyboard handling for editing a text model.

The state machine turns mouse and keyboard input into insertions and
deletions on a :class:`~mightyui.textmodel.TextModel`. It also keeps the
cursor, the selection and the undo history up to date.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from mightyui.textmodel import NEWLINE, TextModel
from mightyui.undo import UndoState


class Key(IntEnum):
    """Editing keys. ``SHIFT`` is a bit flag that may be or'd into the others."""

    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    PGUP = 5
    PGDOWN = 6
    LINESTART = 7
    LINEEND = 8
    TEXTSTART = 9
    TEXTEND = 10
    DELETE = 11
    BACKSPACE = 12
    UNDO = 13
    REDO = 14
    INSERT = 15
    WORDLEFT = 16
    WORDRIGHT = 17
    SHIFT = 1 << 16


@dataclass
class FindState:
    """Position of a character and information about its row."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


def locate_coord(text: TextModel, x: float, y: float) -> int:
    """Return the character index nearest to the display position (x, y)."""
    n = len(text)
    base_y = 0.0
    i = 0
    row = None

    while i < n:
        row = text.layout_row(i)
        if row.num_chars <= 0:
            return n
        if i == 0 and y < base_y + row.ymin:
            return 0
        if y < base_y + row.ymax:
            break
        i += row.num_chars
        base_y += row.baseline_y_delta

    if i >= n or row is None:
        return n

    if x < row.x0:
        return i

    if x < row.x1:
        prev_x = row.x0
        for k in range(row.num_chars):
            w = text.char_width(i, k)
            if x < prev_x + w:
                return k + i if x < prev_x + w / 2 else k + i + 1
            prev_x += w

    last = i + row.num_chars - 1
    if text.char_at(last) == NEWLINE:
        return last
    return i + row.num_chars


def find_charpos(text: TextModel, n: int, single_line: bool) -> FindState:
    """Find the position of character ``n`` and the rows around it."""
    find = FindState()
    z = len(text)
    prev_start = 0
    i = 0

    if n == z:
        if single_line:
            row = text.layout_row(0)
            find.y = 0.0
            find.first_char = 0
            find.length = z
            find.height = row.ymax - row.ymin
            find.x = row.x1
        else:
            find.y = 0.0
            find.x = 0.0
            find.height = 1.0
            while i < z:
                row = text.layout_row(i)
                prev_start = i
                i += row.num_chars
            row = text.layout_row(i)
            find.x = row.x1
            find.first_char = i
            find.length = 0
            find.prev_first = max(0, prev_start - 1)
        return find

    find.y = 0.0
    while True:
        row = text.layout_row(i)
        if n < i + row.num_chars or row.num_chars <= 0:
            break
        prev_start = i
        i += row.num_chars
        find.y += row.baseline_y_delta

    first = i
    find.first_char = first
    find.length = row.num_chars
    find.height = row.ymax - row.ymin
    find.prev_first = prev_start

    find.x = row.x0
    for k in range(n - first):
        find.x += text.char_width(first, k)
    return find


def is_word_boundary(text: TextModel, idx: int) -> bool:
    """Return whether a word starts at ``idx``."""
    if idx <= 0:
        return True
    return text.char_at(idx - 1).isspace() and not text.char_at(idx).isspace()


def move_word_left(text: TextModel, c: int) -> int:
    """Return the start of the word before position ``c``."""
    c -= 1
    while c >= 0 and not is_word_boundary(text, c):
        c -= 1
    return max(c, 0)


def move_word_right(text: TextModel, c: int) -> int:
    """Return the start of the word after position ``c``."""
    length = len(text)
    c += 1
    while c < length and not is_word_boundary(text, c):
        c += 1
    return min(c, length)


class TextEditState:
    """Cursor, selection, insert mode and undo history of one text field."""

    def __init__(self, single_line: bool = False) -> None:
        self.undostate = UndoState()
        self.clear(single_line)

    def clear(self, single_line: bool = False) -> None:
        """Reset to the default state."""
        self.undostate.reset()
        self.select_start = 0
        self.select_end = 0
        self.cursor = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.single_line = bool(single_line)
        self.insert_mode = False
        self.row_count_per_page = 0

    def has_selection(self) -> bool:
        return self.select_start != self.select_end

    def clamp(self, text: TextModel) -> None:
        """Make the cursor and selection valid for the current text."""
        n = len(text)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        self.cursor = min(self.cursor, n)

    # ---- mouse -------------------------------------------------------

    def _pointer_y(self, text: TextModel, y: float) -> float:
        return text.layout_row(0).ymin if self.single_line else y

    def click(self, text: TextModel, x: float, y: float) -> None:
        """Move the cursor to the clicked position and clear the selection."""
        y = self._pointer_y(text, y)
        self.cursor = locate_coord(text, x, y)
        self.select_start = self.cursor
        self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, text: TextModel, x: float, y: float) -> None:
        """Move the cursor and the selection end to the dragged position."""
        y = self._pointer_y(text, y)
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        p = locate_coord(text, x, y)
        self.cursor = self.select_end = p

    # ---- editing helpers ---------------------------------------------

    def _delete(self, text: TextModel, where: int, length: int) -> None:
        self.undostate.record_delete(text, where, length)
        text.delete_chars(where, length)
        self.has_preferred_x = False

    def _delete_selection(self, text: TextModel) -> None:
        self.clamp(text)
        if not self.has_selection():
            return
        if self.select_start < self.select_end:
            self._delete(text, self.select_start, self.select_end - self.select_start)
            self.select_end = self.cursor = self.select_start
        else:
            self._delete(text, self.select_end, self.select_start - self.select_end)
            self.select_start = self.cursor = self.select_end
        self.has_preferred_x = False

    def _sort_selection(self) -> None:
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def _move_to_first(self) -> None:
        if self.has_selection():
            self._sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def _move_to_last(self, text: TextModel) -> None:
        if self.has_selection():
            self._sort_selection()
            self.clamp(text)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def _prep_selection_at_cursor(self) -> None:
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    # ---- public editing ----------------------------------------------

    def cut(self, text: TextModel) -> bool:
        """Delete the selection; return whether there was one."""
        if self.has_selection():
            self._delete_selection(text)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, text: TextModel, chars: Iterable[str]) -> bool:
        """Replace the selection, or insert at the cursor, with ``chars``."""
        items = list(chars)
        self.clamp(text)
        self._delete_selection(text)
        if text.insert_chars(self.cursor, items):
            self.undostate.record_insert(self.cursor, len(items))
            self.cursor += len(items)
            self.has_preferred_x = False
            return True
        return False

    def _type_char(self, text: TextModel, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        if ch == NEWLINE and self.single_line:
            return
        if self.insert_mode and not self.has_selection() and self.cursor < len(text):
            self.undostate.record_replace(text, self.cursor, 1, 1)
            text.delete_chars(self.cursor, 1)
            if text.insert_chars(self.cursor, [ch]):
                self.cursor += 1
                self.has_preferred_x = False
        else:
            self._delete_selection(text)
            if text.insert_chars(self.cursor, [ch]):
                self.undostate.record_insert(self.cursor, 1)
                self.cursor += 1
                self.has_preferred_x = False

    def key(self, text: TextModel, key: int | str) -> None:
        """Process one keyboard input: a :class:`Key` (optionally with SHIFT) or a character."""
        if isinstance(key, str):
            self._type_char(text, key)
            return

        shift = bool(key & Key.SHIFT)
        base = key & ~Key.SHIFT

        if base == Key.UNDO and not shift:
            cursor = self.undostate.undo(text)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif base == Key.REDO and not shift:
            cursor = self.undostate.redo(text)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif base == Key.INSERT and not shift:
            self.insert_mode = not self.insert_mode
        elif base == Key.LEFT:
            self._left(text, shift)
        elif base == Key.RIGHT:
            self._right(text, shift)
        elif base == Key.WORDLEFT:
            self._word(text, shift, move_word_left, forward=False)
        elif base == Key.WORDRIGHT:
            self._word(text, shift, move_word_right, forward=True)
        elif base in (Key.DOWN, Key.PGDOWN):
            self._vertical_down(text, shift, base == Key.PGDOWN)
        elif base in (Key.UP, Key.PGUP):
            self._vertical_up(text, shift, base == Key.PGUP)
        elif base == Key.DELETE:
            if self.has_selection():
                self._delete_selection(text)
            elif self.cursor < len(text):
                self._delete(text, self.cursor, 1)
            self.has_preferred_x = False
        elif base == Key.BACKSPACE:
            if self.has_selection():
                self._delete_selection(text)
            else:
                self.clamp(text)
                if self.cursor > 0:
                    self._delete(text, self.cursor - 1, 1)
                    self.cursor -= 1
            self.has_preferred_x = False
        elif base == Key.TEXTSTART:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = 0
            else:
                self.cursor = self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.TEXTEND:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = len(text)
            else:
                self.cursor = len(text)
                self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.LINESTART:
            self._line_start(text, shift)
        elif base == Key.LINEEND:
            self._line_end(text, shift)

    # ---- key handlers ------------------------------------------------

    def _left(self, text: TextModel, shift: bool) -> None:
        if shift:
            self.clamp(text)
            self._prep_selection_at_cursor()
            if self.select_end > 0:
                self.select_end -= 1
            self.cursor = self.select_end
        elif self.has_selection():
            self._move_to_first()
        elif self.cursor > 0:
            self.cursor -= 1
        self.has_preferred_x = False

    def _right(self, text: TextModel, shift: bool) -> None:
        if shift:
            self._prep_selection_at_cursor()
            self.select_end += 1
            self.clamp(text)
            self.cursor = self.select_end
        else:
            if self.has_selection():
                self._move_to_last(text)
            else:
                self.cursor += 1
            self.clamp(text)
        self.has_preferred_x = False

    def _word(self, text: TextModel, shift: bool, move, forward: bool) -> None:
        if shift:
            if not self.has_selection():
                self._prep_selection_at_cursor()
            self.cursor = move(text, self.cursor)
            self.select_end = self.cursor
            self.clamp(text)
        elif self.has_selection():
            if forward:
                self._move_to_last(text)
            else:
                self._move_to_first()
        else:
            self.cursor = move(text, self.cursor)
            self.clamp(text)

    def _seek_in_row(self, text: TextModel, row_start: int, goal_x: float) -> int:
        row = text.layout_row(row_start)
        self.cursor = row_start
        x = row.x0
        for i in range(row.num_chars):
            x += text.char_width(row_start, i)
            if x > goal_x or text.char_at(row_start + i) == NEWLINE:
                break
            self.cursor += 1
        return row.num_chars

    def _vertical_down(self, text: TextModel, shift: bool, page: bool) -> None:
        if not page and self.single_line:
            self.key(text, Key.RIGHT | (Key.SHIFT if shift else 0))
            return
        row_count = self.row_count_per_page if page else 1

        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_last(text)

        self.clamp(text)
        find = find_charpos(text, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if find.length == 0:
                break
            start = find.first_char + find.length
            num_chars = self._seek_in_row(text, start, goal_x)
            self.clamp(text)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor
            find.first_char = start
            find.length = num_chars

    def _vertical_up(self, text: TextModel, shift: bool, page: bool) -> None:
        if not page and self.single_line:
            self.key(text, Key.LEFT | (Key.SHIFT if shift else 0))
            return
        row_count = self.row_count_per_page if page else 1

        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_first()

        self.clamp(text)
        find = find_charpos(text, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if find.prev_first == find.first_char:
                break
            self._seek_in_row(text, find.prev_first, goal_x)
            self.clamp(text)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor

            prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
            while prev_scan > 0 and text.char_at(prev_scan - 1) != NEWLINE:
                prev_scan -= 1
            find.first_char = find.prev_first
            find.prev_first = prev_scan

    def _line_start(self, text: TextModel, shift: bool) -> None:
        self.clamp(text)
        if shift:
            self._prep_selection_at_cursor()
        else:
            self._move_to_first()
        if self.single_line:
            self.cursor = 0
        else:
            while self.cursor > 0 and text.char_at(self.cursor - 1) != NEWLINE:
                self.cursor -= 1
        if shift:
            self.select_end = self.cursor
        self.has_preferred_x = False

    def _line_end(self, text: TextModel, shift: bool) -> None:
        n = len(text)
        self.clamp(text)
        if shift:
            self._prep_selection_at_cursor()
        else:
            self._move_to_first()
        if self.single_line:
            self.cursor = n
        else:
            while self.cursor < n and text.char_at(self.cursor) != NEWLINE:
                self.cursor += 1
        if shift:
            self.select_end = self.cursor
        self.has_preferred_x = False