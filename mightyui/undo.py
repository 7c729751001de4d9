"""Bounded undo and redo history for a text model.

Records and their characters share fixed-size stores. Undo records grow from
the front and redo records from the back. When space runs out, the oldest
entries are dropped.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from mightyui.textmodel import TextModel

DEFAULT_STATE_COUNT = 99
DEFAULT_CHAR_COUNT = 999


@dataclass(frozen=True)
class UndoRecord:
    """One reversible edit.

    Replaying the record deletes ``delete_length`` characters at ``where``.
    It then inserts ``insert_length`` stored characters that start at
    ``char_storage``.
    """

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    char_storage: int = -1


class UndoState:
    """Undo and redo history with a fixed number of records and characters."""

    def __init__(self, state_count: int = DEFAULT_STATE_COUNT,
                 char_count: int = DEFAULT_CHAR_COUNT) -> None:
        if state_count <= 0:
            raise ValueError("state_count must be positive")
        if char_count <= 0:
            raise ValueError("char_count must be positive")
        self.state_count = state_count
        self.char_count = char_count
        self.records: list[UndoRecord] = [UndoRecord()] * state_count
        self.chars: list[str] = [""] * char_count
        self.reset()

    def reset(self) -> None:
        """Forget all undo and redo history."""
        self.undo_point = 0
        self.undo_char_point = 0
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def flush_redo(self) -> None:
        """Forget all redo history."""
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def discard_undo(self) -> None:
        """Drop the oldest undo record, if there is one."""
        if self.undo_point <= 0:
            return
        oldest = self.records[0]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.undo_char_point -= n
            self.chars[0:self.undo_char_point] = self.chars[n:n + self.undo_char_point]
            self.records[:self.undo_point] = [
                replace(rec, char_storage=rec.char_storage - n) if rec.char_storage >= 0 else rec
                for rec in self.records[:self.undo_point]
            ]
        self.undo_point -= 1
        self.records[0:self.undo_point] = self.records[1:1 + self.undo_point]

    def discard_redo(self) -> None:
        """Drop the oldest redo record, if there is one."""
        k = self.state_count - 1
        if self.redo_point > k:
            return
        oldest = self.records[k]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.redo_char_point += n
            start = self.redo_char_point
            self.chars[start:self.char_count] = self.chars[start - n:self.char_count - n]
            self.records[self.redo_point:k] = [
                replace(rec, char_storage=rec.char_storage + n) if rec.char_storage >= 0 else rec
                for rec in self.records[self.redo_point:k]
            ]
        self.records[self.redo_point + 1:self.state_count] = \
            self.records[self.redo_point:self.state_count - 1]
        self.redo_point += 1

    def _create_record_slot(self, numchars: int) -> int | None:
        self.flush_redo()
        if self.undo_point == self.state_count:
            self.discard_undo()
        if numchars > self.char_count:
            self.undo_point = 0
            self.undo_char_point = 0
            return None
        while self.undo_char_point + numchars > self.char_count:
            self.discard_undo()
        slot = self.undo_point
        self.undo_point += 1
        return slot

    def create_undo(self, pos: int, insert_len: int, delete_len: int,
                    saved: Iterable[str] = ()) -> UndoRecord | None:
        """Push an undo record and clear the redo history.

        ``saved`` holds the ``insert_len`` characters that undoing puts back.
        If they cannot fit in the store at all, the history is cleared and
        None is returned.
        """
        saved_chars = list(saved)
        if len(saved_chars) != insert_len:
            raise ValueError(
                f"expected {insert_len} saved characters, got {len(saved_chars)}")
        slot = self._create_record_slot(insert_len)
        if slot is None:
            return None
        if insert_len == 0:
            record = UndoRecord(pos, 0, delete_len, -1)
        else:
            storage = self.undo_char_point
            self.undo_char_point += insert_len
            self.chars[storage:storage + insert_len] = saved_chars
            record = UndoRecord(pos, insert_len, delete_len, storage)
        self.records[slot] = record
        return record

    def record_insert(self, where: int, length: int) -> UndoRecord | None:
        """Record that ``length`` characters were inserted at ``where``."""
        return self.create_undo(where, 0, length)

    def record_delete(self, text: TextModel, where: int, length: int) -> UndoRecord | None:
        """Record a deletion that is about to happen. Call this before deleting."""
        saved = [text.char_at(where + i) for i in range(length)]
        return self.create_undo(where, length, 0, saved)

    def record_replace(self, text: TextModel, where: int, old_length: int,
                       new_length: int) -> UndoRecord | None:
        """Record that ``old_length`` characters will be replaced by ``new_length`` others."""
        saved = [text.char_at(where + i) for i in range(old_length)]
        return self.create_undo(where, old_length, new_length, saved)

    def undo(self, text: TextModel) -> int | None:
        """Undo the latest edit on ``text``.

        Returns the new cursor position, or None if there is nothing to undo.
        """
        if self.undo_point == 0:
            return None
        u = self.records[self.undo_point - 1]
        redo = UndoRecord(u.where, u.delete_length, u.insert_length, -1)

        if u.delete_length:
            if self.undo_char_point + u.delete_length >= self.char_count:
                redo = replace(redo, insert_length=0)
            else:
                while self.undo_char_point + u.delete_length > self.redo_char_point:
                    if self.redo_point == self.state_count:
                        return None
                    self.discard_redo()
                storage = self.redo_char_point - u.delete_length
                self.redo_char_point = storage
                self.chars[storage:storage + u.delete_length] = [
                    text.char_at(u.where + i) for i in range(u.delete_length)
                ]
                redo = replace(redo, char_storage=storage)
            text.delete_chars(u.where, u.delete_length)

        if u.insert_length:
            start = u.char_storage
            text.insert_chars(u.where, self.chars[start:start + u.insert_length])
            self.undo_char_point -= u.insert_length

        self.records[self.redo_point - 1] = redo
        self.undo_point -= 1
        self.redo_point -= 1
        return u.where + u.insert_length

    def redo(self, text: TextModel) -> int | None:
        """Redo the latest undone edit on ``text``.

        Returns the new cursor position, or None if there is nothing to redo.
        """
        if self.redo_point == self.state_count:
            return None
        r = self.records[self.redo_point]
        u = UndoRecord(r.where, r.delete_length, r.insert_length, -1)

        if r.delete_length:
            if self.undo_char_point + u.insert_length > self.redo_char_point:
                u = replace(u, insert_length=0, delete_length=0)
            else:
                storage = self.undo_char_point
                self.undo_char_point += u.insert_length
                self.chars[storage:storage + u.insert_length] = [
                    text.char_at(u.where + i) for i in range(u.insert_length)
                ]
                u = replace(u, char_storage=storage)
            text.delete_chars(r.where, r.delete_length)

        if r.insert_length:
            start = r.char_storage
            text.insert_chars(r.where, self.chars[start:start + r.insert_length])
            self.redo_char_point += r.insert_length

        self.records[self.undo_point] = u
        self.undo_point += 1
        self.redo_point += 1
        return r.where + r.insert_length