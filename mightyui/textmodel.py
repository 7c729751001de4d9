"""The text storage and layout interface used by the text editing state machine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

NEWLINE = "\n"


@dataclass(frozen=True)
class Row:
    """Result of laying out one displayed row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


class TextModel(ABC):
    """A string being edited, together with the way it is laid out on screen."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of characters."""

    @abstractmethod
    def layout_row(self, start: int) -> Row:
        """Lay out the row that begins at character ``start``."""

    @abstractmethod
    def char_width(self, line_start: int, index: int) -> float:
        """Return the advance of character ``index`` of the row starting at ``line_start``."""

    @abstractmethod
    def char_at(self, index: int) -> str:
        """Return the character at ``index``."""

    @abstractmethod
    def delete_chars(self, index: int, count: int) -> None:
        """Remove ``count`` characters starting at ``index``."""

    @abstractmethod
    def insert_chars(self, index: int, chars: Iterable[str]) -> bool:
        """Insert characters at ``index``; return whether the insertion happened."""


class MonospaceText(TextModel):
    """Text laid out with fixed-width characters, one row per line."""

    def __init__(self, text: str = "", char_width: float = 1.0, line_height: float = 1.0) -> None:
        if char_width <= 0:
            raise ValueError("char_width must be positive")
        if line_height <= 0:
            raise ValueError("line_height must be positive")
        self._chars: list[str] = list(text)
        self._char_width = char_width
        self._line_height = line_height

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def layout_row(self, start: int) -> Row:
        if start < 0:
            raise IndexError(f"row start {start} is negative")
        n = len(self._chars)
        if start >= n:
            return Row(0.0, 0.0, self._line_height, 0.0, self._line_height, 0)
        try:
            end = self._chars.index(NEWLINE, start) + 1
        except ValueError:
            end = n
        num_chars = end - start
        visible = num_chars - 1 if self._chars[end - 1] == NEWLINE else num_chars
        return Row(
            x0=0.0,
            x1=visible * self._char_width,
            baseline_y_delta=self._line_height,
            ymin=0.0,
            ymax=self._line_height,
            num_chars=num_chars,
        )

    def char_width(self, line_start: int, index: int) -> float:
        return 0.0 if self.char_at(line_start + index) == NEWLINE else self._char_width

    def char_at(self, index: int) -> str:
        if not 0 <= index < len(self._chars):
            raise IndexError(f"character index {index} out of range")
        return self._chars[index]

    def delete_chars(self, index: int, count: int) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        if index < 0 or index + count > len(self._chars):
            raise IndexError(f"cannot delete {count} characters at {index}")
        del self._chars[index:index + count]

    def insert_chars(self, index: int, chars: Iterable[str]) -> bool:
        if not 0 <= index <= len(self._chars):
            raise IndexError(f"insertion index {index} out of range")
        self._chars[index:index] = list(chars)
        return True