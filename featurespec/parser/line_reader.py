"""Sequential line cursor over a fully loaded document"""
from typing import Iterable, Tuple, Union

from featurespec.parser.errors import CursorExhaustedError
from featurespec.utils.helpers import to_lines


class LineReader:
    """Holds an immutable sequence of lines and a read position that only moves forward"""

    def __init__(self, source: Union[str, Iterable[str]] = ()):
        self._lines: Tuple[str, ...] = ()
        self._position = 0
        self.load(source)

    def load(self, source: Union[str, Iterable[str]]):
        """Replace the document and rewind to the first line"""
        self._lines = to_lines(source)
        self._position = 0

    @property
    def lines(self) -> Tuple[str, ...]:
        return self._lines

    def eof(self) -> bool:
        return self._position == len(self._lines)

    def position(self) -> int:
        """0-based index of the next unread line"""
        return self._position

    def peek(self) -> str:
        """Return the current line without advancing"""
        if self.eof():
            raise CursorExhaustedError(f"peek() past end of input (line {self._position})")
        return self._lines[self._position]

    def read_line(self) -> str:
        """Return the current line and advance by one"""
        line = self.peek()
        self._position += 1
        return line
