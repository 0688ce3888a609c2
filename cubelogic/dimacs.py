"""Reading the solution printed by a SAT solver in DIMACS style.

Lines starting with ``c`` are comments, a line ``s SATISFIABLE`` gives the
status and lines starting with ``v`` list literals, ended by ``0``.  The
result is a list indexed by variable number minus one: ``True`` or
``False`` for an assigned variable and ``None`` for one never mentioned.
"""

from __future__ import annotations

from typing import IO, Optional, Union

__all__ = [
    "DimacsParseError",
    "NotSatisfiableError",
    "parse_solution",
    "parse_solution_stream",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


class DimacsParseError(ValueError):
    """Raised when a number was expected but another character was found."""

    def __init__(self, char: str) -> None:
        shown = char if char else "EOF"
        super().__init__(f"PARSE ERROR! Unexpected char: {shown}")
        self.char = char


class NotSatisfiableError(Exception):
    """Raised when the status line reports anything but SATISFIABLE."""

    def __init__(self, status: str) -> None:
        super().__init__("not satisfiable!!")
        self.status = status


class _Reader:
    """A cursor over text; the empty string stands for the end of input."""

    def __init__(self, text: str) -> None:
        # A NUL character ends the input, as it ends every line scan.
        end = text.find("\0")
        self._text = text if end < 0 else text[:end]
        self._pos = 0

    @property
    def char(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def advance(self) -> None:
        self._pos += 1

    def skip_whitespace(self) -> None:
        while self.char and self.char in _WHITESPACE:
            self.advance()

    def skip_line(self) -> None:
        while self.char:
            if self.char == "\n":
                self.advance()
                return
            self.advance()

    def parse_int(self) -> int:
        self.skip_whitespace()
        negative = False
        if self.char == "-":
            negative = True
            self.advance()
        elif self.char == "+":
            self.advance()
        if not self.char or self.char not in _DIGITS:
            raise DimacsParseError(self.char)
        value = 0
        while self.char and self.char in _DIGITS:
            value = value * 10 + int(self.char)
            self.advance()
        return -value if negative else value

    def parse_word(self) -> str:
        self.skip_whitespace()
        start = self._pos
        while self.char and self.char not in (" ", "\n"):
            self.advance()
        return self._text[start : self._pos]


def _read_literals(reader: _Reader, solved: list[Optional[bool]]) -> None:
    while True:
        literal = reader.parse_int()
        if literal == 0:
            return
        var = abs(literal) - 1
        if len(solved) < var + 1:
            solved.extend([None] * (var + 1 - len(solved)))
        solved[var] = literal > 0


def parse_solution(text: str) -> list[Optional[bool]]:
    """Parse solver output and return the value of each variable."""
    reader = _Reader(text)
    solved: list[Optional[bool]] = []
    while True:
        reader.skip_whitespace()
        char = reader.char
        if not char:
            return solved
        if char == "c":
            reader.advance()
            reader.skip_line()
        elif char == "v":
            reader.advance()
            _read_literals(reader, solved)
            reader.skip_line()
        elif char == "s":
            reader.advance()
            status = reader.parse_word()
            if status != "SATISFIABLE":
                raise NotSatisfiableError(status)
        else:
            reader.skip_line()


def parse_solution_stream(stream: IO[Union[str, bytes]]) -> list[Optional[bool]]:
    """Read solver output from a text or binary stream and parse it."""
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("latin-1")
    return parse_solution(data)