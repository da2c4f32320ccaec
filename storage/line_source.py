from __future__ import annotations

import io
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Deque, Iterable, Iterator, Optional, TextIO


@dataclass(frozen=True, slots=True)
class SourceLine:
    number: int
    text: str


class LineSource:
    """Pull-based reader over raw text lines with lookahead."""

    def __init__(
        self,
        lines: Iterable[str],
        name: str = "<memory>",
        handle: Optional[TextIO] = None,
    ) -> None:
        self.name = name
        self._lines: Iterator[str] = iter(lines)
        self._handle = handle
        self._lookahead: Deque[SourceLine] = deque()
        self._line_number = 0
        self._closed = False

    @classmethod
    def from_text(cls, text: str, name: str = "<memory>") -> "LineSource":
        return cls(io.StringIO(text), name=name)

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> "LineSource":
        # Undecodable bytes become U+FFFD so the line fails validation instead of the read.
        handle = path.open("r", encoding=encoding, errors="replace", newline=None)
        return cls(handle, name=str(path), handle=handle)

    def next_line(self) -> Optional[SourceLine]:
        """Return the next physical line, or ``None`` once the input is exhausted."""

        if self._lookahead:
            return self._lookahead.popleft()
        return self._read()

    def has_more(self) -> bool:
        if not self._lookahead:
            line = self._read()
            if line is None:
                return False
            self._lookahead.append(line)
        return True

    def has_more_content(self) -> bool:
        """Whether any remaining line holds something other than whitespace."""

        if any(line.text.strip() for line in self._lookahead):
            return True
        while True:
            line = self._read()
            if line is None:
                return False
            self._lookahead.append(line)
            if line.text.strip():
                return True

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._lookahead.clear()
        if self._handle is not None:
            self._handle.close()

    def _read(self) -> Optional[SourceLine]:
        if self._closed:
            return None
        raw = next(self._lines, None)
        if raw is None:
            return None
        self._line_number += 1
        return SourceLine(number=self._line_number, text=raw.rstrip("\r\n"))
