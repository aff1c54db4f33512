"""
Line source for the palette decoder
Presents a text or binary stream as a sequence of lines with push-back
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional, Union

from .constants import DEFAULT_ENCODING
from .exceptions import StreamReadError
from .logging_config import get_logger

logger = get_logger(__name__)


class LineSource:
    """
    Forward-only line reader over a stream.

    Lines are returned with their line ending removed. Lines handed to
    push_back() are returned again, most recently pushed first, before
    anything still pending in the stream.
    """

    def __init__(
        self,
        stream: Iterable[Union[str, bytes]],
        encoding: str = DEFAULT_ENCODING,
    ):
        self.encoding = encoding
        self._stream = stream
        self._lines: Optional[Iterator[Union[str, bytes]]] = None
        self._finished = False
        self._pushed: list[str] = []
        self.line_number = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    def next_line(self) -> Optional[str]:
        """
        Get the next line.

        Returns:
            The line without its line ending, or None once the stream is exhausted

        Raises:
            StreamReadError: If reading or decoding the stream fails
        """
        if self._pushed:
            self.line_number += 1
            return self._pushed.pop()

        if self._finished:
            return None

        try:
            if self._lines is None:
                self._lines = iter(self._stream)
            raw = next(self._lines)
            line = raw.decode(self.encoding) if isinstance(raw, bytes) else raw
        except StopIteration:
            self._finished = True
            return None
        except (OSError, ValueError) as e:
            # Covers decode errors and closed files; no further lines after a failure
            self._finished = True
            logger.debug(f"Stream failed after line {self.line_number}: {e}")
            raise StreamReadError(
                f"Failed to read line {self.line_number + 1}: {e}"
            ) from e

        self.line_number += 1
        return _strip_line_ending(line)

    def push_back(self, line: str) -> None:
        """Make line the next value returned by next_line()"""
        self._pushed.append(line)
        self.line_number -= 1
        logger.debug(f"Pushed back line {self.line_number + 1}: {line!r}")

    @property
    def exhausted(self) -> bool:
        return self._finished and not self._pushed


def _strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line
