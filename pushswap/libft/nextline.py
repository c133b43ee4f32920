"""Reading a file descriptor one line at a time, with a buffer per descriptor."""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFFER_SIZE = 42


class LineReader:
    """Returns successive lines from file descriptors, keeping unread data per fd."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._buffers: Dict[int, bytes] = {}

    def get_next_line(self, fd: int) -> Optional[str]:
        """The next line of ``fd`` with its newline, or None at the end of input.

        A read error discards the data kept for ``fd`` and propagates.
        """
        if fd < 0:
            return None
        buffer = self._buffers.pop(fd, b"")
        while b"\n" not in buffer:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            buffer += chunk
        if not buffer:
            return None
        line, newline, rest = buffer.partition(b"\n")
        if rest:
            self._buffers[fd] = rest
        return (line + newline).decode("utf-8", errors="replace")

    def reset(self, fd: int) -> None:
        """Forget anything buffered for ``fd``."""
        self._buffers.pop(fd, None)