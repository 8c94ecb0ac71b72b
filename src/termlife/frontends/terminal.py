"""Text sinks that receive rendered generations."""

import sys
from typing import List, Optional, Protocol, TextIO

CLEAR_SCREEN = "\033[H\033[2J"


class TextSink(Protocol):
    """Anything that can clear itself and accept a rendered frame."""

    def clear_screen(self) -> None:
        ...

    def write(self, text: str) -> None:
        ...


class TerminalUI:
    """Writes frames to a terminal stream using ANSI escape codes."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def clear_screen(self) -> None:
        self.stream.write(CLEAR_SCREEN)

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class BufferUI:
    """Collects frames in memory instead of drawing them."""

    def __init__(self) -> None:
        self.frames: List[str] = []
        self.clears = 0

    def clear_screen(self) -> None:
        self.clears += 1

    def write(self, text: str) -> None:
        self.frames.append(text)
