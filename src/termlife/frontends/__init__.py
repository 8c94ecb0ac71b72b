"""Frontend interfaces for the Game of Life."""

from .terminal import BufferUI, TerminalUI, TextSink

__all__ = ["BufferUI", "TerminalUI", "TextSink"]
