"""Context windows for parse failures, with a caret under the failure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_CONTEXT_WINDOW: Final = 60

_ESCAPES: Final = {
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
}

# Printable ASCII range
_FIRST_PRINTABLE: Final = 0x20
_LAST_PRINTABLE: Final = 0x7E


def _render_byte(byte: int) -> str:
    if byte in _ESCAPES:
        return _ESCAPES[byte]
    if _FIRST_PRINTABLE <= byte <= _LAST_PRINTABLE:
        return chr(byte)
    return f"\\x{byte:02x}"


class ContextWindow:
    """Maps raw window positions to columns of the rendered window.

    Control bytes render wider than one column, so the caret under a
    failure byte has to be placed by rendered column rather than by raw
    byte index.
    """

    def __init__(self, window: bytes) -> None:
        """Render a window and record where each raw byte starts.

        Args:
            window: Source bytes surrounding the failure point
        """
        self.window: Final = window
        self.columns: list[int] = []
        self.text = ""

        self._build_columns()

    def _build_columns(self) -> None:
        """Render every byte, storing its starting column."""
        parts = []
        column = 0

        for byte in self.window:
            self.columns.append(column)
            rendered = _render_byte(byte)
            parts.append(rendered)
            column += len(rendered)

        # One past the end, for failures at end of stream
        self.columns.append(column)
        self.text = "".join(parts)

    def byte_to_column(self, index: int) -> int:
        """Convert a raw byte index to its rendered column.

        Args:
            index: Position inside the raw window

        Returns:
            Column of the rendered text where that byte starts
        """
        if index <= 0:
            return 0
        if index >= len(self.columns):
            return self.columns[-1]
        return self.columns[index]


def render_context(window: bytes, failure_index: int) -> str:
    """
    Renders a source window with a caret beneath the failure byte.

    Pure function of its inputs so callers can format errors however
    they report them.
    """
    mapped = ContextWindow(window)
    column = mapped.byte_to_column(failure_index)
    return f"{mapped.text}\n{' ' * column}^"


@dataclass(frozen=True)
class Diagnostic:
    """
    Snapshot of where a parse failed.

    `window` holds up to the configured number of source bytes, half
    before and half after `offset`; `window_start` is the absolute offset
    of its first byte.
    """

    offset: int
    lineno: int
    colno: int
    window: bytes = b""
    window_start: int = 0

    @property
    def failure_index(self) -> int:
        return self.offset - self.window_start

    def render(self, message: str) -> str:
        lines = [f"{message} at index {self.offset}"]
        if self.window:
            lines.append("context:")
            lines.append(render_context(self.window, self.failure_index))
        return "\n".join(lines)
