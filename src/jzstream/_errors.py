"""
Exception hierarchy for parse failures.

Every failure carries the byte offset, line and column at which parsing
stopped, plus an optional diagnostic window of the surrounding source.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._diagnostics import Diagnostic


class ErrorKind(Enum):
    """
    Failure classes, each mapped to a distinct process exit status.
    """

    UNEXPECTED_EOF = 200
    UNEXPECTED_CHAR = 201
    DUPLICATE_KEY = 202
    ALLOCATION_FAILURE = 203
    NESTING_TOO_DEEP = 204

    @property
    def exit_status(self) -> int:
        return self.value


class ParseError(Exception):
    """
    Base class for every failure raised while building a value tree.

    Holds the failure position and the captured context so callers can
    format their own report; no partial tree ever accompanies it.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED_CHAR

    def __init__(
        self,
        msg: str,
        pos: int = 0,
        lineno: int = 1,
        colno: int | None = None,
        diagnostic: Diagnostic | None = None,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno if colno is not None else pos + 1
        self.diagnostic = diagnostic

        super().__init__(
            f"{msg} at line {self.lineno}, column {self.colno} "
            f"(char {self.pos})"
        )

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (
            self.__class__,
            (self.msg, self.pos, self.lineno, self.colno, self.diagnostic),
        )

    @property
    def exit_status(self) -> int:
        return self.kind.exit_status

    def render(self) -> str:
        """Formats the failure with its context window, if one was captured."""
        if self.diagnostic is None:
            return str(self)
        return self.diagnostic.render(self.msg)


class JSONDecodeError(ParseError, ValueError):
    """Malformed input: the document does not match the grammar."""


class UnexpectedEndOfInput(JSONDecodeError):
    """The stream ended while a production still expected bytes."""

    kind = ErrorKind.UNEXPECTED_EOF


class UnexpectedCharacter(JSONDecodeError):
    """A byte matched no grammar alternative at its position."""

    kind = ErrorKind.UNEXPECTED_CHAR


class DuplicateKeyError(ParseError):
    """
    An object literal repeats a key already inserted into its map.

    The grammar itself allows this, so it is reported as a failed map
    insertion rather than as malformed input.
    """

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(
        self,
        msg: str,
        pos: int = 0,
        lineno: int = 1,
        colno: int | None = None,
        diagnostic: Diagnostic | None = None,
        key: bytes = b"",
    ) -> None:
        super().__init__(msg, pos, lineno, colno, diagnostic)
        self.key = key

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (
            self.__class__,
            (
                self.msg,
                self.pos,
                self.lineno,
                self.colno,
                self.diagnostic,
                self.key,
            ),
        )


class ResourceError(ParseError):
    """A parse could not complete within its resource bounds."""


class AllocationError(ResourceError, MemoryError):
    """The arena could not satisfy an allocation request."""

    kind = ErrorKind.ALLOCATION_FAILURE


class NestingDepthError(ResourceError, RecursionError):
    """Containers are nested deeper than the parser allows."""

    kind = ErrorKind.NESTING_TOO_DEEP


class ArenaReleasedError(RuntimeError):
    """An arena was used after its bulk release."""
