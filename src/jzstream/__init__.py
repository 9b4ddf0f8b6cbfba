"""
Streaming recursive-descent JSON decoder with arena-owned value trees.

Reads a byte stream one byte at a time with single-byte pushback and builds
a tagged-union value tree whose nodes, strings and object maps are all owned
by one arena per parse. Backslash escapes are kept verbatim; failures carry
the offset and a rendered window of the surrounding source.
"""

import io
import logging
import math
import os
import time
from dataclasses import dataclass
from enum import Enum
from typing import IO
from typing import Any
from typing import Final
from typing import NoReturn
from typing import TypeAlias

from ._arena import NODE_SIZE
from ._arena import Arena
from ._arena import Block
from ._diagnostics import DEFAULT_CONTEXT_WINDOW
from ._diagnostics import ContextWindow
from ._diagnostics import Diagnostic
from ._diagnostics import render_context
from ._errors import AllocationError
from ._errors import ArenaReleasedError
from ._errors import DuplicateKeyError
from ._errors import ErrorKind
from ._errors import JSONDecodeError
from ._errors import NestingDepthError
from ._errors import ParseError
from ._errors import ResourceError
from ._errors import UnexpectedCharacter
from ._errors import UnexpectedEndOfInput
from ._object_map import DEFAULT_BUCKET_COUNT
from ._object_map import ObjectMap
from ._object_map import djb2
from ._value import JsonValue
from ._value import PythonValue
from ._value import ValueKind
from ._value import from_python

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

Position: TypeAlias = int

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JZSTREAM_PROFILE" in os.environ

DEFAULT_MAX_DEPTH: Final = 256
DEFAULT_INITIAL_BUFFER_SIZE: Final = 16

# Bytes the parser dispatches on
_LBRACE: Final = ord("{")
_RBRACE: Final = ord("}")
_LBRACKET: Final = ord("[")
_RBRACKET: Final = ord("]")
_QUOTE: Final = ord('"')
_BACKSLASH: Final = ord("\\")
_COLON: Final = ord(":")
_COMMA: Final = ord(",")
_MINUS: Final = ord("-")
_PLUS: Final = ord("+")
_DOT: Final = ord(".")
_NEWLINE: Final = ord("\n")
_ZERO: Final = ord("0")
_NINE: Final = ord("9")
_EXPONENT: Final = frozenset(b"eE")
_WHITESPACE: Final = frozenset(b" \t\n\r\x0b\x0c")


def _is_digit(byte: int | None) -> bool:
    return byte is not None and _ZERO <= byte <= _NINE


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    bytes_processed: int = 0

    def record_call(self, duration_ns: int, nbytes: int = 0) -> None:
        """Records a function call with timing and byte processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.bytes_processed += nbytes


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, nbytes: int = 0):
            self.func_name = func_name
            self.nbytes = nbytes
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.nbytes)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments to nullcontext
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, nbytes: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class DuplicateKeyPolicy(Enum):
    """
    What to do when an object literal repeats a key.

    FAIL aborts the parse with DuplicateKeyError; KEEP_FIRST keeps the
    first binding and discards the later value. Overwriting is never
    offered.
    """

    FAIL = "fail"
    KEEP_FIRST = "keep_first"


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    Centralizes the tunable constants of a parse: map bucket count, initial
    string buffer size, diagnostic window, nesting and allocation bounds,
    duplicate-key policy and separator strictness.
    """

    bucket_count: int = DEFAULT_BUCKET_COUNT
    initial_buffer_size: int = DEFAULT_INITIAL_BUFFER_SIZE
    context_window: int = DEFAULT_CONTEXT_WINDOW
    max_depth: int | None = DEFAULT_MAX_DEPTH
    arena_limit: int | None = None
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.FAIL
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.bucket_count, int) or self.bucket_count < 1:
            raise ValueError("bucket_count must be a positive integer")
        if (
            not isinstance(self.initial_buffer_size, int)
            or self.initial_buffer_size < 1
        ):
            raise ValueError("initial_buffer_size must be a positive integer")
        if not isinstance(self.context_window, int) or self.context_window < 0:
            raise ValueError("context_window must be a non-negative integer")
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer or None")
        if self.arena_limit is not None and self.arena_limit < 0:
            raise ValueError("arena_limit must be non-negative or None")
        if not isinstance(self.duplicate_keys, DuplicateKeyPolicy):
            raise TypeError("duplicate_keys must be a DuplicateKeyPolicy")
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures pretty-printing with immutable settings.

    `indent` of None prints on one line; an int or string indents each
    nesting level by that amount. `precision` of None prints the shortest
    repr that reads back to the same float; an int prints that many
    fixed decimals.
    """

    indent: str | int | None = None
    precision: int | None = None
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if self.precision is not None and (
            not isinstance(self.precision, int) or self.precision < 0
        ):
            raise ValueError("precision must be a non-negative integer")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")


class ByteStream:
    """
    Cursor over a binary stream with one byte of pushback.

    Tracks the byte offset, line and column of the next byte to be read.
    Backward seeks happen only to capture diagnostic context, and are
    skipped when the underlying stream cannot seek.
    """

    def __init__(self, fp: IO[bytes]) -> None:
        self._fp = fp
        self._pushback: int | None = None
        self.pos = 0
        self.lineno = 1
        self.line_start = 0
        self._prev_line_start = 0
        self._origin = self._tell()

    def _tell(self) -> int | None:
        try:
            if not self._fp.seekable():
                return None
            return self._fp.tell()
        except (OSError, ValueError):
            return None

    @property
    def colno(self) -> int:
        return self.pos - self.line_start + 1

    def read_byte(self) -> int | None:
        """Returns the next byte, or None at end of stream."""
        if self._pushback is not None:
            byte = self._pushback
            self._pushback = None
        else:
            chunk = self._fp.read(1)
            if not chunk:
                return None
            byte = chunk[0]

        self.pos += 1
        if byte == _NEWLINE:
            self._prev_line_start = self.line_start
            self.lineno += 1
            self.line_start = self.pos
        return byte

    def unread(self, byte: int) -> None:
        """Pushes one byte back so the next read returns it again."""
        if self._pushback is not None:
            raise RuntimeError("pushback already holds a byte")

        self._pushback = byte
        self.pos -= 1
        if byte == _NEWLINE:
            self.lineno -= 1
            self.line_start = self._prev_line_start

    def context(self, window: int) -> tuple[bytes, int]:
        """
        Captures up to `window` bytes around the cursor.

        Returns the bytes and the offset of the first one. Yields no bytes
        when the stream cannot seek.
        """
        if window <= 0 or self._origin is None:
            return b"", self.pos

        before = min(window // 2, self.pos)
        start = self.pos - before
        try:
            here = self._fp.tell()
            self._fp.seek(self._origin + start)
            captured = self._fp.read(before + window - window // 2)
            self._fp.seek(here)
        except (OSError, ValueError):
            return b"", self.pos
        return bytes(captured), start


class JsonParser:
    """
    Recursive-descent parser over a ByteStream.

    One method per grammar production; the call stack tracks nesting.
    Every node, map entry and string buffer is allocated through the
    arena, or on the heap when no arena is given. The first failure
    aborts the whole parse.
    """

    def __init__(
        self,
        stream: ByteStream,
        arena: Arena | None,
        config: ParseConfig,
    ) -> None:
        self.stream = stream
        self.arena = arena
        self.config = config
        self.depth = 0

    # Failure reporting

    def _error(
        self, error_cls: type[ParseError], msg: str, **extra: Any
    ) -> ParseError:
        stream = self.stream
        window, start = stream.context(self.config.context_window)
        diagnostic = Diagnostic(
            stream.pos, stream.lineno, stream.colno, window, start
        )
        return error_cls(
            msg, stream.pos, stream.lineno, stream.colno, diagnostic, **extra
        )

    def _fail(
        self, error_cls: type[ParseError], msg: str, **extra: Any
    ) -> NoReturn:
        raise self._error(error_cls, msg, **extra)

    def _unexpected(self, byte: int, msg: str) -> NoReturn:
        """Reports `byte` at its own offset by pushing it back first."""
        self.stream.unread(byte)
        self._fail(UnexpectedCharacter, msg)

    def _end_of_input(self, msg: str) -> NoReturn:
        self._fail(UnexpectedEndOfInput, msg)

    # Allocation

    def _new(self, kind: ValueKind, payload: Any = None) -> JsonValue:
        value = JsonValue(kind, payload)
        if self.arena is not None:
            self.arena.adopt(value)
        return value

    def _buffer(self, size: int) -> Block:
        if self.arena is None:
            return Block(bytearray(size))
        return self.arena.allocate(size)

    def _grow(self, block: Block, size: int) -> Block:
        if self.arena is None:
            block.data.extend(bytes(size - block.capacity))
            return block
        return self.arena.grow(block, size)

    def _enter_container(self) -> None:
        self.depth += 1
        limit = self.config.max_depth
        if limit is not None and self.depth > limit:
            self._fail(
                NestingDepthError, f"Nesting exceeds {limit} levels"
            )

    # Productions

    def parse(self) -> JsonValue:
        """Parses one complete document; only whitespace may follow it."""
        try:
            value = self.parse_value()
        except NestingDepthError:
            raise
        except RecursionError as exc:
            raise self._error(
                NestingDepthError, "Nesting exceeds the interpreter stack"
            ) from exc
        except AllocationError as exc:
            if exc.diagnostic is not None:
                raise
            raise self._error(AllocationError, exc.msg) from exc

        self.discard_whitespace()
        byte = self.stream.read_byte()
        if byte is not None:
            self._unexpected(byte, "Extra data")
        return value

    def discard_whitespace(self) -> None:
        """Consumes whitespace up to the next significant byte."""
        stream = self.stream
        while True:
            byte = stream.read_byte()
            if byte is None:
                return
            if byte not in _WHITESPACE:
                stream.unread(byte)
                return

    def parse_value(self) -> JsonValue:
        """Dispatches on the first significant byte of a value."""
        with ProfileContext("parse_value"):
            self.discard_whitespace()
            byte = self.stream.read_byte()

            if byte is None:
                self._end_of_input("Expecting value")
            elif byte == _LBRACE:
                return self.parse_object()
            elif byte == _QUOTE:
                return self._new(ValueKind.STRING, self.parse_string())
            elif byte == _LBRACKET:
                return self.parse_array()
            elif byte in b"tf":
                self.stream.unread(byte)
                return self._new(ValueKind.BOOLEAN, self.parse_boolean())
            elif byte == ord("n"):
                self.stream.unread(byte)
                self.parse_null()
                return self._new(ValueKind.NULL)
            elif byte == _MINUS or _is_digit(byte):
                self.stream.unread(byte)
                return self._new(ValueKind.NUMBER, self.parse_number())

            self._unexpected(byte, "Expecting value")

    def parse_object(self) -> JsonValue:
        """Parses members after an opening brace into an ObjectMap."""
        with ProfileContext("parse_object"):
            self._enter_container()
            members = ObjectMap(self.config.bucket_count, self.arena)
            after_comma = False

            while True:
                self.discard_whitespace()
                byte = self.stream.read_byte()
                if byte is None:
                    self._end_of_input(
                        "Expecting property name enclosed in double quotes"
                    )
                if byte == _RBRACE:
                    if after_comma and self.config.strict:
                        self._unexpected(
                            byte, "Illegal trailing comma before end of object"
                        )
                    break
                if byte != _QUOTE:
                    self._unexpected(
                        byte,
                        "Expecting property name enclosed in double quotes",
                    )
                key = self.parse_string()

                self.discard_whitespace()
                byte = self.stream.read_byte()
                if byte is None:
                    self._end_of_input("Expecting ':' delimiter")
                if byte != _COLON:
                    self._unexpected(byte, "Expecting ':' delimiter")

                value = self.parse_value()
                if not members.insert(key, value):
                    if self.config.duplicate_keys is DuplicateKeyPolicy.FAIL:
                        self._fail(
                            DuplicateKeyError,
                            f"Duplicate key {key!r}",
                            key=key,
                        )
                    logger.debug("keeping first binding of key %r", key)

                self.discard_whitespace()
                byte = self.stream.read_byte()
                if byte is None:
                    self._end_of_input("Expecting ',' delimiter")
                if byte == _RBRACE:
                    break
                if byte != _COMMA:
                    self._unexpected(byte, "Expecting ',' delimiter")
                after_comma = True

            self.depth -= 1
            return self._new(ValueKind.OBJECT, members)

    def parse_array(self) -> JsonValue:
        """
        Parses elements after an opening bracket.

        Commas are skipped as separators; in strict mode exactly one comma
        must sit between consecutive elements and none may trail.
        """
        with ProfileContext("parse_array"):
            self._enter_container()
            strict = self.config.strict
            items: list[JsonValue] = []
            capacity = self.config.initial_buffer_size
            if self.arena is not None:
                self.arena.reserve(capacity * NODE_SIZE)
            after_comma = False

            while True:
                self.discard_whitespace()
                byte = self.stream.read_byte()

                if byte is None:
                    self._end_of_input("Expecting value or ']'")
                if byte == _RBRACKET:
                    if strict and after_comma:
                        self._unexpected(
                            byte, "Illegal trailing comma before end of array"
                        )
                    break
                if byte == _COMMA:
                    if strict and (after_comma or not items):
                        self._unexpected(byte, "Expecting value")
                    after_comma = True
                    continue

                if strict and items and not after_comma:
                    self._unexpected(byte, "Expecting ',' delimiter")
                self.stream.unread(byte)

                if len(items) == capacity:
                    if self.arena is not None:
                        self.arena.reserve(capacity * NODE_SIZE)
                    capacity *= 2
                items.append(self.parse_value())
                after_comma = False

            self.depth -= 1
            return self._new(ValueKind.ARRAY, items)

    def parse_string(self) -> bytes:
        """
        Copies bytes up to the closing quote.

        A backslash and the byte after it are both copied verbatim; escape
        sequences are never decoded.
        """
        with ProfileContext("parse_string"):
            block = self._buffer(self.config.initial_buffer_size)
            escaped = False

            while True:
                if block.full:
                    block = self._grow(block, block.capacity * 2)

                byte = self.stream.read_byte()
                if byte is None:
                    self._end_of_input("Unterminated string")

                if escaped:
                    escaped = False
                elif byte == _BACKSLASH:
                    escaped = True
                elif byte == _QUOTE:
                    break
                block.append(byte)

            if self.arena is not None:
                self.arena.shrink(block)
            return block.tobytes()

    def _scan_digits(
        self, literal: bytearray, byte: int | None, required: bool
    ) -> int | None:
        """Appends a run of digits to `literal`; returns the byte after it."""
        if required and not _is_digit(byte):
            if byte is None:
                self._end_of_input("Expecting digit")
            self._unexpected(byte, "Expecting digit")

        while _is_digit(byte):
            literal.append(byte)  # type: ignore[arg-type]
            byte = self.stream.read_byte()
        return byte

    def parse_number(self) -> float:
        """
        Reads a float literal the way a scanf %lf conversion does.

        Accepts a sign, integer digits, an optional fraction and an
        optional exponent. The end of stream after a complete literal
        ends the number.
        """
        with ProfileContext("parse_number"):
            literal = bytearray()
            byte = self.stream.read_byte()

            if byte == _MINUS:
                literal.append(byte)
                byte = self.stream.read_byte()
            byte = self._scan_digits(literal, byte, required=True)

            if byte == _DOT:
                literal.append(byte)
                byte = self._scan_digits(
                    literal, self.stream.read_byte(), required=False
                )

            if byte is not None and byte in _EXPONENT:
                literal.append(byte)
                byte = self.stream.read_byte()
                if byte == _PLUS or byte == _MINUS:
                    literal.append(byte)
                    byte = self.stream.read_byte()
                byte = self._scan_digits(literal, byte, required=True)

            if byte is not None:
                self.stream.unread(byte)
            return float(literal.decode("ascii"))

    def _expect_literal(self, literal: bytes) -> None:
        for expected in literal:
            byte = self.stream.read_byte()
            if byte is None:
                self._end_of_input(f"Expecting '{literal.decode()}'")
            if byte != expected:
                self._unexpected(byte, f"Expecting '{literal.decode()}'")

    def parse_boolean(self) -> bool:
        """Reads `true` or `false`, chosen by the first byte."""
        byte = self.stream.read_byte()
        if byte is None:
            self._end_of_input("Expecting value")
        self.stream.unread(byte)
        if byte == ord("t"):
            self._expect_literal(b"true")
            return True
        self._expect_literal(b"false")
        return False

    def parse_null(self) -> None:
        self._expect_literal(b"null")


def parse(fp: IO[bytes], arena: Arena | None, **kwargs: Any) -> JsonValue:
    """
    Parses one document from a binary stream into a tree owned by `arena`.

    With `arena=None` the tree is built on the heap and can be torn down
    with JsonValue.release(). Raises a ParseError subclass on failure;
    no partial tree is returned.
    """
    config = ParseConfig(**kwargs)
    parser = JsonParser(ByteStream(fp), arena, config)

    logger.debug("parse started (arena=%r)", arena)
    value = parser.parse()
    logger.debug(
        "parse finished at byte %d: %s",
        parser.stream.pos,
        value.kind.value,
    )
    return value


class Document:
    """
    A parsed root value together with the arena that owns it.

    The tree is valid until release(); using the document as a context
    manager releases it on exit.
    """

    def __init__(self, root: JsonValue, arena: Arena) -> None:
        self._root = root
        self.arena = arena

    def __enter__(self) -> "Document":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not self.arena.released:
            self.release()

    @property
    def root(self) -> JsonValue:
        if self.arena.released:
            raise ArenaReleasedError("document used after release")
        return self._root

    def to_python(self) -> PythonValue:
        return self.root.to_python()

    def release(self) -> None:
        self.arena.release()

    def __repr__(self) -> str:
        return f"Document({self._root!r}, {self.arena!r})"


def load(fp: IO[bytes], **kwargs: Any) -> Document:
    """
    Parses JSON from a binary file-like object into an arena-owned document.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")
    if isinstance(fp.read(0), str):
        raise TypeError("fp must be opened in binary mode")

    config = ParseConfig(**kwargs)
    arena = Arena(config.arena_limit)
    try:
        root = JsonParser(ByteStream(fp), arena, config).parse()
    except ParseError:
        arena.release()
        raise
    return Document(root, arena)


def loads(s: bytes | bytearray | str, **kwargs: Any) -> Document:
    """
    Parses a complete JSON document held in memory.

    Text input is encoded as UTF-8 first; the decoder itself only ever
    sees bytes.
    """
    if isinstance(s, str):
        s = s.encode("utf-8", errors="surrogateescape")
    elif not isinstance(s, bytes | bytearray):
        raise TypeError(
            f"the JSON object must be bytes or str, not {type(s).__name__}"
        )
    return load(io.BytesIO(s), **kwargs)


def _get_indent_string(indent: str | int | None, level: int) -> str:
    """Generate indentation string for given level."""
    if indent is None:
        return ""
    elif isinstance(indent, int):
        return " " * (indent * level)
    else:
        return indent * level


def _encode_number(n: float, config: EncodeConfig) -> str:
    """
    Encode numeric values.

    The shortest form must read back as JSON, so non-finite values are
    refused there. Fixed decimals mirror a C "%lf" conversion, which prints
    them as inf, -inf and nan.
    """
    if config.precision is not None:
        return f"{n:.{config.precision}f}"
    if not math.isfinite(n):
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    return repr(n)


def _encode_string(data: bytes) -> str:
    """Quote string bytes; escapes were never decoded, so none are added."""
    return '"' + data.decode("utf-8", errors="surrogateescape") + '"'


def _encode_array(
    items: list[JsonValue], config: EncodeConfig, level: int
) -> str:
    """Encode array with optional formatting."""
    if not items:
        return "[]"

    encoded = [_encode_value(item, config, level + 1) for item in items]
    if config.indent is None:
        return "[" + ", ".join(encoded) + "]"

    inner = _get_indent_string(config.indent, level + 1)
    outer = _get_indent_string(config.indent, level)
    body = ",\n".join(f"{inner}{item}" for item in encoded)
    return f"[\n{body}\n{outer}]"


def _encode_object(
    members: ObjectMap, config: EncodeConfig, level: int
) -> str:
    """Encode object members with optional key sorting and formatting."""
    if not len(members):
        return "{}"

    pairs = list(members)
    if config.sort_keys:
        pairs.sort(key=lambda pair: pair[0])

    encoded = [
        f"{_encode_string(key)}: {_encode_value(value, config, level + 1)}"
        for key, value in pairs
    ]
    if config.indent is None:
        return "{" + ", ".join(encoded) + "}"

    inner = _get_indent_string(config.indent, level + 1)
    outer = _get_indent_string(config.indent, level)
    body = ",\n".join(f"{inner}{item}" for item in encoded)
    return f"{{\n{body}\n{outer}}}"


def _encode_value(value: JsonValue, config: EncodeConfig, level: int) -> str:
    """Encode any value by visiting its tag."""
    match value.kind:
        case ValueKind.OBJECT:
            return _encode_object(value.as_object(), config, level)
        case ValueKind.ARRAY:
            return _encode_array(value.as_array(), config, level)
        case ValueKind.STRING:
            return _encode_string(value.as_bytes())
        case ValueKind.NUMBER:
            return _encode_number(value.as_number(), config)
        case ValueKind.BOOLEAN:
            return "true" if value.as_bool() else "false"
        case ValueKind.NULL:
            return "null"


def dumps(value: JsonValue | Document, **kwargs: Any) -> str:
    """
    Pretty-prints a value tree with configurable formatting.
    """
    config = EncodeConfig(**kwargs)
    if isinstance(value, Document):
        value = value.root
    if not isinstance(value, JsonValue):
        msg = f"Object of type {type(value).__name__} is not a JsonValue"
        raise TypeError(msg)
    return _encode_value(value, config, 0)


def dump(value: JsonValue | Document, fp: IO[str], **kwargs: Any) -> None:
    """
    Pretty-prints a value tree to a text file object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(value, **kwargs))


__all__ = [
    "AllocationError",
    "Arena",
    "ArenaReleasedError",
    "Block",
    "ByteStream",
    "ContextWindow",
    "Diagnostic",
    "Document",
    "DuplicateKeyError",
    "DuplicateKeyPolicy",
    "EncodeConfig",
    "ErrorKind",
    "HotPathStats",
    "JSONDecodeError",
    "JsonParser",
    "JsonValue",
    "NestingDepthError",
    "ObjectMap",
    "ParseConfig",
    "ParseError",
    "ResourceError",
    "UnexpectedCharacter",
    "UnexpectedEndOfInput",
    "ValueKind",
    "clear_hot_path_stats",
    "djb2",
    "dump",
    "dumps",
    "from_python",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "render_context",
]
