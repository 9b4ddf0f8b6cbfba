"""
Decoding functionality tests.

Validates the value model produced by the parser, the arena ownership of
parsed trees, and the lower-level parse() entry point.
"""

import io

import pytest

import jzstream
from jzstream import Arena
from jzstream import JsonValue
from jzstream import ValueKind


def test_parse_into_caller_arena() -> None:
    """
    Validates that parse() charges every node to the arena it is given.
    """
    with Arena() as arena:
        root = jzstream.parse(io.BytesIO(b'{"a": [1, "x"]}'), arena)

        assert root.to_python() == {"a": [1.0, "x"]}
        assert arena.allocation_count > 0
        assert arena.bytes_used > 0

    assert arena.released


def test_parse_without_arena_builds_heap_tree() -> None:
    """
    Validates heap-owned trees and their recursive teardown.
    """
    root = jzstream.parse(io.BytesIO(b'{"a": [1, {"b": null}]}'), None)

    assert root.to_python() == {"a": [1.0, {"b": None}]}

    root.release()
    assert len(root.as_object()) == 0


def test_parse_leaves_stream_after_document() -> None:
    """
    Validates that trailing whitespace is consumed up to end of stream.
    """
    fp = io.BytesIO(b"[1]   \n")

    jzstream.parse(fp, None)

    assert fp.read() == b""


def test_document_release_invalidates_root() -> None:
    """
    Validates that a released document refuses further use.
    """
    doc = jzstream.loads("[1, 2]")
    assert doc.root.as_array()[1].as_number() == 2.0

    doc.release()

    assert doc.arena.released
    with pytest.raises(jzstream.ArenaReleasedError):
        _ = doc.root
    with pytest.raises(jzstream.ArenaReleasedError):
        doc.release()


def test_document_context_manager() -> None:
    """
    Validates that leaving the with-block releases the arena.
    """
    with jzstream.loads('{"k": true}') as doc:
        assert doc.root["k"].as_bool() is True

    assert doc.arena.released


def test_failed_parse_releases_arena(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Validates that a failing load leaves no live arena behind.
    """
    arenas: list[Arena] = []
    original_init = Arena.__init__

    def tracking_init(self: Arena, limit: int | None = None) -> None:
        original_init(self, limit)
        arenas.append(self)

    monkeypatch.setattr(Arena, "__init__", tracking_init)

    with pytest.raises(jzstream.UnexpectedEndOfInput):
        jzstream.loads('{"a": [1, 2')

    assert len(arenas) == 1
    assert arenas[0].released


def test_tag_checked_accessors() -> None:
    """
    Validates that payloads are only readable through their own tag.
    """
    root = jzstream.loads('[1, "s", true, null, {}, []]').root
    number, string, flag, null, obj, arr = root.as_array()

    assert number.as_number() == 1.0
    assert string.as_bytes() == b"s"
    assert flag.as_bool() is True
    assert null.is_null
    assert obj.kind is ValueKind.OBJECT
    assert arr.kind is ValueKind.ARRAY

    with pytest.raises(TypeError, match="value is number, not string"):
        number.as_bytes()
    with pytest.raises(TypeError, match="value is string, not number"):
        string.as_number()
    with pytest.raises(TypeError):
        null.as_bool()
    with pytest.raises(TypeError):
        obj.as_array()


def test_payload_must_match_kind() -> None:
    """
    Validates that a JsonValue cannot be built with a mismatched payload.
    """
    with pytest.raises(TypeError):
        JsonValue(ValueKind.NUMBER, b"1")
    with pytest.raises(TypeError):
        JsonValue(ValueKind.BOOLEAN, 1.0)
    with pytest.raises(TypeError):
        JsonValue(ValueKind.NULL, 0.0)


def test_value_indexing() -> None:
    """
    Validates object lookup by str or bytes and array lookup by position.
    """
    root = jzstream.loads('{"list": [10, 20], "name": "n"}').root

    assert root["list"][1].as_number() == 20.0
    assert root[b"name"].as_str() == "n"
    assert len(root) == 2
    assert len(root["list"]) == 2

    with pytest.raises(KeyError):
        root["missing"]
    with pytest.raises(TypeError):
        root["list"]["zero"]


def test_values_are_truthy() -> None:
    """
    Validates that empty containers and false values are still truthy nodes.
    """
    assert jzstream.loads("[]").root
    assert jzstream.loads("false").root
    assert jzstream.loads("0").root


def test_structural_equality_ignores_member_order() -> None:
    """
    Validates equality between trees with differently ordered members.
    """
    left = jzstream.loads('{"a": 1, "b": [true, null], "c": {"d": "e"}}')
    right = jzstream.loads('{"c": {"d": "e"}, "b": [true, null], "a": 1}')

    assert left.root == right.root
    assert left.root != jzstream.loads('{"a": 1, "b": [null, true]}').root
    changed = jzstream.loads('{"a": 1.5, "b": [true, null], "c": {"d": "e"}}')
    assert left.root != changed.root


def test_number_and_boolean_never_compare_equal() -> None:
    """
    Validates that tags take part in equality.
    """
    assert jzstream.loads("1").root != jzstream.loads("true").root
    assert jzstream.loads("0").root != jzstream.loads("false").root


def test_from_python_builds_equal_tree() -> None:
    """
    Validates building trees from native data.
    """
    built = jzstream.from_python(
        {"a": [1, 2.5, "x", None, True], "b": {"c": []}}
    )

    parsed = jzstream.loads('{"b": {"c": []}, "a": [1, 2.5, "x", null, true]}')
    assert built == parsed.root


def test_from_python_escapes_text() -> None:
    """
    Validates that native text is stored in escaped source form.
    """
    built = jzstream.from_python(
        {"say": 'he said "hi"', "tail": "back\\", "ctl\n": "\t\x01"}
    )

    assert built["say"].as_bytes() == b'he said \\"hi\\"'
    assert built["tail"].as_bytes() == b"back\\\\"
    assert built["ctl\\n"].as_bytes() == b"\\t\\u0001"

    reparsed = jzstream.loads(jzstream.dumps(built))
    assert reparsed.root == built


def test_from_python_rejects_unsupported_types() -> None:
    """
    Validates that non-JSON Python objects are refused.
    """
    with pytest.raises(TypeError, match="not JSON serializable"):
        jzstream.from_python({"a": object()})
    with pytest.raises(TypeError, match="keys must be str or bytes"):
        jzstream.from_python({1: "one"})


def test_hot_path_stats_api() -> None:
    """
    Validates the profiling API is callable whether or not it is enabled.
    """
    jzstream.clear_hot_path_stats()
    jzstream.loads('{"a": [1, 2]}')

    stats = jzstream.get_hot_path_stats()
    assert isinstance(stats, dict)
    if jzstream.PROFILE_HOT_PATHS:
        assert stats["parse_value"].call_count >= 3
