"""
Pytest configuration and shared fixtures for jzstream tests.

Provides immutable test data fixtures and common utilities for clean,
type-safe test organization.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing.

    Drawn from the json.org JSON_checker failure suite, keeping the cases
    this decoder rejects: unquoted keys, bad literals, missing or doubled
    colons, mismatched brackets and trailing data.
    """
    fail_docs = {
        # https://json.org/JSON_checker/test/fail2.json
        "fail2.json": '["Unclosed array"',
        # https://json.org/JSON_checker/test/fail3.json
        "fail3.json": '{unquoted_key: "keys must be quoted"}',
        # https://json.org/JSON_checker/test/fail7.json
        "fail7.json": '["Comma after the close"],',
        # https://json.org/JSON_checker/test/fail8.json
        "fail8.json": '["Extra close"]]',
        # https://json.org/JSON_checker/test/fail10.json
        "fail10.json": '{"Extra value after close": true} "misplaced quoted value"',
        # https://json.org/JSON_checker/test/fail11.json
        "fail11.json": '{"Illegal expression": 1 + 2}',
        # https://json.org/JSON_checker/test/fail12.json
        "fail12.json": '{"Illegal invocation": alert()}',
        # https://json.org/JSON_checker/test/fail14.json
        "fail14.json": '{"Numbers cannot be hex": 0x14}',
        # https://json.org/JSON_checker/test/fail16.json
        "fail16.json": "[\\naked]",
        # https://json.org/JSON_checker/test/fail19.json
        "fail19.json": '{"Missing colon" null}',
        # https://json.org/JSON_checker/test/fail20.json
        "fail20.json": '{"Double colon":: null}',
        # https://json.org/JSON_checker/test/fail21.json
        "fail21.json": '{"Comma instead of colon", null}',
        # https://json.org/JSON_checker/test/fail22.json
        "fail22.json": '["Colon instead of comma": false]',
        # https://json.org/JSON_checker/test/fail23.json
        "fail23.json": '["Bad value", truth]',
        # https://json.org/JSON_checker/test/fail24.json
        "fail24.json": "['single quote']",
        # https://json.org/JSON_checker/test/fail29.json
        "fail29.json": "[0e]",
        # https://json.org/JSON_checker/test/fail30.json
        "fail30.json": "[0e+]",
        # https://json.org/JSON_checker/test/fail31.json
        "fail31.json": "[0e+-1]",
        # https://json.org/JSON_checker/test/fail32.json
        "fail32.json": '{"Comma instead if closing brace": true,',
        # https://json.org/JSON_checker/test/fail33.json
        "fail33.json": '["mismatch"}',
    }

    return [
        JsonTestCase(description=name, input_data=doc, should_fail=True)
        for name, doc in fail_docs.items()
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.

    These test cases validate that well-formed documents parse end to end.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
            should_fail=False,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            should_fail=False,
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
            should_fail=False,
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Expected outputs are in native form, as produced by to_python().
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42.0),
        JsonTestCase("negative integer", "-17", False, -17.0),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("exponent", "1.5e3", False, 1500.0),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1.0, 2.0, 3.0]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]


@pytest.fixture
def well_formed_document() -> str:
    """A document touching every value kind, used by property tests."""
    return (
        '{"a": 1, "b": [true, false, null], "c": {"d": "e\\"f", '
        '"g": -2.5e-3, "h": []}, "i": {}}'
    )
