"""
JSON_checker pass2 test from json.org test suite.

Validates parsing of deeply nested array structure to ensure
parser can handle significant nesting levels.
"""

import jzstream

# from https://json.org/JSON_checker/test/pass2.json
JSON = r"""
[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]
"""


def test_parse() -> None:
    """
    Validates JSON parsing and round-trip printing for deeply nested arrays.

    Tests parser's ability to handle significant nesting depth (19 levels)
    and proper reconstruction through pretty-printing.
    """
    # Test parsing
    res = jzstream.loads(JSON)

    # Test round-trip printing
    out = jzstream.dumps(res)
    assert res.root == jzstream.loads(out).root

    innermost = res.root
    for _ in range(19):
        innermost = innermost[0]
    assert innermost.as_str() == "Not too deep"
