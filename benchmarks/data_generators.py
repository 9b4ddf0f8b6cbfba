"""
Test data generators for jzstream benchmarks.

Each workload targets one part of the decoder:
- wide objects overload the fixed object buckets
- long arrays exercise capacity doubling
- deep nesting exercises the recursive productions
- escaped strings exercise the verbatim string copy
"""

import json
import random
import string
from typing import Any

WORKLOADS = (
    "wide_object",
    "long_array",
    "deep_nesting",
    "escaped_strings",
    "mixed_document",
)

_ESCAPES = ('\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t")
_ESCAPE_PROBABILITY = 0.25


def generate_test_data(workload: str, seed: int = 0) -> bytes:
    """Generates a JSON document for the named workload."""
    generators = {
        "wide_object": _wide_object,
        "long_array": _long_array,
        "deep_nesting": _deep_nesting,
        "escaped_strings": _escaped_strings,
        "mixed_document": _mixed_document,
    }

    if workload not in generators:
        raise ValueError(f"Unknown workload: {workload}")

    rng = random.Random(seed)
    return generators[workload](rng).encode("utf-8")


def _wide_object(rng: random.Random) -> str:
    """One object with far more keys than buckets."""
    data = {
        f"field_{i:05d}": round(rng.uniform(-1e6, 1e6), 4)
        for i in range(2000)
    }
    return json.dumps(data)


def _long_array(rng: random.Random) -> str:
    return json.dumps([rng.randint(-10_000, 10_000) for _ in range(20_000)])


def _deep_nesting(rng: random.Random) -> str:
    """Alternating arrays and objects, well inside the default depth."""
    doc: Any = _random_string(rng, 8)
    for level in range(200):
        doc = [doc, level] if level % 2 else {"level": level, "child": doc}
    return json.dumps(doc)


def _escaped_strings(rng: random.Random) -> str:
    # json.dumps would re-escape, so the document is assembled by hand
    members = ", ".join(
        f'"k{i}": "{_escaped_string(rng)}"' for i in range(500)
    )
    return "{" + members + "}"


def _mixed_document(rng: random.Random) -> str:
    records = [
        {
            "id": i,
            "name": _random_string(rng, rng.randint(4, 16)),
            "score": round(rng.uniform(0, 100), 2),
            "active": rng.choice([True, False]),
            "tags": [_random_string(rng, 5) for _ in range(rng.randint(0, 4))],
            "parent": None if i == 0 else rng.randrange(i),
        }
        for i in range(300)
    ]
    return json.dumps({"count": len(records), "records": records})


def _escaped_string(rng: random.Random) -> str:
    chars = []
    for _ in range(64):
        if rng.random() < _ESCAPE_PROBABILITY:
            chars.append(rng.choice(_ESCAPES))
        else:
            chars.append(rng.choice(string.ascii_letters + " "))
    return "".join(chars)


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
