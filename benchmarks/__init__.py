"""
Benchmark suite for jzstream parsing performance.

Compares jzstream against the standard library json, orjson and ujson on
workloads that stress object buckets, array growth, nesting and escaped
strings, and measures how much of each parse the arena accounts for.
"""
