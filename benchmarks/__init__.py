"""
Benchmark suite for jspan JSON parsing performance.

Compares jspan against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage on documents inside the subset
jspan supports.
"""
