"""Performance benchmarks for pluralengine.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in rule compilation and category resolution.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
