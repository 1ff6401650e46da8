"""
tests: this package contains all logtest unittests

All tests share the process-wide capture queue; run them with a single
worker, e.g. ``pytest tests``.
"""
