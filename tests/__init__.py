"""
Test package marker.

Lets pytest import the suite as `tests.test_*` and put the repo root on
sys.path so `generic_adapters` resolves without an install.
"""
