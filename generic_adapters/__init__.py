"""
generic_adapters package

Configuration-driven registry of generic adapters for external job
frameworks. See `generic_adapters.registry` for the entry points.
"""

__version__ = "0.1.0"
