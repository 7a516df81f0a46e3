"""Coverage reporting and Link header helpers for the LDP test suite."""

__version__ = "0.1.0"
