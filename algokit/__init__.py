"""Classic graph algorithms and combinatorial search problems."""

__version__ = "0.1.0"
__all__ = ["graphs", "problems"]