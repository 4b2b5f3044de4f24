"""Exact algorithms for difference, distance and counting problems on digits, arrays, strings and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "digits", "frequency", "trees"]