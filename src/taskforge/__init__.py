"""taskforge - in-process AI worker dispatcher."""

__version__ = "0.1.0"
