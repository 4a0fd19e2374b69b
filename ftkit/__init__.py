"""Character, number, string, buffer, list, output, line-reading and stack-sorting utilities."""

__version__ = "0.1.0"