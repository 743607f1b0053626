"""Text-to-integer parsing."""

from .data_parser import INT32_MAX, INT32_MIN, DataParser
from .results import NotParsed, Parsed, ParseResult

__all__ = [
    'DataParser',
    'INT32_MAX',
    'INT32_MIN',
    'NotParsed',
    'Parsed',
    'ParseResult',
]
