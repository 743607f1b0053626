"""Adapter implementations for democode."""

from .stdout_adapter import StdoutAdapter

__all__ = [
    'StdoutAdapter',
]
