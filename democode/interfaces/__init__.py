"""Interface definitions for democode adapters."""

from .i_log_sink import ILogSink, format_exception_message, log_exception

__all__ = [
    'ILogSink',
    'format_exception_message',
    'log_exception',
]
