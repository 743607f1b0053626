"""Logging interface (adapter pattern)."""

from typing import Protocol


def format_exception_message(error: BaseException) -> str:
    """Render an exception as a two-line log entry."""
    return f"ERROR - {type(error).__name__}\n    {error}"


class ILogSink(Protocol):
    """Interface for log output.

    Only ``log`` is required. Sinks that subclass this protocol inherit the
    default ``log_exception``; structural sinks get the same behaviour
    through the module-level ``log_exception`` function.
    """

    def log(self, message: str) -> None:
        """Write log entry."""
        ...

    def log_exception(self, error: BaseException) -> None:
        """Write exception as a single combined log entry."""
        self.log(format_exception_message(error))


def log_exception(sink: ILogSink, error: BaseException) -> None:
    """Record ``error`` on any sink, honouring its own override if present."""
    override = getattr(sink, "log_exception", None)
    if callable(override):
        override(error)
        return

    sink.log(format_exception_message(error))
