"""Integer parser with audit logging."""

import re
import sys
from typing import Any, Optional, Type

from ..interfaces import ILogSink
from .results import NotParsed, Parsed, ParseResult

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

# Optional sign, ASCII digits, surrounding whitespace allowed
_INTEGER_RE = re.compile(r"\s*([+-]?)([0-9]+)\s*", re.ASCII)

# Significant digits in INT32_MIN/INT32_MAX
_MAX_DIGITS = 10


def _read_int32(text: Optional[str]) -> ParseResult:
    """Parse ``text`` as a decimal 32-bit integer without side effects."""
    if text is None:
        return NotParsed()

    match = _INTEGER_RE.fullmatch(text)
    if not match:
        return NotParsed()

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return NotParsed()

    value = int(sign + digits)
    if value < INT32_MIN or value > INT32_MAX:
        return NotParsed()

    return Parsed(value)


class DataParser:
    """Converts user text to integers and records every attempt."""

    def __init__(self, logger: ILogSink):
        if logger is None:
            raise ValueError("logger required")

        self.logger = logger

    def _audit(self, message: str) -> None:
        """Best-effort log write; never masks the parse outcome."""
        try:
            self.logger.log(message)
        except Exception as e:
            print(f"ERROR: audit log failed: {e}", file=sys.stderr)

    def try_parse_int(self, text: Optional[str]) -> ParseResult:
        """Parse ``text`` and log exactly one success/failure line."""
        result = _read_int32(text)
        shown = "" if text is None else text

        if result.success:
            self._audit(f"Success: parsed {shown} as {result.value}")
        else:
            self._audit(f"Failure: could not parse {shown}")

        return result

    def parse_int(self, text: Optional[str]) -> ParseResult:
        """Parse ``text`` without logging."""
        return _read_int32(text)

    def parse(self, text: str, result_type: Type[Any]) -> Any:
        """Generic parse into ``result_type``. Deliberately unimplemented."""
        raise NotImplementedError(
            f"parse into {getattr(result_type, '__name__', result_type)} "
            "is not implemented"
        )
