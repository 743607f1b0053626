"""Sample: parser bound to a mandatory logger."""

from typing import Optional

from ..interfaces import ILogSink
from ..parsing import DataParser

SAMPLE_INPUTS: tuple[Optional[str], ...] = ("123", "345", "abc", None)


class NullableSample:
    """Parses fixed inputs and prints each resulting value."""

    def __init__(self, logger: Optional[ILogSink]):
        self.logger = logger

    async def handle(self) -> None:
        """Run sample."""
        try:
            parser = DataParser(self.logger)

            for text in SAMPLE_INPUTS:
                _, value = parser.try_parse_int(text)
                print(f"Output from console: value {value}")

        except Exception as e:
            print(f"ERROR - {type(e).__name__}\n{e}")
