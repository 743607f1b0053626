"""Sample: one concurrent task per number."""

import asyncio
import math

from ..interfaces import ILogSink


class LambdaSample:
    """Prints each number from its own task, in no guaranteed order."""

    def __init__(self, logger: ILogSink, count: int = 20, delay: float = 0.001):
        if count < 1:
            raise ValueError("count must be at least 1")
        if not math.isfinite(delay) or delay < 0:
            raise ValueError("delay must be finite and not negative")

        self.logger = logger
        self.numbers = list(range(1, count + 1))
        self.delay = delay

    async def _print_number(self, number: int) -> None:
        await asyncio.sleep(self.delay)
        print(f"Number: {number}")

    async def handle(self) -> None:
        """Run sample."""
        self.logger.log(f"Starting {len(self.numbers)} tasks")
        await asyncio.gather(*(self._print_number(n) for n in self.numbers))
