"""democode - Main Entry Point."""

import asyncio
import math
import sys
from typing import NoReturn

from . import config
from .adapters import StdoutAdapter
from .samples import SAMPLE_HANDLERS


def _sample_names(raw: str) -> list[str]:
    return [name.strip() for name in raw.split(",") if name.strip()]


def _fail(message: str) -> NoReturn:
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


async def run_samples(handlers: list) -> None:
    """Run sample handlers one after another."""
    for handler in handlers:
        await handler.handle()


def main() -> None:
    """Main initialization."""
    # Validate config (early return)
    names = _sample_names(config.DEMO_SAMPLES)
    if not names:
        _fail("DEMO_SAMPLES not set")

    unknown = [name for name in names if name not in SAMPLE_HANDLERS]
    if unknown:
        _fail(f"unknown sample(s): {', '.join(unknown)}")

    try:
        count = int(config.DEMO_PARALLEL_COUNT)
        delay = float(config.DEMO_PARALLEL_DELAY)
    except ValueError as e:
        _fail(f"invalid parallel settings: {e}")

    if count < 1:
        _fail("DEMO_PARALLEL_COUNT must be at least 1")
    if not math.isfinite(delay) or delay < 0:
        _fail("DEMO_PARALLEL_DELAY must be finite and not negative")

    # Mount adapters
    logger = StdoutAdapter()

    handlers = []
    for name in names:
        handler_class = SAMPLE_HANDLERS[name]
        # Instantiate handler with dependencies
        if name == 'lambda':
            handler = handler_class(logger, count=count, delay=delay)
        else:
            handler = handler_class(logger)

        handlers.append(handler)

    logger.log(f"Running samples: {', '.join(names)}")
    asyncio.run(run_samples(handlers))


if __name__ == "__main__":
    main()
