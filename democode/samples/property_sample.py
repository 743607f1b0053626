"""Sample: immutable polygon with computed properties."""

from ..geometry import RegularPolygon
from ..interfaces import ILogSink


class PropertySample:
    """Prints triangle and square dimensions."""

    def __init__(self, logger: ILogSink):
        self.logger = logger

    def _describe(self, name: str, polygon: RegularPolygon) -> None:
        print(
            f"{name}: {polygon.number_of_sides} sides "
            f"with length of {polygon.side_length}"
        )
        print(f"   Perimeter is {polygon.perimeter}")

    async def handle(self) -> None:
        """Run sample."""
        self.logger.log("Running property sample")

        triangle = RegularPolygon(3, 5)
        self._describe("Triangle", triangle)

        square = RegularPolygon(number_of_sides=4, side_length=7)
        self._describe("Square", square)
