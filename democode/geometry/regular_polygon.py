"""Regular polygon value type."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RegularPolygon:
    """Immutable regular polygon; all fields required."""
    number_of_sides: int
    side_length: int

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly
        for name in ("number_of_sides", "side_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer")

        if self.number_of_sides < 3:
            raise ValueError("number_of_sides must be at least 3")
        if self.side_length < 0:
            raise ValueError("side_length must not be negative")

    @property
    def perimeter(self) -> int:
        return self.number_of_sides * self.side_length

    @property
    def area(self) -> float:
        return (self.side_length * self._apothem() * self.number_of_sides) / 2

    def get_perimeter(self) -> int:
        return self.perimeter

    def get_area(self) -> float:
        return self.area

    def _apothem(self) -> float:
        return self.side_length / (2 * math.tan(math.pi / self.number_of_sides))
