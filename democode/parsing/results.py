"""Tagged parse results."""

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Parsed:
    """Successful parse carrying the value."""
    value: int

    @property
    def success(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Union[bool, int]]:
        return iter((self.success, self.value))


@dataclass(frozen=True)
class NotParsed:
    """Failed parse. Carries nothing; value is always zero."""

    @property
    def success(self) -> bool:
        return False

    @property
    def value(self) -> int:
        return 0

    def __iter__(self) -> Iterator[Union[bool, int]]:
        return iter((self.success, self.value))


ParseResult = Union[Parsed, NotParsed]
