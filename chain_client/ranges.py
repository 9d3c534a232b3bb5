"""Validated block height ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

Step = Union[int, float]


class InvalidStepDirection(ValueError):
    """Raised when a step cannot move the cursor from ``start`` towards ``end``."""

    def __init__(self, start: int, end: int, step: Step) -> None:
        self.start = start
        self.end = end
        self.step = step
        direction = "up" if start < end else "down"
        super().__init__(
            f"Step {step!r} cannot count {direction} from {start} to {end}"
        )


@dataclass(frozen=True)
class BlockRange:
    """Heights from ``start`` towards ``end`` (exclusive) by ``step``.

    Build instances with :meth:`build`, which applies the direction rules:
    counting up needs a positive step, counting down forces any step of one
    or more to ``-1`` and otherwise needs a negative step.
    """

    start: int
    end: int
    step: Step

    @classmethod
    def build(cls, start: int, end: int, step: Step = 1) -> "BlockRange":
        if start < end:
            if not step > 0:
                raise InvalidStepDirection(start, end, step)
        elif start > end:
            if step >= 1:
                step = -1
            elif not step < 0:
                raise InvalidStepDirection(start, end, step)
        return cls(start=start, end=end, step=step)

    @property
    def ascending(self) -> bool:
        return self.start < self.end

    def heights(self) -> Iterator[Step]:
        height: Step = self.start
        if self.ascending:
            while height < self.end:
                yield height
                height += self.step
        else:
            while height > self.end:
                yield height
                height += self.step
