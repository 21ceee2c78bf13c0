# composition/errors.py
from dataclasses import dataclass
from typing import List, Sequence, Tuple

@dataclass(frozen=True)
class Violation:
    time: int
    first: int      # voice index, 0-based
    second: int

    @property
    def message(self) -> str:
        return (f"Parallel motion detected at time {self.time} "
                f"between voices {self.first + 1} and {self.second + 1}")

class CompositionError(Exception):
    """Base class for problems found while validating a composition."""

class LengthMismatchError(CompositionError):
    def __init__(self, expected: int, mismatches: Sequence[Tuple[int, int]]):
        self.expected = expected
        self.mismatches: List[Tuple[int, int]] = list(mismatches)
        lines = [f"voice {i + 1} has {n}" for i, n in self.mismatches]
        super().__init__(f"Voices are not the same length (expected {expected} notes): "
                         + ", ".join(lines))

class ParallelMotionError(CompositionError):
    def __init__(self, violations: Sequence[Violation]):
        self.violations: List[Violation] = list(violations)
        super().__init__("\n".join(v.message for v in self.violations))
