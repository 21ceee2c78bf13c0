# composition/validator.py
import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence
from composition.errors import LengthMismatchError, ParallelMotionError, Violation
from composition.interval import BANNED_INTERVALS
from timeline.builder import Timeline, build_timeline
from timeline.motion import MotionTimeline, detect_motion

# Called with the timeline and motion timeline of every validation run.
Observer = Callable[[Timeline, MotionTimeline], None]

class ValidationState(Enum):
    UNVALIDATED = "unvalidated"
    LENGTH_CHECKED = "length_checked"
    MOTION_CHECKED = "motion_checked"
    VALID = "valid"
    FAILED = "failed"

def find_violations(motion: MotionTimeline) -> List[Violation]:
    return [Violation(t, i, j)
            for t, matrix in enumerate(motion)
            for (i, j), flagged in matrix.items()
            if flagged]

class Validator:
    """Length check, then motion check. Each step raises on failure.

    Nothing is cached between runs; derived matrices are rebuilt from the voices every time.
    """
    def __init__(self, voices: Sequence[Sequence[int]], observer: Optional[Observer] = None):
        self.voices = voices
        self.observer = observer
        self.state = ValidationState.UNVALIDATED

    @property
    def length(self) -> int:
        return len(self.voices[0])

    def validate_length(self):
        expected = self.length
        mismatches = [(i, len(v)) for i, v in enumerate(self.voices) if len(v) != expected]
        if mismatches:
            self.state = ValidationState.FAILED
            logging.debug("Length check failed: expected=%d mismatches=%s", expected, mismatches)
            raise LengthMismatchError(expected, mismatches)
        self.state = ValidationState.LENGTH_CHECKED

    def validate_motion(self):
        timeline = build_timeline(self.voices)
        motion = detect_motion(timeline, BANNED_INTERVALS)
        if self.observer is not None:
            self.observer(timeline, motion)
        violations = find_violations(motion)
        self.state = ValidationState.MOTION_CHECKED
        if violations:
            self.state = ValidationState.FAILED
            logging.debug("Motion check found %d violation(s)", len(violations))
            raise ParallelMotionError(violations)
        self.state = ValidationState.VALID

    def validate(self):
        self.state = ValidationState.UNVALIDATED
        self.validate_length()
        self.validate_motion()
