# composition/model.py
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
from composition.validator import Observer, Validator
from timeline.builder import Timeline, build_timeline
from timeline.motion import MotionTimeline, detect_motion

Voice = Tuple[int, ...]

@dataclass(frozen=True)
class Composition:
    """A collection of voices, each a time-indexed tuple of MIDI note numbers (middle C is 60).

    The composition is valid if no two voices hold a banned interval from one step to the next.
    Loops are modelled by the loader appending each voice's first note to its end.
    """
    voices: Tuple[Voice, ...]

    def __post_init__(self):
        if not self.voices:
            raise ValueError("a composition needs at least one voice")

    @classmethod
    def from_pitches(cls, voices: Iterable[Iterable[int]]) -> "Composition":
        return cls(tuple(tuple(int(p) for p in v) for v in voices))

    @classmethod
    def create(cls, voices: Iterable[Iterable[int]], observer: Optional[Observer] = None) -> "Composition":
        composition = cls.from_pitches(voices)
        composition.validate(observer)
        return composition

    @property
    def length(self) -> int:
        return len(self.voices[0])

    @property
    def timeline(self) -> Timeline:
        return build_timeline(self.voices)

    @property
    def motion_timeline(self) -> MotionTimeline:
        return detect_motion(self.timeline)

    def validator(self, observer: Optional[Observer] = None) -> Validator:
        return Validator(self.voices, observer)

    def validate(self, observer: Optional[Observer] = None):
        self.validator(observer).validate()

    def validate_length(self):
        self.validator().validate_length()

    def validate_motion(self, observer: Optional[Observer] = None):
        self.validator(observer).validate_motion()
