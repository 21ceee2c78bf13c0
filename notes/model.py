# notes/model.py
from dataclasses import dataclass

@dataclass(frozen=True)
class Note:
    pitch: int      # MIDI note number
    start: int      # ticks
    end: int        # ticks
    velocity: int
    channel: int
