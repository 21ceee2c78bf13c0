# timeline/motion.py
from typing import AbstractSet, List
from composition.interval import BANNED_INTERVALS
from timeline.builder import Timeline
from timeline.matrix import PairMatrix

MotionTimeline = List[PairMatrix[bool]]

def detect_motion(timeline: Timeline, banned: AbstractSet[int] = BANNED_INTERVALS) -> MotionTimeline:
    """Entry (t, i, j) is True when voices i and j hold the same banned interval at t and t+1.

    Interval classes are compared, not pitches, so octave displacement and held notes count.
    The last step has no successor and is all False.
    """
    out: MotionTimeline = []
    for t, matrix in enumerate(timeline):
        nxt = timeline[t + 1] if t + 1 < len(timeline) else None
        entries = {}
        for pair, iv in matrix.items():
            entries[pair] = nxt is not None and iv in banned and iv == nxt[pair]
        out.append(PairMatrix(matrix.size, entries))
    return out
