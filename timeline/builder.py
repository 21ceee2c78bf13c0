# timeline/builder.py
from typing import List, Sequence
from composition.interval import interval
from timeline.matrix import PairMatrix

Timeline = List[PairMatrix[int]]

def build_timeline(voices: Sequence[Sequence[int]]) -> Timeline:
    """Element t holds the interval between voice i and voice j at time t, for every i < j.

    The step count comes from the first voice; a shorter voice surfaces here as IndexError.
    """
    n = len(voices)
    length = len(voices[0]) if voices else 0
    timeline: Timeline = []
    for t in range(length):
        entries = {}
        for i in range(n):
            note = voices[i][t]
            for j in range(i + 1, n):
                entries[(i, j)] = interval(note, voices[j][t])
        timeline.append(PairMatrix(n, entries))
    return timeline
