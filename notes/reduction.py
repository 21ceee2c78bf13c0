# ========================= notes/reduction.py =========================
from typing import Dict, List
from notes.model import Note

class ReductionStrategy:
    """Turns the notes of one voice file into a single pitch line."""
    def apply(self, notes: List[Note]) -> List[int]:
        raise NotImplementedError

def _by_onset(notes: List[Note]) -> Dict[int, List[Note]]:
    buckets: Dict[int, List[Note]] = {}
    for n in sorted(notes, key=lambda n: n.start):
        buckets.setdefault(n.start, []).append(n)
    return buckets

class SequenceReduction(ReductionStrategy):
    """Every note in onset order, chords included."""
    def apply(self, notes: List[Note]) -> List[int]:
        return [n.pitch for n in sorted(notes, key=lambda n: (n.start, n.pitch))]

class MelodyReduction(ReductionStrategy):
    """Highest pitch per onset."""
    def apply(self, notes: List[Note]) -> List[int]:
        return [max(arr, key=lambda x: x.pitch).pitch for arr in _by_onset(notes).values()]

class BassReduction(ReductionStrategy):
    """Lowest pitch per onset."""
    def apply(self, notes: List[Note]) -> List[int]:
        return [min(arr, key=lambda x: x.pitch).pitch for arr in _by_onset(notes).values()]

REDUCTIONS = {
    "sequence": SequenceReduction,
    "melody": MelodyReduction,
    "bass": BassReduction,
}

def make_reduction(mode: str) -> ReductionStrategy:
    try:
        return REDUCTIONS[mode]()
    except KeyError:
        raise ValueError(f"Unknown voice mode: {mode}") from None
