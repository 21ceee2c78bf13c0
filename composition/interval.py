# composition/interval.py

# unison/octave, perfect fourth, perfect fifth
BANNED_INTERVALS = frozenset({0, 5, 7})

def interval(a: int, b: int) -> int:
    """Pitch-class distance from b up to a, always in [0, 11]."""
    return ((a - b) % 12 + 12) % 12
