"""Shared test fixtures and helpers for the hmmm tests."""

import os
import sys
from pathlib import Path
from typing import List, Sequence

# Ensure the project root is on the path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

import mido

from composition.errors import LengthMismatchError, ParallelMotionError, Violation
from composition.interval import BANNED_INTERVALS, interval
from composition.model import Composition
from composition.validator import ValidationState, Validator
from notes.model import Note
from notes.reduction import BassReduction, MelodyReduction, SequenceReduction, make_reduction
from timeline.builder import build_timeline
from timeline.matrix import PairMatrix
from timeline.motion import detect_motion

TICKS = 480

# Four voices with no held banned interval, wrap step included (same as stubs/).
CLEAN_VOICES = [
    [72, 74, 76, 77],
    [64, 65, 67, 69],
    [57, 59, 60, 64],
    [48, 53, 52, 50],
]


def looped(voices: Sequence[Sequence[int]]) -> List[List[int]]:
    """Append each voice's first pitch, as the loader does."""
    return [list(v) + [v[0]] for v in voices]


def pair_from_intervals(intervals: Sequence[int], base: int = 48) -> List[List[int]]:
    """Two voices whose interval at step t is intervals[t] (upper voice first)."""
    lower = [base + 2 * t for t in range(len(intervals))]
    upper = [low + iv + 12 for low, iv in zip(lower, intervals)]
    return [upper, lower]


def write_voice_midi(path, pitches: Sequence[int], chords: Sequence[Sequence[int]] = (),
                     conductor: bool = False) -> str:
    """Write a one-voice MIDI file with one quarter note per pitch.

    `chords` adds extra pitches sounding with the note at the same index.
    `conductor` writes a format 1 file whose first track only carries the tempo.
    """
    mid = mido.MidiFile(type=1 if conductor else 0, ticks_per_beat=TICKS)
    if conductor:
        meta = mido.MidiTrack()
        meta.append(mido.MetaMessage('set_tempo', tempo=500000, time=0))
        mid.tracks.append(meta)
    track = mido.MidiTrack()
    for idx, pitch in enumerate(pitches):
        extra = list(chords[idx]) if idx < len(chords) else []
        group = [pitch] + extra
        for p in group:
            track.append(mido.Message('note_on', note=p, velocity=64, time=0))
        for k, p in enumerate(group):
            track.append(mido.Message('note_off', note=p, velocity=64, time=TICKS if k == 0 else 0))
    mid.tracks.append(track)
    mid.save(str(path))
    return str(path)


def write_voices(directory, voices: Sequence[Sequence[int]]) -> List[str]:
    return [write_voice_midi(os.path.join(str(directory), f"voice{i + 1}.mid"), v)
            for i, v in enumerate(voices)]
