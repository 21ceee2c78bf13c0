# midi/parser.py
import io
import mido
from typing import List, Optional, Union
from notes.model import Note

def _track_notes(track: mido.MidiTrack) -> List[Note]:
    tick = 0
    active = {}
    notes: List[Note] = []
    for msg in track:
        tick += msg.time
        if msg.is_meta:
            continue
        if msg.type == 'note_on' and msg.velocity > 0:
            active[(msg.channel, msg.note)] = (tick, msg.velocity)
        elif msg.type == 'note_off' or (msg.type == 'note_on' and msg.velocity == 0):
            key = (msg.channel, msg.note)
            if key in active:
                st, vel = active.pop(key)
                notes.append(Note(pitch=msg.note, start=st, end=tick, velocity=vel, channel=msg.channel))
    # close dangling
    for (ch, p), (st, vel) in active.items():
        notes.append(Note(pitch=p, start=st, end=tick, velocity=vel, channel=ch))
    notes.sort(key=lambda n: (n.start, n.pitch))
    return notes

def open_midi(source: Union[str, bytes]) -> mido.MidiFile:
    if isinstance(source, (bytes, bytearray)):
        return mido.MidiFile(file=io.BytesIO(source))
    return mido.MidiFile(source)

def parse_midi_to_notes(source: Union[str, bytes], track: Optional[int] = None) -> List[Note]:
    """Notes of a single track, ordered by onset.

    One voice per file is assumed. Without an explicit track index the first track holding
    any notes is used; conductor tracks with only tempo/meta events are skipped.
    """
    mid = open_midi(source)
    if track is not None:
        if not 0 <= track < len(mid.tracks):
            raise IndexError(f"track {track} out of range ({len(mid.tracks)} tracks)")
        notes = _track_notes(mid.tracks[track])
    else:
        notes = []
        for tr in mid.tracks:
            notes = _track_notes(tr)
            if notes:
                break
    return notes
