# voices/loader.py
import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Sequence
from config import LoaderConfig
from composition.model import Composition
from composition.validator import Observer
from midi.parser import parse_midi_to_notes
from notes.reduction import make_reduction

class VoiceLoadError(Exception):
    """A voice file could not be read or turned into notes."""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

async def _read(path: str) -> bytes:
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise VoiceLoadError(path, e.strerror or str(e)) from e

def voice_from_bytes(path: str, data: bytes, cfg: LoaderConfig) -> List[int]:
    """One voice per file; a loop repeats the first note at the end so the wrap step is checked."""
    try:
        notes = parse_midi_to_notes(data, cfg.track)
    except IndexError as e:
        raise VoiceLoadError(path, str(e)) from e
    except (OSError, EOFError, ValueError, KeyError) as e:
        raise VoiceLoadError(path, f"malformed MIDI data ({e})") from e
    pitches = make_reduction(cfg.mode).apply(notes)
    if not pitches:
        raise VoiceLoadError(path, "no notes found")
    if cfg.loop:
        pitches.append(pitches[0])
    logging.debug("Loaded voice %s: %d steps", path, len(pitches))
    return pitches

async def load_voices(paths: Sequence[str], cfg: Optional[LoaderConfig] = None) -> List[List[int]]:
    """Read every file concurrently, then parse. Any failure aborts the whole load."""
    cfg = cfg or LoaderConfig()
    buffers = await asyncio.gather(*(_read(p) for p in paths))
    return [voice_from_bytes(p, data, cfg) for p, data in zip(paths, buffers)]

async def load_composition(paths: Sequence[str], cfg: Optional[LoaderConfig] = None,
                           observer: Optional[Observer] = None) -> Composition:
    voices = await load_voices(paths, cfg)
    return Composition.create(voices, observer)
