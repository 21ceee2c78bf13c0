# app.py
import asyncio, logging, sys
from pprint import pformat
from typing import List, Optional, Sequence
from config import AppConfig, ReportConfig
from composition.errors import CompositionError, LengthMismatchError, ParallelMotionError
from composition.model import Composition
from composition.validator import Observer
from timeline.builder import Timeline
from timeline.motion import MotionTimeline
from voices.loader import VoiceLoadError, load_composition
from utils.crashlog import async_exception_handler, log_exception

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_FAILED = 2

GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"

def log_matrices(timeline: Timeline, motion: MotionTimeline):
    """Observer that dumps the intermediate matrices at DEBUG level."""
    logging.debug("timeline\n%s", pformat([dict(m.items()) for m in timeline]))
    logging.debug("motion timeline\n%s", pformat([dict(m.items()) for m in motion]))

class Report:
    def __init__(self, cfg: ReportConfig):
        self.cfg = cfg

    def _c(self, color: str, text: str) -> str:
        return f"{color}{text}{RESET}" if self.cfg.color else text

    def success(self) -> str:
        return f"\n{self._c(GREEN, 'Success')}: No parallel motion detected!"

    def failure(self, err: CompositionError) -> str:
        lines: List[str] = []
        if isinstance(err, LengthMismatchError):
            lines.append(f"{self._c(RED, 'Error')}: Voices are not the same length "
                         f"(expected {err.expected} notes)")
            lines += [f"  voice {i + 1}: {n} notes" for i, n in err.mismatches]
        elif isinstance(err, ParallelMotionError):
            lines.append(f"{self._c(RED, 'Error')}: {len(err.violations)} parallel motion "
                         f"violation(s) found")
            lines += [f"  {v.message}" for v in err.violations]
        else:
            lines.append(f"{self._c(RED, 'Error')}: {err}")
        return "\n".join(lines)

    def load_failure(self, err: VoiceLoadError) -> str:
        return f"{self._c(YELLOW, 'Load failed')}: {err.path}: {err.reason}"

class App:
    def __init__(self, cfg: AppConfig, out=None, err=None):
        self.cfg = cfg
        self.report = Report(cfg.report)
        self._out = out
        self._err = err
        self.composition: Optional[Composition] = None

    def _print(self, text: str, error: bool = False):
        stream = (self._err or sys.stderr) if error else (self._out or sys.stdout)
        print(text, file=stream)

    def observer(self) -> Optional[Observer]:
        return log_matrices if self.cfg.log.debug else None

    async def _load(self, paths: Sequence[str]) -> Composition:
        # asyncio.run gives each check its own loop
        asyncio.get_running_loop().set_exception_handler(async_exception_handler)
        return await load_composition(paths, self.cfg.loader, self.observer())

    def check(self, paths: Sequence[str]) -> int:
        """Load every voice, validate, and print the outcome. Returns the exit status."""
        logging.info("Checking %d voice file(s)", len(paths))
        try:
            self.composition = asyncio.run(self._load(paths))
        except VoiceLoadError as e:
            try:
                log_exception("load_voices", e)
            except OSError as log_err:
                logging.warning("Could not write error log: %s", log_err)
            logging.error("Voice load failed: %s", e)
            self._print(self.report.load_failure(e), error=True)
            return EXIT_LOAD_FAILED
        except CompositionError as e:
            logging.info("Composition rejected: %s", type(e).__name__)
            self._print(self.report.failure(e), error=True)
            return EXIT_INVALID
        self._print(self.report.success())
        return EXIT_OK
