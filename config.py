# ========================= config.py =========================
import os
from dataclasses import dataclass, field
from typing import Optional

def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() == "true"

@dataclass
class LoaderConfig:
    loop: bool = True              # append each voice's first note to its end
    track: Optional[int] = None    # None: first track that has notes
    mode: str = "sequence"         # or "melody" / "bass"

@dataclass
class LogConfig:
    debug: bool = field(default_factory=lambda: _env_flag("HMMM_DEBUG"))
    log_file: bool = True
    log_dir: Optional[str] = field(default_factory=lambda: os.environ.get("HMMM_LOG_DIR"))

@dataclass
class ReportConfig:
    color: bool = field(default_factory=lambda: "NO_COLOR" not in os.environ)

@dataclass
class AppConfig:
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    log: LogConfig = field(default_factory=LogConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
