# main.py
import sys, os
sys.path.append(os.path.dirname(__file__))  # make config.py and friends importable when run as a script

import argparse
import logging, traceback
from typing import Optional, Sequence
from config import AppConfig, LoaderConfig, LogConfig, ReportConfig
from app import App
from notes.reduction import REDUCTIONS
from utils.crashlog import setup_crashlog, log_exception, log_dir
from utils.path import demo_paths

FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def _init_logging(cfg: LogConfig):
    root = logging.getLogger()
    if root.handlers:
        return

    logging.basicConfig(
        level=logging.DEBUG if cfg.debug else logging.WARNING,
        format=FMT,
        encoding="utf-8"
    )
    if not cfg.log_file:
        return
    from logging.handlers import RotatingFileHandler
    logs = cfg.log_dir or log_dir()
    os.makedirs(logs, exist_ok=True)
    fh = RotatingFileHandler(os.path.join(logs, "app.log"), maxBytes=2*1024*1024, backupCount=3, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(FMT))
    root.addHandler(fh)
    root.setLevel(logging.DEBUG)
    # the console handler keeps its own threshold
    root.handlers[0].setLevel(logging.DEBUG if cfg.debug else logging.WARNING)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hmmm", description="Detect parallel motion between MIDI voices")
    ap.add_argument('--debug', action='store_true', default=None, help="log the interval and motion matrices")
    ap.add_argument('--no-color', action='store_true')
    ap.add_argument('--no-log-file', action='store_true')
    sub = ap.add_subparsers(dest='command', required=True)

    def _loader_args(p):
        p.add_argument('--no-loop', action='store_true', help="do not treat the voices as a loop")
        p.add_argument('--track', type=int, default=None, help="track index to read from each file")
        p.add_argument('--mode', default='sequence', choices=sorted(REDUCTIONS))

    run = sub.add_parser('run', help="Run the program")
    run.add_argument('files', nargs='+', help="one MIDI file per voice")
    _loader_args(run)
    demo = sub.add_parser('demo', help="Check the bundled four-voice example")
    _loader_args(demo)
    return ap

def config_from_args(args: argparse.Namespace) -> AppConfig:
    cfg = AppConfig(
        loader=LoaderConfig(loop=not args.no_loop, track=args.track, mode=args.mode),
        log=LogConfig(log_file=not args.no_log_file),
        report=ReportConfig(),
    )
    if args.debug:
        cfg.log.debug = True
    if args.no_color:
        cfg.report.color = False
    return cfg

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)
    _init_logging(cfg.log)
    logging.info("hmmm %s", args.command)

    paths = demo_paths() if args.command == 'demo' else args.files
    return App(cfg).check(paths)

def cli():
    setup_crashlog()
    try:
        sys.exit(main())
    except Exception as e:
        try:
            log_exception("Top-level exception", e)
        except OSError:
            pass
        logging.error("Unhandled exception: %s", e, exc_info=True)
        print("Unexpected error, see logs/app.log and logs/error-*.txt")
        traceback.print_exc()
        sys.exit(1)

if __name__ == '__main__':
    cli()
