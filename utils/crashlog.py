# utils/crashlog.py
import os, sys, faulthandler, datetime, traceback, threading

_fault_file = None

def log_dir() -> str:
    d = os.environ.get("HMMM_LOG_DIR") or os.path.join(os.getcwd(), "logs")
    os.makedirs(d, exist_ok=True)
    return d

def _new_log_path(prefix: str = "crash") -> str:
    stamp = datetime.datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    return os.path.join(log_dir(), f"{prefix}-{stamp}.txt")

def _write_traceback(prefix: str, header: str, exc: BaseException):
    with open(_new_log_path(prefix), "w", encoding="utf-8") as out:
        out.write(header + "\n")
        out.write("=" * 60 + "\n")
        traceback.print_exception(type(exc), exc, exc.__traceback__, file=out)

def setup_crashlog():
    global _fault_file
    try:
        if _fault_file is None:
            _fault_file = open(_new_log_path("native"), "w", encoding="utf-8")
        faulthandler.enable(_fault_file, all_threads=True)
    except OSError:
        _fault_file = None

    def _hook(exc_type, exc, tb):
        try:
            with open(_new_log_path("crash"), "w", encoding="utf-8") as out:
                out.write("UNCAUGHT EXCEPTION\n")
                out.write("=" * 60 + "\n")
                traceback.print_exception(exc_type, exc, tb, file=out)
        finally:
            sys.__excepthook__(exc_type, exc, tb)
    sys.excepthook = _hook

    def _thread_hook(args):
        _hook(args.exc_type, args.exc_value, args.exc_traceback)
    threading.excepthook = _thread_hook

def async_exception_handler(loop, context):
    """Event loop handler: dump unhandled task errors next to the other crash files."""
    exc = context.get("exception")
    try:
        if exc is not None:
            _write_traceback("async", "ASYNCIO EXCEPTION", exc)
        else:
            with open(_new_log_path("async"), "w", encoding="utf-8") as out:
                out.write("ASYNCIO EXCEPTION\n")
                out.write("=" * 60 + "\n")
                out.write(str(context.get("message")))
    finally:
        loop.default_exception_handler(context)

def log_exception(title: str, exc: BaseException):
    with open(_new_log_path("error"), "w", encoding="utf-8") as out:
        out.write(f"[{title}] {type(exc).__name__}: {exc}\n")
        out.write("Traceback:\n")
        out.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
