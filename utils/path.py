# utils/path.py
from importlib.resources import files

def resource_path(package: str, name: str) -> str:
    """
    Filesystem path of a data file shipped inside a package (e.g. the demo stubs).
    Usage: resource_path("stubs", "voice1.mid")
    """
    return str(files(package) / name)

def demo_paths(count: int = 4) -> list[str]:
    return [resource_path("stubs", f"voice{i}.mid") for i in range(1, count + 1)]
