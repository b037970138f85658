import sys
from pathlib import Path


def _add_src_to_path() -> None:
    """Make ``lineasm`` and ``cli`` importable without installation."""
    src_path = Path(__file__).resolve().parents[1] / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()
