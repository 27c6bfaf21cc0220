import pathlib
from typing import Optional

_log_file: Optional[pathlib.Path] = None
_verbose = False


def setup(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Start a fresh run log (if given) and set verbosity."""
    global _log_file, _verbose
    _verbose = verbose
    _log_file = None
    if log_file:
        p = pathlib.Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("", encoding="utf-8")
        _log_file = p


def log(msg: str) -> None:
    print(msg)
    if _log_file:
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(msg + "\n")


def debug(msg: str) -> None:
    if _verbose:
        log(msg)
