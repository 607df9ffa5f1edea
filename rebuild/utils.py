import os
import time
from pathlib import Path

from .errors import WatchSetupError


def same_path(a: Path, b: Path) -> bool:
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))


def resolve_target(path: Path) -> Path:
    """Return the real path of a file that can be watched.

    Symlinks are followed so the observer watches the directory that actually
    receives the writes.

    Raises WatchSetupError if it is missing or not a regular file.
    """
    target = path.expanduser().resolve()
    if not target.exists():
        raise WatchSetupError(f"No such file: {target}")
    if not target.is_file():
        raise WatchSetupError(f"Not a regular file: {target}")
    return target


def wait_for_file(path: Path, retries: int = 4, sleep_s: float = 0.25) -> bool:
    """Wait briefly for ``path`` to exist.

    A save that renames the old file away and writes a new one shows up as a
    removal followed by a creation; this gives the new file time to appear.
    """
    for _ in range(max(1, retries)):
        if path.exists():
            return True
        time.sleep(sleep_s)
    return path.exists()
