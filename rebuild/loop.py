import logging
import queue
from pathlib import Path
from typing import Callable, Optional

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver
from watchdog.observers.polling import PollingObserver

from .commands import CommandPlan
from .errors import WatchSetupError
from .handlers import REMOVED, TargetFileHandler
from .runner import run_plan
from .utils import wait_for_file


def arm(target: Path, events: "queue.Queue[str]", use_polling: bool = False) -> BaseObserver:
    """Start an observer that feeds events for ``target`` into ``events``."""
    if not target.is_file():
        raise WatchSetupError(f"Cannot watch {target}: file does not exist")

    observer = PollingObserver() if use_polling else Observer()
    handler = TargetFileHandler(target, events)
    try:
        observer.schedule(handler, str(target.parent), recursive=False)
        observer.start()
    except OSError as e:
        raise WatchSetupError(f"Cannot watch {target}: {e}") from e
    return observer


def drain(events: "queue.Queue[str]") -> int:
    count = 0
    while True:
        try:
            events.get_nowait()
        except queue.Empty:
            return count
        count += 1


def wait_for_change(
    target: Path, events: "queue.Queue[str]", observer: BaseObserver, poll_s: float = 1.0
) -> None:
    """Block until the target changes.

    Everything already queued is folded into this one change. Raises
    WatchSetupError if the file is gone or the observer thread has died.
    """
    while True:
        try:
            kind = events.get(timeout=poll_s)
        except queue.Empty:
            if not observer.is_alive():
                raise WatchSetupError(f"Watch on {target} stopped unexpectedly")
            continue
        break

    extra = drain(events)
    if extra:
        logging.debug(f"Folded {extra} queued event(s) into one run")

    if not wait_for_file(target):
        raise WatchSetupError(f"Target file removed: {target}")
    if kind == REMOVED:
        logging.info(f"{target} was replaced")


def watch(
    target: Path,
    plan: CommandPlan,
    use_polling: bool = False,
    once: bool = False,
    runner: Callable[[CommandPlan], Optional[bool]] = run_plan,
    events: Optional["queue.Queue[str]"] = None,
) -> Optional[bool]:
    """Run ``plan`` every time ``target`` is modified.

    Never returns unless ``once`` is set, in which case the result of the
    single run is returned. The observer is always stopped on the way out.
    """
    if events is None:
        events = queue.Queue()
    observer = arm(target, events, use_polling)
    logging.info(f"Watching: {target}")
    logging.info(f"Observer: {type(observer).__name__}")

    try:
        while True:
            wait_for_change(target, events, observer)
            logging.info(f"{target.name} changed; running {plan.describe()}")
            result = runner(plan)
            if once:
                return result
            if not wait_for_file(target):
                raise WatchSetupError(f"Target file removed: {target}")
    finally:
        observer.stop()
        observer.join()
