import os
import logging
import queue
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .utils import same_path


MODIFIED = "modified"
REMOVED = "removed"


class TargetFileHandler(FileSystemEventHandler):
    """Forward events for a single file onto a queue.

    The observer watches the file's parent directory, so everything else that
    happens there is dropped here. No work is done on the observer thread.
    """

    def __init__(self, target: Path, events: "queue.Queue[str]") -> None:
        super().__init__()
        self.target = target
        self.events = events

    def _is_target(self, path) -> bool:
        return same_path(Path(os.fsdecode(path)), self.target)

    def _emit(self, kind: str, event: FileSystemEvent) -> None:
        logging.debug(f"{event.event_type} event on {self.target}")
        self.events.put(kind)

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory or not self._is_target(event.src_path):
            return
        self._emit(MODIFIED, event)

    def on_created(self, event: FileSystemEvent) -> None:
        if event.is_directory or not self._is_target(event.src_path):
            return
        self._emit(MODIFIED, event)

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        # Editors that save atomically rename a temp file over the target
        dest = getattr(event, "dest_path", "")
        if dest and self._is_target(dest):
            self._emit(MODIFIED, event)
        elif self._is_target(event.src_path):
            self._emit(REMOVED, event)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if event.is_directory or not self._is_target(event.src_path):
            return
        self._emit(REMOVED, event)
