#!/usr/bin/env python3
"""
Tests for filtering watchdog events down to the watched file.
"""

import os
import queue
import sys
import unittest
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from rebuild.handlers import MODIFIED, REMOVED, TargetFileHandler


class TargetFileHandlerTest(unittest.TestCase):

    def setUp(self):
        self.dir = Path(os.path.abspath("some-dir"))
        self.target = self.dir / "foo.c"
        self.events = queue.Queue()
        self.handler = TargetFileHandler(self.target, self.events)

    def queued(self):
        out = []
        while not self.events.empty():
            out.append(self.events.get_nowait())
        return out

    def test_modified_target(self):
        self.handler.dispatch(FileModifiedEvent(str(self.target)))
        self.assertEqual(self.queued(), [MODIFIED])

    def test_other_file_ignored(self):
        self.handler.dispatch(FileModifiedEvent(str(self.dir / "foo.o")))
        self.handler.dispatch(FileCreatedEvent(str(self.dir / "foo.c.swp")))
        self.handler.dispatch(FileDeletedEvent(str(self.dir / "bar.c")))
        self.assertEqual(self.queued(), [])

    def test_directory_event_ignored(self):
        self.handler.dispatch(DirModifiedEvent(str(self.dir)))
        self.assertEqual(self.queued(), [])

    def test_created_counts_as_modification(self):
        self.handler.dispatch(FileCreatedEvent(str(self.target)))
        self.assertEqual(self.queued(), [MODIFIED])

    def test_atomic_save(self):
        self.handler.dispatch(FileMovedEvent(str(self.dir / ".foo.c.tmp"), str(self.target)))
        self.assertEqual(self.queued(), [MODIFIED])

    def test_moved_away(self):
        self.handler.dispatch(FileMovedEvent(str(self.target), str(self.dir / "foo.c~")))
        self.assertEqual(self.queued(), [REMOVED])

    def test_deleted(self):
        self.handler.dispatch(FileDeletedEvent(str(self.target)))
        self.assertEqual(self.queued(), [REMOVED])

    def test_bytes_paths(self):
        self.handler.dispatch(FileModifiedEvent(os.fsencode(str(self.target))))
        self.assertEqual(self.queued(), [MODIFIED])


if __name__ == "__main__":
    unittest.main()
