"""
Reader-writer lock guarding the in-memory store.

One lock covers every collection. Readers share it; a writer holds it alone.
Once a writer is waiting, new readers queue behind it so a steady stream of
reads cannot starve mutations. Not reentrant.
"""

import threading
from contextlib import contextmanager


class ReadWriteLock:
    """Many concurrent readers or exactly one writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        """
        Shared section.
        Usage:
            with lock.read_locked():
                ...scan...
        """
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        """Exclusive section."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
