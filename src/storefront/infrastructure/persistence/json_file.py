"""Shared plumbing for the JSON-file repositories.

Every read-modify-write cycle on a data file runs under a ``FileMutex``:
a thread lock for callers inside this process plus an OS-level lock on
a sidecar ``<file>.lock`` for other processes sharing the data
directory (the CLI and a running server, for example). Writes go to a
temp file that is then swapped in with ``os.replace``; a crash never
leaves a half-written file behind.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from filelock import FileLock


class FileMutex:
    """Re-entrant lock on one data file, across threads and processes."""

    def __init__(self, path: Path) -> None:
        self._thread_lock = threading.RLock()
        self._file_lock = FileLock(f"{path}.lock")

    def __enter__(self) -> FileMutex:
        self._thread_lock.acquire()
        try:
            self._file_lock.acquire()
        except BaseException:
            self._thread_lock.release()
            raise
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            self._file_lock.release()
        finally:
            self._thread_lock.release()


_locks: dict[Path, FileMutex] = {}
_locks_guard = threading.Lock()


def lock_for(path: Path) -> FileMutex:
    key = path.resolve()
    with _locks_guard:
        if key not in _locks:
            _locks[key] = FileMutex(key)
        return _locks[key]


class JsonFile:

    def __init__(self, path: Path, empty: Any) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.lock = lock_for(path)
        self._empty = empty
        self._ensure_file()

    def read(self) -> Any:
        with self.lock:
            return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, data: Any) -> None:
        with self.lock:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(json.dumps(data, indent=2) + "\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise

    def _ensure_file(self) -> None:
        with self.lock:
            if not self.path.exists():
                self.write(self._empty)
