"""A monitor that detects changes by periodically stat-ing the watched paths."""

from __future__ import annotations

import os
import stat
import sys
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .errors import FswException, Status
from .events import Event, EventFlag
from .filters import EventTypeFilter, MonitorFilter, accept_path
from .log import flogf
from .path_utils import get_directory_entries, stat_path

PathVisitor = Callable[[str, os.stat_result], bool]
EventCallback = Callable[[list, Any], None]


def _elog(func: str, fmt: str, *args) -> None:
    flogf(sys.stderr, "%s: ", func)
    flogf(sys.stderr, fmt, *args)


@dataclass(frozen=True)
class WatchedFileInfo:
    """Modification and status-change times of a tracked file, in seconds."""

    mtime: int
    ctime: int


def _file_info(st: os.stat_result) -> WatchedFileInfo:
    return WatchedFileInfo(int(st.st_mtime), int(st.st_ctime))


class PollMonitor:
    """stat()-based monitor that compares successive scans of the watched paths."""

    MIN_POLL_LATENCY = 1.0

    def __init__(self, paths: Iterable, callback: EventCallback, context: Any = None):
        self.paths = [os.fspath(p) for p in paths]
        self.callback = callback
        self.context = context
        self.latency = 1.0
        self.recursive = False
        self.follow_symlinks = False
        self.directory_only = False
        self.allow_overflow = False
        self.filters: list[MonitorFilter] = []
        self.event_type_filters: list[EventTypeFilter] = []
        self.properties: dict[str, str] = {}

        self._previous: dict[str, WatchedFileInfo] = {}
        self._new: dict[str, WatchedFileInfo] = {}
        self._events: list[Event] = []
        self._curr_time = int(time.time())
        self._stop_event = threading.Event()
        self._state_lock = threading.Lock()
        self._running = False

    def _initial_scan_callback(self, path: str, st: os.stat_result) -> bool:
        if path in self._previous:
            return False
        self._previous[path] = _file_info(st)
        return True

    def _intermediate_scan_callback(self, path: str, st: os.stat_result) -> bool:
        if path in self._new:
            return False

        info = _file_info(st)
        self._new[path] = info

        previous = self._previous.pop(path, None)
        if previous is None:
            self._events.append(Event(path, self._curr_time, (EventFlag.Created,)))
            return True

        flags = []
        if info.mtime > previous.mtime:
            flags.append(EventFlag.Updated)
        if info.ctime > previous.ctime:
            flags.append(EventFlag.AttributeModified)
        if flags:
            self._events.append(Event(path, self._curr_time, tuple(flags)))
        return True

    def _scan(self, path: str, visitor: PathVisitor) -> None:
        try:
            try:
                link_status = os.lstat(path)
            except FileNotFoundError:
                return

            if self.follow_symlinks and stat.S_ISLNK(link_status.st_mode):
                self._scan(os.readlink(path), visitor)
                return

            if not accept_path(path, self.filters):
                return

            st = stat_path(path, self.follow_symlinks)
            if st is None:
                return
            if not visitor(path, st):
                return
            if not self.recursive or not stat.S_ISDIR(st.st_mode):
                return

            for entry in get_directory_entries(path):
                self._scan(entry.path, visitor)
        except OSError as exc:
            _elog("scan", "Filesystem error: %s", str(exc))

    def collect_initial_data(self) -> None:
        """Record the current state of every watched path."""
        for path in self.paths:
            self._scan(path, self._initial_scan_callback)

    def collect_data(self) -> list[Event]:
        """Rescan the watched paths and return the changes since the last scan."""
        self._curr_time = int(time.time())
        self._events = []

        for path in self.paths:
            self._scan(path, self._intermediate_scan_callback)

        self._events.extend(
            Event(path, self._curr_time, (EventFlag.Removed,)) for path in self._previous
        )
        self._previous, self._new = self._new, {}

        events, self._events = self._events, []
        return events

    def _notify_events(self, events: list[Event]) -> None:
        allowed = {f.flag for f in self.event_type_filters}
        accepted = []
        for event in events:
            if allowed:
                flags = tuple(f for f in event.flags if f in allowed)
                if not flags:
                    continue
                if flags != event.flags:
                    event = Event(event.path, event.time, flags)
            accepted.append(event)
        if accepted:
            self.callback(accepted, self.context)

    def _run(self) -> None:
        self.collect_initial_data()
        while not self._stop_event.is_set():
            _elog("run", "Done scanning.\n")
            delay = max(self.latency, self.MIN_POLL_LATENCY)
            if self._stop_event.wait(delay):
                break
            events = self.collect_data()
            if events:
                self._notify_events(events)

    def start(self) -> None:
        """Run the monitor loop; blocks until stop() is called from another thread."""
        with self._state_lock:
            if self._running:
                raise FswException(
                    "Monitor is already running.", Status.MONITOR_ALREADY_RUNNING
                )
            self._running = True
            self._stop_event.clear()
        try:
            self._run()
        finally:
            with self._state_lock:
                self._running = False

    def stop(self) -> None:
        """Ask a running monitor loop to finish."""
        self._stop_event.set()

    def is_running(self) -> bool:
        """Tell whether the monitor loop is running."""
        with self._state_lock:
            return self._running