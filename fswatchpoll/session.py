"""Monitoring sessions: configure a monitor, start it and stop it."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Any, Callable

from .errors import FswException, Status
from .events import Event
from .filters import EventTypeFilter, MonitorFilter
from .monitor_factory import MonitorType, create_monitor
from .poll_monitor import PollMonitor

SessionCallback = Callable[[list, Any], None]

_state = threading.local()


def _set_last_error(code) -> None:
    try:
        _state.last_error = Status(code)
    except ValueError:
        _state.last_error = int(code)


def last_error():
    """Return the status of the last session call made by the calling thread."""
    return getattr(_state, "last_error", Status.OK)


def _fail(code: Status, message: str) -> FswException:
    _set_last_error(code)
    return FswException(message, code)


@dataclass(frozen=True)
class _CallbackContext:
    session: "Session"
    callback: SessionCallback
    data: Any


def _callback_proxy(events: list[Event], context: _CallbackContext | None) -> None:
    if context is None:
        raise FswException("Callback context is missing.", Status.MISSING_CONTEXT)
    context.callback(list(events), context.data)


class Session:
    """A monitoring session; settings take effect the next time it is started."""

    def __init__(self, monitor_type=MonitorType.SYSTEM_DEFAULT):
        self.monitor_type = monitor_type
        self._paths: list[str] = []
        self._monitor: PollMonitor | None = None
        self._callback: SessionCallback | None = None
        self._data: Any = None
        self._latency = 0.0
        self._allow_overflow = False
        self._recursive = False
        self._directory_only = False
        self._follow_symlinks = False
        self._filters: list[MonitorFilter] = []
        self._event_type_filters: list[EventTypeFilter] = []
        self._properties: dict[str, str] = {}
        self._destroyed = False

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info) -> None:
        if self._destroyed:
            return
        if self._monitor is not None and self._monitor.is_running():
            self._monitor.stop()
            return
        self.destroy()

    def _check_alive(self) -> None:
        if self._destroyed:
            raise _fail(Status.SESSION_UNKNOWN, "The session has been destroyed.")

    def _ok(self) -> None:
        _set_last_error(Status.OK)

    @property
    def paths(self) -> list[str]:
        """The paths to watch."""
        return list(self._paths)

    @property
    def properties(self) -> dict[str, str]:
        """The monitor properties added to the session."""
        return dict(self._properties)

    def add_path(self, path) -> None:
        """Add a path to watch; a session needs at least one."""
        self._check_alive()
        if path is None:
            raise _fail(Status.INVALID_PATH, "Invalid path.")
        self._paths.append(os.fspath(path))
        self._ok()

    def add_property(self, name, value) -> None:
        """Add or replace a monitor property."""
        self._check_alive()
        if name is None or value is None:
            raise _fail(Status.INVALID_PROPERTY, "Invalid property.")
        self._properties[str(name)] = str(value)
        self._ok()

    def set_callback(self, callback, data=None) -> None:
        """Set the function called as ``callback(events, data)`` with new events."""
        self._check_alive()
        if callback is None or not callable(callback):
            raise _fail(Status.INVALID_CALLBACK, "Invalid callback.")
        self._callback = callback
        self._data = data
        self._ok()

    def set_allow_overflow(self, allow_overflow) -> None:
        """Let the monitor report overflows as change events."""
        self._check_alive()
        self._allow_overflow = bool(allow_overflow)
        self._ok()

    def set_latency(self, latency) -> None:
        """Set the monitor latency in seconds; zero keeps the monitor default."""
        self._check_alive()
        if latency < 0:
            raise _fail(Status.INVALID_LATENCY, f"Invalid latency: {latency}")
        self._latency = float(latency)
        self._ok()

    def set_recursive(self, recursive) -> None:
        """Choose whether watched directories are scanned recursively."""
        self._check_alive()
        self._recursive = bool(recursive)
        self._ok()

    def set_directory_only(self, directory_only) -> None:
        """Choose whether only directories are watched in a recursive scan."""
        self._check_alive()
        self._directory_only = bool(directory_only)
        self._ok()

    def set_follow_symlinks(self, follow_symlinks) -> None:
        """Choose whether symbolic links are followed."""
        self._check_alive()
        self._follow_symlinks = bool(follow_symlinks)
        self._ok()

    def add_event_type_filter(self, event_type: EventTypeFilter) -> None:
        """Add an event type filter."""
        self._check_alive()
        self._event_type_filters.append(event_type)
        self._ok()

    def add_filter(self, monitor_filter: MonitorFilter) -> None:
        """Add a path filter."""
        self._check_alive()
        self._filters.append(monitor_filter)
        self._ok()

    def _create_monitor(self) -> None:
        if self._callback is None:
            raise _fail(Status.CALLBACK_NOT_SET, "The callback has not been set.")
        if self._monitor is not None:
            raise _fail(Status.MONITOR_ALREADY_EXISTS, "The session already has a monitor.")
        if not self._paths:
            raise _fail(Status.PATHS_NOT_SET, "The paths to watch have not been set.")
        context = _CallbackContext(self, self._callback, self._data)
        self._monitor = create_monitor(
            self.monitor_type, self._paths, _callback_proxy, context
        )

    def start_monitor(self) -> None:
        """Create the monitor if needed, configure it and run it.

        The call blocks until the monitor is stopped from another thread.
        """
        self._check_alive()
        try:
            if self._monitor is None:
                self._create_monitor()
            monitor = self._monitor
            if monitor.is_running():
                raise _fail(Status.MONITOR_ALREADY_RUNNING, "The monitor is already running.")

            monitor.allow_overflow = self._allow_overflow
            monitor.filters = list(self._filters)
            monitor.event_type_filters = list(self._event_type_filters)
            monitor.follow_symlinks = self._follow_symlinks
            if self._latency:
                monitor.latency = self._latency
            monitor.recursive = self._recursive
            monitor.directory_only = self._directory_only

            monitor.start()
        except FswException as exc:
            _set_last_error(exc.code)
            raise
        self._ok()

    def stop_monitor(self) -> None:
        """Stop a running monitor; does nothing if it is not running."""
        self._check_alive()
        if self._monitor is None:
            raise _fail(Status.UNKNOWN_MONITOR_TYPE, "The session has no monitor.")
        if self._monitor.is_running():
            self._monitor.stop()
        self._ok()

    def is_running(self) -> bool:
        """Tell whether the session has a monitor that is running."""
        self._check_alive()
        return self._monitor is not None and self._monitor.is_running()

    def destroy(self) -> None:
        """Release the session; it cannot be used afterwards."""
        self._check_alive()
        if self._monitor is not None:
            if self._monitor.is_running():
                raise _fail(
                    Status.MONITOR_ALREADY_RUNNING, "Cannot destroy a running session."
                )
            self._monitor.context = None
            self._monitor = None
        self._destroyed = True
        self._ok()