"""Monitor types and the factory that creates monitors by type or by name."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable

from .errors import FswException, Status
from .poll_monitor import EventCallback, PollMonitor


class MonitorType(IntEnum):
    """Known monitor kinds; SYSTEM_DEFAULT picks the platform default."""

    SYSTEM_DEFAULT = 0
    FSEVENTS = 1
    KQUEUE = 2
    INOTIFY = 3
    WINDOWS = 4
    POLL = 5
    FEN = 6


_DEFAULT_TYPE = MonitorType.POLL

_TYPES_BY_NAME: dict[str, MonitorType] = {
    "poll_monitor": MonitorType.POLL,
}


def _unsupported() -> FswException:
    return FswException("Unsupported monitor.", Status.UNKNOWN_MONITOR_TYPE)


def create_monitor(
    monitor_type, paths: Iterable, callback: EventCallback, context: Any = None
) -> PollMonitor:
    """Create a monitor of ``monitor_type`` watching ``paths``.

    Raises FswException with Status.UNKNOWN_MONITOR_TYPE when the type is not
    available.
    """
    try:
        kind = MonitorType(monitor_type)
    except ValueError:
        raise _unsupported() from None

    if kind is MonitorType.SYSTEM_DEFAULT:
        kind = _DEFAULT_TYPE

    if kind is MonitorType.POLL:
        return PollMonitor(list(paths), callback, context)

    raise _unsupported()


def create_monitor_by_name(
    name: str, paths: Iterable, callback: EventCallback, context: Any = None
) -> PollMonitor | None:
    """Create a monitor whose type is called ``name``; None if no such type exists."""
    kind = _TYPES_BY_NAME.get(name)
    if kind is None:
        return None
    return create_monitor(kind, paths, callback, context)


def get_types() -> list[str]:
    """Return the names of the available monitor types, in sorted order."""
    return sorted(_TYPES_BY_NAME)


def exists_type(name: str) -> bool:
    """Tell whether a monitor type called ``name`` is available."""
    return name in _TYPES_BY_NAME