"""Change event flags and change events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from .errors import FswException, Status


class EventFlag(IntFlag):
    """Backend-agnostic change flags, each a power of two."""

    NoOp = 0
    PlatformSpecific = 1 << 0
    Created = 1 << 1
    Updated = 1 << 2
    Removed = 1 << 3
    Renamed = 1 << 4
    OwnerModified = 1 << 5
    AttributeModified = 1 << 6
    MovedFrom = 1 << 7
    MovedTo = 1 << 8
    IsFile = 1 << 9
    IsDir = 1 << 10
    IsSymLink = 1 << 11
    Link = 1 << 12
    Overflow = 1 << 13
    CloseWrite = 1 << 14


ALL_EVENT_FLAGS: tuple[EventFlag, ...] = (
    EventFlag.NoOp,
    EventFlag.PlatformSpecific,
    EventFlag.Created,
    EventFlag.Updated,
    EventFlag.Removed,
    EventFlag.Renamed,
    EventFlag.OwnerModified,
    EventFlag.AttributeModified,
    EventFlag.MovedFrom,
    EventFlag.MovedTo,
    EventFlag.IsFile,
    EventFlag.IsDir,
    EventFlag.IsSymLink,
    EventFlag.Link,
    EventFlag.Overflow,
    EventFlag.CloseWrite,
)

_FLAG_BY_NAME = dict(EventFlag.__members__.items())
_NAME_BY_VALUE = {int(flag): name for name, flag in EventFlag.__members__.items()}


def get_event_flag_by_name(name: str) -> EventFlag:
    """Return the flag called ``name``; raise FswException if there is none."""
    try:
        return _FLAG_BY_NAME[name]
    except KeyError:
        raise FswException(f"Unknown event type: {name}", Status.UNKNOWN_VALUE) from None


def get_event_flag_name(flag) -> str:
    """Return the name of a single flag; raise FswException if it has none."""
    try:
        return _NAME_BY_VALUE[int(flag)]
    except KeyError:
        raise FswException(f"Unknown event type: {int(flag)}", Status.UNKNOWN_VALUE) from None


@dataclass(frozen=True)
class Event:
    """A change detected on ``path`` at ``time``, described by ``flags``."""

    path: str
    time: float
    flags: tuple[EventFlag, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", tuple(EventFlag(f) for f in self.flags))

    @property
    def flag_mask(self) -> EventFlag:
        """All flags of the event combined into one bit mask."""
        mask = EventFlag.NoOp
        for flag in self.flags:
            mask |= flag
        return mask