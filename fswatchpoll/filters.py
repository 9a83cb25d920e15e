"""Path filters and event type filters."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .errors import FswException, Status
from .events import EventFlag


class FilterType(Enum):
    """Whether a matching path is included or excluded."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


_BRE_ESCAPED_SPECIALS = frozenset("(){}|+?")


def _basic_to_python(pattern: str) -> str:
    """Translate a POSIX basic regular expression into Python syntax."""
    out: list[str] = []
    at_start = True
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\" and i + 1 < n:
            nxt = pattern[i + 1]
            if nxt in _BRE_ESCAPED_SPECIALS:
                out.append(nxt)
                at_start = nxt == "("
            else:
                out.append("\\" + nxt)
                at_start = False
            i += 2
            continue
        if ch == "[":
            j = i + 1
            if j < n and pattern[j] == "^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end == -1:
                out.append(pattern[i:])
                break
            body = pattern[i + 1:end].replace("\\", "\\\\")
            out.append("[" + body + "]")
            i = end + 1
            at_start = False
            continue
        if ch in _BRE_ESCAPED_SPECIALS:
            out.append("\\" + ch)
        elif ch == "*" and at_start:
            out.append("\\*")
        else:
            out.append(ch)
        at_start = ch == "^" and i == 0
        i += 1
    return "".join(out)


@dataclass(frozen=True)
class MonitorFilter:
    """A regular expression that includes or excludes matching paths."""

    text: str
    filter_type: FilterType = FilterType.EXCLUDE
    case_sensitive: bool = True
    extended: bool = False
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        source = self.text if self.extended else _basic_to_python(self.text)
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            regex = re.compile(source, flags)
        except re.error as exc:
            raise FswException(
                f"Invalid regular expression: {self.text}: {exc}", Status.INVALID_REGEX
            ) from exc
        object.__setattr__(self, "_regex", regex)

    def matches(self, path: str) -> bool:
        """Tell whether the expression matches anywhere in ``path``."""
        return self._regex.search(path) is not None


@dataclass(frozen=True)
class EventTypeFilter:
    """Accepts events carrying ``flag``."""

    flag: EventFlag


def accept_path(path: str, filters: Iterable[MonitorFilter]) -> bool:
    """Apply path filters: an including match wins, an excluding match rejects."""
    excluded = False
    for monitor_filter in filters:
        if not monitor_filter.matches(path):
            continue
        if monitor_filter.filter_type is FilterType.INCLUDE:
            return True
        excluded = True
    return not excluded