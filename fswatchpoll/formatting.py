"""printf-style string formatting."""

from __future__ import annotations

import re

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0']*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<prec>\*|\d*))?"
    r"(?P<length>hh|h|ll|l|L|q|j|z|t)?"
    r"(?P<conv>[diouxXeEfFgGcsp%])"
)


def _translate(match: re.Match) -> str:
    conv = match.group("conv")
    if conv == "%":
        return "%%"
    flags = match.group("flags").replace("'", "")
    width = match.group("width") or ""
    prec = match.group("prec")
    precision = "" if prec is None else "." + prec
    if conv == "p":
        if "#" not in flags:
            flags += "#"
        conv = "x"
    elif conv == "u":
        conv = "d"
    return f"%{flags}{width}{precision}{conv}"


def string_from_format(fmt: str, *args) -> str:
    """Format ``args`` with a printf-style format string."""
    return _SPEC.sub(_translate, fmt) % args