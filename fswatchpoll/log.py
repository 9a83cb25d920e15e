"""Diagnostic logging that is silent unless verbose mode is on."""

from __future__ import annotations

import sys
from typing import TextIO

from .formatting import string_from_format
from .library import is_verbose


def log(msg: str) -> None:
    """Write ``msg`` to standard output."""
    if is_verbose():
        sys.stdout.write(msg)


def flog(stream: TextIO, msg: str) -> None:
    """Write ``msg`` to ``stream``."""
    if is_verbose():
        stream.write(msg)


def logf(fmt: str, *args) -> None:
    """Format a printf-style message and write it to standard output."""
    if is_verbose():
        sys.stdout.write(string_from_format(fmt, *args))


def flogf(stream: TextIO, fmt: str, *args) -> None:
    """Format a printf-style message and write it to ``stream``."""
    if is_verbose():
        stream.write(string_from_format(fmt, *args))


def _perror(msg: str) -> None:
    error = sys.exc_info()[1]
    reason = None
    if isinstance(error, OSError):
        reason = error.strerror or str(error)
    if reason:
        line = f"{msg}: {reason}" if msg else reason
    else:
        line = msg
    sys.stderr.write(line + "\n")


def log_perror(msg: str) -> None:
    """Write ``msg`` to standard error, followed by the OS error being handled."""
    if is_verbose():
        _perror(msg)


def logf_perror(fmt: str, *args) -> None:
    """Like log_perror, with a printf-style message."""
    if is_verbose():
        _perror(string_from_format(fmt, *args))