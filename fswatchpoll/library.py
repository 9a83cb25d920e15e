"""Library initialisation and the process-wide verbose switch."""

from __future__ import annotations

from .errors import Status

_verbose = False


def init_library() -> Status:
    """Initialise the library; returns Status.OK on success."""
    return Status.OK


def is_verbose() -> bool:
    """Tell whether verbose logging is active."""
    return _verbose


def set_verbose(verbose) -> None:
    """Turn verbose logging on or off."""
    global _verbose
    _verbose = bool(verbose)