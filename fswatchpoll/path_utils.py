"""Directory listing and stat helpers that log failures instead of raising."""

from __future__ import annotations

import os
import sys

from .log import flogf, logf_perror


def _elog(func: str, fmt: str, *args) -> None:
    flogf(sys.stderr, "%s: ", func)
    flogf(sys.stderr, fmt, *args)


def get_directory_entries(path) -> list[os.DirEntry]:
    """Return the direct entries of the directory ``path``.

    An error while reading the directory is logged and the entries read so far
    are returned.
    """
    entries: list[os.DirEntry] = []
    try:
        with os.scandir(path) as iterator:
            entries.extend(iterator)
    except OSError as exc:
        _elog("get_directory_entries", "Error accessing directory: %s", str(exc))
    return entries


def get_subdirectories(path) -> list[os.DirEntry]:
    """Return the direct entries of ``path`` that are directories."""
    entries: list[os.DirEntry] = []
    try:
        with os.scandir(path) as iterator:
            entries.extend(entry for entry in iterator if entry.is_dir())
    except OSError as exc:
        _elog("get_subdirectories", "Error accessing directory: %s", str(exc))
    return entries


def stat_path(path, follow_symlink: bool = False) -> os.stat_result | None:
    """Stat ``path``; with ``follow_symlink`` the link itself is examined (lstat).

    Returns None, after logging the OS error, when the call fails.
    """
    if follow_symlink:
        return lstat_path(path)
    try:
        return os.stat(path)
    except OSError:
        logf_perror("Cannot stat %s", os.fspath(path))
        return None


def lstat_path(path) -> os.stat_result | None:
    """Lstat ``path``; returns None, after logging the OS error, on failure."""
    try:
        return os.lstat(path)
    except OSError:
        logf_perror("Cannot lstat %s", os.fspath(path))
        return None