import pytest

from fswatchpoll.errors import FswException, Status
from fswatchpoll.events import EventFlag
from fswatchpoll.monitor_factory import (
    MonitorType,
    create_monitor,
    create_monitor_by_name,
    exists_type,
    get_types,
)
from fswatchpoll.poll_monitor import PollMonitor


def _callback(events, context):
    context.extend(events)


def test_system_default_is_zero(tmp_path):
    monitor = create_monitor(0, [str(tmp_path)], _callback)
    assert isinstance(monitor, PollMonitor)
    assert monitor.paths == [str(tmp_path)]
    assert monitor.callback is _callback


def test_create_poll_monitor_keeps_arguments(tmp_path):
    context = []
    monitor = create_monitor(MonitorType.POLL, [tmp_path], _callback, context)
    assert isinstance(monitor, PollMonitor)
    assert monitor.paths == [str(tmp_path)]
    assert monitor.callback is _callback
    assert monitor.context is context


def test_system_default_creates_poll_monitor(tmp_path):
    monitor = create_monitor(MonitorType.SYSTEM_DEFAULT, [str(tmp_path)], _callback)
    assert isinstance(monitor, PollMonitor)
    assert monitor.context is None


def test_plain_integer_type_is_accepted(tmp_path):
    monitor = create_monitor(int(MonitorType.POLL), [str(tmp_path)], _callback)
    assert isinstance(monitor, PollMonitor)
    assert monitor.paths == [str(tmp_path)]
    assert monitor.callback is _callback


@pytest.mark.parametrize(
    "monitor_type",
    [
        MonitorType.FSEVENTS,
        MonitorType.KQUEUE,
        MonitorType.INOTIFY,
        MonitorType.WINDOWS,
        MonitorType.FEN,
        99,
    ],
)
def test_unsupported_type_raises(monitor_type, tmp_path):
    with pytest.raises(FswException) as info:
        create_monitor(monitor_type, [str(tmp_path)], _callback)
    assert info.value.code == Status.UNKNOWN_MONITOR_TYPE
    assert str(info.value) == "Unsupported monitor."


def test_create_by_name(tmp_path):
    monitor = create_monitor_by_name("poll_monitor", [str(tmp_path)], _callback, "ctx")
    assert isinstance(monitor, PollMonitor)
    assert monitor.context == "ctx"


@pytest.mark.parametrize("name", ["inotify_monitor", "", "POLL_MONITOR", "poll"])
def test_create_by_unknown_name_returns_none(name, tmp_path):
    assert create_monitor_by_name(name, [str(tmp_path)], _callback) is None


def test_get_types_lists_poll_monitor():
    assert get_types() == ["poll_monitor"]


def test_get_types_is_sorted_and_every_type_exists():
    types = get_types()
    assert types == sorted(types)
    assert all(exists_type(name) for name in types)


@pytest.mark.parametrize(
    "name, expected",
    [("poll_monitor", True), ("fsevents_monitor", False), ("", False)],
)
def test_exists_type(name, expected):
    assert exists_type(name) is expected


def test_created_monitor_detects_new_file(tmp_path):
    monitor = create_monitor(MonitorType.SYSTEM_DEFAULT, [str(tmp_path)], _callback)
    monitor.recursive = True
    monitor.collect_initial_data()
    new_file = tmp_path / "new.txt"
    new_file.write_text("data")
    events = monitor.collect_data()
    created = [e for e in events if e.path == str(new_file)]
    assert len(created) == 1
    assert created[0].flags == (EventFlag.Created,)