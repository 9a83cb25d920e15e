# fswatchpoll

A portable file change monitor library. It periodically stats the watched
paths and keeps their modification and status-change times in memory. It
reports each path that was created, updated, had its attributes modified,
or was removed since the previous scan.

Each event (`fswatchpoll.events.Event`) carries a `path`, a `time` in whole
seconds and a tuple of `EventFlag` values. `flag_mask` combines those flags
into one bit mask.

## Installation

```
pip install fswatchpoll
```

## Using a session

A `Session` (`fswatchpoll.session`) holds the configuration of a monitor.
This covers the paths to watch, the callback that receives events, and
options such as latency, recursion, symbolic links and filters. The settings
take effect the next time the monitor is started.

```python
import threading

from fswatchpoll.monitor_factory import MonitorType
from fswatchpoll.session import Session


def on_events(events, data):
    for event in events:
        print(event.path, [flag.name for flag in event.flags])


session = Session(MonitorType.SYSTEM_DEFAULT)
session.add_path("my/path")
session.set_callback(on_events, None)
session.set_recursive(True)
session.set_latency(1.0)

worker = threading.Thread(target=session.start_monitor)
worker.start()
# ... later
session.stop_monitor()
worker.join()
session.destroy()
```

About the session API:

- `start_monitor()` creates the monitor on the first call and configures it. It then blocks until `stop_monitor()` is called from another thread, so run it in its own thread.
- The monitor cannot be created without a callback or without at least one path.
- `set_latency()` rejects negative values. A latency of zero keeps the monitor's default of one second. The poll monitor never waits less than one second between scans.
- `destroy()` refuses to release a session whose monitor is still running. After `destroy()`, the session can no longer be used.
- A `Session` can be used as a context manager. On exit it stops a running monitor, or destroys the session if no monitor is running.

Errors are raised as `FswException` (`fswatchpoll.errors`), which carries a
`Status` code in its `code` attribute. `last_error()` returns the status of
the last session call made in the current thread.

## Filters

Path filters (`MonitorFilter`) are regular expressions. They are
case-sensitive by default. They use POSIX basic syntax unless
`extended=True`, in which case the text is used as a Python regular
expression.

Filters decide whether a path is accepted as follows:

- A path matching an including filter is always accepted.
- Otherwise, a path matching an excluding filter is rejected.
- A path matching no filter is accepted.
- The order of the filters has no effect.

An invalid expression raises `FswException` with `Status.INVALID_REGEX`.

Event type filters (`EventTypeFilter`) work differently. When any are set,
each event keeps only the flags that some filter names. An event left with
no flags is dropped.

```python
from fswatchpoll.events import EventFlag
from fswatchpoll.filters import EventTypeFilter, FilterType, MonitorFilter

session.add_filter(MonitorFilter(r"\.tmp$", FilterType.EXCLUDE))
session.add_event_type_filter(EventTypeFilter(EventFlag.Created))
```

`accept_path(path, filters)` applies path filters to a single path.

## Monitors

`fswatchpoll.monitor_factory` provides the following:

- `get_types()` lists the available monitor type names.
- `exists_type()` checks whether a name is available.
- `create_monitor()` builds a monitor from a `MonitorType`.
- `create_monitor_by_name()` builds a monitor from a name, and returns `None` for an unknown name.

The only available monitor is the poll monitor (`poll_monitor`), which is
also the system default. Any other `MonitorType` raises `FswException` with
`Status.UNKNOWN_MONITOR_TYPE`.

`PollMonitor` (`fswatchpoll.poll_monitor`) can also be driven by hand.
`collect_initial_data()` records the current state of the watched paths.
Each later `collect_data()` returns the events since the previous scan.

```python
from fswatchpoll.poll_monitor import PollMonitor

monitor = PollMonitor(["my/path"], callback=lambda events, ctx: None)
monitor.recursive = True
monitor.collect_initial_data()
# ... change some files
for event in monitor.collect_data():
    print(event.path, event.flags)
```

## Event flag names

`get_event_flag_by_name("Created")` and `get_event_flag_name(EventFlag.Created)`
convert between flags and their names. An unknown name or value raises
`FswException` with `Status.UNKNOWN_VALUE`.

## Verbose logging

`set_verbose(True)` from `fswatchpoll.library` turns on the diagnostic
messages written by the functions in `fswatchpoll.log`:

- `log`, `flog`, `logf` and `flogf` write messages.
- `log_perror` and `logf_perror` append the OS error currently being handled.

The printf-style formatting they use is available as
`fswatchpoll.formatting.string_from_format`.

## What it does not do

- Change detection is by polling only. There are no kernel notification backends (inotify, kqueue, FSEvents and the like), so changes are seen at the next scan, with one-second resolution.
- The package is a library and installs no command-line tool.
- A session accepts `set_allow_overflow`, `set_directory_only` and `add_property`, and passes the first two on to the monitor. The poll monitor does not act on any of them.