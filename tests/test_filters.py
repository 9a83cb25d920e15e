import pytest

from fswatchpoll.errors import FswException, Status
from fswatchpoll.events import EventFlag
from fswatchpoll.filters import (
    EventTypeFilter,
    FilterType,
    MonitorFilter,
    accept_path,
)


def test_no_filters_accepts_everything():
    assert accept_path("/any/path.txt", []) is True


def test_exclusion_rejects_matching_path():
    filters = [MonitorFilter(r"\.o$", FilterType.EXCLUDE)]
    assert accept_path("/src/main.o", filters) is False
    assert accept_path("/src/main.c", filters) is True


def test_inclusion_overrides_exclusion_regardless_of_order():
    exclude = MonitorFilter(".*", FilterType.EXCLUDE, extended=True)
    include = MonitorFilter(r"\.py$", FilterType.INCLUDE, extended=True)
    for filters in ([exclude, include], [include, exclude]):
        assert accept_path("/pkg/mod.py", filters) is True
        assert accept_path("/pkg/mod.pyc", filters) is False


def test_inclusion_without_match_does_not_reject():
    include = MonitorFilter("keep", FilterType.INCLUDE)
    assert accept_path("/other", [include]) is True


def test_case_insensitive_matching():
    sensitive = MonitorFilter("TMP", FilterType.EXCLUDE)
    insensitive = MonitorFilter("TMP", FilterType.EXCLUDE, case_sensitive=False)
    assert sensitive.matches("/var/tmp/x") is False
    assert insensitive.matches("/var/tmp/x") is True


def test_matches_searches_anywhere_in_path():
    assert MonitorFilter("cache").matches("/home/u/.cache/file") is True


def test_basic_regex_groups_and_intervals():
    basic = MonitorFilter(r"\(ab\)\{2\}")
    assert basic.matches("xababx") is True
    assert basic.matches("xabx") is False


def test_basic_regex_parentheses_are_literal():
    basic = MonitorFilter("(x)")
    assert basic.matches("/dir/(x)") is True
    assert basic.matches("/dir/x") is False


def test_extended_regex_parentheses_group():
    extended = MonitorFilter("(x)", extended=True)
    assert extended.matches("/dir/x") is True


def test_basic_regex_bracket_expression():
    basic = MonitorFilter("file[0-9]")
    assert basic.matches("/file7") is True
    assert basic.matches("/fileA") is False


def test_invalid_regex_raises_invalid_regex():
    with pytest.raises(FswException) as info:
        MonitorFilter("(unclosed", extended=True)
    assert info.value.code is Status.INVALID_REGEX


def test_event_type_filter_holds_flag():
    assert EventTypeFilter(EventFlag.Created).flag is EventFlag.Created
    assert EventTypeFilter(EventFlag.Removed) == EventTypeFilter(EventFlag.Removed)