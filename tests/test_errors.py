from fswatchpoll.errors import FswException, Status


def test_status_values_fixed_by_source():
    assert int(FswException("ok", Status.OK)) == 0
    assert int(FswException("unknown", Status.UNKNOWN_ERROR)) == 1 << 0
    assert int(FswException("value", Status.UNKNOWN_VALUE)) == 1 << 13
    assert int(FswException("property", Status.INVALID_PROPERTY)) == 1 << 14


def test_error_codes_are_distinct_bits():
    errors = [s for s in Status if s is not Status.OK]
    assert len(errors) == 15
    codes = [int(FswException("error", code)) for code in errors]
    for code in codes:
        assert code > 0
        assert code & (code - 1) == 0
    assert len(set(codes)) == len(codes)


def test_exception_carries_message_and_code():
    exc = FswException("Unsupported monitor.", Status.UNKNOWN_MONITOR_TYPE)
    assert exc.message == "Unsupported monitor."
    assert str(exc) == "Unsupported monitor."
    assert exc.code is Status.UNKNOWN_MONITOR_TYPE
    assert int(exc) == int(Status.UNKNOWN_MONITOR_TYPE)


def test_exception_default_code_is_unknown_error():
    exc = FswException("Initialization failed.")
    assert exc.code is Status.UNKNOWN_ERROR


def test_exception_keeps_unlisted_integer_code():
    exc = FswException("odd", 1 << 20)
    assert int(exc) == 1 << 20