from datetime import datetime

import pytest

from xdebug_trace.trace_parser import (
    TraceHeaderError,
    parse_version,
    parse_format,
    parse_start_time,
)


def test_parse_version():
    assert parse_version("Version: 2.4.0") == "2.4.0"


def test_parse_version_ignores_surrounding_text():
    assert parse_version("Xdebug Version: 3.1.12 (extra)") == "3.1.12"


def test_parse_version_missing():
    with pytest.raises(TraceHeaderError):
        parse_version("Vers: 2.4")


def test_parse_format():
    assert parse_format("File format: 4") == "4"


def test_parse_format_missing():
    with pytest.raises(TraceHeaderError) as excinfo:
        parse_format("")
    assert excinfo.value.line == ""


def test_parse_start_time():
    assert parse_start_time("TRACE START [2017-03-14 14:34:51]") == datetime(2017, 3, 14, 14, 34, 51)


def test_parse_start_time_wrong_prefix():
    with pytest.raises(TraceHeaderError):
        parse_start_time("TRACE END   [2017-03-14 14:34:51]")


def test_parse_start_time_invalid_timestamp():
    with pytest.raises(TraceHeaderError):
        parse_start_time("TRACE START [2017-13-14 14:34:51]")


def test_header_error_is_value_error():
    assert issubclass(TraceHeaderError, ValueError)
