from xdebug_trace.trace_parser import CallRecord, RecordKind, parse_line, parse_record


DEFINE_ENTER = "2\t1\t0\t0.000318\t369752\tdefine\t0\t\t./index.php\t20\t2\t'ENVIRONMENT'\t'production'"
DEFINE_EXIT = "2\t1\t1\t0.000327\t369784"
DEFINE_RETURN = "2\t1\tR\t\t\tTRUE"


def test_enter_exit_return_triple():
    calls = {}
    for line in [DEFINE_ENTER, DEFINE_EXIT, DEFINE_RETURN]:
        parse_line(line, calls)

    call = calls[1]
    assert call.name == "define"
    assert call.depth == 2
    assert call.file == "./index.php"
    assert call.line == "20"
    assert call.internal == "0"
    assert call.params == ["'ENVIRONMENT'", "'production'"]
    assert call.memory_diff == 32
    assert call.time_diff == call.time_exit - call.time_enter
    assert call.ret == "TRUE"


def test_enter_record():
    calls = {}
    result = parse_line("1\t0\t0\t0.000301\t369752\t{main}\t1\t\t./index.php\t0\t0", calls)

    assert result.kind == RecordKind.ENTER
    assert result.record_id == 0
    assert result.record.depth == 1
    assert result.record.name == "{main}"
    assert result.record.params == []
    assert result.record.ret is None
    assert calls[0] is result.record


def test_combined_params_field_wins_over_tail():
    calls = {}
    fields = ["2", "5", "0", "0.1", "100", "require_once", "1", "./a.php", "./index.php", "3", "1", "'x'", "'y'"]
    record = parse_record(fields, calls).record
    assert record.params == ["./a.php"]


def test_params_tail_requires_twelve_fields():
    calls = {}
    eleven = ["2", "5", "0", "0.1", "100", "f", "1", "", "./index.php", "3", "0"]
    assert parse_record(eleven, calls).record.params == []

    twelve = eleven + ["'a'"]
    assert parse_record(twelve, calls).record.params == ["'a'"]


def test_short_lines_are_malformed():
    calls = {}
    for line in ["TRACE END   [2017-03-14 14:34:51]", "0.162800\t552", "1\t2\t1\t0.5"]:
        result = parse_line(line, calls)
        assert result.kind == RecordKind.MALFORMED
        assert not result.applied
        assert result.record == CallRecord()
    assert calls == {}


def test_unknown_kind_is_malformed():
    calls = {}
    result = parse_line("2\t1\tX\t0.1\t100", calls)
    assert result.kind == RecordKind.MALFORMED
    assert calls == {}


def test_summary_line_is_malformed():
    calls = {}
    assert parse_line("\t\t\t0.000540\t352016", calls).kind == RecordKind.MALFORMED
    assert calls == {}


def test_short_enter_line_is_malformed():
    calls = {}
    assert parse_line("2\t1\t0\t0.1\t100\tdefine", calls).kind == RecordKind.MALFORMED
    assert calls == {}


def test_exit_for_unknown_id_has_zero_enter_fields():
    calls = {}
    result = parse_line("3\t9\t1\t0.5\t2048", calls)

    record = calls[9]
    assert result.kind == RecordKind.EXIT
    assert record.depth == 0
    assert record.name == ""
    assert record.time_enter == 0.0
    assert record.memory_enter == 0
    assert record.time_exit == 0.5
    assert record.time_diff == 0.5
    assert record.memory_diff == 2048


def test_return_for_unknown_id_has_zero_enter_fields():
    calls = {}
    parse_line("3\t9\tR\t\t\t'value'", calls)
    assert calls[9] == CallRecord(ret="'value'")


def test_return_without_value_column():
    calls = {}
    parse_line(DEFINE_ENTER, calls)
    parse_line("2\t1\tR\t\t", calls)
    assert calls[1].ret == ""


def test_enter_overwrites_reused_id():
    calls = {}
    parse_line(DEFINE_ENTER, calls)
    parse_line(DEFINE_EXIT, calls)
    parse_line("4\t1\t0\t0.9\t400000\tstrlen\t0\t\t./lib.php\t7\t1\t'abc'", calls)

    call = calls[1]
    assert call.name == "strlen"
    assert call.depth == 4
    assert call.time_exit == 0.0
    assert call.memory_diff == 0


def test_corrupt_numbers_decode_to_zero():
    calls = {}
    parse_line("x\t1\t0\tnan?\t12k\tf\t1\t\t./a.php\t1\t0", calls)
    call = calls[1]
    assert call.depth == 0
    assert call.time_enter == 0.0
    assert call.memory_enter == 0
    assert call.name == "f"
