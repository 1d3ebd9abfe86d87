"""
Record Parser - Interpret one tab-separated trace line.

Each body line of a computerized Xdebug trace is one of:
    enter:  depth  id  0  time  memory  name  internal  include_file  file  line  [nparams  params...]
    exit:   depth  id  1  time  memory
    return: depth  id  R  -     -       value

Enter records open a call, exit and return records complete the call stored
under the same id.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Dict

from .decoders import to_int, to_int64, to_float
from .models import CallRecord


# Lines with fewer fields carry no record (e.g. "TRACE END" or the summary line)
MIN_FIELDS = 5
# Enter records must reach the line number column
MIN_ENTER_FIELDS = 10
# Enter records with an empty combined params column list params from here on
PARAMS_TAIL_START = 11
MIN_PARAMS_TAIL_FIELDS = PARAMS_TAIL_START + 1

FIELD_SEPARATOR = "\t"


class RecordKind(str, Enum):
    """Kinds of trace records, valued by their marker column."""
    ENTER = "0"
    EXIT = "1"
    RETURN = "R"
    MALFORMED = "malformed"


@dataclass
class RecordResult:
    """
    Outcome of parsing one trace line.
    
    Attributes:
        kind: What the line was
        record_id: Correlating id (0 for malformed lines)
        record: The stored record after applying the line, or an empty
            record when nothing was applied
    """
    kind: RecordKind
    record_id: int
    record: CallRecord

    @property
    def applied(self) -> bool:
        return self.kind != RecordKind.MALFORMED


def split_fields(line: str) -> List[str]:
    return line.split(FIELD_SEPARATOR)


def _malformed() -> RecordResult:
    return RecordResult(kind=RecordKind.MALFORMED, record_id=0, record=CallRecord())


def parse_enter(fields: List[str]) -> CallRecord:
    """
    Build a new call record from an enter line.
    
    Params come either from the combined params column (index 7) or, when
    that column is empty, from the variable-length tail starting at index 11.
    
    Args:
        fields: Tab-separated fields of an enter line (at least 10)
        
    Returns:
        The opened call record
    """
    if fields[7]:
        params = [fields[7]]
    elif len(fields) >= MIN_PARAMS_TAIL_FIELDS:
        params = fields[PARAMS_TAIL_START:]
    else:
        params = []

    return CallRecord(
        depth=to_int(fields[0]),
        time_enter=to_float(fields[3]),
        memory_enter=to_int64(fields[4]),
        name=fields[5],
        internal=fields[6],
        file=fields[8],
        line=fields[9],
        params=params,
    )


def parse_record(fields: List[str], calls: Dict[int, CallRecord]) -> RecordResult:
    """
    Apply one trace line to the id -> call record table.
    
    Exit and return lines update the record already stored under their id.
    When the id is unknown they start from an empty record, which is stored
    under that id all the same. Malformed lines leave the table untouched.
    
    Args:
        fields: The line split on tabs
        calls: Table to update, keyed by record id
        
    Returns:
        RecordResult describing what was applied
    """
    if len(fields) < MIN_FIELDS:
        return _malformed()

    record_id = to_int(fields[1])
    marker = fields[2]

    if marker == RecordKind.ENTER.value:
        if len(fields) < MIN_ENTER_FIELDS:
            return _malformed()
        record = parse_enter(fields)
        kind = RecordKind.ENTER
    elif marker == RecordKind.EXIT.value:
        record = calls.get(record_id) or CallRecord()
        record.time_exit = to_float(fields[3])
        record.memory_exit = to_int64(fields[4])
        record.time_diff = record.time_exit - record.time_enter
        record.memory_diff = record.memory_exit - record.memory_enter
        kind = RecordKind.EXIT
    elif marker == RecordKind.RETURN.value:
        record = calls.get(record_id) or CallRecord()
        record.ret = fields[5] if len(fields) > 5 else ""
        kind = RecordKind.RETURN
    else:
        return _malformed()

    calls[record_id] = record
    return RecordResult(kind=kind, record_id=record_id, record=record)


def parse_line(line: str, calls: Dict[int, CallRecord]) -> RecordResult:
    """Split a raw trace line and apply it to the table."""
    return parse_record(split_fields(line), calls)
