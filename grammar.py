"""
Разбор командной строки:

    <token> FROM <start> [TO] <end> <type>
    <token> FOR [<id>,<id>,...] <type>

Все функции чистые: на вход список строк, на выход результат или
исключение из errors.ArgumentGrammarError.
"""
import re
from collections import namedtuple
from enum import Enum

from errors import (
    ArgumentCountError,
    EmptyIdentifierListError,
    InvalidNumericValueError,
    MissingRangeBoundError,
    UnrecognizedAnalyticsTypeError,
    UnrecognizedCommandError,
)

MIN_ARGS = 4

_INT_RE = re.compile(r"[+-]?[0-9]+")


class AnalyticsType(Enum):
    OD = "od"
    SVA = "sva"


class RangeCommand(namedtuple("RangeCommand", ["start", "end"])):
    def ids(self):
        # границы в любом порядке, диапазон включительный
        low, high = min(self.start, self.end), max(self.start, self.end)
        return list(range(low, high + 1))


class ListCommand(namedtuple("ListCommand", ["values"])):
    def ids(self):
        return list(self.values)


ParsedArgs = namedtuple("ParsedArgs", ["token", "command", "analytics_type", "stream_ids"])


def _parse_int(text):
    if not _INT_RE.fullmatch(text):
        raise ValueError(text)
    return int(text)


def parse_analytics_type(value):
    normalized = value.upper()
    if normalized == "OD":
        return AnalyticsType.OD
    if normalized == "SVA":
        return AnalyticsType.SVA
    raise UnrecognizedAnalyticsTypeError(f"Unrecognized analytics type: {normalized}")


def parse_range_args(base_args):
    """<token> FROM x TO y  или  <token> FROM x y"""
    if len(base_args) < 3:
        raise MissingRangeBoundError("Missing arguments for FROM/TO range.")

    try:
        start = _parse_int(base_args[2])
    except ValueError:
        raise InvalidNumericValueError(f"Invalid start value in range: {base_args[2]}")

    end_index = 3
    if len(base_args) > 3 and base_args[3].upper() == "TO":
        end_index = 4
    if end_index >= len(base_args):
        raise MissingRangeBoundError("Missing end value in range.")

    try:
        end = _parse_int(base_args[end_index])
    except ValueError:
        raise InvalidNumericValueError(f"Invalid end value in range: {base_args[end_index]}")

    return RangeCommand(start, end)


def parse_for_args(base_args):
    """<token> FOR [a, b, c]; список может быть разбит shell'ом на несколько аргументов."""
    if len(base_args) < 3:
        raise EmptyIdentifierListError("Missing list for FOR command.")

    combined = " ".join(base_args[2:]).strip()
    combined = re.sub(r"^\[", "", combined)
    combined = re.sub(r"\]$", "", combined).strip()
    combined = re.sub(r"\s*,\s*", ",", combined)
    if not combined:
        raise EmptyIdentifierListError("No identifiers provided in list.")

    values = []
    for part in combined.split(","):
        part = part.strip()
        if not part:
            # висячая запятая: [1,2,]
            continue
        try:
            values.append(_parse_int(part))
        except ValueError:
            raise InvalidNumericValueError(f"Invalid identifier in list: {part}")
    return ListCommand(values)


def parse_command(base_args):
    keyword = base_args[1]
    if keyword.upper() == "FROM":
        return parse_range_args(base_args)
    if keyword.upper() == "FOR":
        return parse_for_args(base_args)
    raise UnrecognizedCommandError(f"Unrecognized command: {keyword}")


def parse_args(argv):
    argv = list(argv)
    if len(argv) < MIN_ARGS:
        raise ArgumentCountError(f"Expected at least {MIN_ARGS} arguments, got {len(argv)}.")

    analytics_type = parse_analytics_type(argv[-1])
    base_args = argv[:-1]
    command = parse_command(base_args)

    stream_ids = command.ids()
    if not stream_ids:
        raise EmptyIdentifierListError("No stream identifiers provided.")

    return ParsedArgs(base_args[0], command, analytics_type, stream_ids)
