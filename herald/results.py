"""
Tagged parse results.

Every parser, argument handler and pipeline step hands back one of two
immutable values instead of raising:

- Success(value): the conversion worked; `value` is the typed result.
- Failure(reason, offset=None): the conversion did not work; `reason` is a
  ParseFailureReason and `offset` (rest arguments only) is the zero-based
  position of the offending token inside the rest sequence.

ParseFailureReason is closed: the five members below are the whole taxonomy
a parser may report.
"""
from collections import namedtuple
from enum import IntEnum


class ParseFailureReason(IntEnum):
    """
    why a single token could not be turned into a value.

    - BAD_FORMAT: the token shape is wrong (e.g., "abc" for a number).
    - BAD_VALUE: well-formed but rejected (out of range, entity not found).
    - NO_PARSER_MATCHED: every alternative of a one_of() failed.
    - NOT_APPLICABLE: the concept has no meaning here (e.g., a role outside any group).
    - VALUE_REQUIRED: a required slot had no token left.
    """
    BAD_FORMAT        = 1
    BAD_VALUE         = 2
    NO_PARSER_MATCHED = 3
    NOT_APPLICABLE    = 4
    VALUE_REQUIRED    = 5


class Success(namedtuple("Success", ("value",))):
    __slots__ = ()

    def __bool__(self):
        return True


class Failure(namedtuple("Failure", ("reason", "offset"), defaults=(None,))):
    __slots__ = ()

    def __new__(cls, reason, offset=None):
        if not isinstance(reason, ParseFailureReason):
            raise TypeError("failure 'reason' must be a parse-failure-reason")
        if offset is not None and (not isinstance(offset, int) or offset < 0):
            raise ValueError("failure 'offset' must be a non-negative integer")
        return super().__new__(cls, reason, offset)

    def __bool__(self):
        return False


def succeed(value, /):
    """
    wrap a parsed value into a Success.
    """
    return Success(value)


def fail(reason, offset=None, /):
    """
    build a Failure for the given reason (and optional rest offset).
    """
    return Failure(reason, offset)


def succeeded(result, /):
    """
    tell whether a parse result is a Success.

    raises TypeError for anything that is not a Success or Failure, which is
    how contract violations in user parsers surface.
    """
    if isinstance(result, Success):
        return True
    if isinstance(result, Failure):
        return False
    raise TypeError("parse result must be a success or a failure, not %r" % type(result).__name__)


__all__ = (
    "ParseFailureReason",
    "Success",
    "Failure",
    "succeed",
    "fail",
    "succeeded",
)
