"""
Herald pipeline failures and their user-facing rendering.

Scope
- ArgumentFailure: what a whole command parse reports when it does not
  succeed. Two kinds:
  • Excess(count): tokens were left over and no rest argument drained them.
  • ParseBad(index, metadata, reason): an argument handler failed. `index` is
    the absolute zero-based position among the command's expected
    arguments (a rest argument adds the offset of its failing token).
- describe(failure, config): the one-sentence message shown to the caller.
- report(failure, context): reply with that message and, when configured,
  ask the context's usage collaborator to show the command's usage.

Copy
- Excess            → "You provided n too many arguments."
- VALUE_REQUIRED    → "Required argument `name` (i) was not provided."
- BAD_FORMAT        → "Argument `name` (i) had an invalid format."
- NO_PARSER_MATCHED → same as BAD_FORMAT
- BAD_VALUE         → "Argument `name` (i) had a bad value."
- NOT_APPLICABLE    → "This command is not valid in this context."

Positions are shown one-indexed unless config.zero_indexed is set.
"""
import logging
from collections import namedtuple
from enum import IntEnum

from .config import Config
from .results import ParseFailureReason

logger = logging.getLogger(__name__)


class FailureKind(IntEnum):
    EXCESS    = 1
    PARSE_BAD = 2


class ArgumentFailure:
    """
    marker base of pipeline-level failures; always falsy.
    """
    __slots__ = ()

    def __bool__(self):
        return False


class Excess(ArgumentFailure, namedtuple("Excess", ("count",))):
    __slots__ = ()
    kind = FailureKind.EXCESS

    def __new__(cls, count):
        if not isinstance(count, int) or count < 1:
            raise ValueError("excess 'count' must be a positive integer")
        return super().__new__(cls, count)


class ParseBad(ArgumentFailure, namedtuple("ParseBad", ("index", "metadata", "reason"))):
    __slots__ = ()
    kind = FailureKind.PARSE_BAD

    def __new__(cls, index, metadata, reason):
        if not isinstance(index, int) or index < 0:
            raise ValueError("parse-bad 'index' must be a non-negative integer")
        if not isinstance(reason, ParseFailureReason):
            raise TypeError("parse-bad 'reason' must be a parse-failure-reason")
        return super().__new__(cls, index, metadata, reason)


def index_to_string(index, config=None, /):
    """
    render a zero-based argument position for people.
    """
    if config is None:
        config = Config()
    return str(index if config.zero_indexed else index + 1)


def describe(failure, config=None, /):
    """
    map a pipeline failure to its display string.
    """
    match failure:
        case Excess(count=count):
            return f"You provided {count} too many arguments."
        case ParseBad(reason=ParseFailureReason.NOT_APPLICABLE):
            return "This command is not valid in this context."
        case ParseBad(index=index, metadata=metadata, reason=reason):
            position = index_to_string(index, config)
            match reason:
                case ParseFailureReason.VALUE_REQUIRED:
                    return f"Required argument `{metadata.name}` ({position}) was not provided."
                case ParseFailureReason.BAD_FORMAT | ParseFailureReason.NO_PARSER_MATCHED:
                    return f"Argument `{metadata.name}` ({position}) had an invalid format."
                case ParseFailureReason.BAD_VALUE:
                    return f"Argument `{metadata.name}` ({position}) had a bad value."
    raise TypeError("describe() argument must be an argument failure, not %r" % type(failure).__name__)


async def report(failure, context, /):
    """
    tell the caller why their command failed.

    replies with describe(failure); then, when context.config.give_context_on_error
    is set and the context carries a usage collaborator, shows the usage of
    context.command.
    """
    text = describe(failure, context.config)
    logger.debug("command %r failed: %s", context.command, text)
    await context.reply(text)
    if context.config.give_context_on_error and context.usage is not None:
        await context.usage(context, context.command)


__all__ = (
    "FailureKind",
    "ArgumentFailure",
    "Excess",
    "ParseBad",
    "index_to_string",
    "describe",
    "report",
)
