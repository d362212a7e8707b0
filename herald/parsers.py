r"""
Herald parsers: turn one raw token into one typed value.

Overview
- Parser
  • Wraps a plain or coroutine function taking (raw) or (raw, context) and
    returning a Success/Failure (see herald.results).
  • Calling a parser is always awaited: `result = await parser(raw, context)`.
  • Carries a display `type` used in help pages and usage lines ("natural",
    "user", ...).

- Combinators
  • with_condition(parser, predicate): refine a parser; a falsy predicate → BAD_VALUE.
  • one_of(*parsers): first success in declaration order, else NO_PARSER_MATCHED.
  • pattern(regex): fullmatch a token and yield its first group, else BAD_FORMAT.
  • mention(prefix): pattern for "<{prefix}{digits}>" with the prefix escaped.
  • inline_id(*prefixes): one_of over mentions, plus a bare numeric id.
  • entity(id_parser, fetch, scoped=...): resolve an id against the context's
    Directory (or Group when scoped) and map lookup misses to BAD_VALUE /
    missing groups to NOT_APPLICABLE.

- Built-ins
  • raw, text, number, natural, positive, boolean
  • user_id, channel_id, role_id (id extraction only, no lookup)
  • user, channel (directory lookups), member, role (group lookups)

Number conventions
- natural accepts value >= 0 and positive accepts value > 0. These are
  fixed; they are never used interchangeably.

Failure policy
- Parsers never raise for bad input. Collaborator lookups that raise
  EntityNotFound (or any LookupError) or TimeoutError, or return None, become
  BAD_VALUE. Any other exception is a bug and propagates.

Quick example
    >>> from herald.parsers import parser, with_condition, number
    >>> even = with_condition(number, lambda x: x % 2 == 0, type="even")
    >>> @parser("shout")
    ... def shout(raw):
    ...     return succeed(raw.upper())
"""
import inspect
import logging
import re
import unicodedata

from .results import *
from .utils import *

logger = logging.getLogger(__name__)


class Parser:
    """
    A named conversion from one raw token to one typed value.

    Construction
    - function: callable taking (raw) or (raw, context), plain or async,
      returning Success or Failure. One positional parameter marks a parser
      that does not need the context.
    - type: display name for help output. Defaults to the function name with
      underscores replaced by hyphens.

    Calling
    - `await parser(raw, context)` → Success | Failure. A function returning
      anything else is a contract violation and raises TypeError.
    """

    __introspectable__ = ("type", "contextual")

    type = mirror("type")
    contextual = mirror("contextual")

    def __init__(self, function, /, type=Unset):
        if not callable(function):
            raise TypeError("parser 'function' must be callable")

        try:
            parameters = [
                parameter for parameter in inspect.signature(function).parameters.values()
                if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD)
            ]
        except (TypeError, ValueError):
            # Builtins without a signature only ever see the raw token.
            parameters = [Unset]
        if not 1 <= len(parameters) <= 2:
            raise TypeError("parser 'function' must take (raw) or (raw, context)")

        type = coalesce(type, getattr(function, "__name__", "value").replace("_", "-"))
        if not isinstance(type, str):
            raise TypeError("parser 'type' must be a string")
        elif not (type := type.strip()):
            raise ValueError("parser 'type' cannot be empty")

        self._function = function
        self._type = type
        self._contextual = len(parameters) == 2

    async def __call__(self, raw, context=None, /):
        if self._contextual:
            result = self._function(raw, context)
        else:
            result = self._function(raw)
        if inspect.isawaitable(result):
            result = await result
        # raises TypeError on anything but Success/Failure
        succeeded(result)
        return result

    def __repr__(self):
        return "parser(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in self.__introspectable__:
            yield name, getattr(self, name)


def parser(type=Unset, /):
    """
    decorator form of Parser.

    usage
    - @parser("shout") def shout(raw): ...
    - @parser def shout(raw): ...   (type taken from the function name)
    """
    if callable(type):
        return Parser(type)

    @rename("parser")
    def wrapper(function, /):
        return Parser(function, type)

    return wrapper


def _parsers(cls, parsers, /):
    for object in parsers:
        if not isinstance(object, Parser):
            raise TypeError(f"{cls} arguments must be parsers")
    return tuple(parsers)


def with_condition(parser, predicate, /, type=Unset):
    """
    refine a parser with a predicate over its value.

    - the inner failure propagates unchanged.
    - a success whose value fails the predicate becomes BAD_VALUE.
    """
    _parsers("with_condition()", (parser,))
    if not callable(predicate):
        raise TypeError("with_condition() predicate must be callable")

    @rename(coalesce(type, parser.type).replace("-", "_"))
    async def condition(raw, context, /):
        result = await parser(raw, context)
        if not succeeded(result):
            return result
        if not predicate(result.value):
            return fail(ParseFailureReason.BAD_VALUE)
        return result

    return Parser(condition, coalesce(type, parser.type))


def one_of(*parsers, type=Unset):
    """
    first-match-wins alternation.

    alternatives are attempted in declaration order and the first success is
    returned; later alternatives are not run. when every alternative fails
    the result is NO_PARSER_MATCHED.
    """
    if not (parsers := _parsers("one_of()", parsers)):
        raise TypeError("one_of() requires at least one parser")

    async def alternation(raw, context, /):
        for alternative in parsers:
            if succeeded(result := await alternative(raw, context)):
                return result
        return fail(ParseFailureReason.NO_PARSER_MATCHED)

    return Parser(alternation, coalesce(type, " | ".join(dict.fromkeys(p.type for p in parsers))))


def pattern(regex, /, type=Unset):
    """
    match a token against a regular shape and yield its first group.

    the whole token must match (fullmatch); the regex must define at least
    one capturing group, whose text is the success value. no match → BAD_FORMAT.
    """
    if isinstance(regex, str):
        regex = re.compile(regex)
    if not isinstance(regex, re.Pattern):
        raise TypeError("pattern() argument must be a string or a compiled regex")
    if regex.groups < 1:
        raise ValueError("pattern() regex must define a capturing group")

    def extraction(raw, /):
        if not (match := regex.fullmatch(raw)):
            return fail(ParseFailureReason.BAD_FORMAT)
        return succeed(match[1])

    return Parser(extraction, coalesce(type, "pattern"))


def mention(prefix, /):
    """
    pattern for a mention-like wrapper "<{prefix}{digits}>" yielding the digits.

    the prefix is taken literally (regex metacharacters are escaped).
    """
    if not isinstance(prefix, str):
        raise TypeError("mention() argument must be a string")
    return pattern(r"<%s([0-9]+)>" % re.escape(prefix), "mention")


def inline_id(*prefixes, raw=True, type=Unset):
    """
    extract an id given as any of the mention forms or, with raw=True, as bare digits.

    does not check that the id exists; see entity().
    """
    candidates = [mention(prefix) for prefix in prefixes]
    if raw:
        candidates.append(pattern(r"([0-9]+)", "id"))
    if not candidates:
        raise TypeError("inline_id() requires a prefix or raw=True")
    return one_of(*candidates, type=coalesce(type, "id"))


def entity(id_parser, fetch, /, *, scoped=False, type=Unset):
    """
    resolve an id to a remote entity through the context's collaborators.

    steps
    - run id_parser; its failure propagates (e.g., NO_PARSER_MATCHED).
    - pick the source: context.group when scoped, else context.directory.
      a missing source → NOT_APPLICABLE (the concept has no meaning here).
    - call fetch(source, id), awaiting it when it returns an awaitable.
      None, EntityNotFound/LookupError or
      TimeoutError → BAD_VALUE.
    """
    _parsers("entity()", (id_parser,))
    if not callable(fetch):
        raise TypeError("entity() fetch must be callable")

    async def resolution(raw, context, /):
        if not succeeded(result := await id_parser(raw, context)):
            return result
        source = None
        if context is not None:
            source = context.group if scoped else context.directory
        if source is None:
            return fail(ParseFailureReason.NOT_APPLICABLE)
        try:
            found = fetch(source, result.value)
            if inspect.isawaitable(found):
                found = await found
        except (LookupError, TimeoutError) as exception:
            logger.debug("lookup of %s %r failed: %r", coalesce(type, "entity"), result.value, exception)
            return fail(ParseFailureReason.BAD_VALUE)
        if found is None:
            return fail(ParseFailureReason.BAD_VALUE)
        return succeed(found)

    return Parser(resolution, coalesce(type, "entity"))


@parser("raw")
def raw(raw, /):
    return succeed(raw)


@parser("text")
def text(raw, context, /):
    # Mentions and similar markup are neutralized by the host's cleaner.
    if context is None:
        return succeed(raw)
    return succeed(context.clean(raw))


@parser("number")
def number(raw, /):
    """
    base-10 integer with an optional sign; ASCII digits only.

    a well-formed token too long for the interpreter's integer conversion
    limit (sys.get_int_max_str_digits) is BAD_VALUE.
    """
    if not re.fullmatch(r"[+-]?[0-9]+", raw):
        return fail(ParseFailureReason.BAD_FORMAT)
    try:
        return succeed(int(raw, 10))
    except ValueError:
        return fail(ParseFailureReason.BAD_VALUE)


natural = with_condition(number, lambda value: value >= 0, type="natural")
positive = with_condition(number, lambda value: value > 0, type="positive")

_AFFIRMATIVES = frozenset(("y", "yes", "true", "on", "enabled"))
_NEGATIVES = frozenset(("n", "no", "false", "off", "disabled"))


@parser("boolean")
def boolean(raw, /):
    """
    yes/no words; compatibility characters are folded (NFKC) and case is ignored.
    """
    normalized = unicodedata.normalize("NFKC", raw).lower()
    if normalized in _AFFIRMATIVES:
        return succeed(True)
    if normalized in _NEGATIVES:
        return succeed(False)
    return fail(ParseFailureReason.BAD_FORMAT)


user_id = inline_id("@", "@!", type="user-id")
channel_id = inline_id("#", type="channel-id")
role_id = inline_id("@&", type="role-id")

user = entity(user_id, lambda directory, id: directory.fetch_user(id), type="user")
channel = entity(channel_id, lambda directory, id: directory.fetch_channel(id), type="channel")
member = entity(user_id, lambda group, id: group.fetch_member(id), scoped=True, type="member")
role = entity(role_id, lambda group, id: group.fetch_role(id), scoped=True, type="role")


__all__ = (
    # Classes and decorators
    "Parser",
    "parser",

    # Combinators
    "with_condition",
    "one_of",
    "pattern",
    "mention",
    "inline_id",
    "entity",

    # Built-in parsers
    "raw",
    "text",
    "number",
    "natural",
    "positive",
    "boolean",
    "user_id",
    "channel_id",
    "role_id",
    "user",
    "channel",
    "member",
    "role",
)
