r"""
Herald argument handlers: give a parser positional semantics.

Overview
- ArgKind: REQUIRED, OPTIONAL or REST.
- Metadata: human-facing name and descriptions of one argument (independent
  of the value type).
- ArgumentHandler: parser + metadata + kind. Three concrete kinds:
  • RequiredArgument: exactly one token; none left → VALUE_REQUIRED
    (the parser is not invoked).
  • OptionalArgument: zero or one token; none left → Success(absent).
  • RestArgument: every remaining token, each parsed independently and in
    order; the first failing token stops the rest and its zero-based offset
    inside the rest sequence is recorded on the Failure.

Taking tokens
- `await handler.take(tokens, context)` → (result, remaining)
  • result: Success(value) | Failure(reason, offset)
  • remaining: tuple of the tokens this handler did not consume.
  • Required/optional handlers always advance by one token when one is
    available, whatever the parse outcome.

Display
- handler.usage (also str(handler)) uses the three-way bracketing that help
  output relies on:
  • required → "<name: type>"
  • optional → "[name: type]"
  • rest     → "[name: type ...]"
- handler.signature is the compact type form used on detailed help pages:
  "type", "type?" and "...type".

Concurrency
- RestArgument(concurrent=True) parses all tokens with asyncio.gather; the
  reported offset is still the leftmost failing token. The default is
  sequential evaluation with early exit, which never runs a lookup for tokens
  after the first failure.
"""
import asyncio
import re
from collections import namedtuple
from enum import IntEnum

from .absence import absent
from .parsers import Parser
from .results import *
from .utils import *


class ArgKind(IntEnum):
    REQUIRED = 0
    OPTIONAL = 1
    REST     = 2


class Metadata(namedtuple("Metadata", ("name", "short", "long"), defaults=(None,))):
    """
    Human-facing description of an argument or a command.

    - name: non-empty, no whitespace (used in usage lines and messages).
    - short: one-line description, non-empty.
    - long: optional longer description (None when not given).
    """
    __slots__ = ()

    def __new__(cls, name, short, long=None):
        if not isinstance(name, str):
            raise TypeError("metadata 'name' must be a string")
        elif not (name := name.strip()):
            raise ValueError("metadata 'name' cannot be empty")
        elif re.search(r"\s", name):
            raise ValueError("metadata 'name' cannot contain whitespace")

        if not isinstance(short, str):
            raise TypeError("metadata 'short' must be a string")
        elif not (short := short.strip()):
            raise ValueError("metadata 'short' cannot be empty")

        if long is not None:
            if not isinstance(long, str):
                raise TypeError("metadata 'long' must be a string")
            # An empty long description means the same as none at all.
            long = long.strip() or None

        return super().__new__(cls, name, short, long)


_BRACKETS = {
    ArgKind.REQUIRED: "<%s>",
    ArgKind.OPTIONAL: "[%s]",
    ArgKind.REST: "[%s ...]",
}

_SIGNATURES = {
    ArgKind.REQUIRED: "%s",
    ArgKind.OPTIONAL: "%s?",
    ArgKind.REST: "...%s",
}


class ArgumentHandler:
    """
    Base of the three argument kinds; not instantiated directly.

    Construction
    - parser: Parser converting each consumed token.
    - metadata: Metadata, or a (name, short[, long]) tuple.

    Properties (read-only)
    - parser, metadata, kind, args_taken (1, or Ellipsis for rest), type,
      usage, signature.
    """

    __kind__ = Unset
    __typename__ = "argument-handler"

    parser = mirror("parser")
    metadata = mirror("metadata")

    def __init__(self, parser, metadata, /):
        if self.__kind__ is Unset:
            raise TypeError(f"{type(self).__typename__} is abstract; use a required, optional or rest argument")
        if not isinstance(parser, Parser):
            raise TypeError(f"{type(self).__typename__} 'parser' must be a parser")
        if isinstance(metadata, tuple) and not isinstance(metadata, Metadata):
            metadata = Metadata(*metadata)
        if not isinstance(metadata, Metadata):
            raise TypeError(f"{type(self).__typename__} 'metadata' must be a metadata")
        self._parser = parser
        self._metadata = metadata

    @property
    def kind(self):
        return self.__kind__

    @property
    def args_taken(self):
        return 1

    @property
    def type(self):
        return self._parser.type

    @property
    def usage(self):
        return _BRACKETS[self.kind] % f"{self._metadata.name}: {self.type}"

    @property
    def signature(self):
        return _SIGNATURES[self.kind] % self.type

    async def take(self, tokens, context=None, /):
        """
        consume this handler's share of `tokens`.

        returns (Success | Failure, remaining tokens).
        """
        tokens = tuple(tokens)
        if not tokens:
            return self._missing(), ()
        result = await self._parser(tokens[0], context)
        return result, tokens[1:]

    def _missing(self):
        raise NotImplementedError

    def __str__(self):
        return self.usage

    def __repr__(self):
        return "%s(%s)" % (type(self).__typename__, ", ".join("%s=%r" % pair for pair in self.__rich_repr__()))

    def __rich_repr__(self):
        yield "name", self._metadata.name
        yield "type", self.type
        yield "kind", self.kind.name.lower()


class RequiredArgument(ArgumentHandler):
    """
    exactly one token; a missing token is VALUE_REQUIRED.
    """
    __kind__ = ArgKind.REQUIRED
    __typename__ = "required-argument"

    def _missing(self):
        return fail(ParseFailureReason.VALUE_REQUIRED)


class OptionalArgument(ArgumentHandler):
    """
    zero or one token; a missing token yields the absent marker.
    """
    __kind__ = ArgKind.OPTIONAL
    __typename__ = "optional-argument"

    def _missing(self):
        return succeed(absent)


class RestArgument(ArgumentHandler):
    """
    all remaining tokens; the success value is a tuple (possibly empty).
    """
    __kind__ = ArgKind.REST
    __typename__ = "rest-argument"

    concurrent = mirror("concurrent")

    def __init__(self, parser, metadata, /, *, concurrent=False):
        super().__init__(parser, metadata)
        if not isinstance(concurrent, bool):
            raise TypeError(f"{type(self).__typename__} 'concurrent' must be a boolean")
        self._concurrent = concurrent

    @property
    def args_taken(self):
        return Ellipsis

    async def take(self, tokens, context=None, /):
        tokens = tuple(tokens)
        if self._concurrent:
            results = await asyncio.gather(*(self._parser(token, context) for token in tokens))
        else:
            results = []
            for token in tokens:
                results.append(result := await self._parser(token, context))
                if not succeeded(result):
                    break

        values = []
        for offset, result in enumerate(results):
            if not succeeded(result):
                return fail(result.reason, offset), tokens[offset + 1:]
            values.append(result.value)
        return succeed(tuple(values)), ()

    def __rich_repr__(self):
        yield from super().__rich_repr__()
        yield "concurrent", self._concurrent


__all__ = (
    "ArgKind",
    "Metadata",
    "ArgumentHandler",
    "RequiredArgument",
    "OptionalArgument",
    "RestArgument",
)
