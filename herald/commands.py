"""
Herald command layer: run the argument pipeline and dispatch to an action.

What this module provides
- CommandHandler: an ordered sequence of argument handlers plus an action.
  • Handlers are always laid out as: required ones, then optional ones, then
    at most one rest argument. The constructor takes the three groups
    separately, so the ordering holds by construction.
  • min_args: number of tokens the required group needs.
  • parse(tokens, context): the all-or-nothing pipeline.
  • run(context, tokens): parse, then call the action or report the failure.
- command(...): decorator turning an action into a CommandHandler.

Pipeline
- Handlers run strictly in declared order; each one receives the tokens the
  previous ones left behind. Every handler is invoked even when no tokens
  remain, so a failure index always maps to a handler position.
- A failing handler stops the pipeline with ParseBad(position + rest offset,
  handler metadata, reason).
- Each successful handler contributes exactly one value: the parsed value,
  the absent marker (optional with no token), or a tuple (rest).
- Tokens left after the last handler → Excess(count). This cannot happen
  when a rest argument is present.

Action contract
- action(context, *values), plain or coroutine function, called only on
  success, with exactly one value per argument handler. The signature is
  checked against that arity when the CommandHandler is built; a mismatch is
  a TypeError at registration rather than at invocation.

Quick start
    from herald import command, OptionalArgument, text

    @command("help", "Get help using the bot", optional=[
        OptionalArgument(text, ("command", "The command to get help for")),
    ])
    async def help(context, name):
        ...
"""
import inspect
import logging

from .faults import *
from .handlers import *
from .results import *
from .utils import *

logger = logging.getLogger(__name__)


def _group(cls, name, handlers, kind, /):
    """
    Internal: validate one handler group (required/optional) of a command.
    """
    if isinstance(handlers, ArgumentHandler):
        raise TypeError(f"{cls.__typename__} {name!r} must be a sequence of argument handlers")
    handlers = tuple(handlers)
    for handler in handlers:
        if not isinstance(handler, ArgumentHandler):
            raise TypeError(f"{cls.__typename__} {name!r} must only contain argument handlers")
        if handler.kind is not kind:
            raise TypeError(f"{cls.__typename__} {name!r} cannot contain a {handler.kind.name.lower()} argument")
    return handlers


def _check_arity(cls, action, metadata, count, /):
    """
    Internal: make sure `action(context, *values)` can be called with one value per handler.
    """
    try:
        signature = inspect.signature(action)
    except (TypeError, ValueError):
        # Builtins and some C callables expose no signature; nothing to check.
        return
    try:
        signature.bind(Unset, *(Unset for _ in range(count)))
    except TypeError:
        raise TypeError(
            f"{cls.__typename__} {metadata.name!r} action must accept a context and {count} argument value(s)"
        ) from None


class CommandHandler:
    """
    Immutable description of one command: its arguments and its action.

    Construction
    - action: callable(context, *values), plain or async.
    - metadata: Metadata, or a (name, short[, long]) tuple.
    - required: sequence of RequiredArgument.
    - optional: sequence of OptionalArgument.
    - rest: RestArgument or None.

    Properties (read-only)
    - action, metadata, handlers (ordered tuple), min_args, usage.

    Raises
    - TypeError: wrong handler kinds in a group, or an action whose signature
      cannot take one value per handler.
    """

    __typename__ = "command"

    action = mirror("action")
    metadata = mirror("metadata")
    handlers = mirror("handlers")
    min_args = mirror("min_args")

    def __init__(self, action, metadata, /, required=(), optional=(), rest=None):
        cls = type(self)
        if not callable(action):
            raise TypeError(f"{cls.__typename__} 'action' must be callable")
        if isinstance(metadata, tuple) and not isinstance(metadata, Metadata):
            metadata = Metadata(*metadata)
        if not isinstance(metadata, Metadata):
            raise TypeError(f"{cls.__typename__} 'metadata' must be a metadata")

        required = _group(cls, "required", required, ArgKind.REQUIRED)
        optional = _group(cls, "optional", optional, ArgKind.OPTIONAL)
        if rest is not None and not isinstance(rest, RestArgument):
            raise TypeError(f"{cls.__typename__} 'rest' must be a rest argument or None")

        handlers = required + optional + ((rest,) if rest is not None else ())
        _check_arity(cls, action, metadata, len(handlers))

        self._action = action
        self._metadata = metadata
        self._handlers = handlers
        self._min_args = sum(handler.args_taken for handler in required)

    @classmethod
    def make_from_handler_and_args(cls, action, metadata, required=(), optional=(), rest=None, /):
        """
        positional construction helper: action, metadata, required, optional, rest.
        """
        return cls(action, metadata, required, optional, rest)

    @property
    def name(self):
        return self._metadata.name

    @property
    def usage(self):
        """
        one-line usage such as "ban <user: member> [reason: text ...]".
        """
        return " ".join((self._metadata.name, *(handler.usage for handler in self._handlers)))

    async def parse(self, tokens, context=None, /):
        """
        resolve `tokens` into one value per handler.

        returns Success(tuple of values) or an ArgumentFailure (Excess/ParseBad).
        """
        remaining = tuple(tokens)
        values = []
        for position, handler in enumerate(self._handlers):
            result, remaining = await handler.take(remaining, context)
            if not succeeded(result):
                return ParseBad(position + (result.offset or 0), handler.metadata, result.reason)
            values.append(result.value)
        if remaining:
            return Excess(len(remaining))
        return succeed(tuple(values))

    async def run(self, context, tokens, /):
        """
        parse `tokens`; on success invoke the action, otherwise report the failure.

        returns the parse outcome (Success or ArgumentFailure).
        """
        tokens = tuple(tokens)
        outcome = await self.parse(tokens, context)
        if not outcome:
            logger.debug("command %r rejected %d token(s): %r", self.name, len(tokens), outcome)
            await report(outcome, context)
            return outcome
        logger.debug("command %r accepted %d value(s)", self.name, len(outcome.value))
        result = self._action(context, *outcome.value)
        if inspect.isawaitable(result):
            await result
        return outcome

    def __repr__(self):
        return "%s(%s)" % (type(self).__typename__, ", ".join("%s=%r" % pair for pair in self.__rich_repr__()))

    def __rich_repr__(self):
        yield "name", self._metadata.name
        yield "usage", self.usage
        yield "min_args", self._min_args


def command(name, short, long=None, /, *, required=(), optional=(), rest=None):
    """
    decorator: build a CommandHandler from an action function.

    usage
        @command("ping", "Check the bot is alive")
        async def ping(context):
            await context.reply("pong")
    """
    metadata = Metadata(name, short, long)

    @rename("command")
    def wrapper(action, /):
        if not callable(action):
            raise TypeError("@command() must be applied to a callable")
        return CommandHandler(action, metadata, required, optional, rest)

    return wrapper


__all__ = (
    "CommandHandler",
    "command",
)
