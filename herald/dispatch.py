"""
Herald dispatcher: from a raw chat message to a command run.

Routing
- The message is trimmed; it addresses the bot when it starts with
  config.prefix, or (config.mention_as_prefix) with the bot's own mention
  "<@me>" / "<@!me>".
- The rest is split on whitespace: the first token is the command name
  (looked up by exact name), the others are the argument tokens.
- A bare mention replies with the prefix information; a bare prefix is
  ignored.
- An unknown name replies with the invalid-command notice when the matching
  config.notice_on_prefix / config.notice_on_mention flag is set.

Every dispatch reports what happened as a Dispatch code, which hosts can use
for metrics or tests.
"""
import logging
import re
from enum import IntEnum

from .config import Config
from .context import Context, _asynchronous
from .help import show
from .registry import CommandRegistry
from .strings import invalid_command, prefix_message
from .utils import *

logger = logging.getLogger(__name__)


class Dispatch(IntEnum):
    IGNORED         = 0
    PREFIX_INFO     = 1
    UNKNOWN_COMMAND = 2
    SUCCEEDED       = 3
    FAILED          = 4


class Dispatcher:
    """
    Routes messages to the commands of one registry.

    Construction
    - registry: CommandRegistry to look commands up in.
    - config: Config (defaults to Config()).
    - me: the bot's own user id, enabling mention-as-prefix. None disables it.
    - usage: coroutine function (context, name) shown after failed parses;
      defaults to the help page (herald.help.show). None disables it.
    """

    __typename__ = "dispatcher"

    registry = mirror("registry")
    config = mirror("config")
    me = mirror("me")

    def __init__(self, registry, config=Unset, /, *, me=None, usage=Unset):
        cls = type(self)
        if not isinstance(registry, CommandRegistry):
            raise TypeError(f"{cls.__typename__} 'registry' must be a command registry")
        if not isinstance(config := coalesce(config, Config()), Config):
            raise TypeError(f"{cls.__typename__} 'config' must be a config")
        if me is not None and not (isinstance(me, str | int) and re.fullmatch(r"[0-9]+", str(me))):
            raise ValueError(f"{cls.__typename__} 'me' must be a numeric id")
        if (usage := coalesce(usage, show)) is not None and not _asynchronous(usage):
            raise TypeError(f"{cls.__typename__} 'usage' must be a coroutine function")

        self._registry = registry
        self._config = config
        self._me = None if me is None else str(me)
        self._usage = usage
        self._mention = re.compile(r"<@!?%s>" % self._me) if self._me is not None else None

    def split(self, content, /):
        """
        recognise a message addressed to the bot.

        returns None when the message is not for the bot, otherwise a tuple
        (name, tokens, mentioned) where name is None for a bare prefix/mention.
        """
        if not isinstance(content, str):
            raise TypeError("split() argument must be a string")
        trimmed = content.strip()

        if self._mention and self._config.mention_as_prefix and (match := self._mention.match(trimmed)):
            rest, mentioned = trimmed[match.end():], True
        elif trimmed.startswith(self._config.prefix):
            rest, mentioned = trimmed[len(self._config.prefix):], False
        else:
            return None

        name, *tokens = rest.split() or [None]
        return name, tuple(tokens), mentioned

    async def dispatch(self, content, reply, /, directory=None, group=None, *, caller=None, cleaner=Unset):
        """
        handle one message; `reply` is a coroutine function (text) -> None.

        the remaining arguments are the collaborators handed to parsers through
        the Context (see herald.context).
        """
        if (parts := self.split(content)) is None:
            return Dispatch.IGNORED
        name, tokens, mentioned = parts

        context = Context(
            reply,
            directory,
            group,
            caller=caller,
            registry=self._registry,
            command=name,
            config=self._config,
            usage=self._usage,
            cleaner=cleaner,
        )

        if name is None:
            if not mentioned:
                return Dispatch.IGNORED
            await reply(prefix_message(self._config.prefix, self._config.mention_as_prefix))
            return Dispatch.PREFIX_INFO

        if (handler := self._registry.get(name)) is None:
            logger.debug("unknown command %r from %r", name, caller)
            if self._config.notice_on_mention if mentioned else self._config.notice_on_prefix:
                await reply(invalid_command(self._config.prefix, name))
            return Dispatch.UNKNOWN_COMMAND

        logger.debug("dispatching %r with %d token(s) from %r", name, len(tokens), caller)
        outcome = await handler.run(context, tokens)
        return Dispatch.SUCCEEDED if outcome else Dispatch.FAILED

    def __repr__(self):
        return "%s(prefix=%r, me=%r, commands=%d)" % (
            type(self).__typename__, self._config.prefix, self._me, len(self._registry)
        )


__all__ = (
    "Dispatch",
    "Dispatcher",
)
