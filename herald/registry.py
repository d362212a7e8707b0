"""
Herald command registry: exact-name mapping from command names to handlers.

Rules
- Names are case-sensitive, non-empty and whitespace-free; "Help" and "help"
  are different commands.
- Lookup is by exact name only (no prefixes, aliases or fuzzy matching).
- A name holds one handler; registering another handler under a taken name
  raises ValueError.
- Iteration follows registration order, which is also the order of the
  help listing.
"""
import logging
import re
from collections.abc import Mapping

from .commands import CommandHandler

logger = logging.getLogger(__name__)


class CommandRegistry(Mapping):
    """
    Read-mostly mapping of command name → CommandHandler.

    Construction
    - CommandRegistry(*handlers): registers each handler under its own name.

    Mutation
    - register(handler, name=None): add one handler, optionally under a
      different name than its metadata name. Returns the handler so it can
      be used as a decorator on top of @command(...).
    """

    __typename__ = "command-registry"

    def __init__(self, *handlers):
        self._commands = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler, /, name=None):
        if not isinstance(handler, CommandHandler):
            raise TypeError(f"{type(self).__typename__} can only register command handlers")
        name = handler.name if name is None else name
        if not isinstance(name, str):
            raise TypeError(f"{type(self).__typename__} names must be strings")
        elif not name or re.search(r"\s", name):
            raise ValueError(f"{type(self).__typename__} names must be non-empty and free of whitespace")
        elif self._commands.setdefault(name, handler) is not handler:
            raise ValueError(f"{type(self).__typename__} name {name!r} is already in use")
        logger.debug("registered command %r (%s)", name, handler.usage)
        return handler

    def __getitem__(self, name, /):
        return self._commands[name]

    def __iter__(self):
        return iter(self._commands)

    def __len__(self):
        return len(self._commands)

    def __repr__(self):
        return "%s(%s)" % (type(self).__typename__, ", ".join(map(repr, self._commands)))

    def __rich_repr__(self):
        for name, handler in self._commands.items():
            yield name, handler.usage


__all__ = (
    "CommandRegistry",
)
