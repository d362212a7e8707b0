"""
Per-invocation context and the collaborator interfaces parsers consume.

Scope
- Context: the read-only bundle a parser or an action receives for one
  command invocation (reply channel, directory lookups, enclosing group,
  caller, registry, current command name, configuration).
- Directory / Group: abstract collaborators resolving ids to remote entities.
  Herald never talks to a network itself; hosts implement these on top of
  their chat client.
- EntityNotFound: what a collaborator raises when an id resolves to nothing.

Contract for collaborators
- fetch_* coroutines return the entity, or None / raise EntityNotFound when it
  does not exist. Parsers turn both into ParseFailureReason.BAD_VALUE.
- A missing group (context.group is None) means group-scoped concepts are
  meaningless here; parsers report ParseFailureReason.NOT_APPLICABLE.
"""
import inspect
from abc import ABC, abstractmethod

from .config import Config
from .utils import *


class EntityNotFound(LookupError):
    """
    raised by a Directory/Group when an id does not resolve to an entity.
    """


class Directory(ABC):
    """
    global registry of users and channels reachable by the bot.
    """

    @abstractmethod
    async def fetch_user(self, id, /):
        ...

    @abstractmethod
    async def fetch_channel(self, id, /):
        ...


class Group(ABC):
    """
    the enclosing group (guild, workspace, ...) a message was sent in.
    """

    @abstractmethod
    async def fetch_member(self, id, /):
        ...

    @abstractmethod
    async def fetch_role(self, id, /):
        ...


def _verbatim(raw, /):
    return raw


def _asynchronous(object, /):
    """
    Internal: whether calling `object` yields an awaitable (async function,
    bound async method, or an instance with an async __call__).
    """
    return inspect.iscoroutinefunction(object) or inspect.iscoroutinefunction(getattr(object, "__call__", None))


class Context:
    """
    Read-only data for one command invocation.

    Fields
    - reply: coroutine function (text) -> None; sends a message back to the caller.
    - directory: Directory | None; user/channel lookups.
    - group: Group | None; None when the message came from outside any group.
    - caller: opaque identity of whoever sent the command (None when unknown).
    - registry: the CommandRegistry the command was dispatched from (or None).
    - command: name of the command being run (or None before routing).
    - config: Config value driving formatting and behavior choices.
    - usage: coroutine function (context, name) -> None; shows usage for a
      command after a failure. None disables the side effect.
    - cleaner: function (raw) -> str used by the text parser to neutralize
      mentions and other markup. Defaults to returning the token verbatim.

    Contexts never change after construction; derive() builds a modified copy.
    """

    __fields__ = (
        "reply",
        "directory",
        "group",
        "caller",
        "registry",
        "command",
        "config",
        "usage",
        "cleaner",
    )

    reply = mirror("reply")
    directory = mirror("directory")
    group = mirror("group")
    caller = mirror("caller")
    registry = mirror("registry")
    command = mirror("command")
    config = mirror("config")
    usage = mirror("usage")
    cleaner = mirror("cleaner")

    def __init__(
            self,
            reply,
            /,
            directory=None,
            group=None,
            *,
            caller=None,
            registry=None,
            command=None,
            config=Unset,
            usage=None,
            cleaner=Unset,
    ):
        if not _asynchronous(reply):
            raise TypeError("context 'reply' must be a coroutine function")
        if directory is not None and not isinstance(directory, Directory):
            raise TypeError("context 'directory' must be a directory")
        if group is not None and not isinstance(group, Group):
            raise TypeError("context 'group' must be a group")
        if command is not None and not isinstance(command, str):
            raise TypeError("context 'command' must be a string")
        if not isinstance(config := coalesce(config, Config()), Config):
            raise TypeError("context 'config' must be a config")
        if usage is not None and not _asynchronous(usage):
            raise TypeError("context 'usage' must be a coroutine function")
        if not callable(cleaner := coalesce(cleaner, _verbatim)):
            raise TypeError("context 'cleaner' must be callable")

        self._reply = reply
        self._directory = directory
        self._group = group
        self._caller = caller
        self._registry = registry
        self._command = command
        self._config = config
        self._usage = usage
        self._cleaner = cleaner

    def clean(self, raw, /):
        """
        neutralize markup in a raw token through the host's cleaner.
        """
        return self._cleaner(raw)

    def derive(self, **changes):
        """
        return a copy of this context with the given fields replaced.
        """
        if unknown := set(changes) - set(self.__fields__):
            raise TypeError("context has no field(s) %s" % ", ".join(map(repr, sorted(unknown))))
        fields = {name: getattr(self, "_" + name) for name in self.__fields__} | changes
        reply = fields.pop("reply")
        return type(self)(reply, fields.pop("directory"), fields.pop("group"), **fields)

    def __repr__(self):
        return "context(command=%r, caller=%r, group=%r)" % (self._command, self._caller, self._group)

    def __rich_repr__(self):
        yield "command", self._command
        yield "caller", self._caller
        yield "group", self._group


__all__ = (
    "EntityNotFound",
    "Directory",
    "Group",
    "Context",
)
