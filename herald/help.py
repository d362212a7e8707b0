"""
Built-in help command and usage rendering.

- help                → one line per registered command:
                        `name <a: type> [b: type]: short description`
- help <command>      → detailed page for that command (title, descriptions,
                        one "name: signature" entry per argument).
- help <unknown>      → the invalid-command notice.

show() doubles as the usage collaborator the dispatcher hands to contexts,
so a failed parse can be followed by the page of the command that failed.
"""
from .absence import absent
from .commands import command
from .handlers import OptionalArgument
from .parsers import text
from .strings import invalid_command


def _describe(short, long, /):
    return short if not long else f"{short}\n{long}"


def summary(handler, /):
    """
    one-line listing entry for a command.
    """
    return f"`{handler.usage}: {handler.metadata.short}`"


def page(handler, /):
    """
    detailed help page for a command.
    """
    lines = [f"Help for `{handler.name}`", _describe(handler.metadata.short, handler.metadata.long)]
    for argument in handler.handlers:
        lines.append("")
        lines.append(f"{argument.metadata.name}: {argument.signature}")
        lines.append(_describe(argument.metadata.short, argument.metadata.long))
    return "\n".join(lines)


async def show(context, name=absent, /):
    """
    reply with the command listing, or with the page of one command.
    """
    registry = context.registry if context.registry is not None else {}
    if (name := absent.fill(name)) is None:
        await context.reply("\n".join(map(summary, registry.values())) or "No commands are registered.")
    elif (handler := registry.get(name)) is not None:
        await context.reply(page(handler))
    else:
        await context.reply(invalid_command(context.config.prefix, name))


help_command = command(
    "help",
    "Get help using the bot",
    optional=[
        OptionalArgument(text, (
            "command",
            "The command to get help for",
            "If provided, give information about the command. If not, give a list of commands.",
        )),
    ],
)(show)


__all__ = (
    "summary",
    "page",
    "show",
    "help_command",
)
