"""
Fixed user-facing copy used by the dispatcher and the help command.
"""


def invalid_command(prefix, command, /):
    return f"`{command}` is not a valid command. Try `{prefix} help` for a list."


def prefix_message(prefix, mention_as_prefix, /):
    return f"My prefix for this group is `{prefix}`{', or you can mention me.' if mention_as_prefix else ''}"


__all__ = (
    "invalid_command",
    "prefix_message",
)
