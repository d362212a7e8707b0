import asyncio
import logging
import sys

from rich.console import Console
from rich.text import Text

from herald import (
    CommandRegistry,
    Config,
    Directory,
    Dispatcher,
    EntityNotFound,
    OptionalArgument,
    RequiredArgument,
    RestArgument,
    absent,
    boolean,
    command,
    help_command,
    natural,
    user,
)
from herald.logs import configure

console = Console()
config = Config(";;", theme_color="#574b90")


class Roster(Directory):
    """
    in-memory directory standing in for a chat service.
    """

    users = {"1001": "ada", "1002": "grace"}
    channels = {"2001": "general"}

    async def fetch_user(self, id, /):
        try:
            return self.users[id]
        except KeyError:
            raise EntityNotFound(id) from None

    async def fetch_channel(self, id, /):
        return self.channels.get(id)


@command("ping", "Check that the bot answers")
async def ping(context):
    await context.reply("pong")


@command("sum", "Add natural numbers", rest=RestArgument(natural, ("numbers", "Numbers to add")))
async def add(context, numbers):
    await context.reply(str(sum(numbers)))


@command("greet", "Greet a user", required=[
    RequiredArgument(user, ("who", "The user to greet", "A mention like <@1001> or a raw id.")),
], optional=[
    OptionalArgument(boolean, ("loud", "Whether to shout")),
])
async def greet(context, who, loud):
    message = f"hello, {who}!"
    await context.reply(message.upper() if absent.fill(loud, False) else message)


async def reply(text, /):
    console.print(Text(text, style=config.theme_color))


async def main():
    configure(logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    dispatcher = Dispatcher(CommandRegistry(help_command, ping, add, greet), config, me="42")
    directory = Roster()
    console.print(Text(f"type commands prefixed with {config.prefix!r}; ctrl-d quits", style="dim"))
    while True:
        try:
            line = await asyncio.to_thread(console.input, "> ")
        except EOFError:
            break
        await dispatcher.dispatch(line, reply, directory, caller="console")


if __name__ == '__main__':
    asyncio.run(main())
