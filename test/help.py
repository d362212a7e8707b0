# python
"""
Help module behavioral tests.

Scope
- summary() and page() rendering of usage and descriptions.
- The built-in help command: listing, detailed page, unknown names, empty registry.

Conventions
- Test method names follow CamelCase per project convention.
"""
from __future__ import annotations

import unittest
from unittest import IsolatedAsyncioTestCase, TestCase

from herald import (
    CommandRegistry,
    Config,
    Context,
    OptionalArgument,
    RequiredArgument,
    RestArgument,
    boolean,
    command,
    help_command,
    natural,
    user,
)
from herald.help import page, summary


@command("greet", "Greet a user", "Sends a friendly message.", required=[
    RequiredArgument(user, ("who", "The user to greet", "A mention or a raw id.")),
], optional=[
    OptionalArgument(boolean, ("loud", "Whether to shout")),
])
def greet(context, who, loud):
    pass


@command("sum", "Add natural numbers", rest=RestArgument(natural, ("numbers", "Numbers to add")))
def add(context, numbers):
    pass


class TestRendering(TestCase):
    """Behavioral tests for summary() and page()."""

    def testSummary(self):
        self.assertEqual(summary(greet), "`greet <who: user> [loud: boolean]: Greet a user`")
        self.assertEqual(summary(add), "`sum [numbers: natural ...]: Add natural numbers`")

    def testPage(self):
        self.assertEqual(page(greet), "\n".join((
            "Help for `greet`",
            "Greet a user\nSends a friendly message.",
            "",
            "who: user",
            "The user to greet\nA mention or a raw id.",
            "",
            "loud: boolean?",
            "Whether to shout",
        )))

    def testPageWithoutArguments(self):
        @command("ping", "Check the bot answers")
        def ping(context):
            pass

        self.assertEqual(page(ping), "Help for `ping`\nCheck the bot answers")

    def testHelpCommandShape(self):
        self.assertEqual(help_command.name, "help")
        self.assertEqual(help_command.usage, "help [command: text]")
        self.assertEqual(help_command.min_args, 0)


class TestHelpCommand(IsolatedAsyncioTestCase):
    """Behavioral tests for running the help command."""

    async def asyncSetUp(self):
        self.messages = []
        self.registry = CommandRegistry(help_command, greet, add)

    async def reply(self, text, /):
        self.messages.append(text)

    def context(self, registry=None):
        return Context(self.reply, registry=registry or self.registry, command="help", config=Config("!"))

    async def testListing(self):
        await help_command.run(self.context(), [])
        self.assertEqual(self.messages, ["\n".join((
            "`help [command: text]: Get help using the bot`",
            "`greet <who: user> [loud: boolean]: Greet a user`",
            "`sum [numbers: natural ...]: Add natural numbers`",
        ))])

    async def testDetailedPage(self):
        await help_command.run(self.context(), ["sum"])
        self.assertEqual(self.messages, [page(add)])

    async def testUnknownCommand(self):
        await help_command.run(self.context(), ["nope"])
        self.assertEqual(self.messages, ["`nope` is not a valid command. Try `! help` for a list."])

    async def testEmptyRegistry(self):
        await help_command.run(Context(self.reply, command="help"), [])
        self.assertEqual(self.messages, ["No commands are registered."])


if __name__ == "__main__":
    unittest.main()
