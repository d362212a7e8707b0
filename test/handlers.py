# python
"""
Handlers module behavioral tests.

Scope
- Metadata validation and normalization.
- Token consumption per kind: required (VALUE_REQUIRED when empty), optional (absent when empty),
  rest (tuple value, leftmost failing offset, sequential early exit vs concurrent evaluation).
- Display: usage brackets and compact signatures.

Conventions
- Test method names follow CamelCase per project convention.
"""
from __future__ import annotations

import asyncio
import unittest
from unittest import IsolatedAsyncioTestCase, TestCase

from herald import (
    ArgKind,
    ArgumentHandler,
    Failure,
    Metadata,
    OptionalArgument,
    ParseFailureReason,
    Parser,
    RequiredArgument,
    RestArgument,
    Success,
    absent,
    boolean,
    fail,
    natural,
    succeed,
    text,
)


class TestMetadata(TestCase):
    """Behavioral tests for Metadata."""

    def testNameIsStripped(self):
        self.assertEqual(Metadata("  count ", "How many").name, "count")

    def testEmptyNameRejected(self):
        with self.assertRaises(ValueError):
            Metadata("   ", "How many")

    def testNameWithWhitespaceRejected(self):
        with self.assertRaises(ValueError):
            Metadata("two words", "How many")

    def testNonStringNameRejected(self):
        with self.assertRaises(TypeError):
            Metadata(3, "How many")

    def testEmptyShortRejected(self):
        with self.assertRaises(ValueError):
            Metadata("count", "")

    def testEmptyLongBecomesNone(self):
        self.assertIsNone(Metadata("count", "How many", "  ").long)
        self.assertIsNone(Metadata("count", "How many").long)


class TestConstruction(TestCase):
    """Behavioral tests for handler construction and display."""

    def testBaseIsAbstract(self):
        with self.assertRaises(TypeError):
            ArgumentHandler(natural, ("count", "How many"))

    def testParserIsRequired(self):
        with self.assertRaises(TypeError):
            RequiredArgument(lambda raw: succeed(raw), ("count", "How many"))

    def testMetadataTupleIsAccepted(self):
        handler = RequiredArgument(natural, ("count", "How many"))
        self.assertIsInstance(handler.metadata, Metadata)
        self.assertEqual(handler.type, "natural")

    def testKindsAndArgsTaken(self):
        required = RequiredArgument(natural, ("a", "A"))
        optional = OptionalArgument(natural, ("b", "B"))
        rest = RestArgument(natural, ("c", "C"))
        self.assertIs(required.kind, ArgKind.REQUIRED)
        self.assertIs(optional.kind, ArgKind.OPTIONAL)
        self.assertIs(rest.kind, ArgKind.REST)
        self.assertEqual(required.args_taken, 1)
        self.assertEqual(optional.args_taken, 1)
        self.assertIs(rest.args_taken, Ellipsis)

    def testUsageBrackets(self):
        self.assertEqual(str(RequiredArgument(natural, ("count", "How many"))), "<count: natural>")
        self.assertEqual(str(OptionalArgument(boolean, ("loud", "Shout"))), "[loud: boolean]")
        self.assertEqual(str(RestArgument(text, ("words", "Words"))), "[words: text ...]")

    def testSignatures(self):
        self.assertEqual(RequiredArgument(natural, ("count", "How many")).signature, "natural")
        self.assertEqual(OptionalArgument(boolean, ("loud", "Shout")).signature, "boolean?")
        self.assertEqual(RestArgument(text, ("words", "Words")).signature, "...text")

    def testConcurrentMustBeBoolean(self):
        with self.assertRaises(TypeError):
            RestArgument(natural, ("c", "C"), concurrent=1)


class TestTake(IsolatedAsyncioTestCase):
    """Behavioral tests for token consumption."""

    async def testRequiredMissingIsValueRequired(self):
        calls = []

        def spy(raw):
            calls.append(raw)
            return succeed(raw)

        handler = RequiredArgument(Parser(spy), ("a", "A"))
        self.assertEqual(await handler.take(()), (Failure(ParseFailureReason.VALUE_REQUIRED), ()))
        self.assertEqual(calls, [])

    async def testRequiredAdvancesWhateverTheOutcome(self):
        handler = RequiredArgument(natural, ("a", "A"))
        self.assertEqual(await handler.take(("1", "x")), (Success(1), ("x",)))
        result, remaining = await handler.take(("-1", "x"))
        self.assertEqual(result.reason, ParseFailureReason.BAD_VALUE)
        self.assertEqual(remaining, ("x",))

    async def testOptionalMissingIsAbsent(self):
        result, remaining = await OptionalArgument(text, ("a", "A")).take([])
        self.assertIs(result.value, absent)
        self.assertEqual(remaining, ())

    async def testOptionalConsumesOneToken(self):
        self.assertEqual(await OptionalArgument(text, ("a", "A")).take(["ping", "pong"]), (Success("ping"), ("pong",)))

    async def testRestCollectsTuple(self):
        self.assertEqual(await RestArgument(natural, ("n", "N")).take(["1", "2", "3"]), (Success((1, 2, 3)), ()))

    async def testRestEmptyIsEmptyTuple(self):
        self.assertEqual(await RestArgument(natural, ("n", "N")).take([]), (Success(()), ()))

    async def testRestReportsOffsetAndStopsEarly(self):
        seen = []

        async def spy(raw, context):
            seen.append(raw)
            return await natural(raw, context)

        handler = RestArgument(Parser(spy), ("n", "N"))
        result, remaining = await handler.take(["1", "2", "-1", "3"])
        self.assertEqual(result, Failure(ParseFailureReason.BAD_VALUE, 2))
        self.assertEqual(remaining, ("3",))
        self.assertEqual(seen, ["1", "2", "-1"])

    async def testConcurrentRestReportsLeftmostFailure(self):
        async def slow(raw):
            # the later the token, the sooner it finishes
            await asyncio.sleep(0.01 * (5 - int(raw.lstrip("-x"))))
            if raw.startswith("-"):
                return fail(ParseFailureReason.BAD_VALUE)
            if raw.startswith("x"):
                return fail(ParseFailureReason.BAD_FORMAT)
            return succeed(int(raw))

        handler = RestArgument(Parser(slow), ("n", "N"), concurrent=True)
        result, _ = await handler.take(["1", "-2", "3", "x4"])
        self.assertEqual(result, Failure(ParseFailureReason.BAD_VALUE, 1))
        self.assertEqual(await handler.take(["1", "2"]), (Success((1, 2)), ()))


if __name__ == "__main__":
    unittest.main()
