# python
"""
Config module behavioral tests.

Scope
- Defaults, validation of prefix/colour/switches, immutability.
- from_mapping(): camelCase and snake_case keys, nested notice settings, unknown keys.

Conventions
- Test method names follow CamelCase per project convention.
"""
from __future__ import annotations

import unittest
from unittest import TestCase

from herald import Config


class TestConfig(TestCase):
    """Behavioral tests for Config construction."""

    def testDefaults(self):
        config = Config()
        self.assertEqual(config.prefix, ";;")
        self.assertTrue(config.mention_as_prefix)
        self.assertEqual(config.theme_color, "#574b90")
        self.assertTrue(config.give_context_on_error)
        self.assertFalse(config.zero_indexed)
        self.assertFalse(config.notice_on_mention)
        self.assertTrue(config.notice_on_prefix)

    def testPrefixIsStripped(self):
        self.assertEqual(Config("  !  ").prefix, "!")

    def testBadPrefixes(self):
        with self.assertRaises(ValueError):
            Config("")
        with self.assertRaises(ValueError):
            Config("a b")
        with self.assertRaises(TypeError):
            Config(1)

    def testBadColour(self):
        with self.assertRaises(ValueError):
            Config(theme_color="purple")

    def testSwitchesMustBeBooleans(self):
        with self.assertRaises(TypeError):
            Config(zero_indexed=1)

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            Config().prefix = "!"

    def testEquality(self):
        self.assertEqual(Config("!"), Config("!"))
        self.assertNotEqual(Config("!"), Config("?"))
        self.assertEqual(hash(Config("!")), hash(Config("!")))


class TestFromMapping(TestCase):
    """Behavioral tests for Config.from_mapping."""

    def testEmptyMappingIsDefault(self):
        self.assertEqual(Config.from_mapping({}), Config())

    def testCamelAndSnakeCase(self):
        config = Config.from_mapping({"prefix": "!", "giveContextOnError": False, "zero_indexed": True})
        self.assertEqual(config, Config("!", give_context_on_error=False, zero_indexed=True))

    def testInvalidCommandNotice(self):
        config = Config.from_mapping({"invalidCommandNotice": {"mention": True, "prefix": False}})
        self.assertTrue(config.notice_on_mention)
        self.assertFalse(config.notice_on_prefix)

    def testUnknownKeysRejected(self):
        with self.assertRaises(KeyError):
            Config.from_mapping({"colour": "#000000"})
        with self.assertRaises(KeyError):
            Config.from_mapping({"invalidCommandNotice": {"dm": True}})

    def testNonMappingRejected(self):
        with self.assertRaises(TypeError):
            Config.from_mapping([("prefix", "!")])

    def testValuesAreStillValidated(self):
        with self.assertRaises(ValueError):
            Config.from_mapping({"themeColor": "#12"})


if __name__ == "__main__":
    unittest.main()
