"""
Tests for the Ada grammar table and token type definitions.

Author: xwest
"""

import unittest
import sys
import os
import threading
from concurrent.futures import ThreadPoolExecutor

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from adalex.regex import Unit, derive, nullable
from adalex.lexer.tokens import TokenType, KEYWORDS, SINGLE_DELIMITERS, COMPOUND_DELIMITERS
from adalex.lexer.errors import GrammarError
from adalex.lexer.grammar import (
    GrammarRule, GrammarTable, get_grammar_table, build_grammar_table,
    KEYWORD_PRIORITY, COMPOUND_DELIMITER_PRIORITY,
    IDENTIFIER, DECIMAL_LITERAL, BASED_LITERAL, CHARACTER_LITERAL,
    STRING_LITERAL, COMMENT, WHITESPACES, GRAPHIC_CHARACTER
)
from adalex.startup.lazy_init import LazyComponent, LazyRegistry


def matches(regex, text):
    for character in text:
        regex = derive(regex, character)
        if regex is None:
            return False
    return nullable(regex)


class TestTokenTypes(unittest.TestCase):
    """The token type values are a persisted contract."""

    def test_stable_values(self):
        self.assertEqual(TokenType.AMPERSAND.value, 1)
        self.assertEqual(TokenType.VERTICAL_LINE.value, 16)
        self.assertEqual(TokenType.ARROW.value, 17)
        self.assertEqual(TokenType.BOX_SIGN.value, 26)
        self.assertEqual(TokenType.IDENTIFIER.value, 27)
        self.assertEqual(TokenType.STRING_LITERAL.value, 31)
        self.assertEqual(TokenType.COMMENT.value, 32)
        self.assertEqual(TokenType.WHITESPACE.value, 33)
        self.assertEqual(TokenType.INVALID.value, 34)
        self.assertEqual(TokenType.ABORT_KEYWORD.value, 35)
        self.assertEqual(TokenType.XOR_KEYWORD.value, 107)

    def test_values_are_unique_and_dense(self):
        values = sorted(member.value for member in TokenType)
        self.assertEqual(values, list(range(1, len(values) + 1)))

    def test_lookup_tables(self):
        self.assertEqual(len(SINGLE_DELIMITERS), 16)
        self.assertEqual(len(COMPOUND_DELIMITERS), 10)
        self.assertEqual(len(KEYWORDS), 73)
        self.assertEqual(KEYWORDS["synchronized"], TokenType.SYNCHRONIZED_KEYWORD)
        self.assertEqual(KEYWORDS["xor"], TokenType.XOR_KEYWORD)
        self.assertNotIn("true", KEYWORDS)

    def test_categories(self):
        self.assertTrue(TokenType.BEGIN_KEYWORD.is_keyword)
        self.assertFalse(TokenType.IDENTIFIER.is_keyword)
        self.assertTrue(TokenType.BOX_SIGN.is_delimiter)
        self.assertTrue(TokenType.APOSTROPHE.is_delimiter)
        self.assertFalse(TokenType.IDENTIFIER.is_delimiter)
        self.assertTrue(TokenType.BASED_LITERAL.is_literal)
        self.assertFalse(TokenType.COMMENT.is_literal)
        self.assertTrue(TokenType.COMMENT.is_trivia)
        self.assertTrue(TokenType.WHITESPACE.is_trivia)
        self.assertFalse(TokenType.INVALID.is_trivia)


class TestGrammarTable(unittest.TestCase):
    """Test the registered root rules."""

    def setUp(self):
        self.table = get_grammar_table()

    def test_built_once(self):
        self.assertIs(get_grammar_table(), self.table)

    def test_rule_count(self):
        # whitespace + 16 single + 10 compound + 6 literal/comment/identifier + 73 words
        self.assertEqual(len(self.table), 106)

    def test_every_kind_but_invalid_has_a_rule(self):
        kinds = {rule.kind for rule in self.table}
        self.assertEqual(kinds, set(TokenType) - {TokenType.INVALID})

    def test_indices(self):
        for position, rule in enumerate(self.table):
            self.assertEqual(rule.index, position)
            self.assertIs(self.table[position], rule)
            self.assertEqual(self.table.kind_of(position), rule.kind)
        self.assertEqual(self.table[0].kind, TokenType.WHITESPACE)

    def test_priorities(self):
        for rule in self.table:
            if rule.kind.is_keyword:
                self.assertEqual(rule.priority, KEYWORD_PRIORITY, rule.name)
            elif rule.kind in COMPOUND_DELIMITERS.values():
                self.assertEqual(rule.priority, COMPOUND_DELIMITER_PRIORITY, rule.name)
            else:
                self.assertEqual(rule.priority, 0, rule.name)

    def test_duplicate_kinds_are_rejected(self):
        rules = (
            GrammarRule(0, "a", Unit("a"), TokenType.IDENTIFIER),
            GrammarRule(1, "b", Unit("b"), TokenType.IDENTIFIER),
        )
        with self.assertRaises(GrammarError) as context:
            GrammarTable(rules)
        self.assertEqual(context.exception.diagnostic.code, "L200")
        self.assertIn("IDENTIFIER", str(context.exception))

    def test_misnumbered_rules_are_rejected(self):
        rules = (GrammarRule(3, "a", Unit("a"), TokenType.IDENTIFIER),)
        with self.assertRaises(GrammarError):
            GrammarTable(rules)

    def test_fresh_build_is_equivalent(self):
        table = build_grammar_table()
        self.assertEqual([rule.kind for rule in table], [rule.kind for rule in self.table])


class TestGrammarRegexes(unittest.TestCase):
    """Test the individual Ada lexical rules in isolation."""

    def test_identifier(self):
        self.assertTrue(matches(IDENTIFIER, "put_line"))
        self.assertTrue(matches(IDENTIFIER, "x1"))
        self.assertTrue(matches(IDENTIFIER, "ñandú"))
        self.assertFalse(matches(IDENTIFIER, "1x"))
        self.assertFalse(matches(IDENTIFIER, "_x"))

    def test_decimal_literal(self):
        for text in ("0", "42", "1_000_000", "3.14", "1.0e-6", "2e+3", "6e23"):
            self.assertTrue(matches(DECIMAL_LITERAL, text), text)
        for text in ("1.", ".5", "1__0", "1e", "1_"):
            self.assertFalse(matches(DECIMAL_LITERAL, text), text)

    def test_based_literal(self):
        for text in ("16#ff#", "2#1010_1010#", "16#f.8#e2", "8#777#"):
            self.assertTrue(matches(BASED_LITERAL, text), text)
        for text in ("16#ff", "16##", "#ff#"):
            self.assertFalse(matches(BASED_LITERAL, text), text)

    def test_character_literal(self):
        self.assertTrue(matches(CHARACTER_LITERAL, "'a'"))
        self.assertTrue(matches(CHARACTER_LITERAL, "' '"))
        self.assertTrue(matches(CHARACTER_LITERAL, "'''"))
        self.assertFalse(matches(CHARACTER_LITERAL, "''"))
        self.assertFalse(matches(CHARACTER_LITERAL, "'ab'"))
        self.assertFalse(matches(CHARACTER_LITERAL, "'\t'"))

    def test_string_literal(self):
        self.assertTrue(matches(STRING_LITERAL, '""'))
        self.assertTrue(matches(STRING_LITERAL, '"hello, world"'))
        self.assertTrue(matches(STRING_LITERAL, '"say ""hi"""'))
        self.assertFalse(matches(STRING_LITERAL, '"unterminated'))
        self.assertFalse(matches(STRING_LITERAL, '"two\nlines"'))

    def test_comment(self):
        self.assertTrue(matches(COMMENT, "--"))
        self.assertTrue(matches(COMMENT, "-- a comment\twith tab"))
        self.assertFalse(matches(COMMENT, "-- line\nnext"))
        self.assertFalse(matches(COMMENT, "-"))

    def test_whitespace(self):
        self.assertTrue(matches(WHITESPACES, " \t\r\n \u0085"))
        self.assertFalse(matches(WHITESPACES, ""))

    def test_graphic_character(self):
        for character in ("a", " ", '"', "'", "é", "∀"):
            self.assertTrue(matches(GRAPHIC_CHARACTER, character), repr(character))
        for character in ("\t", "\n", "\x00", "\x7f", "\ue000", "\ufffe", "\uffff", "\u2028"):
            self.assertFalse(matches(GRAPHIC_CHARACTER, character), repr(character))


class TestLazyComponent(unittest.TestCase):
    """Test build-once initialization."""

    def test_init_function_runs_once_across_threads(self):
        calls = []
        lock = threading.Lock()

        def build():
            with lock:
                calls.append(1)
            return object()

        component = LazyComponent("test component", build)
        self.assertFalse(component.is_initialized)

        with ThreadPoolExecutor(max_workers=8) as executor:
            instances = list(executor.map(lambda _: component.get_instance(), range(32)))

        self.assertEqual(len(calls), 1)
        self.assertTrue(all(instance is instances[0] for instance in instances))
        self.assertTrue(component.is_initialized)
        self.assertGreaterEqual(component.initialization_time_ms, 0.0)

    def test_registry(self):
        component = LazyComponent("registry test component", lambda: 42)
        self.assertFalse(component.is_initialized)
        LazyRegistry.initialize_all()
        self.assertTrue(component.is_initialized)
        self.assertEqual(component.get_instance(), 42)


if __name__ == '__main__':
    unittest.main()
