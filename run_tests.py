#!/usr/bin/env python3
"""
Main test runner for the adalex test suite.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Lex a small Ada unit and print its token stream."""

    print("adalex Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from adalex.lexer import Lexer, TokenType, get_grammar_table
        print("All adalex modules imported successfully")
    except ImportError as e:
        print(f"Failed to import adalex modules: {e}")
        return False

    code = """\
procedure Main is
   Size : constant := 16#FF#;
begin
   Put_Line (Integer'Image (Size));  -- prints 255
end Main;
"""

    print("Testing lexing pipeline...")
    try:
        table = get_grammar_table()
        print(f"  Grammar table: {len(table)} root rules")

        lexer = Lexer()
        lexer.start(code)
        tokens = list(lexer)
        print(f"  Generated {len(tokens)} tokens")

        invalid = [token for token in tokens if token.type == TokenType.INVALID]
        if invalid:
            print(f"  Unexpected invalid tokens: {invalid}")
            return False

        if tokens[-1].end != len(code):
            print(f"  Tokens stop at {tokens[-1].end}, expected {len(code)}")
            return False

    except Exception as e:
        print(f"Lexing pipeline test FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False

    print("-" * 40)
    for token in tokens:
        if not token.type.is_trivia:
            print(f"  {token.type.name:<20} {token.text(code)!r}")
    print("-" * 40)
    print()
    return True


def run_all_tests():
    """Run the smoke test, then every unittest module under tests/."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
