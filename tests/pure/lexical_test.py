import unittest
from collections import deque

from minilisp.lang.error import UnexpectedCloseParen, UnexpectedEndOfInput
from minilisp.pure.lexical import List, Number, Symbol, atom, display_number, parse, parse_number, read_from_tokens, \
    tokenize


class TokenizeTestCase(unittest.TestCase):

    def test_tokenize(self):
        cases = {
            "(+ 1 2)": ["(", "+", "1", "2", ")"],
            "": [],
            "   \t\n": [],
            "((a))": ["(", "(", "a", ")", ")"],
            "(define x(quote y))": ["(", "define", "x", "(", "quote", "y", ")", ")"],
            "  x\t y\n": ["x", "y"],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)


class AtomTestCase(unittest.TestCase):

    def test_numbers(self):
        cases = {"1": 1, "-3.5": -3.5, "1e3": 1000, "0": 0, ".5": 0.5}
        for case, expected in cases.items():
            self.assertEqual(Number(expected), atom(case), case)

    def test_symbols(self):
        should_be_symbols = ["abc", "+", "-", "set!", ".", "1_000", "x1", "1+"]
        for case in should_be_symbols:
            self.assertEqual(Symbol(case), atom(case), case)

    def test_parse_number(self):
        should_raise = ["abc", "1_000", "", "1.2.3"]
        for case in should_raise:
            self.assertRaises(ValueError, parse_number, case)

        self.assertEqual(42.0, parse_number("42"))

    def test_display_number(self):
        cases = {3.0: "3", -0.0: "0", 2.5: "2.5", 1e20: "1e+20", -7.0: "-7"}
        for case, expected in cases.items():
            self.assertEqual(expected, display_number(case), case)


class ReaderTestCase(unittest.TestCase):

    def test_parse(self):
        cases = {
            "(+ 1 (* 2 3))": List([Symbol("+"), Number(1), List([Symbol("*"), Number(2), Number(3)])]),
            "()": List(),
            "x": Symbol("x"),
            "42": Number(42),
            "(())": List([List()]),
            "(a) (b)": List([Symbol("a")]),  # trailing expressions are ignored
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_parse_errors(self):
        should_raise_eof = ["(+ 1 2", "", "(", "((a)", "   "]
        for case in should_raise_eof:
            self.assertRaises(UnexpectedEndOfInput, parse, case)

        should_raise_close = [")", ") (a)"]
        for case in should_raise_close:
            self.assertRaises(UnexpectedCloseParen, parse, case)

    def test_read_consumes_tokens(self):
        tokens = deque(tokenize("(a b) c"))
        self.assertEqual(List([Symbol("a"), Symbol("b")]), read_from_tokens(tokens))
        self.assertEqual(deque(["c"]), tokens)

        self.assertEqual(Symbol("c"), read_from_tokens(tokens))
        self.assertFalse(tokens)
        self.assertRaises(UnexpectedEndOfInput, read_from_tokens, tokens)

    def test_display(self):
        cases = ["(+ 1 (* 2.5 x))", "()", "(a (b (c)))", "sym"]
        for case in cases:
            self.assertEqual(case, parse(case).display(), case)
            self.assertEqual(case, str(parse(case)), case)

        self.assertEqual("(1 2)", parse("( 1.0   2 )").display())


class ExpressionTestCase(unittest.TestCase):

    def test_number_equality(self):
        self.assertEqual(Number(3), 3)
        self.assertEqual(Number(3), 3.0)
        self.assertNotEqual(Number(3), Symbol("3"))
        self.assertNotEqual(Number(1), True)
        self.assertEqual(hash(Number(2)), hash(Number(2.0)))

    def test_list(self):
        expr = parse("(a b c)")
        self.assertEqual(3, len(expr))
        self.assertEqual(Symbol("b"), expr[1])
        self.assertEqual([Symbol("b"), Symbol("c")], expr[1:])
        self.assertEqual(["a", "b", "c"], [sym.name for sym in expr])
        self.assertNotEqual(parse("(a b)"), parse("(a b c)"))


if __name__ == '__main__':
    unittest.main()
