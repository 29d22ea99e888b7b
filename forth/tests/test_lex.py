import forth.lex as lex
from hypothesis import given
import hypothesis.strategies as st
import unittest


class TestTokenize(unittest.TestCase):
    def test_examples(self) -> None:
        examples = {
            '1 2 +': ['1', '2', '+'],
            'DUP Swap': ['dup', 'swap'],
            '  : foo 1 ;  ': [':', 'foo', '1', ';'],
            '': [''],
            '   ': [''],
            '1  2': ['1', '', '2'],
        }
        for example, expected_tokens in examples.items():
            with self.subTest(example=example):
                self.assertListEqual(lex.tokenize(example), expected_tokens)


class TestParseInteger(unittest.TestCase):
    @given(st.integers())
    def test_integers(self, n: int) -> None:
        self.assertEqual(lex.parse_integer(str(n)), n)

    def test_signs(self) -> None:
        self.assertEqual(lex.parse_integer('+5'), 5)
        self.assertEqual(lex.parse_integer('-0'), 0)

    def test_not_integers(self) -> None:
        for token in ['', '-', '+', 'foo', '1a', '1_000', '٣', '1.5', ':']:
            with self.subTest(token=token):
                self.assertIsNone(lex.parse_integer(token))
