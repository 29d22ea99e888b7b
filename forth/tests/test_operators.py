from forth.errors import DivisionByZero, StackUnderflow
from forth.linked_list import Stack, empty_list
from forth.operators import apply_operator
import unittest


def stack(*bottom_to_top: int) -> Stack:
    return empty_list.push(*bottom_to_top)


class TestArithmetic(unittest.TestCase):
    def test_operand_order(self) -> None:
        examples = {
            '+': 7,
            '-': 3,
            '*': 10,
            '/': 2,
        }
        for name, expected in examples.items():
            with self.subTest(operator=name):
                self.assertEqual(
                    stack(9, expected), apply_operator(name, stack(9, 5, 2))
                )

    def test_division_truncates_toward_zero(self) -> None:
        examples = [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3)]
        for second, first, quotient in examples:
            with self.subTest(second=second, first=first):
                self.assertEqual(
                    stack(quotient), apply_operator('/', stack(second, first))
                )

    def test_division_by_zero(self) -> None:
        with self.assertRaises(DivisionByZero):
            apply_operator('/', stack(4, 0))

    def test_underflow(self) -> None:
        for operands in [(), (1,)]:
            for name in '+-*/':
                with self.subTest(operator=name, operands=operands):
                    with self.assertRaises(StackUnderflow):
                        apply_operator(name, stack(*operands))

    def test_no_overflow(self) -> None:
        big = 2 ** 64
        self.assertEqual(
            stack(big * big), apply_operator('*', stack(big, big))
        )
