"""Arithmetic words.

Each operator pops the top of the stack (first) and the item below it
(second), and pushes `second <op> first`."""

from typing import Callable, Dict

from forth.errors import DivisionByZero, StackUnderflow
from forth.linked_list import Stack


def _divide(second: int, first: int) -> int:
    if first == 0:
        raise DivisionByZero()
    # Python's // floors; Forth division truncates toward zero.
    quotient = abs(second) // abs(first)
    return -quotient if (second < 0) != (first < 0) else quotient


operators: Dict[str, Callable[[int, int], int]] = {
    '+': lambda second, first: second + first,
    '-': lambda second, first: second - first,
    '*': lambda second, first: second * first,
    '/': _divide,
}


def apply_operator(name: str, stack: Stack) -> Stack:
    if len(stack) < 2:
        raise StackUnderflow()
    (first, second), rest = stack.pop(2)
    return rest.push(operators[name](second, first))
