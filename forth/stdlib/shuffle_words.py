"""Shuffle words rearrange the top of the stack.

Stack effects are written bottom to top, as in Forth."""

from typing import Callable, Dict

from forth.errors import StackUnderflow
from forth.linked_list import Stack


def _require(stack: Stack, depth: int) -> None:
    if len(stack) < depth:
        raise StackUnderflow()


def dup(stack: Stack) -> Stack:
    """x -- x x"""
    _require(stack, 1)
    return stack.push(stack[0])


def drop(stack: Stack) -> Stack:
    """x --"""
    _require(stack, 1)
    _, rest = stack.pop(1)
    return rest


def swap(stack: Stack) -> Stack:
    """x y -- y x"""
    _require(stack, 2)
    (y, x), rest = stack.pop(2)
    return rest.push(y, x)


def over(stack: Stack) -> Stack:
    """x y -- x y x"""
    _require(stack, 2)
    return stack.push(stack[1])


shuffle_words: Dict[str, Callable[[Stack], Stack]] = {
    'dup': dup,
    'drop': drop,
    'swap': swap,
    'over': over,
}
