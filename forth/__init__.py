"""A small Forth dialect: an integer stack and textual word macros."""

from forth.interpreter import Interpreter, eval, format_stack, new

version = '0.1.0'

__all__ = ['Interpreter', 'eval', 'format_stack', 'new', 'version']
