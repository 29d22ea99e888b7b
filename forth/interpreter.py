"""The evaluator.

An Interpreter is an immutable value. `eval` folds the tokens of one program
through `do_cmd`, building a new Interpreter per token; an error raised by
any token aborts the whole program and leaves the caller holding the
Interpreter it passed in.

Definitions are textual macros. While a definition is being captured, every
token that names an existing definition is replaced by that definition's
text, so redefining a word later does not change words already built on
it."""

import dataclasses
import functools
import types
from typing import Mapping, assert_never

from forth.errors import ForthError, InvalidWord, UnknownWord
import forth.lex
import forth.logging
from forth.linked_list import Stack, empty_list
from forth.operators import apply_operator, operators
from forth.stdlib.shuffle_words import shuffle_words

_logger = forth.logging.get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Evaluating:
    """Normal dispatch."""


@dataclasses.dataclass(frozen=True)
class AwaitingIdentifier:
    """A `:` was seen; the next token names the new word."""


@dataclasses.dataclass(frozen=True)
class CapturingDefinition:
    """Collecting the expanded body of `name` until `;`."""

    name: str
    body: str = ''


type Mode = Evaluating | AwaitingIdentifier | CapturingDefinition


@dataclasses.dataclass(frozen=True)
class Interpreter:
    stack: Stack = empty_list
    mode: Mode = Evaluating()
    definitions: Mapping[str, str] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    def with_definition(self, name: str, body: str) -> 'Interpreter':
        definitions = types.MappingProxyType({**self.definitions, name: body})
        return dataclasses.replace(
            self, mode=Evaluating(), definitions=definitions
        )


def new() -> Interpreter:
    return Interpreter()


def eval(interpreter: Interpreter, program: str) -> Interpreter:
    """Evaluate one line of space-separated words.

    Raises a ForthError subclass on the first word that fails."""
    _logger.debug('evaluating {!r}', program)
    return functools.reduce(do_cmd, forth.lex.tokenize(program), interpreter)


def format_stack(interpreter: Interpreter) -> str:
    """Render the stack bottom first, top last."""
    return ' '.join(map(str, reversed(list(interpreter.stack))))


def do_cmd(interpreter: Interpreter, token: str) -> Interpreter:
    if not token:
        return interpreter
    mode = interpreter.mode
    if isinstance(mode, AwaitingIdentifier):
        return _name_definition(interpreter, token)
    elif isinstance(mode, CapturingDefinition):
        return _capture(interpreter, mode, token)
    elif isinstance(mode, Evaluating):
        try:
            return _evaluate(interpreter, token)
        except ForthError as e:
            _logger.debug('{!r} failed: {}', token, e)
            raise
    else:
        assert_never(mode)


def _name_definition(interpreter: Interpreter, token: str) -> Interpreter:
    if token in (':', ';') or forth.lex.parse_integer(token) is not None:
        raise InvalidWord()
    return dataclasses.replace(interpreter, mode=CapturingDefinition(token))


def _capture(
    interpreter: Interpreter, mode: CapturingDefinition, token: str
) -> Interpreter:
    if token == ';':
        _logger.debug('defined {} as {!r}', mode.name, mode.body)
        return interpreter.with_definition(mode.name, mode.body)
    expansion = interpreter.definitions.get(token, token)
    body = f'{mode.body} {expansion}' if mode.body else expansion
    return dataclasses.replace(
        interpreter, mode=CapturingDefinition(mode.name, body)
    )


def _evaluate(interpreter: Interpreter, token: str) -> Interpreter:
    if token == ':':
        return dataclasses.replace(interpreter, mode=AwaitingIdentifier())
    number = forth.lex.parse_integer(token)
    if number is not None:
        return dataclasses.replace(
            interpreter, stack=interpreter.stack.push(number)
        )
    if token in interpreter.definitions:
        return eval(interpreter, interpreter.definitions[token])
    if token in operators:
        return dataclasses.replace(
            interpreter, stack=apply_operator(token, interpreter.stack)
        )
    if token in shuffle_words:
        return dataclasses.replace(
            interpreter, stack=shuffle_words[token](interpreter.stack)
        )
    raise UnknownWord()
