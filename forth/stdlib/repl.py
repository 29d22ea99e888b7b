"""An interactive read-eval-print loop around the interpreter."""

import sys
from typing import Optional

import forth
from forth.errors import error_message, evaluation_errors
from forth.interpreter import Interpreter, eval, format_stack, new
import forth.logging

_logger = forth.logging.get_logger(__name__)

default_init_file_name = '.forth-rc'


def print_exit_message() -> None:
    print('Bye!')


def print_error(error: BaseException) -> None:
    print('Error:', error_message(error))


def _exec_init_file(
    interpreter: Interpreter, init_file_name: str
) -> Interpreter:
    print('Running startup initialization file...')
    try:
        with open(init_file_name) as init_file:
            lines = init_file.read().splitlines()
    except FileNotFoundError:
        print('No startup initialization file found.')
        return interpreter
    for line_number, line in enumerate(lines, start=1):
        try:
            interpreter = eval(interpreter, line)
        except evaluation_errors as e:
            _logger.info(
                '{}:{}: {}', init_file_name, line_number, e, exc_info=True
            )
            print_error(e)
    return interpreter


def _do_repl_loop(
    prompt: str, debug: bool, interpreter: Interpreter
) -> Interpreter:
    while True:
        print(prompt, end='', flush=True)
        try:
            line = input()
        except EOFError:
            break
        try:
            interpreter = eval(interpreter, line)
        except evaluation_errors as e:
            print_error(e)
            continue
        print('Stack:', format_stack(interpreter))
        if debug:
            print('Mode:', interpreter.mode)
    return interpreter


def repl(
    interpreter: Optional[Interpreter] = None,
    debug: bool = False,
    init_file_name: str = default_init_file_name,
) -> Interpreter:
    """Run the REPL until end of input and return the final interpreter."""
    if interpreter is None:
        interpreter = new()
    intro_message = 'Forth REPL (version {} on Python {}).'.format(
        forth.version, sys.version
    )
    print(intro_message)
    interpreter = _exec_init_file(interpreter, init_file_name)
    try:
        interpreter = _do_repl_loop('>>> ', debug, interpreter)
    except KeyboardInterrupt:
        # catch ctrl-c to cleanly exit
        pass
    print_exit_message()
    return interpreter
