"""The Forth command line driver."""

import argparse
import logging
import sys
from typing import IO, Callable

import forth.logging
import forth.stdlib.repl
from forth.errors import error_message, evaluation_errors
from forth.interpreter import eval, format_stack, new

filename = '<stdin>'


def file_type(mode: str) -> Callable[[str], IO[str]]:
    """Capture the filename and create a file object."""

    def func(name: str) -> IO[str]:
        global filename
        filename = name
        return open(name, mode=mode)

    return func


arg_parser = argparse.ArgumentParser(description='Run a Forth program.')
arg_parser.add_argument(
    'file',
    nargs='?',
    type=file_type('r'),
    default=sys.stdin,
    help='file to run, one program per line',
)
arg_parser.add_argument(
    '--debug',
    action='store_true',
    default=False,
    help='print the stack after every line',
)
arg_parser.add_argument(
    '--verbose',
    action='store_true',
    default=False,
    help='print internal logs as JSON to standard error',
)
arg_parser.add_argument(
    '--init-file',
    default=forth.stdlib.repl.default_init_file_name,
    help='file to run before the interactive prompt starts',
)


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(forth.logging.JSONFormatter())
    logger = logging.getLogger('forth')
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def batch_main(args: argparse.Namespace) -> int:
    interpreter = new()
    failed = False
    try:
        for line_number, line in enumerate(args.file, start=1):
            try:
                interpreter = eval(interpreter, line.rstrip('\n'))
            except evaluation_errors as e:
                failed = True
                print(
                    f'Error in {filename}, line {line_number}:',
                    error_message(e),
                )
            if args.debug:
                print(f'{line_number}:', format_stack(interpreter))
    except Exception:
        print('An internal error has occurred.')
        print('This is a bug in the Forth interpreter.')
        raise
    finally:
        args.file.close()
    print(format_stack(interpreter))
    return 1 if failed else 0


def main() -> None:
    args = arg_parser.parse_args()
    configure_logging(args.verbose)
    # interactive mode
    if args.file.isatty():
        forth.stdlib.repl.repl(
            debug=args.debug, init_file_name=args.init_file
        )
    else:
        sys.exit(batch_main(args))


main()
