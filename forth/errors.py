"""Errors raised while evaluating a Forth program.

The hierarchy is flat: every error is a direct subclass of ForthError and
aborts the rest of the program it was raised in."""


class ForthError(Exception):
    message = 'Forth error'

    def __init__(self) -> None:
        super().__init__(self.message)


class DivisionByZero(ForthError):
    message = 'Division by zero'


class StackUnderflow(ForthError):
    message = 'Stack underflow'


class InvalidWord(ForthError):
    message = 'Invalid word'


class UnknownWord(ForthError):
    message = 'Unknown word'


# A word whose expansion names itself forever runs out of Python stack
# rather than raising a ForthError. Hosts recover from both.
evaluation_errors = (ForthError, RecursionError)


def error_message(error: BaseException) -> str:
    if isinstance(error, RecursionError):
        return 'Word expansion does not terminate'
    return str(error)
