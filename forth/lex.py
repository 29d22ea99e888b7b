"""Turn a line of program text into words."""

from typing import List, Optional

import parsy

# ASCII digits with an optional sign. Anything else, like `1_000` or `٣`,
# is a word name rather than a number.
integer_literal = parsy.regex(r'[+-]?[0-9]+').map(int).desc('integer literal')


def tokenize(program: str) -> List[str]:
    """Lowercase and trim the program, then split it on single spaces.

    Runs of spaces and an empty program produce empty tokens; the evaluator
    ignores those."""
    return program.lower().strip().split(' ')


def parse_integer(token: str) -> Optional[int]:
    try:
        return integer_literal.parse(token)
    except parsy.ParseError:
        return None
