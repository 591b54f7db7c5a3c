"""The lexical rules of gate expressions.

Each rule is a parsy parser that matches the longest run of its character
class at a given index, paired with a conversion from the matched text to
the token's value. The rules are tried in order and the first one that
matches decides the lexeme; a character no rule matches is an invalid token.

Digit runs are tried before alphabetic runs. The two classes cannot overlap
today, but keeping numbers first means the order stays unambiguous if rules
for mixed lexemes are ever added.
"""
from __future__ import annotations
import dataclasses
from typing import Callable, Literal, Tuple, Union

import parsy

from gatelex.errors import InvalidTokenError, ParseIntError
from gatelex.gates import Gate, classify_gate

TokenType = Literal['LPAR', 'RPAR', 'TERMINAL', 'GATE']
LexemeType = Union[TokenType, Literal['WHITESPACE']]
TokenValue = Union[int, Gate, None]

MAX_TERMINAL_ID = 0xFFFF
_MAX_TERMINAL_ID_DIGITS = len(str(MAX_TERMINAL_ID))
_digit_run = parsy.regex(r'[0-9]+')


def parse_terminal_id(digits: str) -> int:
    """Parse a decimal digit run as an unsigned 16-bit terminal id.

    Only ASCII digits are accepted: no sign, underscores or surrounding
    whitespace."""
    if not digits:
        raise ParseIntError('cannot parse integer from empty string')
    try:
        _digit_run.parse(digits)
    except parsy.ParseError as e:
        raise ParseIntError('invalid digit found in string') from e
    if len(digits.lstrip('0')) > _MAX_TERMINAL_ID_DIGITS:
        raise ParseIntError('number too large to fit in target type')
    value = int(digits, 10)
    if value > MAX_TERMINAL_ID:
        raise ParseIntError('number too large to fit in target type')
    return value


def _no_value(text: str) -> None:
    return None


@dataclasses.dataclass(frozen=True)
class _Rule:
    type: LexemeType
    parser: parsy.Parser
    convert: Callable[[str], TokenValue]


_rules: Tuple[_Rule, ...] = (
    _Rule('LPAR', parsy.string('('), _no_value),
    _Rule('RPAR', parsy.string(')'), _no_value),
    _Rule('TERMINAL', _digit_run, parse_terminal_id),
    _Rule('GATE', parsy.regex(r'[A-Za-z]+'), classify_gate),
    _Rule('WHITESPACE', parsy.regex(r'[ \t\n\f]+'), _no_value),
)


@dataclasses.dataclass(frozen=True)
class Lexeme:
    """One maximal match of a lexical rule.

    self.type - the rule that matched; WHITESPACE lexemes produce no token.
    self.value - the token value (None for parentheses and whitespace).
    self.text - the matched source text.
    self.end - index just past the match.
    """

    type: LexemeType
    value: TokenValue
    text: str
    end: int

    @property
    def is_skipped(self) -> bool:
        return self.type == 'WHITESPACE'


def next_lexeme(code: str, index: int) -> Lexeme:
    """Match the lexeme starting at code[index].

    index must be less than len(code). Raises a LexingError if the text at
    index cannot start a valid token."""
    for rule in _rules:
        result = rule.parser(code, index)
        if result.status:
            text: str = result.value
            return Lexeme(rule.type, rule.convert(text), text, result.index)
    raise InvalidTokenError()

