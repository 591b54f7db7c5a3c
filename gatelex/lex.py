from __future__ import annotations
from gatelex.errors import LexingError, ParenCountMismatchError
from gatelex.gates import Gate
from gatelex.location import START, Location, advanced_by
import gatelex.logging
import gatelex.rules
import dataclasses
import json
import logging
from typing import (
    List,
    Literal,
    Optional,
    Tuple,
    Union,
)

_logger = gatelex.logging.GatelexLogger(logging.getLogger(__name__))


@dataclasses.dataclass(frozen=True)
class Token:
    """Class to represent tokens.

    self.type - token type: LPAR, RPAR, TERMINAL or GATE.
    self.value - the terminal id for TERMINAL, the Gate for GATE, else None.
    self.start - starting position of token in source, as (line, col)
    self.end - ending position of token in source, as (line, col)

    Positions are not compared, so tokens built by hand equal lexed ones.
    """

    type: gatelex.rules.TokenType
    value: gatelex.rules.TokenValue = None
    start: Location = dataclasses.field(default=(0, 0), compare=False)
    end: Location = dataclasses.field(default=(0, 0), compare=False)

    def __str__(self) -> str:
        if self.type == 'LPAR':
            return '('
        if self.type == 'RPAR':
            return ')'
        return str(self.value)


class TokenEncoder(json.JSONEncoder):
    """Extension of the default JSON Encoder that supports Token objects."""

    def default(self, obj):
        if isinstance(obj, Token):
            return dataclasses.asdict(obj)
        if isinstance(obj, Gate):
            return str(obj)
        return super().default(obj)


def tokenize(code: str) -> Result:
    """Tokenize a whole gate expression.

    The first invalid lexeme aborts tokenization and its error is returned
    with no tokens. Parentheses are checked for balance only after every
    lexeme has been read successfully."""
    lexer = Lexer()
    lexer.input(code)
    tokens = []
    open_count, close_count = 0, 0
    while True:
        try:
            token = lexer.token()
        except LexingError as e:
            _logger.debug(
                'lexing failed at {}: {!r}', lexer.error_location, e
            )
            return ErrorResult(e, lexer.error_location)
        if token is None:
            break
        if token.type == 'LPAR':
            open_count += 1
        elif token.type == 'RPAR':
            close_count += 1
        tokens.append(token)
    if open_count != close_count:
        _logger.debug(
            'found {} opening and {} closing parentheses',
            open_count,
            close_count,
        )
        return ErrorResult(ParenCountMismatchError(), None)
    _logger.debug('lexed {} tokens', len(tokens))
    return TokensResult(tokens)


def tokenize_or_raise(code: str) -> List[Token]:
    """Like tokenize, but raise the LexingError instead of returning it."""
    result = tokenize(code)
    if result.type == 'error':
        raise result.err
    return result.tokens


class Lexer:
    """Lexes the input given to input().

    Use token() to get the next token.
    """

    def __init__(self) -> None:
        self.data: str
        self.lineno: int
        self.lexpos: int
        self.error_location: Optional[Location]
        self._index: int

    def input(self, data: str) -> None:
        """Initialize the Lexer object with the data to tokenize."""
        self.data = data
        self.lineno, self.lexpos = START
        self.error_location = None
        self._index = 0

    def token(self) -> Optional[Token]:
        """Return the next token as a Token object.

        Whitespace is skipped. Returns None once the input is exhausted, and
        raises a LexingError if the next lexeme is invalid."""
        while self._index < len(self.data):
            start = (self.lineno, self.lexpos)
            try:
                lexeme = gatelex.rules.next_lexeme(self.data, self._index)
            except LexingError:
                self.error_location = start
                raise
            self._index = lexeme.end
            self.lineno, self.lexpos = advanced_by(start, lexeme.text)
            if lexeme.is_skipped:
                continue
            # only whitespace lexemes are not token types
            token_type: gatelex.rules.TokenType = lexeme.type  # type: ignore
            return Token(
                token_type, lexeme.value, start, (self.lineno, self.lexpos)
            )
        return None


@dataclasses.dataclass
class TokensResult:
    """Result class for successfully tokenized input."""

    type: Literal['tokens']
    tokens: List[Token]

    def __init__(self, tokens: List[Token]) -> None:
        self.type = 'tokens'
        self.tokens = tokens


@dataclasses.dataclass
class ErrorResult:
    """Result class for input that could not be tokenized.

    location is where the invalid lexeme starts. It is None when the input
    is lexically valid but its parentheses are unbalanced."""

    type: Literal['error']
    err: LexingError
    location: Optional[Location]

    def __init__(self, err: LexingError, loc: Optional[Location]) -> None:
        self.type = 'error'
        self.err = err
        self.location = loc


type Result = TokensResult | ErrorResult


type TokenTuple = Union[
    Tuple[gatelex.rules.TokenType],
    Tuple[gatelex.rules.TokenType, gatelex.rules.TokenValue],
]


def to_tokens(*tokTuples: TokenTuple) -> List[Token]:
    return [Token(*tuple) for tuple in tokTuples]
