from typing import ClassVar, Literal, Tuple


class LexingError(Exception):
    """Base class of the errors produced while tokenizing gate expressions.

    Each subclass carries only the data that its kind of failure needs. kind
    discriminates between the subclasses without isinstance checks."""

    kind: ClassVar[
        Literal['paren-count-mismatch', 'no-such-gate', 'parse-int', 'other']
    ]
    message = 'Lexing error'

    def _payload(self) -> Tuple[object, ...]:
        return ()

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return '{}({})'.format(
            type(self).__qualname__, ', '.join(map(repr, self._payload()))
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LexingError):
            return (type(self), self._payload()) == (
                type(other),
                other._payload(),
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))


class ParenCountMismatchError(LexingError):
    kind = 'paren-count-mismatch'
    message = 'Mismatching parentheses count'


class NoSuchGateError(LexingError):
    """An alphabetic run that names no gate."""

    kind = 'no-such-gate'

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text
        self.message = f'{text} is not a valid logic gate'

    def _payload(self) -> Tuple[object, ...]:
        return (self.text,)


class ParseIntError(LexingError):
    """A digit run that is not a valid 16-bit terminal id."""

    kind = 'parse-int'

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.message = detail

    def _payload(self) -> Tuple[object, ...]:
        return (self.detail,)


class InvalidTokenError(LexingError):
    kind = 'other'
    message = 'Invalid token'
