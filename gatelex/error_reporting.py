from typing import Optional

from gatelex.errors import LexingError
from gatelex.location import Location


def get_line_at(source: str, location: Location) -> str:
    # Only \n ends a line; str.splitlines would also split on form feeds.
    return source.split('\n')[location[0] - 1]


def create_lexical_error_message(
    source: str, location: Optional[Location], err: LexingError
) -> str:
    if location is None:
        return f'Cannot tokenize input: {err}\n'
    line = get_line_at(source, location)
    # Tabs are kept so the caret lines up however wide they display.
    indent = ''.join(
        c if c == '\t' else ' ' for c in line[: location[1]]
    )
    message = (
        f'Cannot tokenize input at line {location[0]}, '
        f'column {location[1] + 1}: {err}\n'
        f'{line.rstrip()}\n'
        f'{indent}^\n'
    )
    return message
