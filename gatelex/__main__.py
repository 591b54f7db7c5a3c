"""Tokenize a gate expression from the command line."""

import argparse
from gatelex.error_reporting import create_lexical_error_message
import gatelex.lex
import gatelex.logging
import json
import logging
import sys
from typing import Callable, IO, AnyStr

from typing_extensions import assert_never

_logger = gatelex.logging.GatelexLogger(logging.getLogger('gatelex.cli'))

filename = '<stdin>'


def file_type(mode: str) -> Callable[[str], IO[AnyStr]]:
    """Capture the filename and create a file object.

    Line endings are left untranslated so that files lex like stdin.
    """

    def func(name: str) -> IO[AnyStr]:
        global filename
        filename = name
        return open(name, mode=mode, newline='')

    return func


arg_parser = argparse.ArgumentParser(
    description='Tokenize a logic gate expression.'
)
arg_parser.add_argument(
    'file',
    nargs='?',
    type=file_type('r'),
    default=sys.stdin,
    help='file to tokenize',
)
arg_parser.add_argument(
    '--json',
    action='store_true',
    default=False,
    help='print the tokens as a JSON array',
)
arg_parser.add_argument(
    '--verbose',
    action='store_true',
    default=False,
    help='print internal logs',
)
arg_parser.add_argument(
    '--log-json',
    action='store_true',
    default=False,
    help='print internal logs as JSON objects',
)


def main() -> int:
    try:
        source = args.file.read()
    finally:
        args.file.close()
    _logger.info('tokenizing {}', filename)
    result = gatelex.lex.tokenize(source)
    if result.type == 'tokens':
        if args.json:
            json.dump(result.tokens, sys.stdout, cls=gatelex.lex.TokenEncoder)
            print()
        else:
            print(' '.join(map(str, result.tokens)))
        return 0
    elif result.type == 'error':
        print('Lexical error:')
        print(
            create_lexical_error_message(source, result.location, result.err),
            end='',
        )
        return 1
    else:
        assert_never(result)


args = arg_parser.parse_args()
gatelex.logging.configure(args.verbose, args.log_json)

sys.exit(main())
