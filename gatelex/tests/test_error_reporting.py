from gatelex.error_reporting import create_lexical_error_message, get_line_at
from gatelex.errors import (
    InvalidTokenError,
    NoSuchGateError,
    ParenCountMismatchError,
)
import textwrap
import unittest


class TestGetLineAt(unittest.TestCase):
    def test_lines(self) -> None:
        source = '(0 and\n\f1)\n'
        self.assertEqual(get_line_at(source, (1, 3)), '(0 and')
        self.assertEqual(get_line_at(source, (2, 1)), '\f1)')
        self.assertEqual(get_line_at(source, (3, 0)), '')


class TestLexicalErrorMessage(unittest.TestCase):
    def test_caret_under_column(self) -> None:
        source = '(0 and\n  1 ! 2)\n'
        message = create_lexical_error_message(
            source, (2, 4), InvalidTokenError()
        )
        self.assertEqual(
            message,
            textwrap.dedent(
                """\
                Cannot tokenize input at line 2, column 5: Invalid token
                  1 ! 2)
                    ^
                """
            ),
        )

    def test_gate_error(self) -> None:
        message = create_lexical_error_message(
            'xyz', (1, 0), NoSuchGateError('XYZ')
        )
        self.assertEqual(
            message,
            'Cannot tokenize input at line 1, column 1: '
            'XYZ is not a valid logic gate\nxyz\n^\n',
        )

    def test_caret_after_tabs(self) -> None:
        message = create_lexical_error_message(
            '(0\n\t\tnand ?)', (2, 7), InvalidTokenError()
        )
        self.assertEqual(
            message.splitlines()[1:],
            ['\t\tnand ?)', '\t\t     ^'],
        )

    def test_no_location(self) -> None:
        self.assertEqual(
            create_lexical_error_message(
                '((0)', None, ParenCountMismatchError()
            ),
            'Cannot tokenize input: Mismatching parentheses count\n',
        )
