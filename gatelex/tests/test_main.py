"""
Test the command line driver that you would run with `python -m gatelex`.
"""

import scripttest
import gatelex
import json
import os.path
import sys
import tempfile
import unittest

project_root = os.path.dirname(os.path.dirname(gatelex.__file__))


class TestMain(unittest.TestCase):
    def setUp(self) -> None:
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        self.env = scripttest.TestFileEnvironment(
            os.path.join(temp_dir.name, 'test-output')
        )

    def run_gatelex(self, *args: str, stdin: bytes = b'', **kwargs):
        return self.env.run(
            sys.executable,
            '-m',
            'gatelex',
            *args,
            stdin=stdin,
            cwd=project_root,
            **kwargs,
        )

    def test_tokens_from_stdin(self) -> None:
        result = self.run_gatelex(stdin=b'(0 and (1 XOR 2))\n')
        self.assertEqual(result.stdout, '( 0 AND ( 1 XOR 2 ) )\n')

    def test_tokens_from_file(self) -> None:
        path = os.path.join(self.env.base_path, 'expression.txt')
        with open(path, 'w') as f:
            f.write('not\n\t65535')
        result = self.run_gatelex(path)
        self.assertEqual(result.stdout, 'NOT 65535\n')

    def test_carriage_returns_in_file(self) -> None:
        path = os.path.join(self.env.base_path, 'crlf.txt')
        with open(path, 'w', newline='') as f:
            f.write('0\r\n1')
        result = self.run_gatelex(path, expect_error=True)
        self.assertEqual(result.returncode, 1)
        self.assertEqual(
            result.stdout,
            'Lexical error:\n'
            'Cannot tokenize input at line 1, column 2: Invalid token\n'
            '0\n'
            ' ^\n',
        )

    def test_json(self) -> None:
        result = self.run_gatelex('--json', stdin=b'(nor)')
        self.assertEqual(
            json.loads(result.stdout),
            [
                {'type': 'LPAR', 'value': None, 'start': [1, 0], 'end': [1, 1]},
                {'type': 'GATE', 'value': 'NOR', 'start': [1, 1], 'end': [1, 4]},
                {'type': 'RPAR', 'value': None, 'start': [1, 4], 'end': [1, 5]},
            ],
        )

    def test_lexical_error(self) -> None:
        result = self.run_gatelex(stdin=b'(0 and\n  1 xyz)', expect_error=True)
        self.assertEqual(result.returncode, 1)
        self.assertEqual(
            result.stdout,
            'Lexical error:\n'
            'Cannot tokenize input at line 2, column 5: '
            'XYZ is not a valid logic gate\n'
            '  1 xyz)\n'
            '    ^\n',
        )

    def test_paren_count_mismatch(self) -> None:
        result = self.run_gatelex(stdin=b'(0 or 1))', expect_error=True)
        self.assertEqual(result.returncode, 1)
        self.assertEqual(
            result.stdout,
            'Lexical error:\n'
            'Cannot tokenize input: Mismatching parentheses count\n',
        )

    def test_verbose(self) -> None:
        result = self.run_gatelex(
            '--verbose', stdin=b'0', expect_stderr=True
        )
        self.assertEqual(result.stdout, '0\n')
        self.assertIn('DEBUG:gatelex.lex: lexed 1 tokens', result.stderr)

    def test_log_json(self) -> None:
        result = self.run_gatelex(
            '--verbose', '--log-json', stdin=b'0', expect_stderr=True
        )
        messages = [
            json.loads(line)['message']
            for line in result.stderr.splitlines()
        ]
        self.assertEqual(messages, ['tokenizing <stdin>', 'lexed 1 tokens'])
