#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
output formatter tests
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
from collections import Counter
import io
import json
import unittest
from unittest import mock

from kotoken.errors import ConfigError
from kotoken.formatter import OutputFormat, print_tokens
from kotoken.token import Token


#########
# types #
#########
class _FlushRecorder(io.StringIO):
    """
    flush() 호출 시점의 출력 내용을 기록한다.
    """
    def __init__(self):
        super().__init__()
        self.flushed = []

    def flush(self):
        self.flushed.append(self.getvalue())
        super().flush()


#############
# functions #
#############
def _render(tokens, out_fmt) -> str:
    fout = io.StringIO()
    print_tokens(tokens, out_fmt, fout)
    return fout.getvalue()


#########
# tests #
#########
class TestPrintTokens(unittest.TestCase):
    """
    print_tokens() tests
    """
    def setUp(self):
        self._tokens = [Token.make('學校', 'NNG', '학교'), Token.make('에', 'JKB')]

    def test_mecab(self):
        """
        tagged line format
        """
        self.assertEqual(_render([Token.make('테스트', 'NNG')], OutputFormat.MECAB),
                         '테스트\tNNG,*,*,테스트,*,*,*,*\nEOS\n')
        self.assertEqual(_render(self._tokens, OutputFormat.MECAB),
                         '學校\tNNG,*,*,學校,*,*,*,학교\n에\tJKB,*,*,에,*,*,*,*\nEOS\n')

    def test_json(self):
        """
        structured format
        """
        self.assertEqual(_render([Token.make('테스트', 'NNG')], OutputFormat.JSON),
                         '[{"surface":"테스트","attrs":["NNG","*","*","테스트","*","*","*","*"]}]\n')

    def test_empty(self):
        """
        empty sequence
        """
        self.assertEqual(_render([], OutputFormat.MECAB), 'EOS\n')
        self.assertEqual(_render([], OutputFormat.JSON), '[]\n')

    def test_single_eos(self):
        """
        exactly one sentinel at the end of each line's output
        """
        lines = _render(self._tokens, OutputFormat.MECAB).splitlines()
        self.assertEqual(lines.count('EOS'), 1)
        self.assertEqual(lines[-1], 'EOS')

    def test_format_equivalence(self):
        """
        both formats carry the same surfaces
        """
        mecab_lines = _render(self._tokens, OutputFormat.MECAB).splitlines()
        mecab_surfaces = Counter(_.split('\t', 1)[0] for _ in mecab_lines if _ != 'EOS')
        json_surfaces = Counter(_['surface'] for _ in
                                json.loads(_render(self._tokens, OutputFormat.JSON)))
        self.assertEqual(mecab_surfaces, json_surfaces)

    def test_serialization_error(self):
        """
        error message is printed in place of the array
        """
        with mock.patch('kotoken.formatter.json.dumps', side_effect=ValueError('boom')):
            self.assertEqual(_render(self._tokens, OutputFormat.JSON), 'boom\n')

    def test_flush(self):
        """
        output of a line is flushed before returning
        """
        for out_fmt in OutputFormat:
            fout = _FlushRecorder()
            print_tokens(self._tokens, out_fmt, fout)
            self.assertTrue(fout.flushed)
            self.assertEqual(fout.flushed[-1], fout.getvalue())

    def test_flush_on_error(self):
        """
        error message is flushed too
        """
        fout = _FlushRecorder()
        with mock.patch('kotoken.formatter.json.dumps', side_effect=ValueError('boom')):
            print_tokens(self._tokens, OutputFormat.JSON, fout)
        self.assertEqual(fout.flushed[-1], 'boom\n')

    def test_default_stdout(self):
        """
        prints to stdout by default
        """
        with mock.patch('sys.stdout', new_callable=io.StringIO) as fout:
            print_tokens([], OutputFormat.MECAB)
        self.assertEqual(fout.getvalue(), 'EOS\n')


class TestOutputFormat(unittest.TestCase):
    """
    OutputFormat tests
    """
    def test_parse(self):
        """
        test parse()
        """
        self.assertEqual(OutputFormat.parse('mecab'), OutputFormat.MECAB)
        self.assertEqual(OutputFormat.parse('json'), OutputFormat.JSON)
        with self.assertRaises(ConfigError):
            OutputFormat.parse('xml')


########
# main #
########
if __name__ == '__main__':
    unittest.main()
