#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
kotoken command line tool
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
from argparse import ArgumentParser, Namespace
import logging
import sys
from typing import Iterable, TextIO

import kotoken
from kotoken.analyzer import Analyzer, DecompoundMode, DEFAULT_STOP_TAGS, KiwiAnalyzer
from kotoken.errors import ConfigError, TokenizeError
from kotoken.extractor import tokenize
from kotoken.formatter import OutputFormat, print_tokens
from kotoken.source import open_input, open_output, read_lines


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#############
# functions #
#############
def _process(lines: Iterable[str], analyzer: Analyzer, out_fmt: OutputFormat, fout: TextIO,
             stop_on_error: bool) -> int:
    """
    각 줄을 분석하여 출력한다.
    Args:
        lines:  입력 줄
        analyzer:  형태소 분석기
        out_fmt:  출력 포맷
        fout:  출력 파일
        stop_on_error:  분석 오류 시 중단 여부
    Returns:
        exit status
    """
    status = 0
    for line_num, line in enumerate(lines, start=1):
        try:
            tokens = tokenize(analyzer, line)
        except TokenizeError as tkn_err:
            _LOG.error('line %d: %s', line_num, tkn_err)
            status = 1
            if stop_on_error:
                break
            continue
        print_tokens(tokens, out_fmt, fout)
    return status


def _run_input(args: Namespace, analyzer: Analyzer, out_fmt: OutputFormat, fout: TextIO) -> int:
    """
    입력을 읽어 분석 결과를 출력한다.
    Args:
        args:  program arguments
        analyzer:  형태소 분석기
        out_fmt:  출력 포맷
        fout:  출력 파일
    Returns:
        exit status
    """
    if not args.input:
        with open_input() as fin:
            return _process(read_lines(fin), analyzer, out_fmt, fout, stop_on_error=False)

    try:
        with open_input(args.input) as fin:
            return _process(read_lines(fin), analyzer, out_fmt, fout, stop_on_error=True)
    except (OSError, UnicodeDecodeError) as exc:
        _LOG.error('%s: %s', args.input, exc)
        return 1


def run(args: Namespace) -> int:
    """
    run function which is the start point of program
    Args:
        args:  program arguments
    Returns:
        exit status
    """
    mode = DecompoundMode.parse(args.tokenize_mode)
    out_fmt = OutputFormat.parse(args.output_format)
    analyzer = KiwiAnalyzer(mode, DEFAULT_STOP_TAGS, args.user_dic)

    try:
        with open_output(args.output) as fout:
            return _run_input(args, analyzer, out_fmt, fout)
    except OSError as exc:
        _LOG.error('%s: %s', args.output, exc)
        return 1


def _make_parser() -> ArgumentParser:
    """
    make argument parser
    Returns:
        argument parser
    """
    parser = ArgumentParser(prog='kotoken', usage='%(prog)s [OPTIONS] [INPUT_FILE]',
                            description='Korean morpheme tokenizer')
    parser.add_argument('input', help='input file <default: stdin>', metavar='INPUT_FILE',
                        nargs='?', default='')
    parser.add_argument('-m', '--tokenize-mode',
                        help='tokenization mode. none, discard or mixed <default: discard>',
                        metavar='MODE', choices=[_.value for _ in DecompoundMode],
                        default=DecompoundMode.DISCARD.value)
    parser.add_argument('-o', '--output-format',
                        help='output format. mecab or json <default: mecab>', metavar='FORMAT',
                        choices=[_.value for _ in OutputFormat], default=OutputFormat.MECAB.value)
    parser.add_argument('-u', '--user-dic', help='user dictionary path <default: none>',
                        metavar='FILE', default='')
    parser.add_argument('-v', '--version', action='version', version=kotoken.__version__)
    parser.add_argument('--output', help='output file <default: stdout>', metavar='FILE')
    parser.add_argument('--debug', help='enable debug', action='store_true')
    return parser


########
# main #
########
def main():
    """
    main function processes only argument parsing
    """
    parser = _make_parser()
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        status = run(args)
    except ConfigError as cfg_err:
        parser.error(str(cfg_err))
    sys.exit(status)


if __name__ == '__main__':
    main()
