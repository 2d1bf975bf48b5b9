# -*- coding: utf-8 -*-


"""
input line source
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
from contextlib import contextmanager
import logging
import sys
from typing import Iterator, TextIO


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#############
# functions #
#############
@contextmanager
def open_input(path: str = '') -> Iterator[TextIO]:
    """
    입력 파일을 연다. 경로가 없으면 표준 입력을 사용하며 표준 입력은 닫지 않는다.
    Args:
        path:  입력 파일 경로 <default: stdin>
    Yields:
        입력 파일
    """
    if not path:
        yield sys.stdin
        return
    _LOG.debug('input file: %s', path)
    with open(path, 'r', encoding='UTF-8') as fin:
        yield fin


@contextmanager
def open_output(path: str = '') -> Iterator[TextIO]:
    """
    출력 파일을 연다. 경로가 없으면 표준 출력을 사용하며 표준 출력은 닫지 않는다.
    Args:
        path:  출력 파일 경로 <default: stdout>
    Yields:
        출력 파일
    """
    if not path:
        yield sys.stdout
        return
    _LOG.debug('output file: %s', path)
    with open(path, 'w', encoding='UTF-8') as fout:
        yield fout


def read_lines(fin: TextIO) -> Iterator[str]:
    """
    read from file and yield a line without newline (generator)
    Args:
        fin:  input file
    Yields:
        line
    """
    for line in fin:
        yield line.rstrip('\r\n')
