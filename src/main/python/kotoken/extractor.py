# -*- coding: utf-8 -*-


"""
token extractor
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
import logging
from typing import List

from kotoken.analyzer import Analyzer
from kotoken.token import Token


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#############
# functions #
#############
def tokenize(analyzer: Analyzer, text: str) -> List[Token]:
    """
    한 줄의 입력을 분석하여 형태소 객체의 리스트를 만든다.
    Args:
        analyzer:  형태소 분석기
        text:  입력 문자열
    Returns:
        형태소(Token) 객체 리스트. 분석된 형태소가 없으면 빈 리스트
    """
    tokens = []
    with analyzer.open_stream(text) as stream:
        for morph in stream:
            tokens.append(Token.make(morph.lex, morph.tag, morph.reading))
    _LOG.debug('%d tokens from: %s', len(tokens), text)
    return tokens
