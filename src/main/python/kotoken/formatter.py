# -*- coding: utf-8 -*-


"""
output formatter
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
from enum import Enum
import json
import sys
from typing import List, TextIO

from kotoken.errors import ConfigError
from kotoken.token import Token


#############
# constants #
#############
EOS = 'EOS'    # end of sentence mark in mecab format


#########
# types #
#########
class OutputFormat(Enum):
    """
    출력 포맷
    """
    MECAB = 'mecab'
    JSON = 'json'

    @classmethod
    def parse(cls, name: str) -> 'OutputFormat':
        """
        이름으로부터 출력 포맷을 얻는다.
        Args:
            name:  포맷 이름
        Returns:
            출력 포맷
        """
        try:
            return cls(name)
        except ValueError:
            raise ConfigError('unexpected output format: {}'.format(name))


#############
# functions #
#############
def print_tokens(tokens: List[Token], out_fmt: OutputFormat, fout: TextIO = None):
    """
    한 줄의 분석 결과를 출력한다. 다음 줄을 읽기 전에 결과가 전달되도록 flush 한다.
    Args:
        tokens:  형태소 객체 리스트
        out_fmt:  출력 포맷
        fout:  출력 파일 <default: stdout>
    """
    if fout is None:
        fout = sys.stdout
    if out_fmt == OutputFormat.JSON:
        try:
            print(json.dumps([tkn.to_dict() for tkn in tokens], ensure_ascii=False,
                             separators=(',', ':')), file=fout, flush=True)
        except (TypeError, ValueError) as exc:
            print(exc, file=fout, flush=True)
        return
    for tkn in tokens:
        print(tkn, file=fout)
    print(EOS, file=fout, flush=True)
