# -*- coding: utf-8 -*-


"""
morphological analyzer configuration and engine binding
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
from enum import Enum
import logging
import os
from typing import FrozenSet, Iterable, Iterator, List, NamedTuple, Optional

from kiwipiepy import Kiwi

from kotoken.errors import ConfigError, TokenizeError


#############
# constants #
#############
DEFAULT_STOP_TAGS = frozenset({
    'UN',    # 분석 불능 (Kiwi)
    'NA',    # 분석 불능 범주 (Sejong)
})


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#########
# types #
#########
class DecompoundMode(Enum):
    """
    복합어 분리 모드
    """
    NONE = 'none'    # 분리하지 않음
    DISCARD = 'discard'    # 분리하고 원래의 복합어는 버림
    MIXED = 'mixed'    # 복합어와 분리된 형태소를 모두 출력

    @classmethod
    def parse(cls, name: str) -> 'DecompoundMode':
        """
        이름으로부터 모드를 얻는다.
        Args:
            name:  모드 이름
        Returns:
            분리 모드
        """
        try:
            return cls(name)
        except ValueError:
            raise ConfigError('unexpected tokenization mode: {}'.format(name))


class Morph(NamedTuple):
    """
    엔진이 출력하는 형태소 (어휘, 품사, 읽기)
    """
    lex: str
    tag: str
    reading: Optional[str] = None


class MorphStream:
    """
    한 줄에 대한 형태소 스트림. with 문을 벗어나면 항상 닫힌다.
    """
    def __init__(self, morphs: Iterable[Morph], stop_tags: FrozenSet[str]):
        self._source = morphs
        self._morphs = iter(morphs)
        self._stop_tags = stop_tags
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __iter__(self) -> Iterator[Morph]:
        if self.closed:
            raise TokenizeError('stream is already closed')
        while True:
            try:
                morph = next(self._morphs)
            except StopIteration:
                return
            except TokenizeError:
                raise
            except Exception as exc:
                raise TokenizeError('fail to read morphemes: {}'.format(exc)) from exc
            if morph.tag in self._stop_tags:
                continue
            yield morph

    def close(self):
        """
        스트림을 닫는다. 여러 번 호출해도 된다.
        """
        if self.closed:
            return
        close = getattr(self._source, 'close', None)
        if close:
            close()
        self.closed = True


class Analyzer:
    """
    형태소 분석기 추상 클래스. 분석 세션 동안 한 번만 생성하여 모든 줄에 재사용한다.
    """
    def __init__(self, mode: DecompoundMode = DecompoundMode.DISCARD,
                 stop_tags: Iterable[str] = DEFAULT_STOP_TAGS, user_dic: str = ''):
        """
        Args:
            mode:  복합어 분리 모드
            stop_tags:  출력에서 제외할 품사 집합
            user_dic:  사용자 사전 경로
        """
        self.mode = mode
        self.stop_tags = frozenset(stop_tags)
        self.user_dic = user_dic

    def open_stream(self, text: str) -> MorphStream:
        """
        입력 문자열에 대한 형태소 스트림을 연다.
        Args:
            text:  입력 문자열
        Returns:
            형태소 스트림
        """
        try:
            morphs = self._analyze(text)
        except TokenizeError:
            raise
        except Exception as exc:
            raise TokenizeError('fail to analyze: {}'.format(exc)) from exc
        return MorphStream(morphs, self.stop_tags)

    def _analyze(self, text: str) -> Iterator[Morph]:
        """
        실제 엔진을 호출하여 형태소를 생성한다.
        Args:
            text:  입력 문자열
        Yields:
            형태소
        """
        raise NotImplementedError


class KiwiAnalyzer(Analyzer):
    """
    Kiwi(kiwipiepy) 엔진을 이용한 형태소 분석기
    """
    def __init__(self, mode: DecompoundMode = DecompoundMode.DISCARD,
                 stop_tags: Iterable[str] = DEFAULT_STOP_TAGS, user_dic: str = '',
                 kiwi=None):
        """
        Args:
            mode:  복합어 분리 모드
            stop_tags:  출력에서 제외할 품사 집합
            user_dic:  사용자 사전 경로
            kiwi:  미리 생성한 Kiwi 객체 (없으면 새로 생성)
        """
        super().__init__(mode, stop_tags, user_dic)
        if user_dic and not os.path.isfile(user_dic):
            raise ConfigError('unexpected user dictionary file: {}'.format(user_dic))
        if kiwi is None:
            kiwi = Kiwi()
        self._kiwi = kiwi
        if user_dic:
            self._load_user_dic(user_dic)
        _LOG.info('kiwi analyzer opened with mode: "%s", stop_tags: %s', mode.value,
                  ','.join(sorted(self.stop_tags)))

    def _load_user_dic(self, path: str):
        """
        사용자 사전을 읽어들인다.
        Args:
            path:  사전 파일 경로
        """
        try:
            num_words = self._kiwi.load_user_dictionary(path)
        except (OSError, ValueError, RuntimeError) as exc:
            raise ConfigError('invalid user dictionary: {}: {}'.format(path, exc)) from exc
        _LOG.info('%s: %d entries', os.path.basename(path), num_words)

    def _analyze(self, text: str) -> Iterator[Morph]:
        if self.mode == DecompoundMode.NONE:
            tokens = self._tokenize(text, split_complex=False)
        elif self.mode == DecompoundMode.DISCARD:
            tokens = self._tokenize(text, split_complex=True)
        else:
            tokens = merge_mixed(self._tokenize(text, split_complex=False),
                                 self._tokenize(text, split_complex=True))
        return (Morph(tkn.form, tkn.tag) for tkn in tokens)

    def _tokenize(self, text: str, split_complex: bool) -> list:
        """
        Kiwi.tokenize() 호출
        Args:
            text:  입력 문자열
            split_complex:  복합어 분리 여부
        Returns:
            Kiwi 토큰 리스트
        """
        try:
            return self._kiwi.tokenize(text, split_complex=split_complex)
        except Exception as exc:
            raise TokenizeError('kiwi fails to tokenize: {}'.format(exc)) from exc


#############
# functions #
#############
def _end(tkn) -> int:
    return tkn.start + tkn.len


def _key(tkn) -> tuple:
    return tkn.form, tkn.tag, tkn.start, tkn.len


def _group_by_span(tokens: List) -> List[List]:
    """
    위치가 겹치는 토큰들을 묶는다. 축약된 형태소(갔 = 가 + 었)는 같은 위치를 갖는다.
    Args:
        tokens:  토큰 리스트
    Returns:
        토큰 묶음의 리스트
    """
    groups = []
    group_end = -1
    for tkn in tokens:
        if groups and tkn.start < group_end:
            groups[-1].append(tkn)
            group_end = max(group_end, _end(tkn))
        else:
            groups.append([tkn, ])
            group_end = _end(tkn)
    return groups


def merge_mixed(wholes: List, parts: List) -> List:
    """
    분리하지 않은 결과와 분리한 결과를 합친다. 복합어 뒤에 그 구성 형태소가 이어진다.
    분리한 결과가 같은 위치에서 달라진 경우에만 구성 형태소를 덧붙인다.
    Args:
        wholes:  분리하지 않은 토큰 리스트
        parts:  분리한 토큰 리스트
    Returns:
        합쳐진 토큰 리스트
    """
    merged = []
    idx = 0
    for group in _group_by_span(wholes):
        begin = group[0].start
        end = max(_end(tkn) for tkn in group)
        while idx < len(parts) and parts[idx].start < begin:
            idx += 1
        inner = []
        while idx < len(parts) and parts[idx].start < end and _end(parts[idx]) <= end:
            inner.append(parts[idx])
            idx += 1
        merged.extend(group)
        if [_key(tkn) for tkn in inner] != [_key(tkn) for tkn in group]:
            merged.extend(inner)
    return merged
