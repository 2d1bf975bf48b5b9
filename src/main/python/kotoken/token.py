# -*- coding: utf-8 -*-


"""
token record shared by the extractor and the formatter
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
from typing import NamedTuple, Optional


#############
# constants #
#############
PLACEHOLDER = '*'    # value of unused attribute columns


#########
# types #
#########
class Attrs(NamedTuple):
    """
    MeCab-ko 형식의 8개 자질 컬럼
    """
    pos: str
    semantic_class: str
    final_consonant: str
    surface: str
    morph_type: str
    first_pos: str
    last_pos: str
    reading: str


class Token:
    """
    형태소 객체. 생성 후에는 변경할 수 없다.
    """
    __slots__ = ('_surface', '_attrs')

    def __init__(self, surface: str, attrs: Attrs):
        """
        Args:
            surface:  표층형
            attrs:  8개 자질 컬럼
        """
        if len(attrs) != len(Attrs._fields):
            raise ValueError('invalid number of attributes: {}'.format(len(attrs)))
        object.__setattr__(self, '_surface', surface)
        object.__setattr__(self, '_attrs', Attrs(*attrs))

    def __setattr__(self, name, value):
        raise AttributeError('Token is immutable')

    def __str__(self):
        return '{}\t{}'.format(self._surface, ','.join(self._attrs))

    def __repr__(self):
        return 'Token({!r}, {!r})'.format(self._surface, list(self._attrs))

    def __eq__(self, other: 'Token'):
        if not isinstance(other, Token):
            return NotImplemented
        return self._surface == other.surface and self._attrs == other.attrs

    def __hash__(self):
        return hash((self._surface, self._attrs))

    @property
    def surface(self) -> str:
        """
        표층형
        """
        return self._surface

    @property
    def attrs(self) -> Attrs:
        """
        자질 컬럼
        """
        return self._attrs

    @property
    def pos(self) -> str:
        """
        품사 태그
        """
        return self._attrs.pos

    @property
    def reading(self) -> str:
        """
        읽기. 없으면 '*'
        """
        return self._attrs.reading

    def to_dict(self) -> dict:
        """
        JSON 직렬화를 위한 사전을 만든다.
        Returns:
            {'surface': ..., 'attrs': [...]}
        """
        return {'surface': self._surface, 'attrs': list(self._attrs)}

    @classmethod
    def make(cls, surface: str, pos: str, reading: Optional[str] = None) -> 'Token':
        """
        품사, 표층형, 읽기로부터 자질 컬럼을 채워 형태소 객체를 생성한다.
        컬럼 순서: 품사, 빈칸 두 개, 표층형, 빈칸 세 개, 읽기
        Args:
            surface:  표층형
            pos:  품사 태그
            reading:  읽기 (없으면 None)
        Returns:
            형태소 객체
        """
        attrs = [pos, ]
        attrs.extend([PLACEHOLDER, ] * (3 - len(attrs)))
        attrs.append(surface)
        attrs.extend([PLACEHOLDER, ] * (7 - len(attrs)))
        attrs.append(reading if reading is not None else PLACEHOLDER)
        return cls(surface, Attrs(*attrs))
