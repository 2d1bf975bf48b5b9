# -*- coding: utf-8 -*-


"""
kotoken exceptions
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


#########
# types #
#########
class KotokenExcept(Exception):
    """
    kotoken을 위한 표준 예외 클래스
    """


class ConfigError(KotokenExcept):
    """
    잘못된 설정 (분리 모드, 출력 포맷, 사용자 사전 등). 분석을 시작하기 전에 발생한다.
    """


class TokenizeError(KotokenExcept, OSError):
    """
    형태소 분석 엔진이 스트림을 열거나 읽는 도중 실패한 경우
    """
