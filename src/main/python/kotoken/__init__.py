# -*- coding: utf-8 -*-


"""
kotoken: Korean morpheme tokenizer command line tool
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
from kotoken.analyzer import Analyzer, DecompoundMode, DEFAULT_STOP_TAGS, KiwiAnalyzer, Morph
from kotoken.errors import ConfigError, KotokenExcept, TokenizeError
from kotoken.extractor import tokenize
from kotoken.formatter import OutputFormat, print_tokens
from kotoken.token import Attrs, Token


#############
# variables #
#############
__version__ = '0.1.0'
