#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
token record tests
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


###########
# imports #
###########
import unittest

from kotoken.token import Attrs, PLACEHOLDER, Token


#########
# tests #
#########
class TestToken(unittest.TestCase):
    """
    Token tests
    """
    def test_make(self):
        """
        test make() without reading
        """
        token = Token.make('테스트', 'NNG')
        self.assertEqual(token.surface, '테스트')
        self.assertEqual(list(token.attrs), ['NNG', '*', '*', '테스트', '*', '*', '*', '*'])
        self.assertEqual(token.pos, 'NNG')
        self.assertEqual(token.reading, PLACEHOLDER)
        self.assertEqual(token.attrs.surface, token.surface)

    def test_make_with_reading(self):
        """
        test make() with reading
        """
        token = Token.make('學校', 'NNG', '학교')
        self.assertEqual(list(token.attrs), ['NNG', '*', '*', '學校', '*', '*', '*', '학교'])
        self.assertEqual(token.reading, '학교')

    def test_shape(self):
        """
        reserved columns are always placeholders
        """
        token = Token.make('갔', 'VV', '갔')
        self.assertEqual(len(token.attrs), 8)
        for idx in (1, 2, 4, 5, 6):
            self.assertEqual(token.attrs[idx], PLACEHOLDER)

    def test_invalid_attrs(self):
        """
        attributes must have exactly 8 columns
        """
        with self.assertRaises(ValueError):
            Token('테스트', ('NNG', '*', '*', '테스트'))
        with self.assertRaises(ValueError):
            Token('테스트', ('NNG', ) + ('*', ) * 8)

    def test_immutable(self):
        """
        token can not be changed after construction
        """
        token = Token.make('테스트', 'NNG')
        with self.assertRaises(AttributeError):
            token.surface = '다른'
        with self.assertRaises(AttributeError):
            token._attrs = Attrs(*(['*'] * 8))    # pylint: disable=protected-access

    def test_eq_hash(self):
        """
        test equality and hash
        """
        self.assertEqual(Token.make('테스트', 'NNG'), Token.make('테스트', 'NNG'))
        self.assertNotEqual(Token.make('테스트', 'NNG'), Token.make('테스트', 'NNP'))
        self.assertEqual(len({Token.make('나', 'NP'), Token.make('나', 'NP')}), 1)

    def test_str(self):
        """
        test mecab line and dictionary
        """
        token = Token.make('테스트', 'NNG')
        self.assertEqual(str(token), '테스트\tNNG,*,*,테스트,*,*,*,*')
        self.assertEqual(token.to_dict(), {'surface': '테스트',
                                           'attrs': ['NNG', '*', '*', '테스트',
                                                     '*', '*', '*', '*']})


########
# main #
########
if __name__ == '__main__':
    unittest.main()
