# -*- coding: utf-8 -*-


"""
python -m kotoken
__author__ = 'kotoken developers'
__copyright__ = 'Copyright (C) 2026-, kotoken developers. All rights reserved.'
"""


from kotoken.cli import main


main()
