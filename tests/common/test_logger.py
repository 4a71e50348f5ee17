# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging
import unittest

from unittest import mock

from httpsocket.common.logger import Logger, single_char_to_level
from httpsocket.common.constants import DEFAULT_LOG_FORMAT


class TestLogger(unittest.TestCase):

    def test_single_char_to_level(self) -> None:
        self.assertEqual(single_char_to_level('d'), logging.DEBUG)
        self.assertEqual(single_char_to_level('I'), logging.INFO)
        self.assertEqual(single_char_to_level('warning'), logging.WARNING)
        self.assertEqual(single_char_to_level('ERROR'), logging.ERROR)
        self.assertEqual(single_char_to_level('c'), logging.CRITICAL)

    def test_single_char_to_level_invalid(self) -> None:
        with self.assertRaises(ValueError):
            single_char_to_level('x')
        with self.assertRaises(ValueError):
            single_char_to_level('')

    @mock.patch('logging.basicConfig')
    def test_setup(self, mock_basic_config: mock.Mock) -> None:
        Logger.setup(None, 'DEBUG', DEFAULT_LOG_FORMAT)
        mock_basic_config.assert_called_once_with(
            level=logging.DEBUG,
            format=DEFAULT_LOG_FORMAT,
        )
