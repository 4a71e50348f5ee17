# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import unittest
from unittest import mock

from httpsocket.http import ResponsePreamble


class TestResponsePreamble(unittest.TestCase):

    def setUp(self) -> None:
        self.preamble = ResponsePreamble()

    def test_default_preamble(self) -> None:
        self.assertEqual(self.preamble.status_code, b'200 OK')
        self.assertEqual(self.preamble.build(), b'HTTP/1.0 200 OK\r\n\r\n')

    def test_headers_in_insertion_order(self) -> None:
        self.preamble.status_code = b'404 Not Found'
        self.preamble.set_header(b'Content-Type', b'text/plain')
        self.preamble.set_header('X-Count', 1)
        self.assertEqual(
            self.preamble.build(),
            b'HTTP/1.0 404 Not Found\r\n'
            b'Content-Type: text/plain\r\n'
            b'X-Count: 1\r\n'
            b'\r\n',
        )

    def test_set_header_is_case_insensitive(self) -> None:
        self.preamble.set_header(b'Content-Type', b'text/plain')
        self.preamble.set_header(b'X-Other', b'1')
        self.preamble.set_header(b'content-type', b'text/html')
        self.assertEqual(
            self.preamble.headers,
            {b'content-type': b'text/html', b'X-Other': b'1'},
        )
        self.assertEqual(self.preamble.header(b'CONTENT-TYPE'), b'text/html')
        self.assertEqual(self.preamble.header(b'X-Missing'), b'')

    def test_write_once(self) -> None:
        write = mock.Mock()
        self.assertTrue(self.preamble.write_once(write))
        self.assertTrue(self.preamble.written)
        self.assertFalse(self.preamble.write_once(write))
        write.assert_called_once_with(b'HTTP/1.0 200 OK\r\n\r\n')

    def test_written_is_set_before_handing_off(self) -> None:
        observed = []
        self.preamble.write_once(lambda data: observed.append(self.preamble.written) or len(data))
        self.assertEqual(observed, [True])
