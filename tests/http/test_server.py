# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import unittest
from typing import Callable, List, Optional
from unittest import mock

from httpsocket.http import HttpSocketHandler, HttpSocketServer
from httpsocket.plugin import EchoRequestHandler
from httpsocket.common.flag import FlagParser


class TestHttpSocketServer(unittest.TestCase):

    def setUp(self) -> None:
        with mock.patch('httpsocket.common.flag.Logger.setup'):
            self.flags = FlagParser.initialize([], port=0)
        self.server = HttpSocketServer(self.flags)
        self.server.setup()
        assert self.server.listener.port
        self.client = socket.create_connection(
            ('127.0.0.1', self.server.listener.port), timeout=5,
        )

    def tearDown(self) -> None:
        self.client.close()
        self.server.shutdown()

    def run_until(self, predicate: Callable[[], bool]) -> None:
        for _ in range(500):
            self.server.run_once(timeout=0.01)
            if predicate():
                return
        self.fail('Server loop did not reach expected state')

    def roundtrip(self) -> bytes:
        self.run_until(lambda: len(self.server.sessions) == 1)
        self.run_until(lambda: len(self.server.sessions) == 0)
        response = b''
        while True:
            data = self.client.recv(1024)
            if not data:
                break
            response += data
        return response

    def test_uses_handler_klass_from_flags(self) -> None:
        self.assertEqual(self.server.handler_klass, EchoRequestHandler)

    def test_echo_roundtrip(self) -> None:
        self.client.sendall(b'GET /hello HTTP/1.0\r\nHost: localhost\r\n\r\n')
        response = self.roundtrip()
        self.assertTrue(response.startswith(b'HTTP/1.0 200 OK\r\n'))
        self.assertIn(b'Content-Type: text/plain\r\n', response)
        self.assertTrue(response.endswith(b'\r\n\r\nGET /hello\r\nhost: localhost\r\n\r\n'))

    def test_malformed_request(self) -> None:
        self.client.sendall(b'GET /\r\n\r\n')
        self.assertEqual(
            self.roundtrip(),
            b'HTTP/1.0 400 Bad Request\r\n'
            b'Content-Type: text/plain\r\n'
            b'\r\n'
            b'Malformed request line\r\n',
        )

    def test_client_closes_mid_header_block(self) -> None:
        self.client.sendall(b'GET / HTTP/1.1\r\nHo')
        self.client.shutdown(socket.SHUT_WR)
        self.assertEqual(
            self.roundtrip(),
            b'HTTP/1.0 400 Bad Request\r\n'
            b'Content-Type: text/plain\r\n'
            b'\r\n'
            b'Incomplete header received\r\n',
        )


LARGE_RESPONSE_SIZE = 16 * 1024 * 1024


class LargeResponseHandler(HttpSocketHandler):

    def on_request_headers_parsed(self) -> None:
        if self.http_socket.error:
            return
        if self.http_socket.request_uri == b'/large':
            self.http_socket.write(b'x' * LARGE_RESPONSE_SIZE)
        else:
            self.http_socket.write(b'xx')
        self.http_socket.close()


class TestHttpSocketServerPendingFlush(unittest.TestCase):

    def setUp(self) -> None:
        with mock.patch('httpsocket.common.flag.Logger.setup'):
            flags = FlagParser.initialize([], port=0)
        self.server = HttpSocketServer(flags, handler_klass=LargeResponseHandler)
        self.server.setup()
        self.clients: List[socket.socket] = []

    def tearDown(self) -> None:
        for client in self.clients:
            client.close()
        self.server.shutdown()

    def connect(self, rcvbuf: Optional[int] = None) -> socket.socket:
        client = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        if rcvbuf is not None:
            client.setsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF, rcvbuf)
        client.settimeout(5)
        client.connect(('127.0.0.1', self.server.listener.port))
        self.clients.append(client)
        return client

    def run_until(self, predicate: Callable[[], bool]) -> None:
        for _ in range(500):
            self.server.run_once(timeout=0.01)
            if predicate():
                return
        self.fail('Server loop did not reach expected state')

    def pending_close(self) -> bool:
        return any(
            h.http_socket.transport.must_flush_before_shutdown
            for h in self.server.sessions.values()
        )

    def test_client_not_reading_does_not_stall_others(self) -> None:
        stalled = self.connect(rcvbuf=4096)
        stalled.sendall(b'GET /large HTTP/1.0\r\n\r\n')
        self.run_until(self.pending_close)

        client = self.connect()
        client.sendall(b'GET /small HTTP/1.0\r\n\r\n')
        self.run_until(lambda: len(self.server.sessions) == 2)
        self.run_until(lambda: len(self.server.sessions) == 1)
        response = b''
        while True:
            data = client.recv(1024)
            if not data:
                break
            response += data
        self.assertEqual(response, b'HTTP/1.0 200 OK\r\n\r\nxx')

        transport = list(self.server.sessions.values())[0].http_socket.transport
        self.assertTrue(transport.must_flush_before_shutdown)
        self.assertTrue(transport.has_buffer())
        self.assertFalse(transport.closed)

    def test_pending_response_delivered_before_close(self) -> None:
        client = self.connect()
        client.sendall(b'GET /small HTTP/1.0\r\n\r\n')
        client.shutdown(socket.SHUT_WR)
        self.run_until(lambda: len(self.server.sessions) == 1)
        self.run_until(lambda: len(self.server.sessions) == 0)
        self.assertEqual(client.recv(1024), b'HTTP/1.0 200 OK\r\n\r\nxx')
