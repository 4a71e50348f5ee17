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
import argparse

from ..http import HttpSocket, HttpSocketHandler
from ..common.utils import build_http_header, text_
from ..common.constants import (
    CRLF, WHITESPACE, SERVER_HEADER_KEY, SERVER_HEADER_VALUE,
)


logger = logging.getLogger(__name__)


class EchoRequestHandler(HttpSocketHandler):
    """Responds with a plain text rendition of the decoded request.

    When request carries a Content-Length header, response is
    written only after that many body bytes were read and the
    body is echoed back after the headers."""

    def __init__(self, http_socket: HttpSocket, flags: argparse.Namespace) -> None:
        super().__init__(http_socket, flags)
        self.body = bytearray()
        self.content_length = 0
        self.responded = False

    def on_request_headers_parsed(self) -> None:
        if self.http_socket.error:
            return
        try:
            self.content_length = max(
                0, int(self.http_socket.request_header(b'content-length', b'0')),
            )
        except ValueError:
            self.content_length = 0
        self._consume_body()

    def on_ready_read(self) -> None:
        if self.http_socket.error or self.responded:
            return
        self._consume_body()

    def _consume_body(self) -> None:
        data = self.http_socket.read(self.content_length - len(self.body))
        if data:
            self.body += data
        if len(self.body) >= self.content_length:
            self._respond()

    def _respond(self) -> None:
        self.responded = True
        s = self.http_socket
        lines = [s.request_method + WHITESPACE + s.request_uri]
        lines += [build_http_header(k, v) for k, v in s.request_headers.items()]
        payload = CRLF.join(lines) + CRLF + CRLF + bytes(self.body)
        s.set_response_header(b'Content-Type', b'text/plain')
        s.set_response_header(b'Content-Length', len(payload))
        s.set_response_header(SERVER_HEADER_KEY, SERVER_HEADER_VALUE)
        s.write(payload)
        s.close()
        logger.info(
            '%s - %s %s - %d bytes',
            s.transport.address,
            text_(s.request_method, 'iso-8859-1'),
            text_(s.request_uri, 'iso-8859-1'),
            len(payload),
        )
