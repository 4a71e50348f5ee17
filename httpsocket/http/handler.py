# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import argparse

from .types import httpSocketEvents
from .socket import HttpSocket
from ..common.utils import bytes_
from ..common.constants import CRLF


BAD_REQUEST_STATUS_CODE = b'400 Bad Request'


class HttpSocketHandler:
    """Base class for per connection application logic.

    An instance is created for each accepted connection and
    subscribed to events of its :class:`HttpSocket`.  Override
    the hooks you need.
    """

    def __init__(self, http_socket: HttpSocket, flags: argparse.Namespace) -> None:
        self.http_socket = http_socket
        self.flags = flags
        http_socket.subscribe(
            httpSocketEvents.REQUEST_HEADERS_PARSED,
            self.on_request_headers_parsed,
        )
        http_socket.subscribe(httpSocketEvents.READY_READ, self.on_ready_read)
        http_socket.subscribe(httpSocketEvents.ERROR_CHANGED, self.on_error_changed)
        http_socket.subscribe(httpSocketEvents.BYTES_WRITTEN, self.on_bytes_written)

    def on_request_headers_parsed(self) -> None:
        pass    # pragma: no cover

    def on_ready_read(self) -> None:
        pass    # pragma: no cover

    def on_error_changed(self, error: int) -> None:
        """Responds with 400 Bad Request and closes the connection."""
        self.http_socket.set_response_status_code(BAD_REQUEST_STATUS_CODE)
        self.http_socket.set_response_header(b'Content-Type', b'text/plain')
        self.http_socket.write(bytes_(self.http_socket.error_string) + CRLF)
        self.http_socket.close()

    def on_bytes_written(self, count: int) -> None:
        pass    # pragma: no cover
