# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Tuple
from unittest import mock

from httpsocket.http import HttpSocket
from httpsocket.core.connection import TcpClientConnection
from httpsocket.common.constants import DEFAULT_MAX_HEADER_SIZE


def new_http_socket(
        max_header_size: int = DEFAULT_MAX_HEADER_SIZE,
) -> Tuple[HttpSocket, mock.MagicMock]:
    """Returns an HttpSocket over a mocked client socket.

    Mocked socket accepts every byte passed to send."""
    conn = mock.MagicMock()
    conn.send.side_effect = lambda data: len(data)
    transport = TcpClientConnection(conn, ('127.0.0.1', 54382))
    return HttpSocket(transport, max_header_size=max_header_size), conn


def feed(http_socket: HttpSocket, conn: mock.MagicMock, data: bytes) -> None:
    """Delivers data as a single transport readable event."""
    conn.recv.return_value = data
    http_socket.on_readable()


def queued(http_socket: HttpSocket) -> bytes:
    """Bytes queued on transport but not yet flushed."""
    return b''.join(mv.tobytes() for mv in http_socket.transport.buffer)


def sent(conn: mock.MagicMock) -> bytes:
    """Bytes dispatched to the mocked socket."""
    return b''.join(c.args[0] for c in conn.send.call_args_list)


def flush_all(http_socket: HttpSocket) -> None:
    """Flushes transport until nothing is queued, as selector loop would."""
    while http_socket.transport.has_buffer():
        http_socket.transport.flush()
