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
import logging
import argparse
from typing import Optional

from .connection import TcpConnectionUninitializedException
from ..common.flag import flags
from ..common.constants import DEFAULT_BACKLOG, DEFAULT_PORT, DEFAULT_IPV4_HOSTNAME


flags.add_argument(
    '--hostname',
    type=str,
    default=str(DEFAULT_IPV4_HOSTNAME),
    help='Default: 127.0.0.1. Server IP address.',
)

flags.add_argument(
    '--port',
    type=int,
    default=DEFAULT_PORT,
    help='Default: ' + str(DEFAULT_PORT) + '.  Server port.  Use 0 for an ephemeral port.',
)

flags.add_argument(
    '--backlog',
    type=int,
    default=DEFAULT_BACKLOG,
    help='Default: 100. Maximum number of pending connections to the server.',
)

logger = logging.getLogger(__name__)


class TcpSocketListener:
    """Non-blocking TCP listening socket."""

    def __init__(self, flags: argparse.Namespace) -> None:
        self.flags = flags
        self._socket: Optional[socket.socket] = None
        # Set after binding, stored separately for ephemeral port discovery.
        self.port: Optional[int] = None

    @property
    def sock(self) -> socket.socket:
        if self._socket is None:
            raise TcpConnectionUninitializedException()
        return self._socket

    def fileno(self) -> int:
        return self.sock.fileno()

    def listen(self) -> socket.socket:
        sock = socket.socket(self.flags.family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        sock.bind((str(self.flags.hostname), self.flags.port))
        sock.listen(self.flags.backlog)
        sock.setblocking(False)
        self._socket = sock
        self.port = sock.getsockname()[1]
        logger.info(
            'Listening on %s:%s',
            self.flags.hostname, self.port,
        )
        return sock

    def shutdown(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None
