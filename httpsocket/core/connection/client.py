# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Optional

from .connection import TcpConnection, TcpConnectionUninitializedException
from ...common.types import HostPort, TcpSocket
from ...common.constants import DEFAULT_CLIENT_RECVBUF_SIZE


class TcpClientConnection(TcpConnection):
    """A buffered client connection object."""

    def __init__(
        self,
        conn: TcpSocket,
        addr: Optional[HostPort] = None,
        recvbuf_size: int = DEFAULT_CLIENT_RECVBUF_SIZE,
    ) -> None:
        super().__init__(recvbuf_size=recvbuf_size)
        self._conn: Optional[TcpSocket] = conn
        self.addr: Optional[HostPort] = addr

    @property
    def address(self) -> str:
        return 'unknown' if not self.addr else '{0}:{1}'.format(self.addr[0], self.addr[1])

    @property
    def connection(self) -> TcpSocket:
        if self._conn is None:
            raise TcpConnectionUninitializedException()
        return self._conn
