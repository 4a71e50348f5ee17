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

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ...common.types import TcpSocket
from ...common.constants import DEFAULT_BUFFER_SIZE, DEFAULT_MAX_SEND_SIZE

logger = logging.getLogger(__name__)


class TcpConnectionUninitializedException(Exception):
    pass


class TcpConnection(ABC):
    """TCP connection abstraction used as transport underneath
    :class:`~httpsocket.http.HttpSocket`.

    Provides the buffer management HttpSocket depends upon:

    1. ``read_all`` drains every byte currently readable.
    2. ``write`` queues outgoing bytes and returns accepted count,
       ``flush`` dispatches them and reports sent count via
       ``on_bytes_written`` callback.
    3. ``close_after_flush`` defers closing until ``flush`` has
       delivered every pending buffer, ``close`` closes right away.

    Implement the connection property abstract method to return
    a socket connection object.
    """

    def __init__(self, recvbuf_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self.recvbuf_size = recvbuf_size
        self.buffer: List[memoryview] = []
        self.closed: bool = False
        # Set once peer has closed its side of the connection
        self.eof: bool = False
        # Set when close was requested while buffers were pending
        self.must_flush_before_shutdown: bool = False
        self.on_bytes_written: Optional[Callable[[int], None]] = None
        self._num_buffer = 0

    @property
    @abstractmethod
    def connection(self) -> TcpSocket:
        """Must return the socket connection to use in this class."""
        raise TcpConnectionUninitializedException()     # pragma: no cover

    @property
    def address(self) -> str:
        return 'unknown'

    def send(self, data: bytes) -> int:
        """Users must handle BrokenPipeError exceptions"""
        return self.connection.send(data)

    def recv(
            self, buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> Optional[memoryview]:
        """Users must handle socket.error exceptions"""
        data: bytes = self.connection.recv(buffer_size)
        if len(data) == 0:
            return None
        logger.debug(
            'received %d bytes from %s',
            len(data), self.address,
        )
        return memoryview(data)

    def read_all(self) -> bytes:
        """Drains all bytes currently available on the connection.

        Stops when a read would block, when a read returns less than
        ``recvbuf_size`` bytes or when peer closes the connection,
        in which case ``eof`` is set."""
        chunks: List[bytes] = []
        while not self.eof:
            try:
                data = self.recv(self.recvbuf_size)
            except BlockingIOError:
                break
            if data is None:
                self.eof = True
                break
            chunks.append(data.tobytes())
            if len(data) < self.recvbuf_size:
                break
        return b''.join(chunks)

    def write(self, data: bytes) -> int:
        """Queues data for delivery, returns number of bytes accepted."""
        if len(data) == 0:
            return 0
        self.queue(memoryview(data))
        return len(data)

    def close(self) -> bool:
        if not self.closed:
            self.connection.close()
            self.closed = True
        return self.closed

    def close_after_flush(self) -> bool:
        """Closes now if nothing is pending, otherwise once :meth:`flush`
        has delivered the last queued byte.  Never blocks.

        Returns True if connection was closed right away."""
        if not self.has_buffer():
            return self.close()
        self.must_flush_before_shutdown = True
        return False

    def has_buffer(self) -> bool:
        return self._num_buffer != 0

    def queue(self, mv: memoryview) -> None:
        self.buffer.append(mv)
        self._num_buffer += 1

    def flush(self, max_send_size: Optional[int] = None) -> int:
        """Users must handle BrokenPipeError exceptions"""
        if not self.has_buffer():
            return 0
        mv = self.buffer[0].tobytes()
        sent: int = self.send(mv[:max_send_size or DEFAULT_MAX_SEND_SIZE])
        if sent == len(mv):
            self.buffer.pop(0)
            self._num_buffer -= 1
        else:
            self.buffer[0] = memoryview(mv[sent:])
        del mv
        logger.debug('flushed %d bytes to %s', sent, self.address)
        if sent > 0 and self.on_bytes_written is not None:
            self.on_bytes_written(sent)
        if self.must_flush_before_shutdown and not self.has_buffer():
            self.must_flush_before_shutdown = False
            self.close()
        return sent
