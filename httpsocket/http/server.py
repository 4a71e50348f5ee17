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
import selectors

from types import TracebackType
from typing import Dict, Optional, Type

from .socket import HttpSocket
from .handler import HttpSocketHandler
from ..core.listener import TcpSocketListener
from ..core.connection import TcpClientConnection, TcpConnection
from ..common.flag import flags
from ..common.constants import (
    DEFAULT_MAX_SEND_SIZE, DEFAULT_CLIENT_RECVBUF_SIZE,
    DEFAULT_SELECTOR_SELECT_TIMEOUT,
)


flags.add_argument(
    '--handler-klass',
    type=str,
    default='httpsocket.plugin.EchoRequestHandler',
    help='Default: httpsocket.plugin.EchoRequestHandler.  '
    'HttpSocketHandler implementation to use for each connection.',
)

flags.add_argument(
    '--client-recvbuf-size',
    type=int,
    default=DEFAULT_CLIENT_RECVBUF_SIZE,
    help='Default: ' + str(int(DEFAULT_CLIENT_RECVBUF_SIZE / 1024)) +
    ' KB. Maximum amount of data received from the '
    'client in a single recv() operation.',
)

flags.add_argument(
    '--max-sendbuf-size',
    type=int,
    default=DEFAULT_MAX_SEND_SIZE,
    help='Default: ' + str(int(DEFAULT_MAX_SEND_SIZE / 1024)) +
    ' KB. Maximum amount of data to dispatch in a single send() operation.',
)

logger = logging.getLogger(__name__)


class HttpSocketServer:
    """Single threaded selector loop serving one :class:`HttpSocket`
    per accepted connection.

    Readable events are delivered to :meth:`HttpSocket.on_readable`
    and queued response bytes are flushed once client is write ready.
    A session closed by its handler stops reading and is torn down
    after its last byte was flushed.  A session whose peer went away
    is torn down once nothing is left to flush.  Sockets are never
    switched to blocking mode.
    """

    def __init__(
            self,
            flags: argparse.Namespace,
            handler_klass: Optional[Type[HttpSocketHandler]] = None,
    ) -> None:
        self.flags = flags
        self.handler_klass: Type[HttpSocketHandler] = \
            handler_klass or flags.handler_klass
        self.listener = TcpSocketListener(flags)
        self.selector: Optional[selectors.DefaultSelector] = None
        # Active sessions by client fileno along with their registered events
        self.sessions: Dict[int, HttpSocketHandler] = {}
        self.registered: Dict[int, int] = {}

    def __enter__(self) -> 'HttpSocketServer':
        self.setup()
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc_val: Optional[BaseException],
            exc_tb: Optional[TracebackType],
    ) -> None:
        self.shutdown()

    def setup(self) -> None:
        self.listener.listen()
        self.selector = selectors.DefaultSelector()
        self.selector.register(self.listener.fileno(), selectors.EVENT_READ)
        logger.info('Serving connections with %s', self.handler_klass.__name__)

    def shutdown(self) -> None:
        for fileno in list(self.sessions):
            self._teardown(fileno)
        if self.selector is not None:
            self.selector.close()
            self.selector = None
        self.listener.shutdown()

    def run(self) -> None:
        try:
            while True:
                self.run_once()
        except KeyboardInterrupt:
            pass

    def run_once(self, timeout: float = DEFAULT_SELECTOR_SELECT_TIMEOUT) -> None:
        assert self.selector is not None
        listener = self.listener.fileno()
        for key, mask in self.selector.select(timeout=timeout):
            if key.fd == listener:
                self._accept()
            elif key.fd in self.sessions:
                self._handle_events(key.fd, mask)
        self._update_events()

    def _accept(self) -> None:
        assert self.selector is not None
        try:
            conn, addr = self.listener.sock.accept()
        except BlockingIOError:
            return
        conn.setblocking(False)
        transport = TcpClientConnection(
            conn, addr, recvbuf_size=self.flags.client_recvbuf_size,
        )
        http_socket = HttpSocket(
            transport, max_header_size=self.flags.max_header_size,
        )
        fileno = conn.fileno()
        self.sessions[fileno] = self.handler_klass(http_socket, self.flags)
        self.selector.register(fileno, selectors.EVENT_READ)
        self.registered[fileno] = selectors.EVENT_READ
        logger.debug('Accepted connection from %s', transport.address)

    def _handle_events(self, fileno: int, mask: int) -> None:
        http_socket = self.sessions[fileno].http_socket
        transport = http_socket.transport
        teardown = False
        try:
            if mask & selectors.EVENT_WRITE and transport.has_buffer():
                transport.flush(self.flags.max_sendbuf_size)
            if mask & selectors.EVENT_READ and self._wants_read(transport):
                http_socket.on_readable()
                if transport.eof and not transport.closed:
                    logger.debug('Connection closed by client %s', transport.address)
                    http_socket.on_disconnected()
        except (ConnectionResetError, BrokenPipeError) as e:
            logger.info('Connection %s lost: %r', transport.address, e)
            teardown = True
        except Exception as e:
            logger.exception(
                'Exception while handling connection %s',
                transport.address, exc_info=e,
            )
            teardown = True
        if teardown or transport.closed or \
                (transport.eof and not transport.has_buffer()):
            self._teardown(fileno)

    @staticmethod
    def _wants_read(transport: TcpConnection) -> bool:
        return not (
            transport.closed or
            transport.eof or
            transport.must_flush_before_shutdown
        )

    def _update_events(self) -> None:
        assert self.selector is not None
        for fileno, handler in self.sessions.items():
            transport = handler.http_socket.transport
            events = selectors.EVENT_READ if self._wants_read(transport) else 0
            if transport.has_buffer():
                events |= selectors.EVENT_WRITE
            if events and self.registered[fileno] != events:
                self.selector.modify(fileno, events)
                self.registered[fileno] = events

    def _teardown(self, fileno: int) -> None:
        handler = self.sessions.pop(fileno)
        self.registered.pop(fileno, None)
        if self.selector is not None:
            self.selector.unregister(fileno)
        transport = handler.http_socket.transport
        if transport.has_buffer():
            logger.info(
                'Dropping unflushed response buffer for %s', transport.address,
            )
        try:
            transport.close()
        except OSError as e:
            logger.info('Failed to close %s: %r', transport.address, e)
        logger.debug('Closed connection %s', transport.address)
