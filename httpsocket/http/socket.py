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
import warnings

from typing import Any, Dict, List, Optional, Union

from .types import ERROR_STRINGS, httpSocketErrors, httpSocketEvents
from .parser import ReceiveBuffer, RequestHead, HeaderBlockScanner
from .preamble import ResponsePreamble
from .exception import (
    HttpProtocolException, HttpSocketPreconditionWarning, IncompleteHeader,
)
from ..core.connection import TcpConnection
from ..common.flag import flags
from ..common.types import EventCallback
from ..common.utils import bytes_
from ..common.constants import DEFAULT_MAX_HEADER_SIZE


flags.add_argument(
    '--max-header-size',
    type=int,
    default=DEFAULT_MAX_HEADER_SIZE,
    help='Default: ' + str(int(DEFAULT_MAX_HEADER_SIZE / 1024)) +
    ' KB. Maximum size of request line and headers.  Larger header '
    'blocks fail with incomplete header error.  Use 0 to disable.',
)

logger = logging.getLogger(__name__)


class HttpSocket:
    """Duplex HTTP stream layered over a :class:`TcpConnection`.

    Reads yield the request body, writes go to the response body.
    Response status line and headers are written lazily, exactly
    once, before the first body byte or on close.

    HttpSocket is driven by the transport: call :meth:`on_readable`
    whenever transport has readable bytes and :meth:`on_disconnected`
    when peer closes the connection.  Queued response bytes reach
    the peer as transport is flushed, transport closes itself after
    the final flush following :meth:`close`.  Progress is reported to
    callbacks registered via :meth:`subscribe`:

    - ``REQUEST_HEADERS_PARSED``, once, after the header block was
      decoded.  Body bytes received along with the header block are
      already buffered, read them from within this callback.
    - ``READY_READ``, on every transport drain after headers.
    - ``ERROR_CHANGED(error)``, once, on the first failure.
    - ``BYTES_WRITTEN(count)``, as reported by the transport.

    A malformed but complete header block first dispatches
    ``ERROR_CHANGED`` and then ``REQUEST_HEADERS_PARSED``.  Once
    ``error`` is set it never changes, consumer is expected to
    respond and close the connection.

    HttpSocket is not thread safe, all calls for a connection must
    come from one thread.
    """

    def __init__(
            self,
            transport: TcpConnection,
            max_header_size: int = DEFAULT_MAX_HEADER_SIZE,
    ) -> None:
        self.transport = transport
        self.error: int = httpSocketErrors.NONE
        self.error_string: str = ERROR_STRINGS[httpSocketErrors.NONE]
        self.buffer = ReceiveBuffer()
        self.scanner = HeaderBlockScanner(max_header_size)
        self.request = RequestHead()
        self.response = ResponsePreamble()
        self._callbacks: Dict[int, List[EventCallback]] = {
            event: [] for event in httpSocketEvents
        }
        self.transport.on_bytes_written = self._on_bytes_written

    def subscribe(self, event: int, callback: EventCallback) -> None:
        self._callbacks[event].append(callback)

    def unsubscribe(self, event: int, callback: EventCallback) -> None:
        self._callbacks[event].remove(callback)

    @property
    def headers_parsed(self) -> bool:
        return self.scanner.is_streaming_body

    @property
    def response_headers_written(self) -> bool:
        return self.response.written

    @property
    def bytes_available(self) -> int:
        return len(self.buffer) if self.headers_parsed else 0

    def on_readable(self) -> None:
        """Drains transport and advances the header block scanner."""
        data = self.transport.read_all()
        if self.error == httpSocketErrors.INCOMPLETE_HEADER:
            logger.debug(
                'Dropping %d bytes from %s, incomplete header block',
                len(data), self.transport.address,
            )
            return
        self.buffer.append(data)
        if self.scanner.is_streaming_body:
            self._dispatch(httpSocketEvents.READY_READ)
            return
        try:
            block = self.scanner.scan(self.buffer)
        except IncompleteHeader as e:
            self._abort_with_error(e)
            return
        if block is None:
            return
        try:
            self.request.parse(block)
        except HttpProtocolException as e:
            self._abort_with_error(e)
        self._dispatch(httpSocketEvents.REQUEST_HEADERS_PARSED)

    def on_disconnected(self) -> None:
        """Peer closed connection, header block can no longer complete."""
        if not self.headers_parsed:
            self._abort_with_error(
                IncompleteHeader(
                    'Connection closed after %d header bytes' % len(self.buffer),
                ),
            )

    def read(self, max_length: int = -1) -> Optional[bytes]:
        """Returns up to ``max_length`` buffered body bytes, all if negative.

        Returns None before request headers are parsed and ``b''``
        when no body bytes are currently buffered."""
        if not self.headers_parsed:
            return None
        size = len(self.buffer)
        if max_length >= 0:
            size = min(size, max_length)
        return self.buffer.consume(size)

    def write(self, data: bytes) -> int:
        """Writes response preamble if necessary and queues body data.

        Returns number of bytes accepted by the transport."""
        self._write_response_headers()
        return self.transport.write(data)

    def close(self) -> None:
        """Writes response preamble if necessary and closes transport
        once every queued response byte was flushed."""
        self._write_response_headers()
        self.transport.close_after_flush()

    @property
    def request_method(self) -> bytes:
        self._warn_if_headers_not_parsed()
        return self.request.method

    @property
    def request_uri(self) -> bytes:
        self._warn_if_headers_not_parsed()
        return self.request.uri

    @property
    def request_headers(self) -> Dict[bytes, bytes]:
        """Copy of request headers keyed by lower case name."""
        self._warn_if_headers_not_parsed()
        return dict(self.request.headers)

    def request_header(self, name: Union[str, bytes], default: bytes = b'') -> bytes:
        """Case insensitive request header lookup."""
        self._warn_if_headers_not_parsed()
        return self.request.header(name, default)

    @property
    def response_status_code(self) -> bytes:
        return self.response.status_code

    @property
    def response_headers(self) -> Dict[bytes, bytes]:
        return self.response.headers

    def set_response_status_code(self, status_code: Union[str, bytes]) -> None:
        """Full status e.g. ``b'404 Not Found'``, default ``b'200 OK'``."""
        self._warn_if_response_headers_written()
        self.response.status_code = bytes_(status_code)

    def set_response_header(
            self,
            name: Union[str, bytes],
            value: Union[str, bytes, int],
    ) -> None:
        self._warn_if_response_headers_written()
        self.response.set_header(name, value)

    def _write_response_headers(self) -> None:
        self.response.write_once(self.transport.write)

    def _abort_with_error(self, e: HttpProtocolException) -> None:
        if self.error != httpSocketErrors.NONE:
            return
        self.error = e.error
        self.error_string = ERROR_STRINGS[e.error]
        logger.warning('%s: %s', self.transport.address, e)
        self._dispatch(httpSocketEvents.ERROR_CHANGED, self.error)

    def _on_bytes_written(self, count: int) -> None:
        self._dispatch(httpSocketEvents.BYTES_WRITTEN, count)

    def _dispatch(self, event: int, *args: Any) -> None:
        for callback in list(self._callbacks[event]):
            callback(*args)

    def _warn_if_headers_not_parsed(self) -> None:
        if not self.headers_parsed:
            warnings.warn(
                'Request headers have not yet been read',
                HttpSocketPreconditionWarning,
                stacklevel=3,
            )

    def _warn_if_response_headers_written(self) -> None:
        if self.response.written:
            warnings.warn(
                'Response headers have already been written',
                HttpSocketPreconditionWarning,
                stacklevel=3,
            )
