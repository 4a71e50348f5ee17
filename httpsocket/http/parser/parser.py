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
from typing import Dict, Optional, Tuple, Union

from .buffer import ReceiveBuffer
from ..types import httpSocketStates
from ..exception import (
    IncompleteHeader, InvalidHttpVersion,
    MalformedRequestHeader, MalformedRequestLine,
)
from ...common.utils import bytes_
from ...common.constants import (
    COLON, CRLF, WHITESPACE, HEADER_BLOCK_TERMINATOR,
    SUPPORTED_HTTP_VERSIONS, DEFAULT_MAX_HEADER_SIZE,
)


logger = logging.getLogger(__name__)


def parse_request_line(line: bytes) -> Tuple[bytes, bytes, bytes]:
    """Splits request line into method, uri and version.

    Fields are separated by single spaces, method and uri are
    returned verbatim."""
    parts = line.split(WHITESPACE)
    if len(parts) != 3:
        raise MalformedRequestLine('Malformed request line %r' % line)
    if parts[2] not in SUPPORTED_HTTP_VERSIONS:
        raise InvalidHttpVersion('Invalid HTTP version %r' % parts[2])
    return parts[0], parts[1], parts[2]


def parse_request_header(line: bytes) -> Tuple[bytes, bytes]:
    """Returns lower cased header name and its value, both stripped."""
    index = line.find(COLON)
    if index == -1:
        raise MalformedRequestHeader('Malformed request header %r' % line)
    return line[:index].strip().lower(), line[index + 1:].strip()


class RequestHead:
    """Request line and header fields decoded from a header block."""

    def __init__(self) -> None:
        self.method: bytes = b''
        self.uri: bytes = b''
        self.version: bytes = b''
        # Keys are lower case header names, values as received.
        self.headers: Dict[bytes, bytes] = {}

    def header(self, key: Union[str, bytes], default: bytes = b'') -> bytes:
        return self.headers.get(bytes_(key).lower(), default)

    def has_header(self, key: Union[str, bytes]) -> bool:
        return bytes_(key).lower() in self.headers

    def parse(self, block: bytes) -> None:
        """Decodes a header block without its terminating CRLFCRLF.

        Stops at the first malformed line.  Fields decoded before
        the failure are kept."""
        lines = block.split(CRLF)
        self.method, self.uri, self.version = parse_request_line(lines[0])
        for line in lines[1:]:
            key, value = parse_request_header(line)
            self.headers[key] = value


class HeaderBlockScanner:
    """Delimits the request header block within a :class:`ReceiveBuffer`.

    Starts in ``AWAITING_HEADERS`` state and moves into
    ``BODY_STREAMING`` exactly once, when CRLFCRLF is found.
    Incomplete input is never partially parsed.
    """

    def __init__(self, max_header_size: int = DEFAULT_MAX_HEADER_SIZE) -> None:
        self.state: int = httpSocketStates.AWAITING_HEADERS
        # 0 disables the bound
        self.max_header_size = max_header_size

    @property
    def is_streaming_body(self) -> bool:
        return self.state == httpSocketStates.BODY_STREAMING

    def scan(self, buffer: ReceiveBuffer) -> Optional[bytes]:
        """Returns the header block once buffer holds the terminator.

        Header block and terminator are consumed from the buffer,
        bytes after them stay buffered as body.  Returns None while
        terminator is yet to arrive.

        Raises :exc:`IncompleteHeader` when header block outgrows
        ``max_header_size``."""
        assert self.state == httpSocketStates.AWAITING_HEADERS
        index = buffer.find_terminator()
        size = len(buffer) if index == -1 else index
        if self.max_header_size and size > self.max_header_size:
            raise IncompleteHeader(
                'Header block exceeds %d bytes' % self.max_header_size,
            )
        if index == -1:
            return None
        block = buffer.consume(index + len(HEADER_BLOCK_TERMINATOR))[:index]
        self.state = httpSocketStates.BODY_STREAMING
        logger.debug('Received %d bytes header block', index)
        return block
