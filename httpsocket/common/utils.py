# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Any, Dict, Optional

from .constants import (
    COLON, CRLF, WHITESPACE, RESPONSE_HTTP_VERSION,
    DEFAULT_RESPONSE_STATUS_CODE,
)


def text_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure text-like usability.

    If s is of type bytes or int, return s.decode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        return str(s)
    if isinstance(s, bytes):
        return s.decode(encoding, errors)
    return s


def bytes_(s: Any, encoding: str = 'utf-8', errors: str = 'strict') -> Any:
    """Utility to ensure binary-like usability.

    If s is type str or int, return s.encode(encoding, errors),
    otherwise return s as it is."""
    if isinstance(s, int):
        s = str(s)
    if isinstance(s, str):
        return s.encode(encoding, errors)
    return s


def build_http_header(k: bytes, v: bytes) -> bytes:
    """Build and return a HTTP header line for use in raw packet."""
    return k + COLON + WHITESPACE + v


def build_http_preamble(
    status_code: bytes = DEFAULT_RESPONSE_STATUS_CODE,
    headers: Optional[Dict[bytes, bytes]] = None,
    protocol_version: bytes = RESPONSE_HTTP_VERSION,
) -> bytes:
    """Build and returns the status line and headers of a response.

    ``status_code`` is the full status e.g. ``b'404 Not Found'``.
    Every header line is CRLF terminated and a blank line closes
    the preamble, body bytes can follow as is."""
    pkt = protocol_version + WHITESPACE + status_code + CRLF
    if headers is not None:
        for k in headers:
            pkt += build_http_header(k, headers[k]) + CRLF
    return pkt + CRLF
