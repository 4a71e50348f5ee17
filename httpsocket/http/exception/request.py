# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .base import HttpProtocolException
from ..types import httpSocketErrors


class MalformedRequestLine(HttpProtocolException):
    """Request line did not split into exactly three fields."""

    error = httpSocketErrors.MALFORMED_REQUEST_LINE


class MalformedRequestHeader(HttpProtocolException):
    """Header line without a ``:`` separator."""

    error = httpSocketErrors.MALFORMED_REQUEST_HEADER


class InvalidHttpVersion(HttpProtocolException):
    """Version token is neither HTTP/1.0 nor HTTP/1.1."""

    error = httpSocketErrors.INVALID_HTTP_VERSION


class IncompleteHeader(HttpProtocolException):
    """Header block grew beyond the allowed size or the peer
    went away before sending the terminating CRLFCRLF."""

    error = httpSocketErrors.INCOMPLETE_HEADER
