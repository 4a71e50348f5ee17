# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Any, Optional

from ..types import ERROR_STRINGS, httpSocketErrors


class HttpProtocolException(Exception):
    """Top level :exc:`HttpProtocolException` exception class.

    Raised while decoding a request header block.  ``error`` is
    one of :data:`httpSocketErrors` and is what
    :class:`~httpsocket.http.HttpSocket` latches when it catches
    the exception.  Never raised across the transport boundary.
    """

    error: int = httpSocketErrors.NONE

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or ERROR_STRINGS.get(self.error) or 'Reason unknown')


class HttpSocketPreconditionWarning(UserWarning):
    """Request data read before headers were parsed, or response
    configured after the preamble was already written.

    The call still completes using current state."""
