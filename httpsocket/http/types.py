# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Dict, NamedTuple


HttpSocketStates = NamedTuple(
    'HttpSocketStates', [
        ('AWAITING_HEADERS', int),
        ('BODY_STREAMING', int),
    ],
)
httpSocketStates = HttpSocketStates(1, 2)

# Errors are latched, first one wins.
HttpSocketErrors = NamedTuple(
    'HttpSocketErrors', [
        ('NONE', int),
        ('MALFORMED_REQUEST_LINE', int),
        ('MALFORMED_REQUEST_HEADER', int),
        ('INVALID_HTTP_VERSION', int),
        ('INCOMPLETE_HEADER', int),
    ],
)
httpSocketErrors = HttpSocketErrors(0, 1, 2, 3, 4)

ERROR_STRINGS: Dict[int, str] = {
    httpSocketErrors.NONE: '',
    httpSocketErrors.MALFORMED_REQUEST_LINE: 'Malformed request line',
    httpSocketErrors.MALFORMED_REQUEST_HEADER: 'Malformed request header',
    httpSocketErrors.INVALID_HTTP_VERSION: 'Invalid HTTP version',
    httpSocketErrors.INCOMPLETE_HEADER: 'Incomplete header received',
}

# Events an HttpSocket dispatches to its subscribers.
#
# REQUEST_HEADERS_PARSED and ERROR_CHANGED fire at most once,
# READY_READ and BYTES_WRITTEN fire repeatedly.
HttpSocketEvents = NamedTuple(
    'HttpSocketEvents', [
        ('REQUEST_HEADERS_PARSED', int),
        ('READY_READ', int),
        ('ERROR_CHANGED', int),
        ('BYTES_WRITTEN', int),
    ],
)
httpSocketEvents = HttpSocketEvents(1, 2, 3, 4)
