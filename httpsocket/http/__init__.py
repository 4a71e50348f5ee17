# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .types import httpSocketStates, httpSocketErrors, httpSocketEvents
from .socket import HttpSocket
from .handler import HttpSocketHandler
from .server import HttpSocketServer
from .preamble import ResponsePreamble


__all__ = [
    'HttpSocket',
    'HttpSocketHandler',
    'HttpSocketServer',
    'ResponsePreamble',
    'httpSocketStates',
    'httpSocketErrors',
    'httpSocketEvents',
]
