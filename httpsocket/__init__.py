# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .main import main, entry_point
from .http import (
    HttpSocket, HttpSocketHandler, HttpSocketServer,
    httpSocketErrors, httpSocketEvents, httpSocketStates,
)
from .common.version import __version__


__all__ = [
    # PyPi package entry_point.
    'entry_point',
    # Embed httpsocket server.
    'main',
    'HttpSocket',
    'HttpSocketHandler',
    'HttpSocketServer',
    'httpSocketErrors',
    'httpSocketEvents',
    'httpSocketStates',
    '__version__',
]
