# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .client import TcpClientConnection
from .connection import TcpConnection, TcpConnectionUninitializedException


__all__ = [
    'TcpConnection',
    'TcpConnectionUninitializedException',
    'TcpClientConnection',
]
