# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .base import HttpProtocolException, HttpSocketPreconditionWarning
from .request import (
    IncompleteHeader, InvalidHttpVersion,
    MalformedRequestHeader, MalformedRequestLine,
)


__all__ = [
    'HttpProtocolException',
    'HttpSocketPreconditionWarning',
    'MalformedRequestLine',
    'MalformedRequestHeader',
    'InvalidHttpVersion',
    'IncompleteHeader',
]
