# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
__version__ = '0.1.0'
