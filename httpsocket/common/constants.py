# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import ipaddress

from .version import __version__


CRLF = b'\r\n'
COLON = b':'
WHITESPACE = b' '
HTTP_PROTO = b'http'
SLASH = b'/'
HTTP_1_0 = HTTP_PROTO.upper() + SLASH + b'1.0'
HTTP_1_1 = HTTP_PROTO.upper() + SLASH + b'1.1'
# Two successive CRLF sequences mark the end of a header block
HEADER_BLOCK_TERMINATOR = CRLF + CRLF

SUPPORTED_HTTP_VERSIONS = (HTTP_1_0, HTTP_1_1)

# Responses are always emitted as HTTP/1.0, connection
# is closed once the body has been written.
RESPONSE_HTTP_VERSION = HTTP_1_0

SERVER_HEADER_KEY = b'Server'
SERVER_HEADER_VALUE = b'httpsocket v' + \
    __version__.encode('utf-8', 'strict')

# Defaults
DEFAULT_BACKLOG = 100
DEFAULT_MAX_SEND_SIZE = 64 * 1024
DEFAULT_BUFFER_SIZE = 128 * 1024
DEFAULT_CLIENT_RECVBUF_SIZE = DEFAULT_BUFFER_SIZE
DEFAULT_MAX_HEADER_SIZE = 64 * 1024
DEFAULT_RESPONSE_STATUS_CODE = b'200 OK'
DEFAULT_IPV4_HOSTNAME = ipaddress.IPv4Address('127.0.0.1')
DEFAULT_IPV6_HOSTNAME = ipaddress.IPv6Address('::1')
DEFAULT_PORT = 8080
DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_VERSION = False
# 25 milliseconds to keep the loop hot
DEFAULT_SELECTOR_SELECT_TIMEOUT = 25 / 1000
