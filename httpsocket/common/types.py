# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import ipaddress
from typing import Any, Callable, Dict, List, Tuple, Union


Selectable = int
Selectables = List[Selectable]
SelectableEvents = Dict[Selectable, int]    # Values are event masks
Readables = Selectables
Writables = Selectables
IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
TcpSocket = socket.socket
HostPort = Tuple[str, int]

# Callbacks registered against an HttpSocket event
EventCallback = Callable[..., Any]
