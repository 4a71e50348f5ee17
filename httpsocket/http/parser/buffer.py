# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from ...common.constants import HEADER_BLOCK_TERMINATOR


class ReceiveBuffer:
    """Append only byte accumulator, consumed from the head.

    Bytes handed out by :meth:`consume` are removed at the same
    time, so nothing is ever delivered twice."""

    def __init__(self) -> None:
        self._data = bytearray()
        # Offset from where next terminator search must begin.
        # Bytes before it are known not to start a terminator.
        self._scan_offset = 0

    def __len__(self) -> int:
        return len(self._data)

    def append(self, data: bytes) -> None:
        self._data += data

    def consume(self, n: int) -> bytes:
        if n < 0 or n > len(self._data):
            raise ValueError(
                'Cannot consume %d bytes, only %d buffered' % (n, len(self._data)),
            )
        chunk = bytes(self._data[:n])
        del self._data[:n]
        self._scan_offset = max(0, self._scan_offset - n)
        return chunk

    def find_terminator(self) -> int:
        """Returns offset of first CRLFCRLF or -1 if not found."""
        index = self._data.find(HEADER_BLOCK_TERMINATOR, self._scan_offset)
        if index == -1:
            # Terminator may straddle the next append
            self._scan_offset = max(
                0, len(self._data) - len(HEADER_BLOCK_TERMINATOR) + 1,
            )
        return index

    def peek(self) -> bytes:
        return bytes(self._data)
