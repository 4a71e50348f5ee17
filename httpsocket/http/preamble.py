# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging
from typing import Callable, Dict, Tuple, Union

from ..common.utils import bytes_, build_http_preamble
from ..common.constants import DEFAULT_RESPONSE_STATUS_CODE


logger = logging.getLogger(__name__)


class ResponsePreamble:
    """Status line and headers of the response, written exactly once."""

    def __init__(self) -> None:
        self.status_code: bytes = DEFAULT_RESPONSE_STATUS_CODE
        # Internal headers data structure:
        # - Keys are lower case header names.
        # - Values are 2-tuple containing original
        #   header name and its value.
        self._headers: Dict[bytes, Tuple[bytes, bytes]] = {}
        self.written: bool = False

    @property
    def headers(self) -> Dict[bytes, bytes]:
        """Headers keyed by their original name, in insertion order."""
        return {k: v for k, v in self._headers.values()}

    def header(self, key: Union[str, bytes], default: bytes = b'') -> bytes:
        k = bytes_(key).lower()
        return self._headers[k][1] if k in self._headers else default

    def set_header(self, key: Union[str, bytes], value: Union[str, bytes, int]) -> None:
        key = bytes_(key)
        self._headers[key.lower()] = (key, bytes_(value))

    def build(self) -> bytes:
        return build_http_preamble(self.status_code, self.headers)

    def write_once(self, write: Callable[[bytes], int]) -> bool:
        """Hands serialized preamble to ``write`` unless already done.

        Returns True only for the call that actually wrote."""
        if self.written:
            return False
        self.written = True
        preamble = self.build()
        logger.debug('Writing %d bytes response preamble', len(preamble))
        write(preamble)
        return True
