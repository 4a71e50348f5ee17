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
from typing import Any, Dict, Optional

from .constants import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


SINGLE_CHAR_TO_LEVEL = {
    'D': 'DEBUG',
    'I': 'INFO',
    'W': 'WARNING',
    'E': 'ERROR',
    'C': 'CRITICAL',
}


def single_char_to_level(char: str) -> int:
    """Resolves ``d``, ``debug``, ``DEBUG`` etc into a logging level."""
    try:
        level: int = getattr(logging, SINGLE_CHAR_TO_LEVEL[char.upper()[0]])
    except (IndexError, KeyError):
        raise ValueError('Invalid log level %r' % char)
    return level


class Logger:
    """Common logging utilities and setup."""

    @staticmethod
    def setup(
            log_file: Optional[str] = DEFAULT_LOG_FILE,
            log_level: str = DEFAULT_LOG_LEVEL,
            log_format: str = DEFAULT_LOG_FORMAT,
    ) -> None:
        kwargs: Dict[str, Any] = {
            'level': single_char_to_level(log_level),
            'format': log_format,
        }
        if log_file:    # pragma: no cover
            kwargs['filename'] = log_file
            kwargs['filemode'] = 'a'
        logging.basicConfig(**kwargs)
