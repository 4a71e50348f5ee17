# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import socket
import argparse
import ipaddress

from typing import Optional, List, Any, cast

from .types import IpAddress
from .logger import Logger
from .plugins import Plugins

from .version import __version__


class FlagParser:
    """Wrapper around argparse module.

    Import `flag.flags` and use `add_argument` API
    to define custom flags within respective Python files.

    Define flags at the top of your modules.  Registering the
    same flag twice raises :exc:`argparse.ArgumentError`.
    """

    def __init__(self) -> None:
        self.args: Optional[argparse.Namespace] = None
        self.actions: List[str] = []
        self.parser = argparse.ArgumentParser(
            description='httpsocket v%s' % __version__,
            epilog='httpsocket not working? Re-run with --log-level d for details.',
        )

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register a flag."""
        action = self.parser.add_argument(*args, **kwargs)
        self.actions.append(action.dest)
        return action

    def parse_args(
            self, input_args: Optional[List[str]],
    ) -> argparse.Namespace:
        """Parse flags from input arguments."""
        self.args = self.parser.parse_args(input_args)
        return self.args

    @staticmethod
    def initialize(
        input_args: Optional[List[str]] = None,
        **opts: Any,
    ) -> argparse.Namespace:
        """Parses flags and resolves their final values.

        Keyword ``opts`` take precedence over parsed input arguments,
        which makes embedding and testing possible without building
        a command line."""
        if input_args is None:
            input_args = []

        args = flags.parse_args(input_args)

        # Print version and exit
        if args.version:
            print(__version__)
            sys.exit(0)

        # Setup logging module
        Logger.setup(
            opts.get('log_file', args.log_file),
            opts.get('log_level', args.log_level),
            opts.get('log_format', args.log_format),
        )

        handler_klass = opts.get('handler_klass', args.handler_klass)
        args.handler_klass = Plugins.importer(handler_klass)[0]

        args.hostname = cast(
            IpAddress,
            opts.get('hostname', ipaddress.ip_address(args.hostname)),
        )
        args.family = socket.AF_INET6 if args.hostname.version == 6 else socket.AF_INET
        args.port = cast(int, opts.get('port', args.port))
        args.backlog = cast(int, opts.get('backlog', args.backlog))
        args.max_header_size = cast(
            int,
            opts.get(
                'max_header_size',
                args.max_header_size,
            ),
        )
        args.client_recvbuf_size = cast(
            int,
            opts.get(
                'client_recvbuf_size',
                args.client_recvbuf_size,
            ),
        )
        args.max_sendbuf_size = cast(
            int,
            opts.get(
                'max_sendbuf_size',
                args.max_sendbuf_size,
            ),
        )
        return args


flags = FlagParser()
