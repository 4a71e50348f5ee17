# -*- coding: utf-8 -*-
"""
    httpsocket
    ~~~~~~~~~~
    Minimal HTTP/1.x request decoder and lazy response writer
    layered over a raw TCP stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import os
import inspect
import logging
import importlib

from types import ModuleType
from typing import List, Tuple, Union

from .utils import text_


logger = logging.getLogger(__name__)


class Plugins:
    """Resolves handler classes passed by dotted path on command line."""

    @staticmethod
    def importer(plugin: Union[bytes, str, type]) -> Tuple[type, str]:
        """Import and returns the plugin class along with its module name."""
        if isinstance(plugin, type):
            return (plugin, plugin.__module__ or '__main__')
        plugin_ = text_(plugin).strip()
        if plugin_ == '':
            raise ValueError('Empty plugin path')
        path = plugin_.split('.')
        klass = None

        def locate_klass(klass_module_name: str, klass_path: List[str]) -> Union[type, None]:
            klass_module_name = klass_module_name.replace(os.path.sep, '.')
            try:
                klass_module = importlib.import_module(klass_module_name)
            except ModuleNotFoundError:
                return None
            klass_container: Union[ModuleType, type] = klass_module
            for klass_path_part in klass_path:
                try:
                    klass_container = getattr(klass_container, klass_path_part)
                except AttributeError:
                    return None
            if not inspect.isclass(klass_container):
                return None
            return klass_container

        module_name = None
        for module_name_parts in range(len(path) - 1, 0, -1):
            module_name = '.'.join(path[0:module_name_parts])
            klass = locate_klass(module_name, path[module_name_parts:])
            if klass:
                break
        if klass is None:
            module_name = '__main__'
            klass = locate_klass(module_name, path)
        if klass is None or module_name is None:
            raise ValueError('%s is not resolvable as a plugin class' % plugin_)
        logger.debug('Loaded plugin %s.%s', module_name, klass.__name__)
        return (klass, module_name)
