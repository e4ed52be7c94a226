# Copyright (C) 2015-2026 by the bouncescan developers.
#
# This file is part of bouncescan.
#
# bouncescan is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# bouncescan is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# bouncescan.  If not, see <http://www.gnu.org/licenses/>.

"""Logging initialization, using Python's standard logging package."""

__all__ = [
    'initialize',
    ]


import os
import sys
import logging

from lazr.config import as_boolean, as_log_level

from bouncescan.config import config


_handlers = {}


def initialize(propagate=None):
    """Initialize all logs.

    :param propagate: Flag specifying whether logs should propagate their
        messages to the root logger.  If omitted, propagation is determined
        from the configuration files.
    :type propagate: bool or None
    """
    # First, find the root logger and configure the logging subsystem.
    # Initialize the root logger, then create a formatter for all the
    # sublogs.  The root logger should log to stderr.
    logging.basicConfig(format=config.logging.root.format,
                        datefmt=config.logging.root.datefmt,
                        level=as_log_level(config.logging.root.level),
                        stream=sys.stderr)
    for logger_config in config.logger_configs:
        sub_name = logger_config.name.split('.')[-1]
        if sub_name == 'root':
            continue
        log = logging.getLogger('bouncescan.' + sub_name)
        # Propagation to the root logger is how we get the log output on
        # stderr when the command line asks for it.
        log.propagate = (as_boolean(logger_config.propagate)
                         if propagate is None else propagate)
        log.setLevel(as_log_level(logger_config.level))
        formatter = logging.Formatter(fmt=logger_config.format,
                                      datefmt=logger_config.datefmt)
        # Replace any handler from an earlier initialization.
        old_handler = _handlers.pop(sub_name, None)
        if old_handler is not None:
            log.removeHandler(old_handler)
            old_handler.close()
        if logger_config.path:
            path = os.path.abspath(os.path.expanduser(logger_config.path))
            handler = logging.FileHandler(path, encoding='utf-8')
        elif log.propagate:
            # The root logger already writes to stderr.
            continue
        else:
            handler = logging.StreamHandler(sys.stderr)
        _handlers[sub_name] = handler
        handler.setFormatter(formatter)
        log.addHandler(handler)
