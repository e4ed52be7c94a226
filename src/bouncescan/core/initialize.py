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

"""Initialize all global state.

Every entrance into bouncescan, be it by the command line or by a program
embedding it, must call the initialize function here in order for the global
state to be set up properly.
"""

__all__ = [
    'INHIBIT_CONFIG_FILE',
    'initialize',
    'initialize_1',
    'initialize_2',
    'register_detectors',
    'search_for_configuration_file',
    ]


import os
import logging

from zope.component import getGlobalSiteManager
from zope.interface.verify import verifyObject
from zope.interface.exceptions import Invalid

import bouncescan.core.logging

from bouncescan.config import config
from bouncescan.core.errors import DetectorNotFoundError
from bouncescan.interfaces.bounce import IBounceDetector
from bouncescan.utilities.modules import find_name


# The test infrastructure uses this to prevent the search and loading of any
# existing configuration file.  Otherwise the existence of say a
# ~/.bouncescan.cfg file can break tests.
INHIBIT_CONFIG_FILE = object()

log = logging.getLogger('bouncescan.config')



def search_for_configuration_file():
    """Search the file system for a configuration file to use.

    This is only called if the -C command line argument was not given.
    """
    config_path = os.getenv('BOUNCESCAN_CONFIG_FILE')
    # Both None and the empty string are considered "missing".
    if config_path and os.path.exists(config_path):
        return os.path.abspath(config_path)
    # ./bouncescan.cfg
    config_path = os.path.abspath('bouncescan.cfg')
    if os.path.exists(config_path):
        return config_path
    # ~/.bouncescan.cfg
    config_path = os.path.expanduser(os.path.join('~', '.bouncescan.cfg'))
    if os.path.exists(config_path):
        return os.path.abspath(config_path)
    # /etc/bouncescan.cfg
    config_path = '/etc/bouncescan.cfg'
    if os.path.exists(config_path):
        return config_path
    return None



def register_detectors(dotted_names=None):
    """Register the bounce detectors as named utilities.

    :param dotted_names: The dotted paths of the detector classes.  When not
        given, the detectors named in the configuration are registered.
    :type dotted_names: sequence of strings
    :return: The names of the registered detectors, in order.
    :rtype: list
    :raises DetectorNotFoundError: when a detector cannot be imported or does
        not provide `IBounceDetector`.
    """
    if dotted_names is None:
        dotted_names = config.detectors
    site_manager = getGlobalSiteManager()
    registered = []
    for dotted_name in dotted_names:
        try:
            detector_class = find_name(dotted_name)
        except (ImportError, AttributeError, ValueError) as error:
            raise DetectorNotFoundError(dotted_name, error) from error
        detector = detector_class()
        try:
            verifyObject(IBounceDetector, detector)
        except Invalid as error:
            raise DetectorNotFoundError(dotted_name, error) from error
        site_manager.registerUtility(detector, IBounceDetector, dotted_name)
        log.debug('Registered bounce detector: %s', dotted_name)
        registered.append(dotted_name)
    return registered



# These initialization calls are separated for the testing framework, which
# needs to push its own configuration after the config file is loaded but
# before the logs and detectors are set up.  Generally all other code will
# just call initialize().

def initialize_1(config_path=None):
    """First initialization step.

    * The configuration system

    :param config_path: The path to the configuration file.
    :type config_path: string
    """
    # config_path will be set if the command line argument -C is given.  That
    # case overrides all others.  When not given on the command line, the
    # configuration file is searched for in the file system.
    if config_path is None:
        config_path = search_for_configuration_file()
    elif config_path is INHIBIT_CONFIG_FILE:
        # For the test suite, force this back to not using a config file.
        config_path = None
    config.load(config_path)


def initialize_2(propagate_logs=None):
    """Second initialization step.

    * Logging
    * Bounce detectors

    :param propagate_logs: Should the log output propagate to stderr?
    :type propagate_logs: boolean or None
    """
    bouncescan.core.logging.initialize(propagate_logs)
    register_detectors()


def initialize(config_path=None, propagate_logs=None):
    initialize_1(config_path)
    initialize_2(propagate_logs=propagate_logs)
