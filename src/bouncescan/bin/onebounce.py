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

"""Test bounce detection on message files."""

__all__ = [
    'main',
    ]


import os
import sys
import argparse

from email import message_from_binary_file
from zope.component import getUtility

from bouncescan.app.bounces import message_body, message_headers, scan_headers
from bouncescan.app.finder import find_components
from bouncescan.config import config
from bouncescan.core.errors import BounceScanError
from bouncescan.core.initialize import initialize_1, initialize_2
from bouncescan.interfaces.bounce import IBounceDetector
from bouncescan.version import BOUNCESCAN_VERSION_FULL


# The package holding the detectors shipped with bouncescan.
BOUNCERS = 'bouncescan.bouncers'

VERBOSE_LOGGING = """\
[logging.root]
level: debug

[logging.bounces]
level: debug
"""



def print_detector(name, detector, fp, enabled=True):
    print('{0} [{1}] {2}{3}'.format(
        name, detector.smtpagent, detector.description,
        ('' if enabled else ' (disabled)')), file=fp)


def print_status(status, fp):
    print('    agent:     {0}'.format(status.agent), file=fp)
    print('    reason:    {0}'.format(status.reason), file=fp)
    print('    recipient: {0}'.format(status.recipient), file=fp)
    print('    date:      {0}'.format(status.date or 'n/a'), file=fp)
    print('    diagnosis: {0}'.format(status.diagnosis), file=fp)


def process_file(filename, detectors, stop_early, fp):
    """Run the detectors over one message file.

    :return: True if any detector recognized the message.
    """
    with open(filename, 'rb') as message_file:
        msg = message_from_binary_file(message_file)
    headers = message_headers(msg)
    body = message_body(msg)
    print('{0}:'.format(filename), file=fp)
    found = False
    for name in detectors:
        result = scan_headers(headers, body, [name])
        if result is None:
            continue
        found = True
        for status in result.ds:
            print_status(status, fp)
        if stop_early:
            break
    if not found:
        print('    No bounce detected', file=fp)
    return found



def main(argv=None, fp=None):
    """bin/onebounce"""
    if fp is None:
        fp = sys.stdout
    parser = argparse.ArgumentParser(
        description="""\
        Test the bounce detection for message files.""")
    parser.add_argument(
        '--version',
        action='version', version=BOUNCESCAN_VERSION_FULL,
        help='Print this version string and exit')
    parser.add_argument(
        '-C', '--config',
        help="""\
        Configuration file to use.  If not given, the environment variable
        BOUNCESCAN_CONFIG_FILE is consulted and used if set.  If neither are
        given, a default configuration file is loaded.""")
    parser.add_argument(
        '-a', '--all',
        default=False, action='store_true',
        help="""\
        Run the message through all the configured bounce detectors.
        Normally this script stops at the first match.""")
    parser.add_argument(
        '-d', '--detector',
        help="""\
        Run the message through just the named bounce detector.""")
    parser.add_argument(
        '-l', '--list',
        default=False, action='store_true',
        help="""\
        List the configured bounce detectors, then the shipped ones the
        configuration leaves out, and exit.""")
    parser.add_argument(
        '-v', '--verbose',
        default=False, action='store_true',
        help='Log every detection attempt to standard error.')
    parser.add_argument(
        'files', nargs='*', metavar='FILE',
        help='The message files to test.')
    args = parser.parse_args(argv)
    config_path = None
    if args.config is not None:
        config_path = os.path.abspath(os.path.expanduser(args.config))
    try:
        initialize_1(config_path)
        if args.verbose:
            config.push('verbose', VERBOSE_LOGGING)
        initialize_2(propagate_logs=(True if args.verbose else None))
    except (BounceScanError, OSError) as error:
        parser.error(str(error))
    if args.list:
        for name in config.detectors:
            print_detector(name, getUtility(IBounceDetector, name), fp)
        # Then the shipped detectors the configuration leaves out.
        for component in find_components(BOUNCERS, IBounceDetector):
            name = '{0}.{1}'.format(component.__module__, component.__name__)
            if name not in config.detectors:
                print_detector(name, component, fp, enabled=False)
        return 0
    if args.detector is not None:
        if args.detector not in config.detectors:
            parser.error('No such bounce detector: {0}'.format(args.detector))
        detectors = [args.detector]
    else:
        detectors = config.detectors
    if len(args.files) == 0:
        parser.error('No message files given')
    status = 0
    for filename in args.files:
        try:
            found = process_file(filename, detectors, not args.all, fp)
        except OSError as error:
            print('{0}: {1}'.format(filename, error.strerror), file=sys.stderr)
            return 2
        if not found:
            status = 1
    return status
