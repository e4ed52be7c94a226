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

"""Various test helpers."""

__all__ = [
    'LogFileMark',
    'initialize_for_tests',
    'message_from_sample',
    'specialized_message_from_string',
    ]


import logging

from email import message_from_binary_file, message_from_string
from importlib.resources import files

from bouncescan.core import initialize
from bouncescan.core.initialize import INHIBIT_CONFIG_FILE


SAMPLES = 'bouncescan.bouncers.tests.data'



def initialize_for_tests():
    """Initialize bouncescan with the built-in default configuration.

    Any configuration file lying around on the file system is ignored, so it
    cannot break the tests.  Log output propagates so that tests can capture
    it with `assertLogs()`.
    """
    initialize.initialize_1(INHIBIT_CONFIG_FILE)
    initialize.initialize_2(propagate_logs=True)


def specialized_message_from_string(text):
    """Parse text into a message object.

    The text must be ASCII-only.
    """
    text.encode('ascii')
    return message_from_string(text)


def message_from_sample(filename):
    """Parse one of the sample messages shipped with the tests.

    :param filename: The base name of the sample file.
    :type filename: string
    :return: The parsed message.
    :rtype: `email.message.Message`
    """
    with files(SAMPLES).joinpath(filename).open('rb') as fp:
        return message_from_binary_file(fp)



class LogFileMark:
    """Remember where a log file ended, to read only what comes after."""

    def __init__(self, log_name):
        self._log = logging.getLogger(log_name)
        self._filename = self._log.handlers[0].baseFilename
        with open(self._filename) as fp:
            fp.seek(0, 2)
            self._filepos = fp.tell()

    def readline(self):
        with open(self._filename) as fp:
            fp.seek(self._filepos)
            return fp.readline()

    def read(self):
        with open(self._filename) as fp:
            fp.seek(self._filepos)
            return fp.read()
