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

"""Test the system-wide global configuration."""

__all__ = [
    'TestConfiguration',
    ]


import os
import tempfile
import unittest

from bouncescan.config.config import Configuration



class TestConfiguration(unittest.TestCase):
    def setUp(self):
        self._config = Configuration()

    def test_not_loaded(self):
        self.assertFalse(self._config.is_loaded)
        with self.assertRaises(AttributeError):
            self._config.bouncescan

    def test_defaults(self):
        self._config.load()
        self.assertTrue(self._config.is_loaded)
        self.assertIsNone(self._config.filename)
        self.assertEqual(self._config.detectors,
                         ['bouncescan.bouncers.rfc3834.RFC3834'])
        self.assertEqual(self._config.logging.root.level, 'warning')
        self.assertEqual(self._config.logging.bounces.level, 'info')
        self.assertEqual(self._config.logging.bounces.path, '')

    def test_logger_configs(self):
        self._config.load()
        names = sorted(section.name
                       for section in self._config.logger_configs)
        self.assertEqual(names, ['logging.bounces', 'logging.config',
                                 'logging.root'])

    def test_push_and_pop(self):
        self._config.load()
        self._config.push('test', """\
[bouncescan]
detectors:
    example.Specific
    bouncescan.bouncers.rfc3834.RFC3834
""")
        self.assertEqual(self._config.detectors,
                         ['example.Specific',
                          'bouncescan.bouncers.rfc3834.RFC3834'])
        self._config.pop('test')
        self.assertEqual(self._config.detectors,
                         ['bouncescan.bouncers.rfc3834.RFC3834'])

    def test_user_configuration_file(self):
        fd, filename = tempfile.mkstemp(suffix='.cfg')
        self.addCleanup(os.remove, filename)
        with os.fdopen(fd, 'w') as fp:
            print("""\
[logging.bounces]
level: debug
""", file=fp)
        self._config.load(filename)
        self.assertEqual(self._config.filename, filename)
        self.assertEqual(self._config.logging.bounces.level, 'debug')
