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

"""Configuration file loading and management."""

__all__ = [
    'Configuration',
    'IConfiguration',
    ]


from importlib.resources import as_file, files

from lazr.config import ConfigSchema
from zope.interface import Interface, implementer



class IConfiguration(Interface):
    """Marker interface for the global configuration object."""



@implementer(IConfiguration)
class Configuration:
    """The core global configuration object."""

    def __init__(self):
        self._config = None
        self.filename = None

    def __getattr__(self, name):
        """Delegate to the configuration object."""
        if name.startswith('_'):
            raise AttributeError(name)
        if self._config is None:
            raise AttributeError(
                'Configuration is not loaded: {0}'.format(name))
        return getattr(self._config, name)

    @property
    def is_loaded(self):
        return self._config is not None

    def load(self, filename=None):
        """Load the configuration from the schema and config files."""
        resources = files('bouncescan.config')
        with as_file(resources / 'schema.cfg') as schema_path:
            schema = ConfigSchema(str(schema_path))
        # First, load the absolute minimum default configuration, then if a
        # configuration filename was given by the user, push it.
        with as_file(resources / 'bouncescan.cfg') as config_path:
            self._config = schema.load(str(config_path))
        if filename is not None:
            self.filename = filename
            with open(filename, encoding='utf-8') as user_config:
                self._config.push(filename, user_config.read())

    def push(self, config_name, config_string):
        """Push a new configuration onto the stack."""
        self._config.push(config_name, config_string)

    def pop(self, config_name):
        """Pop a configuration from the stack."""
        self._config.pop(config_name)

    @property
    def detectors(self):
        """The dotted names of the configured bounce detectors, in order."""
        return self._config.bouncescan.detectors.split()

    @property
    def logger_configs(self):
        """Return all log config sections."""
        return self._config.getByCategory('logging', [])
