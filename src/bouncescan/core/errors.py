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

"""bouncescan exceptions.

Failing to recognize a bounce is never an error; detectors return None for
that.  These exceptions are for misconfiguration and bad input files.
"""

__all__ = [
    'BounceScanError',
    'DetectorNotFoundError',
    ]



class BounceScanError(Exception):
    """Base class for all bouncescan errors."""


class DetectorNotFoundError(BounceScanError):
    """The named bounce detector does not exist."""

    def __init__(self, name, reason=None):
        super().__init__(name)
        self.name = name
        self.reason = reason

    def __str__(self):
        if self.reason is None:
            return 'No such bounce detector: {0}'.format(self.name)
        return 'Bad bounce detector: {0} ({1})'.format(self.name, self.reason)
