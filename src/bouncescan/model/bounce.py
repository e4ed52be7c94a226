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

"""Bounce detection results."""

__all__ = [
    'DeliveryStatus',
    'ScanResult',
    ]


from collections import namedtuple

from zope.interface import implementer

from bouncescan.interfaces.bounce import IDeliveryStatus, IScanResult


EMPTYSTRING = ''



@implementer(IDeliveryStatus)
class DeliveryStatus(namedtuple(
        'DeliveryStatus', 'recipient diagnosis reason agent date status')):
    """The delivery status of one bouncing recipient."""

    __slots__ = ()

    def __new__(cls, recipient, diagnosis, reason, agent, date=None,
                status=EMPTYSTRING):
        return super().__new__(
            cls, recipient, diagnosis, reason, agent, date, status)



@implementer(IScanResult)
class ScanResult(namedtuple('ScanResult', 'ds rfc822')):
    """The delivery statuses found in a bounce."""

    __slots__ = ()

    def __new__(cls, ds, rfc822=EMPTYSTRING):
        return super().__new__(cls, tuple(ds), rfc822)

    @property
    def recipients(self):
        """The bouncing addresses, in the order they were found."""
        return [status.recipient for status in self.ds]
