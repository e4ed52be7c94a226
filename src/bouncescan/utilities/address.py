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

"""Email address helpers."""

__all__ = [
    'canonical_address',
    'is_usable',
    ]


import re

from email.utils import getaddresses


EMPTYSTRING = ''

# Last resort for header values the email package cannot make sense of.
_bare_address = re.compile(r'(?P<addr>[^\s<>"(),;:]+@[^\s<>"(),;:]+)')



def is_usable(address):
    """Is the address good enough to report a bounce against?

    :param address: A bare email address.
    :type address: string
    :return: True when the address has both a local part and a domain.
    :rtype: bool
    """
    if not address:
        return False
    local, at, domain = address.rpartition('@')
    return bool(at and local and domain)


def canonical_address(value):
    """Return the bare mailbox of a raw address header value.

    The display name, comments and angle brackets are removed, so that
    `Anne Person <anne@example.com>`, `<anne@example.com>` and
    `anne@example.com (Anne Person)` all become `anne@example.com`.  When the
    value holds several addresses, the first usable one wins.

    :param value: The raw header value.
    :type value: string or None
    :return: The bare address, or the empty string if none could be found.
    :rtype: string
    """
    if not value:
        return EMPTYSTRING
    for realname, address in getaddresses([value]):
        address = address.strip().strip('<>')
        if is_usable(address):
            return address
    mo = _bare_address.search(value)
    if mo is None:
        return EMPTYSTRING
    return mo.group('addr').strip('.')
