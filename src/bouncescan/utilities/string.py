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

"""String utilities."""

__all__ = [
    'oneline',
    'sweep',
    ]


import re

from email.errors import HeaderParseError
from email.header import decode_header, make_header


EMPTYSTRING = ''
SPACE = ' '

# A MIME boundary glued onto the end of the text when the body was not split
# into its parts, e.g. "... back on Monday. --=_Part_1234".  Only a single
# boundary-shaped token is cut, so prose such as "--call the desk" is kept.
_boundary_tail = re.compile(r' -{2,}[=_A-Za-z0-9.][-=_A-Za-z0-9.]*\Z')



def sweep(text):
    """Collapse the whitespace in a string of free text.

    Runs of whitespace, including line breaks and tabs, become a single
    space and leading and trailing whitespace is removed.  A trailing MIME
    boundary marker is cut off too.

    :param text: The text to clean up.
    :type text: string or None
    :return: The swept text, which is the empty string for None.
    :rtype: string
    """
    if text is None:
        return EMPTYSTRING
    swept = SPACE.join(text.split())
    return _boundary_tail.sub(EMPTYSTRING, swept)



def oneline(s):
    """Decode a header string into one line of text.

    :param s: The raw header string, possibly RFC 2047 encoded.
    :type s: string
    :return: The decoded header string.  If an error occurs while decoding
        the input string, return the string undecoded, joined onto one line.
    :rtype: string
    """
    try:
        h = make_header(decode_header(s))
        return EMPTYSTRING.join(str(h).splitlines())
    except (LookupError, UnicodeError, ValueError, HeaderParseError):
        # Possibly a charset problem.  Return the undecoded string.
        return EMPTYSTRING.join(s.splitlines())
