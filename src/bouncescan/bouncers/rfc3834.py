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

"""Recognize RFC 3834 automatic replies, e.g. vacation messages.

This detector is the fallback of last resort.  The dispatcher only tries it
after all the detectors which understand a specific bounce format have given
up on the message.
"""

__all__ = [
    'RFC3834',
    ]


import re

from collections.abc import Mapping
from zope.interface import implementer

from bouncescan.interfaces.bounce import IBounceDetector
from bouncescan.model.bounce import DeliveryStatus, ScanResult
from bouncescan.utilities.address import canonical_address, is_usable
from bouncescan.utilities.string import sweep


EMPTYSTRING = ''
NL = '\n'
SPACE = ' '

# The most lines of the reply to keep in the diagnosis.
MAX_DIAGNOSIS_LINES = 5



# Messages generated by the system which look like automatic replies but
# which must not be treated as such.  This is a list of tuples of the form
#
#     (header name, cre)
#
# where 'cre' means compiled regular expression.  Any one match vetoes the
# message.
EXCLUSIONS = [
    # sudo and Exim notices.
    ('subject', re.compile(r'SECURITY information for|Mail failure -')),
    ('from', re.compile(r'(?:root|postmaster|mailer-daemon)@',
                        re.IGNORECASE)),
    ('to', re.compile(r'root@')),
    ]

# The marks of an automatic reply, in the same form as above.  Any one match
# is enough.
SIGNATURES = [
    # http://www.iana.org/assignments/auto-submitted-keywords
    ('auto-submitted', re.compile(r'\Aauto-(?:generated|replied|notified)',
                                  re.IGNORECASE)),
    # Microsoft Exchange.
    ('x-auto-response-suppress', re.compile(r'OOF|AutoReply',
                                            re.IGNORECASE)),
    ('precedence', re.compile(r'\Aauto_reply\Z')),
    ('subject', re.compile(r'\A(?:Auto:|Out\s+of\s+Office:)',
                           re.IGNORECASE)),
    ]



def _header(headers, name):
    # Missing headers, and those with no usable value, are None.
    value = headers.get(name)
    return (value if isinstance(value, str) else None)


def _matches(headers, rules):
    for name, cre in rules:
        value = _header(headers, name)
        if value is None:
            continue
        if cre.search(value) is not None:
            return True
    return False


def is_excluded(headers):
    """Is this a system notice that only looks like an automatic reply?"""
    return _matches(headers, EXCLUSIONS)


def is_auto_reply(headers):
    """Does the message carry any mark of an automatic reply?"""
    return _matches(headers, SIGNATURES)


def find_recipient(headers):
    """Return the address of the person who sent the automatic reply.

    From is preferred over Return-Path.  Only the first of these headers
    present is looked at, even when its address turns out to be unusable.

    :return: The bare address, or None.
    """
    for name in ('from', 'return-path'):
        value = _header(headers, name)
        if value is None:
            continue
        address = canonical_address(value)
        return (address if is_usable(address) else None)
    return None


def excerpt(body, max_lines=MAX_DIAGNOSIS_LINES):
    """Return the first few lines of prose in a message body.

    Lines without any space in them are skipped as noise, e.g. signature
    separators or lone words.  Scanning stops at the first pair of
    consecutive blank lines, or once `max_lines` lines have been collected.

    :param body: The message body text.
    :type body: string
    :param max_lines: The most lines to collect.
    :type max_lines: int
    :return: The collected lines, each followed by a space.  This is the
        empty string if nothing was collected.
    :rtype: string
    """
    collected = []
    blank_lines = 0
    for line in body.split(NL):
        if len(line) == 0:
            blank_lines += 1
            if blank_lines > 1:
                break
            continue
        if SPACE not in line:
            continue
        collected.append(line + SPACE)
        blank_lines = 0
        if len(collected) >= max_lines:
            break
    return EMPTYSTRING.join(collected)



@implementer(IBounceDetector)
class RFC3834:
    """Recognize RFC 3834 automatic replies."""

    description = 'Detector for auto replied message'
    smtpagent = 'RFC3834'
    headerlist = (
        'Auto-Submitted',
        'Precedence',
        'X-Auto-Response-Suppress',
        )
    reason = 'vacation'

    @property
    def pattern(self):
        """The header patterns which mark an automatic reply."""
        return dict(SIGNATURES)

    def detect(self, headers, body):
        """Detect an automatic reply.

        :param headers: The message headers, keyed on lower cased names.
        :type headers: mapping
        :param body: The message body text.
        :type body: string
        :return: The delivery status of the sender of the reply, or None if
            the message is not an automatic reply.
        :rtype: `DeliveryStatus` or None
        """
        if not isinstance(headers, Mapping) or len(headers) == 0:
            return None
        if not isinstance(body, str):
            return None
        if is_excluded(headers):
            return None
        if not is_auto_reply(headers):
            return None
        recipient = find_recipient(headers)
        if recipient is None:
            return None
        # Fall back to the subject when the body has no prose in it.  The
        # diagnosis is never empty: with no subject either, it is our own
        # description.
        diagnosis = sweep(excerpt(body)) or sweep(_header(headers, 'subject'))
        return DeliveryStatus(
            recipient=recipient,
            diagnosis=(diagnosis or self.description),
            reason=self.reason,
            agent=self.smtpagent,
            date=_header(headers, 'date'),
            )

    def scan(self, headers, body):
        """See `IBounceDetector`."""
        status = self.detect(headers, body)
        if status is None:
            return None
        return ScanResult([status])
