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

"""Application level bounce detection."""

__all__ = [
    'message_body',
    'message_headers',
    'scan_headers',
    'scan_message',
    ]


import logging

from email.iterators import typed_subpart_iterator
from zope.component import getUtility

from bouncescan.config import config
from bouncescan.interfaces.bounce import IBounceDetector
from bouncescan.utilities.string import oneline


blog = logging.getLogger('bouncescan.bounces')

EMPTYSTRING = ''
NL = '\n'

# Headers which may occur more than once and whose every value matters.
REPEATING_HEADERS = ('received',)



def message_headers(msg):
    """Return the headers of a message as a header map.

    :param msg: The message.
    :type msg: `email.message.Message`
    :return: The headers keyed on their lower cased names.  The values of
        repeating headers such as Received are lists of strings, in message
        order.  All other values are the first occurrence, decoded into a
        single line.
    :rtype: dict
    """
    headers = {}
    for name, value in msg.items():
        key = name.lower()
        value = oneline(str(value))
        if key in REPEATING_HEADERS:
            headers.setdefault(key, []).append(value)
        elif key not in headers:
            headers[key] = value
    return headers


def _part_text(part):
    payload = part.get_payload(decode=True)
    if payload is None:
        return EMPTYSTRING
    charset = part.get_content_charset('us-ascii')
    try:
        text = payload.decode(charset, 'replace')
    except LookupError:
        # Unknown character set.
        text = payload.decode('us-ascii', 'replace')
    return NL.join(text.splitlines())


def message_body(msg):
    """Return the text of a message body.

    For multipart messages this is the first text/plain part, or failing that
    the first text part of any kind.

    :param msg: The message.
    :type msg: `email.message.Message`
    :return: The decoded text with `\\n` line endings, or the empty string if
        the message has no text.
    :rtype: string
    """
    if not msg.is_multipart():
        if msg.get_content_maintype() != 'text':
            return EMPTYSTRING
        return _part_text(msg)
    for subtype in ('plain', None):
        for part in typed_subpart_iterator(msg, 'text', subtype):
            return _part_text(part)
    return EMPTYSTRING



def scan_headers(headers, body, detectors=None):
    """Run the bounce detectors over a parsed message.

    :param headers: The message headers, keyed on lower cased names.
    :type headers: mapping
    :param body: The message body text.
    :type body: string
    :param detectors: The names of the registered detectors to try, in
        order.  The configured detectors are used by default.
    :type detectors: sequence of strings
    :return: The result of the first detector to recognize the message, or
        None if none of them did.
    :rtype: `IScanResult` or None
    """
    if detectors is None:
        detectors = config.detectors
    message_id = headers.get('message-id', 'n/a')
    for name in detectors:
        detector = getUtility(IBounceDetector, name)
        blog.debug('%s: trying %s (%s)', message_id, name,
                   ', '.join(detector.headerlist))
        result = detector.scan(headers, body)
        if result is not None:
            for status in result.ds:
                blog.info('%s: %s detected %s bounce from %s',
                          message_id, detector.smtpagent, status.reason,
                          status.recipient)
            return result
    blog.debug('%s: no bounce detected', message_id)
    return None


def scan_message(msg, detectors=None):
    """Run the bounce detectors over a message.

    :param msg: The message.
    :type msg: `email.message.Message`
    :param detectors: See `scan_headers()`.
    :return: See `scan_headers()`.
    """
    return scan_headers(message_headers(msg), message_body(msg), detectors)
