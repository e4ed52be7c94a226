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

"""Interface to bounce detection components."""

__all__ = [
    'IBounceDetector',
    'IDeliveryStatus',
    'IScanResult',
    ]


from zope.interface import Attribute, Interface



class IDeliveryStatus(Interface):
    """The delivery status of a single recipient found in a bounce."""

    recipient = Attribute(
        """The bare email address the bounce is about.""")

    diagnosis = Attribute(
        """Short human readable text explaining the bounce.""")

    reason = Attribute(
        """The bounce reason, e.g. 'vacation'.""")

    agent = Attribute(
        """The name of the detector or MTA which produced this status.""")

    date = Attribute(
        """The verbatim Date header of the bounce, or None.""")

    status = Attribute(
        """The SMTP enhanced status code, or the empty string.""")



class IScanResult(Interface):
    """What a bounce detector returns when it recognizes a message."""

    ds = Attribute(
        """The sequence of `IDeliveryStatus` records found.""")

    rfc822 = Attribute(
        """The text of the original message embedded in the bounce.

        This is the empty string when the detector does not extract it.
        """)



class IBounceDetector(Interface):
    """Detect a bounce in an email message."""

    description = Attribute(
        """A human readable description of this detector.""")

    smtpagent = Attribute(
        """The agent name recorded in the delivery status records.""")

    headerlist = Attribute(
        """The names of the headers this detector is keyed on.

        The dispatcher uses these for logging and routing.  They are not
        necessarily all the headers the detector reads.
        """)

    def scan(headers, body):
        """Scan a parsed message for a bounce.

        :param headers: The message headers, keyed on lower cased header
            names.  Values are strings, except for repeating headers such as
            Received, which are lists of strings.
        :type headers: mapping
        :param body: The text of the message body.
        :type body: string
        :return: The scan result, or None if the message was not recognized.
        :rtype: `IScanResult` or None
        """
