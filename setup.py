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

import re
import sys

from setuptools import setup, find_packages
from string import Template

if sys.hexversion < 0x30900f0:
    print('bouncescan requires at least Python 3.9')
    sys.exit(1)


# Calculate the version number without importing the bouncescan package.
with open('src/bouncescan/version.py') as fp:
    for line in fp:
        mo = re.match("VERSION = '(?P<version>[^']+?)'", line)
        if mo:
            __version__ = mo.group('version')
            break
    else:
        print('No version number found')
        sys.exit(1)



template = Template('$script = bouncescan.bin.$script:main')
scripts = set(
    template.substitute(script=script)
    for script in ('onebounce',)
    )



setup(
    name            = 'bouncescan',
    version         = __version__,
    description     = 'bouncescan -- bounce and automatic reply detection',
    long_description= """\
bouncescan recognizes bounces in email messages returned to a mailing list or
bulk sender.  It ships a detector for RFC 3834 automatic replies, such as
vacation and out of office messages, which reports the address of the person
who is away and a short excerpt of their reply.""",
    author          = 'The bouncescan Developers',
    license         = 'GPLv3',
    keywords        = 'email bounce',
    packages        = find_packages('src'),
    package_dir     = {'': 'src'},
    package_data    = {
        'bouncescan.config': ['*.cfg'],
        'bouncescan.bouncers.tests.data': ['*.txt'],
        },
    python_requires = '>=3.9',
    entry_points    = {
        'console_scripts' : list(scripts),
        },
    install_requires = [
        'lazr.config',
        'zope.component',
        'zope.interface',
        ],
    extras_require  = {
        'test': [
            'pytest',
            'zope.testrunner',
            ],
        },
    )
