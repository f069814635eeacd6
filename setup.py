#!/usr/bin/env python3
#
# DiveSync - dive decompression library.
#
# Copyright (C) 2026 by DiveSync developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import re

from setuptools import setup, find_packages

# read version without importing the package and its dependencies
with open('divesync/__init__.py') as f:
    VERSION = re.search(r"__version__ = '(.+)'", f.read()).group(1)

setup(
    name='divesync',
    version=VERSION,
    description='DiveSync - dive decompression library',
    packages=find_packages('.'),
    scripts=('bin/divesync',),
    include_package_data=True,
    long_description=\
"""\
DiveSync is Python dive decompression library to model inert gas uptake
and elimination in tissue compartments of Buhlmann ZH-L16 decompression
model (variants A, B and C) over multi-level dive profiles.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
    ],
    keywords='diving dive decompression',
    license='GPL',
    python_requires='>=3.6',
    install_requires=['matplotlib'],
    extras_require={'test': ['pytest']},
)

# vim: sw=4:et:ai
