#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (C) 2025 Modelon AB
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.
"""
Detection of the platforms an FMU ships binaries for.
"""

BINARIES_DIR = 'binaries/'

def detect_platforms(entries, binaries_dir = BINARIES_DIR):
    """
    Collect the platform identifiers from the archive entry names.

    The platform identifier is the first path segment after binaries_dir,
    e.g. 'linux64' (FMI 2.0) or 'x86_64-linux' (FMI 3.0).

    Parameters::

        entries --
            Iterable of archive entry names.

        binaries_dir --
            Prefix of the binaries directory, including the trailing '/'.
            Default: 'binaries/'

    Returns::

        Sorted tuple of unique platform identifiers, empty if the FMU has
        no binaries.
    """
    platforms = set()
    for entry in entries:
        if not entry.startswith(binaries_dir):
            continue
        platform = entry[len(binaries_dir):].split('/', 1)[0]
        if platform:
            platforms.add(platform)
    return tuple(sorted(platforms))
