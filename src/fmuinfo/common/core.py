#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (C) 2010-2025 Modelon AB
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
Module containing host platform helpers.
"""

import platform as plat
import sys

# FMI 3 architecture names for the values of platform.machine()
_FMI3_ARCHITECTURES = {
    'x86_64': 'x86_64',
    'amd64': 'x86_64',
    'i386': 'x86',
    'i686': 'x86',
    'x86': 'x86',
    'aarch64': 'aarch64',
    'arm64': 'aarch64',
    'aarch32': 'aarch32',
    'armv7l': 'aarch32',
}

def get_platform_dir():
    """
    Get the platform specific name of binaries directory for FMI 2.0 FMUs.

    Returns::

        The name of the binaries directory. Possible values are:
            - win32
            - win64
            - darwin32
            - darwin64
            - linux32
            - linux64
    """
    #Detect platform
    if sys.platform == 'win32':
        platform = 'win'
    elif sys.platform == 'darwin':
        platform = 'darwin'
    else:
        platform = 'linux'

    if plat.architecture()[0].startswith('32'):
        platform += '32'
    else:
        platform += '64'

    return platform

def get_platform_tuple():
    """
    Get the platform tuple naming the binaries directory for FMI 3.0 FMUs,
    e.g. 'x86_64-linux', 'aarch64-darwin' or 'x86_64-windows'.

    Returns::

        The platform tuple as string. An unknown machine name is used
        as is (lower case).
    """
    if sys.platform == 'win32':
        system = 'windows'
    elif sys.platform == 'darwin':
        system = 'darwin'
    else:
        system = 'linux'

    machine = plat.machine().lower()
    arch = _FMI3_ARCHITECTURES.get(machine, machine)
    # 32-bit interpreter on a 64-bit machine
    if arch == 'x86_64' and plat.architecture()[0].startswith('32'):
        arch = 'x86'

    return arch + '-' + system
