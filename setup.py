#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (C) 2014-2025 Modelon AB
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

from setuptools import setup

NAME = "FMUInfo"
AUTHOR = "Modelon AB"
AUTHOR_EMAIL = ""
VERSION = "1.0.0"
LICENSE = "LGPL"
DESCRIPTION = "A package for inspecting the metadata of Functional Mock-Up Units without loading them."
PLATFORMS = ["Linux", "Windows", "MacOS X"]
CLASSIFIERS = [ 'Programming Language :: Python',
                'Programming Language :: Python :: 3',
                'Operating System :: MacOS :: MacOS X',
                'Operating System :: Microsoft :: Windows',
                'Operating System :: Unix']

LONG_DESCRIPTION = """
FMUInfo reads the metadata of Functional Mock-Up Units (FMUs), which are
compiled dynamic models compliant with the Functional Mock-Up Interface (FMI),
see https://www.fmi-standard.org/ for more information.

The modelDescription.xml of FMI 2.0 and FMI 3.0 FMUs is parsed in a single
streaming pass into an immutable description of the model: model attributes,
Model Exchange / Co-Simulation / Scheduled Execution capabilities, variables,
type and unit definitions, the default experiment and the number of continuous
states and event indicators. The platforms an FMU ships binaries for are
detected from the archive entries. Nothing in the FMU is ever executed.

Requirements:
-------------
- `Python 3.9 or newer`_
- `lxml <https://pypi.org/project/lxml/>`_

Source Installation:
----------------------

python -m pip install .

"""

setup(name=NAME,
      version=VERSION,
      license=LICENSE,
      description=DESCRIPTION,
      long_description=LONG_DESCRIPTION,
      author=AUTHOR,
      author_email=AUTHOR_EMAIL,
      platforms=PLATFORMS,
      classifiers=CLASSIFIERS,
      python_requires=">=3.9",
      package_dir = {'': 'src'},
      packages=[
        'fmuinfo',
        'fmuinfo.common',
      ],
      install_requires=[
        'lxml',
      ],
      extras_require={
        'tests': ['pytest'],
      },
      )
