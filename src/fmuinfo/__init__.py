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
FMUInfo, a package for inspecting Functional Mock-up Units (FMUs) without
loading them: model description contents, platforms and archive entries.
"""

__all__ = ['archive', 'common', 'definitions', 'exceptions', 'extraction',
           'model', 'parser', 'platforms', 'structure']

__version__ = "1.0.0"

from fmuinfo.extraction import extract, extract_many, extract_options, ExtractOptions
from fmuinfo.parser import parse_model_description
from fmuinfo.model import ParseResult
from fmuinfo.exceptions import (
    FMUException,
    ArchiveError,
    MissingDescriptorError,
    DescriptorSyntaxError,
)
