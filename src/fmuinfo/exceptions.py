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

# This file contains the various exceptions classes used in FMUInfo

class FMUException(Exception):
    """
    An FMU exception.
    """
    pass

class InvalidFMUException(FMUException):
    """
    Exception covering problems with the inspected FMU.
    """
    pass

class ArchiveError(InvalidFMUException):
    """
    The FMU container could not be opened or is not a valid zip archive.
    """
    pass

class MissingDescriptorError(InvalidFMUException):
    """
    The FMU does not contain the model description entry.
    """
    pass

class InvalidXMLException(InvalidFMUException):
    """
    Exception covering problem with the XML-file in the inspected FMU.
    """
    pass

class DescriptorSyntaxError(InvalidXMLException):
    """
    The model description is not well-formed, or a count attribute
    is not an integer.
    """
    pass

class ExtractionCancelled(FMUException):
    pass

class UnrecognizedOptionError(FMUException):
    pass
