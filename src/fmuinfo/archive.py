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
Read access to the entries of an FMU archive.
"""

import os
import zipfile
import zlib
import logging

from fmuinfo.exceptions import ArchiveError

DESCRIPTOR_NAME = 'modelDescription.xml'

# errors that zipfile raises on a corrupt member
_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError)

class FMUArchive:
    """
    An opened FMU (zip) archive.

    Only the central directory is read when the archive is opened, entries
    are decompressed one at a time and only on request.

    Example::

        with FMUArchive('BouncingBall.fmu') as fmu:
            names = fmu.get_entry_names()
            xml = fmu.read_entry('modelDescription.xml')
    """

    def __init__(self, path):
        """
        Open the archive.

        Parameters::

            path --
                Path to the FMU, as string or path-like object.

        Raises::

            ArchiveError if the file does not exist, can not be read or is
            not a zip archive.
        """
        self._path = os.fspath(path)
        try:
            self._zip = zipfile.ZipFile(self._path, 'r')
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError("Could not open the FMU: %s. %s" % (self._path, e)) from e

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self._zip.close()

    path = property(fget = lambda self: self._path, doc = "Path of the archive.")

    def get_entry_names(self):
        """
        Returns the names of all entries, directories included, in the
        order they are stored in the archive.
        """
        return [info.filename for info in self._zip.infolist()]

    def has_entry(self, name):
        try:
            self._zip.getinfo(name)
        except KeyError:
            return False
        return True

    def read_entry(self, name):
        """
        Decompress a single entry into memory.

        Parameters::

            name --
                Entry name, a forward-slash path relative to the archive root.

        Returns::

            The entry contents as bytes, or None if there is no such entry.
        """
        try:
            info = self._zip.getinfo(name)
        except KeyError:
            return None

        logging.debug("Reading entry '%s' (%d bytes) from %s", name, info.file_size, self._path)
        try:
            with self._zip.open(info) as f:
                return f.read()
        except _READ_ERRORS as e:
            raise ArchiveError("Could not read the entry '%s' in the FMU: %s. %s" % (name, self._path, e)) from e
