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
Module containing the extraction of FMU metadata: the archive is read, the
model description parsed and the platforms detected.
"""

import dataclasses
import logging

from fmuinfo.common.options import OptionBase
from fmuinfo.exceptions import (
    FMUException,
    MissingDescriptorError,
    ExtractionCancelled,
)
from fmuinfo.archive import FMUArchive, DESCRIPTOR_NAME
from fmuinfo.parser import parse_model_description, DEFAULT_CHUNK_SIZE
from fmuinfo.platforms import detect_platforms, BINARIES_DIR

class ExtractOptions(OptionBase):
    """
    Options for extracting metadata from an FMU.

    Extract options::

        descriptor_name --
            Name of the archive entry holding the model description.
            Default: 'modelDescription.xml'

        binaries_dir --
            Prefix of the entries holding the platform binaries. The first
            path segment after it names the platform.
            Default: 'binaries/'

        chunk_size --
            Number of bytes handed to the XML parser at a time.
            Default: 65536

        include_entries --
            If set to False the entry names of the archive are not stored
            in the result (the platforms are still detected).
            Default: True
    """
    def __init__(self, *args, **kw):
        _defaults = {
            'descriptor_name': DESCRIPTOR_NAME,
            'binaries_dir': BINARIES_DIR,
            'chunk_size': DEFAULT_CHUNK_SIZE,
            'include_entries': True,
            }
        super(ExtractOptions,self).__init__(_defaults)
        self.update(*args, **kw)

def extract_options():
    """
    Get an instance of the extract options class, prefilled with default
    values, to be passed to extract.
    """
    return ExtractOptions()

def _check_options(options):
    if options is None:
        return ExtractOptions()
    if isinstance(options, ExtractOptions):
        return options
    if isinstance(options, dict):
        return ExtractOptions(options)
    raise FMUException("Invalid extract options object: %s" % str(options))

def _check_cancel(cancel, where):
    """
    Raise ExtractionCancelled if cancel reports cancellation. cancel is a
    callable returning a bool or an object with is_set(), e.g. a
    threading.Event.
    """
    if cancel is None:
        return
    cancelled = cancel.is_set() if hasattr(cancel, 'is_set') else cancel()
    if cancelled:
        raise ExtractionCancelled("The extraction was cancelled %s." % where)

def extract(path, options = None, cancel = None):
    """
    Extract the metadata of an FMU.

    Parameters::

        path --
            Path to the FMU.

        options --
            ExtractOptions (see extract_options) or a dict with a subset of
            the option keys.
            Default: None (default options)

        cancel --
            Callable returning True, or a threading.Event that is set, when
            the extraction should stop. Checked between the archive reads
            and before parsing, never during the parse itself.
            Default: None

    Returns::

        A ParseResult.

    Raises::

        ArchiveError if the file is not a readable zip archive.
        MissingDescriptorError if the model description is missing.
        DescriptorSyntaxError if the model description is malformed.
        ExtractionCancelled if cancel reported cancellation.

    Example::

        result = extract('BouncingBall.fmu')
        result.model_name
        result.get_variable_names(causality = 'output')
    """
    opts = _check_options(options)
    descriptor_name = opts['descriptor_name']

    _check_cancel(cancel, "before opening %s" % path)
    with FMUArchive(path) as archive:
        entries = archive.get_entry_names()
        logging.debug("Found %d entries in %s." % (len(entries), archive.path))
        _check_cancel(cancel, "before reading %s" % descriptor_name)
        xml = archive.read_entry(descriptor_name)

    if xml is None:
        raise MissingDescriptorError("The FMU %s does not contain %s." % (path, descriptor_name))

    _check_cancel(cancel, "before parsing %s" % descriptor_name)
    result = parse_model_description(xml, chunk_size = opts['chunk_size'])

    platforms = detect_platforms(entries, opts['binaries_dir'])
    if opts['include_entries']:
        kept_entries = tuple(entry for entry in entries if entry != descriptor_name)
    else:
        kept_entries = ()

    return dataclasses.replace(result, platforms = platforms, entries = kept_entries)

def extract_many(paths, options = None, cancel = None):
    """
    Extract the metadata of several FMUs, one after the other.

    Parameters::

        paths --
            Iterable of FMU paths.

        options, cancel --
            As for extract. cancel is also checked before each FMU.

    Returns::

        A generator yielding one ParseResult per path, in order. The first
        failing FMU raises its error and ends the generator.
    """
    opts = _check_options(options)
    for path in paths:
        _check_cancel(cancel, "before %s" % path)
        yield extract(path, opts, cancel)
