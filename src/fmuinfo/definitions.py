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
Builders for the TypeDefinitions and UnitDefinitions sections of a model
description. The builders are fed element by element from the streaming
parser and produce the immutable records of fmuinfo.model.
"""

from fmuinfo.model import (
    TypeDefinition,
    EnumerationItem,
    UnitDefinition,
    DisplayUnit,
    frozen_mapping,
)

ENUMERATION = 'Enumeration'

class TypeDefinitionBuilder:
    """In-progress TypeDefinition."""
    def __init__(self, name, base_type = ''):
        self.name = name
        self.type = base_type
        self.items = []

    def add_item(self, attrib):
        self.items.append(EnumerationItem(
            name = attrib.get('name', ''),
            value = attrib.get('value', ''),
            description = attrib.get('description'),
        ))

    def build(self):
        return TypeDefinition(name = self.name, type = self.type, items = tuple(self.items))

class UnitDefinitionBuilder:
    """In-progress UnitDefinition."""
    def __init__(self, name):
        self.name = name
        self.base_unit = None
        self.display_units = []

    def add_display_unit(self, attrib):
        self.display_units.append(DisplayUnit(
            name = attrib.get('name', ''),
            factor = attrib.get('factor'),
            offset = attrib.get('offset'),
            inverse = attrib.get('inverse'),
        ))

    def build(self):
        return UnitDefinition(
            name = self.name,
            base_unit = frozen_mapping(self.base_unit),
            display_units = tuple(self.display_units),
        )

class DefinitionsCollector:
    """
    Collects type and unit definitions during a single parse.

    At most one type definition and one unit definition are in progress at
    any time, a definition is committed when its wrapper element closes.
    """
    def __init__(self):
        self.current_type = None
        self.current_unit = None
        self.type_definitions = []
        self.unit_definitions = []

    def type_start(self, tag, attrib, wrappers, base_types = None):
        """
        Handle an element opened inside TypeDefinitions.

        Parameters::

            wrappers --
                Dict mapping the wrapper tags of the dialect to the base type
                they imply, '' when the base type is given by a child element.

            base_types --
                Tags of the child elements giving the base type, or None when
                the dialect puts the base type in the wrapper tag.
        """
        if tag in wrappers:
            self.current_type = TypeDefinitionBuilder(attrib.get('name', ''), wrappers[tag])
        elif self.current_type is None:
            return
        elif tag == 'Item':
            self.current_type.add_item(attrib)
        elif base_types is not None:
            if tag == ENUMERATION:
                self.current_type.type = ENUMERATION
            elif tag in base_types and not self.current_type.type:
                self.current_type.type = tag

    def type_end(self, tag, wrappers):
        if tag in wrappers and self.current_type is not None:
            self.type_definitions.append(self.current_type.build())
            self.current_type = None

    def unit_start(self, tag, attrib):
        if tag == 'Unit':
            self.current_unit = UnitDefinitionBuilder(attrib.get('name', ''))
        elif self.current_unit is None:
            return
        elif tag == 'BaseUnit':
            self.current_unit.base_unit = dict(attrib)
        elif tag == 'DisplayUnit':
            self.current_unit.add_display_unit(attrib)

    def unit_end(self, tag):
        if tag == 'Unit' and self.current_unit is not None:
            self.unit_definitions.append(self.current_unit.build())
            self.current_unit = None
