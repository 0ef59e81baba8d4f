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
Immutable records describing the contents of an FMU.

All values are kept as the text found in the model description, the only
exceptions are the two structural counts which are integers.
"""

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from fmuinfo.exceptions import FMUException
from fmuinfo.common.core import get_platform_dir, get_platform_tuple

MODEL_EXCHANGE = 'ModelExchange'
CO_SIMULATION = 'CoSimulation'
SCHEDULED_EXECUTION = 'ScheduledExecution'

CAPABILITY_KINDS = (MODEL_EXCHANGE, CO_SIMULATION, SCHEDULED_EXECUTION)

def frozen_mapping(mapping):
    """Read-only copy of mapping, None stays None."""
    if mapping is None:
        return None
    return MappingProxyType(dict(mapping))

def _without_none(pairs):
    return {key: value for key, value in pairs if value is not None}


@dataclass(frozen=True)
class CapabilityBlock:
    """One of the ModelExchange, CoSimulation or ScheduledExecution elements."""
    kind: str
    model_identifier: Optional[str]
    flags: Mapping[str, str]

    def to_dict(self):
        d = {}
        if self.model_identifier is not None:
            d['modelIdentifier'] = self.model_identifier
        d.update(self.flags)
        return d

    def get_flag(self, name, default=None):
        """Raw text of a capability flag, e.g. get_flag('canHandleVariableCommunicationStepSize')."""
        return self.flags.get(name, default)


@dataclass(frozen=True)
class Variable:
    name: str
    value_reference: str
    type: str
    causality: Optional[str] = None
    variability: Optional[str] = None
    initial: Optional[str] = None
    start: Optional[str] = None
    declared_type: Optional[str] = None
    unit: Optional[str] = None
    description: Optional[str] = None
    # only set for array variables
    dimensions: Optional[Tuple[str, ...]] = None

    @property
    def is_array(self):
        return self.dimensions is not None

    def to_dict(self):
        return _without_none([
            ('name', self.name),
            ('valueReference', self.value_reference),
            ('type', self.type),
            ('causality', self.causality),
            ('variability', self.variability),
            ('initial', self.initial),
            ('start', self.start),
            ('description', self.description),
            ('unit', self.unit),
            ('declaredType', self.declared_type),
            ('dimensions', None if self.dimensions is None else list(self.dimensions)),
        ])


@dataclass(frozen=True)
class EnumerationItem:
    name: str
    value: str
    description: Optional[str] = None

    def to_dict(self):
        return _without_none([('name', self.name), ('value', self.value), ('description', self.description)])


@dataclass(frozen=True)
class TypeDefinition:
    name: str
    type: str
    items: Tuple[EnumerationItem, ...] = ()

    def to_dict(self):
        return {'name': self.name, 'type': self.type, 'items': [item.to_dict() for item in self.items]}


@dataclass(frozen=True)
class DisplayUnit:
    name: str
    factor: Optional[str] = None
    offset: Optional[str] = None
    inverse: Optional[str] = None

    def to_dict(self):
        return _without_none([
            ('name', self.name),
            ('factor', self.factor),
            ('offset', self.offset),
            ('inverse', self.inverse),
        ])


@dataclass(frozen=True)
class UnitDefinition:
    name: str
    base_unit: Optional[Mapping[str, str]] = None
    display_units: Tuple[DisplayUnit, ...] = ()

    def to_dict(self):
        d = {'name': self.name}
        if self.base_unit is not None:
            d['baseUnit'] = dict(self.base_unit)
        if self.display_units:
            d['displayUnits'] = [du.to_dict() for du in self.display_units]
        return d


@dataclass(frozen=True)
class ParseResult:
    """
    Everything extracted from one FMU: the model description contents
    together with the platforms and entry names of the archive.
    """
    fmi_version: str
    model_name: str
    description: Optional[str] = None
    author: Optional[str] = None
    version: Optional[str] = None
    copyright: Optional[str] = None
    license: Optional[str] = None
    generation_tool: Optional[str] = None
    generation_date_and_time: Optional[str] = None
    guid: Optional[str] = None
    variable_naming_convention: Optional[str] = None
    number_of_continuous_states: Optional[int] = None
    number_of_event_indicators: Optional[int] = None
    model_exchange: Optional[CapabilityBlock] = None
    co_simulation: Optional[CapabilityBlock] = None
    scheduled_execution: Optional[CapabilityBlock] = None
    variables: Tuple[Variable, ...] = ()
    type_definitions: Tuple[TypeDefinition, ...] = ()
    unit_definitions: Tuple[UnitDefinition, ...] = ()
    default_experiment: Optional[Mapping[str, str]] = None
    platforms: Tuple[str, ...] = ()
    entries: Tuple[str, ...] = ()

    @property
    def is_fmi2(self):
        return self.fmi_version.startswith('2')

    @property
    def is_fmi3(self):
        return self.fmi_version.startswith('3')

    def get_model_types(self):
        """
        Returns the kinds of the capability blocks present in the model
        description, in the order ModelExchange, CoSimulation,
        ScheduledExecution.
        """
        return [block.kind for block in (self.model_exchange, self.co_simulation, self.scheduled_execution)
                if block is not None]

    def get_variable(self, name):
        """
        Returns the Variable with the given name.

        Raises::

            FMUException if there is no variable with that name.
        """
        for variable in self.variables:
            if variable.name == name:
                return variable
        raise FMUException("The variable %s could not be found." % name)

    def get_value_reference(self, name):
        """
        Returns the value reference of a variable, as text.
        """
        return self.get_variable(name).value_reference

    def get_variable_names(self, type=None, causality=None, variability=None):
        """
        Returns the names of the variables, in document order, optionally
        filtered.

        Parameters::

            type --
                Only include variables of this type, e.g. 'Real' or 'Float64'.
                Default: None (all types)

            causality --
                Only include variables with this causality, e.g. 'input'.
                Default: None

            variability --
                Only include variables with this variability.
                Default: None
        """
        names = []
        for v in self.variables:
            if type is not None and v.type != type:
                continue
            if causality is not None and v.causality != causality:
                continue
            if variability is not None and v.variability != variability:
                continue
            names.append(v.name)
        return names

    def get_array_variables(self):
        return [v for v in self.variables if v.is_array]

    def get_type_definition(self, name):
        """Returns the TypeDefinition with the given name, or None."""
        for typedef in self.type_definitions:
            if typedef.name == name:
                return typedef
        return None

    def get_unit_definition(self, name):
        """Returns the UnitDefinition with the given name, or None."""
        for unit in self.unit_definitions:
            if unit.name == name:
                return unit
        return None

    def supports_current_platform(self):
        """
        True if the FMU ships binaries for the platform of the running
        interpreter. FMI 2.0 and FMI 3.0 platform names are both accepted.
        """
        return get_platform_dir() in self.platforms or get_platform_tuple() in self.platforms

    def to_dict(self):
        """
        Returns the result as plain dicts and lists, suitable for JSON.
        Optional fields that are not set are left out.
        """
        d = _without_none([
            ('fmiVersion', self.fmi_version),
            ('modelName', self.model_name),
            ('description', self.description),
            ('author', self.author),
            ('version', self.version),
            ('copyright', self.copyright),
            ('license', self.license),
            ('generationTool', self.generation_tool),
            ('generationDateAndTime', self.generation_date_and_time),
            ('guid', self.guid),
            ('variableNamingConvention', self.variable_naming_convention),
            ('numberOfEventIndicators', self.number_of_event_indicators),
            ('numberOfContinuousStates', self.number_of_continuous_states),
        ])
        if self.model_exchange is not None:
            d['modelExchange'] = self.model_exchange.to_dict()
        if self.co_simulation is not None:
            d['coSimulation'] = self.co_simulation.to_dict()
        if self.scheduled_execution is not None:
            d['scheduledExecution'] = self.scheduled_execution.to_dict()
        d['platforms'] = list(self.platforms)
        d['variables'] = [v.to_dict() for v in self.variables]
        d['typeDefinitions'] = [t.to_dict() for t in self.type_definitions]
        if self.default_experiment is not None:
            d['defaultExperiment'] = dict(self.default_experiment)
        d['unitDefinitions'] = [u.to_dict() for u in self.unit_definitions]
        d['zipEntries'] = list(self.entries)
        return d

    def to_json(self, **kwargs):
        """Serialize to_dict() with json.dumps, kwargs are passed on."""
        return json.dumps(self.to_dict(), **kwargs)
