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
Streaming parser for modelDescription.xml, supporting the FMI 2.0 and the
FMI 3.0 grammar.

The XML is fed in chunks to an lxml feed parser whose target receives one
start/end callback per element, no element tree is built. All state of a
parse lives in a ParserState object owned by the target.
"""

import re
import logging

from lxml import etree

from fmuinfo.exceptions import DescriptorSyntaxError
from fmuinfo.model import (
    ParseResult,
    Variable,
    CapabilityBlock,
    CAPABILITY_KINDS,
    frozen_mapping,
)
from fmuinfo.definitions import DefinitionsCollector
from fmuinfo.structure import StructureCounter

ROOT_TAG = 'fmiModelDescription'

MODEL_VARIABLES = 'ModelVariables'
TYPE_DEFINITIONS = 'TypeDefinitions'
UNIT_DEFINITIONS = 'UnitDefinitions'
MODEL_STRUCTURE = 'ModelStructure'
DEFAULT_EXPERIMENT = 'DefaultExperiment'

SECTIONS = {
    MODEL_VARIABLES: 'in_model_variables',
    TYPE_DEFINITIONS: 'in_type_definitions',
    UNIT_DEFINITIONS: 'in_unit_definitions',
    MODEL_STRUCTURE: 'in_model_structure',
}

# FMI 2.0 type elements (children of ScalarVariable)
FMI2_TYPES = frozenset([
    'Real',
    'Integer',
    'Boolean',
    'String',
    'Enumeration',
])

# FMI 3.0 variable elements
FMI3_TYPES = frozenset([
    'Float32',
    'Float64',
    'Int8',
    'UInt8',
    'Int16',
    'UInt16',
    'Int32',
    'UInt32',
    'Int64',
    'UInt64',
    'Boolean',
    'String',
    'Binary',
    'Enumeration',
    'Clock',
])

integer_pattern = re.compile(r"^[0-9]+$")

DEFAULT_CHUNK_SIZE = 64*1024

def _local_name(tag):
    # strip a namespace, '{uri}name' -> 'name'
    return tag.rsplit('}', 1)[-1]

def _parse_count(name, text):
    """Parse a non-negative integer attribute, None stays None."""
    if text is None:
        return None
    if not integer_pattern.match(text.strip()):
        raise DescriptorSyntaxError(
            "The attribute %s has the value '%s', expected a non-negative integer." % (name, text))
    return int(text.strip())


class VariableBuilder:
    """In-progress Variable."""
    def __init__(self, attrib, type = None):
        self.name = attrib.get('name', '')
        self.value_reference = attrib.get('valueReference', '')
        self.type = type
        self.causality = attrib.get('causality')
        self.variability = attrib.get('variability')
        self.initial = attrib.get('initial')
        self.description = attrib.get('description')
        self.start = None
        self.declared_type = None
        self.unit = None
        self.dimensions = None

    def set_type_attributes(self, attrib):
        self.start = attrib.get('start')
        self.unit = attrib.get('unit')
        self.declared_type = attrib.get('declaredType')

    def add_dimension(self, expression):
        if self.dimensions is None:
            self.dimensions = []
        self.dimensions.append(expression)

    def build(self):
        return Variable(
            name = self.name,
            value_reference = self.value_reference,
            type = self.type or '',
            causality = self.causality,
            variability = self.variability,
            initial = self.initial,
            start = self.start,
            declared_type = self.declared_type,
            unit = self.unit,
            description = self.description,
            dimensions = None if self.dimensions is None else tuple(self.dimensions),
        )


class ParserState:
    """
    Everything accumulated during one parse.

    Attributes::

        stack --
            Names of the currently open elements, root first.

        in_model_variables, in_type_definitions, in_unit_definitions,
        in_model_structure --
            True while inside the corresponding section element.

        current_variable --
            The VariableBuilder that nested elements apply to, or None.

        variables --
            The committed VariableBuilders, in document order.
    """
    def __init__(self):
        self.stack = []
        self.dialect = None
        self.root_attributes = None
        self.capabilities = {}
        self.default_experiment = None

        self.in_model_variables = False
        self.in_type_definitions = False
        self.in_unit_definitions = False
        self.in_model_structure = False

        self.current_variable = None
        self.current_variable_depth = 0
        self.variables = []

        self.definitions = DefinitionsCollector()
        self.structure = StructureCounter()

    @property
    def depth(self):
        return len(self.stack)

    def parent(self):
        """Name of the parent of the innermost open element."""
        return self.stack[-2] if len(self.stack) >= 2 else None

    def build(self):
        """
        Freeze the accumulated data into a ParseResult without platforms
        and entries.
        """
        attrs = self.root_attributes or {}

        # Structural EventIndicator elements win over the root attribute
        event_indicators = self.structure.event_indicators
        if event_indicators is None:
            event_indicators = _parse_count('numberOfEventIndicators', attrs.get('numberOfEventIndicators'))

        guid = attrs.get('guid')
        if guid is None:
            guid = attrs.get('instantiationToken')

        return ParseResult(
            fmi_version = attrs.get('fmiVersion', ''),
            model_name = attrs.get('modelName', ''),
            description = attrs.get('description'),
            author = attrs.get('author'),
            version = attrs.get('version'),
            copyright = attrs.get('copyright'),
            license = attrs.get('license'),
            generation_tool = attrs.get('generationTool'),
            generation_date_and_time = attrs.get('generationDateAndTime'),
            guid = guid,
            variable_naming_convention = attrs.get('variableNamingConvention'),
            number_of_continuous_states = self.structure.continuous_states,
            number_of_event_indicators = event_indicators,
            model_exchange = self.capabilities.get('ModelExchange'),
            co_simulation = self.capabilities.get('CoSimulation'),
            scheduled_execution = self.capabilities.get('ScheduledExecution'),
            variables = tuple(v.build() for v in self.variables),
            type_definitions = tuple(self.definitions.type_definitions),
            unit_definitions = tuple(self.definitions.unit_definitions),
            default_experiment = frozen_mapping(self.default_experiment),
        )


class Dialect:
    """
    Handling of the parts of the grammar that differ between FMI versions.
    The shared sections (root, capabilities, units) are handled by
    ModelDescriptionTarget.
    """
    name = None
    type_definition_wrappers = {}
    # tags giving the base type of a type definition as a child element
    type_definition_base_types = None

    def variable_start(self, state, tag, attrib):
        raise NotImplementedError

    def variable_end(self, state, tag):
        raise NotImplementedError

    def structure_start(self, state, tag):
        raise NotImplementedError

    def structure_end(self, state, tag):
        pass

    def type_definition_start(self, state, tag, attrib):
        state.definitions.type_start(tag, attrib, self.type_definition_wrappers,
                                     self.type_definition_base_types)

    def type_definition_end(self, state, tag):
        state.definitions.type_end(tag, self.type_definition_wrappers)


class FMI2Dialect(Dialect):
    """
    <ScalarVariable name=".." valueReference=".." causality="..">
        <Real start=".." unit=".."/>
    </ScalarVariable>
    """
    name = '2.0'
    type_elements = FMI2_TYPES
    type_definition_wrappers = {'SimpleType': ''}
    type_definition_base_types = FMI2_TYPES

    def variable_start(self, state, tag, attrib):
        if tag == 'ScalarVariable':
            state.current_variable = VariableBuilder(attrib)
            state.current_variable_depth = state.depth
        elif (state.current_variable is not None and tag in self.type_elements
              and state.parent() == 'ScalarVariable'):
            variable = state.current_variable
            if variable.type is None:
                variable.type = tag
                variable.set_type_attributes(attrib)

    def variable_end(self, state, tag):
        if tag == 'ScalarVariable' and state.current_variable is not None:
            variable = state.current_variable
            if variable.type is None:
                logging.warning("The variable '%s' has no type element." % variable.name)
            state.variables.append(variable)
            state.current_variable = None

    def structure_start(self, state, tag):
        state.structure.fmi2_start(tag)

    def structure_end(self, state, tag):
        state.structure.fmi2_end(tag)


class FMI3Dialect(Dialect):
    """
    <Float64 name=".." valueReference=".." start="..">
        <Dimension start="3"/>
        <Start value=".."/>
    </Float64>
    """
    name = '3.0'
    type_elements = FMI3_TYPES
    type_definition_wrappers = dict((t + 'Type', t) for t in FMI3_TYPES)

    def variable_start(self, state, tag, attrib):
        if tag in self.type_elements and state.parent() == MODEL_VARIABLES:
            variable = VariableBuilder(attrib, type = tag)
            variable.set_type_attributes(attrib)
            state.variables.append(variable)
            state.current_variable = variable
            state.current_variable_depth = state.depth
        elif tag == 'Dimension':
            if state.current_variable is None:
                logging.warning("Ignoring a Dimension element outside of a variable.")
                return
            state.current_variable.add_dimension(attrib.get('start') or attrib.get('valueReference') or '')
        elif tag == 'Start':
            if state.current_variable is None:
                logging.warning("Ignoring a Start element outside of a variable.")
                return
            if 'value' in attrib:
                state.current_variable.start = attrib['value']

    def variable_end(self, state, tag):
        if state.current_variable is not None and state.depth == state.current_variable_depth:
            state.current_variable = None

    def structure_start(self, state, tag):
        state.structure.fmi3_start(tag)


DIALECTS = {
    '2': FMI2Dialect(),
    '3': FMI3Dialect(),
}

def get_dialect(fmi_version):
    """
    Returns the Dialect for an fmiVersion attribute value, or None if the
    version is missing or not supported.
    """
    if not fmi_version:
        return None
    return DIALECTS.get(fmi_version.strip()[:1])


class ModelDescriptionTarget:
    """
    lxml parser target building a ParserState from start/end events.
    """
    def __init__(self):
        self.state = ParserState()

    def start(self, tag, attrib):
        tag = _local_name(tag)
        state = self.state
        state.stack.append(tag)

        if state.depth == 1:
            self._root_start(tag, attrib)
            return

        if state.depth == 2 and state.stack[0] == ROOT_TAG:
            if tag in SECTIONS:
                setattr(state, SECTIONS[tag], True)
                return
            if tag in CAPABILITY_KINDS:
                self._capability_start(tag, attrib)
                return
            if tag == DEFAULT_EXPERIMENT:
                state.default_experiment = dict(attrib)
                return

        dialect = state.dialect
        if dialect is not None:
            if state.in_model_variables:
                dialect.variable_start(state, tag, attrib)
            elif state.in_type_definitions:
                dialect.type_definition_start(state, tag, attrib)
            elif state.in_model_structure:
                dialect.structure_start(state, tag)
        if state.in_unit_definitions:
            state.definitions.unit_start(tag, attrib)

    def end(self, tag):
        tag = _local_name(tag)
        state = self.state

        dialect = state.dialect
        if dialect is not None:
            if state.in_model_variables:
                dialect.variable_end(state, tag)
            elif state.in_type_definitions:
                dialect.type_definition_end(state, tag)
            elif state.in_model_structure:
                dialect.structure_end(state, tag)
        if state.in_unit_definitions:
            state.definitions.unit_end(tag)

        if state.depth == 2 and tag in SECTIONS:
            setattr(state, SECTIONS[tag], False)

        state.stack.pop()

    def close(self):
        return self.state

    def _root_start(self, tag, attrib):
        state = self.state
        if tag != ROOT_TAG:
            logging.warning("Unexpected root element '%s', expected '%s'." % (tag, ROOT_TAG))
            return
        state.root_attributes = dict(attrib)
        fmi_version = attrib.get('fmiVersion')
        state.dialect = get_dialect(fmi_version)
        if state.dialect is None:
            logging.warning("Unsupported fmiVersion '%s', only the model attributes are read." % fmi_version)
        else:
            logging.debug("Parsing model description with FMI %s grammar." % state.dialect.name)

    def _capability_start(self, tag, attrib):
        state = self.state
        if tag in state.capabilities:
            logging.warning("Multiple %s elements in the model description, using the last one." % tag)
        flags = dict(attrib)
        model_identifier = flags.pop('modelIdentifier', None)
        state.capabilities[tag] = CapabilityBlock(
            kind = tag,
            model_identifier = model_identifier,
            flags = frozen_mapping(flags),
        )


def parse_model_description(xml, chunk_size = DEFAULT_CHUNK_SIZE):
    """
    Parse the contents of a modelDescription.xml.

    Parameters::

        xml --
            The model description as bytes (encoding taken from the XML
            declaration, UTF-8 by default) or str.

        chunk_size --
            Number of bytes handed to the XML parser at a time.
            Default: 65536

    Returns::

        A ParseResult. The platforms and entries fields are empty, they are
        filled in by fmuinfo.extract.

    Raises::

        DescriptorSyntaxError if the XML is not well-formed or a count
        attribute is not an integer.
    """
    if isinstance(xml, str):
        xml = xml.encode('utf-8')
    if not xml.strip():
        raise DescriptorSyntaxError("The model description is empty.")

    target = ModelDescriptionTarget()
    parser = etree.XMLParser(target = target, resolve_entities = False, no_network = True)
    try:
        for i in range(0, len(xml), chunk_size):
            parser.feed(xml[i:i + chunk_size])
        state = parser.close()
    except etree.XMLSyntaxError as e:
        raise DescriptorSyntaxError("The model description is not well-formed. %s" % e) from e

    result = state.build()
    logging.debug("Parsed model '%s': %d variables, %d type definitions, %d unit definitions."
                  % (result.model_name, len(result.variables), len(result.type_definitions),
                     len(result.unit_definitions)))
    return result
