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
import pytest

from fmuinfo.definitions import (
    TypeDefinitionBuilder,
    UnitDefinitionBuilder,
    DefinitionsCollector,
)
from fmuinfo.parser import FMI2_TYPES, FMI2Dialect, FMI3Dialect

FMI2_WRAPPERS = FMI2Dialect.type_definition_wrappers
FMI3_WRAPPERS = FMI3Dialect.type_definition_wrappers

class TestBuilders:
    def test_type_definition_builder(self):
        builder = TypeDefinitionBuilder("Option", "Enumeration")
        builder.add_item({"name": "a", "value": "1"})
        builder.add_item({"name": "b", "value": "2", "description": "B"})
        typedef = builder.build()
        assert typedef.name == "Option"
        assert typedef.type == "Enumeration"
        assert [(i.name, i.value, i.description) for i in typedef.items] == [("a", "1", None), ("b", "2", "B")]

    def test_unit_definition_builder_without_base_unit(self):
        unit = UnitDefinitionBuilder("rad").build()
        assert unit.base_unit is None
        assert unit.display_units == ()
        assert unit.to_dict() == {"name": "rad"}

    def test_unit_definition_builder(self):
        builder = UnitDefinitionBuilder("K")
        builder.base_unit = {"K": "1"}
        builder.add_display_unit({"name": "degF", "factor": "1.8", "offset": "-459.67"})
        unit = builder.build()
        assert dict(unit.base_unit) == {"K": "1"}
        assert unit.to_dict() == {
            "name": "K",
            "baseUnit": {"K": "1"},
            "displayUnits": [{"name": "degF", "factor": "1.8", "offset": "-459.67"}],
        }

    def test_base_unit_is_copied(self):
        base = {"m": "1"}
        builder = UnitDefinitionBuilder("m")
        builder.base_unit = base
        unit = builder.build()
        base["s"] = "-1"
        assert dict(unit.base_unit) == {"m": "1"}

class TestFMI2TypeDefinitions:
    def feed(self, collector, events):
        for kind, tag, attrib in events:
            if kind == "start":
                collector.type_start(tag, attrib, FMI2_WRAPPERS, FMI2_TYPES)
            else:
                collector.type_end(tag, FMI2_WRAPPERS)

    @pytest.mark.parametrize("base_type", sorted(FMI2_TYPES))
    def test_base_type_from_child(self, base_type):
        collector = DefinitionsCollector()
        self.feed(collector, [
            ("start", "SimpleType", {"name": "T"}),
            ("start", base_type, {}),
            ("end", base_type, None),
            ("end", "SimpleType", None),
        ])
        assert collector.type_definitions[0].type == base_type
        assert collector.current_type is None

    def test_enumeration_marker_overrides_earlier_child(self):
        collector = DefinitionsCollector()
        self.feed(collector, [
            ("start", "SimpleType", {"name": "T"}),
            ("start", "Integer", {}),
            ("start", "Enumeration", {}),
            ("start", "Item", {"name": "x", "value": "1"}),
            ("end", "SimpleType", None),
        ])
        typedef = collector.type_definitions[0]
        assert typedef.type == "Enumeration"
        assert len(typedef.items) == 1

    def test_first_child_wins(self):
        collector = DefinitionsCollector()
        self.feed(collector, [
            ("start", "SimpleType", {"name": "T"}),
            ("start", "Real", {}),
            ("start", "Integer", {}),
            ("end", "SimpleType", None),
        ])
        assert collector.type_definitions[0].type == "Real"

    def test_elements_outside_wrapper_ignored(self):
        collector = DefinitionsCollector()
        self.feed(collector, [
            ("start", "Item", {"name": "x", "value": "1"}),
            ("start", "Real", {}),
            ("end", "Real", None),
        ])
        assert collector.type_definitions == []

class TestFMI3TypeDefinitions:
    def test_base_type_from_wrapper(self):
        collector = DefinitionsCollector()
        collector.type_start("Int32Type", {"name": "Counter"}, FMI3_WRAPPERS)
        collector.type_end("Int32Type", FMI3_WRAPPERS)
        assert collector.type_definitions[0].type == "Int32"
        assert collector.type_definitions[0].name == "Counter"

    def test_enumeration_items(self):
        collector = DefinitionsCollector()
        collector.type_start("EnumerationType", {"name": "E"}, FMI3_WRAPPERS)
        collector.type_start("Item", {"name": "a", "value": "1"}, FMI3_WRAPPERS)
        collector.type_start("Item", {"name": "b", "value": "2"}, FMI3_WRAPPERS)
        collector.type_end("EnumerationType", FMI3_WRAPPERS)
        assert [i.value for i in collector.type_definitions[0].items] == ["1", "2"]

    def test_child_tags_do_not_change_type(self):
        collector = DefinitionsCollector()
        collector.type_start("Float64Type", {"name": "T"}, FMI3_WRAPPERS)
        collector.type_start("Enumeration", {}, FMI3_WRAPPERS)
        collector.type_end("Float64Type", FMI3_WRAPPERS)
        assert collector.type_definitions[0].type == "Float64"

class TestUnitDefinitions:
    def test_units_in_document_order(self):
        collector = DefinitionsCollector()
        for name in ["s", "m", "kg"]:
            collector.unit_start("Unit", {"name": name})
            collector.unit_end("Unit")
        assert [u.name for u in collector.unit_definitions] == ["s", "m", "kg"]

    def test_display_units_attach_to_open_unit(self):
        collector = DefinitionsCollector()
        collector.unit_start("DisplayUnit", {"name": "stray"})
        collector.unit_start("Unit", {"name": "rad"})
        collector.unit_start("BaseUnit", {"rad": "1"})
        collector.unit_start("DisplayUnit", {"name": "deg", "factor": "57.29577951308232"})
        collector.unit_end("DisplayUnit")
        collector.unit_end("BaseUnit")
        collector.unit_end("Unit")
        unit, = collector.unit_definitions
        assert dict(unit.base_unit) == {"rad": "1"}
        assert [du.name for du in unit.display_units] == ["deg"]
        assert collector.current_unit is None
