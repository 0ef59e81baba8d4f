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
Counting of continuous states and event indicators from the ModelStructure
section of a model description.
"""

class StructureCounter:
    """
    Counts are None until the first matching element is seen, so that a
    model description without such elements can be told apart from one
    declaring zero.
    """
    def __init__(self):
        self.in_derivatives = False
        self.continuous_states = None
        self.event_indicators = None

    def add_continuous_state(self):
        self.continuous_states = (self.continuous_states or 0) + 1

    def add_event_indicator(self):
        self.event_indicators = (self.event_indicators or 0) + 1

    # FMI 2.0: <ModelStructure><Derivatives><Unknown index=".."/>
    def fmi2_start(self, tag):
        if tag == 'Derivatives':
            self.in_derivatives = True
        elif tag == 'Unknown' and self.in_derivatives:
            self.add_continuous_state()

    def fmi2_end(self, tag):
        if tag == 'Derivatives':
            self.in_derivatives = False

    # FMI 3.0: <ModelStructure><ContinuousStateDerivative/>..<EventIndicator/>
    def fmi3_start(self, tag):
        if tag == 'ContinuousStateDerivative':
            self.add_continuous_state()
        elif tag == 'EventIndicator':
            self.add_event_indicator()
