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
Module containing the base class for option dictionaries.
"""

from fmuinfo.exceptions import UnrecognizedOptionError

class OptionBase(dict):
    """
    Base class for an option class.

    This class extends the dict class overriding __init__, __setitem__, update
    and setdefault methods with the purpose of offering a key check for the
    extending classes.

    The extending class defines a set of keys and default values by
    overriding __init__ and thereby does not allow any other keys to be
    added to the dict.

    Example::

        class MyOptionsClass(OptionBase):
            def __init__(self, *args, **kw):
                mydefaults = {'def1':1, 'def2':2}
                super(MyOptionsClass,self).__init__(mydefaults)

                self.update(*args, **kw)

        >> opts = MyOptionsClass()
        >> opts['def1'] = 3   // ok
        >> opts.update({'def2':4})   // ok
        >> opts['def3']= 5   // not ok

        >> opts2 = OptionBase()   // this class has no restrictions on keys
        >> opts2['def5'] = 'hello'   //ok
    """

    def __init__(self, *args, **kw):
        super(OptionBase,self).__init__(*args, **kw)
        # save keys - these are now the set of allowed keys
        self._keys = list(super(OptionBase,self).keys())
        self._defaults_copy = dict(self)

    def __setitem__(self, key, value):
        if self._keys:
            if not key in self._keys:
                raise UnrecognizedOptionError(
                    "The key: %s, is not a valid option" %str(key))
        super(OptionBase,self).__setitem__(key, value)

    def update(self, *args, **kw):
        if args:
            if len(args) > 1:
                raise TypeError(
                    "update expected at most 1 arguments, got %d" % len(args))
            other = dict(args[0])
            for key in other:
                self[key] = other[key]
        for key in kw:
            self[key] = kw[key]

    def setdefault(self, key, value=None):
        if key not in self:
            self[key] = value
        return self[key]

    def get_defaults(self):
        """
        Returns a copy of the default values the option class was created with.
        """
        return dict(self._defaults_copy)
