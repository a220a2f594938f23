#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the reader of XSD simple type definitions.
"""
from typing import List, Optional

from wsdltypes.cursor import XmlEventCursor
from wsdltypes.names import SIMPLE_TYPE, RESTRICTION, LIST, UNION, ENUMERATION, \
    BASE, VALUE, ITEM_TYPE, MEMBER_TYPES
from .component import SchemaComponent


class SimpleType(SchemaComponent):
    """
    Reader of an XSD simple type definition. Only the derivation kind, the base
    type and the enumeration facets are collected, other facets are skipped.

    ..  <simpleType
          final = (#all | List of (list | union | restriction))
          id = ID
          name = NCName>
          Content: (annotation?, (restriction | list | union))
        </simpleType>
    """
    tag = SIMPLE_TYPE
    derivation: Optional[str] = None
    base: Optional[str] = None
    item_type: Optional[str] = None

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.enumerations: List[str] = []
        self.member_types: List[str] = []

    def _read_child(self, cursor: XmlEventCursor, name: str) -> None:
        if name == RESTRICTION:
            self.derivation = name
            self.base = cursor.get_attribute_value(None, BASE)
            for child in self._iter_children(cursor):
                if child == ENUMERATION:
                    value = cursor.get_attribute_value(None, VALUE)
                    if value is not None:
                        self.enumerations.append(value)
                    cursor.skip_subtree()
                else:
                    super()._read_child(cursor, child)

        elif name == LIST:
            self.derivation = name
            self.item_type = cursor.get_attribute_value(None, ITEM_TYPE)
            cursor.skip_subtree()

        elif name == UNION:
            self.derivation = name
            member_types = cursor.get_attribute_value(None, MEMBER_TYPES)
            if member_types:
                self.member_types.extend(member_types.split())
            cursor.skip_subtree()

        else:
            super()._read_child(cursor, name)

    def is_enumeration(self) -> bool:
        return bool(self.enumerations)
