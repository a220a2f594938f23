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
This module contains the readers of XSD attribute declarations and attribute groups.
"""
from typing import List, Optional

from wsdltypes.cursor import XmlEventCursor
from wsdltypes.names import ATTRIBUTE, ATTRIBUTE_GROUP, ANY_ATTRIBUTE, SIMPLE_TYPE, \
    REF, TYPE, USE, DEFAULT, FIXED, FORM, QUALIFIED
from .component import SchemaComponent
from .simple_types import SimpleType


class Attribute(SchemaComponent):
    """
    Reader of an XSD attribute declaration.

    ..  <attribute
          default = string
          fixed = string
          form = (qualified | unqualified)
          name = NCName
          ref = QName
          type = QName
          use = (optional | prohibited | required) : optional>
          Content: (annotation?, simpleType?)
        </attribute>
    """
    tag = ATTRIBUTE
    ref: Optional[str] = None
    type: Optional[str] = None
    use: str = 'optional'
    default: Optional[str] = None
    fixed: Optional[str] = None
    form: Optional[str] = None
    simple_type: Optional[SimpleType] = None

    def _parse_attributes(self, cursor: XmlEventCursor) -> None:
        self.ref = cursor.get_attribute_value(None, REF)
        self.type = cursor.get_attribute_value(None, TYPE)
        self.use = cursor.get_attribute_value(None, USE) or 'optional'
        self.default = cursor.get_attribute_value(None, DEFAULT)
        self.fixed = cursor.get_attribute_value(None, FIXED)
        self.form = cursor.get_attribute_value(None, FORM)

    def _read_child(self, cursor: XmlEventCursor, name: str) -> None:
        if name == SIMPLE_TYPE:
            self.simple_type = SimpleType(self.schema).read(cursor)
        else:
            super()._read_child(cursor, name)

    def is_required(self) -> bool:
        return self.use == 'required'

    def is_qualified(self) -> bool:
        if self.is_global or self.ref is not None:
            return True
        elif self.form is not None:
            return self.form == QUALIFIED
        schema = self.schema
        return schema is not None and schema.is_attribute_form_qualified()


class AttributeGroup(SchemaComponent):
    """
    Reader of an XSD attribute group definition or reference.

    ..  <attributeGroup
          name = NCName
          ref = QName>
          Content: (annotation?, ((attribute | attributeGroup)*, anyAttribute?))
        </attributeGroup>
    """
    tag = ATTRIBUTE_GROUP
    ref: Optional[str] = None
    has_any_attribute = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.attributes: List[Attribute] = []
        self.attribute_group_refs: List[str] = []

    def _parse_attributes(self, cursor: XmlEventCursor) -> None:
        self.ref = cursor.get_attribute_value(None, REF)

    def _read_child(self, cursor: XmlEventCursor, name: str) -> None:
        if name == ATTRIBUTE:
            self.attributes.append(Attribute(self.schema).read(cursor))
        elif name == ATTRIBUTE_GROUP:
            ref = cursor.get_attribute_value(None, REF)
            if ref is not None:
                self.attribute_group_refs.append(ref)
            cursor.skip_subtree()
        elif name == ANY_ATTRIBUTE:
            self.has_any_attribute = True
            cursor.skip_subtree()
        else:
            super()._read_child(cursor, name)
