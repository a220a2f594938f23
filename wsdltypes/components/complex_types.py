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
This module contains the reader of XSD complex type definitions.
"""
from typing import TYPE_CHECKING, List, Optional

from wsdltypes.cursor import XmlEventCursor
from wsdltypes.names import COMPLEX_TYPE, SEQUENCE, ALL, CHOICE, GROUP, ANY, \
    ELEMENT, ATTRIBUTE, ATTRIBUTE_GROUP, ANY_ATTRIBUTE, SIMPLE_CONTENT, \
    COMPLEX_CONTENT, EXTENSION, RESTRICTION, ABSTRACT, MIXED, BASE, REF
from .component import SchemaComponent
from .attributes import Attribute

if TYPE_CHECKING:
    from .elements import Element  # noqa: F401

MODEL_GROUP_TAGS = frozenset((SEQUENCE, ALL, CHOICE))


class ComplexType(SchemaComponent):
    """
    Reader of an XSD complex type definition. Local element declarations of
    nested model groups are collected in a flat list, in document order.

    ..  <complexType
          abstract = boolean : false
          block = (#all | List of (extension | restriction))
          final = (#all | List of (extension | restriction))
          id = ID
          mixed = boolean : false
          name = NCName>
          Content: (annotation?, (simpleContent | complexContent |
          ((group | all | choice | sequence)?, ((attribute | attributeGroup)*, anyAttribute?))))
        </complexType>
    """
    tag = COMPLEX_TYPE
    abstract = False
    mixed = False
    content: Optional[str] = None
    model: Optional[str] = None
    derivation: Optional[str] = None
    base: Optional[str] = None
    has_any = False
    has_any_attribute = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.elements: List['Element'] = []
        self.attributes: List[Attribute] = []
        self.attribute_group_refs: List[str] = []
        self.group_refs: List[str] = []

    def _parse_attributes(self, cursor: XmlEventCursor) -> None:
        self.abstract = cursor.get_attribute_value(None, ABSTRACT) in ('true', '1')
        self.mixed = cursor.get_attribute_value(None, MIXED) in ('true', '1')

    def _read_child(self, cursor: XmlEventCursor, name: str) -> None:
        if name in MODEL_GROUP_TAGS:
            if self.model is None:
                self.model = name
            self._read_model_group(cursor)

        elif name == GROUP:
            self._read_group_reference(cursor)

        elif name in (SIMPLE_CONTENT, COMPLEX_CONTENT):
            self.content = name
            for child in self._iter_children(cursor):
                if child in (EXTENSION, RESTRICTION):
                    self.derivation = child
                    self.base = cursor.get_attribute_value(None, BASE)
                    for content_child in self._iter_children(cursor):
                        self._read_child(cursor, content_child)
                else:
                    super()._read_child(cursor, child)

        elif name == ATTRIBUTE:
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

    def _read_model_group(self, cursor: XmlEventCursor) -> None:
        from .elements import Element

        for name in self._iter_children(cursor):
            if name == ELEMENT:
                self.elements.append(Element(self.schema).read(cursor))
            elif name in MODEL_GROUP_TAGS:
                self._read_model_group(cursor)
            elif name == GROUP:
                self._read_group_reference(cursor)
            elif name == ANY:
                self.has_any = True
                cursor.skip_subtree()
            else:
                super()._read_child(cursor, name)

    def _read_group_reference(self, cursor: XmlEventCursor) -> None:
        ref = cursor.get_attribute_value(None, REF)
        if ref is not None:
            self.group_refs.append(ref)
        cursor.skip_subtree()

    def get_element(self, name: str) -> Optional['Element']:
        for element in self.elements:
            if element.name == name:
                return element
        return None
