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
This module contains the reader of XSD element declarations.
"""
from typing import Optional

from wsdltypes.cursor import XmlEventCursor
from wsdltypes.exceptions import WsdlParseError
from wsdltypes.helpers import get_qname, local_name
from wsdltypes.logger import logger
from wsdltypes.names import ELEMENT, COMPLEX_TYPE, SIMPLE_TYPE, REF, TYPE, \
    MIN_OCCURS, MAX_OCCURS, NILLABLE, FORM, DEFAULT, FIXED, QUALIFIED, UNBOUNDED
from wsdltypes.translation import gettext as _
from .component import SchemaComponent
from .complex_types import ComplexType
from .simple_types import SimpleType


class Element(SchemaComponent):
    """
    Reader of an XSD element declaration. An anonymous type definition of
    the element is registered into the owner schema with a generated name,
    that is also set as the type of the element.

    ..  <element
          default = string
          fixed = string
          form = (qualified | unqualified)
          maxOccurs = (nonNegativeInteger | unbounded)  : 1
          minOccurs = nonNegativeInteger : 1
          name = NCName
          nillable = boolean : false
          ref = QName
          type = QName>
          Content: (annotation?, ((simpleType | complexType)?, (unique | key | keyref)*))
        </element>
    """
    tag = ELEMENT
    ref: Optional[str] = None
    type: Optional[str] = None
    min_occurs = 1
    max_occurs: Optional[int] = 1
    nillable = False
    form: Optional[str] = None
    default: Optional[str] = None
    fixed: Optional[str] = None

    def _parse_attributes(self, cursor: XmlEventCursor) -> None:
        self.ref = cursor.get_attribute_value(None, REF)
        self.type = cursor.get_attribute_value(None, TYPE)
        self.nillable = cursor.get_attribute_value(None, NILLABLE) in ('true', '1')
        self.form = cursor.get_attribute_value(None, FORM)
        self.default = cursor.get_attribute_value(None, DEFAULT)
        self.fixed = cursor.get_attribute_value(None, FIXED)

        if self.name is None and self.ref is None:
            raise WsdlParseError(
                _("an element declaration requires a 'name' or a 'ref' attribute"),
                cursor.position_description, cursor.elem
            )

        value = cursor.get_attribute_value(None, MIN_OCCURS)
        if value is not None:
            self.min_occurs = self._parse_occurs(cursor, MIN_OCCURS, value)

        value = cursor.get_attribute_value(None, MAX_OCCURS)
        if value is None:
            pass
        elif value.strip() == UNBOUNDED:
            self.max_occurs = None
        else:
            self.max_occurs = self._parse_occurs(cursor, MAX_OCCURS, value)

    @staticmethod
    def _parse_occurs(cursor: XmlEventCursor, attribute: str, value: str) -> int:
        try:
            occurs = int(value.strip())
        except ValueError:
            occurs = -1

        if occurs < 0:
            raise WsdlParseError(
                _("wrong value {!r} for attribute {!r}").format(value, attribute),
                cursor.position_description, cursor.elem
            )
        return occurs

    def _read_child(self, cursor: XmlEventCursor, name: str) -> None:
        if name not in (COMPLEX_TYPE, SIMPLE_TYPE):
            super()._read_child(cursor, name)
            return

        schema = self.schema
        if schema is None:
            cursor.skip_subtree()
            return

        type_name = schema.generate_anonymous_name(self.name or local_name(self.ref))
        component: SchemaComponent
        if name == COMPLEX_TYPE:
            component = ComplexType(schema, type_name).read(cursor)
            schema.add_complex_type(component)
        else:
            component = SimpleType(schema, type_name).read(cursor)
            schema.add_simple_type(component)

        logger.debug("%r: anonymous %s registered as %r", self, name, component.name)
        self.type = get_qname(schema.target_namespace, component.name)

    def is_multiple(self) -> bool:
        return self.max_occurs is None or self.max_occurs > 1

    def is_optional(self) -> bool:
        return self.min_occurs == 0

    def is_qualified(self) -> bool:
        if self.is_global or self.ref is not None:
            return True
        elif self.form is not None:
            return self.form == QUALIFIED
        schema = self.schema
        return schema is not None and schema.is_element_form_qualified()
