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
This module contains the registry table of an XSD schema block embedded
in the types section of a WSDL document.
"""
import weakref
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterator, Optional

from wsdltypes.cursor import XmlEventCursor, START_TAG, END_TAG, END_DOCUMENT
from wsdltypes.exceptions import WsdlUnsupportedElementError, WsdlExternalImportError, \
    WsdlMissingEndTagError, WsdlMissingTargetNamespaceError
from wsdltypes.helpers import find_by_name
from wsdltypes.logger import logger, logged
from wsdltypes.names import XSD_NAMESPACE, SCHEMA, COMPLEX_TYPE, SIMPLE_TYPE, \
    ELEMENT, ATTRIBUTE, ATTRIBUTE_GROUP, ANNOTATION, IMPORT, TARGET_NAMESPACE, \
    ELEMENT_FORM_DEFAULT, ATTRIBUTE_FORM_DEFAULT, SCHEMA_LOCATION, QUALIFIED
from wsdltypes.translation import gettext as _
from wsdltypes.components import Annotation, ComplexType, SimpleType, \
    Element, Attribute, AttributeGroup

if TYPE_CHECKING:
    from wsdltypes.types import WsdlTypes  # noqa: F401


class SchemaChild(Enum):
    """The kinds of elements admitted as children of a schema block."""
    COMPLEX_TYPE = COMPLEX_TYPE
    SIMPLE_TYPE = SIMPLE_TYPE
    ELEMENT = ELEMENT
    ATTRIBUTE = ATTRIBUTE
    ATTRIBUTE_GROUP = ATTRIBUTE_GROUP
    ANNOTATION = ANNOTATION
    SCHEMA = SCHEMA
    IMPORT = IMPORT
    UNSUPPORTED = None

    @classmethod
    def lookup(cls, namespace: Optional[str], name: Optional[str]) -> 'SchemaChild':
        return SCHEMA_CHILDREN.get((namespace, name), cls.UNSUPPORTED)


SCHEMA_CHILDREN = {
    (XSD_NAMESPACE, kind.value): kind for kind in SchemaChild if kind.value is not None
}


class Schema:
    """
    The registry table of a schema block. Global declarations and definitions
    are read from a cursor and registered by name. The registration of a name
    already in use replaces the previous component.

    The table is populated by a single call of :meth:`read`. If the read fails
    the table is left in a partial state and has to be discarded. After a
    successful read the table is not modified anymore.

    :param types: the optional owner container, referred with a weak reference.
    """
    target_namespace: Optional[str] = None
    element_form_default: Optional[str] = None
    attribute_form_default: Optional[str] = None

    def __init__(self, types: Optional['WsdlTypes'] = None) -> None:
        self._types_ref = weakref.ref(types) if types is not None else None
        self.complex_types: Dict[str, ComplexType] = {}
        self.simple_types: Dict[str, SimpleType] = {}
        self.elements: Dict[str, Element] = {}
        self.attributes: Dict[str, Attribute] = {}
        self.attribute_groups: Dict[str, AttributeGroup] = {}

        # Not thread-safe: a table is populated by a single reader.
        self._anonymous_types: Dict[str, int] = {}

    def __repr__(self) -> str:
        return '%s(target_namespace=%r, element_form_default=%r, ' \
               'attribute_form_default=%r, complex_types=%r)' % (
                   self.__class__.__name__,
                   self.target_namespace,
                   self.element_form_default,
                   self.attribute_form_default,
                   self.complex_types,
               )

    __str__ = __repr__

    @property
    def types(self) -> Optional['WsdlTypes']:
        """The owner container, `None` if the table is standalone."""
        return self._types_ref() if self._types_ref is not None else None

    def is_element_form_qualified(self) -> bool:
        return self.element_form_default == QUALIFIED

    def is_attribute_form_qualified(self) -> bool:
        return self.attribute_form_default == QUALIFIED

    def add_complex_type(self, complex_type: ComplexType) -> None:
        self.complex_types[complex_type.name] = complex_type

    def add_simple_type(self, simple_type: SimpleType) -> None:
        self.simple_types[simple_type.name] = simple_type

    def get_complex_type(self, name: str) -> Optional[ComplexType]:
        return self.complex_types.get(name)

    def get_simple_type(self, name: str) -> Optional[SimpleType]:
        return self.simple_types.get(name)

    def get_global_element(self, name: str) -> Optional[Element]:
        return self.elements.get(name)

    def get_global_attribute(self, name: str) -> Optional[Attribute]:
        return find_by_name(self.iter_global_attributes(), name)

    def get_global_attribute_group(self, name: str) -> Optional[AttributeGroup]:
        return find_by_name(self.iter_global_attribute_groups(), name)

    def iter_complex_types(self) -> Iterator[ComplexType]:
        return iter(self.complex_types.values())

    def iter_simple_types(self) -> Iterator[SimpleType]:
        return iter(self.simple_types.values())

    def iter_global_elements(self) -> Iterator[Element]:
        return iter(self.elements.values())

    def iter_global_attributes(self) -> Iterator[Attribute]:
        return iter(self.attributes.values())

    def iter_global_attribute_groups(self) -> Iterator[AttributeGroup]:
        return iter(self.attribute_groups.values())

    def generate_anonymous_name(self, element_name: str) -> str:
        """
        Generates a unique name for an anonymous type definition of an element.
        The first name generated for element 'Foo' is 'Foo_element', the next
        ones are 'Foo_element_2', 'Foo_element_3' and so on.

        :param element_name: the name of the element that owns the type.
        """
        name = f'{element_name}_element'
        count = self._anonymous_types.get(name)
        if count is None:
            self._anonymous_types[name] = 1
            return name

        self._anonymous_types[name] = count + 1
        return f'{name}_{count + 1}'

    @logged
    def read(self, cursor: XmlEventCursor) -> None:
        """
        Reads the schema block from a cursor positioned on its opening tag. At the
        end the cursor is positioned on the closing tag of the schema block.

        :param cursor: the cursor of the XML source, borrowed for the read.
        :param loglevel: optional logging level for the call.
        """
        self.target_namespace = cursor.get_attribute_value(None, TARGET_NAMESPACE)
        self.element_form_default = cursor.get_attribute_value(None, ELEMENT_FORM_DEFAULT)
        self.attribute_form_default = cursor.get_attribute_value(None, ATTRIBUTE_FORM_DEFAULT)
        logger.debug("Start reading schema block with targetNamespace=%r at %s",
                     self.target_namespace, cursor.position_description)

        event_type = cursor.event_type
        while True:
            if event_type == START_TAG:
                self._read_child(cursor)
            elif event_type == END_TAG:
                if cursor.namespace == XSD_NAMESPACE and cursor.name == SCHEMA:
                    break
            elif event_type == END_DOCUMENT:
                raise WsdlMissingEndTagError(
                    _("failed to find end tag for 'schema'"),
                    cursor.position_description
                )
            event_type = cursor.next()

        if self.target_namespace is None:
            raise WsdlMissingTargetNamespaceError(
                _("schema:targetNamespace can not be null"),
                cursor.position_description
            )

        logger.debug("End reading schema block %r", self)

    def _read_child(self, cursor: XmlEventCursor) -> None:
        kind = SchemaChild.lookup(cursor.namespace, cursor.name)

        if kind is SchemaChild.COMPLEX_TYPE:
            complex_type = ComplexType(self, is_global=True).read(cursor)
            self.complex_types[complex_type.name] = complex_type
            logger.debug("Registered %r", complex_type)

        elif kind is SchemaChild.SIMPLE_TYPE:
            simple_type = SimpleType(self, is_global=True).read(cursor)
            self.simple_types[simple_type.name] = simple_type
            logger.debug("Registered %r", simple_type)

        elif kind is SchemaChild.ELEMENT:
            element = Element(self, is_global=True).read(cursor)
            self.elements[element.name] = element
            logger.debug("Registered %r", element)

        elif kind is SchemaChild.ATTRIBUTE:
            attribute = Attribute(self, is_global=True).read(cursor)
            self.attributes[attribute.name] = attribute
            logger.debug("Registered %r", attribute)

        elif kind is SchemaChild.ATTRIBUTE_GROUP:
            attribute_group = AttributeGroup(self, is_global=True).read(cursor)
            self.attribute_groups[attribute_group.name] = attribute_group
            logger.debug("Registered %r", attribute_group)

        elif kind is SchemaChild.ANNOTATION:
            Annotation(self).read(cursor)
            logger.debug("Skipped schema annotation")

        elif kind is SchemaChild.SCHEMA:
            logger.debug("Skipped schema header tag at %s", cursor.position_description)

        elif kind is SchemaChild.IMPORT:
            location = cursor.get_attribute_value(None, SCHEMA_LOCATION)
            if location is not None:
                raise WsdlExternalImportError(
                    _("Found schema import from location {}. "
                      "External schema import not supported").format(location),
                    location, cursor.position_description
                )
            logger.debug("Skipped schema import without location")

        else:
            raise WsdlUnsupportedElementError(
                _("Unsupported Schema element found {}:{}").format(cursor.namespace, cursor.name),
                cursor.namespace, cursor.name, cursor.position_description
            )
