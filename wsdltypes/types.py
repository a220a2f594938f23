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
This module contains the container of the schema blocks of a WSDL types section.
"""
from typing import Any, Iterator, List, Optional

from wsdltypes.cursor import XmlEventCursor, START_TAG, END_TAG, END_DOCUMENT
from wsdltypes.exceptions import WsdlParseError, WsdlMissingEndTagError
from wsdltypes.helpers import get_namespace, local_name
from wsdltypes.logger import logger, logged
from wsdltypes.names import XSD_NAMESPACE, WSDL_NAMESPACE, SCHEMA, WSDL_TYPES, \
    TARGET_NAMESPACE
from wsdltypes.schema import Schema
from wsdltypes.components import ComplexType, SimpleType, Element
from wsdltypes.translation import gettext as _


class WsdlTypes:
    """
    Container of the schema registry tables of the types section of a WSDL
    document, one table for each schema block in document order.

    :param definitions_namespace: the target namespace of the WSDL definitions.
    """
    def __init__(self, definitions_namespace: Optional[str] = None) -> None:
        self.definitions_namespace = definitions_namespace
        self.schemas: List[Schema] = []

    def __repr__(self) -> str:
        return '%s(namespaces=%r)' % (
            self.__class__.__name__, [s.target_namespace for s in self.schemas]
        )

    def __len__(self) -> int:
        return len(self.schemas)

    def __iter__(self) -> Iterator[Schema]:
        return iter(self.schemas)

    @classmethod
    @logged
    def parse(cls, source: Any, defuse: str = 'nonlocal') -> 'WsdlTypes':
        """
        Parses the types section of a WSDL document. A source that is an XSD
        schema document is read as a single schema block.

        :param source: a string containing XML data, a bytes object, a file \
        path or a file-like object.
        :param defuse: when to defuse XML data, see :class:`XmlEventCursor`.
        :param loglevel: optional logging level for the call.
        """
        with XmlEventCursor(source, defuse) as cursor:
            if cursor.next_tag() != START_TAG:
                raise WsdlParseError(_("the XML source has no root element"),
                                     cursor.position_description)

            if cursor.is_start(XSD_NAMESPACE, SCHEMA):
                types = cls()
                types.read_schema(cursor)
            else:
                types = cls(cursor.get_attribute_value(None, TARGET_NAMESPACE))
                if cursor.find_start(WSDL_NAMESPACE, WSDL_TYPES):
                    types.read(cursor)
                else:
                    logger.info("No types section found in %r", cursor.source)

        logger.info("Parsed %r", types)
        return types

    def read(self, cursor: XmlEventCursor) -> None:
        """
        Reads a WSDL types section from a cursor positioned on its opening tag.
        Schema blocks are read one at a time, other children are skipped.
        """
        elem = cursor.elem
        while True:
            event_type = cursor.next()
            if event_type == START_TAG:
                if cursor.is_start(XSD_NAMESPACE, SCHEMA):
                    self.read_schema(cursor)
                else:
                    logger.debug("Skip %r in types section", cursor.elem.tag)
                    cursor.skip_subtree()
            elif event_type == END_TAG:
                if cursor.elem is elem:
                    break
            elif event_type == END_DOCUMENT:
                raise WsdlMissingEndTagError(
                    _("failed to find end tag for 'types'"),
                    cursor.position_description
                )

    def read_schema(self, cursor: XmlEventCursor) -> Schema:
        """Reads a schema block and appends its table to the container."""
        schema = Schema(self)
        schema.read(cursor)
        self.schemas.append(schema)
        return schema

    def iter_schemas(self, namespace: Optional[str] = None) -> Iterator[Schema]:
        for schema in self.schemas:
            if namespace is None or schema.target_namespace == namespace:
                yield schema

    def get_schema(self, namespace: str) -> Optional[Schema]:
        """Returns the first schema block with the provided target namespace."""
        for schema in self.iter_schemas(namespace):
            return schema
        return None

    def get_complex_type(self, qname: str) -> Optional[ComplexType]:
        name = local_name(qname)
        for schema in self.iter_schemas(get_namespace(qname)):
            if name in schema.complex_types:
                return schema.complex_types[name]
        return None

    def get_simple_type(self, qname: str) -> Optional[SimpleType]:
        name = local_name(qname)
        for schema in self.iter_schemas(get_namespace(qname)):
            if name in schema.simple_types:
                return schema.simple_types[name]
        return None

    def get_global_element(self, qname: str) -> Optional[Element]:
        name = local_name(qname)
        for schema in self.iter_schemas(get_namespace(qname)):
            if name in schema.elements:
                return schema.elements[name]
        return None
