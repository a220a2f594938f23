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
This module contains the base class of the readers of XSD declarations and
definitions and the reader of XSD annotations.
"""
import weakref
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from wsdltypes.cursor import XmlEventCursor, START_TAG, END_TAG, END_DOCUMENT
from wsdltypes.exceptions import WsdlParseError, WsdlMissingEndTagError
from wsdltypes.helpers import get_qname
from wsdltypes.logger import logger
from wsdltypes.names import XSD_NAMESPACE, ANNOTATION, DOCUMENTATION, APPINFO, NAME
from wsdltypes.translation import gettext as _

if TYPE_CHECKING:
    from wsdltypes.schema import Schema  # noqa: F401


class SchemaComponent:
    """
    Base class of the readers of the body of XSD elements. A reader starts
    on the opening tag of its element and consumes the whole subtree, leaving
    the cursor on the matching closing tag.

    :param schema: the schema registry table that owns the component. It's \
    referred with a weak reference.
    :param name: a name for the component, overridden by the 'name' attribute \
    of the element if present.
    :param is_global: `True` if the component is a direct child of the schema.
    """
    tag: str = ''
    annotation: Optional['Annotation'] = None

    def __init__(self, schema: Optional['Schema'] = None,
                 name: Optional[str] = None,
                 is_global: bool = False) -> None:
        if schema is None:
            self._schema_ref = None
        else:
            self._schema_ref = weakref.ref(schema)
        self.name = name
        self.is_global = is_global

    def __repr__(self) -> str:
        if self.name:
            return '%s(name=%r)' % (self.__class__.__name__, self.name)
        return '%s()' % self.__class__.__name__

    @property
    def schema(self) -> Optional['Schema']:
        """The owner schema registry table, `None` if it's not available."""
        return self._schema_ref() if self._schema_ref is not None else None

    @property
    def target_namespace(self) -> Optional[str]:
        schema = self.schema
        return schema.target_namespace if schema is not None else None

    @property
    def qualified_name(self) -> Optional[str]:
        if self.name is None:
            return None
        return get_qname(self.target_namespace, self.name)

    def read(self, cursor: XmlEventCursor) -> 'SchemaComponent':
        """
        Reads the component from a cursor positioned on the opening tag of its
        element. Returns the component itself, with the cursor positioned on
        the matching closing tag.
        """
        if not cursor.is_start(XSD_NAMESPACE, self.tag):
            raise WsdlParseError(
                _("{!r} cannot read from the current position").format(self),
                cursor.position_description
            )

        elem = cursor.elem
        name = cursor.get_attribute_value(None, NAME)
        if name is not None:
            self.name = name
        elif self.is_global:
            raise WsdlParseError(
                _("missing 'name' attribute for global {!r}").format(self.tag),
                cursor.position_description, elem
            )

        self._parse_attributes(cursor)
        for child in self._iter_children(cursor):
            self._read_child(cursor, child)

        if cursor.event_type != END_TAG or cursor.elem is not elem:
            raise WsdlParseError(
                _("{!r} is not positioned on its closing tag").format(self),
                cursor.position_description
            )
        return self

    def _parse_attributes(self, cursor: XmlEventCursor) -> None:
        """Parses the attributes of the opening tag, except 'name'."""

    def _iter_children(self, cursor: XmlEventCursor) -> Iterator[str]:
        """
        Iterates over the XSD child elements of the current start tag, yielding
        their local names. Each child must be consumed by the caller before
        the iteration is resumed. Children in other namespaces are skipped.
        """
        elem = cursor.elem
        while True:
            event_type = cursor.next()
            if event_type == START_TAG:
                child = cursor.elem
                if cursor.namespace != XSD_NAMESPACE:
                    cursor.skip_subtree()
                    continue

                yield cursor.name

                if cursor.event_type != END_TAG or cursor.elem is not child:
                    raise WsdlParseError(
                        _("the reader of {!r} didn't stop on its closing tag").format(child.tag),
                        cursor.position_description
                    )
            elif event_type == END_TAG:
                if cursor.elem is elem:
                    return
            elif event_type == END_DOCUMENT:
                raise WsdlMissingEndTagError(
                    _("document ended before the closing tag of {!r}").format(elem.tag),
                    cursor.position_description
                )

    def _read_child(self, cursor: XmlEventCursor, name: str) -> None:
        if name == ANNOTATION:
            self.annotation = Annotation(self.schema).read(cursor)
        else:
            logger.debug("%r: skip unsupported XSD content %r", self, name)
            cursor.skip_subtree()


class Annotation(SchemaComponent):
    """Reader of an XSD annotation. Collects the texts of documentation children."""
    tag = ANNOTATION

    def __init__(self, schema: Optional['Schema'] = None) -> None:
        super().__init__(schema)
        self.documentation: List[str] = []
        self.appinfo_count = 0

    def __str__(self) -> str:
        return '\n'.join(self.documentation)

    def _read_child(self, cursor: XmlEventCursor, name: str) -> None:
        if name == DOCUMENTATION:
            elem: Any = cursor.elem
            cursor.skip_subtree()
            text = ''.join(elem.itertext()).strip()
            if text:
                self.documentation.append(text)
        elif name == APPINFO:
            self.appinfo_count += 1
            cursor.skip_subtree()
        else:
            super()._read_child(cursor, name)
