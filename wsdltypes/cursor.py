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
A forward-only cursor over the structural events of an XML source, used by
the schema readers. The events are produced by *ElementTree.iterparse*, with
the safe parser of *elementpath* when the XML data has to be defused.
"""
import io
import os
from types import TracebackType
from typing import Any, IO, Iterator, List, Optional, Tuple, Type
from xml.parsers.expat import errors as expat_errors

from elementpath.etree import ElementTree, PyElementTree, SafeXMLParser

from wsdltypes import limits
from wsdltypes.exceptions import WsdlParseError, WsdlMissingEndTagError, \
    WsdlTypesResourceExceeded, WsdlTypesTypeError, WsdlTypesValueError
from wsdltypes.helpers import is_source_path, split_tag
from wsdltypes.translation import gettext as _

START_DOCUMENT = 0
START_TAG = 1
END_TAG = 2
END_DOCUMENT = 3
OTHER = 4

EVENT_NAMES = {
    START_DOCUMENT: 'START_DOCUMENT',
    START_TAG: 'START_TAG',
    END_TAG: 'END_TAG',
    END_DOCUMENT: 'END_DOCUMENT',
    OTHER: 'OTHER',
}

DEFUSE_MODES = ('always', 'nonlocal', 'never')

_ITERPARSE_EVENTS = ('start', 'end', 'comment', 'pi')
# Errors reported by expat when the input ends inside the document.
_TRUNCATION_ERRORS = frozenset(expat_errors.codes[x] for x in (
    expat_errors.XML_ERROR_NO_ELEMENTS,
    expat_errors.XML_ERROR_UNCLOSED_TOKEN,
    expat_errors.XML_ERROR_PARTIAL_CHAR,
    expat_errors.XML_ERROR_UNCLOSED_CDATA_SECTION,
))


class XmlEventCursor:
    """
    Forward-only cursor on the start/end events of an XML source.

    :param source: a string containing XML data, a bytes object, a file \
    path or a file-like object.
    :param defuse: defines when to defuse XML data using a `SafeXMLParser`. \
    Can be 'always', 'nonlocal' or 'never'. For default defuses XML data \
    not loaded from a local file path.
    """
    _elem: Any = None
    _fp: Optional[IO[Any]] = None

    def __init__(self, source: Any, defuse: str = 'nonlocal') -> None:
        if not isinstance(defuse, str):
            raise WsdlTypesTypeError(_("'defuse' argument must be a string"))
        elif defuse not in DEFUSE_MODES:
            raise WsdlTypesValueError(
                _("'defuse' argument must be one of {!r}").format(DEFUSE_MODES)
            )

        self.defuse = defuse
        self.source = source
        self._event_type = START_DOCUMENT
        self._event_count = 0
        self._path: List[str] = []
        self._pending_pop = False
        self._iterator = self._iterparse(self._get_resource(source))

    def __repr__(self) -> str:
        return '%s(%s)' % (self.__class__.__name__, self.position_description)

    def __enter__(self) -> 'XmlEventCursor':
        return self

    def __exit__(self, exc_type: Optional[Type[BaseException]],
                 exc_val: Optional[BaseException],
                 exc_tb: Optional[TracebackType]) -> None:
        self.close()

    def _get_resource(self, source: Any) -> IO[Any]:
        if isinstance(source, (str, os.PathLike)) and is_source_path(source):
            try:
                self._fp = open(source, 'rb')
            except OSError as err:
                raise WsdlTypesValueError(
                    _("cannot open XML source {!r}: {}").format(source, err)
                ) from err
            return self._fp
        elif isinstance(source, str):
            return io.StringIO(source)
        elif isinstance(source, bytes):
            return io.BytesIO(source)
        elif hasattr(source, 'read'):
            return source
        raise WsdlTypesTypeError(
            _("wrong type {!r} for XML source argument").format(type(source))
        )

    def _iterparse(self, resource: IO[Any]) -> Iterator[Tuple[str, Any]]:
        if self.defuse == 'always' or \
                self.defuse == 'nonlocal' and not is_source_path(self.source):
            safe_parser = SafeXMLParser(target=PyElementTree.TreeBuilder())
            return PyElementTree.iterparse(resource, _ITERPARSE_EVENTS, safe_parser)
        return ElementTree.iterparse(resource, _ITERPARSE_EVENTS)

    def close(self) -> None:
        """Closes the file opened by the cursor, if any."""
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    @property
    def event_type(self) -> int:
        """The kind of the current event."""
        return self._event_type

    @property
    def elem(self) -> Any:
        """The element of the current start/end event, `None` for other events."""
        if self._event_type in (START_TAG, END_TAG):
            return self._elem
        return None

    @property
    def name(self) -> Optional[str]:
        """The local name of the current start/end tag."""
        if self._event_type not in (START_TAG, END_TAG):
            return None
        return split_tag(self._elem.tag)[1]

    @property
    def namespace(self) -> Optional[str]:
        """The namespace URI of the current start/end tag, `None` if unqualified."""
        if self._event_type not in (START_TAG, END_TAG):
            return None
        return split_tag(self._elem.tag)[0]

    @property
    def depth(self) -> int:
        return len(self._path)

    @property
    def path(self) -> str:
        return '/' + '/'.join(self._path)

    @property
    def position_description(self) -> str:
        """A human-readable description of the cursor position, for diagnostics."""
        if self._event_type in (START_TAG, END_TAG):
            event = '%s %s' % (EVENT_NAMES[self._event_type], self._elem.tag)
        else:
            event = EVENT_NAMES[self._event_type]
        return '%s (path: %s, event #%d)' % (event, self.path, self._event_count)

    def is_start(self, namespace: Optional[str], name: str) -> bool:
        return self._event_type == START_TAG and self._elem.tag == _make_tag(namespace, name)

    def is_end(self, namespace: Optional[str], name: str) -> bool:
        return self._event_type == END_TAG and self._elem.tag == _make_tag(namespace, name)

    def get_attribute_value(self, namespace: Optional[str], name: str) -> Optional[str]:
        """
        Returns the value of an attribute of the current start/end tag, `None`
        if the attribute is missing or the cursor is not positioned on a tag.

        :param namespace: the namespace URI of the attribute, `None` for \
        unqualified attributes.
        :param name: the local name of the attribute.
        """
        if self._event_type not in (START_TAG, END_TAG):
            return None
        return self._elem.get(_make_tag(namespace, name))

    def next(self) -> int:
        """Advances to the next event and returns its kind."""
        if self._event_type == END_DOCUMENT:
            return END_DOCUMENT

        if self._pending_pop:
            self._path.pop()
            self._pending_pop = False

        try:
            event, node = next(self._iterator)
        except StopIteration:
            self._set_end_document()
            return END_DOCUMENT
        except (ElementTree.ParseError, PyElementTree.ParseError) as err:
            if getattr(err, 'code', None) in _TRUNCATION_ERRORS and self._path:
                # Truncated input: the document ends with open tags.
                self._set_end_document()
                return END_DOCUMENT
            raise WsdlParseError(
                _("invalid XML data: {}").format(err), self.position_description
            ) from None

        self._event_count += 1
        if event == 'start':
            self._event_type = START_TAG
            self._elem = node
            self._path.append(split_tag(node.tag)[1])
            if len(self._path) > limits.MAX_XML_DEPTH:
                raise WsdlTypesResourceExceeded(
                    _("XML data depth exceeded (MAX_XML_DEPTH={})").format(limits.MAX_XML_DEPTH),
                    self.position_description
                )
        elif event == 'end':
            self._event_type = END_TAG
            self._elem = node
            self._pending_pop = True
        else:
            self._event_type = OTHER
            self._elem = None

        return self._event_type

    def next_tag(self) -> int:
        """Advances to the next start/end tag or to the end of the document."""
        while self.next() == OTHER:
            pass
        return self._event_type

    def find_start(self, namespace: Optional[str], name: str) -> bool:
        """
        Advances to the next start tag with the provided name. Returns `False`
        if the document ends before.
        """
        while True:
            if self.next() == END_DOCUMENT:
                return False
            elif self.is_start(namespace, name):
                return True

    def skip_subtree(self) -> None:
        """
        Consumes the subtree of the current start tag, leaving the
        cursor on the matching end tag.
        """
        if self._event_type != START_TAG:
            raise WsdlParseError(
                _("cannot skip a subtree, the cursor is not on a start tag"),
                self.position_description
            )

        elem = self._elem
        while True:
            event_type = self.next()
            if event_type == END_TAG and self._elem is elem:
                return
            elif event_type == END_DOCUMENT:
                raise WsdlMissingEndTagError(
                    _("document ended before the closing tag of {!r}").format(elem.tag),
                    self.position_description
                )

    def _set_end_document(self) -> None:
        self._event_type = END_DOCUMENT
        self._elem = None
        self.close()


def _make_tag(namespace: Optional[str], name: str) -> str:
    return f'{{{namespace}}}{name}' if namespace else name
