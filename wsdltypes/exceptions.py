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
This module contains the exception classes for the package.
"""
from typing import Any, Optional

from elementpath.etree import etree_tostring


class WsdlTypesException(Exception):
    """
    Package's base exception class.

    :param message: the error message.
    :param position: an optional position descriptor provided by the cursor.
    :param elem: an optional ElementTree element related to the error.
    """
    def __init__(self, message: str, position: Optional[str] = None,
                 elem: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.elem = elem

    def __str__(self) -> str:
        chunks = [self.message]
        if self.position:
            chunks.append(f"At: {self.position}")
        if self.elem is not None:
            try:
                elem_string = etree_tostring(self.elem, max_lines=10)
            except (TypeError, ValueError):
                elem_string = repr(self.elem)
            chunks.append(f"Element:\n\n  {elem_string}")
        return '\n\n'.join(chunks)


class WsdlTypesTypeError(WsdlTypesException, TypeError):
    pass


class WsdlTypesValueError(WsdlTypesException, ValueError):
    pass


class WsdlTypesResourceExceeded(WsdlTypesException):
    """Raised when a protection limit is exceeded reading an XML source."""


class WsdlParseError(WsdlTypesException, SyntaxError):
    """A structural error found reading a WSDL types section or a schema block."""


class WsdlMissingEndTagError(WsdlParseError):
    """Raised when the input ends before the closing tag of a block."""


class WsdlUnsupportedElementError(WsdlParseError):
    """Raised for an unrecognized or wrongly namespaced child of a schema block."""

    def __init__(self, message: str, namespace: Optional[str], local_name: str,
                 position: Optional[str] = None, elem: Optional[Any] = None) -> None:
        super().__init__(message, position, elem)
        self.namespace = namespace
        self.local_name = local_name


class WsdlExternalImportError(WsdlParseError):
    """Raised when a schema block imports a schema from an external location."""

    def __init__(self, message: str, location: str,
                 position: Optional[str] = None, elem: Optional[Any] = None) -> None:
        super().__init__(message, position, elem)
        self.location = location


class WsdlMissingTargetNamespaceError(WsdlParseError):
    """Raised when a schema block doesn't declare a target namespace."""


__all__ = ['WsdlTypesException', 'WsdlTypesTypeError', 'WsdlTypesValueError',
           'WsdlTypesResourceExceeded', 'WsdlParseError', 'WsdlMissingEndTagError',
           'WsdlUnsupportedElementError', 'WsdlExternalImportError',
           'WsdlMissingTargetNamespaceError']
