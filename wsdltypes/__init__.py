#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import limits
from . import translation
from .exceptions import WsdlTypesException, WsdlTypesTypeError, WsdlTypesValueError, \
    WsdlTypesResourceExceeded, WsdlParseError, WsdlMissingEndTagError, \
    WsdlUnsupportedElementError, WsdlExternalImportError, WsdlMissingTargetNamespaceError
from .logger import set_logging_level
from .cursor import XmlEventCursor
from .components import SchemaComponent, Annotation, SimpleType, Attribute, \
    AttributeGroup, ComplexType, Element
from .schema import Schema, SchemaChild
from .types import WsdlTypes

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2024, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'limits', 'translation', 'WsdlTypesException', 'WsdlTypesTypeError',
    'WsdlTypesValueError', 'WsdlTypesResourceExceeded', 'WsdlParseError',
    'WsdlMissingEndTagError', 'WsdlUnsupportedElementError',
    'WsdlExternalImportError', 'WsdlMissingTargetNamespaceError',
    'set_logging_level', 'XmlEventCursor', 'SchemaComponent', 'Annotation',
    'SimpleType', 'Attribute', 'AttributeGroup', 'ComplexType', 'Element',
    'Schema', 'SchemaChild', 'WsdlTypes',
]
