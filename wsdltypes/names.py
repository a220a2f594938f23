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
This module contains namespace definitions and the names of XSD and WSDL
tags and attributes that are recognized by the readers.
"""

###
# Namespace URIs
XSD_NAMESPACE = 'http://www.w3.org/2001/XMLSchema'
"URI of the XML Schema Definition namespace (xs|xsd)"

WSDL_NAMESPACE = 'http://schemas.xmlsoap.org/wsdl/'
"URI of the WSDL 1.1 namespace (wsdl)"

###
# Local names of XSD declarations and definitions
SCHEMA = 'schema'
COMPLEX_TYPE = 'complexType'
SIMPLE_TYPE = 'simpleType'
ELEMENT = 'element'
ATTRIBUTE = 'attribute'
ATTRIBUTE_GROUP = 'attributeGroup'
ANNOTATION = 'annotation'
IMPORT = 'import'

# Local names of nested XSD content
DOCUMENTATION = 'documentation'
APPINFO = 'appinfo'
SEQUENCE = 'sequence'
ALL = 'all'
CHOICE = 'choice'
GROUP = 'group'
ANY = 'any'
ANY_ATTRIBUTE = 'anyAttribute'
SIMPLE_CONTENT = 'simpleContent'
COMPLEX_CONTENT = 'complexContent'
EXTENSION = 'extension'
RESTRICTION = 'restriction'
ENUMERATION = 'enumeration'
LIST = 'list'
UNION = 'union'

# WSDL local names
WSDL_DEFINITIONS = 'definitions'
WSDL_TYPES = 'types'
WSDL_DOCUMENTATION = 'documentation'

###
# Extended names of XSD tags
XSD_SCHEMA = f'{{{XSD_NAMESPACE}}}schema'
XSD_COMPLEX_TYPE = f'{{{XSD_NAMESPACE}}}complexType'
XSD_SIMPLE_TYPE = f'{{{XSD_NAMESPACE}}}simpleType'
XSD_ELEMENT = f'{{{XSD_NAMESPACE}}}element'
XSD_ATTRIBUTE = f'{{{XSD_NAMESPACE}}}attribute'
XSD_ATTRIBUTE_GROUP = f'{{{XSD_NAMESPACE}}}attributeGroup'
XSD_ANNOTATION = f'{{{XSD_NAMESPACE}}}annotation'
XSD_IMPORT = f'{{{XSD_NAMESPACE}}}import'
XSD_ANY_TYPE = f'{{{XSD_NAMESPACE}}}anyType'
XSD_STRING = f'{{{XSD_NAMESPACE}}}string'

WSDL_TYPES_TAG = f'{{{WSDL_NAMESPACE}}}types'

###
# Attribute names
TARGET_NAMESPACE = 'targetNamespace'
ELEMENT_FORM_DEFAULT = 'elementFormDefault'
ATTRIBUTE_FORM_DEFAULT = 'attributeFormDefault'
SCHEMA_LOCATION = 'schemaLocation'
NAME = 'name'
REF = 'ref'
TYPE = 'type'
BASE = 'base'
VALUE = 'value'
USE = 'use'
DEFAULT = 'default'
FIXED = 'fixed'
FORM = 'form'
MIN_OCCURS = 'minOccurs'
MAX_OCCURS = 'maxOccurs'
NILLABLE = 'nillable'
ABSTRACT = 'abstract'
MIXED = 'mixed'
ITEM_TYPE = 'itemType'
MEMBER_TYPES = 'memberTypes'

QUALIFIED = 'qualified'
UNBOUNDED = 'unbounded'
