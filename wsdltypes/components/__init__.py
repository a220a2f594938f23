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
Readers of the XSD declarations and definitions found in a schema block.
"""
from .component import SchemaComponent, Annotation
from .simple_types import SimpleType
from .attributes import Attribute, AttributeGroup
from .complex_types import ComplexType
from .elements import Element

__all__ = ['SchemaComponent', 'Annotation', 'SimpleType', 'Attribute',
           'AttributeGroup', 'ComplexType', 'Element']
