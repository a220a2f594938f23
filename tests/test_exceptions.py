#!/usr/bin/env python
#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import unittest
from xml.etree import ElementTree

from wsdltypes import WsdlTypesException, WsdlParseError, WsdlMissingEndTagError, \
    WsdlUnsupportedElementError, WsdlExternalImportError, \
    WsdlMissingTargetNamespaceError, WsdlTypesTypeError, WsdlTypesValueError


class TestExceptions(unittest.TestCase):

    def test_exception_hierarchy(self):
        for cls in (WsdlMissingEndTagError, WsdlUnsupportedElementError,
                    WsdlExternalImportError, WsdlMissingTargetNamespaceError):
            self.assertTrue(issubclass(cls, WsdlParseError))

        self.assertTrue(issubclass(WsdlParseError, WsdlTypesException))
        self.assertTrue(issubclass(WsdlParseError, SyntaxError))
        self.assertTrue(issubclass(WsdlTypesTypeError, TypeError))
        self.assertTrue(issubclass(WsdlTypesValueError, ValueError))

    def test_exception_string(self):
        error = WsdlParseError('unexpected tag')
        self.assertEqual(error.message, 'unexpected tag')
        self.assertIsNone(error.position)
        self.assertIsNone(error.elem)
        self.assertEqual(str(error), 'unexpected tag')

        error = WsdlParseError('unexpected tag', 'START_TAG a (path: /a, event #1)')
        self.assertEqual(str(error), 'unexpected tag\n\nAt: START_TAG a (path: /a, event #1)')

        error = WsdlParseError('unexpected tag', elem=ElementTree.Element('foo'))
        self.assertTrue(str(error).startswith('unexpected tag\n\nElement:\n\n'))
        self.assertIn('<foo', str(error))

    def test_specialized_errors(self):
        error = WsdlUnsupportedElementError('unsupported', 'http://example.com/ns', 'foo')
        self.assertEqual(error.namespace, 'http://example.com/ns')
        self.assertEqual(error.local_name, 'foo')

        error = WsdlExternalImportError('import', 'other.xsd', 'position')
        self.assertEqual(error.location, 'other.xsd')
        self.assertEqual(error.position, 'position')


if __name__ == '__main__':
    unittest.main()
