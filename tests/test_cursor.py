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
"""Tests concerning the cursor on XML events."""
import io
import pathlib
import unittest

from wsdltypes import limits, XmlEventCursor, WsdlParseError, WsdlMissingEndTagError, \
    WsdlTypesResourceExceeded, WsdlTypesTypeError, WsdlTypesValueError
from wsdltypes.cursor import START_DOCUMENT, START_TAG, END_TAG, END_DOCUMENT, OTHER

CASES_DIR = pathlib.Path(__file__).absolute().parent.joinpath('test_cases/wsdl')


class TestXmlEventCursor(unittest.TestCase):

    def check_events(self, cursor):
        self.assertEqual(cursor.event_type, START_DOCUMENT)
        self.assertIsNone(cursor.name)
        self.assertIsNone(cursor.elem)

        self.assertEqual(cursor.next(), START_TAG)
        self.assertEqual(cursor.name, 'a')
        self.assertEqual(cursor.namespace, 'http://example.com/ns')
        self.assertEqual(cursor.depth, 1)
        self.assertEqual(cursor.get_attribute_value(None, 'id'), '1')
        self.assertEqual(cursor.get_attribute_value('http://example.com/ns', 'id'), '2')
        self.assertIsNone(cursor.get_attribute_value(None, 'missing'))

        self.assertEqual(cursor.next(), OTHER)
        self.assertIsNone(cursor.name)
        self.assertIsNone(cursor.namespace)
        self.assertIsNone(cursor.get_attribute_value(None, 'id'))

        self.assertEqual(cursor.next(), START_TAG)
        self.assertEqual(cursor.name, 'b')
        self.assertIsNone(cursor.namespace)
        self.assertEqual(cursor.path, '/a/b')
        self.assertTrue(cursor.is_start(None, 'b'))
        self.assertFalse(cursor.is_end(None, 'b'))

        self.assertEqual(cursor.next(), END_TAG)
        self.assertTrue(cursor.is_end(None, 'b'))
        self.assertEqual(cursor.path, '/a/b')

        self.assertEqual(cursor.next(), END_TAG)
        self.assertTrue(cursor.is_end('http://example.com/ns', 'a'))
        self.assertEqual(cursor.path, '/a')

        self.assertEqual(cursor.next(), END_DOCUMENT)
        self.assertEqual(cursor.path, '/')
        self.assertEqual(cursor.next(), END_DOCUMENT)

    def test_events(self):
        source = '<n:a xmlns:n="http://example.com/ns" id="1" n:id="2">' \
                 '<!-- comment --><b/></n:a>'
        self.check_events(XmlEventCursor(source))
        self.check_events(XmlEventCursor(source, defuse='never'))
        self.check_events(XmlEventCursor(source.encode('utf-8')))
        self.check_events(XmlEventCursor(io.StringIO(source)))

    def test_position_description(self):
        cursor = XmlEventCursor('<a><b/></a>')
        self.assertEqual(cursor.position_description, 'START_DOCUMENT (path: /, event #0)')
        cursor.next()
        cursor.next()
        self.assertEqual(cursor.position_description, 'START_TAG b (path: /a/b, event #2)')
        self.assertEqual(repr(cursor), 'XmlEventCursor(START_TAG b (path: /a/b, event #2))')

    def test_next_tag(self):
        cursor = XmlEventCursor('<a><?pi x?><!-- c --><b/></a>')
        self.assertEqual(cursor.next_tag(), START_TAG)
        self.assertEqual(cursor.next_tag(), START_TAG)
        self.assertEqual(cursor.name, 'b')

    def test_find_start(self):
        cursor = XmlEventCursor('<a><b><c/></b><c x="1"/></a>')
        self.assertTrue(cursor.find_start(None, 'c'))
        self.assertIsNone(cursor.get_attribute_value(None, 'x'))
        self.assertTrue(cursor.find_start(None, 'c'))
        self.assertEqual(cursor.get_attribute_value(None, 'x'), '1')
        self.assertFalse(cursor.find_start(None, 'c'))
        self.assertEqual(cursor.event_type, END_DOCUMENT)

    def test_skip_subtree(self):
        cursor = XmlEventCursor('<a><b><c/><d>t<b/></d></b><e/></a>')
        cursor.next_tag()
        cursor.next_tag()
        elem = cursor.elem
        cursor.skip_subtree()
        self.assertTrue(cursor.is_end(None, 'b'))
        self.assertIs(cursor.elem, elem)
        cursor.next_tag()
        self.assertTrue(cursor.is_start(None, 'e'))

        cursor.next_tag()
        with self.assertRaises(WsdlParseError):
            cursor.skip_subtree()

    def test_skip_truncated_subtree(self):
        cursor = XmlEventCursor('<a><b><c/>')
        cursor.next_tag()
        with self.assertRaises(WsdlMissingEndTagError):
            cursor.skip_subtree()

    def test_truncated_input(self):
        cursor = XmlEventCursor('<a><b/>')
        self.assertEqual(cursor.next(), START_TAG)
        self.assertEqual(cursor.next(), START_TAG)
        self.assertEqual(cursor.next(), END_TAG)
        self.assertEqual(cursor.next(), END_DOCUMENT)

        cursor = XmlEventCursor('<a><b x="1"')
        self.assertEqual(cursor.next(), START_TAG)
        self.assertEqual(cursor.next(), END_DOCUMENT)
        self.assertEqual(cursor.path, '/a')

    def test_invalid_xml(self):
        cursor = XmlEventCursor('<a><b></a>')
        with self.assertRaises(WsdlParseError) as ctx:
            while cursor.next() != END_DOCUMENT:
                pass
        self.assertNotIsInstance(ctx.exception, WsdlMissingEndTagError)
        self.assertIn('invalid XML data', str(ctx.exception))

        cursor = XmlEventCursor('', defuse='never')
        with self.assertRaises(WsdlParseError):
            cursor.next()

        for source in ('', '  '):
            cursor = XmlEventCursor(source)
            with self.assertRaises(WsdlParseError):
                cursor.next()

    def test_defuse(self):
        source = '<!DOCTYPE a [<!ENTITY e "x">]><a>&e;</a>'
        cursor = XmlEventCursor(source, defuse='never')
        self.assertEqual(cursor.next(), START_TAG)

        cursor = XmlEventCursor(source, defuse='always')
        with self.assertRaises(WsdlParseError):
            cursor.next()

        cursor = XmlEventCursor(source)
        with self.assertRaises(WsdlParseError):
            cursor.next()

    def test_wrong_arguments(self):
        with self.assertRaises(WsdlTypesValueError):
            XmlEventCursor('<a/>', defuse='remote')
        with self.assertRaises(WsdlTypesTypeError):
            XmlEventCursor('<a/>', defuse=None)
        with self.assertRaises(WsdlTypesTypeError):
            XmlEventCursor(10)
        with self.assertRaises(WsdlTypesValueError):
            XmlEventCursor(str(CASES_DIR.joinpath('missing.wsdl')))

    def test_file_source(self):
        with XmlEventCursor(str(CASES_DIR.joinpath('vehicles.xsd'))) as cursor:
            self.assertIsNotNone(cursor._fp)
            self.assertEqual(cursor.next_tag(), START_TAG)
            self.assertEqual(cursor.name, 'schema')
        self.assertIsNone(cursor._fp)

        cursor = XmlEventCursor(CASES_DIR.joinpath('vehicles.xsd'))
        while cursor.next() != END_DOCUMENT:
            pass
        self.assertIsNone(cursor._fp)

    def test_max_xml_depth(self):
        max_xml_depth = limits.MAX_XML_DEPTH
        try:
            limits.MAX_XML_DEPTH = 2
            cursor = XmlEventCursor('<a><b><c/></b></a>')
            cursor.next()
            cursor.next()
            with self.assertRaises(WsdlTypesResourceExceeded):
                cursor.next()
        finally:
            limits.MAX_XML_DEPTH = max_xml_depth


if __name__ == '__main__':
    unittest.main()
