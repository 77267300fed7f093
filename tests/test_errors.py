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
"""Tests on diagnostics and error logs"""
import unittest
import copy
import io

from libsedml import SedError, SedErrorLog, SedErrorCode, SedErrorSeverity, \
    SedErrorCategory, SedTypeError
from libsedml.errors import ERROR_TABLE, get_public_severity
from libsedml.testing import run_libsedml_tests


class TestSedError(unittest.TestCase):

    def test_error_from_table(self):
        error = SedError(SedErrorCode.InvalidIdSyntax, details="'1x' is not valid", line=7)
        self.assertEqual(error.error_id, 10310)
        self.assertIs(error.code, SedErrorCode.InvalidIdSyntax)
        self.assertEqual(error.severity, SedErrorSeverity.ERROR)
        self.assertEqual(error.category, SedErrorCategory.IDENTIFIER_CONSISTENCY)
        self.assertEqual(error.short_message, "Invalid 'id' attribute value syntax")
        self.assertTrue(error.message.startswith("The value of an 'id' attribute"))
        self.assertTrue(error.message.endswith("\n'1x' is not valid"))
        self.assertEqual(error.line, 7)
        self.assertEqual(error.column, 0)
        self.assertEqual(error.package, 'core')
        self.assertTrue(error.is_valid())
        self.assertTrue(error.is_error())
        self.assertFalse(error.is_warning())
        self.assertFalse(error.is_xml_error())

    def test_error_without_details(self):
        error = SedError(SedErrorCode.EmptyListElement)
        self.assertEqual(error.message, ERROR_TABLE[SedErrorCode.EmptyListElement].message)

    def test_unknown_error_code(self):
        error = SedError(123456, details='custom diagnostic',
                         severity=SedErrorSeverity.WARNING,
                         category=SedErrorCategory.GENERAL_CONSISTENCY)
        self.assertEqual(error.code, 123456)
        self.assertFalse(error.is_valid())
        self.assertTrue(error.is_warning())
        self.assertEqual(error.message, 'custom diagnostic')
        self.assertEqual(error.short_message, '')
        self.assertEqual(error.category_as_string, 'SED-ML component consistency')

        with self.assertRaises(SedTypeError):
            SedError('10310')

    def test_public_severities(self):
        self.assertEqual(get_public_severity(SedErrorSeverity.SCHEMA_ERROR),
                         SedErrorSeverity.ERROR)
        self.assertEqual(get_public_severity(SedErrorSeverity.GENERAL_WARNING),
                         SedErrorSeverity.WARNING)
        self.assertEqual(get_public_severity(SedErrorSeverity.NOT_APPLICABLE),
                         SedErrorSeverity.INFO)
        self.assertEqual(get_public_severity(SedErrorSeverity.FATAL),
                         SedErrorSeverity.FATAL)

        error = SedError(SedErrorCode.NotSchemaConformant)
        self.assertTrue(error.is_error())
        self.assertEqual(error.severity_as_string, 'Error')

        error = SedError(SedErrorCode.UnknownCoreAttribute)
        self.assertTrue(error.is_warning())
        self.assertEqual(error.severity_as_string, 'Warning')

        error = SedError(SedErrorCode.XMLOutOfMemory)
        self.assertTrue(error.is_fatal())
        self.assertTrue(error.is_xml_error())
        self.assertEqual(error.category_as_string, 'XML content')

    def test_string_representation(self):
        error = SedError(SedErrorCode.BadlyFormedXML, line=3)
        self.assertEqual(str(error), 'line 3: (1006 [Error]) The XML content is not well-formed.')
        self.assertEqual(repr(error), "SedError(error_id=1006, line=3, severity='Error')")

    def test_adjust_error_id(self):
        error = SedError(SedErrorCode.UnknownCoreAttribute)
        error.adjust_error_id(1000000)
        self.assertEqual(error.error_id, SedErrorCode.UnknownCoreAttribute)

        error = SedError(100, package='ext', pkg_version=2)
        error.adjust_error_id(1000000)
        self.assertEqual(error.error_id, 1000100)
        self.assertEqual(error.pkg_version, 2)

    def test_clone(self):
        error = SedError(SedErrorCode.DuplicateComponentId, details='model1', line=5)
        other = error.clone()
        self.assertIsNot(other, error)
        self.assertEqual(str(other), str(error))
        self.assertEqual(str(copy.copy(error)), str(error))

        other.line = 6
        self.assertEqual(error.line, 5)

    def test_error_table_entries(self):
        for code, entry in ERROR_TABLE.items():
            self.assertIsInstance(code, SedErrorCode)
            self.assertIn(entry.category, SedErrorCategory)
            self.assertIn(entry.severity, SedErrorSeverity)
            self.assertTrue(entry.short_message)
            self.assertTrue(entry.message)


class TestSedErrorLog(unittest.TestCase):

    def setUp(self):
        self.log = SedErrorLog()
        self.log.log_error(SedErrorCode.UnknownCoreAttribute, "attribute 'color'", line=2)
        self.log.log_error(SedErrorCode.InvalidIdSyntax, "'1x'", line=4)
        self.log.log_error(SedErrorCode.XMLOutOfMemory)

    def test_sequence_protocol(self):
        self.assertEqual(len(self.log), 3)
        self.assertEqual(self.log[1].error_id, SedErrorCode.InvalidIdSyntax)
        self.assertEqual([e.line for e in self.log], [2, 4, 0])
        self.assertEqual(len(self.log[:2]), 2)

    def test_get_error(self):
        self.assertIs(self.log.get_error(0), self.log[0])
        self.assertIsNone(self.log.get_error(3))
        self.assertIsNone(self.log.get_error(-1))

    def test_counters(self):
        self.assertEqual(self.log.get_num_errors(), 3)
        self.assertEqual(self.log.get_num_errors(SedErrorSeverity.WARNING), 1)
        self.assertEqual(self.log.get_num_errors(SedErrorSeverity.ERROR), 1)
        self.assertEqual(self.log.get_num_failures_with_severity(SedErrorSeverity.FATAL), 1)
        self.assertEqual(self.log.get_num_failures_with_severity(
            SedErrorSeverity.GENERAL_WARNING), 1)
        self.assertEqual(self.log.get_num_failures(), 2)

    def test_add(self):
        error = SedError(SedErrorCode.DuplicateMetaId)
        self.log.add(error)
        self.assertEqual(len(self.log), 4)
        self.assertIsNot(self.log[-1], error)
        self.assertTrue(self.log.contains(SedErrorCode.DuplicateMetaId))

        with self.assertRaises(SedTypeError):
            self.log.add('error')

    def test_log_error_level_and_version(self):
        log = SedErrorLog(1, 2)
        error = log.log_error(SedErrorCode.NotUTF8)
        self.assertEqual((error.level, error.version), (1, 2))
        error = log.log_error(SedErrorCode.NotUTF8, level=3, version=1)
        self.assertEqual((error.level, error.version), (3, 1))

    def test_remove_and_clear(self):
        error = self.log.remove(SedErrorCode.InvalidIdSyntax)
        self.assertEqual(error.error_id, SedErrorCode.InvalidIdSyntax)
        self.assertFalse(self.log.contains(SedErrorCode.InvalidIdSyntax))
        self.assertIsNone(self.log.remove(SedErrorCode.InvalidIdSyntax))

        self.log.clear()
        self.assertEqual(len(self.log), 0)
        self.assertEqual(self.log.to_string(), '')

    def test_discard(self):
        first = self.log[0]
        self.log.discard([first, SedError(SedErrorCode.XMLOutOfMemory)])
        self.assertEqual(len(self.log), 2)
        self.assertEqual([e.error_id for e in self.log],
                         [SedErrorCode.InvalidIdSyntax, SedErrorCode.XMLOutOfMemory])
        self.log.discard([])
        self.assertEqual(len(self.log), 2)

    def test_print_errors(self):
        stream = io.StringIO()
        self.log.print_errors(stream)
        lines = stream.getvalue().splitlines()
        self.assertTrue(lines[0].startswith('line 2: (99994 [Warning])'))
        self.assertIn("attribute 'color'", stream.getvalue())
        self.assertEqual(stream.getvalue(), self.log.to_string())

    def test_to_dicts(self):
        data = self.log.to_dicts()
        self.assertEqual(len(data), 3)
        self.assertEqual(data[1]['id'], 10310)
        self.assertEqual(data[1]['line'], 4)
        self.assertEqual(data[1]['severity'], 'Error')
        self.assertEqual(data[1]['category'], 'SED-ML identifier consistency')


if __name__ == '__main__':
    run_libsedml_tests('errors')
