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
"""Tests on MathML support"""
import unittest

import libsbml
from lxml import etree

from libsedml import SedDataGenerator, SedComputeChange, SedTypeError, SedValueError, \
    parse_formula, formula_to_string
from libsedml.names import MATHML_NAMESPACE, MATHML_MATH
from libsedml.mathml import read_mathml, write_mathml, copy_math, is_well_formed, iter_names
from libsedml.testing import run_libsedml_tests

MATHML_SAMPLE = """<math xmlns="http://www.w3.org/1998/Math/MathML">
  <apply>
    <times/>
    <ci> scale </ci>
    <ci> x </ci>
  </apply>
</math>"""


class TestMathFunctions(unittest.TestCase):

    def test_parse_formula(self):
        ast = parse_formula('scale * x')
        self.assertIsInstance(ast, libsbml.ASTNode)
        self.assertEqual(formula_to_string(ast), 'scale * x')

        with self.assertRaises(SedValueError):
            parse_formula('scale * ')
        with self.assertRaises(SedTypeError):
            parse_formula(None)

    def test_read_mathml(self):
        ast = read_mathml(etree.fromstring(MATHML_SAMPLE))
        self.assertEqual(formula_to_string(ast), 'scale * x')

    def test_write_mathml(self):
        elem = write_mathml(parse_formula('k1 + 2'))
        self.assertEqual(elem.tag, MATHML_MATH)
        self.assertEqual(elem[0].tag, '{%s}apply' % MATHML_NAMESPACE)
        self.assertEqual(formula_to_string(read_mathml(elem)), 'k1 + 2')

    def test_copy_math(self):
        ast = parse_formula('a - b')
        other = copy_math(ast)
        self.assertIsNot(other, ast)
        self.assertEqual(formula_to_string(other), 'a - b')

    def test_is_well_formed(self):
        self.assertTrue(is_well_formed(parse_formula('a / b')))
        self.assertFalse(is_well_formed(None))
        self.assertFalse(is_well_formed(libsbml.ASTNode(libsbml.AST_DIVIDE)))

    def test_iter_names(self):
        self.assertListEqual(list(iter_names(parse_formula('a * (b + c) - sin(a)'))),
                             ['a', 'b', 'c', 'a'])
        self.assertListEqual(list(iter_names(parse_formula('2 * pi'))), [])


class TestMathElement(unittest.TestCase):

    def test_assignment(self):
        data_generator = SedDataGenerator(id='dg1')
        self.assertIsNone(data_generator.math)
        self.assertIsNone(data_generator.formula)

        data_generator.math = 'scale * x'
        self.assertIsInstance(data_generator.math, libsbml.ASTNode)
        self.assertEqual(data_generator.formula, 'scale * x')

        ast = parse_formula('y')
        data_generator.math = ast
        self.assertIsNot(data_generator.math, ast)
        self.assertEqual(data_generator.formula, 'y')

        data_generator.math = None
        self.assertIsNone(data_generator.math)

    def test_invalid_assignment(self):
        change = SedComputeChange()
        with self.assertRaises(SedTypeError):
            change.math = 10
        with self.assertRaises(SedValueError):
            change.math = 'x +'
        with self.assertRaises(SedValueError):
            change.math = libsbml.ASTNode(libsbml.AST_DIVIDE)
        self.assertFalse(change.is_set('math'))

    def test_clone_copies_math(self):
        data_generator = SedDataGenerator(id='dg1', math='x + 1')
        other = data_generator.clone()
        self.assertIsNot(other.math, data_generator.math)
        self.assertEqual(other.formula, 'x + 1')
        self.assertEqual(other, data_generator)

    def test_write_and_to_dict(self):
        data_generator = SedDataGenerator(id='dg1', math='x + 1')
        elem = data_generator.write_element()
        self.assertEqual(elem[0].tag, MATHML_MATH)
        self.assertDictEqual(data_generator.to_dict(), {'@id': 'dg1', 'math': 'x + 1'})


if __name__ == '__main__':
    run_libsedml_tests('mathml')
