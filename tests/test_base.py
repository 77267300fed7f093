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
"""Tests on the base classes of the SED-ML object model"""
import unittest
import copy

from lxml import etree

from libsedml import SedDocument, SedModel, SedChangeAttribute, SedTask, \
    SedSimulation, SedUniformTimeCourse, SedAlgorithm, SedOutput, SedPlot2D, \
    SedPlot3D, SedReport, SedDataGenerator, SedNamespaces, SedTypeCode, \
    SedListOf, SedAttributeError, SedTypeError, SedValueError, SedConstructorException
from libsedml.base import snake_case, local_name, unqualified_tag, SedChildElement
from libsedml.names import SEDML_NAMESPACE, SEDML_LANGUAGE_SBML
from libsedml.testing import run_libsedml_tests

XHTML_PARAGRAPH = '<p xmlns="http://www.w3.org/1999/xhtml">A note</p>'


class TestHelpers(unittest.TestCase):

    def test_snake_case(self):
        self.assertEqual(snake_case('model'), 'model')
        self.assertEqual(snake_case('uniformTimeCourse'), 'uniform_time_course')
        self.assertEqual(snake_case('dataSet'), 'data_set')
        self.assertEqual(snake_case('changeXML'), 'change_xml')
        self.assertEqual(snake_case('plot2D'), 'plot2d')

    def test_local_name(self):
        self.assertEqual(local_name('{http://sed-ml.org/}model'), 'model')
        self.assertEqual(local_name('model'), 'model')

    def test_unqualified_tag(self):
        elem = etree.fromstring('<x:info xmlns:x="http://example.test/ns"><detail/></x:info>')
        self.assertEqual(unqualified_tag(elem), 'detail')
        self.assertIsNone(unqualified_tag(etree.Element('{http://example.test/ns}a')))
        self.assertEqual(unqualified_tag(etree.Element('info')), 'info')

    def test_abstract_child_element(self):
        with self.assertRaises(TypeError):
            SedChildElement('{http://sed-ml.org/}algorithm')


class TestSedBase(unittest.TestCase):

    def test_init(self):
        model = SedModel()
        self.assertEqual(model.level, 1)
        self.assertEqual(model.version, 1)
        self.assertEqual(model.namespaces, SedNamespaces(1, 1))
        self.assertEqual(model.element_name, 'model')
        self.assertEqual(model.type_code, SedTypeCode.SEDML_MODEL)
        self.assertEqual(model.tag, '{%s}model' % SEDML_NAMESPACE)
        self.assertEqual(model.line, 0)
        self.assertEqual(model.column, 0)
        self.assertIsNone(model.parent)
        self.assertIsNone(model.document)
        self.assertIs(model.root, model)

        model = SedModel(1, 1, id='model1', language=SEDML_LANGUAGE_SBML, source='m.xml')
        self.assertEqual(model.id, 'model1')
        self.assertEqual(model.source, 'm.xml')
        self.assertEqual(repr(model), "SedModel(id='model1')")

        namespaces = SedNamespaces(namespaces={'sbml': 'http://www.sbml.org/sbml/level2/version4'})
        model = SedModel(namespaces)
        self.assertEqual(model.namespaces, namespaces)
        self.assertIsNot(model.namespaces, namespaces)
        self.assertEqual(SedModel(sed_namespaces=namespaces).namespaces, namespaces)

    def test_invalid_init_arguments(self):
        with self.assertRaises(SedConstructorException) as ctx:
            SedModel(2, 1)
        self.assertEqual(ctx.exception.element_name, 'model')
        self.assertIn("(element 'model')", str(ctx.exception))

        with self.assertRaises(SedConstructorException):
            SedModel(0)
        with self.assertRaises(SedConstructorException):
            SedModel('1', '1')
        with self.assertRaises(SedTypeError):
            SedModel(sed_namespaces={'': SEDML_NAMESPACE})
        with self.assertRaises(SedTypeError):
            SedModel(identifier='model1')
        with self.assertRaises(SedValueError):
            SedModel(id='1model')

    def test_abstract_classes(self):
        for cls in (SedSimulation, SedOutput):
            with self.assertRaises(TypeError):
                cls()

        self.assertTrue(issubclass(SedConstructorException, SedValueError))

    def test_equality_and_hashing(self):
        self.assertEqual(SedModel(id='m1'), SedModel(id='m1'))
        self.assertNotEqual(SedModel(id='m1'), SedModel(id='m2'))
        self.assertNotEqual(SedModel(id='m1'), SedTask(id='m1'))
        self.assertNotEqual(SedModel(id='m1'), 'm1')
        with self.assertRaises(TypeError):
            hash(SedModel())

    def test_is_set_and_unset(self):
        simulation = SedUniformTimeCourse(id='sim1', number_of_points=10)
        self.assertTrue(simulation.is_set('id'))
        self.assertTrue(simulation.is_set('numberOfPoints'))
        self.assertTrue(simulation.is_set('number_of_points'))
        self.assertFalse(simulation.is_set('algorithm'))
        self.assertFalse(simulation.is_set('notes'))

        simulation.create_algorithm()
        self.assertTrue(simulation.is_set('algorithm'))
        simulation.unset('algorithm')
        self.assertIsNone(simulation.algorithm)

        simulation.unset('numberOfPoints')
        self.assertIsNone(simulation.number_of_points)

        with self.assertRaises(SedAttributeError):
            simulation.is_set('unknown')

    def test_missing_attributes_and_elements(self):
        model = SedModel()
        self.assertListEqual(model.get_missing_attributes(), ['id', 'language', 'source'])
        self.assertFalse(model.has_required_attributes())
        self.assertTrue(model.has_required_elements())

        model.id = 'model1'
        model.language = SEDML_LANGUAGE_SBML
        model.source = 'model.xml'
        self.assertListEqual(model.get_missing_attributes(), [])
        self.assertTrue(model.has_required_attributes())

        data_generator = SedDataGenerator(id='dg1')
        self.assertListEqual(data_generator.get_missing_elements(), ['math'])
        self.assertFalse(data_generator.has_required_elements())
        data_generator.math = 'x + 1'
        self.assertTrue(data_generator.has_required_elements())


class TestChildElements(unittest.TestCase):

    def test_single_child(self):
        simulation = SedUniformTimeCourse(id='sim1')
        algorithm = SedAlgorithm(kisao_id='KISAO:0000019')
        simulation.algorithm = algorithm
        self.assertIsNot(simulation.algorithm, algorithm)
        self.assertEqual(simulation.algorithm, algorithm)
        self.assertIs(simulation.algorithm.parent, simulation)
        self.assertIsNone(algorithm.parent)

        with self.assertRaises(SedTypeError):
            simulation.algorithm = SedTask()

        algorithm = simulation.create_algorithm()
        self.assertIs(simulation.algorithm, algorithm)
        self.assertIsNone(algorithm.kisao_id)

        del simulation.algorithm
        self.assertIsNone(simulation.algorithm)

        simulation = SedUniformTimeCourse(algorithm=SedAlgorithm(kisao_id='KISAO:0000019'))
        self.assertEqual(simulation.algorithm.kisao_id, 'KISAO:0000019')

    def test_navigation(self):
        document = SedDocument()
        model = document.create_model()
        change = model.create_change_attribute()

        self.assertIs(model.parent, document)
        self.assertIs(change.parent, model)
        self.assertIs(change.root, document)
        self.assertIs(change.document, document)
        self.assertIs(change.namespaces, document.namespaces)

        model.id = 'model1'
        change.metaid = 'change1'
        self.assertIs(document.get_element_by_sid('model1'), model)
        self.assertIs(document.get_element_by_metaid('change1'), change)
        self.assertIsNone(document.get_element_by_sid('model2'))
        self.assertIsNone(document.get_element_by_metaid('change2'))

        self.assertListEqual(list(document.iter_children()), [model])
        self.assertListEqual(document.get_all_elements(), [model, change])

    def test_clone(self):
        document = SedDocument()
        model = document.create_model()
        model.id = 'model1'
        model.set_notes(XHTML_PARAGRAPH)
        change = model.create_change_attribute()
        change.target = "/sbml:sbml/sbml:model/@id"
        change.new_value = 'm1'

        other = model.clone()
        self.assertIsNot(other, model)
        self.assertEqual(other, model)
        self.assertIsNone(other.parent)
        self.assertIs(other.get_change(0).parent, other)
        self.assertIsNot(other.notes, model.notes)
        self.assertEqual(other.notes_string, model.notes_string)

        other.get_change(0).new_value = 'm2'
        self.assertEqual(change.new_value, 'm1')

        self.assertEqual(copy.copy(model), model)
        self.assertEqual(copy.deepcopy(model), model)
        self.assertIsNone(copy.deepcopy(model).parent)

    def test_to_dict(self):
        simulation = SedUniformTimeCourse(
            id='sim1', initial_time=0, output_start_time=0,
            output_end_time=10, number_of_points=5
        )
        simulation.create_algorithm().kisao_id = 'KISAO:0000019'
        self.assertDictEqual(simulation.to_dict(), {
            '@id': 'sim1',
            '@initialTime': 0.0,
            '@outputStartTime': 0.0,
            '@outputEndTime': 10.0,
            '@numberOfPoints': 5,
            'algorithm': {'@kisaoID': 'KISAO:0000019'},
        })

        plot = SedPlot2D(id='plot1')
        plot.create_curve().id = 'c1'
        plot.create_curve().id = 'c2'
        self.assertDictEqual(plot.to_dict(), {
            '@id': 'plot1',
            'listOfCurves': {'curve': [{'@id': 'c1'}, {'@id': 'c2'}]}
        })


class TestNotesAndAnnotation(unittest.TestCase):

    def test_notes(self):
        model = SedModel()
        self.assertIsNone(model.notes)
        self.assertEqual(model.notes_string, '')

        model.notes = XHTML_PARAGRAPH
        self.assertEqual(model.notes_string, '<notes>%s</notes>' % XHTML_PARAGRAPH)
        self.assertTrue(model.is_set('notes'))

        model.set_notes('<notes>%s</notes>' % XHTML_PARAGRAPH)
        self.assertEqual(model.notes_string, '<notes>%s</notes>' % XHTML_PARAGRAPH)

        model.append_notes(XHTML_PARAGRAPH)
        self.assertEqual(len(model.notes), 2)

        del model.notes
        self.assertIsNone(model.notes)

        model.append_notes(XHTML_PARAGRAPH)
        self.assertEqual(len(model.notes), 1)
        model.unset_notes()
        self.assertIsNone(model.notes)

        model.notes = XHTML_PARAGRAPH
        model.notes = None
        self.assertIsNone(model.notes)

    def test_notes_with_xhtml_markup(self):
        model = SedModel()
        model.set_notes('A note', add_xhtml_markup=True)
        self.assertEqual(model.notes_string, '<notes>%s</notes>' % XHTML_PARAGRAPH)

    def test_invalid_notes(self):
        model = SedModel()
        with self.assertRaises(SedValueError):
            model.set_notes('A note')
        with self.assertRaises(SedValueError):
            model.set_notes('<p>A note</p>')
        with self.assertRaises(SedValueError):
            model.set_notes('<p xmlns="http://www.w3.org/1999/xhtml">A note')
        with self.assertRaises(SedTypeError):
            model.set_notes(10)

    def test_annotation(self):
        content = '<x:info xmlns:x="http://example.test/ns" author="sed-team"/>'
        model = SedModel()
        model.annotation = content
        self.assertEqual(model.annotation_string, '<annotation>%s</annotation>' % content)

        model.append_annotation('<annotation>%s</annotation>' % content)
        self.assertEqual(len(model.annotation), 2)

        model.unset_annotation()
        self.assertIsNone(model.annotation)
        self.assertEqual(model.annotation_string, '')

        model.set_annotation(content.encode('utf-8'))
        self.assertEqual(len(model.annotation), 1)
        del model.annotation
        self.assertFalse(model.is_set('annotation'))

    def test_annotation_namespaces(self):
        model = SedModel()
        with self.assertRaises(SedValueError):
            model.annotation = '<info/>'
        with self.assertRaises(SedValueError):
            model.annotation = '<x:info xmlns:x="http://example.test/ns"><detail/></x:info>'
        with self.assertRaises(SedValueError):
            model.annotation = '<info xmlns="%s"/>' % SEDML_NAMESPACE
        with self.assertRaises(SedValueError):
            model.annotation = etree.Element('info')
        self.assertIsNone(model.annotation)

        model.annotation = '<info xmlns="http://example.test/ns"><detail/></info>'
        self.assertEqual(model.annotation[0][0].tag, '{http://example.test/ns}detail')
        self.assertEqual(model.annotation_string,
                         '<annotation><info xmlns="http://example.test/ns">'
                         '<detail/></info></annotation>')


class TestSedListOf(unittest.TestCase):

    def setUp(self):
        self.document = SedDocument()
        self.model = SedModel(id='model1', language=SEDML_LANGUAGE_SBML, source='m.xml')

    def test_list_descriptor(self):
        items = self.document.list_of_models
        self.assertIsInstance(items, SedListOf)
        self.assertIs(items, self.document.list_of_models)
        self.assertEqual(items.element_name, 'listOfModels')
        self.assertIs(items.parent, self.document)
        self.assertEqual(items.type_code, SedTypeCode.SEDML_LIST_OF)
        self.assertEqual(self.document.list_of_data_generators.element_name,
                         'listOfDataGenerators')

        with self.assertRaises(SedAttributeError):
            self.document.list_of_models = []

    def test_item_classes(self):
        self.assertListEqual(self.document.list_of_outputs.item_classes,
                             [SedPlot2D, SedPlot3D, SedReport])
        self.assertListEqual(self.document.list_of_simulations.item_classes,
                             [SedUniformTimeCourse])

    def test_append(self):
        items = self.document.list_of_models
        model = items.append(self.model)
        self.assertIsNot(model, self.model)
        self.assertIs(model.parent, self.document)
        self.assertIsNone(self.model.parent)
        self.assertEqual(len(items), 1)
        self.assertEqual(items.size, 1)

        with self.assertRaises(SedValueError):
            items.append(None)
        with self.assertRaises(SedTypeError):
            items.append(SedTask(id='task1'))

    def test_append_and_own(self):
        items = self.document.list_of_models
        model = items.append_and_own(self.model)
        self.assertIs(model, self.model)
        self.assertIs(model.parent, self.document)

        with self.assertRaises(SedValueError):
            SedDocument().list_of_models.append_and_own(model)

    def test_insert_and_setitem(self):
        items = self.document.list_of_models
        items.append(self.model)
        items.insert(0, SedModel(id='model0'))
        self.assertListEqual([m.id for m in items], ['model0', 'model1'])

        old = items[0]
        items[0] = SedModel(id='model2')
        self.assertEqual(items[0].id, 'model2')
        self.assertIs(items[0].parent, self.document)
        self.assertIsNone(old.parent)

        with self.assertRaises(SedTypeError):
            items[0:1] = [SedModel(id='model3')]

        removed = items[1]
        del items[1]
        self.assertEqual(len(items), 1)
        self.assertIsNone(removed.parent)

    def test_create(self):
        items = self.document.list_of_outputs
        report = items.create(SedReport)
        self.assertIsInstance(report, SedReport)
        self.assertIs(report.parent, self.document)
        self.assertIs(items[-1], report)

        with self.assertRaises(SedTypeError):
            items.create(SedTask)
        with self.assertRaises(TypeError):
            items.create()

        self.assertIsInstance(self.document.list_of_tasks.create(), SedTask)

    def test_get_and_remove(self):
        items = self.document.list_of_models
        items.append(self.model)
        items.append(SedModel(id='model2'))

        self.assertEqual(items.get(0).id, 'model1')
        self.assertEqual(items.get('model2').id, 'model2')
        self.assertIsNone(items.get(2))
        self.assertIsNone(items.get(-1))
        self.assertIsNone(items.get('model3'))

        model = items.remove('model1')
        self.assertEqual(model.id, 'model1')
        self.assertIsNone(model.parent)
        self.assertIsNone(items.remove('model1'))
        self.assertIsNone(items.remove(5))
        self.assertIsNone(items.remove(model))

        model = items.get(0)
        self.assertIs(items.remove(model), model)
        self.assertEqual(len(items), 0)

    def test_generated_methods(self):
        document = self.document
        model = document.add_model(self.model)
        self.assertIs(document.get_model('model1'), model)
        self.assertIs(document.get_model(0), model)
        self.assertEqual(document.num_models(), 1)
        self.assertIs(document.remove_model('model1'), model)
        self.assertEqual(document.num_models(), 0)

        self.assertIsInstance(document.create_uniform_time_course(), SedUniformTimeCourse)
        self.assertIsInstance(document.create_task(), SedTask)
        self.assertIsInstance(document.create_data_generator(), SedDataGenerator)
        self.assertIsInstance(document.create_plot2d(), SedPlot2D)
        self.assertIsInstance(document.create_plot3d(), SedPlot3D)
        self.assertIsInstance(document.create_report(), SedReport)
        self.assertEqual(document.num_simulations(), 1)
        self.assertEqual(document.num_outputs(), 3)
        self.assertEqual(document.num_data_generators(), 1)

        model = document.create_model()
        for name in ('create_change_attribute', 'create_change_xml', 'create_add_xml',
                     'create_remove_xml', 'create_compute_change'):
            getattr(model, name)()
        self.assertListEqual([c.element_name for c in model.list_of_changes],
                             ['changeAttribute', 'changeXML', 'addXML',
                              'removeXML', 'computeChange'])
        self.assertIsInstance(model.get_change(0), SedChangeAttribute)

        self.assertEqual(document.get_data_generator(0).create_variable().element_name,
                         'variable')
        self.assertEqual(document.get_output(2).create_data_set().element_name, 'dataSet')
        self.assertEqual(document.get_output(1).create_surface().element_name, 'surface')


if __name__ == '__main__':
    run_libsedml_tests('base')
