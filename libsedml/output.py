#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Outputs: 2D plots, 3D plots and reports, with their curves, surfaces and data sets."""
from libsedml.attributes import StringAttribute, SIdAttribute, SIdRefAttribute, \
    BooleanAttribute
from libsedml.base import SedBase, SedTypeCode, ListOf

__all__ = ['SedCurve', 'SedSurface', 'SedDataSet', 'SedOutput',
           'SedPlot2D', 'SedPlot3D', 'SedReport']


class SedCurve(SedBase):
    """A curve of a 2D plot, with references to the data generators of the axes."""
    element_name = 'curve'
    type_code = SedTypeCode.SEDML_OUTPUT_CURVE

    id = SIdAttribute(required=True)
    name = StringAttribute()
    log_x = BooleanAttribute('logX', required=True)
    log_y = BooleanAttribute('logY', required=True)
    x_data_reference = SIdRefAttribute('xDataReference', required=True)
    y_data_reference = SIdRefAttribute('yDataReference', required=True)


class SedSurface(SedCurve):
    """A surface of a 3D plot, a curve with a third axis."""
    element_name = 'surface'
    type_code = SedTypeCode.SEDML_OUTPUT_SURFACE

    log_z = BooleanAttribute('logZ', required=True)
    z_data_reference = SIdRefAttribute('zDataReference', required=True)


class SedDataSet(SedBase):
    """A column of a report, labelled and bound to a data generator."""
    element_name = 'dataSet'
    type_code = SedTypeCode.SEDML_OUTPUT_DATASET

    id = SIdAttribute(required=True)
    name = StringAttribute()
    label = StringAttribute(required=True)
    data_reference = SIdRefAttribute('dataReference', required=True)


class SedOutput(SedBase):
    """Abstract base class of outputs."""
    type_code = SedTypeCode.SEDML_OUTPUT

    id = SIdAttribute(required=True)
    name = StringAttribute()


class SedPlot2D(SedOutput):
    element_name = 'plot2D'
    type_code = SedTypeCode.SEDML_OUTPUT_PLOT2D

    list_of_curves: ListOf[SedCurve] = ListOf(SedCurve)


class SedPlot3D(SedOutput):
    element_name = 'plot3D'
    type_code = SedTypeCode.SEDML_OUTPUT_PLOT3D

    list_of_surfaces: ListOf[SedSurface] = ListOf(SedSurface)


class SedReport(SedOutput):
    element_name = 'report'
    type_code = SedTypeCode.SEDML_OUTPUT_REPORT

    list_of_data_sets: ListOf[SedDataSet] = ListOf(SedDataSet)
