#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Simulations, simulation algorithms and tasks."""
from libsedml.names import SED_ALGORITHM
from libsedml.attributes import StringAttribute, SIdAttribute, SIdRefAttribute, \
    DoubleAttribute, IntAttribute
from libsedml.base import SedBase, SedTypeCode, SedChild

__all__ = ['SedAlgorithm', 'SedSimulation', 'SedUniformTimeCourse', 'SedTask']


class SedAlgorithm(SedBase):
    """A simulation algorithm, identified by a KiSAO term (e.g. 'KISAO:0000019')."""
    element_name = 'algorithm'
    type_code = SedTypeCode.SEDML_SIMULATION_ALGORITHM

    kisao_id = StringAttribute('kisaoID', required=True)


class SedSimulation(SedBase):
    """Abstract base class of simulation settings."""
    type_code = SedTypeCode.SEDML_SIMULATION

    id = SIdAttribute(required=True)
    name = StringAttribute()

    algorithm: SedChild[SedAlgorithm] = SedChild(SED_ALGORITHM, SedAlgorithm)


class SedUniformTimeCourse(SedSimulation):
    """
    A time course simulation with output points uniformly spaced between
    the output start time and the output end time.
    """
    element_name = 'uniformTimeCourse'
    type_code = SedTypeCode.SEDML_SIMULATION_UNIFORMTIMECOURSE

    initial_time = DoubleAttribute('initialTime', required=True)
    output_start_time = DoubleAttribute('outputStartTime', required=True)
    output_end_time = DoubleAttribute('outputEndTime', required=True)
    number_of_points = IntAttribute('numberOfPoints', required=True)

    def get_output_times(self) -> list[float]:
        """
        Returns the times of the output points, an empty list if the
        time course is not completely defined.
        """
        start = self.output_start_time
        end = self.output_end_time
        points = self.number_of_points
        if start is None or end is None or not points or points < 1:
            return []

        step = (end - start) / points
        return [start + k * step for k in range(points + 1)]


class SedTask(SedBase):
    """A task runs a simulation on a model."""
    element_name = 'task'
    type_code = SedTypeCode.SEDML_TASK

    id = SIdAttribute(required=True)
    name = StringAttribute()
    model_reference = SIdRefAttribute('modelReference', required=True)
    simulation_reference = SIdRefAttribute('simulationReference', required=True)
