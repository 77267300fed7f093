#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Data generators, with their variables and parameters."""
from typing import Any, Optional

from libsedml.attributes import StringAttribute, SIdAttribute, SIdRefAttribute, \
    XPathAttribute, URNAttribute, DoubleAttribute
from libsedml.base import ElementType, SedBase, SedTypeCode, ListOf
from libsedml.mathml import MathElement, get_formula
from libsedml.xpath import select_target

__all__ = ['SedVariable', 'SedParameter', 'SedDataGenerator']


class SedVariable(SedBase):
    """
    A reference to a quantity of a model, either an implicit symbol
    (e.g. the simulation time) or an XPath target into the model.
    """
    element_name = 'variable'
    type_code = SedTypeCode.SEDML_VARIABLE

    id = SIdAttribute(required=True)
    name = StringAttribute()
    symbol = URNAttribute()
    target = XPathAttribute()
    task_reference = SIdRefAttribute('taskReference')
    model_reference = SIdRefAttribute('modelReference')

    def select_target(self, model_root: ElementType) -> list[Any]:
        """Evaluates the target on the XML tree of a model, with the document namespaces."""
        return select_target(self.target or '', model_root, self.namespaces.xpath_namespaces())


class SedParameter(SedBase):
    element_name = 'parameter'
    type_code = SedTypeCode.SEDML_PARAMETER

    id = SIdAttribute(required=True)
    name = StringAttribute()
    value = DoubleAttribute(required=True)


class SedDataGenerator(SedBase):
    """
    A data generator computes a quantity from the variables of task results
    and from parameters, using a math expression.
    """
    element_name = 'dataGenerator'
    type_code = SedTypeCode.SEDML_DATAGENERATOR

    id = SIdAttribute(required=True)
    name = StringAttribute()

    list_of_variables: ListOf[SedVariable] = ListOf(SedVariable)
    list_of_parameters: ListOf[SedParameter] = ListOf(SedParameter)
    math = MathElement(required=True)

    @property
    def formula(self) -> Optional[str]:
        """The L3 infix rendering of the math, `None` if the math is not set."""
        return get_formula(self)
