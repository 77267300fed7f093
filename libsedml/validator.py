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
Consistency checks of SED-ML documents: required attributes and elements,
identifiers, cross references between the parts of a document, and the
semantics of simulations, variables, targets and math.
"""
import re
from collections.abc import Iterator
from typing import Optional

from libsedml import limits
from libsedml.exceptions import SedValidationError
from libsedml.translation import gettext as _
from libsedml.errors import SedErrorCode, SedError
from libsedml.base import SedBase
from libsedml.mathml import is_well_formed, iter_names
from libsedml.xpath import check_target
from libsedml.data import SedVariable, SedParameter, SedDataGenerator
from libsedml.model import SedModel, SedChange, SedComputeChange
from libsedml.simulation import SedAlgorithm, SedUniformTimeCourse, SedTask
from libsedml.output import SedCurve, SedSurface, SedDataSet
from libsedml.document import SedDocument
from libsedml.logger import logger

__all__ = ['iter_errors', 'is_valid', 'validate']

KISAO_ID_PATTERN = re.compile(r'^KISAO:\d{7}$')


class ConsistencyChecker:
    """Collects the consistency errors of a SED-ML document."""

    def __init__(self, document: SedDocument) -> None:
        self.document = document
        self.namespaces = document.namespaces.xpath_namespaces()
        self.elements = [document] + document.get_all_elements()

        self.model_ids = {m.id for m in document.list_of_models if m.id}
        self.simulation_ids = {s.id for s in document.list_of_simulations if s.id}
        self.task_ids = {t.id for t in document.list_of_tasks if t.id}
        self.data_generator_ids = {d.id for d in document.list_of_data_generators if d.id}

    def error(self, error_id: int, obj: SedBase, details: str = '') -> SedError:
        return SedError(
            error_id=error_id,
            level=self.document.level,
            version=self.document.version,
            details=details,
            line=obj.line,
            column=obj.column,
        )

    def iter_errors(self) -> Iterator[SedError]:
        yield from self.check_required()
        yield from self.check_identifiers()
        for obj in self.elements:
            if isinstance(obj, SedModel):
                yield from self.check_model(obj)
            elif isinstance(obj, SedChange):
                yield from self.check_target(obj)
                if isinstance(obj, SedComputeChange):
                    yield from self.check_math(obj)
            elif isinstance(obj, SedUniformTimeCourse):
                yield from self.check_time_course(obj)
            elif isinstance(obj, SedAlgorithm):
                yield from self.check_algorithm(obj)
            elif isinstance(obj, SedTask):
                yield from self.check_task(obj)
            elif isinstance(obj, SedDataGenerator):
                yield from self.check_math(obj)
            elif isinstance(obj, SedVariable):
                yield from self.check_variable(obj)
            elif isinstance(obj, (SedCurve, SedDataSet)):
                yield from self.check_data_references(obj)

    def check_required(self) -> Iterator[SedError]:
        for obj in self.elements:
            for name in obj.get_missing_attributes():
                yield self.error(
                    SedErrorCode.MissingRequiredAttribute, obj,
                    _("{!r} is missing the required attribute {!r}").format(obj, name)
                )
            for name in obj.get_missing_elements():
                yield self.error(
                    SedErrorCode.MissingRequiredElement, obj,
                    _("{!r} is missing the required element <{}>").format(obj, name)
                )

    def check_identifiers(self) -> Iterator[SedError]:
        global_ids: dict[str, SedBase] = {}
        local_ids: dict[int, dict[str, SedBase]] = {}
        metaids: dict[str, SedBase] = {}

        # Syntax of ids and metaids is checked on assignment
        for obj in self.elements:
            metaid = obj.metaid
            if metaid is not None:
                if metaid in metaids:
                    yield self.error(SedErrorCode.DuplicateMetaId, obj,
                                     _("Metaid {!r} is already used by {!r}").format(
                                         metaid, metaids[metaid]))
                else:
                    metaids[metaid] = obj

            sid = obj._attributes.get('id')
            if sid is None:
                continue
            elif isinstance(obj, (SedVariable, SedParameter)):
                scope = local_ids.setdefault(id(obj.parent), {})
            else:
                scope = global_ids

            if sid in scope:
                yield self.error(SedErrorCode.DuplicateComponentId, obj,
                                 _("Id {!r} is already used by {!r}").format(sid, scope[sid]))
            else:
                scope[sid] = obj

    def check_model(self, model: SedModel) -> Iterator[SedError]:
        if model.resolved_source() is None:
            return

        chain = [model.id]
        current: Optional[SedModel] = model
        while current is not None:
            source_id = current.resolved_source()
            if source_id is None:
                break
            elif source_id in chain:
                yield self.error(SedErrorCode.CircularModelSource, model,
                                 _("Model sources form a cycle: {}").format(
                                     ' -> '.join(chain + [source_id])))
                break
            elif len(chain) > limits.MAX_MODEL_SOURCE_DEPTH:
                yield self.error(SedErrorCode.CircularModelSource, model,
                                 _("Chain of model sources longer than {}").format(
                                     limits.MAX_MODEL_SOURCE_DEPTH))
                break

            current = self.document.get_model(source_id)
            if current is None:
                yield self.error(SedErrorCode.InvalidModelReference, model,
                                 _("Model source {!r} refers to an unknown model").format(
                                     model.source if len(chain) == 1 else source_id))
                break
            chain.append(source_id)

    def check_target(self, obj: SedBase) -> Iterator[SedError]:
        target = getattr(obj, 'target', None)
        if target is None:
            return

        message = check_target(target, self.namespaces)
        if message is not None:
            yield self.error(SedErrorCode.InvalidTargetXPath, obj,
                             _("Invalid target {!r}: {}").format(target, message))

    def check_time_course(self, obj: SedUniformTimeCourse) -> Iterator[SedError]:
        initial = obj.initial_time
        start = obj.output_start_time
        end = obj.output_end_time

        if initial is not None and start is not None and initial > start:
            yield self.error(SedErrorCode.InvalidTimeCourse, obj,
                             _("initialTime {} is greater than outputStartTime {}").format(
                                 initial, start))
        if start is not None and end is not None and start > end:
            yield self.error(SedErrorCode.InvalidTimeCourse, obj,
                             _("outputStartTime {} is greater than outputEndTime {}").format(
                                 start, end))
        if obj.number_of_points is not None and obj.number_of_points < 1:
            yield self.error(SedErrorCode.InvalidTimeCourse, obj,
                             _("numberOfPoints must be positive, found {}").format(
                                 obj.number_of_points))

    def check_algorithm(self, obj: SedAlgorithm) -> Iterator[SedError]:
        kisao_id = obj.kisao_id
        if kisao_id is not None and KISAO_ID_PATTERN.match(kisao_id) is None:
            yield self.error(SedErrorCode.InvalidKisaoId, obj,
                             _("Invalid KiSAO id {!r}").format(kisao_id))

    def check_task(self, task: SedTask) -> Iterator[SedError]:
        if task.model_reference is not None and task.model_reference not in self.model_ids:
            yield self.error(SedErrorCode.InvalidModelReference, task,
                             _("{!r} refers to unknown model {!r}").format(
                                 task, task.model_reference))
        if task.simulation_reference is not None and \
                task.simulation_reference not in self.simulation_ids:
            yield self.error(SedErrorCode.InvalidSimulationReference, task,
                             _("{!r} refers to unknown simulation {!r}").format(
                                 task, task.simulation_reference))

    def check_variable(self, variable: SedVariable) -> Iterator[SedError]:
        if (variable.symbol is None) == (variable.target is None):
            yield self.error(SedErrorCode.VariableSymbolOrTarget, variable,
                             _("{!r} must have either a symbol or a target").format(variable))

        yield from self.check_target(variable)

        if variable.task_reference is not None and \
                variable.task_reference not in self.task_ids:
            yield self.error(SedErrorCode.InvalidTaskReference, variable,
                             _("{!r} refers to unknown task {!r}").format(
                                 variable, variable.task_reference))
        if variable.model_reference is not None and \
                variable.model_reference not in self.model_ids:
            yield self.error(SedErrorCode.InvalidModelReference, variable,
                             _("{!r} refers to unknown model {!r}").format(
                                 variable, variable.model_reference))

    def check_math(self, obj: SedBase) -> Iterator[SedError]:
        ast = obj._elements.get('math')
        if ast is None:
            return
        elif not is_well_formed(ast):
            yield self.error(SedErrorCode.InvalidMathElement, obj,
                             _("The math of {!r} is not well-formed").format(obj))
            return

        names = {v.id for v in obj.list_of_variables if v.id} | \
                {p.id for p in obj.list_of_parameters if p.id}
        for name in iter_names(ast):
            if name not in names:
                yield self.error(SedErrorCode.UnknownMathSymbol, obj,
                                 _("Symbol {!r} in the math of {!r} is not a variable "
                                   "or a parameter").format(name, obj))

    def check_data_references(self, obj: SedBase) -> Iterator[SedError]:
        if isinstance(obj, SedSurface):
            names = ('xDataReference', 'yDataReference', 'zDataReference')
        elif isinstance(obj, SedCurve):
            names = ('xDataReference', 'yDataReference')
        else:
            names = ('dataReference',)

        for name in names:
            value = obj._attributes.get(name)
            if value is not None and value not in self.data_generator_ids:
                yield self.error(SedErrorCode.InvalidDataReference, obj,
                                 _("{} of {!r} refers to unknown data generator {!r}").format(
                                     name, obj, value))


def iter_errors(document: SedDocument) -> Iterator[SedError]:
    """
    Iterates the consistency errors of a SED-ML document. The errors are
    not added to the error log of the document.
    """
    logger.debug("check consistency of %r", document)
    yield from ConsistencyChecker(document).iter_errors()


def is_valid(document: SedDocument) -> bool:
    """Returns `True` if the document has no consistency errors."""
    return next(iter_errors(document), None) is None


def validate(document: SedDocument) -> None:
    """Checks the consistency of a document, raises `SedValidationError` on errors."""
    errors = list(iter_errors(document))
    if errors:
        raise SedValidationError(errors, document)
