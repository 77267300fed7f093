#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""The SED-ML document, root of the object model."""
from typing import Any, Optional, TextIO, Union

from libsedml.exceptions import SedValueError
from libsedml.translation import gettext as _
from libsedml.namespaces import SedNamespaces
from libsedml.errors import SedErrorCode, SedError, SedErrorLog
from libsedml.base import ElementType, SedBase, SedTypeCode, ListOf
from libsedml.logger import logger
from libsedml.model import SedModel
from libsedml.simulation import SedSimulation, SedTask
from libsedml.data import SedDataGenerator
from libsedml.output import SedOutput

__all__ = ['SedDocument']


class SedDocument(SedBase):
    """
    A SED-ML document. Keeps the SED-ML Level, Version and namespaces of
    the objects it contains, and the log of the errors found reading or
    checking the document.

    :param level: the SED-ML Level, or a `SedNamespaces` instance.
    :param version: the SED-ML Version.
    """
    element_name = 'sedML'
    type_code = SedTypeCode.SEDML_DOCUMENT

    list_of_simulations: ListOf[SedSimulation] = ListOf(SedSimulation)
    list_of_models: ListOf[SedModel] = ListOf(SedModel)
    list_of_tasks: ListOf[SedTask] = ListOf(SedTask)
    list_of_data_generators: ListOf[SedDataGenerator] = ListOf(SedDataGenerator)
    list_of_outputs: ListOf[SedOutput] = ListOf(SedOutput)

    _error_log: SedErrorLog
    _consistency_errors: list[SedError]

    def __init__(self, level: Union[None, int, SedNamespaces] = None,
                 version: Optional[int] = None,
                 *, sed_namespaces: Optional[SedNamespaces] = None,
                 **attrs: Any) -> None:
        super().__init__(level, version, sed_namespaces=sed_namespaces, **attrs)
        self._error_log = SedErrorLog(self.level, self.version)
        self._consistency_errors = []

    def __repr__(self) -> str:
        return '%s(level=%r, version=%r)' % (self.__class__.__name__, self.level, self.version)

    @property
    def error_log(self) -> SedErrorLog:
        """The log of the errors found reading or checking the document."""
        return self._error_log

    def get_error(self, n: int) -> Optional[SedError]:
        return self._error_log.get_error(n)

    def get_num_errors(self, severity: Optional[int] = None) -> int:
        return self._error_log.get_num_errors(severity)

    def print_errors(self, stream: Optional[TextIO] = None) -> None:
        self._error_log.print_errors(stream)

    def clone(self) -> 'SedDocument':
        obj = super().clone()
        obj._error_log = SedErrorLog(self.level, self.version)
        obj._consistency_errors = []
        for error in self._error_log:
            obj._error_log.add(error)
            if any(error is e for e in self._consistency_errors):
                obj._consistency_errors.append(obj._error_log[-1])
        return obj

    def check_consistency(self) -> int:
        """
        Checks the consistency of the document. The errors found are added
        to the error log, replacing the ones of a previous check. Returns
        the number of errors found.
        """
        from libsedml.validator import iter_errors

        self._error_log.discard(self._consistency_errors)
        self._consistency_errors = []

        count = 0
        for error in iter_errors(self):
            self._error_log.add(error)
            self._consistency_errors.append(self._error_log[-1])
            count += 1

        logger.debug("consistency check of %r: %d errors found", self, count)
        return count

    def write_attributes(self, elem: ElementType) -> None:
        super().write_attributes(elem)
        elem.set('level', str(self.level))
        elem.set('version', str(self.version))

    def read_attributes(self, elem: ElementType, log: SedErrorLog) -> None:
        for name in elem.attrib:
            if name not in ('level', 'version', 'metaid') and not name.startswith('{'):
                self._log(log, SedErrorCode.AllowedAttributesOnSed, elem,
                          _("Attribute {!r} is not allowed on <sedML>").format(name))

        metaid = elem.get('metaid')
        if metaid is not None:
            try:
                self.metaid = metaid.strip()
            except SedValueError as err:
                self._log(log, SedErrorCode.InvalidMetaidSyntax, elem, str(err))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {'@level': self.level, '@version': self.version}
        data.update(super().to_dict())
        return data
