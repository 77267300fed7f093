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
This module contains the exception classes for the package.
"""
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .errors import SedError


class SedException(Exception):
    """The base exception that let you catch all the errors generated by the library."""


class SedAttributeError(SedException, AttributeError):
    pass


class SedTypeError(SedException, TypeError):
    pass


class SedValueError(SedException, ValueError):
    pass


class SedConstructorException(SedValueError):
    """
    Raised when a SED-ML object can't be built, usually for an invalid
    combination of SED-ML Level and Version.

    :param message: the error message.
    :param element_name: the name of the element that couldn't be created.
    """
    def __init__(self, message: str, element_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.element_name = element_name

    def __str__(self) -> str:
        if self.element_name is None:
            return self.message
        return f'{self.message} (element {self.element_name!r})'


class SedValidationError(SedValueError):
    """
    Raised by strict validation when a document contains errors.

    :param errors: the list of `SedError` diagnostics that caused the failure.
    :param source: the validated object, usually a `SedDocument`.
    """
    def __init__(self, errors: list['SedError'], source: Optional[Any] = None) -> None:
        if not errors:
            raise SedValueError("passed an empty error list!")
        super().__init__(str(errors[0]))
        self.errors = errors
        self.source = source

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return str(self.errors[0])
        return 'n.%d errors found:\n%s' % (
            len(self.errors), '\n'.join(str(err) for err in self.errors)
        )
