#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Descriptors and validation helpers for arguments and settings options."""
import codecs
from collections.abc import Callable
from functools import partial
from typing import Any, cast, Generic, Optional, TypeVar, Union

from libsedml.exceptions import SedTypeError, SedValueError, SedAttributeError
from libsedml.translation import gettext as _

T = TypeVar('T')


class Argument(Generic[T]):
    """
    A descriptor for positional and optional arguments. An argument can't be changed nor deleted.
    Arguments are validated with a sequence of validation functions that are called by the base
    *validated_value* method.
    """
    __slots__ = ('_name', '_default')

    _default: T
    _validators: tuple[Callable[['Argument[T]', T], None], ...] = ()

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self._name = f'_{name}'

    def __str__(self) -> str:
        if hasattr(self, '_default'):
            return _('optional argument {!r}').format(self._name[1:])
        return _('argument {!r}').format(self._name[1:])

    def __get__(self, instance: Optional[Any], owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            try:
                return self._default
            except AttributeError:
                if instance is None:
                    msg = _("{} can't be accessed from {!r}").format(self, owner)
                else:
                    msg = _("{} of {!r} object has not been set").format(self, instance)
                raise SedAttributeError(msg) from None

    def __set__(self, instance: Any, value: Any) -> None:
        if hasattr(instance, self._name):
            raise SedAttributeError(_("can't change {}").format(self))
        setattr(instance, self._name, self.validated_value(value))

    def __delete__(self, instance: Any) -> None:
        raise SedAttributeError(_("can't delete {}").format(self))

    def validated_value(self, value: Any) -> T:
        for validator in self._validators:
            validator(self, value)
        return cast(T, value)


class Option(Argument[T]):
    """
    A descriptor for handling optional arguments.

    :param default: The default value for the optional argument.
    """
    def __init__(self, *, default: T) -> None:
        self._default = default


###
# Validation helpers for arguments and options

def validate_type(attr: Argument[T], value: T,
                  types: Union[None, type[T], tuple[type[T], ...]] = None,
                  none: bool = False) -> None:
    """
    Base function for validating an argument type.

    :param attr: the argument to validate.
    :param value: the argument value to validate.
    :param types: the optional types to validate against.
    :param none: if `True` a None value is accepted.
    """
    if none and value is None or types is not None and isinstance(value, types):
        return None
    elif types is None:
        if none:
            msg = _("invalid type {!r} for {}, must be None")
            raise SedTypeError(msg.format(type(value), attr))
        return None
    elif none:
        msg = _("invalid type {!r} for {}, must be None or a {!r}")
    else:
        msg = _("invalid type {!r} for {}, must be a {!r}")

    raise SedTypeError(msg.format(type(value), attr, types))


def validate_encoding(attr: Argument[str], value: str) -> None:
    try:
        codecs.lookup(value)
    except LookupError:
        msg = _("invalid value {!r} for {}: unknown encoding")
        raise SedValueError(msg.format(value, attr)) from None


bool_validator = partial(validate_type, types=bool)
str_validator = partial(validate_type, types=str)
none_str_validator = partial(validate_type, types=str, none=True)


class BooleanOption(Option[bool]):
    _validators = (bool_validator,)


class NoneStringOption(Option[Optional[str]]):
    _validators = (none_str_validator,)


class EncodingOption(Option[str]):
    _validators = str_validator, validate_encoding
