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
Descriptors for the XML attributes of SED-ML elements. Values are stored
in the `_attributes` dictionary of the instance, keyed by the XML name.
An unset attribute has value `None`.
"""
import math
import re
from typing import Any, cast, Generic, Optional, overload, TypeVar, Union

from libsedml.exceptions import SedAttributeError, SedTypeError, SedValueError
from libsedml.translation import gettext as _

__all__ = ['SedAttribute', 'StringAttribute', 'SIdAttribute', 'SIdRefAttribute',
           'MetaIdAttribute', 'XPathAttribute', 'URNAttribute', 'DoubleAttribute',
           'IntAttribute', 'BooleanAttribute', 'is_valid_sid', 'is_valid_metaid']

SID_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
NCNAME_PATTERN = re.compile(r'^[^\d\W][\w.\-]*$')

T = TypeVar('T')


def is_valid_sid(value: Any) -> bool:
    return isinstance(value, str) and SID_PATTERN.match(value) is not None


def is_valid_metaid(value: Any) -> bool:
    return isinstance(value, str) and NCNAME_PATTERN.match(value) is not None


class SedAttribute(Generic[T]):
    """
    Base descriptor of a SED-ML attribute.

    :param xml_name: the name of the attribute in XML, defaults to the \
    name of the descriptor in the owner class.
    :param required: if `True` the attribute is required by SED-ML.
    """
    __slots__ = ('name', 'xml_name', 'required', '_owner')

    python_type: Any = str

    def __init__(self, xml_name: Optional[str] = None, *, required: bool = False) -> None:
        self.xml_name = xml_name
        self.required = required

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self.name = name
        self._owner = owner
        if self.xml_name is None:
            self.xml_name = name

    def __str__(self) -> str:
        return _('attribute {!r}').format(self.xml_name)

    def __repr__(self) -> str:
        return '%s(%r, required=%r)' % (self.__class__.__name__, self.xml_name, self.required)

    @overload
    def __get__(self, instance: None, owner: type[Any]) -> 'SedAttribute[T]': ...

    @overload
    def __get__(self, instance: Any, owner: type[Any]) -> Optional[T]: ...

    def __get__(self, instance: Optional[Any], owner: type[Any]) \
            -> Union['SedAttribute[T]', Optional[T]]:
        if instance is None:
            return self
        return cast(Optional[T], instance._attributes.get(self.xml_name))

    def __set__(self, instance: Any, value: Any) -> None:
        if value is None:
            instance._attributes.pop(self.xml_name, None)
        else:
            instance._attributes[self.xml_name] = self.validated_value(value)

    def __delete__(self, instance: Any) -> None:
        instance._attributes.pop(self.xml_name, None)

    def validated_value(self, value: Any) -> T:
        if not isinstance(value, self.python_type):
            msg = _("invalid type {!r} for {}, must be a {!r}")
            raise SedTypeError(msg.format(type(value), self, self.python_type))
        return cast(T, value)

    def decode(self, text: str) -> T:
        """Decodes the XML lexical value, raises `SedValueError` if it's invalid."""
        return self.validated_value(text)

    def encode(self, value: T) -> str:
        return str(value)


class StringAttribute(SedAttribute[str]):
    pass


class SIdAttribute(SedAttribute[str]):
    """An identifier with the syntax of SId type."""

    def validated_value(self, value: Any) -> str:
        value = super().validated_value(value)
        if SID_PATTERN.match(value) is None:
            msg = _("invalid value {!r} for {}: not a valid SId")
            raise SedValueError(msg.format(value, self))
        return cast(str, value)

    def decode(self, text: str) -> str:
        return self.validated_value(text.strip())


class SIdRefAttribute(SIdAttribute):
    """A reference to the identifier of another element."""


class MetaIdAttribute(SedAttribute[str]):
    """A meta identifier with the syntax of XML ID type."""

    def validated_value(self, value: Any) -> str:
        value = super().validated_value(value)
        if NCNAME_PATTERN.match(value) is None:
            msg = _("invalid value {!r} for {}: not a valid XML ID")
            raise SedValueError(msg.format(value, self))
        return cast(str, value)

    def decode(self, text: str) -> str:
        return self.validated_value(text.strip())


class XPathAttribute(SedAttribute[str]):
    """An XPath expression addressing a part of a model. Syntax is checked by validation."""


class URNAttribute(SedAttribute[str]):
    """A URN or a URI, e.g. the language of a model."""

    def decode(self, text: str) -> str:
        return self.validated_value(text.strip())


class DoubleAttribute(SedAttribute[float]):
    python_type = (int, float)

    def validated_value(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = _("invalid type {!r} for {}, must be a {!r}")
            raise SedTypeError(msg.format(type(value), self, float))
        return float(value)

    def decode(self, text: str) -> float:
        value = text.strip()
        if value == 'INF':
            return math.inf
        elif value == '-INF':
            return -math.inf
        elif value == 'NaN':
            return math.nan

        try:
            return float(value)
        except ValueError:
            msg = _("invalid value {!r} for {}: not a double")
            raise SedValueError(msg.format(text, self)) from None

    def encode(self, value: float) -> str:
        if math.isnan(value):
            return 'NaN'
        elif math.isinf(value):
            return 'INF' if value > 0 else '-INF'
        elif value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)


class IntAttribute(SedAttribute[int]):
    python_type = int

    def validated_value(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            msg = _("invalid type {!r} for {}, must be a {!r}")
            raise SedTypeError(msg.format(type(value), self, int))
        return value

    def decode(self, text: str) -> int:
        try:
            return int(text.strip())
        except ValueError:
            msg = _("invalid value {!r} for {}: not an integer")
            raise SedValueError(msg.format(text, self)) from None


class BooleanAttribute(SedAttribute[bool]):
    python_type = bool

    def decode(self, text: str) -> bool:
        value = text.strip()
        if value in ('true', '1'):
            return True
        elif value in ('false', '0'):
            return False
        msg = _("invalid value {!r} for {}: not a boolean")
        raise SedValueError(msg.format(text, self))

    def encode(self, value: bool) -> str:
        return 'true' if value else 'false'


def get_attribute(cls: type[Any], name: str) -> SedAttribute[Any]:
    """Returns the descriptor of an attribute by Python or XML name."""
    try:
        return cast(SedAttribute[Any], cls._attributes_map[name])
    except KeyError:
        for attribute in cls._attributes_map.values():
            if attribute.name == name:
                return cast(SedAttribute[Any], attribute)

    msg = _("{!r} has no SED-ML attribute {!r}")
    raise SedAttributeError(msg.format(cls.__name__, name))
