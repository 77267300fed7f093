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
XPath helpers for the targets of changes and variables. SED-ML targets are
XPath 1.0 expressions addressing parts of the XML of a model.
"""
from collections.abc import Mapping
from typing import Any, Optional

from elementpath import XPath1Parser, ElementPathError, select

from libsedml.exceptions import SedValueError
from libsedml.translation import gettext as _
from libsedml.base import ElementType

__all__ = ['check_target', 'select_target']


def check_target(path: str, namespaces: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Checks the syntax of an XPath target. Returns an error message if the
    expression is invalid, `None` otherwise.

    :param path: the XPath expression.
    :param namespaces: the namespace map used for resolving prefixes.
    """
    parser = XPath1Parser(namespaces=dict(namespaces) if namespaces else None)
    try:
        parser.parse(path)
    except ElementPathError as err:
        return str(err)
    else:
        return None


def select_target(path: str, root: ElementType,
                  namespaces: Optional[Mapping[str, str]] = None) -> list[Any]:
    """
    Evaluates an XPath target on the XML tree of a model. Returns the list of
    the selected items, raises `SedValueError` if the expression is invalid.

    :param path: the XPath expression.
    :param root: the root element or the element tree of the model.
    :param namespaces: the namespace map used for resolving prefixes.
    """
    try:
        result = select(root, path, namespaces=dict(namespaces) if namespaces else None,
                        parser=XPath1Parser)
    except ElementPathError as err:
        raise SedValueError(_("invalid target {!r}: {}").format(path, err)) from None

    if isinstance(result, list):
        return result
    return [result]
