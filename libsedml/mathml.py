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
MathML support, delegated to libSBML. Math expressions are kept as libSBML
`ASTNode` instances and converted from/to XML elements and L3 infix formulas.
"""
import copy
from collections.abc import Iterator
from typing import Any, Optional

import libsbml
from lxml import etree

from libsedml.exceptions import SedTypeError, SedValueError
from libsedml.translation import gettext as _
from libsedml.names import MATHML_MATH
from libsedml.errors import SedErrorCode, SedErrorLog
from libsedml.base import ElementType, SedBase, SedChildElement
from libsedml.logger import logger

__all__ = ['parse_formula', 'formula_to_string', 'read_mathml', 'write_mathml',
           'copy_math', 'is_well_formed', 'iter_names', 'MathElement']

_parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False)


def parse_formula(text: str) -> libsbml.ASTNode:
    """Parses an L3 infix formula. Raises `SedValueError` if the formula is invalid."""
    if not isinstance(text, str):
        raise SedTypeError(_("invalid type {!r} for a formula").format(type(text)))

    ast = libsbml.parseL3Formula(text)
    if ast is None:
        msg = _("invalid formula {!r}: {}")
        raise SedValueError(msg.format(text, libsbml.getLastParseL3Error().strip()))
    return ast


def formula_to_string(ast: libsbml.ASTNode) -> str:
    """Returns the L3 infix rendering of a math expression."""
    return str(libsbml.formulaToL3String(ast))


def read_mathml(elem: ElementType) -> libsbml.ASTNode:
    """
    Builds a math expression from a <math> element. Raises `SedValueError`
    if the element is not valid MathML.
    """
    text = etree.tostring(elem, encoding='unicode', with_tail=False)
    ast = libsbml.readMathMLFromString(text)
    if ast is None:
        raise SedValueError(_("invalid MathML content"))
    return ast


def write_mathml(ast: libsbml.ASTNode) -> ElementType:
    """Returns a <math> element, in the MathML namespace, for a math expression."""
    text = libsbml.writeMathMLToString(ast)
    if not text:
        raise SedValueError(_("math expression can't be converted to MathML"))
    return etree.fromstring(text.encode('utf-8'), _parser)


def copy_math(ast: libsbml.ASTNode) -> libsbml.ASTNode:
    return ast.deepCopy()


def is_well_formed(ast: Optional[libsbml.ASTNode]) -> bool:
    return ast is not None and bool(ast.isWellFormedASTNode())


def iter_names(ast: libsbml.ASTNode) -> Iterator[str]:
    """Iterates the names of the <ci> elements of a math expression."""
    if ast.getType() == libsbml.AST_NAME:
        yield ast.getName()
    for k in range(ast.getNumChildren()):
        yield from iter_names(ast.getChild(k))


class MathElement(SedChildElement[libsbml.ASTNode]):
    """
    The <math> child element. Accepts an `ASTNode`, that is copied, or an L3
    infix formula, that is parsed.
    """
    def __init__(self, *, required: bool = False) -> None:
        super().__init__(MATHML_MATH, required=required)

    def validated_value(self, value: Any, instance: SedBase) -> libsbml.ASTNode:
        if isinstance(value, str):
            return parse_formula(value)
        elif not isinstance(value, libsbml.ASTNode):
            msg = _("invalid type {!r} for {!r}, must be an ASTNode or a formula string")
            raise SedTypeError(msg.format(type(value), self.name))
        elif not is_well_formed(value):
            raise SedValueError(_("math expression is not well-formed"))
        return copy_math(value)

    def copy_value(self, value: libsbml.ASTNode, instance: SedBase) -> libsbml.ASTNode:
        return copy_math(value)

    def read(self, elem: ElementType, instance: SedBase, log: SedErrorLog) -> None:
        try:
            ast = read_mathml(copy.deepcopy(elem))
        except SedValueError as err:
            logger.debug("invalid math in %r at line %r", instance, elem.sourceline)
            log.log_error(SedErrorCode.InvalidMathElement, str(err), line=elem.sourceline or 0)
        else:
            instance._elements[self.name] = ast

    def write(self, value: libsbml.ASTNode, parent: ElementType) -> None:
        parent.append(write_mathml(value))

    def to_data(self, value: libsbml.ASTNode) -> str:
        return formula_to_string(value)


def get_formula(obj: SedBase) -> Optional[str]:
    """Returns the infix rendering of the math of an object, `None` if it's not set."""
    ast = obj._elements.get('math')
    return None if ast is None else formula_to_string(ast)
