#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Models and the changes applied to them before simulation."""
import copy
from typing import Any, Optional

from lxml import etree

from libsedml.exceptions import SedTypeError, SedValueError
from libsedml.translation import gettext as _
from libsedml.names import SED_NEW_XML, SEDML_MODEL_URN_PREFIX
from libsedml.attributes import StringAttribute, SIdAttribute, XPathAttribute, \
    URNAttribute, is_valid_sid
from libsedml.errors import SedErrorCode, SedErrorLog
from libsedml.base import ElementType, SedBase, SedTypeCode, SedChildElement, ListOf
from libsedml.mathml import MathElement, get_formula
from libsedml.data import SedVariable, SedParameter
from libsedml.xpath import select_target

__all__ = ['SedModel', 'SedChange', 'SedChangeAttribute', 'SedChangeXML',
           'SedAddXML', 'SedRemoveXML', 'SedComputeChange', 'SedNewXMLChange']


class XMLContentElement(SedChildElement[ElementType]):
    """
    A child element wrapping a fragment of arbitrary XML, e.g. the <newXML>
    of a change. The value is the XML element of the fragment.
    """
    def validated_value(self, value: Any, instance: SedBase) -> ElementType:
        if isinstance(value, (str, bytes)):
            try:
                value = etree.fromstring(value)
            except etree.XMLSyntaxError as err:
                msg = _("invalid XML for {!r}: {}")
                raise SedValueError(msg.format(self.local_name, err)) from None
        elif not isinstance(value, etree._Element):
            msg = _("invalid type {!r} for {!r}, must be an XML string or an Element")
            raise SedTypeError(msg.format(type(value), self.name))

        if value.tag == self.tag:
            children = [e for e in value if isinstance(e.tag, str)]
            if len(children) != 1:
                msg = _("{!r} must wrap exactly one XML element")
                raise SedValueError(msg.format(self.local_name))
            value = children[0]

        return copy.deepcopy(value)

    def copy_value(self, value: ElementType, instance: SedBase) -> ElementType:
        return copy.deepcopy(value)

    def read(self, elem: ElementType, instance: SedBase, log: SedErrorLog) -> None:
        for child in elem:
            if isinstance(child.tag, str):
                instance._elements[self.name] = copy.deepcopy(child)
                break
        else:
            msg = _("<{}> of <{}> has no XML content").format(
                self.local_name, instance.element_name
            )
            log.log_error(SedErrorCode.NotSchemaConformant, msg, line=elem.sourceline or 0)

    def write(self, value: ElementType, parent: ElementType) -> None:
        elem = etree.SubElement(parent, self.tag)
        elem.append(copy.deepcopy(value))

    def to_data(self, value: ElementType) -> str:
        return etree.tostring(value, encoding='unicode', with_tail=False)


class SedChange(SedBase):
    """Abstract base class of the changes applied to a model."""
    type_code = SedTypeCode.SEDML_CHANGE

    target = XPathAttribute(required=True)

    def select_target(self, model_root: ElementType) -> list[Any]:
        """
        Evaluates the target on the XML tree of the model, resolving the
        prefixes with the namespace declarations of the document.
        """
        return select_target(self.target or '', model_root, self.namespaces.xpath_namespaces())


class SedChangeAttribute(SedChange):
    """Changes the value of an attribute of the model."""
    element_name = 'changeAttribute'
    type_code = SedTypeCode.SEDML_CHANGE_ATTRIBUTE

    new_value = StringAttribute('newValue', required=True)


class SedNewXMLChange(SedChange):
    """Abstract base class of the changes that carry a new XML fragment."""
    new_xml = XMLContentElement(SED_NEW_XML, required=True)

    @property
    def new_xml_string(self) -> str:
        new_xml = self.new_xml
        return '' if new_xml is None else self._elements_map['new_xml'].to_data(new_xml)


class SedChangeXML(SedNewXMLChange):
    """Replaces the target with a new XML fragment."""
    element_name = 'changeXML'
    type_code = SedTypeCode.SEDML_CHANGE_XML


class SedAddXML(SedNewXMLChange):
    """Adds a new XML fragment as a child of the target."""
    element_name = 'addXML'
    type_code = SedTypeCode.SEDML_CHANGE_ADDXML


class SedRemoveXML(SedChange):
    """Removes the target from the model."""
    element_name = 'removeXML'
    type_code = SedTypeCode.SEDML_CHANGE_REMOVEXML


class SedComputeChange(SedChange):
    """Changes the target to the value computed by a math expression."""
    element_name = 'computeChange'
    type_code = SedTypeCode.SEDML_CHANGE_COMPUTECHANGE

    list_of_variables: ListOf[SedVariable] = ListOf(SedVariable)
    list_of_parameters: ListOf[SedParameter] = ListOf(SedParameter)
    math = MathElement()

    @property
    def formula(self) -> Optional[str]:
        return get_formula(self)


class SedModel(SedBase):
    """
    A model to be simulated, identified by its language and its source,
    with an optional list of changes to apply.
    """
    element_name = 'model'
    type_code = SedTypeCode.SEDML_MODEL

    id = SIdAttribute(required=True)
    name = StringAttribute()
    language = URNAttribute(required=True)
    source = StringAttribute(required=True)

    list_of_changes: ListOf[SedChange] = ListOf(SedChange)

    def resolved_source(self) -> Optional[str]:
        """
        Returns the id of the model referred by the source, if the source refers
        to another model of the document, e.g. '#model1' or 'urn:sedml:model:model1'.
        Returns `None` if the source is a file or a resource outside the document.
        """
        source = self.source
        if not source:
            return None
        elif source.startswith('#'):
            return source[1:]
        elif source.startswith(SEDML_MODEL_URN_PREFIX):
            return source[len(SEDML_MODEL_URN_PREFIX):]

        document = self.document
        if document is not None and is_valid_sid(source) and source != self.id \
                and document.get_model(source) is not None:
            return source
        return None
