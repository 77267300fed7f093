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
This module contains namespace definitions and the qualified names
of the SED-ML elements.
"""

###
# Namespace URIs
SEDML_NAMESPACE = 'http://sed-ml.org/'
"URI of the SED-ML Level 1 Version 1 namespace"

MATHML_NAMESPACE = 'http://www.w3.org/1998/Math/MathML'
"URI of the Mathematical Markup Language namespace (math)"

XHTML_NAMESPACE = 'http://www.w3.org/1999/xhtml'
"URI of the Extensible Hypertext Markup Language namespace (html)"

XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'
"URI of the XML namespace (xml)"

SBML_NAMESPACE_L2V4 = 'http://www.sbml.org/sbml/level2/version4'
"URI of the SBML Level 2 Version 4 namespace, common model language of SED-ML examples"


_SEDML_TEMPLATE = '{http://sed-ml.org/}%s'

###
# Qualified names of SED-ML elements
SED_SEDML = _SEDML_TEMPLATE % 'sedML'
SED_NOTES = _SEDML_TEMPLATE % 'notes'
SED_ANNOTATION = _SEDML_TEMPLATE % 'annotation'
SED_NEW_XML = _SEDML_TEMPLATE % 'newXML'
SED_ALGORITHM = _SEDML_TEMPLATE % 'algorithm'

MATHML_MATH = '{%s}math' % MATHML_NAMESPACE

###
# Language URNs for models
SEDML_LANGUAGE_SBML = 'urn:sedml:language:sbml'
SEDML_LANGUAGE_CELLML = 'urn:sedml:language:cellml'

SEDML_SYMBOL_TIME = 'urn:sedml:symbol:time'
"URN of the implicit symbol of simulation time"

SEDML_MODEL_URN_PREFIX = 'urn:sedml:model:'
