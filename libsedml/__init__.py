#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import limits
from . import translation
from .exceptions import SedException, SedAttributeError, SedTypeError, \
    SedValueError, SedConstructorException, SedValidationError
from .names import SEDML_NAMESPACE, MATHML_NAMESPACE, XHTML_NAMESPACE
from .version import LIBSEDML_DOTTED_VERSION, LIBSEDML_VERSION, \
    LIBSEDML_VERSION_STRING, get_libsedml_version, get_libsedml_dotted_version, \
    get_libsedml_version_string
from .logger import set_logging_level
from .namespaces import SedNamespaces
from .errors import SedErrorCode, SedErrorCategory, SedErrorSeverity, \
    SedError, SedErrorLog
from .settings import ReaderSettings, WriterSettings
from .mathml import parse_formula, formula_to_string
from .base import SedTypeCode, SedBase, SedListOf
from .data import SedVariable, SedParameter, SedDataGenerator
from .model import SedModel, SedChange, SedChangeAttribute, SedChangeXML, \
    SedAddXML, SedRemoveXML, SedComputeChange
from .simulation import SedAlgorithm, SedSimulation, SedUniformTimeCourse, SedTask
from .output import SedCurve, SedSurface, SedDataSet, SedOutput, \
    SedPlot2D, SedPlot3D, SedReport
from .document import SedDocument
from .reader import SedReader, read_sedml, read_sedml_from_file, read_sedml_from_string
from .writer import SedWriter, write_sedml, write_sedml_to_file, write_sedml_to_string
from .validator import iter_errors, is_valid, validate

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2024, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'limits', 'translation', 'SedException', 'SedAttributeError', 'SedTypeError',
    'SedValueError', 'SedConstructorException', 'SedValidationError',
    'SEDML_NAMESPACE', 'MATHML_NAMESPACE', 'XHTML_NAMESPACE',
    'LIBSEDML_DOTTED_VERSION', 'LIBSEDML_VERSION', 'LIBSEDML_VERSION_STRING',
    'get_libsedml_version', 'get_libsedml_dotted_version', 'get_libsedml_version_string',
    'set_logging_level', 'SedNamespaces', 'SedErrorCode', 'SedErrorCategory',
    'SedErrorSeverity', 'SedError', 'SedErrorLog', 'ReaderSettings', 'WriterSettings',
    'parse_formula', 'formula_to_string', 'SedTypeCode', 'SedBase', 'SedListOf',
    'SedVariable', 'SedParameter', 'SedDataGenerator', 'SedModel', 'SedChange',
    'SedChangeAttribute', 'SedChangeXML', 'SedAddXML', 'SedRemoveXML', 'SedComputeChange',
    'SedAlgorithm', 'SedSimulation', 'SedUniformTimeCourse', 'SedTask',
    'SedCurve', 'SedSurface', 'SedDataSet', 'SedOutput', 'SedPlot2D', 'SedPlot3D',
    'SedReport', 'SedDocument', 'SedReader', 'read_sedml', 'read_sedml_from_file',
    'read_sedml_from_string', 'SedWriter', 'write_sedml', 'write_sedml_to_file',
    'write_sedml_to_string', 'iter_errors', 'is_valid', 'validate',
]
