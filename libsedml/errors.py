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
This module contains the diagnostic codes of the library and the classes
for representing and collecting SED-ML errors.
"""
import sys
from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum
from typing import Any, NamedTuple, Optional, TextIO, Union, overload

from libsedml.exceptions import SedTypeError
from libsedml.translation import gettext as _


class SedErrorCode(IntEnum):
    """Diagnostic codes. Codes lower than 10000 are related to the XML layer."""
    XMLUnknownError = 0
    XMLOutOfMemory = 1
    XMLFileUnreadable = 2
    XMLFileUnwritable = 3
    XMLFileOperationError = 4
    BadlyFormedXML = 1006
    UnrecognizedXMLElement = 1021

    UnknownError = 10000
    NotUTF8 = 10101
    UnrecognizedElement = 10102
    NotSchemaConformant = 10103
    InvalidMathElement = 10201
    DuplicateComponentId = 10301
    DuplicateMetaId = 10307
    InvalidMetaidSyntax = 10309
    InvalidIdSyntax = 10310
    MissingAnnotationNamespace = 10401
    SedNamespaceInAnnotation = 10403
    MultipleAnnotations = 10404
    NotesNotInXHTMLNamespace = 10801
    OnlyOneNotesElementAllowed = 10805
    InvalidNamespaceOnSed = 20101
    MissingOrInconsistentLevel = 20102
    MissingOrInconsistentVersion = 20103
    LevelPositiveInteger = 20105
    VersionPositiveInteger = 20106
    AllowedAttributesOnSed = 20108
    EmptyListElement = 20203

    MissingRequiredAttribute = 30101
    MissingRequiredElement = 30102
    InvalidModelReference = 30201
    InvalidSimulationReference = 30202
    InvalidTaskReference = 30203
    InvalidDataReference = 30204
    InvalidTargetXPath = 30205
    InvalidKisaoId = 30206
    InvalidTimeCourse = 30207
    CircularModelSource = 30208
    VariableSymbolOrTarget = 30209
    UnknownMathSymbol = 30210

    UnknownCoreAttribute = 99994
    InvalidTargetLevelVersion = 99997
    SedCodesUpperBound = 99999


class SedErrorCategory(IntEnum):
    INTERNAL = 0
    SEDML = 1
    SEDML_L1_COMPAT = 2
    GENERAL_CONSISTENCY = 3
    IDENTIFIER_CONSISTENCY = 4
    MATHML_CONSISTENCY = 5
    INTERNAL_CONSISTENCY = 6
    XML = 100


class SedErrorSeverity(IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3

    # Severities used only in the error table
    SCHEMA_ERROR = 4
    GENERAL_WARNING = 5
    NOT_APPLICABLE = 6


SEVERITY_STRINGS = {
    SedErrorSeverity.INFO: 'Info',
    SedErrorSeverity.WARNING: 'Warning',
    SedErrorSeverity.ERROR: 'Error',
    SedErrorSeverity.FATAL: 'Fatal',
}

CATEGORY_STRINGS = {
    SedErrorCategory.INTERNAL: 'Internal',
    SedErrorCategory.SEDML: 'General SED-ML conformance',
    SedErrorCategory.SEDML_L1_COMPAT: 'Translation to SED-ML L1V1',
    SedErrorCategory.GENERAL_CONSISTENCY: 'SED-ML component consistency',
    SedErrorCategory.IDENTIFIER_CONSISTENCY: 'SED-ML identifier consistency',
    SedErrorCategory.MATHML_CONSISTENCY: 'MathML consistency',
    SedErrorCategory.INTERNAL_CONSISTENCY: 'Internal consistency',
    SedErrorCategory.XML: 'XML content',
}


class ErrorTableEntry(NamedTuple):
    category: SedErrorCategory
    severity: SedErrorSeverity
    short_message: str
    message: str


_C = SedErrorCategory
_S = SedErrorSeverity
_E = SedErrorCode

ERROR_TABLE = {
    _E.XMLUnknownError: ErrorTableEntry(
        _C.XML, _S.FATAL, 'Unknown XML error',
        'Unrecognized error encountered by the XML parser.'),
    _E.XMLOutOfMemory: ErrorTableEntry(
        _C.XML, _S.FATAL, 'Out of memory',
        'Out of memory.'),
    _E.XMLFileUnreadable: ErrorTableEntry(
        _C.XML, _S.ERROR, 'File unreadable',
        'File not found or is unreadable.'),
    _E.XMLFileUnwritable: ErrorTableEntry(
        _C.XML, _S.ERROR, 'File unwritable',
        'File is unwritable.'),
    _E.XMLFileOperationError: ErrorTableEntry(
        _C.XML, _S.ERROR, 'File operation error',
        'Error encountered while attempting a file operation.'),
    _E.BadlyFormedXML: ErrorTableEntry(
        _C.XML, _S.ERROR, 'Badly formed XML',
        'The XML content is not well-formed.'),
    _E.UnrecognizedXMLElement: ErrorTableEntry(
        _C.XML, _S.ERROR, 'Unrecognized XML element',
        'Unrecognized XML element.'),

    _E.UnknownError: ErrorTableEntry(
        _C.INTERNAL, _S.FATAL, 'Unknown internal error',
        'Encountered unknown internal libSEDML error.'),
    _E.NotUTF8: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Not UTF8',
        'A SED-ML XML file must use UTF-8 as the character encoding.'),
    _E.UnrecognizedElement: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Unrecognized element',
        'A SED-ML XML document must not contain undefined elements or attributes '
        'in the SED-ML namespace.'),
    _E.NotSchemaConformant: ErrorTableEntry(
        _C.SEDML, _S.SCHEMA_ERROR, 'Not conformant to SED-ML XML schema',
        'A SED-ML XML document must conform to the XML Schema for the '
        'corresponding SED-ML Level and Version.'),
    _E.InvalidMathElement: ErrorTableEntry(
        _C.MATHML_CONSISTENCY, _S.ERROR, 'Invalid MathML',
        'All MathML content in SED-ML must appear within a <math> element, '
        'and the <math> element must be a valid MathML expression.'),
    _E.DuplicateComponentId: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Duplicate component identifier',
        'The value of the \'id\' attribute on every instance of the SedBase '
        'subclasses must be unique across the set of all \'id\' attribute '
        'values of all such objects in a document.'),
    _E.DuplicateMetaId: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Duplicate \'metaid\' attribute value',
        'Every \'metaid\' attribute value must be unique across the set of all '
        '\'metaid\' values in a SED-ML document.'),
    _E.InvalidMetaidSyntax: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Invalid \'metaid\' attribute value syntax',
        'The value of a \'metaid\' attribute must conform to the syntax of the '
        'XML Type ID.'),
    _E.InvalidIdSyntax: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Invalid \'id\' attribute value syntax',
        'The value of an \'id\' attribute must conform to the syntax of the SId '
        'data type.'),
    _E.MissingAnnotationNamespace: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Missing declaration of the XML namespace for the annotation',
        'Every element in the content of an <annotation> must be placed in an '
        'XML namespace declared by the content.'),
    _E.SedNamespaceInAnnotation: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'The SED-ML XML namespace cannot be used in an <annotation>',
        'The top-level elements of an <annotation> must not be in the SED-ML '
        'XML namespace.'),
    _E.MultipleAnnotations: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Only one <annotation> allowed',
        'A given SED-ML object may contain at most one <annotation> element.'),
    _E.NotesNotInXHTMLNamespace: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Notes not placed in XHTML namespace',
        'The contents of the <notes> element must be explicitly placed in the '
        'XHTML XML namespace.'),
    _E.OnlyOneNotesElementAllowed: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Only one <notes> allowed',
        'A given SED-ML object may contain at most one <notes> element.'),
    _E.InvalidNamespaceOnSed: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Invalid XML namespace for SED-ML container',
        'The <sedML> container element must declare the XML Namespace for '
        'SED-ML, and this declaration must be consistent with the values of '
        'the \'level\' and \'version\' attributes.'),
    _E.MissingOrInconsistentLevel: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Missing or inconsistent value for \'level\' attribute',
        'The <sedML> container element must declare the SED-ML Level using the '
        'attribute \'level\', and this declaration must be consistent with the '
        'XML Namespace declared for the <sedML> element.'),
    _E.MissingOrInconsistentVersion: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Missing or inconsistent value for \'version\' attribute',
        'The <sedML> container element must declare the SED-ML Version using the '
        'attribute \'version\', and this declaration must be consistent with the '
        'XML Namespace declared for the <sedML> element.'),
    _E.LevelPositiveInteger: ErrorTableEntry(
        _C.SEDML, _S.ERROR, '\'level\' attribute must have a positive integer value',
        'The value of the \'level\' attribute of the <sedML> element must be a '
        'positive integer.'),
    _E.VersionPositiveInteger: ErrorTableEntry(
        _C.SEDML, _S.ERROR, '\'version\' attribute must have a positive integer value',
        'The value of the \'version\' attribute of the <sedML> element must be a '
        'positive integer.'),
    _E.AllowedAttributesOnSed: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'Invalid attribute on SED-ML container element',
        'A <sedML> object may only have the attributes \'metaid\', \'level\' and '
        '\'version\'.'),
    _E.EmptyListElement: ErrorTableEntry(
        _C.SEDML, _S.ERROR, 'No empty listOf elements allowed',
        'A listOf___ container element must not be empty.'),

    _E.MissingRequiredAttribute: ErrorTableEntry(
        _C.GENERAL_CONSISTENCY, _S.ERROR, 'Missing required attribute',
        'A SED-ML object is missing one of its required attributes.'),
    _E.MissingRequiredElement: ErrorTableEntry(
        _C.GENERAL_CONSISTENCY, _S.ERROR, 'Missing required element',
        'A SED-ML object is missing one of its required child elements.'),
    _E.InvalidModelReference: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Invalid model reference',
        'The value of a \'modelReference\' attribute must be the identifier of '
        'a <model> element of the document.'),
    _E.InvalidSimulationReference: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Invalid simulation reference',
        'The value of a \'simulationReference\' attribute must be the identifier '
        'of a simulation of the document.'),
    _E.InvalidTaskReference: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Invalid task reference',
        'The value of a \'taskReference\' attribute must be the identifier of a '
        '<task> element of the document.'),
    _E.InvalidDataReference: ErrorTableEntry(
        _C.IDENTIFIER_CONSISTENCY, _S.ERROR, 'Invalid data reference',
        'The value of a data reference attribute of an output must be the '
        'identifier of a <dataGenerator> element of the document.'),
    _E.InvalidTargetXPath: ErrorTableEntry(
        _C.GENERAL_CONSISTENCY, _S.ERROR, 'Invalid XPath target',
        'The value of a \'target\' attribute must be a valid XPath expression.'),
    _E.InvalidKisaoId: ErrorTableEntry(
        _C.GENERAL_CONSISTENCY, _S.ERROR, 'Invalid KiSAO identifier',
        'The value of the \'kisaoID\' attribute of an <algorithm> must be a '
        'KiSAO term identifier of the form \'KISAO:nnnnnnn\'.'),
    _E.InvalidTimeCourse: ErrorTableEntry(
        _C.GENERAL_CONSISTENCY, _S.ERROR, 'Inconsistent uniform time course',
        'A <uniformTimeCourse> must satisfy initialTime <= outputStartTime <= '
        'outputEndTime and have a positive number of points.'),
    _E.CircularModelSource: ErrorTableEntry(
        _C.GENERAL_CONSISTENCY, _S.ERROR, 'Circular model source',
        'The chain of models referenced by the \'source\' attribute of a <model> '
        'must not contain cycles.'),
    _E.VariableSymbolOrTarget: ErrorTableEntry(
        _C.GENERAL_CONSISTENCY, _S.ERROR, 'Variable must have a symbol or a target',
        'A <variable> must define exactly one of the attributes \'symbol\' and '
        '\'target\'.'),
    _E.UnknownMathSymbol: ErrorTableEntry(
        _C.MATHML_CONSISTENCY, _S.ERROR, 'Unknown symbol in math',
        'A <ci> element in a math expression must refer to a variable or a '
        'parameter defined in the same scope.'),

    _E.UnknownCoreAttribute: ErrorTableEntry(
        _C.SEDML, _S.GENERAL_WARNING, 'Unknown attribute',
        'An unknown attribute has been found in the SED-ML namespace.'),
    _E.InvalidTargetLevelVersion: ErrorTableEntry(
        _C.INTERNAL, _S.ERROR, 'Invalid target SED-ML Level/Version',
        'The requested SED-ML Level/Version combination is not known to exist.'),
}


def get_public_severity(severity: int) -> int:
    """Translates an error table severity into a public one."""
    if severity == SedErrorSeverity.SCHEMA_ERROR:
        return SedErrorSeverity.ERROR
    elif severity == SedErrorSeverity.GENERAL_WARNING:
        return SedErrorSeverity.WARNING
    elif severity == SedErrorSeverity.NOT_APPLICABLE:
        return SedErrorSeverity.INFO
    return severity


class SedError:
    """
    A diagnostic about a SED-ML document. For error codes defined by the library
    the category, the severity and the message are taken from the error table,
    the optional *details* are appended to the predefined message.

    :param error_id: the diagnostic code.
    :param level: the SED-ML Level of the document.
    :param version: the SED-ML Version of the document.
    :param details: additional details about the error.
    :param line: the line number of the related XML element, 0 if unknown.
    :param column: the column number of the related XML element, 0 if unknown.
    :param severity: the severity, used only for codes not in the error table.
    :param category: the category, used only for codes not in the error table.
    :param package: the name of the package that defines the code.
    :param pkg_version: the version of the package.
    """
    def __init__(self, error_id: int = 0,
                 level: int = 1,
                 version: int = 1,
                 details: str = '',
                 line: int = 0,
                 column: int = 0,
                 severity: int = SedErrorSeverity.ERROR,
                 category: int = SedErrorCategory.SEDML,
                 package: str = 'core',
                 pkg_version: int = 1) -> None:

        if not isinstance(error_id, int):
            raise SedTypeError(_("error id must be an int, not {!r}").format(type(error_id)))

        self.error_id = int(error_id)
        self.level = level
        self.version = version
        self.details = details or ''
        self.line = line
        self.column = column
        self.package = package
        self.pkg_version = pkg_version

        entry = ERROR_TABLE.get(error_id) if error_id <= SedErrorCode.SedCodesUpperBound else None
        if entry is not None:
            self.severity = get_public_severity(entry.severity)
            self.category = entry.category
            self.short_message = entry.short_message
            if self.details:
                self.message = f'{entry.message}\n{self.details}'
            else:
                self.message = entry.message
        else:
            self.severity = get_public_severity(severity)
            self.category = category
            self.short_message = ''
            self.message = self.details

    def __repr__(self) -> str:
        return '%s(error_id=%r, line=%r, severity=%r)' % (
            self.__class__.__name__, self.error_id, self.line, self.severity_as_string
        )

    def __str__(self) -> str:
        return 'line %d: (%d [%s]) %s' % (
            self.line, self.error_id, self.severity_as_string, self.message
        )

    @property
    def code(self) -> Union[SedErrorCode, int]:
        """The error code as a `SedErrorCode` member if it's known, otherwise an int."""
        try:
            return SedErrorCode(self.error_id)
        except ValueError:
            return self.error_id

    @property
    def severity_as_string(self) -> str:
        return SEVERITY_STRINGS.get(self.severity, '')  # type: ignore[call-overload]

    @property
    def category_as_string(self) -> str:
        return CATEGORY_STRINGS.get(self.category, '')  # type: ignore[call-overload]

    def is_info(self) -> bool:
        return self.severity == SedErrorSeverity.INFO

    def is_warning(self) -> bool:
        return self.severity == SedErrorSeverity.WARNING

    def is_error(self) -> bool:
        return self.severity == SedErrorSeverity.ERROR

    def is_fatal(self) -> bool:
        return self.severity == SedErrorSeverity.FATAL

    def is_valid(self) -> bool:
        """Returns `True` if the error code is defined by the library."""
        return self.error_id in ERROR_TABLE

    def is_xml_error(self) -> bool:
        return self.error_id < SedErrorCode.UnknownError

    def adjust_error_id(self, offset: int) -> None:
        """Adds an offset to the code of an error defined by a package."""
        if self.package != 'core':
            self.error_id += offset

    def clone(self) -> 'SedError':
        obj = object.__new__(self.__class__)
        obj.__dict__.update(self.__dict__)
        return obj

    __copy__ = clone


class SedErrorLog(Sequence[SedError]):
    """
    The ordered log of the diagnostics collected for a SED-ML document.

    :param level: the default SED-ML Level for logged errors.
    :param version: the default SED-ML Version for logged errors.
    """
    def __init__(self, level: int = 1, version: int = 1) -> None:
        self.level = level
        self.version = version
        self._errors: list[SedError] = []

    @overload
    def __getitem__(self, index: int) -> SedError: ...

    @overload
    def __getitem__(self, index: slice) -> list[SedError]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[SedError, list[SedError]]:
        return self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[SedError]:
        return iter(self._errors)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self._errors)

    def add(self, error: SedError) -> None:
        """Appends a copy of an error to the log."""
        if not isinstance(error, SedError):
            raise SedTypeError(_("{!r} is not a SedError instance").format(error))
        self._errors.append(error.clone())

    def log_error(self, error_id: int = 0,
                  details: str = '',
                  line: int = 0,
                  column: int = 0,
                  severity: int = SedErrorSeverity.ERROR,
                  category: int = SedErrorCategory.SEDML,
                  level: Optional[int] = None,
                  version: Optional[int] = None) -> SedError:
        """Creates a new error and appends it to the log. Returns the new error."""
        error = SedError(
            error_id=error_id,
            level=self.level if level is None else level,
            version=self.version if version is None else version,
            details=details,
            line=line,
            column=column,
            severity=severity,
            category=category,
        )
        self._errors.append(error)
        return error

    def get_error(self, n: int) -> Optional[SedError]:
        """Returns the n-th error or `None` if the index is out of range."""
        if 0 <= n < len(self._errors):
            return self._errors[n]
        return None

    def get_num_errors(self, severity: Optional[int] = None) -> int:
        """
        Returns the number of logged diagnostics.

        :param severity: if provided counts only the diagnostics of that severity.
        """
        if severity is None:
            return len(self._errors)
        return self.get_num_failures_with_severity(severity)

    def get_num_failures_with_severity(self, severity: int) -> int:
        severity = get_public_severity(severity)
        return sum(1 for e in self._errors if e.severity == severity)

    def get_num_failures(self) -> int:
        """Returns the number of errors and fatal errors."""
        return sum(1 for e in self._errors if e.severity >= SedErrorSeverity.ERROR)

    def contains(self, error_id: int) -> bool:
        return any(e.error_id == error_id for e in self._errors)

    def remove(self, error_id: int) -> Optional[SedError]:
        """Removes the first error with the given code. Returns it or `None`."""
        for k, error in enumerate(self._errors):
            if error.error_id == error_id:
                return self._errors.pop(k)
        return None

    def discard(self, errors: Iterable[SedError]) -> None:
        """Removes the given error instances from the log, if present."""
        discarded = {id(e) for e in errors}
        self._errors = [e for e in self._errors if id(e) not in discarded]

    def clear(self) -> None:
        self._errors.clear()

    def to_string(self) -> str:
        return ''.join(f'{error}\n' for error in self._errors)

    def print_errors(self, stream: Optional[TextIO] = None) -> None:
        """Prints the errors to a text stream, defaulting to `sys.stderr`."""
        (stream or sys.stderr).write(self.to_string())

    def to_dicts(self) -> list[dict[str, Any]]:
        return [{
            'id': e.error_id,
            'line': e.line,
            'column': e.column,
            'severity': e.severity_as_string,
            'category': e.category_as_string,
            'message': e.message,
        } for e in self._errors]
