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
This module contains the reader of SED-ML documents. Reading never raises for
problems in the content: they are logged into the error log of the returned
document.
"""
import io
import os
from pathlib import Path
from typing import Any, Optional, Union

from lxml import etree

from libsedml.exceptions import SedTypeError
from libsedml.translation import gettext as _
from libsedml.names import SEDML_NAMESPACE
from libsedml.namespaces import SedNamespaces
from libsedml.errors import SedErrorCode
from libsedml.base import ElementType, local_name
from libsedml.document import SedDocument
from libsedml.logger import logger, logged
from libsedml.settings import ReaderSettings

__all__ = ['SedReader', 'read_sedml', 'read_sedml_from_file', 'read_sedml_from_string']

UTF8_ENCODINGS = frozenset(('UTF-8', 'UTF8'))


class SedReader:
    """
    Reads SED-ML documents from files or strings.

    :param settings: optional reader settings.
    :param kwargs: options for building new reader settings, e.g. *check_consistency*.
    """
    def __init__(self, settings: Optional[ReaderSettings] = None, **kwargs: Any) -> None:
        if settings is None:
            self.settings = ReaderSettings(**kwargs)
        elif kwargs:
            self.settings = settings.copy(**kwargs)
        else:
            self.settings = settings

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.settings)

    @logged
    def read_from_file(self, path: Union[str, Path]) -> SedDocument:
        """Reads a SED-ML document from a file path."""
        if not isinstance(path, (str, Path)):
            raise SedTypeError(_("invalid type {!r} for a file path").format(type(path)))

        logger.debug("read SED-ML document from file %r", str(path))
        document = SedDocument()
        if not os.path.isfile(path) or not os.access(path, os.R_OK):
            document.error_log.log_error(
                SedErrorCode.XMLFileUnreadable, _("File {!r} is not readable").format(str(path))
            )
            return document

        try:
            tree = etree.parse(str(path), self.settings.get_parser())
        except etree.XMLSyntaxError as err:
            document.error_log.log_error(SedErrorCode.BadlyFormedXML, err.msg or '',
                                         line=err.lineno or 0, column=err.offset or 0)
            return document
        except OSError as err:
            document.error_log.log_error(SedErrorCode.XMLFileUnreadable, str(err))
            return document

        return self._read_tree(tree, document)

    @logged
    def read_from_string(self, text: Union[str, bytes]) -> SedDocument:
        """Reads a SED-ML document from a string or bytes containing the XML."""
        if isinstance(text, str):
            data = text.encode('utf-8')
        elif isinstance(text, bytes):
            data = text
        else:
            raise SedTypeError(_("invalid type {!r} for an XML string").format(type(text)))

        logger.debug("read SED-ML document from a string of %d bytes", len(data))
        document = SedDocument()
        if not data.strip():
            document.error_log.log_error(SedErrorCode.BadlyFormedXML, _("Empty XML string"))
            return document

        try:
            tree = etree.parse(io.BytesIO(data), self.settings.get_parser())
        except etree.XMLSyntaxError as err:
            document.error_log.log_error(SedErrorCode.BadlyFormedXML, err.msg or '',
                                         line=err.lineno or 0, column=err.offset or 0)
            return document

        return self._read_tree(tree, document)

    def _read_tree(self, tree: etree._ElementTree, document: SedDocument) -> SedDocument:
        log = document.error_log
        root = tree.getroot()

        encoding = tree.docinfo.encoding
        if encoding and encoding.upper() not in UTF8_ENCODINGS:
            log.log_error(SedErrorCode.NotUTF8, _("Found encoding {!r}").format(encoding))

        if local_name(root.tag) != 'sedML':
            log.log_error(SedErrorCode.NotSchemaConformant,
                          _("The root element is <{}> instead of <sedML>").format(
                              local_name(root.tag)),
                          line=root.sourceline or 0)
            return document

        uri = root.tag[1:].split('}')[0] if root.tag.startswith('{') else ''
        if not SedNamespaces.is_sed_namespace(uri):
            log.log_error(SedErrorCode.InvalidNamespaceOnSed,
                          _("Found namespace {!r}").format(uri), line=root.sourceline or 0)

        level = self._read_positive_int(root, 'level', document)
        version = self._read_positive_int(root, 'version', document)
        if level is not None and version is not None:
            if SedNamespaces.get_sed_namespace_uri(level, version) != uri:
                error_id = SedErrorCode.MissingOrInconsistentLevel \
                    if level != 1 else SedErrorCode.MissingOrInconsistentVersion
                log.log_error(error_id,
                              _("SED-ML Level {} Version {} with namespace {!r}").format(
                                  level, version, uri),
                              line=root.sourceline or 0)

        self._read_namespaces(root, document.namespaces)
        document.read_element(root, log)

        logger.info("SED-ML document read with %d errors", log.get_num_failures())
        if self.settings.check_consistency:
            document.check_consistency()
        return document

    @staticmethod
    def _read_positive_int(root: ElementType, name: str, document: SedDocument) -> Optional[int]:
        if name == 'level':
            missing_code = SedErrorCode.MissingOrInconsistentLevel
            invalid_code = SedErrorCode.LevelPositiveInteger
        else:
            missing_code = SedErrorCode.MissingOrInconsistentVersion
            invalid_code = SedErrorCode.VersionPositiveInteger

        text = root.get(name)
        if text is None:
            document.error_log.log_error(
                missing_code, _("Missing attribute {!r}").format(name), line=root.sourceline or 0
            )
            return None

        try:
            value = int(text.strip())
        except ValueError:
            value = 0

        if value < 1:
            document.error_log.log_error(
                invalid_code, _("Found {}={!r}").format(name, text), line=root.sourceline or 0
            )
            return None
        return value

    @staticmethod
    def _read_namespaces(root: ElementType, namespaces: SedNamespaces) -> None:
        """Collects the prefixed namespace declarations of the tree into the document."""
        for elem in root.iter(tag=etree.Element):
            for prefix, uri in elem.nsmap.items():
                if prefix and prefix not in namespaces and \
                        uri != SEDML_NAMESPACE and not SedNamespaces.is_sed_namespace(uri):
                    namespaces.add_namespace(uri, prefix)


@logged
def read_sedml_from_file(path: Union[str, Path],
                         settings: Optional[ReaderSettings] = None,
                         **kwargs: Any) -> SedDocument:
    """
    Reads a SED-ML document from a file. Problems are logged into the error log
    of the returned document.

    :param path: the path of the file.
    :param settings: optional reader settings.
    :param kwargs: options for building reader settings. Provide a *loglevel* \
    keyword argument to change the logging level of the call.
    """
    return SedReader(settings, **kwargs).read_from_file(path)


@logged
def read_sedml_from_string(text: Union[str, bytes],
                           settings: Optional[ReaderSettings] = None,
                           **kwargs: Any) -> SedDocument:
    """
    Reads a SED-ML document from a string. Problems are logged into the error log
    of the returned document.

    :param text: the XML string.
    :param settings: optional reader settings.
    :param kwargs: options for building reader settings.
    """
    return SedReader(settings, **kwargs).read_from_string(text)


def read_sedml(source: Union[str, bytes, Path],
               settings: Optional[ReaderSettings] = None,
               **kwargs: Any) -> SedDocument:
    """
    Reads a SED-ML document from a file path or from an XML string. A string
    is considered XML data if it starts with '<'.
    """
    if isinstance(source, bytes) or isinstance(source, str) and source.lstrip().startswith('<'):
        return read_sedml_from_string(source, settings, **kwargs)
    return read_sedml_from_file(source, settings, **kwargs)
