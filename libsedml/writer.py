#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""This module contains the writer of SED-ML documents."""
import datetime
from pathlib import Path
from typing import Any, Optional, Union

from lxml import etree

from libsedml.exceptions import SedTypeError
from libsedml.translation import gettext as _
from libsedml.errors import SedErrorCode
from libsedml.document import SedDocument
from libsedml.logger import logger, logged
from libsedml.settings import WriterSettings
from libsedml.version import get_libsedml_dotted_version

__all__ = ['SedWriter', 'write_sedml', 'write_sedml_to_file', 'write_sedml_to_string']


class SedWriter:
    """
    Writes SED-ML documents to files or strings.

    :param program_name: the name of the program that writes the documents.
    :param program_version: the version of the program.
    :param settings: optional writer settings.
    :param kwargs: options for building new writer settings, e.g. *pretty_print*.
    """
    def __init__(self, program_name: Optional[str] = None,
                 program_version: Optional[str] = None,
                 settings: Optional[WriterSettings] = None,
                 **kwargs: Any) -> None:
        if program_name is not None:
            kwargs['program_name'] = program_name
        if program_version is not None:
            kwargs['program_version'] = program_version

        if settings is None:
            self.settings = WriterSettings(**kwargs)
        elif kwargs:
            self.settings = settings.copy(**kwargs)
        else:
            self.settings = settings

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.settings)

    @property
    def program_name(self) -> Optional[str]:
        return self.settings.program_name

    @property
    def program_version(self) -> Optional[str]:
        return self.settings.program_version

    def get_comment(self) -> Optional[str]:
        """Returns the text of the comment written before the root, if a program name is set."""
        if not self.settings.program_name:
            return None

        chunks = [f' Created by {self.settings.program_name}']
        if self.settings.program_version:
            chunks.append(f'version {self.settings.program_version}')
        chunks.append('on {}'.format(datetime.datetime.now().strftime('%Y-%m-%d %H:%M')))
        chunks.append(f'with libSEDML version {get_libsedml_dotted_version()}. ')
        return ' '.join(chunks)

    def to_etree(self, document: SedDocument) -> etree._ElementTree:
        """Builds the XML tree of a SED-ML document."""
        if not isinstance(document, SedDocument):
            raise SedTypeError(_("{!r} is not a SedDocument instance").format(document))

        root = document.write_element()
        etree.cleanup_namespaces(root, keep_ns_prefixes=[k for k in document.namespaces if k])

        comment = self.get_comment()
        if comment is not None:
            root.addprevious(etree.Comment(comment))
        return etree.ElementTree(root)

    def _tobytes(self, document: SedDocument) -> bytes:
        return etree.tostring(
            self.to_etree(document),
            encoding=self.settings.encoding,
            xml_declaration=self.settings.xml_declaration,
            pretty_print=self.settings.pretty_print,
        )

    @logged
    def write_to_string(self, document: SedDocument) -> str:
        """Returns the XML string of a SED-ML document."""
        return self._tobytes(document).decode(self.settings.encoding)

    @logged
    def write_to_file(self, document: SedDocument, path: Union[str, Path]) -> bool:
        """
        Writes a SED-ML document to a file. Returns `True` on success. If the
        file can't be written the error is logged into the error log of the
        document and `False` is returned.
        """
        data = self._tobytes(document)
        try:
            with open(path, 'wb') as fp:
                fp.write(data)
        except OSError as err:
            logger.error("can't write SED-ML document to %r: %s", str(path), err)
            document.error_log.log_error(SedErrorCode.XMLFileUnwritable, str(err))
            return False
        else:
            logger.info("SED-ML document written to %r", str(path))
            return True


@logged
def write_sedml_to_string(document: SedDocument,
                          settings: Optional[WriterSettings] = None,
                          **kwargs: Any) -> str:
    """
    Returns the XML string of a SED-ML document.

    :param document: the document to write.
    :param settings: optional writer settings.
    :param kwargs: options for building writer settings, e.g. *program_name*.
    """
    return SedWriter(settings=settings, **kwargs).write_to_string(document)


@logged
def write_sedml_to_file(document: SedDocument, path: Union[str, Path],
                        settings: Optional[WriterSettings] = None,
                        **kwargs: Any) -> bool:
    """Writes a SED-ML document to a file. Returns `True` on success."""
    return SedWriter(settings=settings, **kwargs).write_to_file(document, path)


def write_sedml(document: SedDocument, path: Union[str, Path],
                settings: Optional[WriterSettings] = None,
                **kwargs: Any) -> bool:
    """Writes a SED-ML document to a file, alias of `write_sedml_to_file`."""
    return write_sedml_to_file(document, path, settings, **kwargs)
