#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Package settings for reading and writing SED-ML documents."""
import dataclasses as dc
from typing import Any

from lxml import etree

from libsedml.arguments import BooleanOption, EncodingOption, NoneStringOption


@dc.dataclass
class ReaderSettings:
    """Settings for reading SED-ML documents."""

    huge_tree: BooleanOption = BooleanOption(default=False)
    """
    Disables the security restrictions of the XML parser on the size of text
    nodes and on the depth of the tree. Use only with trusted sources.
    """

    remove_comments: BooleanOption = BooleanOption(default=True)
    """Discards the XML comments found in notes, annotations and XML content of changes."""

    check_consistency: BooleanOption = BooleanOption(default=False)
    """
    If `True` the consistency checks are run after reading and the findings
    are added to the error log of the document.
    """

    def get_parser(self) -> etree.XMLParser:
        """Returns a new XML parser configured with the reader settings."""
        return etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            huge_tree=self.huge_tree,
            remove_comments=self.remove_comments,
            remove_pis=True,
        )

    def copy(self, **kwargs: Any) -> 'ReaderSettings':
        return dc.replace(self, **kwargs)


@dc.dataclass
class WriterSettings:
    """Settings for writing SED-ML documents."""

    pretty_print: BooleanOption = BooleanOption(default=True)
    """Indents the output XML."""

    xml_declaration: BooleanOption = BooleanOption(default=True)
    """Writes the XML declaration at the start of the document."""

    encoding: EncodingOption = EncodingOption(default='UTF-8')
    """The encoding of the output. SED-ML documents are required to be UTF-8."""

    program_name: NoneStringOption = NoneStringOption(default=None)
    """
    The name of the program that writes the document. If provided a comment
    with the name, the version and the date is written before the root element.
    """

    program_version: NoneStringOption = NoneStringOption(default=None)
    """The version of the program that writes the document."""

    def copy(self, **kwargs: Any) -> 'WriterSettings':
        return dc.replace(self, **kwargs)
