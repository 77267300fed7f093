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
Base test case class for SED-ML objects and documents.
"""
import os
import unittest
from typing import Any, Optional

from libsedml.base import SedBase
from libsedml.document import SedDocument
from libsedml.reader import read_sedml_from_file, read_sedml_from_string
from libsedml.writer import write_sedml_to_string

SEDML_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<sedML xmlns="http://sed-ml.org/" level="{0}" version="{1}">
    {2}
</sedML>"""


class SedTestCase(unittest.TestCase):
    """
    TestCase class for SED-ML documents. Set *TEST_CASES_DIR* in subclasses
    for loading sample documents with `casepath()`.
    """
    TEST_CASES_DIR: Optional[str] = None

    @classmethod
    def casepath(cls, relative_path: str) -> str:
        """
        Returns the absolute path from a relative path specified from the referenced TEST_CASES_DIR.
        """
        return os.path.join(cls.TEST_CASES_DIR or '', relative_path)

    def read_case(self, relative_path: str, **kwargs: Any) -> SedDocument:
        return read_sedml_from_file(self.casepath(relative_path), **kwargs)

    def read_content(self, content: str, level: int = 1, version: int = 1,
                     **kwargs: Any) -> SedDocument:
        """Reads a document built from a fragment of the content of the <sedML> root."""
        return read_sedml_from_string(SEDML_TEMPLATE.format(level, version, content), **kwargs)

    def assertErrorCodes(self, document: SedDocument, *codes: int,
                         msg: Optional[str] = None) -> None:
        """Asserts that the error log of a document contains exactly the provided codes."""
        self.assertListEqual(
            sorted(e.error_id for e in document.error_log), sorted(codes),
            msg=msg or '\n'.join(str(e) for e in document.error_log)
        )

    def assertNoErrors(self, document: SedDocument) -> None:
        self.assertErrorCodes(document)

    def check_round_trip(self, document: SedDocument) -> SedDocument:
        """Writes and reads back a document, checking that the content is preserved."""
        other = read_sedml_from_string(write_sedml_to_string(document))
        self.assertNoErrors(other)
        self.assertEqual(document.to_dict(), other.to_dict())
        return other

    def assertSedEqual(self, first: SedBase, second: SedBase) -> None:
        self.assertIs(type(first), type(second))
        self.assertDictEqual(first.to_dict(), second.to_dict())
