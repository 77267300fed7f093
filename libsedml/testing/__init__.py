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
Subpackage with unittest extensions for libsedml.

Includes a base test case class with helpers for loading the sample SED-ML
documents and a function for running test scripts with a header that
reports the library and the platform used for the test session.
"""
import platform
import unittest
from typing import Optional

import libsedml
from ._case_class import SedTestCase

__all__ = ['SedTestCase', 'print_test_header', 'run_libsedml_tests']


def print_test_header(name: Optional[str] = None) -> None:
    """Print an header that displays Python version and platform used for test session."""
    if name is None:
        header1 = f"Test libsedml {libsedml.__version__}"
    else:
        header1 = f"Test libsedml {libsedml.__version__} {name}"
    header2 = "with Python {} on platform {}".format(
        platform.python_version(), platform.platform()
    )
    print('{0}\n{1}\n{2}\n{0}'.format("*" * max(len(header1), len(header2)), header1, header2))


def run_libsedml_tests(name: Optional[str] = None) -> None:
    print_test_header(name)
    unittest.main()
