#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Version information of the library."""

LIBSEDML_DOTTED_VERSION = '1.0.0'

_major, _minor, _patch = (int(x) for x in LIBSEDML_DOTTED_VERSION.split('.'))

LIBSEDML_VERSION = _major * 10000 + _minor * 100 + _patch
LIBSEDML_VERSION_STRING = '%d%02d%02d' % (_major, _minor, _patch)


def get_libsedml_version() -> int:
    """
    Returns the version as an integer, e.g. version 1.2.3 is returned
    as the integer 10203.
    """
    return LIBSEDML_VERSION


def get_libsedml_dotted_version() -> str:
    """Returns the version as a dotted string, e.g. '1.2.3'."""
    return LIBSEDML_DOTTED_VERSION


def get_libsedml_version_string() -> str:
    """Returns the version as a compact string, e.g. '10203' for version 1.2.3."""
    return LIBSEDML_VERSION_STRING
