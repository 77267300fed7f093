#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Package protection limits. Values can be changed after import to set different limits."""
import sys
from types import ModuleType
from typing import Any

from libsedml.translation import gettext as _
from libsedml.exceptions import SedTypeError, SedValueError


class LimitsModule(ModuleType):
    def __setattr__(self, attr: str, value: Any) -> None:
        if attr != 'MAX_MODEL_SOURCE_DEPTH':
            pass
        elif not isinstance(value, int) or isinstance(value, bool):
            raise SedTypeError(_('Value {!r} is not an int').format(value))
        elif value < 1:
            raise SedValueError(_('{} limit must be at least 1').format(attr))

        super().__setattr__(attr, value)


sys.modules[__name__].__class__ = LimitsModule


MAX_MODEL_SOURCE_DEPTH = 50
"""
Maximum length of a chain of models whose source refers to another model of
the same document. Longer chains are reported as circular model sources.
"""

