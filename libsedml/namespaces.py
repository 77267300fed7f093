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
This module contains the class for SED-ML Level/Version and XML namespace handling.
"""
from collections.abc import Iterator, Mapping
from typing import Any, Optional

from libsedml.exceptions import SedTypeError, SedValueError
from libsedml.translation import gettext as _
from libsedml.names import SEDML_NAMESPACE

SEDML_DEFAULT_LEVEL = 1
SEDML_DEFAULT_VERSION = 1
SEDML_XMLNS_L1 = SEDML_NAMESPACE

_SEDML_NAMESPACE_URIS = {
    (1, 1): SEDML_XMLNS_L1,
}


class SedNamespaces(Mapping[str, str]):
    """
    The SED-ML Level and Version of an object, together with the XML namespaces
    declared for it. The instance is a read-only mapping from prefixes to URIs,
    where the SED-ML namespace of the Level/Version is always mapped by the
    empty prefix.

    :param level: the SED-ML Level.
    :param version: the SED-ML Version.
    :param namespaces: optional mapping of additional prefixes to URIs.
    """
    __slots__ = ('_level', '_version', '_namespaces')

    _namespaces: dict[str, str]

    def __init__(self, level: int = SEDML_DEFAULT_LEVEL,
                 version: int = SEDML_DEFAULT_VERSION,
                 namespaces: Optional[Mapping[str, str]] = None) -> None:
        self._level = self._check_positive_int(level, 'level')
        self._version = self._check_positive_int(version, 'version')
        self._namespaces = {}
        self._install_default()
        if namespaces:
            self.add_namespaces(namespaces)

    @staticmethod
    def _check_positive_int(value: Any, name: str) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            msg = _("{!r} must be an int, not {!r}")
            raise SedTypeError(msg.format(name, type(value)))
        elif value < 1:
            raise SedValueError(_("{!r} must be a positive int").format(name))
        return value

    def _install_default(self) -> None:
        uri = self.get_sed_namespace_uri(self._level, self._version)
        for prefix, value in list(self._namespaces.items()):
            if not prefix or self.is_sed_namespace(value):
                del self._namespaces[prefix]
        if uri:
            self._namespaces = {'': uri, **self._namespaces}

    def __getitem__(self, prefix: str) -> str:
        return self._namespaces[prefix]

    def __iter__(self) -> Iterator[str]:
        return iter(self._namespaces)

    def __len__(self) -> int:
        return len(self._namespaces)

    def __repr__(self) -> str:
        return '%s(level=%r, version=%r, namespaces=%r)' % (
            self.__class__.__name__, self._level, self._version, self._namespaces
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SedNamespaces):
            return NotImplemented
        return self._level == other._level and \
            self._version == other._version and \
            self._namespaces == other._namespaces

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def get_sed_namespace_uri(level: int, version: int) -> str:
        """
        Returns the SED-ML namespace URI for a Level/Version combination,
        or an empty string if the combination is unknown.
        """
        return _SEDML_NAMESPACE_URIS.get((level, version), '')

    @staticmethod
    def get_supported_namespaces() -> list['SedNamespaces']:
        """Returns a list with an instance for each supported Level/Version."""
        return [SedNamespaces(level, version) for level, version in _SEDML_NAMESPACE_URIS]

    @staticmethod
    def is_sed_namespace(uri: str) -> bool:
        """Returns `True` if the argument is the URI of a SED-ML namespace."""
        return uri in _SEDML_NAMESPACE_URIS.values()

    @property
    def level(self) -> int:
        return self._level

    @property
    def version(self) -> int:
        return self._version

    @property
    def uri(self) -> str:
        """The SED-ML namespace URI, an empty string for an invalid combination."""
        return self._namespaces.get('', '')

    @property
    def namespaces(self) -> dict[str, str]:
        """A copy of the prefix to URI map."""
        return self._namespaces.copy()

    def is_valid_combination(self) -> bool:
        """Returns `True` if the SED-ML Level/Version combination is supported."""
        return (self._level, self._version) in _SEDML_NAMESPACE_URIS

    def set_level(self, level: int) -> None:
        self._level = self._check_positive_int(level, 'level')
        self._install_default()

    def set_version(self, version: int) -> None:
        self._version = self._check_positive_int(version, 'version')
        self._install_default()

    def add_namespace(self, uri: str, prefix: str) -> None:
        """
        Adds a namespace declaration. A declaration with the same prefix is replaced.

        :param uri: the URI of the namespace.
        :param prefix: the prefix to bind, can't be the empty prefix that is \
        reserved for the SED-ML namespace.
        """
        if not isinstance(uri, str) or not isinstance(prefix, str):
            raise SedTypeError(_("namespace URI and prefix must be strings"))
        elif not prefix:
            raise SedValueError(_("the default namespace is reserved to SED-ML"))
        elif self.is_sed_namespace(uri) and uri != self.uri:
            raise SedValueError(_("{!r} is a SED-ML namespace of a different "
                                  "Level/Version").format(uri))
        self._namespaces[prefix] = uri

    def add_namespaces(self, namespaces: Mapping[str, str]) -> None:
        """
        Adds a set of namespace declarations. Declarations of the empty prefix
        or of the SED-ML namespace itself are skipped.
        """
        for prefix, uri in namespaces.items():
            if prefix and uri != self.uri:
                self.add_namespace(uri, prefix)

    def remove_namespace(self, uri: str) -> None:
        """
        Removes all the declarations of a namespace URI. Raises a `SedValueError`
        if the namespace is not declared or is the SED-ML namespace.
        """
        if uri == self.uri:
            raise SedValueError(_("the SED-ML namespace can't be removed"))

        prefixes = [k for k, v in self._namespaces.items() if v == uri]
        if not prefixes:
            raise SedValueError(_("namespace {!r} is not declared").format(uri))
        for prefix in prefixes:
            del self._namespaces[prefix]

    def set_namespaces(self, namespaces: Optional[Mapping[str, str]]) -> None:
        """Replaces all the declarations, except the SED-ML default namespace."""
        self._namespaces = {}
        self._install_default()
        if namespaces:
            self.add_namespaces(namespaces)

    def clone(self) -> 'SedNamespaces':
        obj = object.__new__(SedNamespaces)
        obj._level = self._level
        obj._version = self._version
        obj._namespaces = self._namespaces.copy()
        return obj

    __copy__ = clone

    def __deepcopy__(self, memo: dict[int, Any]) -> 'SedNamespaces':
        return self.clone()

    def xpath_namespaces(self) -> dict[str, str]:
        """
        Namespace map to use with XPath expressions, the default SED-ML
        namespace is excluded because unprefixed names in targets refer
        to no namespace.
        """
        return {k: v for k, v in self._namespaces.items() if k}
