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
This module contains the base classes of the SED-ML object model: the metaclass
that builds the accessors of child lists, the abstract base class `SedBase` and
the list container `SedListOf`.
"""
import copy
import inspect
import re
from abc import ABCMeta, abstractmethod
from collections.abc import Iterator, MutableSequence
from enum import IntEnum
from typing import Any, cast, ClassVar, Generic, Optional, overload, TypeVar, \
    TYPE_CHECKING, Union

from lxml import etree

from libsedml.exceptions import SedAttributeError, SedConstructorException, \
    SedTypeError, SedValueError
from libsedml.translation import gettext as _
from libsedml.names import SEDML_NAMESPACE, XHTML_NAMESPACE, SED_NOTES, SED_ANNOTATION
from libsedml.namespaces import SedNamespaces
from libsedml.attributes import SedAttribute, SIdAttribute, MetaIdAttribute, get_attribute
from libsedml.errors import SedErrorCode, SedErrorLog

if TYPE_CHECKING:
    from libsedml.document import SedDocument  # noqa: F401

__all__ = ['SedTypeCode', 'SedMeta', 'SedBase', 'SedListOf', 'ListOf',
           'SedChildElement', 'SedChild', 'ElementType']

ElementType = etree._Element

ST = TypeVar('ST', bound='SedBase')
T = TypeVar('T')

_SNAKE_CASE_REGEX = re.compile(r'(?<=[a-z])([A-Z])')


def snake_case(name: str) -> str:
    """Converts an element name to a Python name, e.g. 'uniformTimeCourse' -> 'uniform_time_course'."""
    return _SNAKE_CASE_REGEX.sub(r'_\1', name).lower()


def local_name(tag: str) -> str:
    return tag.rsplit('}', 1)[-1]


def unqualified_tag(elem: ElementType) -> Optional[str]:
    """Returns the tag of the first element of a subtree without a namespace, if any."""
    for e in elem.iter():
        if isinstance(e.tag, str) and not e.tag.startswith('{'):
            return e.tag
    return None


class SedTypeCode(IntEnum):
    SEDML_UNKNOWN = 0
    SEDML_DOCUMENT = 1
    SEDML_MODEL = 2
    SEDML_CHANGE = 3
    SEDML_CHANGE_ATTRIBUTE = 4
    SEDML_CHANGE_XML = 5
    SEDML_CHANGE_ADDXML = 6
    SEDML_CHANGE_REMOVEXML = 7
    SEDML_CHANGE_COMPUTECHANGE = 8
    SEDML_SIMULATION = 9
    SEDML_SIMULATION_UNIFORMTIMECOURSE = 10
    SEDML_SIMULATION_ALGORITHM = 11
    SEDML_TASK = 12
    SEDML_DATAGENERATOR = 13
    SEDML_VARIABLE = 14
    SEDML_PARAMETER = 15
    SEDML_OUTPUT = 16
    SEDML_OUTPUT_PLOT2D = 17
    SEDML_OUTPUT_PLOT3D = 18
    SEDML_OUTPUT_REPORT = 19
    SEDML_OUTPUT_CURVE = 20
    SEDML_OUTPUT_SURFACE = 21
    SEDML_OUTPUT_DATASET = 22
    SEDML_LIST_OF = 23


def iter_concrete_classes(cls: type[ST]) -> Iterator[type[ST]]:
    """Yields the class, if it's concrete, otherwise its concrete subclasses."""
    if not inspect.isabstract(cls):
        yield cls
    else:
        for subclass in cls.__subclasses__():
            yield from iter_concrete_classes(subclass)


###
# Descriptors for child lists and single child elements

class ListOf(Generic[ST]):
    """
    A descriptor for a list of child elements. The name of the descriptor must
    have the form 'list_of_<plural>', from that are derived the XML name of the
    list element and the names of the accessor methods built by `SedMeta`.

    :param item_class: the base class of the items of the list.
    """
    __slots__ = ('name', 'xml_name', 'plural', 'singular', 'item_class')

    def __init__(self, item_class: type[ST]) -> None:
        self.item_class = item_class

    def __set_name__(self, owner: type[Any], name: str) -> None:
        if not name.startswith('list_of_'):
            raise SedAttributeError(_("invalid name {!r} for a list of elements").format(name))

        self.name = name
        self.plural = name[8:]
        self.singular = self.plural[:-1]
        self.xml_name = 'listOf' + ''.join(s.capitalize() for s in self.plural.split('_'))

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.item_class)

    @overload
    def __get__(self, instance: None, owner: type[Any]) -> 'ListOf[ST]': ...

    @overload
    def __get__(self, instance: Any, owner: type[Any]) -> 'SedListOf[ST]': ...

    def __get__(self, instance: Optional[Any], owner: type[Any]) \
            -> Union['ListOf[ST]', 'SedListOf[ST]']:
        if instance is None:
            return self
        return cast('SedListOf[ST]', instance._lists[self.xml_name])

    def __set__(self, instance: Any, value: Any) -> None:
        raise SedAttributeError(_("can't replace {!r}, use its methods").format(self.xml_name))

    @property
    def item_classes(self) -> list[type[ST]]:
        """The concrete classes of the items that can be read or created."""
        return list(iter_concrete_classes(self.item_class))


class SedChildElement(Generic[T], metaclass=ABCMeta):
    """
    Base descriptor of a single child element. Values are stored in the
    `_elements` dictionary of the instance, keyed by the descriptor name.

    :param tag: the qualified name of the child element.
    :param required: if `True` the child is required by SED-ML.
    """
    __slots__ = ('name', 'tag', 'required')

    def __init__(self, tag: str, *, required: bool = False) -> None:
        self.tag = tag
        self.required = required

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return '%s(%r, required=%r)' % (self.__class__.__name__, self.tag, self.required)

    @property
    def local_name(self) -> str:
        return local_name(self.tag)

    def __get__(self, instance: Optional[Any], owner: type[Any]) -> Any:
        if instance is None:
            return self
        return instance._elements.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        if value is None:
            instance._elements.pop(self.name, None)
        else:
            instance._elements[self.name] = self.validated_value(value, instance)

    def __delete__(self, instance: Any) -> None:
        instance._elements.pop(self.name, None)

    @abstractmethod
    def validated_value(self, value: Any, instance: 'SedBase') -> T:
        """Returns the value to store for an assignment."""

    @abstractmethod
    def copy_value(self, value: T, instance: 'SedBase') -> T:
        """Returns a copy of the stored value for a cloned instance."""

    @abstractmethod
    def read(self, elem: ElementType, instance: 'SedBase', log: SedErrorLog) -> None:
        """Reads the child element, logging the problems into the error log."""

    @abstractmethod
    def write(self, value: T, parent: ElementType) -> None:
        """Writes the child element as the last child of *parent*."""

    @abstractmethod
    def to_data(self, value: T) -> Any:
        """Returns the value for the dictionary representation."""


class SedChild(SedChildElement[ST]):
    """
    A single child element that is a SED-ML object. Assigned objects are copied.

    :param tag: the qualified name of the child element.
    :param cls: the class of the child.
    """
    __slots__ = ('cls',)

    def __init__(self, tag: str, cls: type[ST], *, required: bool = False) -> None:
        super().__init__(tag, required=required)
        self.cls = cls

    def validated_value(self, value: Any, instance: 'SedBase') -> ST:
        if not isinstance(value, self.cls):
            msg = _("invalid type {!r} for {!r}, must be a {!r}")
            raise SedTypeError(msg.format(type(value), self.name, self.cls))

        obj = value.clone()
        obj._parent = instance
        return obj

    def copy_value(self, value: ST, instance: 'SedBase') -> ST:
        obj = value.clone()
        obj._parent = instance
        return obj

    def create(self, instance: 'SedBase') -> ST:
        obj = self.cls(sed_namespaces=instance.namespaces)
        obj._parent = instance
        instance._elements[self.name] = obj
        return obj

    def read(self, elem: ElementType, instance: 'SedBase', log: SedErrorLog) -> None:
        obj = self.cls(sed_namespaces=instance.namespaces)
        obj.read_element(elem, log)
        obj._parent = instance
        instance._elements[self.name] = obj

    def write(self, value: ST, parent: ElementType) -> None:
        value.write_element(parent)

    def to_data(self, value: ST) -> dict[str, Any]:
        return value.to_dict()


###
# Metaclass and base classes

class SedMeta(ABCMeta):
    """
    Metaclass of SED-ML classes. Collects the attribute, list and child element
    descriptors of the class and of its bases and builds the accessor methods
    for the child lists declared in the class:

      * `add_<item>(item)`: adds a copy of an item, returns the copy;
      * `create_<element>()`: creates a new item for each concrete item class;
      * `get_<item>(key)`: gets an item by index or by id, `None` if missing;
      * `remove_<item>(key)`: removes an item by index or by id;
      * `num_<items>()`: returns the number of items of the list.
    """
    _attributes_map: dict[str, SedAttribute[Any]]
    _lists_map: dict[str, ListOf[Any]]
    _elements_map: dict[str, SedChildElement[Any]]

    def __new__(mcs, name: str, bases: tuple[type[Any], ...],
                attrs: dict[str, Any]) -> 'SedMeta':
        cls = super().__new__(mcs, name, bases, attrs)

        attributes: dict[str, SedAttribute[Any]] = {}
        lists: dict[str, ListOf[Any]] = {}
        elements: dict[str, SedChildElement[Any]] = {}
        for base in reversed(cls.__mro__):
            for value in vars(base).values():
                if isinstance(value, SedAttribute):
                    attributes[cast(str, value.xml_name)] = value
                elif isinstance(value, ListOf):
                    lists[value.xml_name] = value
                elif isinstance(value, SedChildElement):
                    elements[value.name] = value

        cls._attributes_map = attributes
        cls._lists_map = lists
        cls._elements_map = elements

        for value in attrs.values():
            if isinstance(value, ListOf):
                for method_name, method in mcs._build_list_methods(value):
                    if method_name not in attrs:
                        setattr(cls, method_name, method)
            elif isinstance(value, SedChild):
                method_name = f'create_{value.name}'
                if method_name not in attrs:
                    setattr(cls, method_name, mcs._build_child_creator(value))

        return cls

    @staticmethod
    def _build_list_methods(descriptor: ListOf[Any]) -> Iterator[tuple[str, Any]]:
        xml_name = descriptor.xml_name

        def add_item(self: 'SedBase', item: 'SedBase') -> 'SedBase':
            return self._lists[xml_name].append(item)

        def get_item(self: 'SedBase', key: Union[int, str]) -> Optional['SedBase']:
            return self._lists[xml_name].get(key)

        def remove_item(self: 'SedBase', key: Union[int, str]) -> Optional['SedBase']:
            return self._lists[xml_name].remove(key)

        def num_items(self: 'SedBase') -> int:
            return len(self._lists[xml_name])

        add_item.__doc__ = f"Adds a copy of the item to {xml_name}. Returns the added copy."
        get_item.__doc__ = f"Gets an item of {xml_name} by index or id, `None` if it's missing."
        remove_item.__doc__ = f"Removes an item of {xml_name} by index or id and returns it."
        num_items.__doc__ = f"Returns the number of items of {xml_name}."

        yield f'add_{descriptor.singular}', add_item
        yield f'get_{descriptor.singular}', get_item
        yield f'remove_{descriptor.singular}', remove_item
        yield f'num_{descriptor.plural}', num_items

        for item_class in descriptor.item_classes:
            def create_item(self: 'SedBase', cls: type['SedBase'] = item_class) -> 'SedBase':
                return self._lists[xml_name].create(cls)

            create_item.__doc__ = f"Creates a new {item_class.__name__} " \
                                  f"and adds it to {xml_name}."
            yield f'create_{snake_case(item_class.element_name)}', create_item

    @staticmethod
    def _build_child_creator(descriptor: SedChild[Any]) -> Any:
        def create_child(self: 'SedBase') -> 'SedBase':
            return cast('SedBase', descriptor.create(self))

        create_child.__doc__ = f"Creates a new {descriptor.cls.__name__} child, " \
                               f"replacing the existing one."
        return create_child


class SedBase(metaclass=SedMeta):
    """
    Abstract base class of SED-ML objects.

    :param level: the SED-ML Level, or a `SedNamespaces` instance.
    :param version: the SED-ML Version.
    :param sed_namespaces: a `SedNamespaces` instance, alternative to level and version.
    :param attrs: initial values of SED-ML attributes and child elements, \
    provided with their Python names.
    """
    type_code: ClassVar[SedTypeCode] = SedTypeCode.SEDML_UNKNOWN

    _attributes_map: ClassVar[dict[str, SedAttribute[Any]]]
    _lists_map: ClassVar[dict[str, ListOf[Any]]]
    _elements_map: ClassVar[dict[str, SedChildElement[Any]]]

    _attributes: dict[str, Any]
    _lists: dict[str, 'SedListOf[Any]']
    _elements: dict[str, Any]
    _parent: Optional['SedBase']
    _notes: Optional[ElementType]
    _annotation: Optional[ElementType]
    _sed_namespaces: SedNamespaces

    metaid = MetaIdAttribute()

    def __init__(self, level: Union[None, int, SedNamespaces] = None,
                 version: Optional[int] = None,
                 *, sed_namespaces: Optional[SedNamespaces] = None,
                 **attrs: Any) -> None:
        if isinstance(level, SedNamespaces):
            sed_namespaces, level = level, None

        if sed_namespaces is not None:
            if not isinstance(sed_namespaces, SedNamespaces):
                msg = _("invalid type {!r} for 'sed_namespaces'")
                raise SedTypeError(msg.format(type(sed_namespaces)))
            self._sed_namespaces = sed_namespaces.clone()
        else:
            try:
                self._sed_namespaces = SedNamespaces(
                    1 if level is None else level,
                    1 if version is None else version
                )
            except (TypeError, ValueError) as err:
                raise SedConstructorException(str(err), self.element_name) from None

        if not self._sed_namespaces.is_valid_combination():
            msg = _("SED-ML Level {} Version {} is not supported").format(
                self._sed_namespaces.level, self._sed_namespaces.version
            )
            raise SedConstructorException(msg, self.element_name)

        self._attributes = {}
        self._elements = {}
        self._parent = None
        self._notes = None
        self._annotation = None
        self._line = 0
        self._column = 0
        self._lists = {
            k: SedListOf(v.item_class, k, self) for k, v in self._lists_map.items()
        }

        for name, value in attrs.items():
            if not self._has_python_name(name):
                msg = _("{}() got an unexpected keyword argument {!r}")
                raise SedTypeError(msg.format(self.__class__.__name__, name))
            setattr(self, name, value)

    @classmethod
    def _has_python_name(cls, name: str) -> bool:
        return name in cls._elements_map or \
            any(a.name == name for a in cls._attributes_map.values())

    def __repr__(self) -> str:
        if 'id' in self._attributes:
            return '%s(id=%r)' % (self.__class__.__name__, self._attributes['id'])
        return '%s()' % self.__class__.__name__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SedBase):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self: ST) -> ST:
        return self.clone()

    def __deepcopy__(self: ST, memo: dict[int, Any]) -> ST:
        return self.clone()

    @property
    @abstractmethod
    def element_name(self) -> str:
        """The local name of the XML element of the object."""

    @property
    def parent(self) -> Optional['SedBase']:
        """The parent SED-ML object, `None` if the object is not attached."""
        return self._parent

    @property
    def document(self) -> Optional['SedDocument']:
        """The document that contains the object, `None` if it's not attached to a document."""
        root = self.root
        if root.type_code == SedTypeCode.SEDML_DOCUMENT:
            return cast('SedDocument', root)
        return None

    @property
    def root(self) -> 'SedBase':
        obj = self
        while obj._parent is not None:
            obj = obj._parent
        return obj

    @property
    def namespaces(self) -> SedNamespaces:
        """The SED-ML namespaces of the document, or of the detached object."""
        return self.root._sed_namespaces

    @property
    def level(self) -> int:
        return self.namespaces.level

    @property
    def version(self) -> int:
        return self.namespaces.version

    @property
    def line(self) -> int:
        """The line number of the XML element that has been read, 0 if unknown."""
        return self._line

    @property
    def column(self) -> int:
        return self._column

    ###
    # Attributes and elements state
    def is_set(self, name: str) -> bool:
        """
        Returns `True` if an attribute or a child element is set.

        :param name: the Python name or the XML name of the attribute or the element.
        """
        if name in ('notes', 'annotation'):
            return getattr(self, f'_{name}') is not None

        for element in self._elements_map.values():
            if name == element.name or name == element.local_name:
                return element.name in self._elements

        return get_attribute(self.__class__, name).xml_name in self._attributes

    def unset(self, name: str) -> None:
        """Unsets an attribute or a child element, given the Python or XML name."""
        if name in ('notes', 'annotation'):
            setattr(self, f'_{name}', None)
            return

        for element in self._elements_map.values():
            if name == element.name or name == element.local_name:
                self._elements.pop(element.name, None)
                return

        self._attributes.pop(get_attribute(self.__class__, name).xml_name, None)

    def get_missing_attributes(self) -> list[str]:
        """Returns the XML names of the required attributes that are not set."""
        return [k for k, v in self._attributes_map.items()
                if v.required and k not in self._attributes]

    def get_missing_elements(self) -> list[str]:
        """Returns the XML names of the required child elements that are not set."""
        return [v.local_name for k, v in self._elements_map.items()
                if v.required and k not in self._elements]

    def has_required_attributes(self) -> bool:
        return not self.get_missing_attributes()

    def has_required_elements(self) -> bool:
        return not self.get_missing_elements()

    ###
    # Notes and annotation
    @property
    def notes(self) -> Optional[ElementType]:
        """The <notes> element of the object, with XHTML content."""
        return self._notes

    @notes.setter
    def notes(self, value: Union[None, str, bytes, ElementType]) -> None:
        self.set_notes(value)

    @notes.deleter
    def notes(self) -> None:
        self._notes = None

    @property
    def notes_string(self) -> str:
        """The XML string of the notes, an empty string if notes are not set."""
        return self._content_string('notes', self._notes)

    def set_notes(self, notes: Union[None, str, bytes, ElementType],
                  add_xhtml_markup: bool = False) -> None:
        """
        Sets the notes of the object.

        :param notes: a string with XHTML content, optionally wrapped into a \
        <notes> element, or an Element. `None` unsets the notes.
        :param add_xhtml_markup: if `True` a plain text is wrapped into an XHTML \
        paragraph.
        """
        if notes is None:
            self._notes = None
        else:
            self._notes = self._build_content(notes, SED_NOTES, add_xhtml_markup)

    def append_notes(self, notes: Union[str, bytes, ElementType],
                     add_xhtml_markup: bool = False) -> None:
        """Appends XHTML content to the notes of the object."""
        content = self._build_content(notes, SED_NOTES, add_xhtml_markup)
        if self._notes is None:
            self._notes = content
        else:
            self._notes.extend(list(content))

    def unset_notes(self) -> None:
        self._notes = None

    @property
    def annotation(self) -> Optional[ElementType]:
        """The <annotation> element of the object."""
        return self._annotation

    @annotation.setter
    def annotation(self, value: Union[None, str, bytes, ElementType]) -> None:
        self.set_annotation(value)

    @annotation.deleter
    def annotation(self) -> None:
        self._annotation = None

    @property
    def annotation_string(self) -> str:
        """The XML string of the annotation, an empty string if it's not set."""
        return self._content_string('annotation', self._annotation)

    def set_annotation(self, annotation: Union[None, str, bytes, ElementType]) -> None:
        if annotation is None:
            self._annotation = None
        else:
            self._annotation = self._build_content(annotation, SED_ANNOTATION)

    def append_annotation(self, annotation: Union[str, bytes, ElementType]) -> None:
        content = self._build_content(annotation, SED_ANNOTATION)
        if self._annotation is None:
            self._annotation = content
        else:
            self._annotation.extend(list(content))

    def unset_annotation(self) -> None:
        self._annotation = None

    @staticmethod
    def _content_string(name: str, content: Optional[ElementType]) -> str:
        if content is None:
            return ''
        # Copies don't inherit the namespace declarations of the wrapper
        return '<{0}>{1}</{0}>'.format(
            name, ''.join(etree.tostring(copy.deepcopy(child), encoding='unicode')
                          for child in content)
        )

    @staticmethod
    def _build_content(content: Union[str, bytes, ElementType], tag: str,
                       add_xhtml_markup: bool = False) -> ElementType:
        """Builds a wrapper element for notes or annotation content."""
        wrapper = etree.Element(tag)

        if isinstance(content, bytes):
            content = content.decode('utf-8')

        if isinstance(content, str):
            text = content.strip()
            if text.startswith('<?xml'):
                text = text[text.index('?>') + 2:]

            if add_xhtml_markup and not text.startswith('<'):
                paragraph = etree.SubElement(wrapper, f'{{{XHTML_NAMESPACE}}}p',
                                             nsmap={None: XHTML_NAMESPACE})
                paragraph.text = text
                return wrapper

            try:
                root = etree.fromstring(f'<content>{text}</content>')
            except etree.XMLSyntaxError as err:
                msg = _("invalid XML content for {!r}: {}")
                raise SedValueError(msg.format(local_name(tag), err)) from None

            if root.text and root.text.strip():
                msg = _("text content is not allowed in {!r}, provide XML elements")
                raise SedValueError(msg.format(local_name(tag)))

            children = list(root)
            if len(children) == 1 and local_name(children[0].tag) == local_name(tag):
                children = list(children[0])
        elif isinstance(content, etree._Element):
            if local_name(content.tag) == local_name(tag):
                children = list(content)
            else:
                children = [content]
        else:
            msg = _("invalid type {!r} for {!r} content")
            raise SedTypeError(msg.format(type(content), local_name(tag)))

        for child in children:
            if not isinstance(child.tag, str):
                continue
            elif tag == SED_NOTES and not child.tag.startswith(f'{{{XHTML_NAMESPACE}}}'):
                msg = _("the content of notes must be in the XHTML namespace, found {!r}")
                raise SedValueError(msg.format(child.tag))
            elif unqualified_tag(child) is not None:
                msg = _("elements in {!r} must have a namespace, found {!r}")
                raise SedValueError(msg.format(local_name(tag), unqualified_tag(child)))
            elif child.tag.startswith(f'{{{SEDML_NAMESPACE}}}'):
                msg = _("the SED-ML namespace can't be used in {!r}, found {!r}")
                raise SedValueError(msg.format(local_name(tag), child.tag))
            wrapper.append(copy.deepcopy(child))

        return wrapper

    ###
    # Tree navigation
    def iter_children(self) -> Iterator['SedBase']:
        """Iterates the SED-ML objects that are direct children of the object."""
        for items in self._lists.values():
            yield from items
        for value in self._elements.values():
            if isinstance(value, SedBase):
                yield value

    def iter_elements(self) -> Iterator['SedBase']:
        """Iterates the SED-ML objects that are descendants of the object, in document order."""
        for child in self.iter_children():
            yield child
            yield from child.iter_elements()

    def get_all_elements(self) -> list['SedBase']:
        return list(self.iter_elements())

    def get_element_by_sid(self, sid: str) -> Optional['SedBase']:
        """Returns the first descendant object with the given id, `None` if not found."""
        for obj in self.iter_elements():
            if obj._attributes.get('id') == sid:
                return obj
        return None

    def get_element_by_metaid(self, metaid: str) -> Optional['SedBase']:
        """Returns the first descendant object with the given metaid, `None` if not found."""
        for obj in self.iter_elements():
            if obj._attributes.get('metaid') == metaid:
                return obj
        return None

    ###
    # Copy
    def clone(self: ST) -> ST:
        """Returns a deep copy of the object, detached from the parent."""
        obj = object.__new__(self.__class__)
        obj._sed_namespaces = self.namespaces.clone()
        obj._parent = None
        obj._attributes = self._attributes.copy()
        obj._notes = copy.deepcopy(self._notes)
        obj._annotation = copy.deepcopy(self._annotation)
        obj._line = self._line
        obj._column = self._column
        obj._lists = {k: v.copy_to(obj) for k, v in self._lists.items()}
        obj._elements = {}
        for name, value in self._elements.items():
            obj._elements[name] = self._elements_map[name].copy_value(value, obj)
        return obj

    ###
    # XML read and write
    @property
    def tag(self) -> str:
        return f'{{{self.namespaces.uri or SEDML_NAMESPACE}}}{self.element_name}'

    def get_nsmap(self) -> dict[Optional[str], str]:
        """Returns the namespace map for the XML element of the object."""
        return {(k or None): v for k, v in self.namespaces.items()}

    def write_element(self, parent: Optional[ElementType] = None) -> ElementType:
        """
        Writes the object as an XML element.

        :param parent: the optional parent element. If provided the new element \
        is appended to it, otherwise a new root element is created.
        :return: the new element.
        """
        if parent is None:
            elem = etree.Element(self.tag, nsmap=self.get_nsmap())
        else:
            elem = etree.SubElement(parent, self.tag)

        self.write_attributes(elem)
        for content in (self._notes, self._annotation):
            if content is not None:
                content_elem = etree.SubElement(elem, content.tag)
                for child in content:
                    content_elem.append(copy.deepcopy(child))

        for items in self._lists.values():
            if items:
                list_elem = etree.SubElement(elem, f'{{{SEDML_NAMESPACE}}}{items.element_name}')
                for item in items:
                    item.write_element(list_elem)

        for name, element in self._elements_map.items():
            value = self._elements.get(name)
            if value is not None:
                element.write(value, elem)

        return elem

    def write_attributes(self, elem: ElementType) -> None:
        for xml_name, attribute in self._attributes_map.items():
            value = self._attributes.get(xml_name)
            if value is not None:
                elem.set(xml_name, attribute.encode(value))

    def to_xml_string(self, pretty_print: bool = True) -> str:
        """Returns the XML string of the object."""
        elem = self.write_element()
        etree.cleanup_namespaces(elem, keep_ns_prefixes=[k for k in self.namespaces if k])
        return cast(str, etree.tostring(elem, encoding='unicode', pretty_print=pretty_print))

    def read_element(self, elem: ElementType, log: SedErrorLog) -> None:
        """
        Reads the content of an XML element into the object. Problems are
        logged into the error log, the unknown parts are skipped.
        """
        self._line = elem.sourceline or 0
        self.read_attributes(elem, log)

        read_tags: set[str] = set()
        for child in elem:
            if not isinstance(child.tag, str):
                continue
            elif child.tag == SED_NOTES:
                self._read_notes(child, log)
            elif child.tag == SED_ANNOTATION:
                self._read_annotation(child, log)
            elif child.tag in read_tags:
                self._log(log, SedErrorCode.NotSchemaConformant, child,
                          _("Duplicate <{}> in <{}>").format(
                              local_name(child.tag), self.element_name))
            elif child.tag.startswith(f'{{{SEDML_NAMESPACE}}}listOf') and \
                    local_name(child.tag) in self._lists:
                read_tags.add(child.tag)
                self._read_list(child, log)
            else:
                for element in self._elements_map.values():
                    if element.tag == child.tag:
                        read_tags.add(child.tag)
                        element.read(child, self, log)
                        break
                else:
                    self._log(log, SedErrorCode.UnrecognizedElement, child,
                              _("Element <{}> is not allowed in <{}>").format(
                                  local_name(child.tag), self.element_name))

    def read_attributes(self, elem: ElementType, log: SedErrorLog) -> None:
        for name, text in elem.attrib.items():
            if name.startswith('{'):
                continue

            attribute = self._attributes_map.get(name)
            if attribute is None:
                self._log(log, SedErrorCode.UnknownCoreAttribute, elem,
                          _("Attribute {!r} is not allowed on <{}>").format(
                              name, self.element_name))
                continue

            try:
                self._attributes[name] = attribute.decode(text)
            except (SedValueError, SedTypeError) as err:
                if isinstance(attribute, SIdAttribute):
                    error_id = SedErrorCode.InvalidIdSyntax
                elif isinstance(attribute, MetaIdAttribute):
                    error_id = SedErrorCode.InvalidMetaidSyntax
                else:
                    error_id = SedErrorCode.NotSchemaConformant
                self._log(log, error_id, elem, str(err))

    def _read_notes(self, elem: ElementType, log: SedErrorLog) -> None:
        if self._notes is not None:
            self._log(log, SedErrorCode.OnlyOneNotesElementAllowed, elem,
                      _("Duplicate <notes> in <{}>").format(self.element_name))
            return

        notes = etree.Element(SED_NOTES, nsmap={None: SEDML_NAMESPACE})
        for child in elem:
            if not isinstance(child.tag, str):
                continue
            elif not child.tag.startswith(f'{{{XHTML_NAMESPACE}}}'):
                self._log(log, SedErrorCode.NotesNotInXHTMLNamespace, child,
                          _("Element {!r} in <notes> of <{}>").format(
                              child.tag, self.element_name))
            notes.append(copy.deepcopy(child))
        self._notes = notes

    def _read_annotation(self, elem: ElementType, log: SedErrorLog) -> None:
        if self._annotation is not None:
            self._log(log, SedErrorCode.MultipleAnnotations, elem,
                      _("Duplicate <annotation> in <{}>").format(self.element_name))
            return

        annotation = etree.Element(SED_ANNOTATION)
        for child in elem:
            if not isinstance(child.tag, str):
                continue

            tag = unqualified_tag(child)
            if tag is not None:
                self._log(log, SedErrorCode.MissingAnnotationNamespace, child,
                          _("Element <{}> in <annotation> of <{}> has no namespace").format(
                              tag, self.element_name))
            elif child.tag.startswith(f'{{{SEDML_NAMESPACE}}}'):
                self._log(log, SedErrorCode.SedNamespaceInAnnotation, child,
                          _("Element <{}> in <annotation> of <{}> is in the "
                            "SED-ML namespace").format(local_name(child.tag), self.element_name))
            else:
                annotation.append(copy.deepcopy(child))
        self._annotation = annotation

    def _read_list(self, elem: ElementType, log: SedErrorLog) -> None:
        items = self._lists[local_name(elem.tag)]
        classes = {
            f'{{{SEDML_NAMESPACE}}}{cls.element_name}': cls
            for cls in self._lists_map[items.element_name].item_classes
        }
        count = 0
        for child in elem:
            if not isinstance(child.tag, str) or child.tag in (SED_NOTES, SED_ANNOTATION):
                continue

            cls = classes.get(child.tag)
            if cls is None:
                self._log(log, SedErrorCode.UnrecognizedElement, child,
                          _("Element <{}> is not allowed in <{}>").format(
                              local_name(child.tag), items.element_name))
                continue

            obj = cls(sed_namespaces=self.namespaces)
            obj.read_element(child, log)
            items.append_and_own(obj)
            count += 1

        if not count:
            self._log(log, SedErrorCode.EmptyListElement, elem,
                      _("<{}> in <{}> has no items").format(
                          items.element_name, self.element_name))

    @staticmethod
    def _log(log: SedErrorLog, error_id: int, elem: ElementType, details: str = '') -> None:
        log.log_error(error_id, details, line=elem.sourceline or 0)

    ###
    # Data representation
    def to_dict(self) -> dict[str, Any]:
        """
        Returns a dictionary representation of the object: attributes are
        prefixed by '@', lists map element names to lists of items.
        """
        data: dict[str, Any] = {}
        for xml_name in self._attributes_map:
            if xml_name in self._attributes:
                data[f'@{xml_name}'] = self._attributes[xml_name]

        if self._notes is not None:
            data['notes'] = self.notes_string
        if self._annotation is not None:
            data['annotation'] = self.annotation_string

        for xml_name, items in self._lists.items():
            if items:
                content: dict[str, list[dict[str, Any]]] = {}
                for item in items:
                    content.setdefault(item.element_name, []).append(item.to_dict())
                data[xml_name] = content

        for name, element in self._elements_map.items():
            if name in self._elements:
                data[element.local_name] = element.to_data(self._elements[name])

        return data


class SedListOf(MutableSequence[ST]):
    """
    A list of SED-ML objects of a parent object.

    :param item_class: the base class of the items.
    :param element_name: the XML name of the list element, e.g. 'listOfModels'.
    :param parent: the object that owns the list.
    """
    type_code = SedTypeCode.SEDML_LIST_OF

    def __init__(self, item_class: type[ST],
                 element_name: str = 'listOf',
                 parent: Optional[SedBase] = None) -> None:
        self.item_class = item_class
        self.element_name = element_name
        self._parent = parent
        self._items: list[ST] = []

    @overload
    def __getitem__(self, i: int) -> ST: ...

    @overload
    def __getitem__(self, s: slice) -> list[ST]: ...

    def __getitem__(self, i: Union[int, slice]) -> Union[ST, list[ST]]:
        return self._items[i]

    def __setitem__(self, i: Union[int, slice], item: Any) -> None:
        if isinstance(i, slice):
            raise SedTypeError(_("slice assignment is not supported"))
        obj = self._check_item(item).clone()
        old = self._items[i]
        obj._parent = self._parent
        self._items[i] = obj
        old._parent = None

    def __delitem__(self, i: Union[int, slice]) -> None:
        removed = self._items[i]
        del self._items[i]
        for item in removed if isinstance(removed, list) else (removed,):
            item._parent = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ST]:
        return iter(self._items)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self._items)

    @property
    def parent(self) -> Optional[SedBase]:
        return self._parent

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def item_classes(self) -> list[type[ST]]:
        return list(iter_concrete_classes(self.item_class))

    def _check_item(self, item: Any) -> ST:
        if item is None:
            raise SedValueError(_("can't add None to {!r}").format(self.element_name))
        elif type(item) not in self.item_classes:
            msg = _("invalid type {!r} for an item of {!r}")
            raise SedTypeError(msg.format(type(item), self.element_name))
        elif self._parent is not None and \
                (item.level, item.version) != (self._parent.level, self._parent.version):
            msg = _("SED-ML Level/Version mismatch adding {!r} to {!r}")
            raise SedValueError(msg.format(item, self.element_name))
        return item

    def insert(self, i: int, item: ST) -> None:
        """Inserts a copy of the item at the given position."""
        obj = self._check_item(item).clone()
        obj._parent = self._parent
        self._items.insert(i, obj)

    def append(self, item: ST) -> ST:
        """Appends a copy of the item and returns the appended copy."""
        self.insert(len(self._items), item)
        return self._items[-1]

    def append_and_own(self, item: ST) -> ST:
        """Appends the item itself, that must be not attached to another parent."""
        self._check_item(item)
        if item._parent is not None:
            msg = _("{!r} is already a child of another object")
            raise SedValueError(msg.format(item))
        item._parent = self._parent
        self._items.append(item)
        return item

    def create(self, cls: Optional[type[ST]] = None) -> ST:
        """
        Creates a new item, appends it to the list and returns it.

        :param cls: the class of the new item, must be provided if the base \
        class of the items is abstract.
        """
        if cls is None:
            cls = self.item_class
        elif not issubclass(cls, self.item_class):
            msg = _("{!r} is not a subclass of {!r}")
            raise SedTypeError(msg.format(cls, self.item_class))

        if self._parent is not None:
            obj = cls(sed_namespaces=self._parent.namespaces)
        else:
            obj = cls()
        return self.append_and_own(obj)

    def get(self, key: Union[int, str]) -> Optional[ST]:
        """Gets an item by index or by id. Returns `None` if it's missing."""
        if isinstance(key, int):
            if 0 <= key < len(self._items):
                return self._items[key]
            return None

        for item in self._items:
            if item._attributes.get('id') == key:
                return item
        return None

    def remove(self, key: Union[int, str, ST]) -> Optional[ST]:  # type: ignore[override]
        """
        Removes an item by index, by id or by identity. Returns the
        removed item, detached from the parent, or `None` if it's missing.
        """
        if isinstance(key, SedBase):
            for k, item in enumerate(self._items):
                if item is key:
                    break
            else:
                return None
        elif isinstance(key, int):
            if not 0 <= key < len(self._items):
                return None
            k = key
        else:
            for k, item in enumerate(self._items):
                if item._attributes.get('id') == key:
                    break
            else:
                return None

        item = self._items.pop(k)
        item._parent = None
        return item

    def copy_to(self, parent: SedBase) -> 'SedListOf[ST]':
        """Returns a deep copy of the list for another parent."""
        obj: SedListOf[ST] = SedListOf(self.item_class, self.element_name, parent)
        for item in self._items:
            clone = item.clone()
            clone._parent = parent
            obj._items.append(clone)
        return obj
