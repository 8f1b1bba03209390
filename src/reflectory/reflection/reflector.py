from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from types import MappingProxyType

from typing_extensions import Any, Callable, Mapping, Optional, Tuple, Type

from .accessor_resolver import AccessorResolver, AccessorTable
from .failures import NoDefaultConstructor, NoSuchAccessor
from .field_scanner import FieldScanner
from .invoker import Invoker
from .method_collector import UniqueMethodCollector
from .policy import AccessPolicy

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Reflector:
    """
    The cached description of a class: which properties can be read and written, through which invoker, with
    which value type, and whether the class can be instantiated without arguments.

    A reflector is built completely in its constructor and never changes afterwards.

    Example:
        >>> @dataclass
        ... class Account:
        ...     owner: str = ""
        ...     def get_balance(self) -> int:
        ...         return 0
        ...
        >>> reflector = Reflector(Account)
        >>> reflector.readable_property_names
        ('balance', 'owner')
        >>> reflector.get_setter_type("owner")
        <class 'str'>
    """

    clazz: Type
    """
    The introspected class.
    """
    policy: AccessPolicy = field(default_factory=AccessPolicy, repr=False)
    """
    Which members may be used as accessors.
    """
    _get_invokers: Mapping[str, Invoker] = field(init=False, repr=False)
    _set_invokers: Mapping[str, Invoker] = field(init=False, repr=False)
    _get_types: Mapping[str, Any] = field(init=False, repr=False)
    _set_types: Mapping[str, Any] = field(init=False, repr=False)
    _case_insensitive_property_map: Mapping[str, str] = field(init=False, repr=False)
    _default_constructor: Optional[Callable[[], Any]] = field(init=False, repr=False)
    readable_property_names: Tuple[str, ...] = field(init=False)
    """
    The names of the properties that have a getter, in discovery order.
    """
    writable_property_names: Tuple[str, ...] = field(init=False)
    """
    The names of the properties that have a setter, in discovery order.
    """

    def __post_init__(self):
        self._default_constructor = self._find_default_constructor()

        table = AccessorTable()
        methods = UniqueMethodCollector(self.policy).collect(self.clazz)
        AccessorResolver().resolve(methods, table)
        FieldScanner(self.policy).scan(self.clazz, table)

        self._get_invokers = MappingProxyType(table.get_invokers)
        self._set_invokers = MappingProxyType(table.set_invokers)
        self._get_types = MappingProxyType(
            {name: invoker.type for name, invoker in table.get_invokers.items()}
        )
        self._set_types = MappingProxyType(
            {name: invoker.type for name, invoker in table.set_invokers.items()}
        )
        self.readable_property_names = tuple(table.get_invokers)
        self.writable_property_names = tuple(table.set_invokers)

        case_insensitive_property_map = {}
        for name in self.readable_property_names + self.writable_property_names:
            case_insensitive_property_map[name.upper()] = name
        self._case_insensitive_property_map = MappingProxyType(
            case_insensitive_property_map
        )
        logger.debug(
            f"Built reflector for {self.clazz.__qualname__} with {len(self.readable_property_names)} readable "
            f"and {len(self.writable_property_names)} writable properties"
        )

    def _find_default_constructor(self) -> Optional[Callable[[], Any]]:
        if inspect.isabstract(self.clazz):
            return None
        try:
            inspect.signature(self.clazz).bind()
        except (TypeError, ValueError):
            return None
        return self.clazz

    @property
    def type(self) -> Type:
        return self.clazz

    def has_default_constructor(self) -> bool:
        return self._default_constructor is not None

    def get_default_constructor(self) -> Callable[[], Any]:
        """
        :return: A callable creating an instance of the class without arguments.
        :raises NoDefaultConstructor: If the class is abstract or requires arguments.
        """
        if self._default_constructor is None:
            raise NoDefaultConstructor(self.clazz)
        return self._default_constructor

    def new_instance(self) -> Any:
        return self.get_default_constructor()()

    def has_getter(self, property_name: str) -> bool:
        return property_name in self._get_invokers

    def has_setter(self, property_name: str) -> bool:
        return property_name in self._set_invokers

    def get_get_invoker(self, property_name: str) -> Invoker:
        try:
            return self._get_invokers[property_name]
        except KeyError:
            raise NoSuchAccessor(self.clazz, property_name, "getter") from None

    def get_set_invoker(self, property_name: str) -> Invoker:
        try:
            return self._set_invokers[property_name]
        except KeyError:
            raise NoSuchAccessor(self.clazz, property_name, "setter") from None

    def get_getter_type(self, property_name: str) -> Any:
        """
        :param property_name: The name of the property.
        :return: The type of the value the getter of the property returns.
        :raises NoSuchAccessor: If the property has no getter.
        """
        try:
            return self._get_types[property_name]
        except KeyError:
            raise NoSuchAccessor(self.clazz, property_name, "getter") from None

    def get_setter_type(self, property_name: str) -> Any:
        """
        :param property_name: The name of the property.
        :return: The type of the value the setter of the property accepts.
        :raises NoSuchAccessor: If the property has no setter.
        """
        try:
            return self._set_types[property_name]
        except KeyError:
            raise NoSuchAccessor(self.clazz, property_name, "setter") from None

    def find_property_name(self, name: str) -> Optional[str]:
        """
        :param name: A property name in any letter case.
        :return: The property name as declared, or None if the class has no such property.
        """
        return self._case_insensitive_property_map.get(name.upper())

    def get_value(self, target: Any, property_name: str) -> Any:
        return self.get_get_invoker(property_name).invoke(target)

    def set_value(self, target: Any, property_name: str, value: Any) -> None:
        self.get_set_invoker(property_name).invoke(target, value)
