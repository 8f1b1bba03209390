from __future__ import annotations

import logging
from dataclasses import dataclass, field

from typing_extensions import Any, Dict, List, Optional

from .failures import AmbiguousAccessor
from .invoker import Invoker, MethodInvoker
from .property_namer import is_getter, is_setter, is_valid_property_name, method_to_property
from .wrapped_method import WrappedMethod
from ..utils import is_assignable

logger = logging.getLogger(__name__)


@dataclass
class AccessorTable:
    """
    The getters and setters of a class while its reflector is being built.
    """

    get_invokers: Dict[str, Invoker] = field(default_factory=dict)
    set_invokers: Dict[str, Invoker] = field(default_factory=dict)

    def add_getter(self, name: str, invoker: Invoker) -> None:
        if is_valid_property_name(name):
            self.get_invokers[name] = invoker

    def add_setter(self, name: str, invoker: Invoker) -> None:
        if is_valid_property_name(name):
            self.set_invokers[name] = invoker

    def has_getter(self, name: str) -> bool:
        return name in self.get_invokers

    def has_setter(self, name: str) -> bool:
        return name in self.set_invokers

    def getter_type(self, name: str) -> Optional[Any]:
        invoker = self.get_invokers.get(name)
        return None if invoker is None else invoker.type


def _group_by_property(methods: List[WrappedMethod]) -> Dict[str, List[WrappedMethod]]:
    result: Dict[str, List[WrappedMethod]] = {}
    for method in methods:
        result.setdefault(method_to_property(method.name), []).append(method)
    return result


@dataclass
class AccessorResolver:
    """
    Turns collected methods into getters and setters.

    A method without parameters named ``get_<name>``, ``getName``, ``is_<name>`` or ``isName`` is a getter
    candidate, a method with a single parameter named ``set_<name>`` or ``setName`` is a setter candidate.
    When several candidates map to the same property, getters are resolved by the most specific return type and
    setters by the type of the resolved getter.

    Overrides are judged by their declared types only. A subclass that redeclares a getter with a return type
    unrelated to the inherited one makes the property ambiguous, even though attribute lookup would only ever
    reach the override.
    """

    def resolve(self, methods: List[WrappedMethod], table: AccessorTable) -> None:
        """
        Add the accessor methods among `methods` to `table`.

        :param methods: The unique methods of a class.
        :param table: The table to fill.
        :raises AmbiguousAccessor: If the candidates of a property cannot be told apart.
        """
        getters = [m for m in methods if m.parameter_count == 0 and is_getter(m.name)]
        setters = [m for m in methods if m.parameter_count == 1 and is_setter(m.name)]
        self._resolve_getter_conflicts(_group_by_property(getters), table)
        self._resolve_setter_conflicts(_group_by_property(setters), table)

    def _resolve_getter_conflicts(
        self, conflicting_getters: Dict[str, List[WrappedMethod]], table: AccessorTable
    ) -> None:
        for property_name, candidates in conflicting_getters.items():
            first = candidates[0]
            getter = first
            getter_type = first.return_type
            for method in candidates[1:]:
                method_type = method.return_type
                if method_type == getter_type:
                    raise AmbiguousAccessor(first.clazz, property_name, "getter")
                elif is_assignable(method_type, getter_type):
                    # the current getter is the more specific override
                    pass
                elif is_assignable(getter_type, method_type):
                    getter = method
                    getter_type = method_type
                else:
                    raise AmbiguousAccessor(first.clazz, property_name, "getter")
            if len(candidates) > 1:
                logger.debug(f"Resolved getter of {property_name} to {getter}")
            table.add_getter(property_name, MethodInvoker(getter))

    def _resolve_setter_conflicts(
        self, conflicting_setters: Dict[str, List[WrappedMethod]], table: AccessorTable
    ) -> None:
        for property_name, candidates in conflicting_setters.items():
            first = candidates[0]
            if len(candidates) == 1:
                table.add_setter(property_name, MethodInvoker(first))
                continue
            expected_type = table.getter_type(property_name)
            if expected_type is None:
                raise AmbiguousAccessor(first.clazz, property_name, "setter")
            setter = next(
                (m for m in candidates if m.parameter_types[0] == expected_type), None
            )
            if setter is None:
                raise AmbiguousAccessor(first.clazz, property_name, "setter")
            table.add_setter(property_name, MethodInvoker(setter))
