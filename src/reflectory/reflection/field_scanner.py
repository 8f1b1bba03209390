from __future__ import annotations

import dataclasses
import inspect
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property

from typing_extensions import (
    Any,
    ClassVar,
    Final,
    ForwardRef,
    Format,
    List,
    Tuple,
    TYPE_CHECKING,
    Type,
    get_annotations,
    get_args,
    get_origin,
)

from .invoker import GetFieldInvoker, SetFieldInvoker
from .policy import AccessPolicy
from .wrapped_field import FieldKind, WrappedField
from ..utils import is_framework_class, resolved_type_hints

if TYPE_CHECKING:
    from .accessor_resolver import AccessorTable

logger = logging.getLogger(__name__)

_QUALIFIER_PATTERN = re.compile(
    r"^(?:typing(?:_extensions)?\.)?(ClassVar|Final)(?:\[(.*)\])?$"
)
_INIT_VAR_PATTERN = re.compile(r"^(?:dataclasses\.)?InitVar(?:\[.*\])?$")


def _unwrap_qualifiers(hint: Any) -> Tuple[Any, bool, bool]:
    """
    Remove `ClassVar` and `Final` qualifiers from an annotation.

    :param hint: The resolved annotation, or its string form if it could not be resolved.
    :return: The remaining type (None if nothing remains), whether it was static and whether it was final.
    """
    is_static = is_final = False
    while True:
        if isinstance(hint, ForwardRef):
            hint = hint.__forward_arg__
        if isinstance(hint, str):
            match = _QUALIFIER_PATTERN.match(hint.strip())
            if match is None:
                return hint, is_static, is_final
            qualifier, hint = match.group(1), match.group(2)
        elif hint is ClassVar or hint is Final:
            qualifier, hint = ("ClassVar" if hint is ClassVar else "Final"), None
        elif get_origin(hint) is ClassVar or get_origin(hint) is Final:
            qualifier = "ClassVar" if get_origin(hint) is ClassVar else "Final"
            hint = get_args(hint)[0]
        else:
            return hint, is_static, is_final
        if qualifier == "ClassVar":
            is_static = True
        else:
            is_final = True
        if hint is None:
            return None, is_static, is_final


def _is_init_var(hint: Any) -> bool:
    if isinstance(hint, ForwardRef):
        hint = hint.__forward_arg__
    if isinstance(hint, str):
        return _INIT_VAR_PATTERN.match(hint.strip()) is not None
    return hint is dataclasses.InitVar or isinstance(hint, dataclasses.InitVar)


def _is_plain_data(member: Any) -> bool:
    return not (
        inspect.isroutine(member)
        or inspect.isclass(member)
        or hasattr(type(member), "__get__")
    )


@dataclass
class FieldIntrospector(ABC):
    """
    Strategy that discovers the fields a class declares in its own body.
    """

    @abstractmethod
    def discover(self, owner_cls: Type) -> List[WrappedField]:
        """
        Return the fields declared by `owner_cls` itself, excluding inherited ones.
        """
        raise NotImplementedError


@dataclass
class DeclaredFieldIntrospector(FieldIntrospector):
    """
    Discover annotated attributes, `__slots__` entries, properties, cached properties and un-annotated data
    attributes of a class body.
    """

    def discover(self, owner_cls: Type) -> List[WrappedField]:
        namespace = vars(owner_cls)
        dataclass_fields = namespace.get("__dataclass_fields__", {})
        hints = resolved_type_hints(owner_cls)
        result: List[WrappedField] = []
        seen = set()

        for name, raw in get_annotations(owner_cls, format=Format.FORWARDREF).items():
            member = namespace.get(name)
            if isinstance(member, (property, cached_property)):
                continue
            seen.add(name)
            hint = hints.get(name, raw)
            if _is_init_var(hint):
                continue
            value_type, is_static, is_final = _unwrap_qualifiers(hint)
            has_class_value = name in namespace
            if is_final and has_class_value and name not in dataclass_fields:
                is_static = True
            if value_type is None:
                value_type = type(member) if has_class_value else object
            result.append(
                WrappedField(
                    clazz=owner_cls,
                    name=name,
                    resolved_type=value_type,
                    is_static=is_static,
                    is_final=is_final,
                )
            )

        for name, member in namespace.items():
            if name in seen or name.startswith("__"):
                continue
            if isinstance(member, property):
                result.append(self._wrap_property(owner_cls, name, member))
            elif isinstance(member, cached_property):
                result.append(
                    WrappedField(
                        clazz=owner_cls,
                        name=name,
                        resolved_type=resolved_type_hints(member.func).get(
                            "return", object
                        ),
                        kind=FieldKind.CACHED_PROPERTY,
                    )
                )
            elif _is_plain_data(member):
                result.append(
                    WrappedField(
                        clazz=owner_cls,
                        name=name,
                        resolved_type=type(member),
                        kind=FieldKind.PLAIN,
                    )
                )
            else:
                continue
            seen.add(name)

        slots = namespace.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in seen:
                result.append(
                    WrappedField(
                        clazz=owner_cls,
                        name=name,
                        resolved_type=object,
                        kind=FieldKind.SLOT,
                    )
                )
                seen.add(name)
        return result

    @staticmethod
    def _wrap_property(owner_cls: Type, name: str, member: property) -> WrappedField:
        value_type = object
        if member.fget is not None:
            value_type = resolved_type_hints(member.fget).get("return", object)
        elif member.fset is not None:
            setter_hints = resolved_type_hints(member.fset)
            setter_hints.pop("return", None)
            if setter_hints:
                value_type = list(setter_hints.values())[-1]
        return WrappedField(
            clazz=owner_cls,
            name=name,
            resolved_type=value_type,
            kind=FieldKind.PROPERTY,
            readable=member.fget is not None,
            writable=member.fset is not None,
        )


@dataclass
class FieldScanner:
    """
    Exposes fields as properties where no accessor method claims them.

    Classes are scanned from the most derived one upwards in method resolution order, and a name claimed at a
    more derived level is never overwritten by a field of the same name further up.
    """

    policy: AccessPolicy = field(default_factory=AccessPolicy)
    introspector: FieldIntrospector = field(default_factory=DeclaredFieldIntrospector)

    def scan(self, clazz: Type, table: AccessorTable) -> None:
        """
        Add field invokers to `table` for every accessible field of `clazz` and its bases.

        :param clazz: The introspected class.
        :param table: The :class:`AccessorTable` that already holds the method based accessors.
        """
        claimed = set()
        for owner in clazz.__mro__:
            if is_framework_class(owner):
                continue
            fields = self.introspector.discover(owner)
            for wrapped_field in fields:
                if wrapped_field.name in claimed:
                    continue
                if not self.policy.can_access(wrapped_field.name):
                    logger.debug(f"Skipping inaccessible field {wrapped_field}")
                    continue
                if (
                    wrapped_field.writable
                    and not wrapped_field.is_constant
                    and not table.has_setter(wrapped_field.name)
                ):
                    table.add_setter(wrapped_field.name, SetFieldInvoker(wrapped_field))
                if wrapped_field.readable and not table.has_getter(wrapped_field.name):
                    table.add_getter(wrapped_field.name, GetFieldInvoker(wrapped_field))
            claimed.update(wrapped_field.name for wrapped_field in fields)
