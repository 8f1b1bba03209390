from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from functools import cached_property
from types import FunctionType

from typing_extensions import Any, Optional, Tuple, Type

from ..utils import get_full_class_name, is_synthetic, resolved_type_hints, type_name

logger = logging.getLogger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class WrappedMethod:
    """
    A method declared in the body of a class together with its resolved parameter and return types.
    Missing annotations are treated as `object`.
    """

    clazz: Type
    """
    The class whose body declares the method.
    """
    name: str
    """
    The attribute name of the method.
    """
    member: Any = field(compare=False)
    """
    The raw class member, either a function, a staticmethod or a classmethod.
    """
    parameter_types: Tuple[Any, ...]
    """
    The types of the parameters, excluding the bound instance or class and variadic parameters.
    """
    return_type: Any
    """
    The declared return type.
    """

    @classmethod
    def from_member(
        cls, clazz: Type, name: str, member: Any
    ) -> Optional[WrappedMethod]:
        """
        Wrap a class member if it is a method.

        :param clazz: The class whose `__dict__` contains the member.
        :param name: The attribute name.
        :param member: The member itself.
        :return: The wrapped method, or None if the member is not a method or its signature is not available.
        """
        if isinstance(member, (staticmethod, classmethod)):
            function = member.__func__
            bound_parameters = 0 if isinstance(member, staticmethod) else 1
        elif isinstance(member, FunctionType):
            function = member
            bound_parameters = 1
        else:
            return None
        try:
            parameters = list(inspect.signature(function).parameters.values())
        except (ValueError, TypeError) as e:
            logger.debug(f"Skipping {clazz.__name__}.{name}, no signature available: {e}")
            return None

        hints = resolved_type_hints(function)
        parameter_types = tuple(
            hints.get(parameter.name, object)
            for parameter in parameters[bound_parameters:]
            if parameter.kind not in _VARIADIC
        )
        return cls(
            clazz=clazz,
            name=name,
            member=member,
            parameter_types=parameter_types,
            return_type=hints.get("return", object),
        )

    @property
    def function(self) -> FunctionType:
        if isinstance(self.member, (staticmethod, classmethod)):
            return self.member.__func__
        return self.member

    @cached_property
    def signature(self) -> str:
        """
        The identity of the method across a class hierarchy, formatted as
        ``return_type#name:parameter_type,parameter_type``.
        """
        result = f"{type_name(self.return_type)}#{self.name}"
        if self.parameter_types:
            result += ":" + ",".join(type_name(p) for p in self.parameter_types)
        return result

    @property
    def is_synthetic(self) -> bool:
        return is_synthetic(self.function)

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)

    def __repr__(self):
        return f"{get_full_class_name(self.clazz)}.{self.name}"
