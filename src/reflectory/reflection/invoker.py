"""
Uniform handles for reading and writing one property, backed either by an accessor method or by direct
attribute access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from typing_extensions import Any

from .failures import AccessError
from .wrapped_field import WrappedField
from .wrapped_method import WrappedMethod


@dataclass(frozen=True)
class Invoker(ABC):
    """
    Reads or writes the value of one property on a target object.

    Any exception raised while accessing the target is wrapped in an :class:`AccessError`.
    """

    @abstractmethod
    def invoke(self, target: Any, *args: Any) -> Any:
        """
        Access the property on `target`.

        :param target: The object to read from or write to.
        :param args: Nothing for reads, the new value for writes.
        :return: The value for reads, whatever the accessor returns for writes.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def type(self) -> Any:
        """
        The value type of the property as seen by this invoker.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class MethodInvoker(Invoker):
    """
    Calls an accessor method.

    The method is looked up on the target, so overrides in subclasses of the introspected class are honoured.
    """

    method: WrappedMethod

    def invoke(self, target: Any, *args: Any) -> Any:
        try:
            return getattr(target, self.method.name)(*args)
        except Exception as e:
            raise AccessError(invoker_name=repr(self.method), original_exception=e) from e

    @property
    def type(self) -> Any:
        if self.method.parameter_count == 1:
            return self.method.parameter_types[0]
        return self.method.return_type


@dataclass(frozen=True)
class GetFieldInvoker(Invoker):
    """
    Reads a field. Static fields are read from the class that declares them.
    """

    field: WrappedField

    def invoke(self, target: Any, *args: Any) -> Any:
        owner = self.field.clazz if self.field.is_static else target
        try:
            return getattr(owner, self.field.name)
        except Exception as e:
            raise AccessError(invoker_name=repr(self.field), original_exception=e) from e

    @property
    def type(self) -> Any:
        return self.field.resolved_type


@dataclass(frozen=True)
class SetFieldInvoker(Invoker):
    """
    Writes a field. Static fields are written on the class that declares them.
    """

    field: WrappedField

    def invoke(self, target: Any, *args: Any) -> Any:
        owner = self.field.clazz if self.field.is_static else target
        try:
            setattr(owner, self.field.name, args[0])
        except Exception as e:
            raise AccessError(invoker_name=repr(self.field), original_exception=e) from e
        return None

    @property
    def type(self) -> Any:
        return self.field.resolved_type
