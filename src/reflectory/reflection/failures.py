"""
This module defines the exceptions raised while introspecting classes and while accessing their properties.
"""

from __future__ import annotations

from dataclasses import dataclass

from typing_extensions import Type

from ..utils import DataclassException


@dataclass
class ReflectionError(DataclassException):
    """
    Base class of all errors raised by the reflection package.
    """


@dataclass
class AmbiguousAccessor(ReflectionError):
    """
    Raised when several getters or setters map to the same property and none of them can be preferred.
    Building the reflector of the class is aborted and nothing is cached for it.
    """

    clazz: Type
    """
    The class that declares the first conflicting accessor.
    """
    property_name: str
    """
    The name of the property with conflicting accessors.
    """
    kind: str
    """
    Either "getter" or "setter".
    """

    def __post_init__(self):
        self.message = (
            f"Illegal overloaded {self.kind} method with ambiguous type for property {self.property_name}"
            f" in class {self.clazz}. This breaks the accessor naming convention and can cause"
            f" unpredictable results."
        )
        super().__post_init__()


@dataclass
class NoSuchAccessor(ReflectionError, AttributeError):
    """
    Raised when a getter, a setter or the type of a property is requested but the class has none.
    """

    clazz: Type
    """
    The introspected class.
    """
    property_name: str
    """
    The requested property name.
    """
    kind: str
    """
    Either "getter" or "setter".
    """

    def __post_init__(self):
        self.message = (
            f"There is no {self.kind} for property named '{self.property_name}' in '{self.clazz}'"
        )
        super().__post_init__()


@dataclass
class AccessError(ReflectionError):
    """
    Raised when reading or writing a property failed at the point of use, for instance because the accessor
    itself raised or the target refused the assignment. The original exception is kept as the cause.
    """

    invoker_name: str
    """
    A description of the invoker that failed.
    """
    original_exception: Exception
    """
    The exception raised by the underlying call or attribute access.
    """

    def __post_init__(self):
        self.message = (
            f"Could not access {self.invoker_name}. "
            f"({self.original_exception.__class__.__name__}: {self.original_exception})"
        )
        super().__post_init__()


@dataclass
class NoDefaultConstructor(ReflectionError):
    """
    Raised when the default constructor of a class is requested but the class cannot be instantiated without
    arguments.
    """

    clazz: Type

    def __post_init__(self):
        self.message = f"There is no default constructor for {self.clazz}"
        super().__post_init__()
