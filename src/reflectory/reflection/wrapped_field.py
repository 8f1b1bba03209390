from __future__ import annotations

import enum
from dataclasses import dataclass

from typing_extensions import Any, Type

from ..utils import get_full_class_name


class FieldKind(enum.Enum):
    """
    How a field is declared in the body of its class.
    """

    ANNOTATED = "annotated"
    """
    A class level annotation, including dataclass fields.
    """
    SLOT = "slot"
    """
    An entry of `__slots__` without annotation.
    """
    PROPERTY = "property"
    """
    A `property` object.
    """
    CACHED_PROPERTY = "cached_property"
    """
    A `functools.cached_property` object.
    """
    PLAIN = "plain"
    """
    An un-annotated data attribute in the class body.
    """


@dataclass(frozen=True)
class WrappedField:
    """
    A field declared by a class, together with the information needed to read and write it.
    """

    clazz: Type
    """
    The class that declares the field.
    """
    name: str
    """
    The attribute name of the field.
    """
    resolved_type: Any
    """
    The declared value type with `ClassVar` and `Final` qualifiers removed.
    """
    kind: FieldKind = FieldKind.ANNOTATED
    is_static: bool = False
    """
    Whether the value lives on the class rather than on its instances.
    """
    is_final: bool = False
    """
    Whether the field is declared as `Final`.
    """
    readable: bool = True
    writable: bool = True

    @property
    def is_constant(self) -> bool:
        """
        Static final fields are set once by the class body and never written through a reflector.
        """
        return self.is_static and self.is_final

    def __repr__(self):
        return f"{get_full_class_name(self.clazz)}.{self.name}"
