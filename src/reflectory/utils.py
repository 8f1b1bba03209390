from __future__ import annotations

import sys
import types
from dataclasses import dataclass, field

from typing_extensions import (
    Any,
    Callable,
    Dict,
    ForwardRef,
    Format,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_annotations,
    get_args,
    get_origin,
    get_type_hints,
)

T = TypeVar("T")


@dataclass
class DataclassException(Exception):
    """
    A base exception class for dataclass-based exceptions.
    The way this is used is by inheriting from it and setting the `message` field in the __post_init__ method,
    then calling the super().__post_init__() method.
    """

    message: str = field(kw_only=True, default=None)

    def __post_init__(self):
        super().__init__(self.message)


def get_full_class_name(cls):
    """
    Returns the full name of a class, including the module name.

    :param cls: The class.
    :return: The full name of the class
    """
    return cls.__module__ + "." + cls.__name__


def type_name(type_: Any) -> str:
    """
    :param type_: A class, a typing construct or an unresolved annotation string.
    :return: A stable name for the type, used to build method signatures.
    """
    if isinstance(type_, type) and get_origin(type_) is None:
        return get_full_class_name(type_)
    return repr(type_)


def synthetic(function: Callable[..., T]) -> Callable[..., T]:
    """
    Mark a method as generated forwarding code.

    Synthetic methods exist only to forward to a real implementation (for instance methods emitted by code
    generators to satisfy a narrowed signature) and are never considered as accessor candidates.
    """
    function.__synthetic__ = True
    return function


def is_synthetic(function: Any) -> bool:
    return bool(getattr(function, "__synthetic__", False))


def _namespaces(obj: Any) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    if isinstance(obj, type):
        module = sys.modules.get(obj.__module__)
        return (vars(module) if module is not None else {}), dict(vars(obj))
    return getattr(obj, "__globals__", {}), {}


def _resolve_annotation(
    annotation: Any, globalns: Dict[str, Any], localns: Dict[str, Any]
) -> Any:
    expression = annotation
    if isinstance(expression, ForwardRef):
        expression = expression.__forward_arg__
    if not isinstance(expression, str):
        return annotation
    try:
        return eval(expression, globalns, localns)
    except (NameError, AttributeError, TypeError, SyntaxError):
        return annotation


def resolved_type_hints(obj: Any) -> Dict[str, Any]:
    """
    Resolve the annotations of a function or class.

    Forward references that cannot be resolved are kept in their unresolved form. Only the annotation that
    fails is affected, every other annotation of the object is still resolved.

    :param obj: The function or class.
    :return: A mapping from annotated name to its (possibly unresolved) type.
    """
    try:
        return get_type_hints(obj)
    except (NameError, TypeError, SyntaxError):
        pass
    globalns, localns = _namespaces(obj)
    return {
        name: _resolve_annotation(annotation, globalns, localns)
        for name, annotation in get_annotations(obj, format=Format.FORWARDREF).items()
    }


def _is_union(type_: Any) -> bool:
    return get_origin(type_) in (Union, types.UnionType)


def is_assignable(wider: Any, narrower: Any) -> bool:
    """
    Check whether a value of type `narrower` can be used where `wider` is expected.

    Generic aliases are compared by their origin, unions are checked member wise and unresolved annotations
    are only assignable to themselves.

    :param wider: The expected type.
    :param narrower: The candidate type.
    :return: True if `narrower` is `wider` or one of its descendants.
    """
    if wider is narrower or wider == narrower:
        return True
    if wider is object or wider is Any:
        return True
    if _is_union(narrower):
        return all(is_assignable(wider, arg) for arg in get_args(narrower))
    if _is_union(wider):
        return any(is_assignable(arg, narrower) for arg in get_args(wider))
    wider_class = get_origin(wider) or wider
    narrower_class = get_origin(narrower) or narrower
    if not (isinstance(wider_class, type) and isinstance(narrower_class, type)):
        return False
    try:
        return issubclass(narrower_class, wider_class)
    except TypeError:
        return False


FRAMEWORK_MODULES = frozenset(
    {
        "builtins",
        "abc",
        "enum",
        "typing",
        "typing_extensions",
        "collections.abc",
        "_collections_abc",
    }
)
"""
Modules whose classes only carry interpreter machinery and never contribute properties.
"""


def is_framework_class(clazz: Type) -> bool:
    return clazz.__module__ in FRAMEWORK_MODULES


def class_chain(cls: Type) -> list[Type]:
    """
    :param cls: The class.
    :return: The class followed by its primary base chain, without `object`.
    """
    result = []
    current = cls
    while current is not None and current is not object:
        result.append(current)
        current = current.__bases__[0] if current.__bases__ else None
    return result


def interfaces_of(cls: Type) -> list[Type]:
    """
    The secondary bases of a class (mixins, abstract base classes, protocols) together with everything they
    inherit from, in method resolution order and without `object`.

    :param cls: The class.
    :return: The interfaces of the class.
    """
    result = []
    for base in cls.__bases__[1:]:
        for interface in base.__mro__:
            if interface is not object and interface not in result:
                result.append(interface)
    return result
