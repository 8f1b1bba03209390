"""
Naming conventions that map accessor method names to property names.

Both naming styles are understood: ``get_user_name``/``set_user_name``/``is_active`` map to ``user_name`` and
``active``, while ``getUserName``/``setUserName``/``isActive`` map to ``userName`` and ``active``.

Camel case names are decapitalized: the first letter is lower-cased unless the first two letters are both upper
case, in which case the name is an acronym and kept as it is (``getURL`` maps to ``URL``, ``getXValue`` to
``XValue``). This acronym rule is a policy inherited from the bean conventions and is applied literally, no
attempt is made to detect acronyms anywhere else in the name.
"""

from __future__ import annotations

from typing_extensions import Optional

from .failures import ReflectionError

GETTER_PREFIXES = ("get", "is")
SETTER_PREFIXES = ("set",)

RESERVED_MARKER = "__"
"""
Names starting with this marker are interpreter level identifiers and never properties.
"""
SUNDER_MARKER = "_"
"""
Names both starting and ending with this marker (like `_value_`) are reserved by the standard library.
"""
RESERVED_NAMES = frozenset(
    {
        "class",
        "serialVersionUID",
        "serial_version_uid",
        # bookkeeping that abc and typing store on user classes
        "_abc_impl",
        "_is_protocol",
        "_is_runtime_protocol",
    }
)
"""
Names that are never properties, regardless of where they come from.
"""


def _strip_prefix(name: str, prefixes) -> Optional[str]:
    for prefix in prefixes:
        if not name.startswith(prefix):
            continue
        remainder = name[len(prefix) :]
        if remainder.startswith("_"):
            remainder = remainder[1:]
            if remainder:
                return remainder
        elif remainder[:1].isupper():
            return decapitalize(remainder)
    return None


def decapitalize(name: str) -> str:
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[:1].lower() + name[1:]


def method_to_property(name: str) -> str:
    """
    :param name: The name of an accessor method.
    :return: The name of the property the accessor belongs to.
    """
    if not is_property(name):
        raise ReflectionError(
            message=f"Error parsing property name '{name}'. Didn't start with 'is', 'get' or 'set'."
        )
    return _strip_prefix(name, GETTER_PREFIXES + SETTER_PREFIXES)


def is_getter(name: str) -> bool:
    return _strip_prefix(name, GETTER_PREFIXES) is not None


def is_setter(name: str) -> bool:
    return _strip_prefix(name, SETTER_PREFIXES) is not None


def is_property(name: str) -> bool:
    return is_getter(name) or is_setter(name)


def is_valid_property_name(name: str) -> bool:
    """
    :param name: A candidate property name.
    :return: False for interpreter level and reserved identifiers, the literal "class" and serialization
        version markers.
    """
    if name.startswith(RESERVED_MARKER) or name in RESERVED_NAMES:
        return False
    return not (
        len(name) > 2
        and name.startswith(SUNDER_MARKER)
        and name.endswith(SUNDER_MARKER)
    )
