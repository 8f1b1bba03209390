from collections.abc import Sequence

from typing_extensions import Any, List, Optional, Union

from reflectory.utils import (
    class_chain,
    interfaces_of,
    is_assignable,
    is_framework_class,
    resolved_type_hints,
    type_name,
)
from ..dataset.example_classes import (
    Animal,
    CodedItem,
    Dog,
    HasNumericCode,
    HasTextCode,
    NamedEntity,
    Entity,
    Invoice,
    Named,
)


def test_is_assignable_classes():
    assert is_assignable(Animal, Dog)
    assert not is_assignable(Dog, Animal)
    assert is_assignable(Dog, Dog)
    assert not is_assignable(int, str)


def test_is_assignable_top_types():
    assert is_assignable(object, Dog)
    assert is_assignable(Any, str)
    assert not is_assignable(Dog, object)


def test_is_assignable_generics_compare_origins():
    assert is_assignable(Sequence[int], List[int])
    assert is_assignable(Sequence, list)
    assert not is_assignable(List[int], Sequence[int])


def test_is_assignable_unions():
    assert is_assignable(Optional[Animal], Dog)
    assert is_assignable(Optional[Animal], type(None))
    assert is_assignable(Union[int, str], Union[str, int])
    assert not is_assignable(Dog, Optional[Dog])


def test_unresolved_annotations_only_match_themselves():
    assert is_assignable("Missing", "Missing")
    assert not is_assignable("Missing", "Other")
    assert not is_assignable(Animal, "Dog")


def test_type_name():
    assert type_name(Dog) == f"{Dog.__module__}.Dog"
    assert type_name(List[int]) == repr(List[int])


def test_class_chain_and_interfaces():
    assert class_chain(NamedEntity) == [NamedEntity, Entity]
    assert Named in interfaces_of(NamedEntity)
    assert class_chain(CodedItem)[:2] == [CodedItem, HasNumericCode]
    assert interfaces_of(CodedItem)[0] is HasTextCode


def test_framework_classes():
    assert is_framework_class(object)
    assert is_framework_class(dict)
    assert not is_framework_class(Dog)


def test_resolved_type_hints_falls_back_per_annotation():
    hints = resolved_type_hints(Invoice)
    assert hints["quantity"] is int
    assert hints["price"] == "Decimal"
