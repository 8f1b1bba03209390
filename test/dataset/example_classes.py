from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import InitVar, dataclass, field
from functools import cached_property

from typing_extensions import ClassVar, Final, List, Optional, Sequence, TYPE_CHECKING

from reflectory.utils import synthetic

if TYPE_CHECKING:
    from decimal import Decimal


# %% Plain accessor classes


class Person:
    def __init__(self, user_name: str = "", age: int = 0):
        self._user_name = user_name
        self._age = age

    def getUserName(self) -> str:
        return self._user_name

    def setUserName(self, user_name: str) -> None:
        self._user_name = user_name

    def get_age(self) -> int:
        return self._age

    def set_age(self, age: int) -> None:
        self._age = age

    def is_adult(self) -> bool:
        return self._age >= 18

    def greet(self, other: Person) -> str:
        return f"Hello {other.getUserName()}"


class Identified:
    def __init__(self, id_: int = 7):
        self._id = id_

    def get_id(self) -> int:
        return self._id


class Link:
    def getURL(self) -> str:
        return "https://example.org"

    def getXValue(self) -> int:
        return 1

    def get_class(self) -> str:
        return "link"


class Untyped:
    def __init__(self):
        self._value = None

    def get_value(self):
        return self._value

    def set_value(self, value):
        self._value = value


# %% Covariant overrides


class Animal:
    pass


class Dog(Animal):
    pass


class Shelter:
    def get_resident(self) -> Animal:
        return Animal()

    def set_resident(self, resident: Animal) -> None:
        self.resident = resident

    def get_scores(self) -> Sequence[int]:
        return (1, 2)


class DogShelter(Shelter):
    def get_resident(self) -> Dog:
        return Dog()

    def get_scores(self) -> List[int]:
        return [3, 4]


class Box:
    def get_content(self) -> object:
        return None


class StringBox(Box):
    def get_content(self) -> str:
        return "content"

    @synthetic
    def getContent(self) -> object:
        return self.get_content()


# %% Interfaces


class HasNumericCode(ABC):
    @abstractmethod
    def get_code(self) -> int: ...


class HasTextCode(ABC):
    @abstractmethod
    def get_code(self) -> str: ...


class CodedItem(HasNumericCode, HasTextCode):
    """
    Inherits two unrelated declarations of the same getter.
    """


class Named(ABC):
    @abstractmethod
    def get_name(self) -> str: ...


class Entity:
    def get_identifier(self) -> int:
        return 1


class NamedEntity(Entity, Named):
    def get_name(self) -> str:
        return "entity"


# %% Conflicting accessors


class Switch:
    def is_active(self) -> bool:
        return True

    def get_active(self) -> bool:
        return True


class Dimmer:
    def set_level(self, level: int) -> None:
        self.level = level

    def setLevel(self, level: str) -> None:
        self.level = int(level)


class ThermostatBase:
    def set_temperature(self, value: str) -> None:
        self.temperature = float(value)


class Thermostat(ThermostatBase):
    def get_temperature(self) -> float:
        return getattr(self, "temperature", 20.0)

    def set_temperature(self, value: float) -> None:
        self.temperature = value


class BrokenThermostat(ThermostatBase):
    def get_temperature(self) -> float:
        return 20.0

    def set_temperature(self, value: int) -> None:
        self.temperature = value


class Gauge:
    def get_level(self) -> int:
        return 1


class TextGauge(Gauge):
    def get_level(self) -> str:
        return "full"


# %% Fields


class Counter:
    count: int = 0
    LIMIT: Final = 10
    instances: ClassVar[int] = 0
    unit = "items"


class Constants:
    count: Final[int] = 3


class Labelled:
    label: str = ""

    def get_label(self) -> str:
        return self.label.upper()


class Base:
    name: str = "base"
    shared: int = 1


class Derived(Base):
    name: bytes = b"derived"


class Registry:
    created: ClassVar[int] = 0


class Secretive:
    _token: str = "secret"
    visible: int = 1


class Versioned:
    serialVersionUID: ClassVar[int] = 1
    version: int = 2


class Slotted:
    __slots__ = ("value", "__weakref__")

    def __init__(self, value: int = 0):
        self.value = value


class Temperature:
    def __init__(self, celsius: float = 0.0):
        self._celsius = celsius

    @property
    def celsius(self) -> float:
        return self._celsius

    @celsius.setter
    def celsius(self, value: float) -> None:
        self._celsius = value

    @property
    def fahrenheit(self) -> float:
        return self._celsius * 9 / 5 + 32


class Square:
    def __init__(self, side: float = 1.0):
        self.side = side

    @cached_property
    def area(self) -> float:
        return self.side**2


@dataclass
class Address:
    street: str = ""
    zip_code: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


# %% Construction and failures


class RequiresArgs:
    def __init__(self, value: int):
        self.value = value

    def get_value(self) -> int:
        return self.value


class Sensor:
    def get_reading(self) -> float:
        raise RuntimeError("sensor offline")

    def set_reading(self, value: float) -> None:
        raise ValueError(f"cannot calibrate to {value}")


class Unset:
    pending: int


@dataclass
class Account:
    owner: str = ""
    seed: InitVar[int] = 0
    currency: Final[str] = "EUR"

    def __post_init__(self, seed: int):
        self.balance = seed


class Forward:
    target: MissingType = None
    registry: ClassVar[MissingType] = None


class Mixin:
    origin: str = "mixin"


class WithMixin(Base, Mixin):
    pass


class Invoice:
    quantity: int = 0
    price: Decimal = None


class Measured:
    size: int = 0


class FixedSize(Measured):
    @property
    def size(self) -> int:
        return 3
