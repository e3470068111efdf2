""" Record types used in tests """

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pydantic as pd


@dataclass
class User:
    id: int
    name: str
    age: int


@dataclass(frozen=True)
class FrozenUser:
    id: int
    name: str
    age: int


@dataclass
class TaggedUser:
    id: int
    tags: list[str] = field(default_factory=list)
    nickname: Optional[str] = 'anonymous'


class PdUser(pd.BaseModel):
    id: int
    name: str
    age: int


class PdFrozenUser(pd.BaseModel):
    model_config = pd.ConfigDict(frozen=True)

    id: int
    name: str
    age: int = 18


class GetSetUser:
    """ A user with getters and setters, and private attributes """
    def __init__(self, id: int, name: str, age: int):
        self._id = id
        self._name = name
        self._age = age

    def id(self) -> int:
        return self._id

    def name(self) -> str:
        return self._name

    def age(self) -> int:
        return self._age

    def set_id(self, id: int):
        self._id = id

    def set_name(self, name: str):
        self._name = name

    def set_age(self, age: int):
        self._age = age

    def __eq__(self, other):
        return (self._id, self._name, self._age) == (other._id, other._name, other._age)

    def __repr__(self):
        return f'GetSetUser({self._id}, {self._name!r}, {self._age})'


class ReadOnlyUser:
    """ A user whose `age` cannot be written """
    def __init__(self, name: str, age: int):
        self.name = name
        self._age = age

    @property
    def age(self) -> int:
        return self._age

    def __eq__(self, other):
        return (self.name, self._age) == (other.name, other._age)


class IdentityUser:
    """ A user without __eq__: compared by identity """
    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age


class Pet:
    """ A class that cannot be created without arguments """
    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other):
        return self.name == other.name


@dataclass
class Owner:
    name: str
    pet: Pet


class PdFieldFrozen(pd.BaseModel):
    """ A model with one frozen field """
    id: int = pd.Field(frozen=True)
    age: int


class PdValidated(pd.BaseModel):
    """ A model that validates assignments, with a constrained field """
    model_config = pd.ConfigDict(validate_assignment=True)

    id: int
    age: int = pd.Field(gt=0)


class Settable:
    """ A record with a setter, and a method that is not a getter """
    def __init__(self, age: int):
        self.age = age

    def set_age(self, age: int):
        self.age = age

    def older_than(self, years: int) -> bool:
        return self.age > years

    def __eq__(self, other):
        return self.age == other.age
