import re

import pytest

from selective_assertions import assert_eq_selected, assert_eq_only
from selective_assertions import FieldMismatchError, FieldResolutionError, SelectiveAssertionError
from tests.lib import User, PdUser, GetSetUser, IdentityUser, Settable


def test_assert_eq_selected():
    alice_in_wonderland = User(id=1, name='Alice', age=7)
    alice_in_looking_glass_land = User(id=1, name='Alice', age=8)

    # === Test: only equal fields selected
    assert_eq_selected(alice_in_wonderland, alice_in_looking_glass_land, 'id', 'name')
    assert_eq_selected(alice_in_wonderland, alice_in_looking_glass_land, 'name')

    # === Test: a differing field is selected
    with pytest.raises(FieldMismatchError, match=re.escape('Field `age` does not match: 7 != 8')) as e:
        assert_eq_selected(alice_in_wonderland, alice_in_looking_glass_land, 'id', 'name', 'age')

    assert e.value.field == 'age'
    assert e.value.fields == ('age',)
    assert e.value.actual == 7
    assert e.value.expected == 8

    # It's an ordinary assertion failure
    assert isinstance(e.value, SelectiveAssertionError)
    assert isinstance(e.value, AssertionError)


def test_assert_eq_selected_fails_on_first_mismatch():
    alice = User(id=1, name='Alice', age=7)
    bob = User(id=2, name='Bob', age=8)

    # === Test: fields are checked in the order given
    with pytest.raises(FieldMismatchError) as e:
        assert_eq_selected(alice, bob, 'name', 'age', 'id')
    assert e.value.field == 'name'

    with pytest.raises(FieldMismatchError) as e:
        assert_eq_selected(alice, bob, 'age', 'name')
    assert e.value.field == 'age'


def test_assert_eq_selected_never_reads_other_fields():
    class Secretive:
        def __init__(self, name):
            self._name = name

        def name(self):
            return self._name

        def secret(self):
            raise RuntimeError('Not for your eyes')

    assert_eq_selected(Secretive('Alice'), Secretive('Alice'), 'name')


def test_assert_eq_selected_record_kinds():
    """ Test records of different kinds """
    # === Test: pydantic model
    assert_eq_selected(PdUser(id=1, name='Alice', age=7), PdUser(id=1, name='Alice', age=8), 'id', 'name')

    # === Test: dict
    assert_eq_selected({'id': 1, 'age': 7}, {'id': 1, 'age': 8}, 'id')
    with pytest.raises(FieldMismatchError, match=re.escape('Field `age` does not match: 7 != 8')):
        assert_eq_selected({'id': 1, 'age': 7}, {'id': 1, 'age': 8}, 'age')

    # === Test: getter methods
    assert_eq_selected(GetSetUser(1, 'Alice', 7), GetSetUser(1, 'Alice', 8), 'id', 'name')
    with pytest.raises(FieldMismatchError, match=re.escape("Field `name` does not match: 'Alice' != 'Bob'")):
        assert_eq_selected(GetSetUser(1, 'Alice', 7), GetSetUser(1, 'Bob', 7), 'name')

    # === Test: get_*() getter methods
    class Pet:
        def __init__(self, kind):
            self._kind = kind

        def get_kind(self):
            return self._kind

    assert_eq_selected(Pet('cat'), Pet('cat'), 'kind')
    with pytest.raises(FieldMismatchError):
        assert_eq_selected(Pet('cat'), Pet('dog'), 'kind')

    # === Test: records without __eq__ are fine: only fields are compared
    assert_eq_selected(IdentityUser('Alice', 7), IdentityUser('Alice', 8), 'name')

    # === Test: records of different types, with the same fields
    assert_eq_selected(User(id=1, name='Alice', age=7), PdUser(id=1, name='Alice', age=8), 'id', 'name')


def test_assert_eq_selected_contract_errors():
    alice = User(id=1, name='Alice', age=7)
    bob = User(id=2, name='Bob', age=8)

    # === Test: unknown field. Raised before any field is compared
    with pytest.raises(FieldResolutionError, match='User has no field `nope`'):
        assert_eq_selected(alice, bob, 'id', 'nope')

    # === Test: no fields
    with pytest.raises(ValueError):
        assert_eq_selected(alice, bob)

    # === Test: field names must be strings
    with pytest.raises(TypeError):
        assert_eq_selected(alice, bob, 1)


def test_assert_eq_only():
    alice = User(id=1, name='Alice', age=7)
    older_alice = User(id=1, name='Alice', age=8)

    # === Test: same as assert_eq_selected()
    assert_eq_only(alice, older_alice, 'id', 'name')

    with pytest.raises(FieldMismatchError, match=re.escape('Field `age` does not match')):
        assert_eq_only(alice, older_alice, 'id', 'name', 'age')

    # === Test: duplicates are tolerated
    assert_eq_only(alice, older_alice, 'name', 'name')


def test_assert_eq_selected_methods_are_not_fields():
    # === Test: a plain attribute is a field
    assert_eq_selected(Settable(7), Settable(7), 'age')

    # === Test: a setter is not a field. Raised before any field is compared
    with pytest.raises(FieldResolutionError, match='Settable has no field `set_age`'):
        assert_eq_selected(Settable(7), Settable(8), 'age', 'set_age')

    # === Test: a method with required arguments is not a field
    with pytest.raises(FieldResolutionError, match='Settable has no field `older_than`'):
        assert_eq_selected(Settable(7), Settable(7), 'older_than')
