"""Tests for the entity store."""

import pytest

import objv


def test_make_entity_layout():
    values = [1, 2, 3]
    entity = objv.make_entity("Point", values)
    assert entity.class_id == "Point"
    assert entity.slots == [1, 2, 3]

    # The entity owns its own slot list
    values.append(4)
    assert len(entity.slots) == 3


def test_slot_access():
    entity = objv.make_entity("Point", [None, None])
    objv.set_slot(entity, 1, "y")
    assert objv.get_slot(entity, 0) is None
    assert objv.get_slot(entity, 1) == "y"


def test_slot_values_are_not_type_checked():
    entity = objv.make_entity("Bag", [None])
    for value in (1, "text", [1, 2], {"a": 1}, entity):
        objv.set_slot(entity, 0, value)
        assert objv.get_slot(entity, 0) is value


@pytest.mark.parametrize("index", [2, 10, -1])
def test_slot_index_out_of_range(index):
    entity = objv.make_entity("Point", [1, 2])
    with pytest.raises(IndexError):
        objv.get_slot(entity, index)
    with pytest.raises(IndexError):
        objv.set_slot(entity, index, 0)
    assert entity.slots == [1, 2]


def test_entity_repr():
    assert repr(objv.make_entity("Point", [])) == "Entity<Point>"
