"""Tests for the class registry."""

import pytest

import objv


def _class_entity(name):
    return objv.make_entity("Class", [name, "Object", [], {}, {}])


def test_singleton():
    assert objv.Registry.get() is objv.Registry.get()


def test_register_and_lookup():
    registry = objv.Registry()
    foo = _class_entity("Foo")
    registry.register(foo)
    assert "Foo" in registry
    assert registry.lookup("Foo") is foo
    assert len(registry) == 1


def test_unknown_class():
    registry = objv.Registry()
    with pytest.raises(objv.UnknownClassError) as info:
        registry.lookup("Nope")
    assert info.value.name == "Nope"

    with pytest.raises(objv.UnknownClassError):
        objv.give_class_named("Nope")


def test_duplicate_class():
    registry = objv.Registry()
    first = _class_entity("Foo")
    registry.register(first)
    with pytest.raises(objv.DuplicateClassError):
        registry.register(_class_entity("Foo"))
    assert registry.lookup("Foo") is first


def test_replacing_allows_one_swap():
    registry = objv.Registry()
    registry.register(_class_entity("Foo"))
    replacement = _class_entity("Foo")
    with registry.replacing("Foo"):
        registry.register(replacement)
        with pytest.raises(objv.DuplicateClassError):
            registry.register(_class_entity("Foo"))
    assert registry.lookup("Foo") is replacement

    # Permission does not outlive the block
    with registry.replacing("Foo"):
        pass
    with pytest.raises(objv.DuplicateClassError):
        registry.register(_class_entity("Foo"))


def test_iteration_sorted_and_clear():
    registry = objv.Registry()
    for name in ("Zeta", "Alpha", "Mid"):
        registry.register(_class_entity(name))
    assert list(registry) == ["Alpha", "Mid", "Zeta"]
    registry.clear()
    assert len(registry) == 0


def test_bootstrapped_registry_contents():
    names = list(objv.Registry.get())
    assert names == ["AbstractClass", "AccessorClass", "Class", "Object"]
