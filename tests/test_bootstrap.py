"""Tests for the three state bootstrap."""

import pytest

import objv


def test_final_state(kernel):
    assert kernel.state is objv.BootState.RECONSTRUCTED
    assert objv.is_bootstrapped()


def test_fixed_point(kernel):
    manual = kernel.manual
    metaclass = kernel.metaclass

    assert metaclass is objv.give_class_named("Class")
    assert manual is not metaclass
    assert manual.class_id == metaclass.class_id == "Class"
    assert objv.class_name(manual) == objv.class_name(metaclass)
    assert objv.class_superclass(manual) == objv.class_superclass(metaclass)
    assert objv.instance_variables(manual) == objv.instance_variables(metaclass)
    assert sorted(objv.class_methods(manual)) == sorted(objv.class_methods(metaclass))
    assert objv.shared_variables(manual) == objv.shared_variables(metaclass)


def test_kernel_relationships(kernel):
    Class = objv.give_class_named("Class")
    Object = objv.give_class_named("Object")

    assert kernel.root is Object
    assert objv.class_of(Class) is Class
    assert objv.class_of(Object) is Class
    assert objv.class_superclass(Class) == "Object"
    assert objv.class_superclass(Object) is None
    assert objv.instance_variables(Object) == []
    assert objv.instance_variables(Class) == list(objv.CLASS_IVS)

    # The same relationships reached through messages
    assert objv.send(Class, "class") is Class
    assert objv.send(Object, "class") is Class
    assert objv.send(Class, "superclass") is Object


def test_kernel_methods_installed_through_protocol():
    Class = objv.give_class_named("Class")
    Object = objv.give_class_named("Object")
    assert set(objv.class_methods(Class)) == set(objv.CLASS_METHODS)
    assert set(objv.class_methods(Object)) == set(objv.OBJECT_METHODS)
    for method in objv.class_methods(Class).values():
        assert method.owner == "Class"
        assert method.superclass == "Object"
    for method in objv.class_methods(Object).values():
        assert method.superclass is None


def test_bootstrap_twice_is_rejected():
    with pytest.raises(objv.BootstrapError):
        objv.bootstrap()
    assert objv.is_bootstrapped()


def test_teardown_and_rebootstrap():
    old = objv.give_class_named("Class")
    objv.teardown()
    assert not objv.is_bootstrapped()
    assert len(objv.Registry.get()) == 0

    objv.bootstrap()
    assert objv.give_class_named("Class") is not old
    assert objv.is_bootstrapped()


def test_failure_tears_down(monkeypatch):
    def broken(cls, table):
        raise objv.KernelError("broken method table")

    objv.teardown()
    monkeypatch.setattr(objv, "install_methods", broken)
    with pytest.raises(objv.BootstrapError) as info:
        objv.bootstrap()
    assert info.value.state is objv.BootState.GROUNDED
    assert len(objv.Registry.get()) == 0
    assert not objv.is_bootstrapped()


def test_states_cannot_be_skipped():
    sequencer = objv.Bootstrap()
    with pytest.raises(objv.BootstrapError):
        sequencer._ground()
    with pytest.raises(objv.BootstrapError):
        sequencer._reconstruct()


def test_unexpected_failure_tears_down(monkeypatch):
    seen = []

    def broken(self):
        seen.append(objv.is_bootstrapped())
        raise RuntimeError("out of memory")

    objv.teardown()
    monkeypatch.setattr(objv.Bootstrap, "_reconstruct", broken)
    with pytest.raises(RuntimeError):
        objv.bootstrap()
    assert seen == [False]
    assert len(objv.Registry.get()) == 0
    assert not objv.is_bootstrapped()


def test_half_built_kernel_is_not_bootstrapped():
    objv.teardown()
    sequencer = objv.Bootstrap()
    sequencer._manual()
    sequencer.state = objv.BootState.MANUAL
    sequencer._ground()
    assert objv.Registry.get().boot_state is None
    assert not objv.is_bootstrapped()
