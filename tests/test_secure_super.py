"""Tests for super sends bound at method definition time."""

import pytest

import objv
import kerneltest


def _greet(text):
    def greet(sup, self):
        if sup is None:
            return text
        return text + objv.send_super(sup, self, "greet")
    return greet


def _hierarchy():
    a = kerneltest.define_class("A", superclass="Object")
    b = kerneltest.define_class("B", superclass="A")
    c = kerneltest.define_class("C", superclass="B")
    kerneltest.define_method(a, "greet", lambda sup, self: "A")
    kerneltest.define_method(b, "greet", _greet("B"))
    return a, b, c


def test_inherited_method_super_uses_defining_class():
    # Resolving super from the receiver class would recurse into B forever
    _, _, c = _hierarchy()
    assert objv.send(objv.send(c, "new"), "greet") == "BA"


def test_super_chain():
    _, _, c = _hierarchy()
    kerneltest.define_method(c, "greet", _greet("C"))
    assert objv.send(objv.send(c, "new"), "greet") == "CBA"


def test_redefining_subclass_keeps_ancestor_binding():
    _, b, c = _hierarchy()
    kerneltest.define_method(c, "greet", _greet("C"))
    before = objv.class_methods(b)["greet"]

    kerneltest.define_method(c, "greet", _greet("C2"))
    assert objv.class_methods(b)["greet"] is before
    assert before.superclass == "A"
    assert objv.send(objv.send(c, "new"), "greet") == "C2BA"
    assert objv.send(objv.send(b, "new"), "greet") == "BA"


def test_super_send_past_last_definition_is_not_understood():
    thing = kerneltest.define_class("Thing")
    kerneltest.define_method(thing, "greet", _greet("T"))
    with pytest.raises(objv.MessageNotUnderstood) as info:
        objv.send(objv.send(thing, "new"), "greet")
    assert info.value.selector == "greet"
