"""Policies layered on the base class-creation protocol.

Each extension is an ordinary metaclass created with `Class new` and given a
few methods. None of them change lookup or dispatch.
"""

import logging

import objv

__all__ = [
    "ABSTRACT_CLASS",
    "ACCESSOR_CLASS",
    "install_extensions",
    "shared_variable_value",
]

logger = logging.getLogger(__name__)

ABSTRACT_CLASS = "AbstractClass"
ACCESSOR_CLASS = "AccessorClass"

_unset = object()


def shared_variable_value(cls, name, value=_unset):
    """Read or write a class shared variable.

    Instances reach shared variables through their class, and each class
    owns exactly one dict, so a write is seen by every instance at once.

    Args:
        cls: (Entity) Class entity owning the variable
        name: (str) Shared variable name
        value: (object) New value, omit to read
    Returns:
        (object) Current value after any write
    Raises:
        UnknownVariableError: Class does not declare the shared variable
    """
    shared = objv.shared_variables(cls)
    if name not in shared:
        raise objv.UnknownVariableError(name, objv.class_name(cls))
    if value is not _unset:
        shared[name] = value
    return shared[name]


def _abstract_new(superclass):
    def new(self, **kwargs):
        raise objv.AbstractInstantiationError(objv.class_name(self))
    return new


def _getter(index):
    def body(superclass):
        def getter(self):
            return objv.get_slot(self, index)
        return getter
    return body


def _setter(index):
    def body(superclass):
        def setter(self, value):
            objv.set_slot(self, index, value)
            return self
        return setter
    return body


def _accessor_initialize(superclass):
    def initialize(self, **spec):
        objv.send_super(superclass, self, "initialize", **spec)
        for index, var in enumerate(objv.instance_variables(self)):
            objv.add_method(self, var, [], _getter(index))
            objv.add_method(self, f"{var}:", [var], _setter(index))
        logger.debug("Synthesized accessors for %s", objv.class_name(self))
        return self
    return initialize


def install_extensions():
    """Create the AbstractClass and AccessorClass metaclasses."""
    metaclass = objv.give_class_named(objv.META_CLASS)

    abstract = objv.send(
        metaclass, "new", name=ABSTRACT_CLASS, superclass=objv.META_CLASS)
    objv.add_method(abstract, "new", [], _abstract_new)

    accessor = objv.send(
        metaclass, "new", name=ACCESSOR_CLASS, superclass=objv.META_CLASS)
    objv.add_method(accessor, "initialize", [], _accessor_initialize)

    logger.info("Installed extension metaclasses %s, %s",
                ABSTRACT_CLASS, ACCESSOR_CLASS)
