"""Slot layout shared by every class entity.

A class is an entity whose own class is a metaclass. The instance variables
of the metaclass `Class` fix where each part of a class lives, and every
metaclass inherits that list unchanged.
"""

import objv

__all__ = [
    "ROOT_CLASS",
    "META_CLASS",
    "CLASS_IVS",
    "NAME",
    "SUPERCLASS",
    "IV",
    "METHODS",
    "SHARED",
    "class_name",
    "class_superclass",
    "instance_variables",
    "class_methods",
    "shared_variables",
]


ROOT_CLASS = "Object"
META_CLASS = "Class"

CLASS_IVS = ("name", "superclass", "iv", "methodDict", "sharedVariables")
NAME, SUPERCLASS, IV, METHODS, SHARED = range(len(CLASS_IVS))


def class_name(cls):
    """(str) Registry name of a class entity."""
    return objv.get_slot(cls, NAME)


def class_superclass(cls):
    """(str | None) Superclass name, None only for the root class."""
    return objv.get_slot(cls, SUPERCLASS)


def instance_variables(cls):
    """(list[str]) Inherited then local instance variable names."""
    return objv.get_slot(cls, IV)


def class_methods(cls):
    """(dict) Locally defined selector to Method mapping."""
    return objv.get_slot(cls, METHODS)


def shared_variables(cls):
    """(dict) Class level storage, one dict per class."""
    return objv.get_slot(cls, SHARED)
