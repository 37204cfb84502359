"""Method tables for the two kernel classes.

`Object` holds behavior shared by every entity, `Class` holds the
class-creation protocol. There is a single `new`: it allocates an entity
shaped by the receiver and sends it `initialize`. When the receiver is an
ordinary class that resolves to `Object>>initialize` and fills instance
slots. When the receiver is a metaclass the allocated entity is itself a
class, so `Class>>initialize` runs and links a new class into the registry.

Bodies follow the curried method convention described on `objv.Method`.
"""

import logging

import objv

__all__ = ["OBJECT_METHODS", "CLASS_METHODS", "install_methods", "method_dict"]

logger = logging.getLogger(__name__)


def _variable_index(cls, name):
    try:
        return objv.instance_variables(cls).index(name)
    except ValueError:
        raise objv.UnknownVariableError(name, objv.class_name(cls)) from None


def _assign(entity, values):
    cls = objv.class_of(entity)
    indexed = [(_variable_index(cls, name), value) for name, value in values.items()]
    for index, value in indexed:
        objv.set_slot(entity, index, value)


def _class_named(value):
    if not isinstance(value, objv.Entity):
        return objv.give_class_named(value)
    registry = objv.Registry.get()
    if objv.is_class(value):
        name = objv.class_name(value)
        if name in registry and registry.lookup(name) is value:
            return value
    raise objv.UnknownClassError(
        None, f"{objv.format_entity(value)} is not a registered class")


def _constant(value):
    def body(superclass):
        def constant(self):
            return value
        return constant
    return body


# Object

def _object_initialize(superclass):
    def initialize(self, **values):
        _assign(self, values)
        return self
    return initialize


def _object_class(superclass):
    def class_(self):
        return objv.class_of(self)
    return class_


def _object_responds_to(superclass):
    def responds_to(self, selector):
        return objv.responds_to(self, selector)
    return responds_to


def _object_is_kind_of(superclass):
    def is_kind_of(self, cls):
        if isinstance(cls, objv.Entity):
            cls = objv.class_name(cls)
        return objv.inherits_from(objv.class_of(self), cls)
    return is_kind_of


def _object_inst_var_named(superclass):
    def inst_var_named(self, name):
        return objv.get_slot(self, _variable_index(objv.class_of(self), name))
    return inst_var_named


def _object_inst_var_named_put(superclass):
    def inst_var_named_put(self, name, value):
        objv.set_slot(self, _variable_index(objv.class_of(self), name), value)
        return self
    return inst_var_named_put


def _object_print_string(superclass):
    def print_string(self):
        return objv.format_entity(self)
    return print_string


def _object_shared_value(superclass):
    def shared_value(self, name):
        return objv.send(objv.class_of(self), "sharedVariableValue:", name)
    return shared_value


def _object_shared_value_put(superclass):
    def shared_value_put(self, name, value):
        objv.send(objv.class_of(self), "sharedVariableValue:put:", name, value)
        return self
    return shared_value_put


OBJECT_METHODS = {
    "initialize": ([], _object_initialize),
    "class": ([], _object_class),
    "isClass": ([], _constant(False)),
    "isMetaclass": ([], _constant(False)),
    "respondsTo:": (["selector"], _object_responds_to),
    "isKindOf:": (["class"], _object_is_kind_of),
    "instVarNamed:": (["name"], _object_inst_var_named),
    "instVarNamed:put:": (["name", "value"], _object_inst_var_named_put),
    "printString": ([], _object_print_string),
    "sharedVariableValue:": (["name"], _object_shared_value),
    "sharedVariableValue:put:": (["name", "value"], _object_shared_value_put),
}


# Class

def _class_new(superclass):
    def new(self, **kwargs):
        if "metaclass" in kwargs and objv.is_metaclass(self):
            metaclass = _class_named(kwargs.pop("metaclass"))
            if not objv.is_metaclass(metaclass):
                raise objv.NotAMetaclassError(objv.class_name(metaclass))
            return objv.send(metaclass, "new", **kwargs)
        instance = objv.send(self, "allocate")
        return objv.send(instance, "initialize", **kwargs)
    return new


def _class_allocate(superclass):
    def allocate(self):
        size = len(objv.instance_variables(self))
        return objv.make_entity(objv.class_name(self), [None] * size)
    return allocate


def _class_initialize(_superclass):
    def initialize(self, *, name=None, superclass=objv.ROOT_CLASS, iv=(),
                   sharedVariables=(), **extra):
        metaclass = objv.class_of(self)
        if extra:
            key = next(iter(extra))
            raise objv.UnknownVariableError(key, objv.class_name(metaclass))
        if name is None:
            raise objv.MissingNameError(objv.class_name(metaclass))
        if objv.class_name(self) is not None:
            raise objv.DuplicateClassError(objv.class_name(self))
        objv.Registry.get().check_available(name)

        if superclass is None:
            if name != objv.ROOT_CLASS:
                raise objv.UnknownClassError(
                    None, f"Class {name} must name a superclass")
            parent = None
        else:
            parent = _class_named(superclass)

        inherited = list(objv.instance_variables(parent)) if parent else []
        variables = list(inherited)
        for var in iv:
            if var in variables:
                raise objv.DuplicateVariableError(var, name)
            variables.append(var)

        shared = dict(objv.shared_variables(parent)) if parent else {}
        shared.update(sharedVariables)

        objv.set_slot(self, objv.NAME, name)
        objv.set_slot(self, objv.SUPERCLASS,
                      objv.class_name(parent) if parent else None)
        objv.set_slot(self, objv.IV, variables)
        objv.set_slot(self, objv.METHODS, {})
        objv.set_slot(self, objv.SHARED, shared)
        objv.Registry.get().register(self)
        logger.debug("Created class %s from %s, superclass %s",
                     name, self.class_id, objv.class_superclass(self))
        return self
    return initialize


def _class_is_metaclass(superclass):
    def is_metaclass(self):
        return objv.is_metaclass(self)
    return is_metaclass


def _class_name(superclass):
    def name(self):
        return objv.class_name(self)
    return name


def _class_superclass(superclass):
    def superclass_(self):
        parent = objv.class_superclass(self)
        return objv.give_class_named(parent) if parent is not None else None
    return superclass_


def _class_instance_variables(superclass):
    def instance_variables(self):
        return list(objv.instance_variables(self))
    return instance_variables


def _class_selectors(superclass):
    def selectors(self):
        return sorted(objv.class_methods(self))
    return selectors


def _class_includes_selector(superclass):
    def includes_selector(self, selector):
        return selector in objv.class_methods(self)
    return includes_selector


def _class_add_method(superclass):
    def add_method(self, selector, params, body):
        return objv.add_method(self, selector, params, body)
    return add_method


def _class_remove_method(superclass):
    def remove_method(self, selector):
        return objv.remove_method(self, selector)
    return remove_method


def _class_shared_value(superclass):
    def shared_value(self, name):
        return objv.shared_variable_value(self, name)
    return shared_value


def _class_shared_value_put(superclass):
    def shared_value_put(self, name, value):
        objv.shared_variable_value(self, name, value)
        return self
    return shared_value_put


CLASS_METHODS = {
    "new": ([], _class_new),
    "allocate": ([], _class_allocate),
    "initialize": ([], _class_initialize),
    "isClass": ([], _constant(True)),
    "isMetaclass": ([], _class_is_metaclass),
    "name": ([], _class_name),
    "superclass": ([], _class_superclass),
    "instanceVariables": ([], _class_instance_variables),
    "selectors": ([], _class_selectors),
    "includesSelector:": (["selector"], _class_includes_selector),
    "addMethod:params:body:": (["selector", "params", "body"], _class_add_method),
    "removeMethod:": (["selector"], _class_remove_method),
    "sharedVariableValue:": (["name"], _class_shared_value),
    "sharedVariableValue:put:": (["name", "value"], _class_shared_value_put),
}


def install_methods(cls, table):
    """Add every method of a table to a class through `add_method`."""
    for selector, (params, body) in table.items():
        objv.add_method(cls, selector, params, body)
    return cls


def method_dict(owner, superclass, table):
    """Build a method dictionary by hand, without a class entity.

    Only the bootstrap needs this, to give the first `Class` behavior
    before anything exists that `add_method` could work through.
    """
    return {
        selector: objv.Method(selector, owner, superclass, params, body)
        for selector, (params, body) in table.items()
    }
