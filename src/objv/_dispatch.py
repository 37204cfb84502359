"""Message sending and method lookup.

Every behavior in the kernel is reached through `send`. The receiver's class
is found through the registry, then the superclass chain is walked one class
at a time until a method dictionary holds the selector. Super sends use the
same walk, only starting from a different class.
"""

import decimal

import objv

__all__ = [
    "class_of",
    "lookup",
    "send",
    "send_super",
    "super_from",
    "responds_to",
    "inherits_from",
    "is_class",
    "is_metaclass",
    "format_entity",
]


def class_of(entity):
    """(Entity) Class entity of an entity, resolved through the registry."""
    return objv.give_class_named(entity.class_id)


def _parent(cls):
    superclass = objv.class_superclass(cls)
    if superclass is None:
        return None
    return objv.give_class_named(superclass)


def lookup(cls, selector):
    """Find the method that answers a selector starting at a class.

    Args:
        cls: (Entity | None) Class to start the walk at
        selector: (str) Message name
    Returns:
        (Method | None) First method found along the superclass chain
    """
    while cls is not None:
        method = objv.class_methods(cls).get(selector)
        if method is not None:
            return method
        cls = _parent(cls)
    return None


def _invoke(start, receiver, selector, args, kwargs):
    method = lookup(start, selector)
    if method is None:
        raise objv.MessageNotUnderstood(receiver, selector)
    return method.function(receiver, *args, **kwargs)


def send(receiver, selector, /, *args, **kwargs):
    """Send a message to an entity.

    Args:
        receiver: (Entity) Object receiving the message
        selector: (str) Message name
        *args: Positional message arguments
        **kwargs: Keyword message arguments
    Returns:
        (object) Whatever the method returns
    Raises:
        MessageNotUnderstood: No method on the chain, or receiver is not an entity
    """
    if not isinstance(receiver, objv.Entity):
        raise objv.MessageNotUnderstood(receiver, selector)
    return _invoke(class_of(receiver), receiver, selector, args, kwargs)


def send_super(superclass, receiver, selector, /, *args, **kwargs):
    """Send starting the lookup at a named ancestor.

    This is what a method body calls with the superclass it was curried
    with. A None superclass means there is nothing above the defining class.
    """
    start = objv.give_class_named(superclass) if superclass is not None else None
    return _invoke(start, receiver, selector, args, kwargs)


def super_from(receiver, from_class, selector, /, *args, **kwargs):
    """Send starting the lookup above `from_class` (name or class entity)."""
    if not isinstance(from_class, objv.Entity):
        from_class = objv.give_class_named(from_class)
    return send_super(
        objv.class_superclass(from_class), receiver, selector, *args, **kwargs
    )


def responds_to(receiver, selector):
    """(bool) Whether a send of selector would find a method."""
    if not isinstance(receiver, objv.Entity):
        return False
    return lookup(class_of(receiver), selector) is not None


def inherits_from(cls, name):
    """(bool) Whether a class is `name` or has it on its superclass chain."""
    while cls is not None:
        if objv.class_name(cls) == name:
            return True
        cls = _parent(cls)
    return False


def is_metaclass(cls):
    """(bool) Whether instances of this class are themselves classes."""
    return isinstance(cls, objv.Entity) and inherits_from(cls, objv.META_CLASS)


def is_class(value):
    """(bool) Whether a value is a class entity."""
    if not isinstance(value, objv.Entity):
        return False
    if value.class_id not in objv.Registry.get():
        return False
    return is_metaclass(class_of(value))


def format_entity(value, nested=False):
    """Render a kernel value for display.

    Classes show as their name, instances as the class name followed by
    their named slots. Entities inside slots are shortened so cyclic
    structures stay printable.

    Args:
        value: (object) Any kernel value
        nested: (bool) Value is being shown inside another value
    Returns:
        (str) Display text
    """
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (int, decimal.Decimal)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_entity(v, True) for v in value) + "]"
    if isinstance(value, dict):
        items = (f"{k}={format_entity(v, True)}" for k, v in value.items())
        return "{" + " ".join(items) + "}"
    if not isinstance(value, objv.Entity):
        return repr(value)

    if is_class(value):
        return objv.class_name(value)
    if nested:
        return f"a {value.class_id}"

    try:
        names = objv.instance_variables(class_of(value))
    except objv.UnknownClassError:
        return repr(value)
    fields = " ".join(
        f"{name}={format_entity(slot, True)}"
        for name, slot in zip(names, value.slots)
    )
    return f"{value.class_id}{{{fields}}}"
