"""Method objects and installation into class method dictionaries."""

import objv

__all__ = ["Method", "add_method", "remove_method"]


class Method:
    """A compiled method stored in a class method dictionary.

    Method bodies are host callables written against a curried convention.
    The outer call receives the superclass name of the defining class and
    returns the function that actually runs for a send::

        def body(superclass):
            def greet(self, *args, **kwargs):
                return objv.send_super(superclass, self, "greet")
            return greet

    The outer call happens once, when the method is created. Super sends from
    the body therefore always start at the ancestor that was current when the
    method was defined, never at one derived from the runtime receiver.

    Args:
        selector: (str) Message name
        owner: (str) Name of the defining class
        superclass: (str | None) Superclass of owner at definition time
        params: (list[str]) Parameter names, informational
        body: (callable) Curried method body

    Attributes:
        selector: (str) Message name
        owner: (str) Name of the defining class
        superclass: (str | None) Captured superclass name
        params: (tuple[str]) Parameter names
        body: (callable) Curried method body as supplied
        function: (callable) Body applied to the captured superclass
    """

    __slots__ = ("selector", "owner", "superclass", "params", "body", "function")

    def __init__(self, selector, owner, superclass, params, body):
        self.selector = selector
        self.owner = owner
        self.superclass = superclass
        self.params = tuple(params or ())
        self.body = body
        self.function = body(superclass)

    def __repr__(self):
        return f"Method<{self.owner}>>{self.selector}>"


def add_method(cls, selector, params, body):
    """Install a method into a class, replacing any existing definition.

    Args:
        cls: (Entity) Class entity receiving the method
        selector: (str) Message name
        params: (list[str]) Parameter names
        body: (callable) Curried method body
    Returns:
        (Method) The installed method
    """
    method = Method(
        selector, objv.class_name(cls), objv.class_superclass(cls), params, body
    )
    objv.class_methods(cls)[selector] = method
    return method


def remove_method(cls, selector):
    """Remove a locally defined method.

    Raises:
        MessageNotUnderstood: Class has no local method for selector
    """
    methods = objv.class_methods(cls)
    if selector not in methods:
        raise objv.MessageNotUnderstood(cls, selector)
    return methods.pop(selector)
