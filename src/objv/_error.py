"""Error classes and helpers"""

__all__ = [
    "KernelError",
    "MessageNotUnderstood",
    "UnknownClassError",
    "DuplicateClassError",
    "DuplicateVariableError",
    "UnknownVariableError",
    "AbstractInstantiationError",
    "NotAMetaclassError",
    "MissingNameError",
    "BootstrapError",
    "ParseError",
]


class KernelError(Exception):
    """Base for every error raised by the object kernel."""


class MessageNotUnderstood(KernelError):
    """No class on the receiver's lookup chain defines the selector.

    Args:
        receiver: (object) Receiver of the failed send
        selector: (str) Selector that was not understood
    """

    def __init__(self, receiver, selector):
        self.receiver = receiver
        self.selector = selector
        super().__init__(f"{receiver!r} does not understand #{selector}")


class UnknownClassError(KernelError):
    """Class name is not in the registry."""

    def __init__(self, name, message=None):
        self.name = name
        super().__init__(message or f"Unknown class: {name}")


class DuplicateClassError(KernelError):
    """Class name is already registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Class already defined: {name}")


class DuplicateVariableError(KernelError):
    """Instance variable declared twice along an inheritance chain."""

    def __init__(self, name, class_name):
        self.name = name
        self.class_name = class_name
        super().__init__(f"Duplicate instance variable '{name}' in class {class_name}")


class UnknownVariableError(KernelError):
    """Variable name is not declared by the class."""

    def __init__(self, name, class_name):
        self.name = name
        self.class_name = class_name
        super().__init__(f"Class {class_name} has no variable '{name}'")


class AbstractInstantiationError(KernelError):
    """Attempt to instantiate an abstract class."""

    def __init__(self, class_name):
        self.class_name = class_name
        super().__init__(f"Cannot instantiate abstract class {class_name}")


class NotAMetaclassError(KernelError):
    """Class used as a metaclass does not inherit from Class."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"{name} is not a metaclass")


class MissingNameError(KernelError):
    """Class specification without a name."""

    def __init__(self, metaclass_name):
        self.metaclass_name = metaclass_name
        super().__init__(f"Class created by {metaclass_name} needs a name")


class BootstrapError(KernelError):
    """Kernel startup failed or was requested twice.

    Args:
        message: (str) Error description
        state: (BootState | None) State the sequencer was entering
    """

    def __init__(self, message, state=None):
        self.state = state
        super().__init__(message)


class ParseError(Exception):
    """Exception raised for parsing errors.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)
