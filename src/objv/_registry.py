"""Process wide mapping from class name to class entity."""

import contextlib
import logging

import objv

__all__ = ["Registry", "give_class_named"]

logger = logging.getLogger(__name__)


class Registry:
    """Registry of every class known to the kernel.

    There is one registry per process, reached through `Registry.get()`.
    It starts empty, bootstrap populates it and each class creation adds to
    it. Classes are never removed except by `clear()`, which is how the
    kernel is torn down.

    Attributes:
        classes: (dict) Class name to class entity
    """

    _singleton = None

    def __init__(self):
        self.classes = {}
        self.boot_state = None
        self._replaceable = set()

    @classmethod
    def get(cls):
        """Get registry singleton."""
        if Registry._singleton is None:
            Registry._singleton = cls()
        return Registry._singleton

    def __repr__(self):
        return f"Registry<{len(self.classes)} classes>"

    def __contains__(self, name):
        return name in self.classes

    def __len__(self):
        return len(self.classes)

    def __iter__(self):
        return iter(sorted(self.classes))

    def lookup(self, name):
        """Find a class entity by name.

        Args:
            name: (str) Class name
        Returns:
            (Entity) Registered class entity
        Raises:
            UnknownClassError: Nothing registered under that name
        """
        try:
            return self.classes[name]
        except KeyError:
            raise objv.UnknownClassError(name) from None

    def check_available(self, name):
        """Raise DuplicateClassError unless `name` may be registered now."""
        if name in self.classes and name not in self._replaceable:
            raise objv.DuplicateClassError(name)

    def register(self, cls):
        """Add a class entity under its own name.

        A name that is already taken is refused unless a `replacing()` block
        allows that one name to be swapped.

        Raises:
            DuplicateClassError: Name already registered
        """
        name = objv.class_name(cls)
        self.check_available(name)
        if name in self.classes:
            self._replaceable.discard(name)
            logger.debug("Replaced class %s", name)
        else:
            logger.debug("Registered class %s", name)
        self.classes[name] = cls
        return cls

    @contextlib.contextmanager
    def replacing(self, name):
        """Allow a single re-registration of `name` inside the block."""
        self._replaceable.add(name)
        try:
            yield self
        finally:
            self._replaceable.discard(name)

    def clear(self):
        """Forget every class."""
        self.classes.clear()
        self.boot_state = None
        self._replaceable.clear()


def give_class_named(name):
    """Look up a class by name in the process registry."""
    return Registry.get().lookup(name)
