"""Kernel startup.

The kernel has a circular dependency at its base: every entity needs a
class, and a class can only be made by sending `new` to a class. The
sequencer breaks the cycle in three strictly ordered steps.

1. Manual: `Class` is assembled by hand as a raw entity. Its superclass
   names `Object`, which does not exist yet, and its method dictionary is
   filled directly with the class-creation methods.
2. Grounded: the hand built `Class` creates `Object` through its own `new`,
   which proves the manual class works end to end.
3. Reconstructed: `Class` is created again through the protocol, as a
   subclass of `Object`, and replaces the manual entity in the registry.

After the last step every class in the registry, `Class` included, was
built by the same protocol. `Class` is its own class.
"""

import enum
import logging

import objv

__all__ = ["BootState", "Bootstrap", "bootstrap", "teardown", "is_bootstrapped"]

logger = logging.getLogger(__name__)


class BootState(enum.Enum):
    INITIAL = "initial"
    MANUAL = "manual"
    GROUNDED = "grounded"
    RECONSTRUCTED = "reconstructed"


class Bootstrap:
    """Three state bootstrap sequencer.

    Attributes:
        state: (BootState) Last state reached
        registry: (Registry) Registry being populated
        manual: (Entity | None) Hand built `Class` from the manual state
        root: (Entity | None) The `Object` class
        metaclass: (Entity | None) The reconstructed `Class`
    """

    def __init__(self):
        self.registry = objv.Registry.get()
        self.state = BootState.INITIAL
        self.manual = None
        self.root = None
        self.metaclass = None

    def __repr__(self):
        return f"Bootstrap<{self.state.value}>"

    def run(self):
        """Run every state in order, tearing down on any failure."""
        steps = [
            (BootState.MANUAL, self._manual),
            (BootState.GROUNDED, self._ground),
            (BootState.RECONSTRUCTED, self._reconstruct),
        ]
        for state, step in steps:
            try:
                step()
            except objv.KernelError as e:
                self.registry.clear()
                raise objv.BootstrapError(
                    f"Bootstrap failed entering {state.value}: {e}", state
                ) from e
            except Exception:
                self.registry.clear()
                raise
            self.state = state
            self.registry.boot_state = state
            logger.info("Bootstrap reached %s", state.value)
        return self

    def _expect(self, state):
        if self.state is not state:
            raise objv.BootstrapError(
                f"Bootstrap expected state {state.value}, found {self.state.value}",
                self.state,
            )

    def _manual(self):
        self._expect(BootState.INITIAL)
        name, superclass = objv.META_CLASS, objv.ROOT_CLASS
        slots = [None] * len(objv.CLASS_IVS)
        slots[objv.NAME] = name
        slots[objv.SUPERCLASS] = superclass
        slots[objv.IV] = list(objv.CLASS_IVS)
        slots[objv.METHODS] = objv.method_dict(name, superclass, objv.CLASS_METHODS)
        slots[objv.SHARED] = {}
        self.manual = objv.make_entity(name, slots)
        self.registry.register(self.manual)

    def _ground(self):
        self._expect(BootState.MANUAL)
        self.root = objv.send(
            self.manual, "new", name=objv.ROOT_CLASS, superclass=None, iv=[])
        objv.install_methods(self.root, objv.OBJECT_METHODS)

    def _reconstruct(self):
        self._expect(BootState.GROUNDED)
        governing = objv.class_of(self.root)
        with self.registry.replacing(objv.META_CLASS):
            metaclass = objv.send(
                governing, "new",
                name=objv.META_CLASS,
                superclass=objv.ROOT_CLASS,
                iv=list(objv.CLASS_IVS),
            )
        objv.install_methods(metaclass, objv.CLASS_METHODS)
        self.metaclass = metaclass


def is_bootstrapped():
    """(bool) Whether the registry holds a reconstructed kernel."""
    return objv.Registry.get().boot_state is BootState.RECONSTRUCTED


def bootstrap():
    """Build the kernel classes and the standard extensions.

    Returns:
        (Bootstrap) Finished sequencer, useful for inspecting each state
    Raises:
        BootstrapError: Registry already populated, or any step failed
    """
    registry = objv.Registry.get()
    if len(registry):
        raise objv.BootstrapError(
            "Kernel already bootstrapped, call teardown() first")
    sequencer = Bootstrap().run()
    try:
        objv.install_extensions()
    except objv.KernelError as e:
        registry.clear()
        raise objv.BootstrapError(f"Installing extensions failed: {e}") from e
    except Exception:
        registry.clear()
        raise
    return sequencer


def teardown():
    """Remove every class so `bootstrap()` can run again."""
    objv.Registry.get().clear()
    logger.info("Kernel torn down")
