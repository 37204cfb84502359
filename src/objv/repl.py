"""Interactive REPL for the objv kernel.

Provides a read-eval-print loop over message send scripts. Lines are
parsed with `objv.parse` and every form is evaluated against the running
kernel.
"""

import logging
import sys
import traceback

import objv

logger = logging.getLogger(__name__)

_CONSTANTS = {"nil": None, "true": True, "false": False}


class ReplContext:
    """Context for REPL session.

    Maintains state across multiple evaluations:
    - names bound with (define ...)
    - last result, bound as `_`

    Bare names that are not bound resolve to registered classes.
    """

    def __init__(self):
        self.bindings = {}
        self.last_result = None

    def resolve(self, name):
        """Value of a bare name.

        Raises:
            UnknownClassError: Name is neither bound nor a class
        """
        if name in _CONSTANTS:
            return _CONSTANTS[name]
        if name in self.bindings:
            return self.bindings[name]
        return objv.give_class_named(name)

    def evaluate(self, form):
        """Evaluate a single parsed form."""
        if isinstance(form, objv.Literal):
            return form.value
        if isinstance(form, objv.Ref):
            return self.resolve(form.name)
        if isinstance(form, objv.ListForm):
            return [self.evaluate(item) for item in form.items]
        if isinstance(form, objv.Define):
            value = self.evaluate(form.form)
            self.bindings[form.name] = value
            return value
        if isinstance(form, objv.Send):
            receiver = self.evaluate(form.receiver)
            args = [self.evaluate(arg) for arg in form.args]
            kwargs = {key: self.evaluate(val) for key, val in form.kwargs.items()}
            return objv.send(receiver, form.selector, *args, **kwargs)
        raise TypeError(f"Cannot evaluate {form!r}")

    def eval_source(self, source):
        """Parse and evaluate source, returning the value of the last form.

        Raises:
            ParseError: Source is not a valid script
            KernelError: Any send failed
        """
        result = None
        for form in objv.parse(source):
            result = self.evaluate(form)
            self.last_result = result
            self.bindings["_"] = result
        return result


def format_value(value):
    """Format a kernel value for display in the REPL."""
    return objv.format_entity(value)


def repl():
    """Run the interactive REPL."""
    print(f"objv REPL v{objv.__version__}")
    print("Send messages with (send receiver selector args... :key value).")
    print("Bind names with (define name form). Last result is available as _")
    print("Type 'exit' or Ctrl-C to quit.\n")

    if not objv.is_bootstrapped():
        objv.bootstrap()
    context = ReplContext()

    while True:
        try:
            try:
                line = input("objv> ")
            except EOFError:
                print("\nGoodbye!")
                break

            if line.strip().lower() in ("exit", "quit", ":q"):
                print("Goodbye!")
                break

            if not line.strip():
                continue

            result = context.eval_source(line)
            print(format_value(result))

        except KeyboardInterrupt:
            print("\nKeyboardInterrupt")
            print("Type 'exit' to quit.")
            continue
        except objv.ParseError as e:
            print(f"Parse error: {e.message}")
        except objv.KernelError as e:
            logger.debug("Send failed", exc_info=True)
            print(f"{type(e).__name__}: {e}")
        except Exception as e:
            print(f"Internal error: {e}")
            traceback.print_exc()


def main():
    """Main entry point for REPL."""
    try:
        repl()
    except KeyboardInterrupt:
        print("\n\nGoodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
