#!/usr/bin/env python3
"""objv CLI - Command-line interface for the objv kernel.

Usage:
    objv                          # Interactive REPL
    objv <script.objv>            # Evaluate script and show the last value
    objv --classes                # Table of registered classes
    objv --describe Point         # Show one class with its methods
    objv <script.objv> --classes  # Classes after running a script
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import rich.console
import rich.table

import objv

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging(level=None):
    """Configure the root logger.

    The level comes from the argument, then the OBJV_LOG_LEVEL environment
    variable, then WARNING.
    """
    level = (level or os.environ.get("OBJV_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _superclass_text(cls):
    return objv.class_superclass(cls) or "nil"


def show_classes(console):
    """Print a table of every registered class."""
    registry = objv.Registry.get()
    table = rich.table.Table(title="Classes")
    table.add_column("Class")
    table.add_column("Metaclass")
    table.add_column("Superclass")
    table.add_column("Instance variables")
    for name in registry:
        cls = registry.lookup(name)
        table.add_row(
            name,
            cls.class_id,
            _superclass_text(cls),
            " ".join(objv.instance_variables(cls)),
        )
    console.print(table)


def describe_class(console, name):
    """Print structure, methods and shared variables of one class."""
    cls = objv.give_class_named(name)
    console.print(f"[bold]{name}[/bold]")
    console.print(f"  metaclass:  {cls.class_id}")
    console.print(f"  superclass: {_superclass_text(cls)}")
    console.print(f"  variables:  {' '.join(objv.instance_variables(cls)) or '-'}")

    methods = objv.class_methods(cls)
    table = rich.table.Table(title="Methods")
    table.add_column("Selector")
    table.add_column("Parameters")
    for selector in sorted(methods):
        table.add_row(selector, " ".join(methods[selector].params))
    console.print(table)

    shared = objv.shared_variables(cls)
    if shared:
        console.print("  shared variables:")
        for key, value in shared.items():
            console.print(f"    {key} = {objv.format_entity(value)}", markup=False)


def run_script(path):
    """Evaluate a script file and return the value of its last form."""
    source = Path(path).read_text(encoding="utf-8")
    context = objv.repl.ReplContext()
    return context.eval_source(source)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="objv",
        description="Reflective object kernel with metaclass dispatch",
    )
    parser.add_argument("script", nargs="?", help="Message send script to evaluate")
    parser.add_argument("--classes", action="store_true",
                        help="List registered classes")
    parser.add_argument("--describe", metavar="CLASS",
                        help="Describe one class")
    parser.add_argument("--log-level", help="Logging level (default WARNING)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    console = rich.console.Console()

    try:
        objv.bootstrap()

        if args.script is None and not args.classes and not args.describe:
            objv.repl.main()
            return 0

        if args.script is not None:
            result = run_script(args.script)
            if not args.classes and not args.describe:
                print(objv.format_entity(result))

        if args.classes:
            show_classes(console)
        if args.describe:
            describe_class(console, args.describe)

    except FileNotFoundError as e:
        print(f"Error: script not found: {e.filename}", file=sys.stderr)
        return 1
    except objv.ParseError as e:
        print(f"Parse error in {args.script}:", file=sys.stderr)
        print(f"  {e.message}", file=sys.stderr)
        return 1
    except objv.KernelError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
