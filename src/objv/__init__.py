"""objv reflective object kernel

A minimal object kernel where classes are first-class objects, messages are
dispatched through a metaclass driven lookup chain, and the kernel
bootstraps itself from just `Object` and `Class`.
"""

__version__ = "0.1.0"


from ._error import *
from ._entity import *
from ._layout import *
from ._registry import *
from ._method import *
from ._dispatch import *
from ._protocol import *
from ._extensions import *
from ._bootstrap import *
from ._parse import *
from . import repl
