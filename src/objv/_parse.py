"""Parse message send scripts into form objects.

Scripts are a thin s-expression notation over `send`::

    (define Point (send Class new :name #Point :iv [#x #y]))
    (send (send Point new :x 3 :y 4) x)

The lark tree is converted right away into the small form classes below,
which the REPL evaluates. The lark tree itself is not exposed.
"""

__all__ = ["parse", "Send", "Define", "Ref", "Literal", "ListForm"]

import ast
import decimal

import lark

import objv


_parsers = {}


class Send:
    """Message send form.

    Args:
        receiver: (form) Expression producing the receiver
        selector: (str) Message name, taken literally
        args: (list) Positional argument forms
        kwargs: (dict) Keyword argument forms
        line: (int | None) Source line of the form
    """

    __slots__ = ("receiver", "selector", "args", "kwargs", "line")

    def __init__(self, receiver, selector, args, kwargs, line=None):
        self.receiver = receiver
        self.selector = selector
        self.args = args
        self.kwargs = kwargs
        self.line = line

    def __repr__(self):
        return f"Send<#{self.selector}>"


class Define:
    """Bind the value of a form to a name."""

    __slots__ = ("name", "form")

    def __init__(self, name, form):
        self.name = name
        self.form = form

    def __repr__(self):
        return f"Define<{self.name}>"


class Ref:
    """Reference to a bound name or a registered class."""

    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"Ref<{self.name}>"


class Literal:
    """Constant value, already converted to its Python form."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Literal<{self.value!r}>"


class ListForm:
    """Bracketed list of forms, evaluates to a Python list."""

    __slots__ = ("items",)

    def __init__(self, items):
        self.items = items

    def __repr__(self):
        return f"ListForm<{len(self.items)}>"


class _KeywordArg:
    __slots__ = ("name", "form")

    def __init__(self, name, form):
        self.name = name
        self.form = form


class _Converter(lark.Transformer):
    def start(self, children):
        return list(children)

    @lark.v_args(meta=True)
    def send(self, meta, children):
        receiver, selector, *rest = children
        args = []
        kwargs = {}
        for item in rest:
            if isinstance(item, _KeywordArg):
                kwargs[item.name] = item.form
            else:
                args.append(item)
        line = meta.line if not meta.empty else None
        return Send(receiver, str(selector), args, kwargs, line)

    def define(self, children):
        name, form = children
        return Define(str(name), form)

    def keyarg(self, children):
        keyword, form = children
        return _KeywordArg(str(keyword)[1:], form)

    def list(self, children):
        return ListForm(list(children))

    def number(self, children):
        text = str(children[0])
        if any(c in text for c in ".eE"):
            return Literal(decimal.Decimal(text))
        return Literal(int(text))

    def string(self, children):
        return Literal(ast.literal_eval(str(children[0])))

    def symbol(self, children):
        return Literal(str(children[0])[1:])

    def ref(self, children):
        return Ref(str(children[0]))


def parse(source):
    """Parse script source into a list of forms.

    Args:
        source: (str) Script text
    Returns:
        (list) Top level forms in source order
    Raises:
        ParseError: Source does not match the grammar
    """
    parser = _lark_parser("objv")
    try:
        tree = parser.parse(source)
    except lark.exceptions.UnexpectedInput as e:
        position = getattr(e, "pos_in_stream", None)
        raise objv.ParseError(f"Syntax error: {e}", position) from e
    return _Converter().transform(tree)


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(
        path, rel_to=__file__, parser="lalr", propagate_positions=True
    )
    _parsers[name] = parser
    return parser
