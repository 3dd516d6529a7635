"""
Fluent construction of argstree specifications.

    >>> cmd = spec({"name": "cmd"})
    >>> _ = (cmd.option("--input", {"min": 1, "max": 1}).alias("-i")
    ...     .command("run").alias("r").spec(lambda run: run.option("--dry").alias("-n", "1")))
    >>> [(node.id, node.args) for node in cmd.parse(["-i", "a.txt", "r", "-n"]).descendants]
    [('--input', ('a.txt',)), ('run', ()), ('--dry', ('1',))]

Every Spec wraps one specification mapping and mutates it in place; options()
returns that mapping, so it can also be handed to argstree() directly.
"""
from .faults import ArgsTreeError, Cause
from .internals import StorageGuard, view
from .parser import argstree
from .utils import deproto, display_name, get_type, is_object

KEYS = ("id", "name", "min", "max", "max_read", "strict", "assign", "initial", "validate")


def _normalize(options):
    # only scalar keys: 'alias' and 'args' are owned by the builder
    source = deproto(options if is_object(options) else None)
    return {key: source[key] for key in KEYS if source.get(key) is not None}


class _Item:
    __slots__ = ("arg", "options", "spec")

    def __init__(self, arg, options):
        self.arg = arg
        self.options = options
        self.spec = None


class Spec(StorageGuard):
    """
    specification builder for one level of the tree.

    fields
    - id: the token this spec was declared for (None for the root).
    - depth: 0 for the root.

    notes
    - option(), command(), alias(), spec(), aliases() and args() return the spec
      itself for chaining.
    - alias() and spec() configure the most recently declared token.
    """
    id = view("id")
    depth = view("depth")

    def __new__(cls, options, /, id=None, parent=None):
        with super().__new__(cls) as self:
            setattr(self, "-id", id)
            setattr(self, "-depth", parent.depth + 1 if parent is not None else 0)
        self._options = options
        self._parent = parent
        self._args = {}
        self._items = []
        return self

    def _error(self, message):
        name = display_name(self.id, self._options.get("name"))
        return ArgsTreeError(
            (name + "spec error: " if name else "") + message,
            cause=Cause.INVALID_SPEC,
            raw=self.id,
            arguments=[],
            options=self._options,
        )

    def _current(self, context):
        if not self._items:
            raise self._error(f"Requires `option()` or `command()` call before `{context}`.")
        return self._items[-1]

    def _assign_alias(self, alias, args):
        table = self._options.setdefault("alias", {})
        if alias in table:
            raise self._error(f"Alias '{alias}' already exists.")
        table[alias] = args

    def _spec(self, item):
        # one sub-spec per token, shared by every spec() call on it
        if item.spec is None:
            item.spec = type(self)(item.options, item.arg, self)
        return item.spec

    def _ensure_args(self):
        if self._options.get("args") is None:
            self._options["args"] = self._args

    def option(self, arg, options=None):
        """
        declare an option or command token with its (scalar) specification.

        errors
        - ArgsTreeError(invalid-spec) when the token was already declared.
        """
        self._ensure_args()
        if arg in self._args:
            raise self._error(f"{get_type(arg)} '{arg}' already exists.")
        self._args[arg] = options = _normalize(options)
        self._items.append(_Item(arg, options))
        return self

    def command(self, arg, options=None):
        """
        declare a token that owns a (possibly empty) matcher of its own.
        """
        return self.option(arg, options).spec(lambda spec: spec.args())

    def alias(self, alias, args=None):
        """
        alias the current token; `args` (a str or list) are extra values passed along.
        """
        arg = self._current("alias()").arg
        if isinstance(args, str):
            args = [arg, args]
        elif isinstance(args, (list, tuple)):
            args = [arg, *args]
        else:
            args = arg
        if isinstance(alias, str):
            aliases = [alias]
        elif isinstance(alias, (list, tuple)):
            aliases = alias
        else:
            aliases = []
        for alias in aliases:
            self._assign_alias(alias, args)
        return self

    def spec(self, setup):
        """
        configure the current token's own level through `setup(spec)`.
        """
        setup(self._spec(self._current("spec()")))
        return self

    def aliases(self, alias):
        """
        add raw alias expansions ({alias: expansion}) to this level.
        """
        for key, value in deproto(alias if is_object(alias) else None).items():
            self._assign_alias(key, value)
        return self

    def args(self, handler=None):
        """
        make sure this level has a matcher.

        with a handler, declared tokens still win and the handler is consulted for
        everything else. a later call replaces an earlier handler.
        """
        self._ensure_args()
        if callable(handler):
            table = self._args

            def match(arg, data):
                options = table.get(arg)
                return options if options is not None else handler(arg, data)

            self._options["args"] = match
        return self

    def options(self):
        return self._options

    def parse(self, args):
        return argstree(args, self._options)

    def parent(self):
        return self._parent

    def children(self):
        return [self._spec(item) for item in self._items]

    def ancestors(self):
        if self._parent is None:
            return []
        return [*self._parent.ancestors(), self._parent]

    def descendants(self):
        specs = []
        for child in self.children():
            specs.append(child)
            specs.extend(child.descendants())
        return specs

    def __repr__(self):
        return f"spec(id={self.id!r}, depth={self.depth}, children={len(self._items)})"


def spec(options=None, /):
    """
    start a specification builder.

    parameters
    - options: Mapping | None
      scalar options of the root (id, name, min, max, max_read, strict, assign,
      initial, validate). other keys are ignored; the mapping is not kept.
    """
    return Spec(_normalize(options))


__all__ = (
    "Spec",
    "spec",
)
