"""
Match nodes (parse-time, mutable) and public nodes (parse result, read-only).

Lifecycle
- A MatchNode is created the moment a token resolves to a specification. Its
  argument list grows while the parser keeps it as the accumulation target, and
  is closed by validate() once the parser moves past it.
- After the whole token sequence is consumed, the root MatchNode is converted
  once, top-down, into a tree of Node objects. ancestors/descendants are
  computed lists of shared references, so they need the final tree shape.

Specification reading
- Every specification mapping is read through a flat copy (utils.deproto), but
  callbacks and errors always receive the caller's original object.
"""
from collections import namedtuple

from .alias import Alias
from .faults import ArgsTreeError, Cause
from .internals import StorageGuard, view
from .utils import deproto, display_name, ensure_number, get_type, is_object, pluralize

NodeData = namedtuple("NodeData", ("raw", "alias", "args", "options"))
NodeData.__doc__ = """
the node data handed to the 'id', 'args' and 'validate' callables.

- raw: the matched token (None for the root).
- alias: the alias used to reach this node, or None.
- args: the node's live argument list.
- options: the caller's specification object for this node.
"""

Range = namedtuple("Range", ("min", "max", "max_read"))
RangeCheck = namedtuple("RangeCheck", ("min", "max", "max_read"))


class MatchNode:
    """
    internal parse-time node.

    parameters
    - options: Mapping
      the specification for this node (non-mappings read as empty).
    - raw: str | None
      the matched token; None for the root.
    - alias: str | None
      the alias used to reach this node.
    - args: Iterable[str]
      values seeded after the 'initial' values (alias extras, assigned value).
    - strict: bool
      the parent's effective strict value; an explicit bool 'strict' option wins.
    - parent: MatchNode | None

    errors
    - ArgsTreeError(invalid-options) when min > max or max_read > max.
    """

    def __init__(self, options, /, raw=None, alias=None, args=(), *, strict=False, parent=None):
        self.source = options
        self.options = options = deproto(options if is_object(options) else None)
        self.strict = options["strict"] if isinstance(options.get("strict"), bool) else strict
        self.parent = parent
        self.children = []

        initial = options.get("initial")
        # always a new list: the caller's 'initial' is never mutated
        self.args = (list(initial) if isinstance(initial, (list, tuple)) else []) + list(args)
        self.data = NodeData(raw, alias, self.args, self.source)
        self._validated = False
        self._alias = None

        min = ensure_number(options.get("min"))
        max = ensure_number(options.get("max"))
        max_read = ensure_number(options.get("max_read"))
        if max_read is None:
            max_read = max
        self.range = Range(min, max, max_read)

        if min is not None and max is not None and min > max:
            name = self.display_name()
            raise self.error(
                Cause.INVALID_OPTIONS,
                f"{name}has invalid min and max range: {min}-{max}." if name else
                f"Invalid min and max range: {min}-{max}.",
            )
        elif max is not None and max_read is not None and max < max_read:
            name = self.display_name()
            raise self.error(
                Cause.INVALID_OPTIONS,
                f"{name}has invalid max and max_read range: {max} < {max_read}." if name else
                f"Invalid max and max_read range: {max} < {max_read}.",
            )

        handler = options.get("args")
        if callable(handler):
            self._match = handler
        elif is_object(handler):
            table = deproto(handler)
            self._match = lambda arg, data: table.get(arg)
        else:
            self._match = None

    @property
    def has_args(self):
        """
        whether this node declares its own matcher (it can own a subtree).
        """
        return self._match is not None

    @property
    def alias(self):
        # only build the alias table when a token actually needs it
        if self._alias is None:
            self._alias = Alias(self.options.get("alias"))
        return self._alias

    def display_name(self):
        return display_name(self.data.raw, self.options.get("name"))

    def error(self, cause, message, /):
        return ArgsTreeError(
            message,
            cause=cause,
            raw=self.data.raw,
            alias=self.data.alias,
            arguments=self.args,
            options=self.source,
        )

    def match(self, arg, /, required=False):
        """
        look up the child specification for a token.

        returns the specification mapping, or None when nothing matches (a
        non-mapping result from a matcher function counts as no match).
        with required=True a miss raises unrecognized-argument instead.
        """
        options = self._match(arg, self.data) if self._match is not None else None
        if not is_object(options):
            options = None
        if required and options is None:
            raise self.unrecognized(arg)
        return options

    def check_range(self, diff=0, /):
        """
        evaluate min/max/max_read independently against len(args) + diff.
        """
        min, max, max_read = self.range
        count = len(self.args) + diff
        return RangeCheck(
            min=min is None or count >= min,
            max=max is None or count <= max,
            max_read=max_read is None or count <= max_read,
        )

    def validate(self):
        """
        close the argument list: check the final range, then run the 'validate'
        callable. runs once; later calls are no-ops.
        """
        if self._validated:
            return
        self._validated = True
        self._validate_range()
        # the args list is handed over as-is; callers may mutate it from here on
        validate = self.options.get("validate")
        if callable(validate) and not validate(self.data):
            name = self.display_name()
            raise self.error(Cause.VALIDATE, f"{name}failed validation." if name else "Validation failed.")

    def _validate_range(self):
        min, max, _ = self.range
        satisfies = self.check_range()
        if satisfies.min and satisfies.max:
            return

        if min is not None and max is not None:
            phrase, count = (min, min) if min == max else (f"{min}-{max}", 2)
        elif min is not None:
            phrase, count = f"at least {min}", min
        elif max <= 0:
            phrase, count = "no", max
        else:
            phrase, count = f"up to {max}", max

        label = "argument" if count == 1 else pluralize("argument")
        name = self.display_name()
        raise self.error(
            Cause.INVALID_RANGE,
            (f"{name}expected" if name else "Expected") + f" {phrase} {label}, but got {len(self.args)}.",
        )

    def validate_alias(self, remainder, /):
        """
        raise unrecognized-alias for the characters left over from a cluster split.
        """
        if not remainder:
            return
        label = "alias" if len(remainder) == 1 else pluralize("alias")
        aliases = ", ".join("-" + alias for alias in remainder)
        name = self.display_name()
        raise self.error(
            Cause.UNRECOGNIZED_ALIAS,
            (f"{name}does not recognize the" if name else "Unrecognized") + f" {label}: {aliases}",
        )

    def unrecognized(self, arg, /):
        """
        build (not raise) the unrecognized-argument error for a token.
        """
        name = self.display_name()
        return self.error(
            Cause.UNRECOGNIZED_ARGUMENT,
            (f"{name}does not recognize the" if name else "Unrecognized") + f" {get_type(arg).lower()}: {arg}",
        )

    def build(self):
        """
        materialize the public, read-only Node tree rooted at this node.
        """
        return Node(self)


class Node(StorageGuard):
    """
    the parse result: a read-only node of the matched tree.

    fields
    - id: the 'id' option (or its return value), falling back to the raw token.
    - name: the 'name' option, or None.
    - raw: the matched token (None for the root).
    - alias: the alias used to reach this node, or None.
    - depth: 0 for the root.
    - args: tuple of the arguments this node consumed.
    - parent: Node | None.
    - children: tuple of direct child nodes.
    - ancestors: tuple of nodes from the root down to the parent.
    - descendants: tuple of nodes below this one, each child followed by its own descendants.
    """
    id = view("id")
    name = view("name")
    raw = view("raw")
    alias = view("alias")
    depth = view("depth")
    args = view("args")
    parent = view("parent")
    children = view("children")
    ancestors = view("ancestors")
    descendants = view("descendants")

    def __new__(cls, source, /, parent=None, depth=0):
        if not isinstance(source, MatchNode):
            raise TypeError(f"{cls.__name__}() argument must be a match node")

        raw, alias, args, _ = source.data
        id = source.options.get("id")
        if callable(id):
            id = id(raw, source.data)
        if id is None:
            id = raw

        with super().__new__(cls) as self:
            setattr(self, "-id", id)
            setattr(self, "-name", source.options.get("name"))
            setattr(self, "-raw", raw)
            setattr(self, "-alias", alias)
            setattr(self, "-depth", depth)
            setattr(self, "-args", tuple(args))
            setattr(self, "-parent", parent)

            ancestors = [*parent.ancestors, parent] if parent is not None else []
            children = []
            descendants = []
            setattr(self, "-ancestors", ancestors)
            setattr(self, "-children", children)
            setattr(self, "-descendants", descendants)

            for instance in source.children:
                child = cls(instance, self, depth + 1)
                children.append(child)
                descendants.append(child)
                descendants.extend(child.descendants)
        return self

    def __rich_repr__(self):
        # parent/ancestors are omitted: they would recurse back into this node
        yield "id", self.id
        yield "raw", self.raw, None
        yield "alias", self.alias, None
        yield "name", self.name, None
        yield "depth", self.depth
        yield "args", self.args
        yield "children", self.children, ()

    def __repr__(self):
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in ("id", "raw", "alias", "depth", "args"))
        return f"node({fields}, children={len(self.children)})"


__all__ = (
    "NodeData",
    "MatchNode",
    "Node",
)
