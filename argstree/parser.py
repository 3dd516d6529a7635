"""
The parse driver.

Every token is interpreted against the active node (the node whose matcher is
in force), in this order:

1. whole-token match: the matcher, then the active node's alias table
   ("i" -> "install", "--no-foo" -> ["--foo", "0"]).
2. "head=value": the same lookup for the head, carrying the value.
3. alias cluster: "-abc" decomposed into configured short aliases.
4. positional value: for the pending node while its max_read allows it,
   otherwise for the active node.

A token never spans more than one of these steps, and the first fault aborts
the whole parse.
"""
from .internals import Unset
from .node import MatchNode
from .utils import is_assignable, is_object, is_option


class Parser:
    """
    internal: drive one parse over a root match node.

    state
    - parent: the active node; its matcher and alias table interpret tokens.
    - child: the pending node; the most recently created leaf still
      accepting positional values, or None.
    """

    def __init__(self, root, /):
        self.root = root
        self.parent = root
        self.child = None

    def _parse_arg(self, arg):
        if self._save_arg(arg):
            return

        match, equal, assigned = arg.partition("=")
        assigned = assigned if equal else Unset
        if assigned is not Unset and self._save_arg(match, assigned):
            return

        split = self.parent.alias.split(match)
        if split is not None and self._save_alias_args(assigned, split.resolved, split.remainder):
            return

        node = self.child if self.child is not None and self.child.check_range(1).max_read else self.parent
        if node.strict and is_option(arg):
            raise node.unrecognized(arg)
        node.args.append(arg)

    def _save_arg(self, raw, assigned=Unset):
        options = self.parent.match(raw)
        if options is not None:
            if assigned is not Unset and not is_assignable(raw, options):
                return False
            self._save([(raw, None, [] if assigned is Unset else [assigned], options)])
            return True

        resolved = self.parent.alias.resolve([raw])
        return resolved is not None and self._save_alias_args(assigned, resolved)

    def _save_alias_args(self, assigned, resolved, remainder=()):
        # leftover letters are never treated as values
        self.parent.validate_alias(remainder)

        last = None
        if assigned is not Unset and resolved:
            raw = resolved[-1].args[0]
            last = self.parent.match(raw)
            if last is not None and not is_assignable(raw, last):
                return False

        items = []
        for index, (alias, args) in enumerate(resolved):
            raw, *args = args
            is_last = index == len(resolved) - 1
            if is_last and assigned is not Unset:
                args.append(assigned)
            options = last if is_last and last is not None else self.parent.match(raw, required=True)
            items.append((raw, alias, args, options))
        self._save(items)
        return True

    def _save(self, items):
        if not items:
            return
        if self.child is not None:
            self.child.validate()

        following = None
        children = []
        for raw, alias, args, options in items:
            self.child = MatchNode(options, raw, alias, args, strict=self.parent.strict, parent=self.parent)
            self.parent.children.append(self.child)
            children.append(self.child)
            if self.child.has_args:
                following = self.child

        pending = following or self.child
        for child in children:
            if child is not pending:
                child.validate()

        if following is not None:
            # the active node is left behind for good
            self.parent.validate()
            self.parent = following
            self.child = None

    def parse(self, args, /):
        """
        consume the tokens and return the root match node, fully validated.
        """
        for arg in list(args):
            self._parse_arg(arg)
        if self.child is not None:
            self.child.validate()
        node = self.parent
        while node is not None:
            node.validate()
            node = node.parent
        return self.root


def argstree(args, /, options=None):
    """
    parse command-line tokens into a tree of matched options and commands.

    parameters
    - args: Iterable[str]
      the tokens to parse (copied first; never modified).
    - options: Mapping | None
      the root specification; anything that is not a mapping reads as empty.

    returns
    - Node: the read-only root of the parsed tree.

    errors
    - ArgsTreeError on the first invalid option, range, alias or argument.

    examples
        >>> root = argstree(["--foo", "bar"], {"args": {"--foo": {}}})
        >>> [(child.id, child.args) for child in root.children]
        [('--foo', ('bar',))]
    """
    if not is_object(options):
        options = {}
    return Parser(MatchNode(options)).parse(args).build()


__all__ = (
    "Parser",
    "argstree",
)
