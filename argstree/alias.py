"""
Alias resolution for a single node.

An alias table maps an alias token to its expansion:

    {
        "-t": "--test",                              # one match
        "-T": ["--test", "foo"],                     # one match with extra values
        "-A": [["--foo"], ["--bar", "0"]],           # several independent matches
        "i": "install",                              # whole-token (non-dash) alias
    }

Single-dash aliases can also be combined into one cluster ("-tA"); the cluster
is decomposed with the longest-match-first splitter, so multi-character
aliases ("-ab") win over their single-character prefixes wherever they fit.
"""
from collections import namedtuple

from .split import _split
from .utils import deproto, is_alias, is_object

ResolvedAlias = namedtuple("ResolvedAlias", ("alias", "args"))
ResolvedAlias.__doc__ = """
one expansion group of an alias: the alias token used and the group
[canonical-token, *extra-values].
"""

AliasSplit = namedtuple("AliasSplit", ("resolved", "remainder"))
AliasSplit.__doc__ = """
result of Alias.split(): the resolved expansion groups, in cluster order, and
the unmatched characters left over (without dash prefixes).
"""


def _is_array(object):
    return isinstance(object, (list, tuple))


class Alias:
    """
    alias table of one node.

    construction
    - the mapping is read through a flat copy (see utils.deproto); non-mappings
      are treated as an empty table.
    - splittable letters are the single-dash keys with a str or list expansion,
      stored without their dash and sorted longest first.
    """

    def __init__(self, alias=None, /):
        self._table = deproto(alias if is_object(alias) else None)
        self._letters = sorted(
            (
                alias[1:]
                for alias, args in self._table.items()
                if is_alias(alias) and (isinstance(args, str) or _is_array(args))
            ),
            key=len,
            reverse=True,
        )

    def get_args(self, alias, /):
        """
        normalize the expansion of an alias into a list of groups.

        - "--foo"                        → [["--foo"]]
        - ["--foo", "a", "b"]            → [["--foo", "a", "b"]]
        - [["--foo", "a"], ["--bar"]]    → [["--foo", "a"], ["--bar"]]
        - [["--foo"], "--bar", "x"]      → [["--foo"], ["--bar", "x"]]

        bare strings all join the first group started by a bare string; empty
        sub-lists are dropped. returns None when the alias has no usable expansion.
        """
        args = self._table.get(alias)
        if isinstance(args, str):
            args = [args]
        elif not _is_array(args):
            return None

        group = None
        groups = []
        for arg in args:
            if isinstance(arg, str):
                if group is None:
                    group = [arg]
                    groups.append(group)
                else:
                    group.append(arg)
            elif _is_array(arg) and len(arg) > 0:
                groups.append(list(arg))
        return groups

    def resolve(self, aliases, prefix="", /):
        """
        expand the given aliases (each re-prefixed with `prefix`) in order.

        returns a list of ResolvedAlias, or None when none of the aliases is
        configured. an alias configured with an empty expansion counts as
        configured and contributes nothing.
        """
        found = False
        resolved = []
        for alias in aliases:
            alias = prefix + alias
            groups = self.get_args(alias)
            if groups is not None:
                found = True
                resolved.extend(ResolvedAlias(alias, args) for args in groups)
        return resolved if found else None

    def split(self, arg, /):
        """
        decompose a single-dash cluster ("-abc") into resolved aliases.

        returns AliasSplit(resolved, remainder), or None when the token is not
        alias-shaped or none of its pieces is a configured alias.
        """
        if not is_alias(arg):
            return None
        values, remainder = _split(arg[1:], self._letters)
        resolved = self.resolve(values, "-") if values else None
        if resolved is None:
            return None
        return AliasSplit(resolved, remainder)


__all__ = (
    "Alias",
    "AliasSplit",
    "ResolvedAlias",
)
