"""
argstree utilities (internal helpers, carefully exposed)

Scope
- Token shape predicates shared by the alias resolver, the match nodes and the parser.
- Defensive reading of caller-supplied specifications.
- Display helpers used to compose error messages.

Overview
- deproto(mapping) / is_object(x)
  • Specifications are read through a flat, plain-dict copy. Mapping subclasses that
    fabricate keys (defaultdict, __missing__, overridden get) cannot inject options
    or aliases that were never declared.

- ensure_number(n)
  • Range limits: a finite, non-negative number or None (unbounded).

- is_alias(arg) / is_option(arg) / is_assignable(arg, options)
  • "-x" is alias-shaped, "-x" and "--xy" are option-shaped, "--" alone is neither.

- get_type(raw) / display_name(raw, name)
  • "Option" vs "Command" labels and the "<Type> '<name>' " message prefix.

- pluralize(text)
  • Best-effort English pluralization for labels in messages.

Quick examples
    >>> is_alias("-ab"), is_alias("--ab"), is_option("--ab"), is_option("--")
    (True, False, True, False)
    >>> display_name("--foo")
    "Option '--foo' "
"""
import functools
import math
import re
from collections.abc import Mapping
from numbers import Real


def deproto(object=None, /):
    """
    return a flat, plain-dict copy of a mapping (or an empty dict).

    intent
    - the copy only carries the keys the mapping actually declares; lookups on it
      never run caller code (__missing__, default factories, custom get/getitem).
    """
    if object is None:
        return {}
    return dict(object.items())


def is_object(object, /):
    """
    return True when the object can be read as a specification mapping.
    """
    return isinstance(object, Mapping)


def ensure_number(number, /):
    """
    normalize a range limit: finite non-negative numbers pass, anything else is None.

    notes
    - bool is rejected even though it is an int subclass.
    - None is returned for infinity, meaning "unbounded".
    """
    if isinstance(number, bool) or not isinstance(number, Real):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def is_alias(arg, /):
    """
    alias-shaped tokens: a single dash followed by at least one non-dash character.
    """
    return isinstance(arg, str) and len(arg) >= 2 and arg[0] == "-" and arg[1] != "-"


def is_option(arg, /):
    """
    option-shaped tokens: alias-shaped, or two dashes followed by at least one character.
    """
    return is_alias(arg) or (isinstance(arg, str) and len(arg) >= 3 and arg.startswith("--"))


def is_assignable(arg, options, /):
    """
    whether "arg=value" splitting applies: the explicit 'assign' option wins,
    otherwise option-shaped tokens are assignable.
    """
    assign = options.get("assign")
    return bool(assign) if assign is not None else is_option(arg)


def get_type(raw, /):
    return "Option" if raw and is_option(raw) else "Command"


def display_name(raw, name=None, /):
    """
    build the "<Type> '<name>' " message prefix (empty string when nameless).

    the display name falls back to the raw token; the type is always derived
    from the raw token.
    """
    if name is None:
        name = raw
    return "" if name is None else f"{get_type(raw)} '{name}' "


@functools.cache
def pluralize(text, /):
    """
    best-effort English pluralizer for internal messages and labels.

    only the last lexical word is pluralized; preceding text and trailing
    whitespace are preserved, and basic casing (UPPER, Title) is kept.

    examples
    - pluralize("argument")        -> "arguments"
    - pluralize("alias")           -> "aliases"
    - pluralize("unknown option")  -> "unknown options"
    """
    if not isinstance(text, str):
        raise TypeError("pluralize() argument must be a string")

    match = re.search(r"(\S+)(\s*)$", text)
    if not match:
        # empty or all whitespace
        return text

    head = text[:match.start(1)]
    last = match.group(1)
    trail = match.group(2)
    lower = last.lower()

    irregulars = {
        "child": "children",
        "person": "people",
        "index": "indices",
        "matrix": "matrices",
    }
    if lower in irregulars:
        plural = irregulars[lower]
    elif lower.endswith(("s", "sh", "ch", "x", "z")):
        plural = lower + "es"
    elif lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        plural = lower[:-1] + "ies"
    else:
        plural = lower + "s"

    if last.isupper():
        plural = plural.upper()
    elif last[:1].isupper():
        plural = plural[:1].upper() + plural[1:]

    return head + plural + trail


__all__ = (
    "deproto",
    "is_object",
    "ensure_number",
    "is_alias",
    "is_option",
    "is_assignable",
    "get_type",
    "display_name",
    "pluralize",
)
