"""
Longest-match-first string splitting.

The alias resolver uses this to break a combined short-flag cluster such as
"-abc" into the alias letters it is made of. Matches are tried in priority
order: the highest-priority match is extracted everywhere in the string first,
and only the spans left between its occurrences are offered to the next match.

    >>> split("aba", ["a", "ab"])
    Split(values=['ab', 'a'], remainder=[])
    >>> split("acdabazacd", ["a", "z"])
    Split(values=['a', 'a', 'a', 'z', 'a'], remainder=['cd', 'b', 'cd'])
"""
from collections import namedtuple

Split = namedtuple("Split", ("values", "remainder"))
Split.__doc__ = """
result of split()

- values: the matched substrings, left to right.
- remainder: the unmatched spans, left to right.
"""


def _parts(value, match):
    # str.split() rejects an empty separator; an empty match sits between characters
    return value.split(match) if match else list(value)


def _split(value, matches, index=0):
    """
    internal: split with matches already sorted by priority (longest first).
    """
    values = []
    remainder = []
    if index < len(matches):
        match = matches[index]
        parts = _parts(value, match)
        for position, part in enumerate(parts):
            if part:
                result = _split(part, matches, index + 1)
                values.extend(result.values)
                remainder.extend(result.remainder)
            # the match itself sits between consecutive parts
            if position < len(parts) - 1:
                values.append(match)
    elif value:
        remainder.append(value)
    return Split(values, remainder)


def split(value, matches, /):
    """
    split a combined value string by the provided matches.

    parameters
    - value: str
      the combined string (e.g., "abbaa" for the cluster "-abbaa").
    - matches: Iterable[str]
      literal substrings to extract. longer matches take priority; matches of
      equal length keep their given order. the iterable is not modified.

    returns
    - Split(values, remainder)
    """
    if not isinstance(value, str):
        raise TypeError("split() first argument must be a string")
    return _split(value, sorted(matches, key=len, reverse=True))


__all__ = (
    "Split",
    "split",
)
