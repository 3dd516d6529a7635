"""
argstree command line: parse tokens against a JSON specification and print the tree.

    python -m argstree [--spec FILE] [--ancestors|-a] [--descendants|-d]
                       [--no-args] [--plain|-p] [-- TOKENS...]

The JSON file holds one specification mapping (the same keys argstree() reads,
minus the callables). Faults are printed to stderr and exit with status 1.
"""
import json
import sys

from rich.console import Console

from .faults import ArgsTreeError, trigger
from .parser import argstree
from .spec import spec
from .stringify import stringify, tree

__prog__ = "argstree"

USAGE = (
    f"usage: {__prog__} [--spec FILE] [--ancestors|-a] [--descendants|-d] "
    f"[--no-args] [--plain|-p] [-- TOKENS...]"
)


def _cli():
    flag = {"max": 0}
    return (
        spec({"max": 0, "strict": True})
        .option("--spec", {"min": 1, "max": 1}).alias("-s")
        .option("--ancestors", flag).alias("-a")
        .option("--descendants", flag).alias("-d")
        .option("--no-args", flag)
        .option("--plain", flag).alias("-p")
        .option("--help", flag).alias("-h")
        .command("--", {"strict": False})
    )


def _load(path):
    if path is None:
        return {}
    with open(path, encoding="utf-8") as stream:
        return json.load(stream)


def main(argv=None, /):
    """
    run the command line; returns the process exit status.
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        root = _cli().parse(argv)
    except ArgsTreeError as error:
        trigger(error, shell=True, deferred=True)
        return 1

    flags = {child.id: child.args for child in root.children}
    if "--help" in flags:
        Console().print(USAGE, markup=False, highlight=False)
        return 0

    path = flags["--spec"][0] if "--spec" in flags else None
    try:
        options = _load(path)
    except (OSError, ValueError) as error:
        Console(stderr=True).print(f"{__prog__}: cannot read {path}: {error}", markup=False, highlight=False)
        return 1

    try:
        node = argstree(flags.get("--", ()), options)
    except ArgsTreeError as error:
        trigger(error, shell=True, deferred=True)
        return 1

    render = {
        "args": "--no-args" not in flags,
        "ancestors": "--ancestors" in flags,
        "descendants": "--descendants" in flags,
    }
    if "--plain" in flags:
        print(stringify(node, **render))
    else:
        Console().print(tree(node, **render))
    return 0


if __name__ == "__main__":
    sys.exit(main())
