"""
Tree rendering of parsed nodes.

- stringify(): plain text with box-drawing connectors.
- tree(): a rich.tree.Tree with the same content, for console output.

    >>> print(stringify(argstree(["foo", "bar"], {"args": {"foo": {}}})))
    None (depth: 0)
    └─┬ foo (depth: 1)
      └─┬ :args (total: 1)
        └── bar

Each node line reads "<id> (depth: N[, raw: R][, alias: A][, name: M])"; raw and
name are left out when they repeat the displayed id. Below a node come, in order,
its ":args" section, its children, and the optional ":ancestors" and
":descendants" sections (listed nodes there are drawn without their own sections).
"""
from collections import defaultdict

from rich.text import Text
from rich.tree import Tree

INDICATOR = ":"


def _self(prefix, /, *, first=False, last=False, next=False):
    if first:
        return ""
    return prefix + ("└─" if last else "├─") + ("┬" if next else "─") + " "


def _child(prefix, /, *, first=False, last=False):
    if first:
        return ""
    return prefix + ("  " if last else "│ ")


def _label(node):
    id = node.id if node.id is not None else node.raw
    labels = [f"depth: {node.depth}"]
    if node.raw is not None and node.raw != id:
        labels.append(f"raw: {node.raw}")
    if node.alias is not None:
        labels.append(f"alias: {node.alias}")
    if node.name is not None and node.name != id:
        labels.append(f"name: {node.name}")
    return f"{id}", f"({', '.join(labels)})"


def _sections(node, args, ancestors, descendants):
    # (title, values, nodes) for every non-empty section enabled for this node
    sections = []
    if args and node.args:
        sections.append(("args", node.args, None))
    sections.extend((None, None, child) for child in node.children)
    if ancestors and node.ancestors:
        sections.append(("ancestors", None, node.ancestors))
    if descendants and node.descendants:
        sections.append(("descendants", None, node.descendants))
    return sections


def stringify(node, /, args=True, ancestors=False, descendants=False):
    """
    render a parsed node and everything below it as a text tree.

    parameters
    - node: Node
      a node returned by argstree() (any node of the tree, not only the root).
    - args: bool
      include ":args" sections (default True).
    - ancestors: bool
      include ":ancestors" sections (default False).
    - descendants: bool
      include ":descendants" sections (default False).

    returns
    - str: the lines joined with "\\n" (no trailing newline).
    """
    lines = []

    def draw(node, prefix="", *, first=False, last=False, sections=True):
        entries = _sections(node, args, ancestors, descendants) if sections else []
        id, labels = _label(node)
        lines.append(_self(prefix, first=first, last=last, next=bool(entries)) + f"{id} {labels}")

        prefix = _child(prefix, first=first, last=last)
        for index, (title, values, nodes) in enumerate(entries):
            last = index == len(entries) - 1
            if title is None:
                draw(nodes, prefix, last=last)
                continue

            items = values if values is not None else nodes
            lines.append(_self(prefix, last=last, next=True) + f"{INDICATOR}{title} (total: {len(items)})")
            inner = _child(prefix, last=last)
            for position, item in enumerate(items):
                end = position == len(items) - 1
                if values is not None:
                    lines.append(_self(inner, last=end) + f"{item}")
                else:
                    draw(item, inner, last=end, sections=False)

    draw(node, first=True)
    return "\n".join(lines)


def tree(node, /, args=True, ancestors=False, descendants=False):
    """
    build a rich.tree.Tree for a parsed node; same content as stringify().

    styles can be overridden through a `__styles__` mapping on __main__
    (keys: "node-id", "node-label", "section", "value").
    """
    main = __import__("__main__")
    styles = defaultdict(str, {
        "node-id": "bold #00E5FF",
        "node-label": "dim",
        "section": "italic #FF4DA6",
        "value": "#C8C8D0",
    } | getattr(main, "__styles__", {}))

    def label(node):
        id, labels = _label(node)
        return Text.assemble((id, styles["node-id"]), " ", (labels, styles["node-label"]))

    def grow(branch, node):
        for title, values, nodes in _sections(node, args, ancestors, descendants):
            if title is None:
                grow(branch.add(label(nodes)), nodes)
                continue
            items = values if values is not None else nodes
            section = branch.add(Text(f"{INDICATOR}{title} (total: {len(items)})", styles["section"]))
            for item in items:
                if values is not None:
                    section.add(Text(f"{item}", styles["value"]))
                else:
                    section.add(label(item))

    root = Tree(label(node))
    grow(root, node)
    return root


__all__ = (
    "stringify",
    "tree",
)
