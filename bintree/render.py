"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one newline-terminated line per level.

    Each node is shown as its value in parentheses, zero-padded to three
    digits. Dots and dashes link each node to its parent. An empty tree
    renders as the empty string.
    """
    if tree is None:
        return ""

    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]

    def put(depth: int, col: int, text: str) -> None:
        if col < 0:
            text = text[-col:]
            col = 0
        row = rows[depth]
        end = col + len(text)
        if len(row) < end:
            row.extend(" " * (end - len(row)))
        row[col:end] = text

    def layout(node: Optional[Node], offset: int, depth: int) -> int:
        if node is None:
            return 0
        is_left = node.parent is not None and node.parent.left is node
        label = f"({node.value:03d})"
        width = len(label)
        left = layout(node.left, offset, depth + 1)
        right = layout(node.right, offset + left + width, depth + 1)
        put(depth, offset + left, label)
        if depth:
            if is_left:
                put(depth - 1, offset + left + width // 2, "." + "-" * (width + right - 1))
            else:
                put(depth - 1, offset - width // 2, "-" * (left + width))
                put(depth - 1, offset + left + width // 2, ".")
        return left + width + right

    layout(tree, 0, 0)

    lines = []
    for row in rows:
        line = "".join(row).ljust(2)
        lines.append(line[:2] + line[2:].rstrip(" "))
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendering of ``tree`` to ``file`` (standard output by default)."""
    (sys.stdout if file is None else file).write(render(tree))