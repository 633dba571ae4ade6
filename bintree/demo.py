"""Worked examples that build small trees and report on them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Optional, TextIO, Union

from bintree.node import Node
from bintree.render import print_tree

Spec = Union[int, tuple, None]
Demo = Callable[[TextIO], None]

_SMALL = (98, 12, 402)
_BASE = (98, (12, None, 54), (128, None, 402))
_FAMILY = (98, (12, 10, 54), (128, 110, (402, 200, 512)))


def _seven(left_right: int) -> tuple:
    return (98, (12, 6, left_right), (402, 256, 512))


def _build(spec: Spec, parent: Optional[Node] = None) -> Optional[Node]:
    """Build a tree from nested ``(value, left, right)`` tuples or bare ints."""
    if spec is None:
        return None
    value, left, right = spec if isinstance(spec, tuple) else (spec, None, None)
    node = Node(value, parent)
    node.left = _build(left, node)
    node.right = _build(right, node)
    return node


def _child(node: Node, side: str) -> Optional[Node]:
    return node.left if side == "left" else node.right


def _attach(node: Node, side: str, child: Node) -> None:
    if side == "left":
        node.left = child
    else:
        node.right = child


def _insert(node: Node, side: str, value: int) -> Node:
    return node.insert_left(value) if side == "left" else node.insert_right(value)


def _at(root: Node, path: str) -> Node:
    node = root
    if path:
        for side in path.split("."):
            node = _child(node, side)
    return node


def _nil(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


def _show(spec: Spec) -> Demo:
    def demo(out: TextIO) -> None:
        print_tree(_build(spec), out)

    return demo


def _grow(side: str, inner_value: int, outer_value: int) -> Demo:
    """Print the small tree, insert on ``side`` twice, print it again."""
    other = "right" if side == "left" else "left"

    def demo(out: TextIO) -> None:
        root = _build(_SMALL)
        print_tree(root, out)
        out.write("\n")
        _insert(_child(root, other), side, inner_value)
        _insert(root, side, outer_value)
        print_tree(root, out)

    return demo


def _demo_delete(out: TextIO) -> None:
    root = _build((98, (12, None, 402), (128, None, 402)))
    print_tree(root, out)
    root.delete()


def _query(spec: Spec, paths: Sequence[str], describe: Callable[[Node], str]) -> Demo:
    def demo(out: TextIO) -> None:
        root = _build(spec)
        print_tree(root, out)
        for path in paths:
            out.write(describe(_at(root, path)) + "\n")

    return demo


def _flag(label: str, test: Callable[[Node], bool]) -> Callable[[Node], str]:
    return lambda node: f"Is {node.value} {label}: {int(test(node))}"


def _measure(label: str, measure: Callable[[Node], object]) -> Callable[[Node], str]:
    return lambda node: f"{label} {node.value}: {measure(node)}"


def _traversal(order: Callable[[Node], object]) -> Demo:
    def demo(out: TextIO) -> None:
        root = _build(_seven(56))
        print_tree(root, out)
        for value in order(root):
            out.write(f"{value}\n")

    return demo


def _demo_perfect(out: TextIO) -> None:
    root = _build((98, (12, 10, 54), (128, 10, 402)))
    target = root.right.right
    for index, side in enumerate((None, "left", "right")):
        if side is not None:
            _attach(target, side, Node(10, target))
        if index:
            out.write("\n")
        print_tree(root, out)
        out.write(f"Perfect: {int(root.is_perfect())}\n")


_REPORT_PATHS = ("", "right", "left.right")
_FLAG_PATHS = ("", "right", "right.right")

_DEMOS: dict[int, Demo] = {
    0: _show(_seven(16)),
    1: _grow("left", 128, 54),
    2: _grow("right", 54, 128),
    3: _demo_delete,
    4: _query(_BASE, _FLAG_PATHS, _flag("a leaf", Node.is_leaf)),
    5: _query(_BASE, _FLAG_PATHS, _flag("a root", Node.is_root)),
    6: _traversal(Node.preorder),
    7: _traversal(Node.inorder),
    8: _traversal(Node.postorder),
    9: _query(_BASE, _REPORT_PATHS, _measure("Height from", Node.height)),
    10: _query(_BASE, _REPORT_PATHS, _measure("Depth of", Node.depth)),
    11: _query(_BASE, _REPORT_PATHS, _measure("Size of", Node.size)),
    12: _query(_BASE, _REPORT_PATHS, _measure("Leaves in", Node.leaves)),
    13: _query(_BASE, _REPORT_PATHS, _measure("Nodes in", Node.nodes)),
    14: _query(
        (98, (45, (12, (10, 8, None), 54), 50), (128, None, 402)),
        ("", "right", "left.left.right"),
        lambda node: f"Balance of {node.value}: {node.balance():+d}",
    ),
    15: _query(
        (98, (12, 10, 54), (128, None, 402)),
        ("", "left", "right"),
        _flag("full", Node.is_full),
    ),
    16: _demo_perfect,
    17: _query(
        _FAMILY,
        ("left", "right.left", "left.right", ""),
        lambda node: f"Sibling of {node.value}: {_nil(node.sibling())}",
    ),
    18: _query(
        _FAMILY,
        ("right.left", "left.right", "left"),
        lambda node: f"Uncle of {node.value}: {_nil(node.uncle())}",
    ),
}


def run_demo(number: int, out: Optional[TextIO] = None) -> None:
    """Run example ``number`` (0 to 18), writing its report to ``out``."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number!r}") from None
    demo(sys.stdout if out is None else out)


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point: run one numbered example."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Build a small binary tree and report on it."
    )
    parser.add_argument("number", type=int, choices=sorted(_DEMOS), help="example to run")
    args = parser.parse_args(argv)
    run_demo(args.number, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())