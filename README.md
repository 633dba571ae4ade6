# bintree

A small library of linked binary tree nodes. Each node holds an integer
value and knows its parent and its left and right children. The library
has insertion, traversal, measurement and relative lookup, plus a
renderer that draws a tree as ASCII art.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to run the test suite with
pytest.

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
root.left.insert_right(54)
root.insert_right(128)
```

Passing `parent` to `Node` only records the parent; it does not attach
the new node as a child. Assign `left` or `right` yourself, or use the
insertion methods.

`insert_left` and `insert_right` put a new node between a node and the
child it already has on that side, and return the new node. The old
child then becomes the new node's child on the same side.

## Asking questions about a tree

| Method          | Result                                                  |
|-----------------|---------------------------------------------------------|
| `preorder()`    | generator of the subtree's values in pre-order          |
| `inorder()`     | generator of the subtree's values in in-order           |
| `postorder()`   | generator of the subtree's values in post-order         |
| `height()`      | edges on the longest path down to a leaf (a leaf is 0)  |
| `depth()`       | edges up to the root                                    |
| `size()`        | number of nodes in the subtree                          |
| `leaves()`      | number of leaves in the subtree                         |
| `nodes()`       | number of nodes in the subtree with at least one child  |
| `balance()`     | left subtree height minus right subtree height          |
| `is_leaf()`     | true when the node has no children                      |
| `is_root()`     | true when the node has no parent                        |
| `is_full()`     | true when every node has zero or two children           |
| `is_perfect()`  | true when the tree is full and all leaves share a level |
| `sibling()`     | the other child of this node's parent, or `None`        |
| `uncle()`       | the sibling of this node's parent, or `None`            |
| `delete()`      | detaches the subtree from its parent and clears all of its links |

```python
list(root.inorder())   # [12, 54, 98, 402, 128]
root.height()          # 2
root.balance()         # 0
```

## Drawing a tree

```python
from bintree.render import render, print_tree

text = render(root)     # the drawing as a string
print_tree(root)        # written to standard output
print_tree(root, file)  # written to any text stream
```

Each node is shown as its value in parentheses, zero-padded to three
digits, with dots and dashes linking it to its parent. Every level is one
newline-terminated line; an empty tree (`None`) renders as the empty
string. The output looks like this:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demonstrations

There are nineteen numbered demonstrations, 0 to 18. Each one builds a
sample tree, prints it and shows one operation on it:

```
bintree-demo 14
```

In code, `run_demo(number, out)` from `bintree.demo` writes the same
demonstration to any text stream (standard output when `out` is omitted)
and raises `ValueError` for an unknown number.

## What it does not do

The nodes are plain linked binary trees. There is no ordered (search
tree) insertion, no rebalancing and no heap operations; where a node goes
is always chosen by the caller.