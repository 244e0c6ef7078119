"""Binary trees built from preorder text, with traversals and structural queries."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence

from dskit.fifo import LinkedQueue

NULL_MARK = "#"
"""Character that marks an absent child in preorder text."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_preorder(text: str) -> Optional[TreeNode]:
    """Build a tree from preorder text where ``#`` marks an absent child.

    ``"ABD##E#H##CF##G##"`` describes a tree rooted at ``A``. Characters left
    over after the tree is complete are ignored. Raises ValueError if the
    text ends before the tree is complete.
    """
    chars = iter(text)

    def build() -> Optional[TreeNode]:
        try:
            c = next(chars)
        except StopIteration:
            raise ValueError(
                "preorder text ends before the tree is complete"
            ) from None
        if c == NULL_MARK:
            return None
        node = TreeNode(c)
        node.left = build()
        node.right = build()
        return node

    return build()


def tree_size(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + tree_size(root.left) + tree_size(root.right)


def leaf_count(root: Optional[TreeNode]) -> int:
    """Number of nodes with no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def tree_height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(tree_height(root.left), tree_height(root.right))


def level_count(root: Optional[TreeNode], k: int) -> int:
    """Number of nodes on level ``k``, counting the root as level 1."""
    if k <= 0:
        raise ValueError("level must be positive")
    if root is None:
        return 0
    if k == 1:
        return 1
    return level_count(root.left, k - 1) + level_count(root.right, k - 1)


def _traverse(
    root: Optional[TreeNode], order: str, with_null: bool
) -> Iterator[Any]:
    """Yield values in ``order`` ("pre", "in" or "post"); None for absent children if asked."""
    if root is None:
        if with_null:
            yield None
        return
    if order == "pre":
        yield root.val
    yield from _traverse(root.left, order, with_null)
    if order == "in":
        yield root.val
    yield from _traverse(root.right, order, with_null)
    if order == "post":
        yield root.val


def preorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Values in root-left-right order."""
    return list(_traverse(root, "pre", False))


def inorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Values in left-root-right order."""
    return list(_traverse(root, "in", False))


def postorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Values in left-right-root order."""
    return list(_traverse(root, "post", False))


def _format(root: Optional[TreeNode], order: str) -> str:
    return "".join(
        "N " if v is None else f"{v} " for v in _traverse(root, order, True)
    )


def format_preorder(root: Optional[TreeNode]) -> str:
    """Preorder listing, each value followed by a space, ``N`` for absent children."""
    return _format(root, "pre")


def format_inorder(root: Optional[TreeNode]) -> str:
    """Inorder listing, each value followed by a space, ``N`` for absent children."""
    return _format(root, "in")


def format_postorder(root: Optional[TreeNode]) -> str:
    """Postorder listing, each value followed by a space, ``N`` for absent children."""
    return _format(root, "post")


def tree_find(root: Optional[TreeNode], x: Any) -> Optional[TreeNode]:
    """First node in preorder whose value equals ``x``, or None."""
    if root is None:
        return None
    if root.val == x:
        return root
    return tree_find(root.left, x) or tree_find(root.right, x)


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Values level by level, left to right."""
    queue = LinkedQueue()
    if root is not None:
        queue.push(root)
    values = []
    while not queue.empty():
        node = queue.pop()
        values.append(node.val)
        if node.left is not None:
            queue.push(node.left)
        if node.right is not None:
            queue.push(node.right)
    return values


def is_complete(root: Optional[TreeNode]) -> bool:
    """Whether every level is full except possibly the last, filled from the left."""
    queue = LinkedQueue()
    if root is not None:
        queue.push(root)
    while not queue.empty():
        node = queue.pop()
        if node is None:
            break
        queue.push(node.left)
        queue.push(node.right)
    return all(node is None for node in queue)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Whether both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def is_unival_tree(root: Optional[TreeNode]) -> bool:
    """Whether every node holds the same value."""
    if root is None:
        return True
    if root.left is not None and root.left.val != root.val:
        return False
    if root.right is not None and root.right.val != root.val:
        return False
    return is_unival_tree(root.left) and is_unival_tree(root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Whether some node of ``root`` heads a tree equal to ``sub_root``."""
    if root is None:
        return False
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    return (
        abs(tree_height(root.left) - tree_height(root.right)) < 2
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def _mirrors(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    return p.val == q.val and _mirrors(p.left, q.right) and _mirrors(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read preorder text (argument or a line of stdin) and print its inorder values."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = args[0] if args else sys.stdin.readline().rstrip("\r\n")
    try:
        root = build_preorder(text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{v} " for v in inorder_traversal(root)))
    sys.stdout.flush()
    return 0