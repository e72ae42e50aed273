"""Cafeteria: check ingredient ids against fresh ranges kept in a fusing range tree.

The ranges live in a binary search tree whose nodes hold pairwise-disjoint
inclusive ranges. Inserting a range that overlaps a node fuses it into that
node; the grown node then swallows every range of its subtrees it now
overlaps, so lookups and the covered-id count never see overlapping ranges.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass
class _Node:
    lower: int
    upper: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _absorb_left(tree: Optional[_Node], lower: int) -> Tuple[Optional[_Node], int]:
    """Remove ranges reaching into [lower, ...) from a left subtree.

    Returns the trimmed subtree and the possibly extended lower bound.
    """
    root = tree
    parent: Optional[_Node] = None
    node = tree
    while node is not None:
        if node.upper < lower:
            parent = node
            node = node.right
            continue
        # Everything right of this node lies between it and the fused range.
        lower = min(lower, node.lower)
        node = node.left
        if parent is None:
            root = node
        else:
            parent.right = node
    return root, lower


def _absorb_right(tree: Optional[_Node], upper: int) -> Tuple[Optional[_Node], int]:
    root = tree
    parent: Optional[_Node] = None
    node = tree
    while node is not None:
        if node.lower > upper:
            parent = node
            node = node.left
            continue
        upper = max(upper, node.upper)
        node = node.right
        if parent is None:
            root = node
        else:
            parent.left = node
    return root, upper


class RangeTree:
    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, lower: int, upper: int) -> None:
        if lower > upper:
            raise ValueError(f"empty range {lower}-{upper}")
        if self._root is None:
            self._root = _Node(lower, upper)
            return
        node = self._root
        while True:
            if upper < node.lower:
                if node.left is None:
                    node.left = _Node(lower, upper)
                    return
                node = node.left
            elif node.upper < lower:
                if node.right is None:
                    node.right = _Node(lower, upper)
                    return
                node = node.right
            else:
                node.left, node.lower = _absorb_left(node.left, min(node.lower, lower))
                node.right, node.upper = _absorb_right(
                    node.right, max(node.upper, upper)
                )
                return

    def contains(self, value: int) -> bool:
        node = self._root
        while node is not None:
            if value < node.lower:
                node = node.left
            elif value > node.upper:
                node = node.right
            else:
                return True
        return False

    def ranges(self) -> List[Tuple[int, int]]:
        """In-order list of the disjoint ranges held by the tree."""
        out: List[Tuple[int, int]] = []
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            out.append((node.lower, node.upper))
            node = node.right
        return out

    def size(self) -> int:
        """Number of distinct ids covered by the ranges."""
        return sum(upper - lower + 1 for lower, upper in self.ranges())


@dataclass
class Inventory:
    fresh: RangeTree
    ids: List[int]


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"could not parse id {token!r}") from None


def parse(text: str) -> Inventory:
    sections = re.split(r"\n\s*\n", text.strip(), maxsplit=1)
    if len(sections) != 2:
        raise ValueError("does not contain a blank line between ranges and ids")
    ranges_text, ids_text = sections

    tree = RangeTree()
    for line in ranges_text.split():
        lower_str, sep, upper_str = line.partition("-")
        if not sep:
            raise ValueError(f"could not find - in range line {line!r}")
        tree.insert(_parse_int(lower_str), _parse_int(upper_str))

    ids = [_parse_int(token) for token in ids_text.split()]
    return Inventory(fresh=tree, ids=ids)


def part_1(inventory: Inventory) -> int:
    return sum(1 for i in inventory.ids if inventory.fresh.contains(i))


def part_2(inventory: Inventory) -> int:
    return inventory.fresh.size()


def solve(text: str) -> Tuple[int, int]:
    inventory = parse(text)
    return part_1(inventory), part_2(inventory)
