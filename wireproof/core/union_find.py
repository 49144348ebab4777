"""
Union-find over hashable identifiers.

Two identifiers are in the same class iff they have been merged, directly
or through a chain of merges. Unseen identifiers are silently created as
their own singleton class, so nothing needs to be registered up front.

Besides the usual parent tree, every class carries:
    - a cyclic permutation of its members ("cycle"), spliced together on
      each merge, so that iter_class(x) can list the whole class;
    - the smallest member ever merged into it, for callers that want a
      deterministic representative independent of merge order.
"""

from typing import Hashable, Iterator


class UnionFind:
    """Path compression + union by rank."""

    def __init__(self):
        # node -> ("root", rank, smallest) | ("child", parent)
        self._tree: dict = {}
        # node -> next node in its class's cycle; absent means "itself"
        self._cycles: dict = {}

    def _find(self, node: Hashable) -> tuple:
        entry = self._tree.get(node)
        if entry is None:
            self._tree[node] = ("root", 0, node)
            return node, 0, node
        if entry[0] == "root":
            return node, entry[1], entry[2]
        root, rank, smallest = self._find(entry[1])
        self._tree[node] = ("child", root)
        return root, rank, smallest

    def find(self, node: Hashable) -> tuple:
        """Return (root, rank) for node."""
        root, rank, _ = self._find(node)
        return root, rank

    def canonical(self, node: Hashable) -> Hashable:
        return self._find(node)[0]

    def smallest(self, node: Hashable) -> Hashable:
        """The smallest identifier ever merged into node's class."""
        return self._find(node)[2]

    def eq(self, a: Hashable, b: Hashable) -> bool:
        return self.canonical(a) == self.canonical(b)

    def merge(self, a: Hashable, b: Hashable) -> None:
        r1, rank1, smallest1 = self._find(a)
        r2, rank2, smallest2 = self._find(b)
        if r1 == r2:
            return

        # Splice the two cycles: r1 -> (old successor of r2), r2 -> (old successor of r1).
        s1 = self._cycles.get(r1, r1)
        s2 = self._cycles.get(r2, r2)
        self._cycles[r2] = s1
        self._cycles[r1] = s2

        smallest = min(smallest1, smallest2)
        if rank1 < rank2:
            self._tree[r1] = ("child", r2)
            self._tree[r2] = ("root", rank2, smallest)
        else:
            self._tree[r2] = ("child", r1)
            self._tree[r1] = ("root", rank1 + 1 if rank1 == rank2 else rank1, smallest)

    def iter_class(self, node: Hashable) -> Iterator:
        """
        Every member of node's class exactly once, starting with node.

        Lazy; stops when the cycle returns to node.
        """
        yield node
        current = self._cycles.get(node, node)
        while current != node:
            yield current
            current = self._cycles.get(current, current)

    def class_size(self, node: Hashable) -> int:
        return sum(1 for _ in self.iter_class(node))

    def copy(self) -> "UnionFind":
        other = UnionFind()
        other._tree = dict(self._tree)
        other._cycles = dict(self._cycles)
        return other

    def __copy__(self):
        return self.copy()

    def __contains__(self, node) -> bool:
        return node in self._tree

    def __repr__(self):
        return f"UnionFind({len(self._tree)} nodes)"
