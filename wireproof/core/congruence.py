"""
Congruence closure over expression nodes (a minimal e-graph).

Every node added gets an e-class id. Two nodes share a class when they
were explicitly unioned, or when they have the same operator and their
children are pairwise in the same class (congruence). Union only records
the merge; `rebuild` restores the congruence invariant and runs lazily on
the next query.

    add(op, children) -> class id     hash-consed: identical keys share a class
    union(a, b)                       explicit merge, marks the index dirty
    equiv(a, b)                       rebuilds if dirty, then compares classes
"""

from typing import Hashable, Iterable

from .union_find import UnionFind


class CongruenceIndex:

    def __init__(self):
        self._uf = UnionFind()
        # (operator, canonical child ids) -> class id
        self._hashcons: dict = {}
        # union-find root -> [(key, class id)] of e-nodes using that class as a child
        self._parents: dict = {}
        self._pending: list = []
        self._next_id = 0

    @property
    def clean(self) -> bool:
        return not self._pending

    def __len__(self):
        return self._next_id

    def find(self, cid: int) -> int:
        """Canonical id of a class: its smallest member, stable under merge order."""
        return self._uf.smallest(cid)

    def _canonicalize(self, op: Hashable, children: Iterable[int]) -> tuple:
        return (op, tuple(self.find(c) for c in children))

    def add(self, op: Hashable, children: Iterable[int]) -> int:
        key = self._canonicalize(op, children)
        existing = self._hashcons.get(key)
        if existing is not None:
            return self.find(existing)

        cid = self._next_id
        self._next_id += 1
        self._uf.find(cid)
        self._hashcons[key] = cid
        for child in set(key[1]):
            self._parents.setdefault(self._uf.canonical(child), []).append((key, cid))
        return cid

    def union(self, a: int, b: int) -> bool:
        """Merge two classes. Returns False if they were already one."""
        ra, rb = self._uf.canonical(a), self._uf.canonical(b)
        if ra == rb:
            return False
        self._uf.merge(ra, rb)
        root = self._uf.canonical(ra)
        absorbed = rb if root == ra else ra
        self._parents.setdefault(root, []).extend(self._parents.pop(absorbed, []))
        self._pending.append(root)
        return True

    def rebuild(self) -> None:
        while self._pending:
            todo = {self._uf.canonical(c) for c in self._pending}
            self._pending = []
            for root in todo:
                self._repair(root)

    def _repair(self, root) -> None:
        # Re-hash every parent of this class; congruent parents are merged.
        parents = self._parents.pop(self._uf.canonical(root), [])
        for key, _ in parents:
            self._hashcons.pop(key, None)

        repaired: dict = {}
        for key, pcid in parents:
            canon = self._canonicalize(*key)
            other = repaired.get(canon)
            if other is None:
                other = self._hashcons.get(canon)
            if other is not None:
                self.union(other, pcid)
            repaired[canon] = self._uf.canonical(pcid)
            self._hashcons[canon] = repaired[canon]

        self._parents.setdefault(self._uf.canonical(root), []).extend(repaired.items())

    def equiv(self, a: int, b: int) -> bool:
        if not self.clean:
            self.rebuild()
        return self.find(a) == self.find(b)

    def copy(self) -> "CongruenceIndex":
        other = CongruenceIndex()
        other._uf = self._uf.copy()
        other._hashcons = dict(self._hashcons)
        other._parents = {k: list(v) for k, v in self._parents.items()}
        other._pending = list(self._pending)
        other._next_id = self._next_id
        return other

    def __copy__(self):
        return self.copy()

    def __repr__(self):
        state = "clean" if self.clean else "dirty"
        return f"CongruenceIndex({self._next_id} e-nodes, {state})"
