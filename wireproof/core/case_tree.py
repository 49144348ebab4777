"""
CaseTree: the branching history of a proof.

Each slot of the arena holds a Case, a completion flag, its parent and
its children:

    children is None     leaf: still has to be solved (or is solved, if complete)
    children == [...]    branch: complete iff every child is complete
    children == []       vacuous branch: nothing left to prove

Splitting the current leaf turns it into a branch with one child per
subcase. Reverting to a slot throws away everything below it and puts the
freed slots on a free list, which later splits reuse before growing the
arena.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .case import Case, Node


@dataclass(frozen=True)
class CaseId:
    """Opaque handle to one slot of a CaseTree."""
    index: int

    def __repr__(self):
        return f"CaseId({self.index})"


ROOT = CaseId(0)


@dataclass
class CaseNode:
    case: Case
    complete: bool
    parent: int
    children: Optional[list] = None

    @classmethod
    def new(cls, case: Case, parent: int) -> "CaseNode":
        return cls(case=case, complete=case.solved(), parent=parent)


class CaseTree:

    def __init__(self, case: Case):
        self._nodes: list = [CaseNode.new(case, 0)]
        self._free: list = []
        self.current: CaseId = ROOT
        self.step = 0
        self.history: list = []

    # ── Access ───────────────────────────────────────────────────────────

    def _node(self, index: int) -> CaseNode:
        node = self._nodes[index]
        if node is None:
            raise LookupError(f"CaseId({index}) was discarded by a revert.")
        return node

    def case(self, id: CaseId) -> tuple:
        """(case, complete) for one slot."""
        node = self._node(id.index)
        return node.case, node.complete

    def current_case(self) -> tuple:
        return self.case(self.current)

    def parent(self, id: CaseId) -> Optional[CaseId]:
        if id.index == 0:
            return None
        return CaseId(self._node(id.index).parent)

    def children(self, id: CaseId) -> Optional[list]:
        children = self._node(id.index).children
        if children is None:
            return None
        return [CaseId(c) for c in children]

    def case_ids(self) -> Iterator[CaseId]:
        """Every live slot, depth first from the root."""
        work = [0]
        while work:
            index = work.pop()
            yield CaseId(index)
            work.extend(reversed(self._nodes[index].children or []))

    def open_cases(self) -> list:
        """Leaves that still need solving, depth first."""
        return [
            id for id in self.case_ids()
            if self._nodes[id.index].children is None
            and not self._nodes[id.index].complete
        ]

    def goto_case(self, id: CaseId) -> None:
        self._node(id.index)
        self.current = id

    def all_complete(self) -> bool:
        return self._nodes[0].complete

    def arena_size(self) -> int:
        return len(self._nodes)

    # ── Completion ───────────────────────────────────────────────────────

    def mark_complete(self, index: int) -> None:
        """Mark a slot complete, then each ancestor whose children are now all complete."""
        while True:
            self._nodes[index].complete = True
            if index == 0:
                break
            index = self._nodes[index].parent
            siblings = self._nodes[index].children
            if not all(self._nodes[c].complete for c in siblings):
                break

    def _mark_incomplete(self, index: int) -> None:
        while index != 0:
            index = self._nodes[index].parent
            if not self._nodes[index].complete:
                break
            self._nodes[index].complete = False

    # ── Editing ──────────────────────────────────────────────────────────

    def _create_case(self, case: Case, parent: int) -> int:
        if self._free:
            index = self._free.pop()
            self._nodes[index] = CaseNode.new(case, parent)
        else:
            index = len(self._nodes)
            self._nodes.append(CaseNode.new(case, parent))
        return index

    def case_split(self, subcases: Iterable[Case], label: str = "split", edits=None) -> list:
        """
        Replace the current leaf by one child per subcase.

        Moves to the first incomplete child; if there is none (including
        the zero-subcase split), the current slot is complete and that
        propagates upward. Returns the new children's ids.
        """
        parent = self.current.index
        if self._node(parent).children is not None:
            raise RuntimeError(f"CaseId({parent}) has already been split.")
        children = [self._create_case(case, parent) for case in subcases]
        self._nodes[parent].children = children

        self.step += 1
        self.history.append({
            "step": self.step,
            "case": parent,
            "label": label,
            "edits": [[e.describe() for e in branch] for branch in edits] if edits else [],
            "children": list(children),
        })

        incomplete = next((c for c in children if not self._nodes[c].complete), None)
        if incomplete is not None:
            self.current = CaseId(incomplete)
        else:
            self.mark_complete(parent)
        return [CaseId(c) for c in children]

    def apply_edits(self, branches: list, label: str = "edit") -> list:
        """
        Split the current case into one child per branch.

        Each branch is a list of edits applied, in order, to a fresh clone
        of the current case.
        """
        base = self._node(self.current.index).case
        subcases = []
        for branch in branches:
            case = base.clone()
            for edit in branch:
                edit.apply(case)
            subcases.append(case)
        return self.case_split(subcases, label=label, edits=branches)

    @contextmanager
    def current_case_mut(self):
        """
        Edit the current case in place, without recording a step.

        On exit, a case whose goal became proven is marked complete.
        """
        index = self.current.index
        case = self._node(index).case
        try:
            yield case
        finally:
            if case.solved() and not self._nodes[index].complete:
                self.mark_complete(index)

    def set_node_position(self, node: Node, position) -> None:
        self._node(self.current.index).case.set_position(node, position)

    def revert_to(self, id: CaseId) -> None:
        """
        Discard everything below `id` and make it current.

        The slot's own case is untouched: the player is back exactly where
        they were right after it was created.
        """
        target = self._node(id.index)
        work = target.children or []
        target.children = None
        freed = 0
        while work:
            index = work.pop()
            children = self._nodes[index].children
            if children:
                work.extend(children)
            self._nodes[index] = None
            self._free.append(index)
            freed += 1

        was_complete = target.complete
        target.complete = target.case.solved()
        if was_complete and not target.complete:
            self._mark_incomplete(id.index)

        self.current = id
        self.step += 1
        self.history.append({
            "step": self.step,
            "case": id.index,
            "label": "revert",
            "edits": [],
            "children": [],
            "freed": freed,
        })

    def __repr__(self):
        live = len(self._nodes) - len(self._free)
        return f"CaseTree({live} cases, current={self.current.index}, complete={self.all_complete()})"
