"""
Case: the complete state of one proof obligation.

A case is a graph of expression nodes. Each node has one output wire;
wires that have been connected are the same wire, tracked by a union-find
over nodes. Each node records whether its output is proven. One wire is
the goal: the case is solved once the goal is proven.

Node storage only ever grows. Deleting a node sets a tombstone flag, so a
Node held anywhere stays valid for the lifetime of the case.

Every call that can change what is proven, or which wires are connected,
takes a ValidityReason: the caller has to say why the step is sound.
"""

from dataclasses import dataclass, replace
from typing import Iterator, Optional

from .congruence import CongruenceIndex
from .expression import Expression, Type
from .union_find import UnionFind


class ValidityReason:
    """
    Why a soundness-relevant edit is justified.

    Reads like a record of the explanation at the call site, but nothing
    is stored: the argument documents the call, it is not data.
    """
    __slots__ = ()

    def __init__(self, why: str):
        pass

    def __repr__(self):
        return "ValidityReason(...)"


@dataclass(frozen=True, order=True)
class Node:
    """One constructed expression instance within a Case."""
    index: int

    def __repr__(self):
        return f"Node({self.index})"


@dataclass(frozen=True)
class Wire:
    """
    The output of a node.

    Wires emerging from different nodes that have been connected are the
    same wire; compare them with Case.wire_eq, not ==, which only compares
    the node the wire was taken from.
    """
    node: Node

    def __repr__(self):
        return f"Wire({self.node.index})"


@dataclass
class NodeData:
    expression: Expression
    # Display position. Units: a node is drawn as a circle of diameter 1.
    position: tuple
    proven: bool = False
    deleted: bool = False


class Case:

    def __init__(self):
        self._nodes: list = []
        # Two nodes are in the same class iff their output wires are connected.
        self._connections = UnionFind()
        # Which nodes describe the same expression, even if displayed separately.
        self._egg = CongruenceIndex()
        self._egg_ids: list = []
        self._goal: Optional[Wire] = None
        # True while _connections/_egg may be referenced by another Case.
        self._shared = False

    # ── Copy-on-write ────────────────────────────────────────────────────

    def clone(self) -> "Case":
        """O(nodes) copy; the union-find and congruence index are shared until written."""
        other = Case.__new__(Case)
        other._nodes = [replace(data) for data in self._nodes]
        other._connections = self._connections
        other._egg = self._egg
        other._egg_ids = list(self._egg_ids)
        other._goal = self._goal
        other._shared = True
        self._shared = True
        return other

    __copy__ = clone

    def _make_unique(self) -> None:
        if self._shared:
            self._connections = self._connections.copy()
            self._egg = self._egg.copy()
            self._shared = False

    # ── Goal ─────────────────────────────────────────────────────────────

    def set_goal(self, goal: Wire) -> None:
        self._goal = goal

    def goal(self) -> Wire:
        if self._goal is None:
            raise RuntimeError("Attempt to retrieve goal before setting it.")
        return self._goal

    def has_goal(self) -> bool:
        return self._goal is not None

    def solved(self) -> bool:
        return self.proven(self.goal())

    # ── Nodes ────────────────────────────────────────────────────────────

    def _data(self, n: Node) -> NodeData:
        if n.index < 0:
            raise IndexError(f"{n!r} is not a node of this case")
        return self._nodes[n.index]

    def make_node(self, expression: Expression, position) -> Node:
        """
        Append a node. Its inputs must be wires of this case.

        Arity and types are not checked here: levels are validated when
        they are loaded.
        """
        self._make_unique()
        n = Node(len(self._nodes))
        self._nodes.append(NodeData(expression, tuple(position)))
        children = (self._egg_ids[w.node.index] for w in expression.inputs)
        self._egg_ids.append(self._egg.add(expression.operator(), children))
        return n

    def node_output(self, n: Node) -> Wire:
        return Wire(n)

    def node_expression(self, n: Node) -> Expression:
        return self._data(n).expression

    def ty(self, w: Wire) -> Type:
        return self.node_expression(w.node).ty()

    def position(self, n: Node) -> tuple:
        return self._data(n).position

    def set_position(self, n: Node, position) -> None:
        self._data(n).position = tuple(position)

    def set_deleted(self, n: Node) -> None:
        self._data(n).deleted = True

    def is_deleted(self, n: Node) -> bool:
        return self._data(n).deleted

    def nodes(self) -> Iterator[Node]:
        """All nodes that have not been deleted, in creation order."""
        return (Node(i) for i, data in enumerate(self._nodes) if not data.deleted)

    def __len__(self):
        return len(self._nodes)

    # ── Wires ────────────────────────────────────────────────────────────

    def wire_inputs(self, w: Wire) -> Iterator[Node]:
        """The visible nodes whose outputs make up this wire."""
        return (
            n for n in self._connections.iter_class(w.node)
            if not self._nodes[n.index].deleted
        )

    def wire_eq(self, w1: Wire, w2: Wire) -> bool:
        """Have these wires been connected?"""
        return self._connections.eq(w1.node, w2.node)

    def wire_equiv(self, w1: Wire, w2: Wire) -> bool:
        """
        Do these wires describe the same expression?

        For two separate copies of `a` on screen, wire_equiv is true while
        wire_eq is false until they are connected.
        """
        return self._egg.equiv(self._egg_ids[w1.node.index], self._egg_ids[w2.node.index])

    def canonical(self, w: Wire) -> Wire:
        return Wire(self._connections.canonical(w.node))

    def connect(self, w1: Wire, w2: Wire, why_valid: ValidityReason) -> None:
        # Connecting a proven wire to an unproven one proves the unproven one.
        p1, p2 = self.proven(w1), self.proven(w2)
        if p1 and not p2:
            self._mark_class_proven(w2)
        elif p2 and not p1:
            self._mark_class_proven(w1)

        self._make_unique()
        self._connections.merge(w1.node, w2.node)
        self._egg.union(self._egg_ids[w1.node.index], self._egg_ids[w2.node.index])

    def proven(self, w: Wire) -> bool:
        return self._data(w.node).proven

    def set_proven(self, w: Wire, why_valid: ValidityReason) -> None:
        self._mark_class_proven(w)

    def _mark_class_proven(self, w: Wire) -> None:
        for n in self._connections.iter_class(w.node):
            self._nodes[n.index].proven = True

    def wires(self) -> Iterator[tuple]:
        """
        (wire, [(consumer node, input index), ...]) for every visible wire.

        Wires are keyed by their canonical node and listed in ascending
        order of it; a wire nobody consumes maps to an empty list.
        """
        wires: dict = {}
        for node in self.nodes():
            wires.setdefault(self._connections.canonical(node).index, [])
            for ix, wire in enumerate(self.node_expression(node).inputs):
                root = self._connections.canonical(wire.node).index
                wires.setdefault(root, []).append((node, ix))
        return ((Wire(Node(k)), wires[k]) for k in sorted(wires))

    def __repr__(self):
        goal = self._goal.node.index if self._goal is not None else None
        return f"Case({len(self._nodes)} nodes, goal={goal})"
