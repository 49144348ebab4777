"""
LevelSession: one level being played.

The UI reports finished gestures (a click, or a drop of one node onto
another or onto the trash can) and the session decides whether they do
anything. A gesture that is not allowed right now (the mechanic is still
locked, the case is already solved, the node has no interaction) is
ignored and reported as False; it never raises.
"""

from .core.case import Case, Node, Wire
from .core.case_tree import CaseId, CaseTree
from .level import LevelSpec
from .rules.interactions import (
    node_has_interaction, wire_has_interaction, nodes_connectable,
    interact_node, interact_wire, interact_connect,
)
from .unlocks import Unlocks


class LevelSession:

    def __init__(self, spec: LevelSpec, unlocks: Unlocks = Unlocks.NONE,
                 axiom: bool = False, verbose: bool = False):
        self.spec = spec
        self.tree = CaseTree(spec.to_case())
        self.unlocks = unlocks
        # Axioms are shown for reference and cannot be played.
        self.axiom = axiom
        self.verbose = verbose

    @property
    def case(self) -> Case:
        return self.tree.current_case()[0]

    def interactable(self) -> bool:
        case_id = self.tree.current
        return (
            not self.axiom
            and not self.tree.case(case_id)[1]
            and self.tree.children(case_id) is None
        )

    def complete(self) -> bool:
        return self.tree.all_complete()

    # ── Gestures ─────────────────────────────────────────────────────────

    def click_node(self, node: Node) -> bool:
        if not self.interactable() or not node_has_interaction(self.case, node):
            return False
        interact_node(self.tree, node, verbose=self.verbose)
        return True

    def click_wire(self, wire: Wire) -> bool:
        if (
            not self.interactable()
            or self.unlocks < Unlocks.LEMMAS
            or not wire_has_interaction(self.case, wire)
        ):
            return False
        interact_wire(self.tree, wire, verbose=self.verbose)
        return True

    def drop_node_on_node(self, dragged: Node, target: Node) -> bool:
        if not self.interactable() or not nodes_connectable(self.case, dragged, target):
            return False
        interact_connect(self.tree, dragged, target, verbose=self.verbose)
        return True

    def drop_node_in_trash(self, node: Node) -> bool:
        if not self.interactable():
            return False
        with self.tree.current_case_mut() as case:
            case.set_deleted(node)
        if self.verbose:
            print(f"  [deleted] node {node.index}")
        return True

    def set_node_position(self, node: Node, position) -> None:
        self.tree.set_node_position(node, position)

    # ── Case tree ────────────────────────────────────────────────────────

    def goto_case(self, id: CaseId) -> None:
        self.tree.goto_case(id)

    def revert_to(self, id: CaseId) -> bool:
        if self.axiom or self.unlocks < Unlocks.CASES:
            return False
        self.tree.revert_to(id)
        if self.verbose:
            print(f"  [revert] back to case {id.index}")
        return True

    def apply_theorem(self, theorem: LevelSpec, assignment: dict, offset=(0.0, 0.0)) -> bool:
        """
        Use a finished level as a theorem in the current case.

        Raises LevelSpecError if the assignment is missing a variable or
        gives one a node of the wrong type.
        """
        if not self.interactable() or self.unlocks < Unlocks.THEOREM_APPLICATION:
            return False
        theorem.add_to_case_tree(self.tree, assignment, offset)
        if self.verbose:
            print(f"  [theorem] applied with {len(theorem.hypotheses)} hypotheses")
        return True
