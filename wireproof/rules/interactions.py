"""
Interaction rules: what clicking a node or a wire does.

Each connective has two directions, chosen by whether the node's output
is already proven:

    node        output unproven (work towards goal)     output proven (use a fact)
    ----------  --------------------------------------  ---------------------------------
    ∧           all inputs proven -> prove output        not all proven -> prove every input
    ∨           some input proven -> prove output        none proven -> one case per input
    ⇒ (h, c)    output is the goal -> assume h, goal c   h proven, c not -> prove c
    = (a, b)    a, b connected -> prove output           a, b not connected -> connect a, b
    variable    never                                    never

Clicking a wire that is neither proven nor the goal is a cut: one case
must prove the wire, the other may assume it.

The `*_has_interaction` queries and the `*_branches` functions must agree:
whenever the query is true the branch computation is defined, and the
`interact_*` entry points refuse to run when it is false.
"""

from ..core.case import Case, Node, Wire
from ..core.case_tree import CaseTree
from ..core.expression import And, Or, Implies, Equal
from .edits import ProveWire, Connect, SetGoal


class InteractionError(RuntimeError):
    """An interaction was applied where its legality check fails."""


REASONS = {
    "and_intro": "If a collection of propositions holds, so does their conjunction.",
    "and_elim": "If a conjunction holds, so do each of the individual propositions.",
    "or_intro": "A disjunction holds if any of the individual propositions hold.",
    "or_elim": (
        "If a disjunction holds, we can split into several cases. "
        "In each case, one of the individual propositions holds."
    ),
    "implies_intro": (
        "To prove an implication, one assumes the hypothesis, "
        "and tries to prove the conclusion."
    ),
    "implies_elim": "If an implication holds, and its hypothesis holds, then the conclusion holds.",
    "equal_intro": "Reflexivity: both sides are the same wire.",
    "equal_elim": (
        "If two expressions are equal, we may treat them as equivalent in all respects. "
        "So we might as well merge the wires."
    ),
    "cut": "In the other case, you are required to prove this.",
    "equivalent": "Both wires describe the same expression.",
}


# ── Legality ─────────────────────────────────────────────────────────────────

def node_has_interaction(case: Case, node: Node) -> bool:
    expression = case.node_expression(node)
    output_proven = case.proven(case.node_output(node))
    inputs = expression.inputs

    if isinstance(expression, And):
        all_proven = all(case.proven(w) for w in inputs)
        return not all_proven if output_proven else all_proven
    if isinstance(expression, Or):
        any_proven = any(case.proven(w) for w in inputs)
        return not any_proven if output_proven else any_proven
    if isinstance(expression, Implies):
        if output_proven:
            return case.proven(expression.hypothesis) and not case.proven(expression.conclusion)
        return case.wire_eq(case.goal(), case.node_output(node))
    if isinstance(expression, Equal):
        connected = case.wire_eq(expression.left, expression.right)
        return not connected if output_proven else connected
    return False


def wire_has_interaction(case: Case, wire: Wire) -> bool:
    return not (case.proven(wire) or case.wire_eq(wire, case.goal()))


def nodes_connectable(case: Case, n1: Node, n2: Node) -> bool:
    """Can n1's output be dropped onto n2's? Same expression, not yet the same wire."""
    w1, w2 = case.node_output(n1), case.node_output(n2)
    return case.wire_equiv(w1, w2) and not case.wire_eq(w1, w2)


# ── Effects ──────────────────────────────────────────────────────────────────

def node_branches(case: Case, node: Node) -> list:
    """
    The branches (lists of edits) clicking `node` produces.

    Raises InteractionError if node_has_interaction is false.
    """
    if not node_has_interaction(case, node):
        raise InteractionError(f"{node!r} has no interaction in this case.")

    expression = case.node_expression(node)
    output = case.node_output(node)
    output_proven = case.proven(output)

    if isinstance(expression, And):
        if output_proven:
            return [[ProveWire(w, REASONS["and_elim"]) for w in expression.inputs]]
        return [[ProveWire(output, REASONS["and_intro"])]]

    if isinstance(expression, Or):
        if output_proven:
            return [[ProveWire(w, REASONS["or_elim"])] for w in expression.inputs]
        return [[ProveWire(output, REASONS["or_intro"])]]

    if isinstance(expression, Implies):
        if output_proven:
            return [[ProveWire(expression.conclusion, REASONS["implies_elim"])]]
        return [[
            ProveWire(expression.hypothesis, REASONS["implies_intro"]),
            SetGoal(expression.conclusion),
        ]]

    # Equal; node_has_interaction is False for every other expression.
    if output_proven:
        return [[Connect(expression.left, expression.right, REASONS["equal_elim"])]]
    return [[ProveWire(output, REASONS["equal_intro"])]]


def wire_branches(case: Case, wire: Wire) -> list:
    """Cut on `wire`: first prove it, then continue with it assumed."""
    if not wire_has_interaction(case, wire):
        raise InteractionError(f"{wire!r} has no interaction in this case.")
    return [
        [SetGoal(wire)],
        [ProveWire(wire, REASONS["cut"])],
    ]


# ── Entry points ─────────────────────────────────────────────────────────────

def _report(tree: CaseTree, label: str, children: list, verbose: bool) -> None:
    if not verbose:
        return
    ids = ", ".join(str(c.index) for c in children) or "none"
    print(f"  [{label}] step {tree.step}: children {ids} -> current {tree.current.index}")
    if tree.all_complete():
        print("  [complete] every case is solved")


def interact_node(tree: CaseTree, node: Node, verbose: bool = False) -> list:
    """Apply the rule for `node` to the current case. Returns the new case ids."""
    case = tree.current_case()[0]
    branches = node_branches(case, node)
    label = f"{case.node_expression(node).text()} {node.index}"
    children = tree.apply_edits(branches, label=label)
    _report(tree, label, children, verbose)
    return children


def interact_wire(tree: CaseTree, wire: Wire, verbose: bool = False) -> list:
    case = tree.current_case()[0]
    branches = wire_branches(case, wire)
    label = f"cut {wire.node.index}"
    children = tree.apply_edits(branches, label=label)
    _report(tree, label, children, verbose)
    return children


def interact_connect(tree: CaseTree, n1: Node, n2: Node, verbose: bool = False) -> list:
    """Connect two equivalent nodes' outputs, as a single-child step."""
    case = tree.current_case()[0]
    if not nodes_connectable(case, n1, n2):
        raise InteractionError(f"{n1!r} and {n2!r} do not describe the same expression.")
    w1, w2 = case.node_output(n1), case.node_output(n2)
    label = f"connect {n1.index} {n2.index}"
    children = tree.apply_edits([[Connect(w1, w2, REASONS["equivalent"])]], label=label)
    _report(tree, label, children, verbose)
    return children
