"""
Wireproof: the proof-state engine of a wiring-diagram proof game.

Players prove propositional statements by clicking operators in a diagram
of ∧, ∨, ⇒, = and opaque variable/function nodes. Each click is one
inference step; steps that branch (case analysis, lemmas) grow a tree of
cases, every leaf of which has to be solved.

Usage:
    python -m wireproof --list
    python -m wireproof --level or_elim
    python -m wireproof --level lemma --dot lemma.dot
"""

from .core.case import ValidityReason, Node, Wire, Case
from .core.case_tree import CaseId, CaseTree
from .core.expression import Type, And, Or, Implies, Equal, Variable, Function
from .rules.edits import ProveWire, Connect, SetGoal
from .rules.interactions import (
    InteractionError,
    node_has_interaction, wire_has_interaction, nodes_connectable,
    interact_node, interact_wire, interact_connect,
)
from .level import LevelSpec, LevelSpecError
from .unlocks import Unlocks, Progress, unlocks_for_level
from .session import LevelSession

__all__ = [
    "ValidityReason", "Node", "Wire", "Case",
    "CaseId", "CaseTree",
    "Type", "And", "Or", "Implies", "Equal", "Variable", "Function",
    "ProveWire", "Connect", "SetGoal",
    "InteractionError",
    "node_has_interaction", "wire_has_interaction", "nodes_connectable",
    "interact_node", "interact_wire", "interact_connect",
    "LevelSpec", "LevelSpecError",
    "Unlocks", "Progress", "unlocks_for_level",
    "LevelSession",
]
