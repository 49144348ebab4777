"""
Level registry.

Each level is a dict:
    spec:         LevelSpec
    solution:     [("node", index) | ("wire", index), ...]  clicks that solve it
    unlocks:      Unlocks the level is played with
    description:  str

Node indices in a solution are the spec's node indices; to_case creates
nodes in spec order, so they coincide.
"""

from .core.case import Node, Wire
from .core.expression import And, Or, Implies, Equal, Variable
from .level import LevelSpec
from .session import LevelSession
from .unlocks import Unlocks


def _vars(*names):
    return [(Variable(name), (2.0 * i, 0.0)) for i, name in enumerate(names)]


LEVELS = {
    "and_intro": {
        "spec": LevelSpec(
            nodes=_vars("a", "b") + [(And((0, 1)), (1.0, 2.0))],
            hypotheses=[0, 1],
            conclusion=2,
        ),
        "solution": [("node", 2)],
        "unlocks": Unlocks.NONE,
        "description": "From a and b, conclude a ∧ b",
    },
    "and_elim": {
        "spec": LevelSpec(
            nodes=_vars("a", "b") + [(And((0, 1)), (1.0, 2.0))],
            hypotheses=[2],
            conclusion=0,
        ),
        "solution": [("node", 2)],
        "unlocks": Unlocks.NONE,
        "description": "From a ∧ b, conclude a",
    },
    "or_intro": {
        "spec": LevelSpec(
            nodes=_vars("a", "b") + [(Or((0, 1)), (1.0, 2.0))],
            hypotheses=[0],
            conclusion=2,
        ),
        "solution": [("node", 2)],
        "unlocks": Unlocks.NONE,
        "description": "From a, conclude a ∨ b",
    },
    "implies_intro": {
        "spec": LevelSpec(
            nodes=_vars("a") + [(Implies(0, 0), (0.0, 2.0))],
            hypotheses=[],
            conclusion=1,
        ),
        "solution": [("node", 1)],
        "unlocks": Unlocks.NONE,
        "description": "Conclude a ⇒ a from nothing",
    },
    "or_elim": {
        "spec": LevelSpec(
            nodes=_vars("a", "b", "c") + [
                (Or((0, 1)), (1.0, 2.0)),
                (Implies(0, 2), (3.0, 2.0)),
                (Implies(1, 2), (5.0, 2.0)),
            ],
            hypotheses=[3, 4, 5],
            conclusion=2,
        ),
        "solution": [("node", 3), ("node", 4), ("node", 5)],
        "unlocks": Unlocks.CASES,
        "description": "From a ∨ b, a ⇒ c and b ⇒ c, conclude c by cases",
    },
    "equality": {
        "spec": LevelSpec(
            nodes=_vars("a", "b") + [(Equal(0, 1), (1.0, 2.0))],
            hypotheses=[1, 2],
            conclusion=0,
        ),
        "solution": [("node", 2)],
        "unlocks": Unlocks.CASES,
        "description": "From a = b and b, conclude a",
    },
    "lemma": {
        "spec": LevelSpec(
            nodes=_vars("a", "b", "c") + [
                (Implies(0, 1), (1.0, 2.0)),
                (Implies(1, 2), (3.0, 2.0)),
            ],
            hypotheses=[0, 3, 4],
            conclusion=2,
        ),
        "solution": [("wire", 1), ("node", 3), ("node", 4)],
        "unlocks": Unlocks.LEMMAS,
        "description": "Chain a ⇒ b ⇒ c through the lemma b",
    },
}


def solve(session: LevelSession, solution: list) -> bool:
    """
    Replay a solution's clicks on a session.

    After a click completes the current case, play moves on to the next
    open case. Returns whether the level ends up complete; stops at the
    first click the session rejects.
    """
    for kind, index in solution:
        if kind == "node":
            accepted = session.click_node(Node(index))
        elif kind == "wire":
            accepted = session.click_wire(Wire(Node(index)))
        else:
            raise ValueError(f"unknown click kind: {kind!r}")

        if not accepted:
            if session.verbose:
                print(f"  [rejected] {kind} {index}")
            return False

        if not session.complete() and session.tree.current_case()[1]:
            session.goto_case(session.tree.open_cases()[0])
    return session.complete()
