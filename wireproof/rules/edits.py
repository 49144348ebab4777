"""
Edits: the atomic changes an inference step makes to a case.

A rule produces a list of branches, each branch a list of edits. The case
tree clones the current case once per branch and applies that branch's
edits in order. Keeping edits as plain values lets them be inspected,
compared in tests, and written to the tree's history.
"""

from dataclasses import dataclass

from ..core.case import Case, ValidityReason, Wire


@dataclass(frozen=True)
class ProveWire:
    wire: Wire
    reason: str

    def apply(self, case: Case) -> None:
        case.set_proven(self.wire, ValidityReason(self.reason))

    def describe(self) -> str:
        return f"prove {self.wire.node.index}"


@dataclass(frozen=True)
class Connect:
    left: Wire
    right: Wire
    reason: str

    def apply(self, case: Case) -> None:
        case.connect(self.left, self.right, ValidityReason(self.reason))

    def describe(self) -> str:
        return f"connect {self.left.node.index} {self.right.node.index}"


@dataclass(frozen=True)
class SetGoal:
    wire: Wire

    def apply(self, case: Case) -> None:
        case.set_goal(self.wire)

    def describe(self) -> str:
        return f"goal {self.wire.node.index}"


def apply_edits(case: Case, edits) -> Case:
    """Apply edits in order to a clone of case; the original is untouched."""
    case = case.clone()
    for edit in edits:
        edit.apply(case)
    return case
