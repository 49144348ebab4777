from .union_find import UnionFind
from .congruence import CongruenceIndex
from .expression import (
    Type, Expression, And, Or, Implies, Equal, Variable, Function, make_expression,
)
from .case import ValidityReason, Node, Wire, Case
from .case_tree import CaseId, CaseTree

__all__ = [
    "UnionFind", "CongruenceIndex",
    "Type", "Expression", "And", "Or", "Implies", "Equal", "Variable", "Function",
    "make_expression",
    "ValidityReason", "Node", "Wire", "Case",
    "CaseId", "CaseTree",
]
