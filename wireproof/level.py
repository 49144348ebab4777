"""
Level specifications: the validated input a level (or theorem) is built from.

A spec is an ordered list of (expression, position) pairs whose inputs are
indices of earlier entries, a list of hypothesis indices and a conclusion
index. All checking happens here, once; the engine assumes what it is
given is well formed.

    spec = LevelSpec(
        nodes=[
            (Variable("a"), (0, 0)),
            (Variable("b"), (2, 0)),
            (And((0, 1)), (1, 2)),
        ],
        hypotheses=[0, 1],
        conclusion=2,
    )
    tree = CaseTree(spec.to_case())
"""

from dataclasses import dataclass

from .core.case import Case, ValidityReason
from .core.case_tree import CaseTree
from .core.expression import And, Or, Type, Variable


class LevelSpecError(ValueError):
    """A level (or theorem) specification is malformed."""


@dataclass(frozen=True, init=False)
class LevelSpec:
    nodes: tuple
    hypotheses: tuple
    conclusion: int

    def __init__(self, nodes, hypotheses, conclusion: int):
        object.__setattr__(self, "nodes", tuple((e, tuple(p)) for e, p in nodes))
        object.__setattr__(self, "hypotheses", tuple(hypotheses))
        object.__setattr__(self, "conclusion", conclusion)
        self._validate()

    def _validate(self) -> None:
        count = len(self.nodes)
        for n, (expression, _) in enumerate(self.nodes):
            for ix in expression.inputs:
                if ix == n:
                    raise LevelSpecError(f"Node {n} depends on itself.")
                if not 0 <= ix < n:
                    raise LevelSpecError(f"Node {n} depends on later node {ix}.")
            if isinstance(expression, (And, Or)) and not expression.inputs:
                raise LevelSpecError(f"Node {n} needs at least one input.")
            if not expression.tycheck(lambda ix: self.nodes[ix][0].ty()):
                raise LevelSpecError(f"Node {n} fails typechecking.")

        for ix in self.hypotheses:
            if not 0 <= ix < count:
                raise LevelSpecError(f"Hypothesis index too large. ({ix} >= {count})")
            if self.nodes[ix][0].ty() != Type.TRUTH_VALUE:
                raise LevelSpecError(f"Hypothesis {ix} is not a truth value.")

        if not 0 <= self.conclusion < count:
            raise LevelSpecError(f"Conclusion index too large. ({self.conclusion} >= {count})")
        if self.nodes[self.conclusion][0].ty() != Type.TRUTH_VALUE:
            raise LevelSpecError("Conclusion is not a truth value.")

    def to_case(self, offset=(0.0, 0.0)) -> Case:
        """A fresh case: hypotheses proven by assumption, conclusion as the goal."""
        case = Case()
        wires = []
        for expression, position in self.nodes:
            node = case.make_node(
                expression.map(lambda ix: wires[ix]),
                (position[0] + offset[0], position[1] + offset[1]),
            )
            wires.append(case.node_output(node))

        for ix in self.hypotheses:
            case.set_proven(wires[ix], ValidityReason("By assumption."))
        case.set_goal(wires[self.conclusion])
        return case

    def variables(self) -> list:
        """Distinct (name, type) pairs of the spec's variables, in order of appearance."""
        seen = []
        for expression, _ in self.nodes:
            if isinstance(expression, Variable) and expression.var not in seen:
                seen.append(expression.var)
        return seen

    def add_to_case_tree(self, tree: CaseTree, assignment: dict, offset=(0.0, 0.0)) -> list:
        """
        Apply this spec, as an already proven theorem, to the current case.

        `assignment` maps each (name, type) variable to a node of the
        current case. The theorem's other nodes are created fresh. The
        current case splits into one case per hypothesis (to be proven)
        and a final case where the conclusion holds.
        """
        case = tree.current_case()[0].clone()

        for var in self.variables():
            if var not in assignment:
                raise LevelSpecError(f"Variable {var[0]} is not assigned.")
            node = assignment[var]
            if case.ty(case.node_output(node)) != var[1]:
                raise LevelSpecError(f"Variable {var[0]} must be assigned a {var[1].value}.")

        wires = []
        for expression, position in self.nodes:
            if isinstance(expression, Variable):
                node = assignment[expression.var]
            else:
                node = case.make_node(
                    expression.map(lambda ix: wires[ix]),
                    (position[0] + offset[0], position[1] + offset[1]),
                )
            wires.append(case.node_output(node))

        subcases = []
        for ix in self.hypotheses:
            subcase = case.clone()
            subcase.set_goal(wires[ix])
            subcases.append(subcase)

        case.set_proven(
            wires[self.conclusion],
            ValidityReason("Application of a previously proven theorem."),
        )
        subcases.append(case)
        return tree.case_split(subcases, label="theorem")

    def __len__(self):
        return len(self.nodes)
