"""
Expressions: the operator carried by one node of the wiring diagram.

    And(inputs)                 ∧   1+ truth values
    Or(inputs)                  ∨   1+ truth values
    Implies((h, c))             ⇒   hypothesis, conclusion
    Equal((a, b))               =   two children of the same type
    Variable(name, type)            a named leaf
    Function(name, type, inputs)    an opaque, uninterpreted function

Inputs are generic: inside a Case they are Wires, inside a LevelSpec they
are integer indices into the spec's node list. `map` converts between the
two.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Type(Enum):
    TRUTH_VALUE = "truth value"
    REAL_NUMBER = "number"


@dataclass(frozen=True)
class Expression:
    """Base class. Subclasses define the glyph, inputs and type rules."""

    def text(self) -> str:
        raise NotImplementedError

    @property
    def inputs(self) -> tuple:
        return ()

    def ty(self) -> Type:
        return Type.TRUTH_VALUE

    def tycheck(self, child_type: Callable) -> bool:
        """Do the children have the types this operator needs?"""
        return True

    def map(self, f: Callable) -> "Expression":
        return self

    def operator(self):
        """Hashable key identifying the operator, ignoring children."""
        return self.text()

    def __str__(self):
        if not self.inputs:
            return self.text()
        return f"{self.text()}({', '.join(str(i) for i in self.inputs)})"


def _all_truth_values(inputs, child_type) -> bool:
    return all(child_type(i) == Type.TRUTH_VALUE for i in inputs)


@dataclass(frozen=True)
class And(Expression):
    children: tuple = ()

    def text(self):
        return "∧"

    @property
    def inputs(self):
        return self.children

    def tycheck(self, child_type):
        return _all_truth_values(self.children, child_type)

    def map(self, f):
        return And(tuple(f(c) for c in self.children))


@dataclass(frozen=True)
class Or(Expression):
    children: tuple = ()

    def text(self):
        return "∨"

    @property
    def inputs(self):
        return self.children

    def tycheck(self, child_type):
        return _all_truth_values(self.children, child_type)

    def map(self, f):
        return Or(tuple(f(c) for c in self.children))


@dataclass(frozen=True)
class Implies(Expression):
    hypothesis: object
    conclusion: object

    def text(self):
        return "⇒"

    @property
    def inputs(self):
        return (self.hypothesis, self.conclusion)

    def tycheck(self, child_type):
        return _all_truth_values(self.inputs, child_type)

    def map(self, f):
        return Implies(f(self.hypothesis), f(self.conclusion))


@dataclass(frozen=True)
class Equal(Expression):
    left: object
    right: object

    def text(self):
        return "="

    @property
    def inputs(self):
        return (self.left, self.right)

    def tycheck(self, child_type):
        return child_type(self.left) == child_type(self.right)

    def map(self, f):
        return Equal(f(self.left), f(self.right))


@dataclass(frozen=True)
class Variable(Expression):
    name: str
    type: Type = Type.TRUTH_VALUE

    def text(self):
        return self.name

    def ty(self):
        return self.type

    def operator(self):
        return ("var", self.name, self.type)

    @property
    def var(self) -> tuple:
        """(name, type): what theorem application substitutes for."""
        return (self.name, self.type)


@dataclass(frozen=True)
class Function(Expression):
    name: str
    type: Type = Type.TRUTH_VALUE
    args: tuple = ()

    def text(self):
        return self.name

    @property
    def inputs(self):
        return self.args

    def ty(self):
        return self.type

    def map(self, f):
        return Function(self.name, self.type, tuple(f(a) for a in self.args))

    def operator(self):
        return ("fn", self.name, self.type)


CONNECTIVES = {"∧": And, "∨": Or, "⇒": Implies, "=": Equal}


def make_expression(op: str, inputs=(), type: Type = Type.TRUTH_VALUE) -> Expression:
    """
    Build an expression from an operator glyph and its inputs.

    Any other operator name is a Variable when it has no inputs and a
    Function otherwise. Raises ValueError on a wrong arity for ⇒ and =.
    """
    inputs = tuple(inputs)
    if op in ("∧", "∨"):
        return CONNECTIVES[op](inputs)
    if op in ("⇒", "="):
        if len(inputs) != 2:
            raise ValueError(
                f"Wrong number of inputs to `{op}`: expected 2, found {len(inputs)}."
            )
        return CONNECTIVES[op](*inputs)
    if not inputs:
        return Variable(op, type)
    return Function(op, type, inputs)
