"""
Visualization and reporting utilities.
"""

from .core.case import Case
from .core.case_tree import CaseTree, ROOT
from .rules.interactions import node_has_interaction


def print_case(case: Case):
    """Print every visible node of a case, with its inputs and status."""
    goal = case.goal() if case.has_goal() else None
    print(f"\n{'='*60}")
    print(f"Nodes ({sum(1 for _ in case.nodes())}):")
    for node in case.nodes():
        expression = case.node_expression(node)
        wire = case.node_output(node)
        inputs = ", ".join(str(case.canonical(w).node.index) for w in expression.inputs)
        flags = []
        if case.proven(wire):
            flags.append("proven")
        if goal is not None and case.wire_eq(wire, goal):
            flags.append("goal")
        if goal is not None and node_has_interaction(case, node):
            flags.append("clickable")
        line = f"  {node.index}: {expression.text()}"
        if inputs:
            line += f"({inputs})"
        if flags:
            line += f"  [{', '.join(flags)}]"
        print(line)
    print(f"{'='*60}")


def print_case_tree(tree: CaseTree):
    """Print the case tree, one line per case, marking the current one."""
    print(f"\n{'='*60}")
    print("Cases:")

    def walk(case_id, depth):
        _, complete = tree.case(case_id)
        children = tree.children(case_id)
        marker = "*" if case_id == tree.current else " "
        status = "done" if complete else ("open" if children is None else "split")
        print(f" {marker}{'  ' * depth}{case_id.index} [{status}]")
        for child in children or []:
            walk(child, depth + 1)

    walk(ROOT, 0)
    print(f"{'='*60}")


def print_history(tree: CaseTree):
    """Print the steps recorded by the case tree."""
    print(f"\n{'='*60}")
    print("Step history:")
    print(f"{'='*60}")
    for entry in tree.history:
        produced = ", ".join(str(c) for c in entry["children"]) if entry["children"] else "(no cases)"
        print(f"  Step {entry['step']}: {entry['label']} on case {entry['case']} -> {produced}")


def export_dot(case: Case, path="case_graph.dot"):
    """Export a case's wiring diagram as a DOT file for Graphviz."""
    with open(path, "w", encoding="utf-8") as f:
        f.write("digraph case {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=circle];\n")

        goal = case.goal() if case.has_goal() else None
        for node in case.nodes():
            label = case.node_expression(node).text().replace('"', '\\"')
            wire = case.node_output(node)
            color = "lightgreen" if case.proven(wire) else "white"
            shape = ", shape=doublecircle" if goal is not None and case.wire_eq(wire, goal) else ""
            f.write(f'  n{node.index} [label="{label}", fillcolor={color}, style=filled{shape}];\n')

        for wire, consumers in case.wires():
            for consumer, ix in consumers:
                sources = [n.index for n in case.wire_inputs(wire)]
                for source in sources:
                    f.write(f'  n{source} -> n{consumer.index} [label="{ix}"];\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
