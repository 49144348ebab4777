from .edits import ProveWire, Connect, SetGoal, apply_edits
from .interactions import (
    InteractionError,
    node_has_interaction, wire_has_interaction, nodes_connectable,
    node_branches, wire_branches,
    interact_node, interact_wire, interact_connect,
)

__all__ = [
    "ProveWire", "Connect", "SetGoal", "apply_edits",
    "InteractionError",
    "node_has_interaction", "wire_has_interaction", "nodes_connectable",
    "node_branches", "wire_branches",
    "interact_node", "interact_wire", "interact_connect",
]
