"""Navigation/feature filtering.

Computes the part of the feature catalog an actor may see. A group whose
own gate passes but whose children are all hidden is pruned, so the UI
never renders an empty, clickable category.
"""

from dataclasses import replace
from typing import Optional, Sequence, Tuple

from hrportal.core.policy.engine import evaluate
from hrportal.core.policy.models import Actor

from .catalog import FeatureNode


def filter_node(actor: Actor, node: FeatureNode) -> Optional[FeatureNode]:
    """
    Filter a single node and its subtree.

    Returns:
        A copy of the node holding only its visible children, or None when
        the node is hidden
    """
    if actor.role in node.hidden_from_roles:
        return None

    if not evaluate(actor, node.requirement).allowed:
        return None

    if not node.has_children:
        return node

    children = filter_tree(actor, node.children)
    if not children:
        return None

    if children == node.children:
        return node
    return replace(node, children=children)


def filter_tree(actor: Actor, catalog: Sequence[FeatureNode]) -> Tuple[FeatureNode, ...]:
    """
    Compute the visible subset of a feature catalog for an actor.

    Surviving nodes keep their relative order and the input is never
    modified. Filtering an already filtered tree returns it unchanged.

    Args:
        actor: The actor the navigation is rendered for
        catalog: Top-level feature nodes in display order

    Returns:
        Tuple of visible nodes with pruned children
    """
    visible = []
    for node in catalog:
        kept = filter_node(actor, node)
        if kept is not None:
            visible.append(kept)
    return tuple(visible)
