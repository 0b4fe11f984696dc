"""Navigation catalog, feature filtering and route guarding."""

from .catalog import (
    CatalogStore,
    FeatureNode,
    load_catalog,
    parse_catalog,
    top_level_ids,
    visible_ids,
)
from .filter import filter_node, filter_tree
from .routes import RouteGuard, RouteRule, load_route_rules

__all__ = [
    "CatalogStore",
    "FeatureNode",
    "load_catalog",
    "parse_catalog",
    "top_level_ids",
    "visible_ids",
    "filter_node",
    "filter_tree",
    "RouteGuard",
    "RouteRule",
    "load_route_rules",
]
