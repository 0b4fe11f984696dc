"""Navigation feature catalog.

The catalog is static configuration: a tree of feature nodes carrying
only identity and access-control fields. Labels, links and icons belong
to the presentation layer and are joined to nodes by ``id`` there.

YAML format::

    features:
      - id: employees
        roles: [SUPER_ADMIN, ADMIN, USER]
        permissions: []
        mode: any
        children:
          - id: employees.list
            permissions: [VIEW_ALL_USERS]
"""

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

from hrportal.common.config import load_config
from hrportal.common.logger import get_logger
from hrportal.core.errors import CatalogError
from hrportal.core.policy.models import Requirement
from hrportal.core.rbac.checker import CombinationMode
from hrportal.core.rbac.permissions import Permission
from hrportal.core.rbac.roles import Role

logger = get_logger("navigation")

DEFAULT_CATALOG_PATH = Path(__file__).with_name("default_catalog.yaml")


@dataclass(frozen=True)
class FeatureNode:
    """One entry, possibly with children, in the navigation catalog."""
    id: str
    display_order: int = 0
    required_roles: FrozenSet[Role] = field(default_factory=frozenset)
    required_permissions: FrozenSet[Permission] = field(default_factory=frozenset)
    combination_mode: CombinationMode = CombinationMode.ANY
    children: Tuple["FeatureNode", ...] = ()
    hidden_from_roles: FrozenSet[Role] = field(default_factory=frozenset)

    def __post_init__(self):
        # Validates roles, permissions and mode the same way a Requirement does
        requirement = Requirement(
            required_roles=self.required_roles,
            required_permissions=self.required_permissions,
            combination_mode=self.combination_mode,
        )
        object.__setattr__(self, "required_roles", requirement.required_roles)
        object.__setattr__(self, "required_permissions", requirement.required_permissions)
        object.__setattr__(self, "combination_mode", requirement.combination_mode)
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(
            self,
            "hidden_from_roles",
            Requirement(required_roles=self.hidden_from_roles).required_roles,
        )

    @property
    def requirement(self) -> Requirement:
        """The node's own gate. Feature visibility is never scope-constrained."""
        return Requirement(
            required_roles=self.required_roles,
            required_permissions=self.required_permissions,
            combination_mode=self.combination_mode,
        )

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def walk(self) -> Iterator["FeatureNode"]:
        """Yield this node and its descendants depth-first, in order."""
        yield self
        for child in self.children:
            yield from child.walk()


def _as_list(value: Any, field_name: str, node_id: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogError(
            f"Feature {node_id!r}: {field_name} must be a list",
            field=field_name,
            value=value,
        )
    return value


def parse_feature_node(
    node_dict: Dict[str, Any],
    display_order: int = 0,
    seen_ids: Optional[Set[str]] = None,
) -> FeatureNode:
    """Parse a feature node dictionary, recursing into children.

    Args:
        node_dict: Feature node configuration dictionary
        display_order: Position of the node among its siblings
        seen_ids: Ids already parsed in this catalog, for duplicate detection

    Returns:
        FeatureNode instance

    Raises:
        CatalogError: On a missing or duplicate id, or unknown role,
            permission or mode values
    """
    if seen_ids is None:
        seen_ids = set()

    if not isinstance(node_dict, dict):
        raise CatalogError("Feature entries must be mappings", value=node_dict)

    node_id = node_dict.get("id")
    if not node_id or not isinstance(node_id, str):
        raise CatalogError("Feature entry is missing an id", field="id", value=node_id)
    if node_id in seen_ids:
        raise CatalogError(f"Duplicate feature id: {node_id}", field="id", value=node_id)
    seen_ids.add(node_id)

    children = tuple(
        parse_feature_node(child, index, seen_ids)
        for index, child in enumerate(_as_list(node_dict.get("children"), "children", node_id))
    )

    try:
        return FeatureNode(
            id=node_id,
            display_order=display_order,
            required_roles=_as_list(node_dict.get("roles"), "roles", node_id),
            required_permissions=_as_list(node_dict.get("permissions"), "permissions", node_id),
            combination_mode=node_dict.get("mode", CombinationMode.ANY.value),
            children=children,
            hidden_from_roles=_as_list(
                node_dict.get("hidden_from_roles"), "hidden_from_roles", node_id
            ),
        )
    except ValueError as e:
        raise CatalogError(
            f"Feature {node_id!r}: {e}",
            field=getattr(e, "field", None),
            value=getattr(e, "value", None),
        ) from e


def parse_catalog(config_dict: Dict[str, Any]) -> Tuple[FeatureNode, ...]:
    """Parse a full catalog dictionary with a top-level ``features`` list."""
    features = config_dict.get("features")
    if not isinstance(features, list):
        raise CatalogError("Catalog must define a 'features' list", field="features")

    seen_ids: Set[str] = set()
    return tuple(
        parse_feature_node(node_dict, index, seen_ids)
        for index, node_dict in enumerate(features)
    )


def load_catalog(catalog_path: Union[str, Path, None] = None) -> Tuple[FeatureNode, ...]:
    """Load a navigation catalog from YAML.

    Args:
        catalog_path: Path to the catalog file; the bundled default when None

    Returns:
        Tuple of top-level feature nodes in display order
    """
    path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
    catalog = parse_catalog(load_config(path))
    logger.info(f"Loaded navigation catalog from {path} ({count_nodes(catalog)} features)")
    return catalog


def count_nodes(catalog: Iterable[FeatureNode]) -> int:
    return sum(1 for node in catalog for _ in node.walk())


def visible_ids(tree: Iterable[FeatureNode]) -> List[str]:
    """All node ids in a (filtered) tree, depth-first in display order."""
    return [n.id for node in tree for n in node.walk()]


def top_level_ids(tree: Iterable[FeatureNode]) -> List[str]:
    """The main-menu entries of a (filtered) tree."""
    return [node.id for node in tree]


class CatalogStore:
    """
    Holds the process-wide catalog snapshot.

    Readers take ``snapshot()`` once per render and work on that tuple.
    Reloads build the new tree completely before swapping the reference
    in a single assignment, so a reader never sees a partial catalog.
    """

    def __init__(self, catalog: Sequence[FeatureNode] = ()):
        # (generation, catalog), always replaced as one reference
        self._state: Tuple[int, Tuple[FeatureNode, ...]] = (0, tuple(catalog))
        self._write_lock = threading.Lock()

    @classmethod
    def from_path(cls, catalog_path: Union[str, Path, None] = None) -> "CatalogStore":
        return cls(load_catalog(catalog_path))

    @property
    def generation(self) -> int:
        """Number of swaps since creation."""
        return self._state[0]

    def snapshot(self) -> Tuple[FeatureNode, ...]:
        return self._state[1]

    def snapshot_with_generation(self) -> Tuple[int, Tuple[FeatureNode, ...]]:
        """The current catalog together with the generation it belongs to."""
        return self._state

    def replace(self, catalog: Sequence[FeatureNode]) -> None:
        """Swap in a new catalog."""
        new_catalog = tuple(catalog)
        with self._write_lock:
            generation = self._state[0] + 1
            self._state = (generation, new_catalog)
        logger.info(f"Navigation catalog swapped (generation {generation})")

    def reload(self, catalog_path: Union[str, Path, None] = None) -> None:
        """Load a catalog file and swap it in.

        A file that fails to parse raises and leaves the current
        snapshot in place.
        """
        self.replace(load_catalog(catalog_path))
