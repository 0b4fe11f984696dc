"""Response schemas for the access API."""

from typing import List, Optional

from pydantic import BaseModel, Field

from hrportal.core.navigation.catalog import FeatureNode
from hrportal.core.policy.explain import DecisionExplanation


class ScopeResponse(BaseModel):
    type: str
    department_id: Optional[str] = None


class DecisionResponse(BaseModel):
    """An access decision with its user-facing message."""
    allowed: bool
    message: str
    reason: Optional[str] = None
    missing_roles: List[str] = Field(default_factory=list)
    missing_permissions: List[str] = Field(default_factory=list)
    missing_scope: Optional[ScopeResponse] = None

    @classmethod
    def from_explanation(cls, explanation: DecisionExplanation) -> "DecisionResponse":
        return cls(**explanation.to_dict())


class FeatureNodeResponse(BaseModel):
    """A visible navigation entry. Labels and links are joined by id client-side."""
    id: str
    display_order: int
    children: List["FeatureNodeResponse"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: FeatureNode) -> "FeatureNodeResponse":
        return cls(
            id=node.id,
            display_order=node.display_order,
            children=[cls.from_node(child) for child in node.children],
        )


FeatureNodeResponse.model_rebuild()


class NavigationResponse(BaseModel):
    features: List[FeatureNodeResponse]
    catalog_generation: int
