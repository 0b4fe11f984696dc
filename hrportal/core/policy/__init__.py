"""Policy evaluation for the HR portal.

Aggregates role, permission and scope checks into explainable decisions.
"""

from .models import Actor, Requirement, ScopeType, TargetScope, department_requirement
from .decision import Decision, DenialReason
from .scope import ResourceClass, effective_scope, resolve_scope
from .engine import PolicyEngine, evaluate, evaluate_many
from .explain import DecisionExplanation, explain

__all__ = [
    "Actor",
    "Requirement",
    "ScopeType",
    "TargetScope",
    "department_requirement",
    "Decision",
    "DenialReason",
    "ResourceClass",
    "effective_scope",
    "resolve_scope",
    "PolicyEngine",
    "evaluate",
    "evaluate_many",
    "DecisionExplanation",
    "explain",
]
