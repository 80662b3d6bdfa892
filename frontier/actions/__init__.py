"""Action system: typed intents, components, and the registry."""

from frontier.actions.base import (
    Action,
    ActionComponent,
    ActionParseError,
    ContractViolation,
    PerformOutcome,
    ValidationResult,
)
from frontier.actions.registry import ActionRegistry, default_registry

__all__ = [
    "Action",
    "ActionComponent",
    "ActionParseError",
    "ActionRegistry",
    "ContractViolation",
    "PerformOutcome",
    "ValidationResult",
    "default_registry",
]
