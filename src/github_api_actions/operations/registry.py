from __future__ import annotations

from typing import Dict, List

from github_api_actions.core.models import OperationSpec
from github_api_actions.errors import UnknownOperation

_OPERATIONS: Dict[str, OperationSpec] = {}


def register(spec: OperationSpec) -> None:
    """Register an operation."""
    _OPERATIONS[spec.name] = spec


def get(name: str) -> OperationSpec:
    """Retrieve a registered operation by name."""
    if name not in _OPERATIONS:
        known = ", ".join(sorted(_OPERATIONS))
        raise UnknownOperation(f"Unknown operation '{name}'. Known operations: {known}")
    return _OPERATIONS[name]


def get_registered_operations() -> List[OperationSpec]:
    """Get all registered operations, sorted by name."""
    return [_OPERATIONS[k] for k in sorted(_OPERATIONS)]
