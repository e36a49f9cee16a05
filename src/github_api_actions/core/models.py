from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from github_api_actions.http.response import ApiResponse, is_success_2xx

# Where a parameter ends up in the request.
BODY = "body"
QUERY = "query"
PATH = "path"
OPTION = "option"  # steers the operation, never sent


def status_in(*statuses: int) -> Callable[[int], bool]:
    """Success predicate accepting exactly the given statuses."""
    accepted = frozenset(statuses)

    def check(status: int) -> bool:
        return status in accepted

    return check


@dataclass(frozen=True)
class Param:
    """A named parameter accepted by an operation."""

    name: str
    kind: type = str
    required: bool = False
    location: str = BODY
    choices: Optional[Tuple[Any, ...]] = None
    wire_name: Optional[str] = None
    transform: Optional[Callable[[Any], Any]] = None
    description: str = ""
    # leave the parameter out of the request when its value is empty
    omit_empty: bool = False

    @property
    def key(self) -> str:
        """Name used on the wire."""
        return self.wire_name or self.name


@dataclass(frozen=True)
class OperationSpec:
    """Declarative description of one REST endpoint call."""

    name: str
    method: str
    path: str
    params: Tuple[Param, ...] = ()
    description: str = ""
    accept: Optional[str] = None
    success: Callable[[int], bool] = is_success_2xx
    prepare: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None
    resolve_path: Optional[Callable[[Dict[str, Any]], str]] = None
    summarize: Optional[Callable[[ApiResponse], Dict[str, Any]]] = None
    outputs: Mapping[str, str] = field(default_factory=dict)
    doc_url: str = ""

    @property
    def context_prefix(self) -> str:
        """Shared-context key prefix, e.g. GITHUB_CREATE_ISSUE."""
        short = self.name[len("github_"):] if self.name.startswith("github_") else self.name
        return f"GITHUB_{short.upper()}"

    def param(self, name: str) -> Optional[Param]:
        for p in self.params:
            if p.name == name:
                return p
        return None


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a successful operation: the normalized response plus derived values."""

    operation: str
    response: ApiResponse
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def body(self) -> str:
        return self.response.body

    @property
    def json(self) -> Any:
        return self.response.json

    def as_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "status": self.status,
            "body": self.body,
            "json": self.json,
            **self.extras,
        }
