from dataclasses import dataclass
from typing import Any


def is_success_2xx(status: int) -> bool:
    return 200 <= status < 300


@dataclass(frozen=True)
class ApiResponse:
    """Normalized result of a single GitHub API call."""

    status: int
    body: str = ""
    json: Any = None

    @property
    def ok(self) -> bool:
        return is_success_2xx(self.status)

    @property
    def message(self) -> str:
        """Error text the API sent back, falling back to the raw body."""
        if isinstance(self.json, dict) and self.json.get("message"):
            return str(self.json["message"])
        return self.body
