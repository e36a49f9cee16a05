from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Dict, Iterator


class SharedContext(MutableMapping):
    """Key/value store that workflow steps use to hand results to later steps."""

    def __init__(self, initial: Dict[str, Any] | None = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def publish(self, prefix: str, values: Dict[str, Any]) -> None:
        """Store each value under ``<prefix>_<KEY>``."""
        for key, value in values.items():
            self._values[f"{prefix}_{key.upper()}"] = value

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._values)


_DEFAULT = SharedContext()


def default_context() -> SharedContext:
    """Process-wide context used when a runner is not given its own."""
    return _DEFAULT
