from __future__ import annotations

from typing import Any, Dict, Mapping

from github_api_actions.core.models import OperationSpec, Param
from github_api_actions.errors import InvalidArgument

_TRUE = {"true", "yes", "1", "on"}
_FALSE = {"false", "no", "0", "off"}


def coerce_value(param: Param, raw: Any) -> Any:
    """Convert a raw value (possibly a string from the CLI or YAML) to the parameter's kind."""
    kind = param.kind
    if kind is bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lower() in _TRUE | _FALSE:
            return raw.strip().lower() in _TRUE
    elif kind is int:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lstrip("-").isdigit():
            return int(raw.strip())
    elif kind is list:
        if isinstance(raw, (list, tuple)):
            return list(raw)
        if isinstance(raw, str):
            return [part.strip() for part in raw.split(",") if part.strip()]
    elif kind is dict:
        if isinstance(raw, Mapping):
            return dict(raw)
    else:
        if isinstance(raw, (str, int, float)) and not isinstance(raw, bool):
            return str(raw)
    raise InvalidArgument(f"Parameter '{param.name}' must be of type {kind.__name__}, got {raw!r}")


def _is_empty(value: Any) -> bool:
    return value == "" or (isinstance(value, (list, dict)) and not value)


def validate_params(spec: OperationSpec, params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Check call parameters against an operation's declared parameters.

    Returns:
        The coerced values, with unset optional parameters left out.

    Raises:
        InvalidArgument: On unknown, missing, mistyped or out-of-range parameters.
    """
    known = {p.name for p in spec.params}
    unknown = sorted(set(params) - known)
    if unknown:
        raise InvalidArgument(f"{spec.name}: unknown parameter(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for p in spec.params:
        raw = params.get(p.name)
        if raw is None:
            if p.required:
                raise InvalidArgument(f"No {p.name} given, pass using `{p.name}: ...`")
            continue

        value = coerce_value(p, raw)
        if _is_empty(value):
            if p.required:
                raise InvalidArgument(f"No {p.name} given, pass using `{p.name}: ...`")
            if p.omit_empty:
                continue

        if p.choices is not None and value not in p.choices:
            allowed = ", ".join(str(c) for c in p.choices)
            raise InvalidArgument(f"Invalid {p.name}: '{value}'. Must be one of: {allowed}")

        values[p.name] = value
    return values
