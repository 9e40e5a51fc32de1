"""Status snapshot model parsed from the host's JSON payload"""
import json
import math
from dataclasses import dataclass
from typing import Any, Optional

from dev_statusline.constants import DEFAULT_MODEL_NAME
from dev_statusline.exceptions import SnapshotError

_MISSING = object()


def _lookup(data: Any, *keys: str) -> Any:
    """Walk nested mappings, returning _MISSING if any step is absent."""
    current = data
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return _MISSING if current is None else current


def _as_str(value: Any, default: str) -> str:
    if value is _MISSING or isinstance(value, (dict, list)):
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    # Each snapshot field renders on a single line
    return " ".join(str(value).splitlines())


def _as_float(value: Any, default: float) -> float:
    if value is _MISSING or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def _as_int(value: Any, default: int) -> int:
    # Fractional values are truncated toward zero
    result = _as_float(value, float(default))
    return int(result)


@dataclass
class StatusSnapshot:
    """One render request from the host."""
    model_name: str = DEFAULT_MODEL_NAME
    current_dir: str = ""
    project_dir: str = ""
    used_percentage: int = 0
    total_cost_usd: float = 0.0
    total_duration_ms: int = 0
    lines_added: int = 0
    lines_removed: int = 0
    version: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "StatusSnapshot":
        """Build a snapshot from decoded JSON, defaulting every missing field."""
        return cls(
            model_name=_as_str(_lookup(data, "model", "display_name"), DEFAULT_MODEL_NAME),
            current_dir=_as_str(_lookup(data, "workspace", "current_dir"), ""),
            project_dir=_as_str(_lookup(data, "workspace", "project_dir"), ""),
            used_percentage=_as_int(_lookup(data, "context_window", "used_percentage"), 0),
            total_cost_usd=_as_float(_lookup(data, "cost", "total_cost_usd"), 0.0),
            total_duration_ms=_as_int(_lookup(data, "cost", "total_duration_ms"), 0),
            lines_added=_as_int(_lookup(data, "cost", "total_lines_added"), 0),
            lines_removed=_as_int(_lookup(data, "cost", "total_lines_removed"), 0),
            version=_as_str(_lookup(data, "version"), ""),
        )

    @classmethod
    def from_json(cls, payload: Optional[str]) -> "StatusSnapshot":
        """Decode a JSON document into a snapshot.

        Raises:
            SnapshotError: If the payload is not valid JSON
        """
        if not payload or not payload.strip():
            raise SnapshotError("empty input")
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise SnapshotError(str(e)) from e
        if not isinstance(data, dict):
            raise SnapshotError(f"expected a JSON object, got {type(data).__name__}")
        return cls.from_dict(data)
