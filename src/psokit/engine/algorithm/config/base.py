"""Base utilities for swarm configuration."""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any, Dict, Tuple


class _SerializableConfig:
    """Mixin to serialize dataclass configs.

    Coefficient providers are not plain data; they are rendered with repr().
    """

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if isinstance(value, (int, float, str, bool, type(None))):
                out[f.name] = value
            elif isinstance(value, (list, tuple)):
                out[f.name] = [list(item) if isinstance(item, tuple) else item for item in value]
            else:
                out[f.name] = repr(value)
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _require_fields(cfg: Dict[str, Any], required: Tuple[str, ...], name: str) -> None:
    """Validate that required fields are present in configuration."""
    missing = [field for field in required if field not in cfg]
    if missing:
        joined = ", ".join(missing)
        raise ValueError(f"{name} configuration missing required fields: {joined}")
