"""Single config object: passed to create_context() or endpoint(); shapes rendered bodies."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """
    Response rendering options.
    Defaults give compact JSON and a utf-8 text/plain type for str bodies.
    """

    json_ensure_ascii: bool = False
    json_sort_keys: bool = False
    json_indent: int | None = None
    text_media_type: str = "text/plain; charset=utf-8"

    @classmethod
    def load_from_env(cls, prefix: str = "EXPRESSO_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for Config(**Config.load_from_env())."""
        result = dict(defaults)
        known = {f.name for f in fields(cls)}
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                if name in known:
                    result[name] = value
        return result

    @classmethod
    def from_env(cls, prefix: str = "EXPRESSO_", **defaults: Any) -> Config:
        """Typed Config from the environment; raw strings are coerced to field types."""
        raw = cls.load_from_env(prefix, **defaults)
        values: dict[str, Any] = {}
        for name, value in raw.items():
            if not isinstance(value, str):
                values[name] = value
            elif name in ("json_ensure_ascii", "json_sort_keys"):
                values[name] = value.strip().lower() in _TRUE
            elif name == "json_indent":
                values[name] = int(value) if value.strip() else None
            else:
                values[name] = value
        return cls(**values)
