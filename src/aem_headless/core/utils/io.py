"""IO helpers for query and variables files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def load_structured(path: str | Path) -> Any:
    """Load a JSON or YAML (by suffix) document."""
    p = Path(path)
    data = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(data) or {}
    return json.loads(data)


def read_query(path: str | Path) -> str:
    query = Path(path).read_text(encoding="utf-8").strip()
    if not query:
        raise ValueError(f"Query file is empty: {path}")
    return query
