from __future__ import annotations
import json
from pathlib import Path
from typing import Any

import yaml

def read_json(path: Path, default: Any) -> Any:
    if not Path(path).exists():
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def read_yaml(path: Path, default: Any) -> Any:
    if not Path(path).exists():
        return default
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return default if data is None else data

def read_document(path: Path, default: Any) -> Any:
    """Read a JSON or YAML document, picked by file suffix."""
    if Path(path).suffix.lower() in (".yaml", ".yml"):
        return read_yaml(path, default)
    return read_json(path, default)
