"""Bundled settings and schemas, read through importlib.resources."""

from __future__ import annotations

from importlib import resources
from typing import Any, Dict

import yaml


def read_yaml(name: str) -> Dict[str, Any]:
    """Parse ``nuxt_layers/data/<name>`` as a YAML mapping."""
    text = resources.files(__name__).joinpath(name).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


__all__ = ["read_yaml"]
