"""
nuxt-layers settings.

Fixed defaults (auto-import folders, components and content folders, the
content driver, the alias prefix, dump depth and colours) ship as
``data/config/defaults.yaml`` and are validated once against
``data/schemas/config.schema.yaml``. Nothing outside the package is read.
"""
from __future__ import annotations

import copy
from functools import lru_cache
from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from nuxt_layers.data import read_yaml
from nuxt_layers.exceptions import ConfigError


def validate_config(cfg: Dict[str, Any]) -> None:
    """Validate ``cfg`` against the bundled schema, raising ConfigError."""
    validator = Draft202012Validator(read_yaml("schemas/config.schema.yaml"))
    errors = sorted(validator.iter_errors(cfg), key=lambda e: [str(p) for p in e.path])
    if not errors:
        return
    first = errors[0]
    location = "/".join(str(p) for p in first.path) or "<root>"
    raise ConfigError(
        f"Invalid nuxt-layers configuration at {location}: {first.message}",
        context={"path": location, "errors": [e.message for e in errors]},
    )


@lru_cache(maxsize=1)
def _defaults() -> Dict[str, Any]:
    cfg = read_yaml("config/defaults.yaml")
    validate_config(cfg)
    return cfg


def get_config() -> Dict[str, Any]:
    """Return the bundled settings (a copy; safe to mutate)."""
    return copy.deepcopy(_defaults())


def auto_import_folders() -> List[str]:
    """Folders Nuxt auto-imports from: ``components``, ``composables``, ``utils``."""
    return list(_defaults()["layers"]["autoImports"])


__all__ = [
    "auto_import_folders",
    "get_config",
    "validate_config",
]
