"""Option variants for ``content_sources(prefix)`` and ``alias(prefix, folders)``.

Both parameters accept loose values (``"auto"``, ``True``, ``False``, a
mapping, a list of folders). They are coerced once into a small tagged value
so the registry can branch on an explicit mode.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from nuxt_layers.exceptions import InvalidKeyError
from nuxt_layers.paths import split_keys


class PrefixMode(str, Enum):
    AUTO = "auto"
    OFF = "off"
    ON_FOR_ALL = "on"
    REMAP_BY_KEY = "remap"


@dataclass(frozen=True)
class ContentPrefix:
    """How ``content_sources`` prefixes each layer's route.

    - AUTO: no prefix for the first layer, ``/<key>`` for the rest
    - OFF: never prefix
    - ON_FOR_ALL: ``/<key>`` for every layer
    - REMAP_BY_KEY: ``/<remap[key]>`` for every layer
    """

    mode: PrefixMode
    remap: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def auto(cls) -> "ContentPrefix":
        return cls(PrefixMode.AUTO)

    @classmethod
    def off(cls) -> "ContentPrefix":
        return cls(PrefixMode.OFF)

    @classmethod
    def on_for_all(cls) -> "ContentPrefix":
        return cls(PrefixMode.ON_FOR_ALL)

    @classmethod
    def remap_by_key(cls, remap: Mapping[str, str]) -> "ContentPrefix":
        return cls(PrefixMode.REMAP_BY_KEY, MappingProxyType(dict(remap)))

    @classmethod
    def coerce(cls, value: Any) -> "ContentPrefix":
        """Build a ContentPrefix from ``"auto"``, a bool, a mapping or any truthy value."""
        if isinstance(value, ContentPrefix):
            return value
        if isinstance(value, str) and value == PrefixMode.AUTO.value:
            return cls.auto()
        if isinstance(value, Mapping):
            return cls.remap_by_key(value)
        if not value:
            return cls.off()
        return cls.on_for_all()

    def resolve(self, key: str, index: int) -> Optional[str]:
        """Return the prefix for the layer ``key`` at ``index``, or None to omit it."""
        if self.mode is PrefixMode.AUTO:
            return None if index == 0 else f"/{key}"
        if self.mode is PrefixMode.OFF:
            return None
        if self.mode is PrefixMode.ON_FOR_ALL:
            return f"/{key}"
        if self.mode is PrefixMode.REMAP_BY_KEY:
            if key not in self.remap:
                raise InvalidKeyError(
                    key,
                    available=self.remap.keys(),
                    context={"option": "content_sources.prefix"},
                )
            return f"/{self.remap[key]}"
        raise AssertionError(f"Unhandled prefix mode: {self.mode!r}")


class FoldersMode(str, Enum):
    DEFAULT = "default"
    NAMED = "named"


@dataclass(frozen=True)
class AliasFolders:
    """Folder set for ``alias(prefix, folders)``: the auto-import defaults or named folders."""

    mode: FoldersMode
    names: Tuple[str, ...] = ()

    @classmethod
    def default(cls) -> "AliasFolders":
        return cls(FoldersMode.DEFAULT)

    @classmethod
    def named(cls, names: Sequence[str]) -> "AliasFolders":
        return cls(FoldersMode.NAMED, tuple(names))

    @classmethod
    def coerce(cls, value: Any) -> Optional["AliasFolders"]:
        """Return None for "alias every layer", otherwise the folder variant.

        ``None``, ``False`` and ``""`` mean layer mode; ``True`` selects the
        defaults; a non-empty string is split on whitespace.
        """
        if isinstance(value, AliasFolders):
            return value
        if value is None or value is False or value == "":
            return None
        if value is True:
            return cls.default()
        return cls.named(split_keys(value))

    def folders(self, defaults: Sequence[str]) -> List[str]:
        if self.mode is FoldersMode.DEFAULT:
            return list(defaults)
        if self.mode is FoldersMode.NAMED:
            return list(self.names)
        raise AssertionError(f"Unhandled folders mode: {self.mode!r}")


__all__ = [
    "AliasFolders",
    "ContentPrefix",
    "FoldersMode",
    "PrefixMode",
]
