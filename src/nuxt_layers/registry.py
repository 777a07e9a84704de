"""Nuxt layers helper.

A ``LayerRegistry`` holds a base directory and an ordered mapping of layer
keys to base-relative folders, and generates the layer and path specific
pieces of a ``nuxt.config`` from them. Methods are named after the config
they provide.

Example::

    layers = use_layers(__dirname, {
        "core": "core",
        "blog": "layers/blog",
        "site": "layers/site",
    })
    layers.extends()              # ['core', 'layers/blog', 'layers/site']
    layers.only("site").alias("~/", ["public", "pages"])
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, TypeVar, Union

from nuxt_layers.config import auto_import_folders, get_config
from nuxt_layers.exceptions import InvalidKeyError
from nuxt_layers.options import AliasFolders, ContentPrefix
from nuxt_layers.paths import PathSegment, join, split_keys, to_posix

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Known ``config.dir`` keys; dir() does not restrict folders to these.
NUXT_DIRS = (
    "assets",
    "layouts",
    "middleware",
    "modules",
    "pages",
    "plugins",
    "public",
)

LayerCallback = Callable[[str, str, str, int], T]


@dataclass(frozen=True)
class LayerRegistry:
    """Immutable base directory + ordered layer mapping.

    Attributes:
        base_dir: Absolute path of the folder holding ``nuxt.config``
        layers: Read-only mapping of layer key to base-relative folder
    """

    base_dir: str
    layers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_dir", to_posix(self.base_dir))
        copied = {str(key): to_posix(path) for key, path in self.layers.items()}
        object.__setattr__(self, "layers", MappingProxyType(copied))

    # ------------------------------------------------------------------
    # Mapping-ish helpers
    # ------------------------------------------------------------------

    def keys(self) -> List[str]:
        return list(self.layers.keys())

    def __len__(self) -> int:
        return len(self.layers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.layers)

    def __contains__(self, key: object) -> bool:
        return key in self.layers

    def assert_layer_key(self, key: str) -> None:
        """Raise InvalidKeyError unless ``key`` is a layer of this registry."""
        if key not in self.layers:
            raise InvalidKeyError(key, available=self.layers.keys())

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def relative_path(self, key: str, folder: PathSegment = "") -> str:
        """Get the relative path for a layer, or one of its folders.

        Args:
            key: A valid layer key, i.e. ``"core"``
            folder: A folder within the layer, i.e. ``"assets"``
        """
        self.assert_layer_key(key)
        return join(self.layers[key], folder)

    def absolute_path(self, key: str, folder: PathSegment = "") -> str:
        """Get the absolute path for a layer, or one of its folders."""
        self.assert_layer_key(key)
        return join(self.base_dir, self.layers[key], folder)

    rel = relative_path
    abs = absolute_path

    # ------------------------------------------------------------------
    # Config generators
    # ------------------------------------------------------------------

    def extends(self) -> List[str]:
        """Generate ``config.extends`` layer folders array."""
        return list(self.layers.values())

    def dir(self, key: str, folders: Sequence[str]) -> Dict[str, str]:
        """Generate a partial ``config.dir`` relative folders hash.

        Args:
            key: A valid layer key, i.e. ``"core"``
            folders: ``config.dir`` folder keys, i.e. ``["assets", "plugins"]``
        """
        self.assert_layer_key(key)
        return {folder: self.relative_path(key, folder) for folder in folders}

    def dir_path(self, key: str, folder: Optional[str] = None) -> str:
        """Generate a single ``config.dir`` relative path."""
        return self.relative_path(key, folder or "")

    def imports_dirs(self, folders: Optional[Sequence[str]] = None) -> List[str]:
        """Generate ``config.imports.dirs``: every folder of every layer, layer by layer."""
        names = list(folders) if folders is not None else auto_import_folders()
        return [join(path, folder) for path in self.layers.values() for folder in names]

    def components(
        self,
        options: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> List[Union[str, Dict[str, Any]]]:
        """Generate the ``config.components`` array.

        With no options each entry is a ``~/<layer>/components`` string;
        otherwise each entry is ``{"path": ..., **options}``.

        Args:
            options: Component dir options, i.e. ``{"pathPrefix": False, "prefix": "Custom"}``
            **kwargs: Merged over ``options``
        """
        opts: Dict[str, Any] = dict(options or {})
        opts.update(kwargs)
        cfg = get_config()["components"]
        output: List[Union[str, Dict[str, Any]]] = []
        for path in self.layers.values():
            dir_path = cfg["pathPrefix"] + join(path, cfg["folder"])
            output.append({"path": dir_path, **opts} if opts else dir_path)
        return output

    def content_sources(self, prefix: Any = "auto") -> Dict[str, Dict[str, str]]:
        """Generate ``config.content.sources`` file-system sources.

        Args:
            prefix: ``"auto"`` to leave the first layer unprefixed and prefix the
                rest with ``/<key>``; ``False`` for no prefixes; ``True`` to
                prefix every layer; or a ``{key: prefix}`` mapping.
        """
        mode = ContentPrefix.coerce(prefix)
        cfg = get_config()["content"]
        output: Dict[str, Dict[str, str]] = {}
        for index, key in enumerate(self.layers):
            source: Dict[str, str] = {}
            resolved = mode.resolve(key, index)
            if resolved is not None:
                source["prefix"] = resolved
            source["base"] = self.absolute_path(key, cfg["folder"])
            source["driver"] = cfg["driver"]
            output[key] = source
        return output

    def alias(self, prefix: Optional[str] = None, folders: Any = None) -> Dict[str, str]:
        """Generate a ``config.alias`` hash.

        Without ``folders``, aliases every layer's root: ``{prefix + key: abs}``.
        With ``folders`` (``True`` for the auto-import folders, or a list),
        aliases those folders of the *first* layer only; use ``only()`` to
        choose the layer.

        Args:
            prefix: Alias prefix, i.e. ``"#"`` or ``"~/"``
            folders: Optional ``True`` or list of folder names
        """
        cfg = get_config()
        if prefix is None:
            prefix = cfg["alias"]["prefix"]
        variant = AliasFolders.coerce(folders)
        output: Dict[str, str] = {}
        if variant is None:
            for key in self.layers:
                output[prefix + key] = self.absolute_path(key)
            return output

        first = next(iter(self.layers), None)
        if first is None:
            return output
        for folder in variant.folders(auto_import_folders()):
            output[prefix + folder] = self.absolute_path(first, folder)
        return output

    @staticmethod
    def vite_resolve_alias(aliases: Mapping[str, str]) -> List[Dict[str, str]]:
        """Generate ``config.vite.resolve.alias`` entries from a ``config.alias`` hash.

        The array form is used as the object form is not picked up.
        """
        return [{"find": find, "replacement": replacement} for find, replacement in aliases.items()]

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    def only(self, filter: Union[str, Sequence[str]]) -> "LayerRegistry":
        """Return a new registry with only the chosen layers, in the order given.

        Args:
            filter: A space-delimited string of layer keys, or a list of keys
        """
        keys = split_keys(filter)
        for key in keys:
            self.assert_layer_key(key)
        filtered = {key: self.layers[key] for key in keys}
        logger.debug("Filtered layers %s -> %s", self.keys(), list(filtered))
        return LayerRegistry(self.base_dir, filtered)

    def generic_object(self, callback: LayerCallback[T]) -> Dict[str, T]:
        """Build a ``{key: callback(key, rel, abs, index)}`` hash over all layers."""
        return {
            key: callback(key, self.relative_path(key), self.absolute_path(key), index)
            for index, key in enumerate(self.layers)
        }

    def generic_array(self, callback: LayerCallback[T]) -> List[T]:
        """Build a ``[callback(key, rel, abs, index), ...]`` list over all layers."""
        return [
            callback(key, self.relative_path(key), self.absolute_path(key), index)
            for index, key in enumerate(self.layers)
        ]

    obj = generic_object
    arr = generic_array


def use_layers(base_dir: PathSegment, layers: Mapping[str, PathSegment]) -> LayerRegistry:
    """Create a layer helper.

    Args:
        base_dir: The absolute path to the folder holding ``nuxt.config``
        layers: Layer keys mapped to ``base_dir``-relative folders; order is
            significant and is kept by every generated list
    """
    registry = LayerRegistry(to_posix(base_dir), dict(layers))
    logger.debug("Created layer registry at %s with layers %s", registry.base_dir, registry.keys())
    return registry


__all__ = ["LayerRegistry", "NUXT_DIRS", "use_layers"]
