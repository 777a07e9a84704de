"""
nuxt-layers - utilities to generate Nuxt layer config

Given a base directory and an ordered hash of layer folders, generates the
``extends``, ``dir``, ``imports.dirs``, ``components``, ``content.sources``,
``alias`` and ``vite.resolve.alias`` entries of a Nuxt config.
"""

import logging

from nuxt_layers.config import get_config
from nuxt_layers.dump import log_config
from nuxt_layers.exceptions import ConfigError, InvalidKeyError, NuxtLayersError
from nuxt_layers.options import AliasFolders, ContentPrefix
from nuxt_layers.registry import NUXT_DIRS, LayerRegistry, use_layers

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"
__all__ = [
    "AliasFolders",
    "ConfigError",
    "ContentPrefix",
    "InvalidKeyError",
    "LayerRegistry",
    "NUXT_DIRS",
    "NuxtLayersError",
    "__version__",
    "get_config",
    "log_config",
    "use_layers",
]
