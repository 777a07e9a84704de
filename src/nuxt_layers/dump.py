"""Debug output for generated config."""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional, TypeVar

from rich.console import Console
from rich.pretty import Pretty

from nuxt_layers.config import get_config

logger = logging.getLogger(__name__)

T = TypeVar("T")


def log_config(
    config: T,
    *,
    depth: Optional[int] = None,
    colors: Optional[bool] = None,
    file: Optional[IO[str]] = None,
) -> T:
    """Pretty-print ``config`` to stderr and return it unchanged.

    Wrap any expression to see what it produces::

        dir=log_config(layers.dir("core", ["plugins"]))

    Depth and colour default to the ``debug`` settings. Rendering problems are
    logged and never raised.
    """
    try:
        settings = get_config()["debug"]
        use_colors = settings["colors"] if colors is None else colors
        console = Console(
            file=file if file is not None else sys.stderr,
            force_terminal=use_colors,
            color_system="standard" if use_colors else None,
            no_color=not use_colors,
            soft_wrap=True,
        )
        console.print(
            Pretty(
                config,
                max_depth=settings["depth"] if depth is None else depth,
                expand_all=True,
                indent_guides=False,
            )
        )
    except Exception:
        logger.warning("Could not render config for debugging", exc_info=True)
    return config


__all__ = ["log_config"]
