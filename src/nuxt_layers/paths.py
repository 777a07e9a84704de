"""Path helpers.

Nuxt configuration paths are always POSIX-style, regardless of the host OS,
so joining is done on strings with ``posixpath`` rather than ``pathlib``.
"""
from __future__ import annotations

import os
import posixpath
import re
from typing import List, Sequence, Union

PathSegment = Union[str, "os.PathLike[str]"]

_MULTI_SLASH = re.compile(r"/{2,}")


def to_posix(segment: PathSegment) -> str:
    """Return ``segment`` as a string with ``\\`` separators converted to ``/``."""
    return os.fspath(segment).replace("\\", "/")


def join(*segments: PathSegment) -> str:
    """Join path segments and normalise the result.

    Empty segments are skipped, an absolute later segment is appended rather
    than restarting the path, ``.`` and ``..`` are resolved and a trailing
    slash on the last segment is kept.

    Example:
        >>> join("layers/blog", "assets")
        'layers/blog/assets'
        >>> join("/projects/project", "core", "")
        '/projects/project/core'
    """
    parts = [to_posix(s) for s in segments]
    parts = [p for p in parts if p]
    if not parts:
        return "."
    joined = _MULTI_SLASH.sub("/", "/".join(parts))
    normalized = posixpath.normpath(joined)
    if joined.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return normalized


def split_keys(value: Union[str, Sequence[str]]) -> List[str]:
    """Turn ``"core site"`` (or a list of keys) into a list of layer keys."""
    if isinstance(value, str):
        return value.split()
    return list(value)


__all__ = ["join", "split_keys", "to_posix"]
