from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping


class NuxtLayersError(Exception):
    """Base exception for nuxt-layers."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidKeyError(NuxtLayersError, KeyError):
    """Raised when an operation references a layer key the registry does not hold."""

    def __init__(
        self,
        key: str,
        *,
        available: Iterable[str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx.setdefault("key", key)
        if available is not None:
            ctx.setdefault("available", list(available))
        message = f'Invalid layer "{key}"'
        NuxtLayersError.__init__(self, message, context=ctx)
        KeyError.__init__(self, message)
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class ConfigError(NuxtLayersError, ValueError):
    """Raised when configuration overrides are malformed or fail validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        NuxtLayersError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "NuxtLayersError",
    "InvalidKeyError",
    "ConfigError",
]
