"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import os
from dataclasses import dataclass

from wren.errors import ConfigurationError


def _parse_methods(raw: str) -> frozenset[str]:
    return frozenset(m.strip().upper() for m in raw.split(",") if m.strip())


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    msg = f"Expected a boolean, got {raw!r}"
    raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strip_trailing_slash=False)
    """

    # Treat "/users/" and "/users" alike (root "/" is never stripped)
    strip_trailing_slash: bool = True

    # Methods a route accepts when none are given
    default_methods: frozenset[str] = frozenset({"GET", "HEAD"})

    # Restrict registrable methods; None accepts any token
    allowed_methods: frozenset[str] | None = None

    @classmethod
    def from_env(cls, prefix: str = "WREN_") -> "RouterConfig":
        """Build a config from ``{prefix}*`` environment variables.

        Recognised: ``STRIP_TRAILING_SLASH``, ``DEFAULT_METHODS`` and
        ``ALLOWED_METHODS`` (comma-separated method lists).
        """
        kwargs: dict[str, object] = {}
        if (raw := os.environ.get(f"{prefix}STRIP_TRAILING_SLASH")) is not None:
            kwargs["strip_trailing_slash"] = _parse_bool(raw)
        if (raw := os.environ.get(f"{prefix}DEFAULT_METHODS")) is not None:
            kwargs["default_methods"] = _parse_methods(raw)
        if (raw := os.environ.get(f"{prefix}ALLOWED_METHODS")) is not None:
            kwargs["allowed_methods"] = _parse_methods(raw) or None
        return cls(**kwargs)  # type: ignore[arg-type]
