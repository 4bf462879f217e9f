"""
Resolver selection — pick the process-wide platform directory policy.

The policy comes from the ``platform`` config section and is chosen once,
the first time it is needed (or explicitly at startup)::

    platform:
      policy: identity            # default | editor | identity | module:Class
      editor_directory: Editor
      identity:
        source: mygame.online:session_source
        poll_interval: 0.05
        timeout: 30

Custom policies use ``module.path:ClassName`` notation, the same as
plugin ``impl`` entries; the class is instantiated without arguments.
"""
from __future__ import annotations

import importlib
import logging
from typing import Any, Dict, Optional

from ..errors import ConfigError
from ..services.config_service import get_platform_settings
from .identity import IdentitySource
from .resolver import (
    EDITOR_PLATFORM_DIRECTORY,
    DefaultPlatformResolver,
    EditorPlatformResolver,
    IdentityPlatformResolver,
    PlatformDirectoryResolver,
)

logger = logging.getLogger(__name__)

_ACTIVE_RESOLVER: Optional[PlatformDirectoryResolver] = None


def _import_ref(ref: str) -> Any:
    """Import the object referenced by ``module.path:attr``."""
    module_path, _, attr = ref.partition(":")
    if not attr:
        raise ConfigError(f"Reference '{ref}' must use 'module:attr' format")
    mod = importlib.import_module(module_path)
    return getattr(mod, attr)


def _identity_source_from(settings: Dict[str, Any]) -> IdentitySource:
    ref = settings.get("source")
    if not ref:
        raise ConfigError("platform.identity.source is required for the identity policy")
    source = _import_ref(ref)
    if isinstance(source, type):
        source = source()
    if not isinstance(source, IdentitySource):
        raise ConfigError(f"'{ref}' is not an IdentitySource")
    return source


def _timeout_from(settings: Dict[str, Any]) -> Optional[float]:
    timeout = settings.get("timeout", 30.0)
    if timeout is None:
        return None
    try:
        return float(timeout)
    except (TypeError, ValueError):
        raise ConfigError(f"platform.identity.timeout must be a number or null, got {timeout!r}")


def build_resolver(
    settings: Optional[Dict[str, Any]] = None,
    identity_source: Optional[IdentitySource] = None,
) -> PlatformDirectoryResolver:
    """
    Build a resolver from platform settings.

    Args:
        settings: The ``platform`` config section. Defaults to loaded config.
        identity_source: Source for the identity policy. Overrides
            ``identity.source`` from settings.
    """
    if settings is None:
        settings = get_platform_settings()
    policy = settings.get("policy") or "default"
    if not isinstance(policy, str):
        raise ConfigError(f"Platform policy must be a string, got {policy!r}")

    if policy == "default":
        return DefaultPlatformResolver()
    if policy == "editor":
        return EditorPlatformResolver(settings.get("editor_directory", EDITOR_PLATFORM_DIRECTORY))
    if policy == "identity":
        identity = settings.get("identity") or {}
        source = identity_source or _identity_source_from(identity)
        return IdentityPlatformResolver(
            source,
            poll_interval=float(identity.get("poll_interval", 0.05)),
            timeout=_timeout_from(identity),
        )
    if ":" in policy:
        resolver = _import_ref(policy)()
        if not isinstance(resolver, PlatformDirectoryResolver):
            raise ConfigError(f"'{policy}' is not a PlatformDirectoryResolver")
        return resolver

    raise ConfigError(
        f"Unknown platform policy '{policy}'. Valid: default, editor, identity, module:Class"
    )


def configure_platform_resolver(
    resolver: Optional[PlatformDirectoryResolver] = None,
) -> PlatformDirectoryResolver:
    """Set the process-wide resolver (built from config when not given)."""
    global _ACTIVE_RESOLVER
    _ACTIVE_RESOLVER = resolver or build_resolver()
    logger.info(f"Platform directory policy: {type(_ACTIVE_RESOLVER).__name__}")
    return _ACTIVE_RESOLVER


def get_platform_resolver() -> PlatformDirectoryResolver:
    """Return the process-wide resolver, selecting it on first use."""
    if _ACTIVE_RESOLVER is None:
        return configure_platform_resolver()
    return _ACTIVE_RESOLVER


def reset_platform_resolver() -> None:
    """Forget the selected resolver (primarily for tests)."""
    global _ACTIVE_RESOLVER
    _ACTIVE_RESOLVER = None


def get_platform_directory() -> str:
    """Resolve the platform directory with the active policy."""
    return get_platform_resolver().resolve()


async def get_platform_directory_async() -> str:
    """Resolve the platform directory with the active policy, waiting if needed."""
    return await get_platform_resolver().resolve_async()
