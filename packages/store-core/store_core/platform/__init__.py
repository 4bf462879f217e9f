"""
Platform directory resolution.

Usage:
    from store_core.platform import configure_platform_resolver, EditorPlatformResolver

    # At startup, once
    configure_platform_resolver(EditorPlatformResolver())

    # Anywhere later
    directory = get_platform_directory()
"""
from .identity import IdentitySession, IdentitySource, StaticIdentitySource
from .resolver import (
    DEFAULT_PLATFORM_DIRECTORY,
    EDITOR_PLATFORM_DIRECTORY,
    DefaultPlatformResolver,
    EditorPlatformResolver,
    IdentityPlatformResolver,
    PlatformDirectoryResolver,
)
from .selection import (
    build_resolver,
    configure_platform_resolver,
    get_platform_directory,
    get_platform_directory_async,
    get_platform_resolver,
    reset_platform_resolver,
)

__all__ = [
    # Identity
    "IdentitySession",
    "IdentitySource",
    "StaticIdentitySource",
    # Resolvers
    "DEFAULT_PLATFORM_DIRECTORY",
    "EDITOR_PLATFORM_DIRECTORY",
    "PlatformDirectoryResolver",
    "DefaultPlatformResolver",
    "EditorPlatformResolver",
    "IdentityPlatformResolver",
    # Selection
    "build_resolver",
    "configure_platform_resolver",
    "get_platform_resolver",
    "reset_platform_resolver",
    "get_platform_directory",
    "get_platform_directory_async",
]
