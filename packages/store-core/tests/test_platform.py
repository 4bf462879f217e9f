"""Tests for platform directory resolvers and policy selection."""
import asyncio
from dataclasses import dataclass

import pytest

from store_core.errors import ConfigError, IdentityUnavailableError
from store_core.platform import (
    DEFAULT_PLATFORM_DIRECTORY,
    DefaultPlatformResolver,
    EditorPlatformResolver,
    IdentityPlatformResolver,
    IdentitySource,
    PlatformDirectoryResolver,
    StaticIdentitySource,
    build_resolver,
    configure_platform_resolver,
    get_platform_directory,
    get_platform_directory_async,
    get_platform_resolver,
)


@dataclass
class FakeSession:
    account_id: int
    is_logged_in: bool = True


class FixedResolver(PlatformDirectoryResolver):
    def resolve(self) -> str:
        return "fixed"


# Referenced by import path from config tests
session_source = StaticIdentitySource(FakeSession(account_id=76561198000000001))


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------

class TestResolvers:
    def test_default_is_root(self):
        assert DefaultPlatformResolver().resolve() == DEFAULT_PLATFORM_DIRECTORY == ""

    def test_editor_literal(self):
        assert EditorPlatformResolver().resolve() == "Editor"
        assert EditorPlatformResolver("Debug").resolve() == "Debug"

    @pytest.mark.asyncio
    async def test_async_defaults_to_sync(self):
        assert await EditorPlatformResolver().resolve_async() == "Editor"


class TestIdentityResolver:
    def test_logged_in_account_id(self):
        source = StaticIdentitySource(FakeSession(account_id=42))
        assert IdentityPlatformResolver(source).resolve() == "42"

    def test_no_session_raises(self):
        with pytest.raises(IdentityUnavailableError):
            IdentityPlatformResolver(StaticIdentitySource()).resolve()

    def test_logged_out_session_raises(self):
        source = StaticIdentitySource(FakeSession(account_id=42, is_logged_in=False))
        with pytest.raises(IdentityUnavailableError):
            IdentityPlatformResolver(source).resolve()

    @pytest.mark.asyncio
    async def test_waits_for_login(self):
        source = StaticIdentitySource()
        resolver = IdentityPlatformResolver(source, poll_interval=0.01, timeout=5)

        async def login_later():
            await asyncio.sleep(0.03)
            source.set_session(FakeSession(account_id=7))

        task = asyncio.create_task(login_later())
        assert await resolver.resolve_async() == "7"
        await task

    @pytest.mark.asyncio
    async def test_times_out(self):
        resolver = IdentityPlatformResolver(StaticIdentitySource(), poll_interval=0.01, timeout=0.05)
        with pytest.raises(IdentityUnavailableError):
            await resolver.resolve_async()

    @pytest.mark.asyncio
    async def test_unbounded_wait_can_be_cancelled(self):
        resolver = IdentityPlatformResolver(StaticIdentitySource(), poll_interval=0.01, timeout=None)
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(resolver.resolve_async(), timeout=0.05)

    def test_custom_source(self):
        class Source(IdentitySource):
            def current(self):
                return FakeSession(account_id="abc")

        assert IdentityPlatformResolver(Source()).resolve() == "abc"


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestBuildResolver:
    def test_default_policy(self):
        assert isinstance(build_resolver({}), DefaultPlatformResolver)

    def test_editor_policy(self):
        r = build_resolver({"policy": "editor", "editor_directory": "Dev"})
        assert isinstance(r, EditorPlatformResolver)
        assert r.resolve() == "Dev"

    def test_identity_policy_with_source(self):
        source = StaticIdentitySource(FakeSession(account_id=1))
        r = build_resolver({"policy": "identity", "identity": {"timeout": 2}}, identity_source=source)
        assert isinstance(r, IdentityPlatformResolver)
        assert r.timeout == 2
        assert r.resolve() == "1"

    def test_identity_policy_imports_source(self):
        r = build_resolver({
            "policy": "identity",
            "identity": {"source": "test_platform:session_source", "timeout": None},
        })
        assert r.timeout is None
        assert r.resolve() == "76561198000000001"

    def test_identity_policy_requires_source(self):
        with pytest.raises(ConfigError, match="source"):
            build_resolver({"policy": "identity"})

    def test_custom_class_policy(self):
        r = build_resolver({"policy": "test_platform:FixedResolver"})
        assert r.resolve() == "fixed"

    def test_unknown_policy(self):
        with pytest.raises(ConfigError, match="Unknown platform policy"):
            build_resolver({"policy": "console"})


class TestActiveResolver:
    def test_selected_from_config(self, write_config):
        write_config("platform:\n  policy: editor\n")
        assert get_platform_directory() == "Editor"

    def test_selected_once(self, write_config):
        write_config("platform:\n  policy: editor\n")
        first = get_platform_resolver()
        write_config("platform:\n  policy: default\n")
        assert get_platform_resolver() is first

    def test_configure_explicit(self):
        configure_platform_resolver(FixedResolver())
        assert get_platform_directory() == "fixed"

    @pytest.mark.asyncio
    async def test_async_directory(self):
        configure_platform_resolver(EditorPlatformResolver("Async"))
        assert await get_platform_directory_async() == "Async"


class TestBuildResolverValues:
    def test_null_policy_is_default(self):
        assert isinstance(build_resolver({"policy": None}), DefaultPlatformResolver)

    def test_non_string_policy(self):
        with pytest.raises(ConfigError, match="must be a string"):
            build_resolver({"policy": 3})

    def test_string_timeout_converted(self):
        source = StaticIdentitySource(FakeSession(account_id=1))
        r = build_resolver({"policy": "identity", "identity": {"timeout": "2.5"}}, identity_source=source)
        assert r.timeout == 2.5

    def test_bad_timeout(self):
        source = StaticIdentitySource(FakeSession(account_id=1))
        with pytest.raises(ConfigError, match="timeout"):
            build_resolver({"policy": "identity", "identity": {"timeout": "soon"}}, identity_source=source)
