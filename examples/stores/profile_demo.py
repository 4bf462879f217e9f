"""
Profile Store Demo — save, reload and upgrade a versioned profile.

Usage (in-memory, nothing written to disk):
    python examples/stores/profile_demo.py

Usage (local disk under ./demo-data):
    python examples/stores/profile_demo.py --disk
"""
from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from pydantic import BaseModel

from store_core.persistence import InMemoryFileAccess, LocalFileAccess
from store_core.platform import IdentityPlatformResolver, StaticIdentitySource
from store_core.store import StoreDescriptor, VersionedStore


class Profile(BaseModel):
    name: str
    level: int = 1
    version: int = 2
    title: str = "Novice"

    def current_version(self) -> int:
        return self.version

    def latest_version(self) -> int:
        return 2

    def upgrade(self) -> None:
        self.title = "Veteran" if self.level >= 10 else "Novice"
        self.version = 2


class Session:
    def __init__(self, account_id: int):
        self.account_id = account_id
        self.is_logged_in = False


async def main(use_disk: bool = False):
    if use_disk:
        access = LocalFileAccess(Path("demo-data"))
        print(f"Using LocalFileAccess at {access.base_dir.resolve()}")
    else:
        access = InMemoryFileAccess()
        print("Using InMemoryFileAccess (in-process, no persistence)")

    session = Session(account_id=1001)
    resolver = IdentityPlatformResolver(StaticIdentitySource(session), poll_interval=0.1, timeout=5)
    store = VersionedStore(Profile, StoreDescriptor(file_name="profile"), access, resolver)

    # 1. Save into the account directory once the login completes
    print("\n--- Waiting for login ---")

    async def login():
        await asyncio.sleep(0.3)
        session.is_logged_in = True
        print("  Logged in as 1001")

    login_task = asyncio.create_task(login())
    await store.save_to_platform_directory_async(Profile(name="Ada", level=12))
    await login_task
    print(f"  Saved {store.store_path('1001')}")

    # 2. Write an old (v1) profile by hand and load it back
    print("\n--- Loading an outdated profile ---")
    access.write_text(store.store_path("legacy"), json.dumps({"name": "Grace", "level": 15, "version": 1}))
    result = await store.load_async("legacy")
    print(f"  upgraded={result.upgraded} value={result.value.model_dump()}")

    # 3. Delete twice
    print("\n--- Deleting ---")
    print(f"  first:  {store.delete_store('legacy')}")
    print(f"  second: {store.delete_store('legacy')}")


if __name__ == "__main__":
    asyncio.run(main(use_disk="--disk" in sys.argv))
