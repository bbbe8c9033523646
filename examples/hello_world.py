"""
firebase_store — Hello World

Swap a client manager's in-memory database for a Firebase Realtime
Database, then read and write a few keys.

    FIREBASE_DATABASE_URL=https://<project>-default-rtdb.firebaseio.com \
        python examples/hello_world.py
"""

import asyncio
import logging

from firebase_store import (
    ABSENT,
    ClientManager,
    FirebasePlugin,
    ManagerOptions,
    PluginConfigError,
)


async def main():
    logging.basicConfig(level=logging.INFO)

    # ──────────────────────────────────────
    #  1. Create the manager
    # ──────────────────────────────────────
    manager = ClientManager(ManagerOptions(client_id="hello.world#1"))

    # ──────────────────────────────────────
    #  2. Load the plugin (URL from FIREBASE_DATABASE_URL)
    # ──────────────────────────────────────
    try:
        manager.use(FirebasePlugin())
    except PluginConfigError as e:
        print(e)
        return

    db = manager.database
    print(f"Namespace root: {db.namespace}")

    # ──────────────────────────────────────
    #  3. Read and write
    # ──────────────────────────────────────
    await db.set("settings.volume", 42)
    await db.set("settings.greeting", "hello")
    await db.push("history", {"track": "intro"})

    print("volume   =", await db.get("settings.volume"))
    print("greeting =", await db.get("settings.greeting"))
    print("history  =", await db.get("history"))

    await db.delete("history")
    print("history after delete is absent:", await db.get("history") is ABSENT)

    # ──────────────────────────────────────
    #  4. Unload: the default database comes back
    # ──────────────────────────────────────
    manager.remove(FirebasePlugin.name)
    print("Active database:", type(manager.database).__name__)


if __name__ == "__main__":
    asyncio.run(main())
