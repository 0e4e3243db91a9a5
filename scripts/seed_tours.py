"""Seed the 'tours' collection with a few tours for local runs."""

from __future__ import annotations

import asyncio
import os

from motor.motor_asyncio import AsyncIOMotorClient

from explore_api.core.config import settings
from explore_api.db.mongo import TOURS

MONGO_DSN = os.getenv("MONGO_DSN", settings.mongo_dsn)
DBNAME = os.getenv("MONGO_DB", settings.mongo_db)

TOUR_TITLES = [
    "Big Sur Retreat",
    "In the Steps of John Muir",
    "The Death Valley Survivor's Trek",
    "Channel Islands Excursion",
    "Amgen Tour of California Special",
    "Monterey to Santa Barbara Tour",
]


async def main() -> None:
    """Upsert tours with ids 1..N so reruns stay idempotent."""
    client = AsyncIOMotorClient(MONGO_DSN)
    col = client[DBNAME][TOURS]

    for tour_id, title in enumerate(TOUR_TITLES, start=1):
        await col.update_one(
            {"_id": tour_id},
            {"$set": {"title": title}},
            upsert=True,
        )

    print(f"[mongo] tours upserted={len(TOUR_TITLES)} db={DBNAME}")
    client.close()


if __name__ == "__main__":
    asyncio.run(main())
