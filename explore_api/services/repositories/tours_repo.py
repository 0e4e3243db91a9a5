"""Mongo repository for the tours collection (existence lookups only)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from explore_api.db.mongo import TOURS


class ToursRepo:
    """Read-only access to tours keyed by integer ``_id``."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db[TOURS]

    async def find_by_id(self, tour_id: int) -> Optional[Dict[str, Any]]:
        """Return the tour document or None."""
        return await self.col.find_one({'_id': tour_id})
