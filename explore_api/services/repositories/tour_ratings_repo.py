"""Mongo repository for the tour_ratings collection."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from explore_api.db.mongo import TOUR_RATINGS
from explore_api.models.paging import PageRequest
from explore_api.models.ratings import RatingKey, TourRating

CUSTOMER_ID = 'customer_id'
NO_ID = {'_id': 0}


def _key_filter(key: RatingKey) -> Dict[str, int]:
    return {'tour_id': key.tour_id, CUSTOMER_ID: key.customer_id}


def _to_rating(doc: Dict[str, Any]) -> TourRating:
    return TourRating(
        key=RatingKey(doc['tour_id'], doc[CUSTOMER_ID]),
        score=doc.get('score'),
        comment=doc.get('comment'),
    )


class TourRatingsRepo:
    """Lookups by tour and by composite key, save and delete."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db[TOUR_RATINGS]

    async def find_by_tour_id(self, tour_id: int) -> List[TourRating]:
        """All ratings of a tour, unpaged."""
        cursor = self.col.find({'tour_id': tour_id}, NO_ID)
        return [_to_rating(doc) async for doc in cursor]

    async def find_page_by_tour_id(
        self,
        tour_id: int,
        page: PageRequest,
    ) -> List[TourRating]:
        """One page of a tour's ratings in the requested order."""
        sort = page.mongo_sort()
        if CUSTOMER_ID not in {name for name, _ in sort}:
            # stable pages when the requested keys tie
            sort.append((CUSTOMER_ID, 1))
        cursor = (
            self.col.find({'tour_id': tour_id}, NO_ID)
            .sort(sort)
            .skip(page.offset)
            .limit(page.size)
        )
        return [_to_rating(doc) async for doc in cursor]

    async def find_by_key(self, key: RatingKey) -> Optional[TourRating]:
        """Rating for (tour, customer) or None."""
        doc = await self.col.find_one(_key_filter(key), NO_ID)
        return _to_rating(doc) if doc else None

    async def save(self, rating: TourRating) -> TourRating:
        """Insert or overwrite the rating stored under its key."""
        await self.col.replace_one(
            _key_filter(rating.key),
            {
                **_key_filter(rating.key),
                'score': rating.score,
                'comment': rating.comment,
            },
            upsert=True,
        )
        return rating

    async def delete(self, key: RatingKey) -> bool:
        """Delete rating by key."""
        result = await self.col.delete_one(_key_filter(key))
        return result.deleted_count == 1
