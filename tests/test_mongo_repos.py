"""Repository tests against a real MongoDB (MONGO_DSN); skipped without one."""

import os

import pytest
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from explore_api.db.mongo import TOURS
from explore_api.models.paging import PageRequest, SortOrder
from explore_api.models.ratings import RatingKey, TourRating
from explore_api.services.repositories.tour_ratings_repo import (
    TourRatingsRepo,
)
from explore_api.services.repositories.tours_repo import ToursRepo

TEST_DSN = os.getenv("MONGO_DSN", "mongodb://localhost:27017")
TEST_DB = "explorecali_test"


@pytest.fixture
async def db():
    client = AsyncIOMotorClient(TEST_DSN, serverSelectionTimeoutMS=500)
    try:
        await client.admin.command("ping")
    except PyMongoError:
        client.close()
        pytest.skip("MongoDB is not reachable")
    database = client[TEST_DB]
    for name in await database.list_collection_names():
        await database[name].delete_many({})
    yield database
    client.close()


def rating(tour_id, customer_id, score=None, comment=None) -> TourRating:
    return TourRating(key=RatingKey(tour_id, customer_id),
                      score=score, comment=comment)


async def test_tours_find_by_id(db):
    await db[TOURS].insert_one({"_id": 1, "title": "Big Sur Retreat"})
    repo = ToursRepo(db)

    assert (await repo.find_by_id(1))["title"] == "Big Sur Retreat"
    assert await repo.find_by_id(2) is None


async def test_save_upserts_by_composite_key(db):
    repo = TourRatingsRepo(db)
    await repo.save(rating(1, 7, 3, "ok"))
    await repo.save(rating(1, 7, 5, None))

    assert await repo.find_by_tour_id(1) == [rating(1, 7, 5, None)]
    assert await repo.find_by_key(RatingKey(1, 7)) == rating(1, 7, 5, None)
    assert await repo.find_by_key(RatingKey(2, 7)) is None


async def test_find_page_sorts_and_slices(db):
    repo = TourRatingsRepo(db)
    for customer_id, score in ((1, 2), (2, 5), (3, 4), (4, 5)):
        await repo.save(rating(1, customer_id, score))
    await repo.save(rating(2, 9, 1))

    page = PageRequest(page=0, size=3, sort=[SortOrder.parse("score,desc")])
    got = await repo.find_page_by_tour_id(1, page)
    assert [r.key.customer_id for r in got] == [2, 4, 3]

    page = PageRequest(page=1, size=3)
    got = await repo.find_page_by_tour_id(1, page)
    assert [r.key.customer_id for r in got] == [4]


async def test_delete(db):
    repo = TourRatingsRepo(db)
    await repo.save(rating(1, 7, 3))

    assert await repo.delete(RatingKey(1, 7)) is True
    assert await repo.delete(RatingKey(1, 7)) is False
    assert await repo.find_by_tour_id(1) == []
