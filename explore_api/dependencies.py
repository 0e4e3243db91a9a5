from typing import List, Optional

from fastapi import Depends, HTTPException, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from explore_api.core.config import settings
from explore_api.db.mongo import get_mongo_db
from explore_api.models.paging import MAX_OFFSET, PageRequest, SortOrder
from explore_api.services.repositories.tour_ratings_repo import (
    TourRatingsRepo,
)
from explore_api.services.repositories.tours_repo import ToursRepo
from explore_api.services.tour_ratings_service import TourRatingsService


async def get_db() -> AsyncIOMotorDatabase:
    return await get_mongo_db()


async def get_tours_repo(db=Depends(get_db)) -> ToursRepo:
    return ToursRepo(db)


async def get_tour_ratings_repo(db=Depends(get_db)) -> TourRatingsRepo:
    return TourRatingsRepo(db)


async def get_tour_ratings_service(
        ratings: TourRatingsRepo = Depends(get_tour_ratings_repo),
        tours: ToursRepo = Depends(get_tours_repo),
) -> TourRatingsService:
    return TourRatingsService(ratings, tours)


def page_request(
    page: int = Query(0, ge=0, le=MAX_OFFSET // settings.max_page_size),
    size: Optional[int] = Query(None, ge=1),
    sort: Optional[List[str]] = Query(None),
) -> PageRequest:
    """Build a PageRequest from ?page=&size=&sort=field,dir query params."""
    try:
        orders = [SortOrder.parse(raw) for raw in sort or []]
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e))
    size = min(size or settings.default_page_size, settings.max_page_size)
    return PageRequest(page=page, size=size, sort=orders)
