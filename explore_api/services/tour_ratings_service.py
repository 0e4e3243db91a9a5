"""Service layer for tour ratings: CRUD, paging and average score."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError

from explore_api.models.paging import PageRequest
from explore_api.models.ratings import RatingDto, RatingKey, TourRating
from explore_api.services.errors import (
    TourNotFoundError,
    TourRatingNotFoundError,
)
from explore_api.services.repositories.tour_ratings_repo import (
    TourRatingsRepo,
)
from explore_api.services.repositories.tours_repo import ToursRepo

logger = logging.getLogger(__name__)


class TourRatingsService:
    """Ratings of one tour, keyed by (tour_id, customer_id).

    Repositories are passed in so the service can run against any store
    exposing the same coroutines.
    """

    def __init__(self, ratings: TourRatingsRepo, tours: ToursRepo) -> None:
        """Init with the rating store and the tour lookup."""
        self.ratings = ratings
        self.tours = tours

    # ---------- helpers ----------

    async def _verify_tour(self, tour_id: int) -> Dict[str, Any]:
        tour = await self.tours.find_by_id(tour_id)
        if tour is None:
            logger.warning('tour_not_found', extra={'tour_id': tour_id})
            raise TourNotFoundError()
        return tour

    async def _verify_rating(self, key: RatingKey) -> TourRating:
        rating = await self.ratings.find_by_key(key)
        if rating is None:
            logger.warning(
                'tour_rating_not_found',
                extra={'tour_id': key.tour_id,
                       'customer_id': key.customer_id},
            )
            raise TourRatingNotFoundError()
        return rating

    # ---------- CREATE ----------

    async def create(self, tour_id: int, dto: RatingDto) -> None:
        """Store a new rating; an existing one under the key is replaced."""
        try:
            await self._verify_tour(tour_id)
            await self.ratings.save(
                TourRating(
                    key=RatingKey(tour_id, dto.customer_id),
                    score=dto.score,
                    comment=dto.comment,
                ),
            )
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_tour_rating_create_error: {error}'
            ) from error
        logger.info(
            'tour_rating_created',
            extra={'tour_id': tour_id, 'customer_id': dto.customer_id},
        )

    # ---------- LIST ----------

    async def list_by_tour(
        self,
        tour_id: int,
        page: PageRequest,
    ) -> List[RatingDto]:
        """One page of the tour's ratings as DTOs."""
        try:
            await self._verify_tour(tour_id)
            ratings = await self.ratings.find_page_by_tour_id(tour_id, page)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_tour_rating_list_error: {error}'
            ) from error
        return [RatingDto.from_rating(rating) for rating in ratings]

    # ---------- AVERAGE ----------

    async def average_score(self, tour_id: int) -> Optional[float]:
        """Mean score of the tour, None when nothing is scored.

        The tour itself is not looked up. Ratings whose score was
        nulled by a PATCH are left out of the mean.
        """
        try:
            ratings = await self.ratings.find_by_tour_id(tour_id)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_tour_rating_average_error: {error}'
            ) from error
        scores = [r.score for r in ratings if r.score is not None]
        if not scores:
            return None
        return sum(scores) / len(scores)

    # ---------- UPDATE ----------

    async def replace_full(self, tour_id: int, dto: RatingDto) -> RatingDto:
        """PUT: overwrite score/comment only where the DTO has a value."""
        try:
            rating = await self._verify_rating(
                RatingKey(tour_id, dto.customer_id))
            if dto.score is not None:
                rating.score = dto.score
            if dto.comment is not None:
                rating.comment = dto.comment
            saved = await self.ratings.save(rating)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_tour_rating_update_error: {error}'
            ) from error
        logger.info(
            'tour_rating_updated',
            extra={'tour_id': tour_id, 'customer_id': dto.customer_id,
                   'mode': 'put'},
        )
        return RatingDto.from_rating(saved)

    async def update_partial(self, tour_id: int, dto: RatingDto) -> RatingDto:
        """PATCH: overwrite score and comment as sent, nulls included."""
        try:
            rating = await self._verify_rating(
                RatingKey(tour_id, dto.customer_id))
            rating.score = dto.score
            rating.comment = dto.comment
            saved = await self.ratings.save(rating)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_tour_rating_update_error: {error}'
            ) from error
        logger.info(
            'tour_rating_updated',
            extra={'tour_id': tour_id, 'customer_id': dto.customer_id,
                   'mode': 'patch'},
        )
        return RatingDto.from_rating(saved)

    # ---------- DELETE ----------

    async def delete(self, tour_id: int, customer_id: int) -> None:
        """Remove the rating; TourRatingNotFoundError if there is none."""
        key = RatingKey(tour_id, customer_id)
        try:
            await self._verify_rating(key)
            await self.ratings.delete(key)
        except PyMongoError as error:
            raise RuntimeError(
                f'mongo_tour_rating_delete_error: {error}'
            ) from error
        logger.info(
            'tour_rating_deleted',
            extra={'tour_id': tour_id, 'customer_id': customer_id},
        )
