from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path, Response

from explore_api.api.http_utils import handle_domain_errors
from explore_api.dependencies import get_tour_ratings_service, page_request
from explore_api.models.paging import PageRequest
from explore_api.models.ratings import RatingAverageResponse, RatingDto
from explore_api.services.errors import (
    TourNotFoundError, TourRatingNotFoundError,
)
from explore_api.services.tour_ratings_service import TourRatingsService

router = APIRouter(prefix="/tours/{tour_id}/ratings",
                   tags=["tour-ratings"])

ERRMAP = {
    TourNotFoundError: HTTPStatus.NOT_FOUND,
    TourRatingNotFoundError: HTTPStatus.NOT_FOUND,
}


@router.post("", status_code=HTTPStatus.CREATED)
@handle_domain_errors(ERRMAP)
async def create_tour_rating(
    body: RatingDto,
    tour_id: int = Path(..., description="Tour id"),
    svc: TourRatingsService = Depends(get_tour_ratings_service),
) -> Response:
    await svc.create(tour_id, body)
    return Response(status_code=HTTPStatus.CREATED)


@router.get("", response_model=List[RatingDto], status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def list_tour_ratings(
    tour_id: int = Path(..., description="Tour id"),
    page: PageRequest = Depends(page_request),
    svc: TourRatingsService = Depends(get_tour_ratings_service),
):
    return await svc.list_by_tour(tour_id, page)


@router.get("/average",
            response_model=RatingAverageResponse,
            status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def average_tour_rating(
    tour_id: int = Path(..., description="Tour id"),
    svc: TourRatingsService = Depends(get_tour_ratings_service),
):
    return RatingAverageResponse(average=await svc.average_score(tour_id))


@router.put("", response_model=RatingDto, status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def replace_tour_rating(
    body: RatingDto,
    tour_id: int = Path(..., description="Tour id"),
    svc: TourRatingsService = Depends(get_tour_ratings_service),
):
    return await svc.replace_full(tour_id, body)


@router.patch("", response_model=RatingDto, status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def patch_tour_rating(
    body: RatingDto,
    tour_id: int = Path(..., description="Tour id"),
    svc: TourRatingsService = Depends(get_tour_ratings_service),
):
    return await svc.update_partial(tour_id, body)


@router.delete("/{customer_id}", status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def delete_tour_rating(
    tour_id: int = Path(..., description="Tour id"),
    customer_id: int = Path(..., description="Customer id"),
    svc: TourRatingsService = Depends(get_tour_ratings_service),
) -> Response:
    await svc.delete(tour_id, customer_id)
    return Response(status_code=HTTPStatus.OK)
