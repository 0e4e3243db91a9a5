from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

SCORE_MIN = 0
SCORE_MAX = 5
COMMENT_MAX_LENGTH = 255


class RatingKey(NamedTuple):
    """Composite identity of a rating: one customer, one tour."""

    tour_id: int
    customer_id: int


class TourRating(BaseModel):
    """Persisted rating; ``key`` never changes after creation."""

    key: RatingKey
    score: Optional[int] = None
    comment: Optional[str] = None


class RatingDto(BaseModel):
    """Wire shape of a rating; tourId always comes from the path."""

    score: Optional[int] = Field(default=None, ge=SCORE_MIN, le=SCORE_MAX)
    comment: Optional[str] = Field(default=None,
                                   max_length=COMMENT_MAX_LENGTH)
    customer_id: int = Field(alias="customerId")

    @classmethod
    def from_rating(cls, rating: TourRating) -> "RatingDto":
        return cls(
            score=rating.score,
            comment=rating.comment,
            customerId=rating.key.customer_id,
        )


class RatingAverageResponse(BaseModel):
    # the trailing colon is part of the published response key
    model_config = ConfigDict(populate_by_name=True)

    average: Optional[float] = Field(default=None, alias="average:")
