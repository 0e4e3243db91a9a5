from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field, model_validator

# largest skip value BSON can carry (signed int64)
MAX_OFFSET = 2 ** 63 - 1


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


# wire field name -> stored field name
SORTABLE_FIELDS = {
    "score": "score",
    "comment": "comment",
    "customerId": "customer_id",
}


class SortOrder(BaseModel):
    field: str
    direction: SortDirection = SortDirection.asc

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """Parse ``field`` or ``field,direction`` as sent in ``?sort=``."""
        name, _, direction = (part.strip() for part in raw.partition(","))
        if name not in SORTABLE_FIELDS:
            raise ValueError(f"unknown sort field: {name!r}")
        try:
            parsed = SortDirection((direction or "asc").lower())
        except ValueError:
            raise ValueError(
                f"unknown sort direction: {direction!r}") from None
        return cls(field=name, direction=parsed)


class PageRequest(BaseModel):
    """Zero-based page index, page length and sort orders."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: List[SortOrder] = Field(default_factory=list)

    @model_validator(mode="after")
    def _offset_fits_int64(self) -> "PageRequest":
        if self.offset > MAX_OFFSET:
            raise ValueError("page * size exceeds the largest offset")
        return self

    @property
    def offset(self) -> int:
        return self.page * self.size

    def mongo_sort(self) -> List[Tuple[str, int]]:
        return [
            (SORTABLE_FIELDS[order.field],
             1 if order.direction is SortDirection.asc else -1)
            for order in self.sort
        ]
