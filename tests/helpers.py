from typing import Any, Dict, Optional

from httpx import AsyncClient

KNOWN_TOUR = 1
OTHER_TOUR = 2
MISSING_TOUR = 999


def ratings_url(tour_id: int, suffix: str = "") -> str:
    return f"/tours/{tour_id}/ratings{suffix}"


def rating_body(customer_id: int,
                score: Optional[int] = None,
                comment: Optional[str] = None) -> Dict[str, Any]:
    return {"score": score, "comment": comment, "customerId": customer_id}


async def create_rating(client: AsyncClient, tour_id: int,
                        customer_id: int, score: Optional[int] = None,
                        comment: Optional[str] = None) -> None:
    r = await client.post(ratings_url(tour_id),
                          json=rating_body(customer_id, score, comment))
    assert r.status_code == 201, r.text


async def read_average(client: AsyncClient, tour_id: int):
    r = await client.get(ratings_url(tour_id, "/average"))
    assert r.status_code == 200
    return r.json()["average:"]
