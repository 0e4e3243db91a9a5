import os
import pytest
from httpx import AsyncClient, ASGITransport

from explore_api.core.config import settings
from explore_api.dependencies import get_tour_ratings_service
from explore_api.main import app
from explore_api.services.tour_ratings_service import TourRatingsService
from tests.fakes import InMemoryTourRatingsRepo, InMemoryToursRepo
from tests.helpers import KNOWN_TOUR, OTHER_TOUR


@pytest.fixture(scope="session", autouse=True)
def test_env():
    os.environ["SENTRY_DSN"] = ""  # no Sentry in tests
    settings.sentry_dsn = ""


@pytest.fixture
def tours_repo() -> InMemoryToursRepo:
    return InMemoryToursRepo([KNOWN_TOUR, OTHER_TOUR])


@pytest.fixture
def ratings_repo() -> InMemoryTourRatingsRepo:
    return InMemoryTourRatingsRepo()


@pytest.fixture
def service(ratings_repo, tours_repo) -> TourRatingsService:
    return TourRatingsService(ratings_repo, tours_repo)


@pytest.fixture
async def client(service):
    """HTTP client over the app with the in-memory service injected.

    The lifespan is not entered, so no Mongo connection is attempted.
    """
    app.dependency_overrides[get_tour_ratings_service] = lambda: service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport,
                               base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
