from pymongo import MongoClient, ASCENDING
from explore_api.core.config import settings
from explore_api.db.mongo import TOUR_RATINGS


def ensure_indexes(db) -> list[str]:
    """Create the tour_ratings indexes; returns their names."""
    col = db[TOUR_RATINGS]
    return [
        # one rating per (tour, customer)
        col.create_index(
            [("tour_id", ASCENDING), ("customer_id", ASCENDING)],
            unique=True, name="tour_ratings_tour_customer"
        ),
        col.create_index(
            [("tour_id", ASCENDING)],
            name="tour_ratings_tour_id"
        ),
    ]


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]

    print("Using DSN:", settings.mongo_dsn, "DB:", settings.mongo_db)
    for name in ensure_indexes(db):
        print(" -", name)
    print("Indexes ensured.")


if __name__ == "__main__":
    main()
