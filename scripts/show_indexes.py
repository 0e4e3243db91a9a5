from pymongo import MongoClient
from explore_api.core.config import settings
from explore_api.db.mongo import TOURS, TOUR_RATINGS


def dump(col_name: str):
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]
    idx = list(db[col_name].list_indexes())
    print(f"\nIndexes in '{col_name}':")
    for i in idx:
        print(" -", i)


if __name__ == "__main__":
    dump(TOURS)
    dump(TOUR_RATINGS)
