"""MongoDB implementation of InspectionStatsRepository (the ``infos`` collection)."""

from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import INFO_COLLECTION_NAME
from domain.model.errors import RepositoryError
from domain.model.inspection import InspectionStats

logger = getLogger(__name__)


class MongoInspectionStatsRepository:
    def __init__(self, db: Database):
        self.collection = db[INFO_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('userId', 1)], 'idx_infos_user', unique=True)
            return True
        except Exception as e:
            logger.error("Failed to create infos indexes", extra={"error": str(e)})
            return False

    def increment(self, user_id: str, amount: int = 1) -> bool:
        """Adjust totalInspections with $inc.

        Only increments create the document; decrementing a missing counter is a no-op.
        """
        try:
            result = self.collection.update_one(
                {'userId': user_id},
                {'$inc': {'totalInspections': amount}},
                upsert=amount > 0,
            )
            return result.matched_count > 0 or result.upserted_id is not None
        except PyMongoError as e:
            logger.error("Failed to update inspection count", extra={
                "userId": user_id, "amount": amount, "error": str(e),
            })
            return False

    def get(self, user_id: str) -> InspectionStats | None:
        try:
            doc = self.collection.find_one({'userId': user_id})
        except PyMongoError as e:
            logger.error("Failed to read inspection count", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError("Failed to read inspection count") from e
        if not doc:
            return None
        return InspectionStats(user_id=doc['userId'], total_inspections=doc.get('totalInspections', 0))
