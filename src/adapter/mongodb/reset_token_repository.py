"""MongoDB implementation of ResetTokenRepository.

Documents look like ``{userId, token, createdAt}``, matching what the web
frontend already writes and reads.
"""

from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import RESET_TOKENS_COLLECTION_NAME
from domain.model.errors import RepositoryError
from domain.model.reset_token import ResetToken

logger = getLogger(__name__)


class MongoResetTokenRepository:
    def __init__(self, db: Database):
        self.collection = db[RESET_TOKENS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('token', 1)], 'idx_reset_tokens_token', unique=True)
            create_index_safe(self.collection, [('userId', 1)], 'idx_reset_tokens_user')
            return True
        except Exception as e:
            logger.error("Failed to create reset token indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> ResetToken:
        return ResetToken(
            token=doc['token'],
            user_id=doc['userId'],
            created_at=doc['createdAt'],
        )

    def create(self, reset_token: ResetToken) -> None:
        try:
            self.collection.insert_one({
                'userId': reset_token.user_id,
                'token': reset_token.token,
                'createdAt': reset_token.created_at,
            })
        except PyMongoError as e:
            logger.error("Failed to save reset token", extra={"userId": reset_token.user_id, "error": str(e)})
            raise RepositoryError("Failed to save reset token") from e
        logger.info("Reset token created", extra={"userId": reset_token.user_id})

    def consume(self, token: str) -> ResetToken | None:
        """Delete the token and return what was stored (single atomic operation)."""
        try:
            doc = self.collection.find_one_and_delete({'token': token})
        except PyMongoError as e:
            logger.error("Failed to consume reset token", extra={"error": str(e)})
            raise RepositoryError("Failed to consume reset token") from e
        return self._to_domain(doc) if doc else None

    def delete(self, token: str) -> bool:
        try:
            result = self.collection.delete_one({'token': token})
        except PyMongoError as e:
            logger.error("Failed to delete reset token", extra={"error": str(e)})
            raise RepositoryError("Failed to delete reset token") from e
        return result.deleted_count > 0

    def count_for_user(self, user_id: str) -> int:
        try:
            return self.collection.count_documents({'userId': user_id})
        except PyMongoError as e:
            logger.error("Failed to count reset tokens", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError("Failed to count reset tokens") from e
