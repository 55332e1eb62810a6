from fastapi import HTTPException

from adapter.external.resend_mailer import ResendMailer
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.inspection_repository import MongoInspectionRepository
from adapter.mongodb.inspection_stats_repository import MongoInspectionStatsRepository
from adapter.mongodb.reset_token_repository import MongoResetTokenRepository
from adapter.mongodb.user_repository import MongoUserRepository
from port.inspection_repository import InspectionRepository
from port.inspection_stats_repository import InspectionStatsRepository
from port.mailer import Mailer
from port.reset_token_repository import ResetTokenRepository
from port.user_repository import UserRepository


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


def get_reset_token_repo() -> ResetTokenRepository:
    return MongoResetTokenRepository(_get_db())


def get_inspection_repo() -> InspectionRepository:
    return MongoInspectionRepository(_get_db())


def get_inspection_stats_repo() -> InspectionStatsRepository:
    return MongoInspectionStatsRepository(_get_db())


def get_mailer() -> Mailer:
    return ResendMailer()
