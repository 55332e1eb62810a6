"""MongoDB implementation of InspectionRepository."""

from dataclasses import asdict
from datetime import datetime, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import INSPECTIONS_COLLECTION_NAME
from domain.model.errors import RepositoryError
from domain.model.inspection import (
    MUTABLE_FIELDS, Inspection, InspectionDetails, Observation, ReportType, clean_patch,
)

logger = getLogger(__name__)

# domain field -> document field
_FIELD_NAMES = {
    'project_name': 'projectName',
    'date': 'date',
    'report_type': 'reportType',
    'address': 'address',
    'city_county': 'cityCounty',
    'inspector_name': 'inspectorName',
    'weather': 'weather',
    'notes': 'notes',
    'observations': 'observations',
}


class MongoInspectionRepository:
    def __init__(self, db: Database):
        self.collection = db[INSPECTIONS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for inspections collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('userId', 1), ('date', -1)], 'idx_inspections_user_date')
            return True
        except Exception as e:
            logger.error("Failed to create inspections indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Inspection:
        """Convert MongoDB document to Inspection domain model."""
        details = InspectionDetails(
            project_name=doc['projectName'],
            date=doc['date'],
            report_type=ReportType(doc.get('reportType', ReportType.PROGRESS.value)),
            address=doc.get('address'),
            city_county=doc.get('cityCounty'),
            inspector_name=doc.get('inspectorName'),
            weather=doc.get('weather'),
            notes=doc.get('notes'),
            observations=[Observation(**o) for o in doc.get('observations', [])],
        )
        return Inspection(
            id=str(doc['_id']),
            user_id=doc['userId'],
            details=details,
            created_at=doc['createdAt'],
            updated_at=doc['updatedAt'],
        )

    def _to_document(self, values: dict) -> dict:
        """Map domain field values to document fields."""
        doc = {}
        for key, value in values.items():
            if isinstance(value, ReportType):
                value = value.value
            elif key == 'observations':
                value = [asdict(o) for o in value]
            doc[_FIELD_NAMES[key]] = value
        return doc

    # ── write operations ─────────────────────────────────────

    def save(self, inspection: Inspection) -> None:
        doc = self._to_document({f: getattr(inspection.details, f) for f in MUTABLE_FIELDS})
        doc.update({
            '_id': inspection.id,
            'userId': inspection.user_id,
            'createdAt': inspection.created_at,
            'updatedAt': inspection.updated_at,
        })
        try:
            self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to save inspection", extra={"inspectionId": inspection.id, "error": str(e)})
            raise RepositoryError("Failed to save inspection") from e
        logger.info("Inspection saved", extra={"inspectionId": inspection.id, "userId": inspection.user_id})

    def update_for_owner(self, inspection_id: str, user_id: str, changes: dict) -> Inspection | None:
        """Apply a partial update to an inspection the user owns."""
        update = self._to_document(clean_patch(changes))
        update['updatedAt'] = datetime.now(timezone.utc)
        try:
            doc = self.collection.find_one_and_update(
                {'_id': inspection_id, 'userId': user_id},
                {'$set': update},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Failed to update inspection", extra={"inspectionId": inspection_id, "error": str(e)})
            raise RepositoryError("Failed to update inspection") from e
        return self._to_domain(doc) if doc else None

    def delete_for_owner(self, inspection_id: str, user_id: str) -> Inspection | None:
        """Delete an inspection the user owns and return what was removed."""
        try:
            doc = self.collection.find_one_and_delete({'_id': inspection_id, 'userId': user_id})
        except PyMongoError as e:
            logger.error("Failed to delete inspection", extra={"inspectionId": inspection_id, "error": str(e)})
            raise RepositoryError("Failed to delete inspection") from e
        return self._to_domain(doc) if doc else None

    # ── read operations ──────────────────────────────────────

    def get_for_owner(self, inspection_id: str, user_id: str) -> Inspection | None:
        try:
            doc = self.collection.find_one({'_id': inspection_id, 'userId': user_id})
        except PyMongoError as e:
            logger.error("Failed to retrieve inspection", extra={"inspectionId": inspection_id, "error": str(e)})
            raise RepositoryError("Failed to retrieve inspection") from e
        return self._to_domain(doc) if doc else None

    def find_by_owner(self, user_id: str) -> list[Inspection]:
        try:
            docs = self.collection.find({'userId': user_id}).sort('date', -1)
            inspections = [self._to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to list inspections", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError("Failed to list inspections") from e
        logger.debug("Listed inspections", extra={"userId": user_id, "count": len(inspections)})
        return inspections
