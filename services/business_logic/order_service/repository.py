# services/business_logic/order_service/repository.py
# Create / read-by-id against one MongoDB collection.
# Only two failure kinds leave this module: RecordNotFound and StorageFailure.

from typing import Type

from bson import ObjectId
from bson.errors import BSONError
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from shared.database.mongo_client import MongoStore
from shared.logging.logger import get_logger
from services.business_logic.order_service.schemas import Document

logger = get_logger("order_repository")


class RecordNotFound(Exception):
    """No document with the requested _id."""
    pass


class StorageFailure(Exception):
    """
    Coercion, id parsing, encoding or driver error.
    str(exc) is the underlying message and is returned to the client as-is.
    """
    pass


class EntityRepository:

    def __init__(self, store: MongoStore, schema: Type[Document], collection: str):
        self.schema          = schema
        self.collection_name = collection
        self._store          = store

    @property
    def entity(self) -> str:
        return self.schema.__name__.lower()

    def create(self, body: dict) -> str:
        """Coerces body through the schema, inserts it, returns the new id."""
        try:
            doc    = self.schema.model_validate(body).to_document()
            result = self._store.collection(self.collection_name).insert_one(doc)
        except (ValidationError, BSONError, OverflowError, PyMongoError) as e:
            logger.error(
                f"Could not save {self.entity}",
                extra={"entity": self.entity, "error": str(e)},
            )
            raise StorageFailure(str(e)) from e

        record_id = str(result.inserted_id)
        logger.info(
            f"{self.entity} saved",
            extra={"entity": self.entity, "record_id": record_id},
        )
        return record_id

    def get_by_id(self, record_id: str) -> dict:
        """Returns the stored document with _id rendered as a string."""
        try:
            doc = self._store.collection(self.collection_name).find_one(
                {"_id": ObjectId(record_id)}
            )
        except (BSONError, PyMongoError) as e:
            logger.error(
                f"Could not load {self.entity}",
                extra={"entity": self.entity, "record_id": record_id, "error": str(e)},
            )
            raise StorageFailure(str(e)) from e

        if doc is None:
            raise RecordNotFound(record_id)

        doc["_id"] = str(doc["_id"])
        return doc
